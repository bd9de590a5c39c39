import unittest
from datetime import datetime

from memtrainer.exercises import ExerciseKind, Position, display_plan
from memtrainer.session import count_correct, score

WHEN = datetime(2026, 3, 1, 12, 0, 0)


class ScoringTests(unittest.TestCase):
    def test_perfect_word_attempt(self) -> None:
        seq = ("Apple", "House", "Ocean", "River")
        rec = score(seq, ("apple", " HOUSE", "Ocean", "river "), 1000, 1, ExerciseKind.WORD, WHEN)
        self.assertEqual(rec.correct_answers, 4)
        self.assertEqual(rec.total_questions, 4)
        self.assertEqual(rec.accuracy, 100.0)
        expected_ms = display_plan(ExerciseKind.WORD, 1, 4).total_ms * 2
        self.assertAlmostEqual(rec.raw_score, 110 + (expected_ms - 1000) / expected_ms * 20)
        self.assertGreaterEqual(rec.raw_score, 110)

    def test_missing_and_wrong_answers(self) -> None:
        seq = (3, 8, 1, 9)
        rec = score(seq, ("3", "7"), 0, 2, ExerciseKind.NUMBER, WHEN)
        self.assertEqual(rec.correct_answers, 1)
        self.assertEqual(rec.accuracy, 25.0)
        # full time bonus when answered instantly
        self.assertAlmostEqual(rec.raw_score, 25 + 20 + 20)

    def test_numbers_compare_as_text(self) -> None:
        self.assertEqual(count_correct(ExerciseKind.NUMBER, (7, 42), (" 7 ", "42")), 2)
        self.assertEqual(count_correct(ExerciseKind.NUMBER, (7, 0), ("007", "-0")), 0)

    def test_no_time_bonus_when_slow(self) -> None:
        rec = score(("Red",), ("Blue",), 10_000_000, 1, ExerciseKind.COLOR, WHEN)
        self.assertEqual(rec.raw_score, 10.0)

    def test_spatial_structural_equality(self) -> None:
        seq = (Position(0, 1), Position(2, 2))
        self.assertEqual(count_correct(ExerciseKind.SPATIAL, seq, (Position(0, 1), Position(2, 1))), 1)
        self.assertEqual(count_correct(ExerciseKind.SPATIAL, seq, ((0, 1), (2, 2))), 2)

    def test_score_capped_and_in_range(self) -> None:
        for level in range(1, 11):
            for spent in (0, 500, 5000, 10**7):
                seq = tuple(range(10))
                for answers in ((), tuple(str(i) for i in range(10))):
                    rec = score(seq, answers, spent, level, ExerciseKind.NUMBER, WHEN)
                    self.assertTrue(0 <= rec.raw_score <= 200)

    def test_pure(self) -> None:
        args = (("Apple", "House"), ("Apple", "Mouse"), 1234, 3, ExerciseKind.WORD, WHEN)
        self.assertEqual(score(*args), score(*args))

    def test_negative_time_rejected(self) -> None:
        with self.assertRaises(ValueError):
            score(("Red",), ("Red",), -1, 1, ExerciseKind.COLOR, WHEN)

    def test_accuracy_tracks_counts(self) -> None:
        rec = score(("a", "b"), ("a", "x"), 0, 1, ExerciseKind.WORD, WHEN)
        self.assertEqual(rec.accuracy, 50.0)
        rec.correct_answers = 2
        self.assertEqual(rec.accuracy, 100.0)


if __name__ == "__main__":
    unittest.main()
