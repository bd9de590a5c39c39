import unittest

from memtrainer.errors import StateError, ValidationError
from memtrainer.exercises import ExerciseKind, Position
from memtrainer.session import InputCollector


class InputCollectorTests(unittest.TestCase):
    def test_appends_trimmed_text(self) -> None:
        c = InputCollector(ExerciseKind.WORD, ("Apple", "House"))
        self.assertEqual(c.submit("  apple "), "apple")
        self.assertEqual(c.next_index, 1)
        self.assertFalse(c.is_complete())
        c.submit("HOUSE")
        self.assertTrue(c.is_complete())
        self.assertEqual(c.answers, ("apple", "HOUSE"))
        self.assertEqual(c.remaining, 0)

    def test_rejects_empty_without_change(self) -> None:
        c = InputCollector(ExerciseKind.COLOR, ("Red",))
        for bad in ("", "   ", None):
            with self.assertRaises(ValidationError):
                c.submit(bad)
        self.assertEqual(c.answers, ())

    def test_rejects_once_full(self) -> None:
        c = InputCollector(ExerciseKind.WORD, ("Apple",))
        c.submit("Apple")
        with self.assertRaises(StateError):
            c.submit("House")
        self.assertEqual(len(c.answers), 1)

    def test_numbers_keep_their_text(self) -> None:
        c = InputCollector(ExerciseKind.NUMBER, (7, 42, 0))
        self.assertEqual(c.submit(" 007 "), "007")
        self.assertEqual(c.submit(42), "42")
        with self.assertRaises(ValidationError):
            c.submit("forty")
        self.assertEqual(c.next_index, 2)

    def test_positions_in_every_form(self) -> None:
        c = InputCollector(ExerciseKind.SPATIAL, (Position(0, 0),) * 3, grid_size=3)
        self.assertEqual(c.submit("1,2"), Position(1, 2))
        self.assertEqual(c.submit((2, 0)), Position(2, 0))
        self.assertEqual(c.submit(Position(0, 1)), Position(0, 1))

    def test_positions_outside_grid_or_malformed(self) -> None:
        c = InputCollector(ExerciseKind.SPATIAL, (Position(0, 0),), grid_size=3)
        for bad in ("3,0", (0, -1), "a,b", "1", (1, 2, 3), True):
            with self.assertRaises(ValidationError):
                c.submit(bad)
        self.assertFalse(c.is_complete())


if __name__ == "__main__":
    unittest.main()
