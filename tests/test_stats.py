import unittest
from datetime import datetime

from memtrainer.exercises import ExerciseKind
from memtrainer.profile import ScoreRecord, UserProfile
from memtrainer.stats import format_summary, history_frame, score_trend, summarize_by_kind


def _profile() -> UserProfile:
    p = UserProfile("stats")
    rows = [
        (ExerciseKind.WORD, 1, 100.0, 3, 3, 1),
        (ExerciseKind.WORD, 2, 130.0, 4, 4, 2),
        (ExerciseKind.WORD, 3, 60.0, 1, 4, 3),
        (ExerciseKind.NUMBER, 4, 90.0, 5, 7, 4),
    ]
    for kind, level, score, correct, total, day in rows:
        p.scores.append(
            ScoreRecord(
                kind=kind,
                level=level,
                raw_score=score,
                time_spent_ms=1000,
                correct_answers=correct,
                total_questions=total,
                completed_at=datetime(2026, 6, day, 12),
            )
        )
    return p


class StatsTests(unittest.TestCase):
    def test_history_frame(self) -> None:
        df = history_frame(_profile())
        self.assertEqual(len(df), 4)
        self.assertEqual(list(df["kind"]), ["word", "word", "word", "number"])
        self.assertAlmostEqual(df.loc[2, "accuracy"], 25.0)

    def test_empty_history(self) -> None:
        df = history_frame(UserProfile("nobody"))
        self.assertTrue(df.empty)
        summary = summarize_by_kind(df)
        self.assertTrue(summary.empty)
        self.assertEqual(format_summary(summary), "No sessions completed yet.")

    def test_summarize_by_kind(self) -> None:
        summary = summarize_by_kind(history_frame(_profile()))
        self.assertEqual(list(summary.index), ["number", "word"])
        word = summary.loc["word"]
        self.assertEqual(int(word["sessions"]), 3)
        self.assertAlmostEqual(word["avg_score"], 290.0 / 3)
        self.assertAlmostEqual(word["best_score"], 130.0)
        self.assertEqual(int(word["best_level"]), 2)
        self.assertAlmostEqual(word["mean_accuracy"], 75.0)
        self.assertEqual(int(summary.loc["number", "best_level"]), 4)

    def test_score_trend(self) -> None:
        trend = score_trend(history_frame(_profile()), "word", span=2)
        self.assertEqual(list(trend["level"]), [1, 2, 3])
        self.assertAlmostEqual(trend.loc[0, "raw_score_smooth"], 100.0)
        smooth = list(trend["raw_score_smooth"])
        self.assertTrue(smooth[0] < smooth[1])
        self.assertTrue(smooth[2] < smooth[1])

    def test_score_trend_rejects_bad_span(self) -> None:
        with self.assertRaises(ValueError):
            score_trend(history_frame(_profile()), "word", span=0)

    def test_format_summary(self) -> None:
        text = format_summary(summarize_by_kind(history_frame(_profile())))
        lines = text.splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("Number Memory: 1 sessions"))
        self.assertIn("Word Memory: 3 sessions, avg 96.7, best 130.0 (level 2)", lines[1])


if __name__ == "__main__":
    unittest.main()
