from __future__ import annotations

"""Score history statistics built on pandas.

Works on the profile's in-memory history or on a frame loaded from the
parquet store; both share the same column names.
"""

import pandas as pd

from ..exercises.catalog import get_exercise
from ..exercises.kinds import ExerciseKind
from ..profile.schema import UserProfile

COLUMNS = ["kind", "level", "raw_score", "time_spent_ms", "correct", "total", "accuracy", "completed_at"]


def history_frame(profile: UserProfile) -> pd.DataFrame:
    """One row per completed session, oldest first."""
    rows = [
        {
            "kind": s.kind.value,
            "level": s.level,
            "raw_score": s.raw_score,
            "time_spent_ms": s.time_spent_ms,
            "correct": s.correct_answers,
            "total": s.total_questions,
            "accuracy": s.accuracy,
            "completed_at": pd.Timestamp(s.completed_at),
        }
        for s in profile.scores
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def summarize_by_kind(df: pd.DataFrame) -> pd.DataFrame:
    """Per-kind sessions, average/best score, best level and mean accuracy.

    Best level is the level of the highest-scoring session, matching how the
    next session's level is seeded.
    """
    out_cols = ["sessions", "avg_score", "best_score", "best_level", "mean_accuracy"]
    if df.empty:
        return pd.DataFrame(columns=out_cols).rename_axis("kind")
    g = df.assign(kind=df["kind"].astype("string")).groupby("kind", sort=True)
    best_idx = g["raw_score"].idxmax()
    out = pd.DataFrame(
        {
            "sessions": g.size(),
            "avg_score": g["raw_score"].mean().astype("float64"),
            "best_score": g["raw_score"].max().astype("float64"),
            "best_level": df.loc[best_idx.values, "level"].astype(int).values,
            "mean_accuracy": g["accuracy"].mean().astype("float64"),
        }
    )
    return out[out_cols]


def score_trend(df: pd.DataFrame, kind: ExerciseKind | str, span: int = 5) -> pd.DataFrame:
    """Raw scores for one kind in completion order with an EWMA column."""
    if span < 1:
        raise ValueError("span must be >= 1")
    kind_value = ExerciseKind.coerce(kind).value
    dff = df[df["kind"].astype("string") == kind_value].sort_values("completed_at", kind="stable").copy()
    dff["raw_score_smooth"] = dff["raw_score"].astype("float64").ewm(span=span).mean()
    return dff.reset_index(drop=True)


def format_summary(summary: pd.DataFrame) -> str:
    """Return a plain-text summary, one line per kind."""
    if summary.empty:
        return "No sessions completed yet."
    lines = []
    for kind, row in summary.iterrows():
        name = get_exercise(str(kind)).name
        lines.append(
            f"{name}: {int(row['sessions'])} sessions, avg {row['avg_score']:.1f}, "
            f"best {row['best_score']:.1f} (level {int(row['best_level'])}), "
            f"accuracy {row['mean_accuracy']:.1f}%"
        )
    return "\n".join(lines)
