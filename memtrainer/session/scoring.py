from __future__ import annotations

"""Scoring engine: (sequence, answers, timing, level) -> ScoreRecord."""

from datetime import datetime
from typing import Optional, Sequence

from ..exercises.kinds import ExerciseKind
from ..exercises.timing import display_plan
from ..exercises.tokens import Token, tokens_match
from ..profile.schema import ScoreRecord

MAX_SCORE = 200.0
TIME_BONUS_MAX = 20.0


def count_correct(kind: ExerciseKind, sequence: Sequence[Token], answers: Sequence[Token]) -> int:
    return sum(1 for expected, given in zip(sequence, answers) if tokens_match(kind, expected, given))


def time_bonus(kind: ExerciseKind, level: int, total: int, time_spent_ms: int) -> float:
    expected_ms = display_plan(kind, level, total).total_ms * 2
    if expected_ms <= 0:
        return 0.0
    return max(0.0, (expected_ms - time_spent_ms) / expected_ms * TIME_BONUS_MAX)


def raw_score(accuracy: float, level: int, bonus: float) -> float:
    return max(0.0, min(MAX_SCORE, accuracy * 100 + level * 10 + bonus))


def score(
    sequence: Sequence[Token],
    answers: Sequence[Token],
    time_spent_ms: int,
    level: int,
    kind: ExerciseKind | str,
    completed_at: Optional[datetime] = None,
) -> ScoreRecord:
    """Build the score record for a finished attempt.

    Pure apart from the completion timestamp, which defaults to now.
    Positions without an answer count as wrong.
    """
    kind = ExerciseKind.coerce(kind)
    if time_spent_ms < 0:
        raise ValueError(f"time_spent_ms must be >= 0, got {time_spent_ms}")
    total = len(sequence)
    correct = count_correct(kind, sequence, answers)
    accuracy = correct / total if total else 0.0
    bonus = time_bonus(kind, level, total, time_spent_ms) if total else 0.0
    return ScoreRecord(
        kind=kind,
        level=int(level),
        raw_score=raw_score(accuracy, level, bonus),
        time_spent_ms=int(time_spent_ms),
        correct_answers=correct,
        total_questions=total,
        completed_at=completed_at if completed_at is not None else datetime.now(),
    )
