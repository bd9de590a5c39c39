from __future__ import annotations

"""Adaptive difficulty: per-attempt tuning and the level for a new session."""

from typing import Optional

from ..exercises.kinds import MAX_LEVEL, MIN_LEVEL, clamp_level
from ..profile.schema import Preferences, ScoreRecord

PROMOTE_ACCURACY = 0.9
PROMOTE_MAX_RESPONSE_MS = 3000
DEMOTE_ACCURACY = 0.6


def next_level(current_level: int, accuracy: float, avg_response_ms: float) -> int:
    """Level for the next attempt in a run.

    accuracy is a fraction in [0, 1].
    """
    current_level = clamp_level(current_level)
    if accuracy >= PROMOTE_ACCURACY and avg_response_ms < PROMOTE_MAX_RESPONSE_MS:
        return min(current_level + 1, MAX_LEVEL)
    if accuracy < DEMOTE_ACCURACY:
        return max(current_level - 1, MIN_LEVEL)
    return current_level


def next_level_for(record: ScoreRecord) -> int:
    return next_level(record.level, record.accuracy / 100.0, record.avg_response_ms)


def resolve_level(
    preferences: Preferences,
    best: Optional[ScoreRecord] = None,
    run_level: Optional[int] = None,
) -> int:
    """Pick the level a new session starts at.

    With adaptive mode off this is always the default difficulty. With it on,
    an ongoing run keeps the controller's level; a fresh run restarts one
    above the best recorded attempt.
    """
    if not preferences.adaptive_difficulty_enabled:
        return clamp_level(preferences.default_difficulty)
    if run_level is not None:
        return clamp_level(run_level)
    if best is not None:
        return min(best.level + 1, MAX_LEVEL)
    return clamp_level(preferences.default_difficulty)
