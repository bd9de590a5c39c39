from __future__ import annotations

"""Daily practice streaks."""

from datetime import datetime
from typing import Optional

from .schema import ScoreRecord, UserProfile


def next_streak(current: int, last_practice: Optional[datetime], now: datetime) -> int:
    """Streak after practising at now, given the previous practice time.

    Same calendar day keeps the streak, the following day extends it, any
    longer gap (or no history) starts over at 1.
    """
    if last_practice is None:
        return 1
    days = (now.date() - last_practice.date()).days
    if days <= 0:
        return max(current, 1)
    if days == 1:
        return current + 1
    return 1


def record_completion(profile: UserProfile, record: ScoreRecord) -> None:
    """Append a finished session and bump counters; history is never rewritten."""
    previous = profile.last_practiced_at()
    profile.scores.append(record)
    profile.total_exercises_completed += 1
    profile.current_streak = next_streak(profile.current_streak, previous, record.completed_at)
    profile.longest_streak = max(profile.longest_streak, profile.current_streak)
