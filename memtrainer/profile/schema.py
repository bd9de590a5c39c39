from __future__ import annotations

"""Profile data model: score records, preferences and the user profile.

Serialised shape (camelCase, ISO-8601 timestamps):
{
  "username": str, "createdAt": iso, "lastLoginAt": iso,
  "totalExercisesCompleted": int, "currentStreak": int, "longestStreak": int,
  "preferences": {...}, "levelBaselines": {"word": 3, ...},
  "scores": [ {exerciseType, score, level, timeSpentMs, correctAnswers, totalQuestions, accuracy, completedAt}, ... ]
}
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..exercises.kinds import MAX_LEVEL, MIN_LEVEL, ExerciseKind, clamp_level


def _parse_ts(value: Any, default: Optional[datetime] = None) -> datetime:
    if isinstance(value, datetime):
        return value
    if value:
        return datetime.fromisoformat(str(value))
    return default if default is not None else datetime.now()


@dataclass
class ScoreRecord:
    kind: ExerciseKind
    level: int
    raw_score: float
    time_spent_ms: int
    correct_answers: int
    total_questions: int
    completed_at: datetime = field(default_factory=datetime.now)

    @property
    def accuracy(self) -> float:
        """Percentage of correctly recalled positions, always derived."""
        if self.total_questions <= 0:
            return 0.0
        return self.correct_answers / self.total_questions * 100

    @property
    def avg_response_ms(self) -> float:
        if self.total_questions <= 0:
            return float(self.time_spent_ms)
        return self.time_spent_ms / self.total_questions

    def to_json(self) -> Dict[str, Any]:
        return {
            "exerciseType": self.kind.value,
            "score": self.raw_score,
            "level": self.level,
            "timeSpentMs": self.time_spent_ms,
            "correctAnswers": self.correct_answers,
            "totalQuestions": self.total_questions,
            "accuracy": self.accuracy,
            "completedAt": self.completed_at.isoformat(),
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ScoreRecord":
        return cls(
            kind=ExerciseKind.coerce(data["exerciseType"]),
            level=int(data.get("level", MIN_LEVEL)),
            raw_score=float(data.get("score", 0.0)),
            time_spent_ms=int(data.get("timeSpentMs", 0)),
            correct_answers=int(data.get("correctAnswers", 0)),
            total_questions=int(data.get("totalQuestions", 0)),
            completed_at=_parse_ts(data.get("completedAt")),
        )


@dataclass
class Preferences:
    sound_enabled: bool = True
    animations_enabled: bool = True
    default_difficulty: int = 1
    adaptive_difficulty_enabled: bool = True
    theme: str = "light"
    reminders_enabled: bool = False
    reminder_frequency_days: int = 1

    def __post_init__(self) -> None:
        self.default_difficulty = clamp_level(self.default_difficulty)
        self.reminder_frequency_days = max(1, int(self.reminder_frequency_days))

    def to_json(self) -> Dict[str, Any]:
        return {
            "soundEnabled": self.sound_enabled,
            "animationsEnabled": self.animations_enabled,
            "defaultDifficulty": self.default_difficulty,
            "adaptiveDifficultyEnabled": self.adaptive_difficulty_enabled,
            "theme": self.theme,
            "remindersEnabled": self.reminders_enabled,
            "reminderFrequencyDays": self.reminder_frequency_days,
        }

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> "Preferences":
        data = data or {}
        return cls(
            sound_enabled=bool(data.get("soundEnabled", True)),
            animations_enabled=bool(data.get("animationsEnabled", True)),
            default_difficulty=int(data.get("defaultDifficulty", 1)),
            adaptive_difficulty_enabled=bool(data.get("adaptiveDifficultyEnabled", True)),
            theme=str(data.get("theme", "light")),
            reminders_enabled=bool(data.get("remindersEnabled", False)),
            reminder_frequency_days=int(data.get("reminderFrequencyDays", 1)),
        )


@dataclass
class UserProfile:
    username: str
    created_at: datetime = field(default_factory=datetime.now)
    last_login_at: datetime = field(default_factory=datetime.now)
    total_exercises_completed: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    scores: List[ScoreRecord] = field(default_factory=list)
    preferences: Preferences = field(default_factory=Preferences)
    level_baselines: Dict[ExerciseKind, int] = field(default_factory=dict)

    def scores_for(self, kind: ExerciseKind) -> List[ScoreRecord]:
        return [s for s in self.scores if s.kind is kind]

    def best_score(self, kind: ExerciseKind) -> Optional[ScoreRecord]:
        best: Optional[ScoreRecord] = None
        for s in self.scores_for(kind):
            if best is None or s.raw_score > best.raw_score:
                best = s
        return best

    def average_score(self, kind: ExerciseKind) -> float:
        mine = self.scores_for(kind)
        if not mine:
            return 0.0
        return sum(s.raw_score for s in mine) / len(mine)

    def last_practiced_at(self) -> Optional[datetime]:
        return self.scores[-1].completed_at if self.scores else None

    def to_json(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "createdAt": self.created_at.isoformat(),
            "lastLoginAt": self.last_login_at.isoformat(),
            "totalExercisesCompleted": self.total_exercises_completed,
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "preferences": self.preferences.to_json(),
            "levelBaselines": {k.value: v for k, v in self.level_baselines.items()},
            "scores": [s.to_json() for s in self.scores],
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "UserProfile":
        now = datetime.now()
        baselines: Dict[ExerciseKind, int] = {}
        for k, v in (data.get("levelBaselines") or {}).items():
            try:
                baselines[ExerciseKind.coerce(k)] = max(MIN_LEVEL, min(MAX_LEVEL, int(v)))
            except ValueError:
                continue
        return cls(
            username=str(data["username"]),
            created_at=_parse_ts(data.get("createdAt"), now),
            last_login_at=_parse_ts(data.get("lastLoginAt"), now),
            total_exercises_completed=int(data.get("totalExercisesCompleted", 0)),
            current_streak=int(data.get("currentStreak", 0)),
            longest_streak=int(data.get("longestStreak", 0)),
            scores=[ScoreRecord.from_json(s) for s in data.get("scores", []) or []],
            preferences=Preferences.from_json(data.get("preferences")),
            level_baselines=baselines,
        )


def default_profile(username: str = "Default User") -> UserProfile:
    return UserProfile(username=username)
