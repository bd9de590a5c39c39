"""memtrainer: timed memory-recall drills with adaptive difficulty.

The engine is an in-process library. A host loads a profile, builds a
SessionManager around it and forwards user commands; the session reports
back through an EventBus.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import MemTrainerError, PersistenceError, StateError, ValidationError
from .exercises import ExerciseKind, Position, display_plan, generate
from .profile import JsonProfileStore, Preferences, ScoreRecord, UserProfile, load_or_create
from .session import EventBus, ExerciseSession, ManualScheduler, Phase, RealtimeScheduler, SessionManager, score

__all__ = [
    "__version__",
    "MemTrainerError",
    "PersistenceError",
    "StateError",
    "ValidationError",
    "ExerciseKind",
    "Position",
    "display_plan",
    "generate",
    "JsonProfileStore",
    "Preferences",
    "ScoreRecord",
    "UserProfile",
    "load_or_create",
    "EventBus",
    "ExerciseSession",
    "ManualScheduler",
    "Phase",
    "RealtimeScheduler",
    "SessionManager",
    "score",
]
