from .collector import InputCollector
from .difficulty import next_level, next_level_for, resolve_level
from .events import EventBus
from .manager import SessionManager
from .scheduler import Handle, ManualScheduler, RealtimeScheduler, Scheduler
from .scoring import count_correct, score
from .session import ExerciseSession, Phase, SessionState

__all__ = [
    "InputCollector",
    "next_level",
    "next_level_for",
    "resolve_level",
    "EventBus",
    "SessionManager",
    "Handle",
    "ManualScheduler",
    "RealtimeScheduler",
    "Scheduler",
    "count_correct",
    "score",
    "ExerciseSession",
    "Phase",
    "SessionState",
]
