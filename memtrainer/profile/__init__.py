from .schema import Preferences, ScoreRecord, UserProfile, default_profile
from .store import InMemoryProfileStore, JsonProfileStore, ProfileStore, load_or_create, persist
from .streaks import next_streak, record_completion

__all__ = [
    "Preferences",
    "ScoreRecord",
    "UserProfile",
    "default_profile",
    "ProfileStore",
    "JsonProfileStore",
    "InMemoryProfileStore",
    "persist",
    "load_or_create",
    "next_streak",
    "record_completion",
]
