from __future__ import annotations

"""Profile persistence: the load/save contract plus a JSON file store.

Stores raise PersistenceError; the helpers at the bottom are where those
errors get caught and logged so a failed write never disturbs a session.
"""

import json
import os
from copy import deepcopy
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol

from loguru import logger

from ..errors import PersistenceError
from .schema import UserProfile, default_profile


class ProfileStore(Protocol):
    def load(self) -> Optional[UserProfile]: ...

    def save(self, profile: UserProfile) -> None: ...


class JsonProfileStore:
    """Single-user profile kept in one JSON document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> Optional[UserProfile]:
        if not self.path.exists():
            return None
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Could not read profile {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PersistenceError(f"Profile {self.path} is not a JSON object")
        try:
            return UserProfile.from_json(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Profile {self.path} is malformed: {exc}") from exc

    def save(self, profile: UserProfile) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(profile.to_json(), f, indent=2)
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Could not write profile {self.path}: {exc}") from exc


class InMemoryProfileStore:
    """Keeps the serialised document in memory; handy for hosts without disk."""

    def __init__(self, data: Optional[Dict[str, Any]] = None) -> None:
        self.data = deepcopy(data) if data is not None else None
        self.saves = 0

    def load(self) -> Optional[UserProfile]:
        if self.data is None:
            return None
        try:
            return UserProfile.from_json(deepcopy(self.data))
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Stored profile is malformed: {exc}") from exc

    def save(self, profile: UserProfile) -> None:
        self.data = profile.to_json()
        self.saves += 1


def persist(store: Optional[ProfileStore], profile: UserProfile) -> bool:
    """Save and report success; failures are logged, never raised."""
    if store is None:
        return False
    try:
        store.save(profile)
    except PersistenceError as exc:
        logger.error(f"Error saving user data: {exc}")
        return False
    return True


def load_or_create(
    store: ProfileStore,
    username: str = "Default User",
    *,
    now: Callable[[], datetime] = datetime.now,
) -> UserProfile:
    """Load the stored profile, or build and save a default one.

    A load failure is logged and treated like an absent profile.
    """
    try:
        profile = store.load()
    except PersistenceError as exc:
        logger.error(f"Error loading user data: {exc}")
        profile = None
    if profile is None:
        profile = default_profile(username)
        stamp = now()
        profile.created_at = stamp
        profile.last_login_at = stamp
        persist(store, profile)
        return profile
    profile.last_login_at = now()
    return profile
