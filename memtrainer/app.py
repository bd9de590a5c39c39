from __future__ import annotations

"""Host bootstrap: config → profile store → profile → SessionManager."""

from typing import Optional

from .config.config import load_config, validate_config
from .profile.store import JsonProfileStore, load_or_create
from .session.manager import SessionManager
from .session.scheduler import Scheduler


def build_manager(config_path: Optional[str] = None, *, scheduler: Optional[Scheduler] = None) -> SessionManager:
    """Wire up a ready-to-use manager from a YAML config (or the defaults).

    The profile is loaded (or created and saved) once here; call
    SessionManager.shutdown() when the host exits.
    """
    cfg = validate_config(load_config(config_path))
    store = JsonProfileStore(cfg["profile"]["path"])
    profile = load_or_create(store, cfg["profile"]["default_username"])
    return SessionManager(profile, store=store, scheduler=scheduler, cfg=cfg)
