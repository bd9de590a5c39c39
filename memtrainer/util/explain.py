from __future__ import annotations

"""Session milestone tracing.

Off by default; switched on by `explain: true` in the config or enable().
Sessions call trace() when they start, present an item, accept an answer,
score or are cancelled. Each call becomes one debug log line of the form
`[EXPLAIN] session_scored :: {"kind":"word","score":118.5,...}` so a run can
be replayed from the log alone.
"""

import json
from typing import Any, Dict

from loguru import logger

MILESTONES = (
    "session_started",
    "item_presented",
    "answer_submitted",
    "session_scored",
    "session_cancelled",
)

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    # tokens and enums go through str(); payloads stay on one line
    data = json.dumps(payload or {}, separators=(",", ":"), default=str, sort_keys=True)
    logger.debug(f"[EXPLAIN] {event} :: {data}")
