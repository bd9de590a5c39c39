from __future__ import annotations

"""Tiny pub/sub event bus for engine-to-host notifications."""

from typing import Any, Callable, Dict, List

from loguru import logger

INSTRUCTIONS_READY = "instructions_ready"
ITEM_PRESENTED = "item_presented"
PROGRESS = "progress"
INPUT_REQUESTED = "input_requested"
SESSION_COMPLETE = "session_complete"
SESSION_CANCELLED = "session_cancelled"

ALL_EVENTS = (
    INSTRUCTIONS_READY,
    ITEM_PRESENTED,
    PROGRESS,
    INPUT_REQUESTED,
    SESSION_COMPLETE,
    SESSION_CANCELLED,
)


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        if event not in ALL_EVENTS:
            raise KeyError(f"Unknown event: {event}")
        self._subs.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        handlers = self._subs.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, payload: Any) -> None:
        for handler in list(self._subs.get(event, [])):
            try:
                handler(payload)
            except Exception:
                # keep the session going even if a host handler fails
                logger.exception(f"Handler for {event!r} failed")
