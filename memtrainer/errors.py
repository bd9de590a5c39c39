from __future__ import annotations

"""Error taxonomy for the exercise engine.

Nothing here is fatal to the host: validation and state errors are raised
synchronously to the caller and leave the session untouched, persistence
errors are caught and logged at the profile boundary.
"""


class MemTrainerError(Exception):
    """Base class for all engine errors."""


class ValidationError(MemTrainerError):
    """A submitted value is empty or malformed for the exercise kind."""


class StateError(MemTrainerError):
    """A command was issued outside the state where it is legal."""

    def __init__(self, command: str, state: object) -> None:
        self.command = command
        self.state = state
        super().__init__(f"Cannot {command} while session is {state}")


class PersistenceError(MemTrainerError):
    """Profile load or save failed."""
