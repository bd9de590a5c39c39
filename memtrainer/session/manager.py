from __future__ import annotations

"""Session Manager: the host-facing command surface.

Owns the loaded profile, keeps at most one live ExerciseSession, remembers
the adaptive level of each kind for the current run of attempts and, when
configured, mirrors finished records into the parquet score history.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from loguru import logger

from ..config.config import DEFAULT_INSTRUCTION_DELAY_MS, DEFAULT_INTER_ITEM_GAP_MS
from ..errors import StateError
from ..exercises.kinds import ExerciseKind
from ..exercises.tokens import Token
from ..profile.schema import ScoreRecord, UserProfile
from ..profile.store import ProfileStore, persist
from ..util import explain
from .events import EventBus
from .scheduler import ManualScheduler, Scheduler
from .session import ExerciseSession, Phase, SessionState


class SessionManager:
    def __init__(
        self,
        profile: UserProfile,
        *,
        store: Optional[ProfileStore] = None,
        scheduler: Optional[Scheduler] = None,
        bus: Optional[EventBus] = None,
        cfg: Optional[Dict[str, Any]] = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.profile = profile
        self.store = store
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.bus = bus or EventBus()
        self.cfg = cfg or {}
        self._now = now
        self._active: Optional[ExerciseSession] = None
        self._run_levels: Dict[ExerciseKind, int] = {}
        if self.cfg.get("explain"):
            explain.enable(True)

    @property
    def active(self) -> Optional[ExerciseSession]:
        return self._active

    @property
    def state(self) -> SessionState:
        if self._active is None:
            return SessionState(Phase.IDLE)
        return self._active.state

    def run_level(self, kind: ExerciseKind | str) -> Optional[int]:
        return self._run_levels.get(ExerciseKind.coerce(kind))

    def start(self, kind: ExerciseKind | str, seed: Optional[int] = None) -> ExerciseSession:
        if self._active is not None and not self._active.is_terminal:
            raise StateError("start a new session", self._active.state)
        session_cfg = self.cfg.get("session", {})
        try:
            run_level = self.run_level(kind)
        except ValueError:
            run_level = None
        session = ExerciseSession(
            self.profile,
            scheduler=self.scheduler,
            bus=self.bus,
            store=self.store,
            seed=seed,
            run_level=run_level,
            instruction_delay_ms=int(session_cfg.get("instruction_delay_ms", DEFAULT_INSTRUCTION_DELAY_MS)),
            gap_ms=int(session_cfg.get("inter_item_gap_ms", DEFAULT_INTER_ITEM_GAP_MS)),
            now=self._now,
            on_scored=self._on_scored,
        )
        session.start(kind)
        self._active = session
        return session

    def submit_answer(self, value: Any) -> Token:
        return self._require_active("submit an answer").submit_answer(value)

    def complete_input(self) -> ScoreRecord:
        return self._require_active("complete input").complete_input()

    def cancel(self) -> None:
        if self._active is not None:
            self._active.cancel()

    def shutdown(self) -> bool:
        """Cancel any live session and save the profile."""
        self.cancel()
        return persist(self.store, self.profile)

    def _on_scored(self, session: ExerciseSession, record: ScoreRecord) -> None:
        # runs before session_complete goes out, so handlers may start the next attempt
        if session.next_level is not None and session.kind is not None:
            self._run_levels[session.kind] = session.next_level
        self._append_history(record)

    def _require_active(self, command: str) -> ExerciseSession:
        if self._active is None:
            raise StateError(command, SessionState(Phase.IDLE))
        return self._active

    def _append_history(self, record: ScoreRecord) -> None:
        history = self.cfg.get("history", {})
        if not history.get("enabled", False):
            return
        # Imported lazily so hosts without the history store never load pandas
        from ..storage import append_scores, init_store, validate_records

        data_dir = Path(str(history.get("data_dir", "~/.memtrainer/data"))).expanduser()
        try:
            init_store(data_dir)
            append_scores(validate_records([record], username=self.profile.username), data_dir)
        except Exception as exc:
            logger.warning(f"Could not append score history: {exc}")
