from __future__ import annotations

"""Exercise session state machine.

One ExerciseSession is one attempt: instructions, timed presentation of the
sequence, answer collection, scoring and the profile update. Timed steps run
through a Scheduler; host commands arrive one at a time via start(),
submit_answer(), complete_input() and cancel().
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from ..errors import StateError, ValidationError
from ..exercises.catalog import instructions_for
from ..exercises.generator import generate
from ..exercises.kinds import ExerciseKind, grid_size
from ..exercises.timing import INTER_ITEM_GAP_MS, DisplayPlan, display_plan
from ..exercises.tokens import Token
from ..profile.schema import ScoreRecord, UserProfile
from ..profile.store import ProfileStore, persist
from ..profile.streaks import record_completion
from ..util.explain import trace as xtrace
from ..util.randomness import make_rng, session_seed
from . import events
from .collector import InputCollector
from .difficulty import next_level_for, resolve_level
from .events import EventBus
from .scheduler import Handle, Scheduler
from .scoring import score

INSTRUCTION_DELAY_MS = 2000


class Phase(str, Enum):
    IDLE = "idle"
    INSTRUCTED = "instructed"
    PRESENTING = "presenting"
    COLLECTING = "collecting"
    SCORED = "scored"
    CLOSED = "closed"
    CANCELLED = "cancelled"


TERMINAL_PHASES = (Phase.CLOSED, Phase.CANCELLED)


@dataclass(frozen=True)
class SessionState:
    phase: Phase
    index: int = 0

    def __str__(self) -> str:
        if self.phase in (Phase.PRESENTING, Phase.COLLECTING):
            return f"{self.phase.value}({self.index})"
        return self.phase.value


class ExerciseSession:
    def __init__(
        self,
        profile: UserProfile,
        *,
        scheduler: Scheduler,
        bus: Optional[EventBus] = None,
        store: Optional[ProfileStore] = None,
        seed: Optional[int] = None,
        run_level: Optional[int] = None,
        instruction_delay_ms: int = INSTRUCTION_DELAY_MS,
        gap_ms: int = INTER_ITEM_GAP_MS,
        now: Callable[[], datetime] = datetime.now,
        on_scored: Optional[Callable[["ExerciseSession", ScoreRecord], None]] = None,
    ) -> None:
        self.profile = profile
        self.scheduler = scheduler
        self.bus = bus or EventBus()
        self.store = store
        self.seed = seed if seed is not None else session_seed()
        self.instruction_delay_ms = int(instruction_delay_ms)
        self.gap_ms = int(gap_ms)
        self._run_level = run_level
        self._now = now
        self._on_scored = on_scored

        self.state = SessionState(Phase.IDLE)
        self.kind: Optional[ExerciseKind] = None
        self.level: Optional[int] = None
        self.plan: Optional[DisplayPlan] = None
        self.record: Optional[ScoreRecord] = None
        self.next_level: Optional[int] = None
        self._sequence: Tuple[Token, ...] = ()
        self._collector: Optional[InputCollector] = None
        self._timer: Optional[Handle] = None
        self._shown_at_ms = 0

    # ---- read-only views -------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def sequence(self) -> Tuple[Token, ...]:
        return self._sequence

    @property
    def answers(self) -> Tuple[Token, ...]:
        return self._collector.answers if self._collector is not None else ()

    @property
    def is_terminal(self) -> bool:
        return self.state.phase in TERMINAL_PHASES

    # ---- host commands ---------------------------------------------------

    def start(self, kind: ExerciseKind | str) -> None:
        if self.state.phase is not Phase.IDLE:
            raise StateError("start", self.state)
        try:
            kind = ExerciseKind.coerce(kind)
        except ValueError:
            raise ValidationError(f"Unknown exercise kind: {kind!r}") from None

        prefs = self.profile.preferences
        self.kind = kind
        self.level = resolve_level(prefs, self.profile.best_score(kind), self._run_level)
        self._sequence = generate(kind, self.level, make_rng(self.seed))
        self.plan = display_plan(kind, self.level, len(self._sequence), gap_ms=self.gap_ms)
        self._collector = InputCollector(
            kind,
            self._sequence,
            grid_size=grid_size(self.level) if kind is ExerciseKind.SPATIAL else None,
        )

        self._set_state(Phase.INSTRUCTED)
        xtrace("session_started", {"kind": kind.value, "level": self.level, "seed": self.seed, "length": len(self._sequence)})
        self.bus.emit(events.INSTRUCTIONS_READY, {"kind": kind, "level": self.level, "text": instructions_for(kind)})
        self._schedule(self.instruction_delay_ms, lambda: self._present(0))

    def submit_answer(self, value: Any) -> Token:
        """Record one answer; raises StateError or ValidationError without side effects."""
        if self.state.phase is not Phase.COLLECTING or self._collector is None:
            raise StateError("submit an answer", self.state)
        if self._collector.is_complete():
            raise StateError("submit an answer", self.state)
        token = self._collector.submit(value)
        index = self._collector.next_index
        total = len(self._sequence)
        self._set_state(Phase.COLLECTING, index)
        xtrace("answer_submitted", {"index": index - 1, "answer": str(token)})
        self.bus.emit(events.PROGRESS, {"fraction": index / total})
        if not self._collector.is_complete():
            self.bus.emit(events.INPUT_REQUESTED, {"index": index})
        return token

    def complete_input(self) -> ScoreRecord:
        if (
            self.state.phase is not Phase.COLLECTING
            or self._collector is None
            or not self._collector.is_complete()
        ):
            raise StateError("complete input", self.state)
        assert self.kind is not None and self.level is not None

        time_spent = max(0, self.scheduler.now_ms() - self._shown_at_ms)
        record = score(
            self._sequence,
            self._collector.answers,
            time_spent,
            self.level,
            self.kind,
            completed_at=self._now(),
        )
        self.record = record
        self._set_state(Phase.SCORED)

        record_completion(self.profile, record)
        if self.profile.preferences.adaptive_difficulty_enabled:
            self.next_level = next_level_for(record)
            self.profile.level_baselines[self.kind] = self.next_level
        persist(self.store, self.profile)
        if self._on_scored is not None:
            self._on_scored(self, record)

        xtrace(
            "session_scored",
            {
                "kind": self.kind.value,
                "level": self.level,
                "score": round(record.raw_score, 2),
                "correct": record.correct_answers,
                "total": record.total_questions,
                "next_level": self.next_level,
            },
        )
        self._set_state(Phase.CLOSED)
        self.bus.emit(events.SESSION_COMPLETE, record)
        return record

    def cancel(self) -> None:
        """Abandon the attempt; safe to call more than once."""
        if self.is_terminal:
            return
        self._cancel_timer()
        self._sequence = ()
        self._collector = None
        self._set_state(Phase.CANCELLED)
        xtrace("session_cancelled", {"kind": self.kind.value if self.kind else None})
        self.bus.emit(events.SESSION_CANCELLED, {"kind": self.kind})

    # ---- timed transitions ----------------------------------------------

    def _present(self, index: int) -> None:
        if self.state.phase not in (Phase.INSTRUCTED, Phase.PRESENTING) or self.plan is None:
            return
        total = len(self._sequence)
        if index >= total:
            self._begin_collecting()
            return
        self._set_state(Phase.PRESENTING, index)
        if index == 0:
            # time spent covers presentation and recall
            self._shown_at_ms = self.scheduler.now_ms()
        token = self._sequence[index]
        xtrace("item_presented", {"index": index, "total": total})
        self.bus.emit(events.ITEM_PRESENTED, {"token": token, "index": index, "total": total})
        self.bus.emit(events.PROGRESS, {"fraction": (index + 1) / total})
        self._schedule(self.plan.item_delay_ms(index), lambda: self._present(index + 1))

    def _begin_collecting(self) -> None:
        self._timer = None
        self._set_state(Phase.COLLECTING, 0)
        self.bus.emit(events.PROGRESS, {"fraction": 0.0})
        self.bus.emit(events.INPUT_REQUESTED, {"index": 0})

    def _schedule(self, ms: int, callback: Callable[[], None]) -> None:
        self._cancel_timer()
        self._timer = self.scheduler.schedule_after(ms, callback)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _set_state(self, phase: Phase, index: int = 0) -> None:
        self.state = SessionState(phase, index)
