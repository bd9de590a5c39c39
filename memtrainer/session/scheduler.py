from __future__ import annotations

"""Timer scheduling for timed session transitions.

Sessions only see the Scheduler protocol, so a GUI host can adapt its own
event loop (e.g. tkinter's after()) while tests drive a virtual clock.
Everything runs on the caller's thread; callbacks fire one at a time.
"""

import heapq
import itertools
import time
from typing import Callable, List, Protocol, Tuple


class Handle:
    """Cancellable reference to a scheduled callback."""

    def __init__(self, deadline_ms: int, callback: Callable[[], None]) -> None:
        self.deadline_ms = deadline_ms
        self._callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def _fire(self) -> None:
        if self.pending:
            self.fired = True
            self._callback()


class Scheduler(Protocol):
    def now_ms(self) -> int: ...

    def schedule_after(self, ms: int, callback: Callable[[], None]) -> Handle: ...


class ManualScheduler:
    """Virtual clock; time only moves when advance() is called."""

    def __init__(self, start_ms: int = 0) -> None:
        self._now = int(start_ms)
        self._queue: List[Tuple[int, int, Handle]] = []
        self._seq = itertools.count()

    def now_ms(self) -> int:
        return self._now

    def schedule_after(self, ms: int, callback: Callable[[], None]) -> Handle:
        handle = Handle(self.now_ms() + max(0, int(ms)), callback)
        heapq.heappush(self._queue, (handle.deadline_ms, next(self._seq), handle))
        return handle

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if h.pending)

    def next_deadline(self) -> int | None:
        self._drop_dead()
        return self._queue[0][0] if self._queue else None

    def _drop_dead(self) -> None:
        while self._queue and not self._queue[0][2].pending:
            heapq.heappop(self._queue)

    def _fire_due(self, until_ms: int) -> None:
        while True:
            self._drop_dead()
            if not self._queue or self._queue[0][0] > until_ms:
                return
            deadline, _, handle = heapq.heappop(self._queue)
            self._now = max(self._now, deadline)
            handle._fire()

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing callbacks in deadline order."""
        target = self._now + max(0, int(ms))
        self._fire_due(target)
        self._now = target

    def run_until_idle(self, max_steps: int = 10_000) -> None:
        for _ in range(max_steps):
            deadline = self.next_deadline()
            if deadline is None:
                return
            self.advance(deadline - self._now)
        raise RuntimeError(f"Scheduler still busy after {max_steps} steps")


class RealtimeScheduler(ManualScheduler):
    """Wall-clock variant: run_until_idle() sleeps until each deadline."""

    def __init__(self) -> None:
        self._origin = time.monotonic()
        super().__init__(0)

    def _clock_ms(self) -> int:
        return int((time.monotonic() - self._origin) * 1000)

    def now_ms(self) -> int:
        self._now = max(self._now, self._clock_ms())
        return self._now

    def run_until_idle(self, max_steps: int = 10_000) -> None:
        for _ in range(max_steps):
            deadline = self.next_deadline()
            if deadline is None:
                return
            wait_ms = deadline - self.now_ms()
            if wait_ms > 0:
                time.sleep(wait_ms / 1000.0)
            self._fire_due(self.now_ms())
        raise RuntimeError(f"Scheduler still busy after {max_steps} steps")
