"""Delayed callbacks for feedback timers.

The engine never sleeps.  It hands callbacks to a scheduler, and whoever
owns the scheduler decides when time passes: tests step a
``ManualScheduler`` by hand, the terminal frontends poll a
``MonotonicScheduler`` between keypresses.
"""

from __future__ import annotations

import heapq
import itertools
import time
from collections.abc import Callable
from typing import Protocol


class Handle:
    """A scheduled callback that can be cancelled before it fires."""

    __slots__ = ("due", "callback", "cancelled", "fired")

    def __init__(self, due: int, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler(Protocol):
    def call_later(self, delay: int, callback: Callable[[], None]) -> Handle: ...


class ManualScheduler:
    """Virtual-clock scheduler; time only moves when ``advance`` is called.

    Delays and the clock are integer milliseconds.
    """

    def __init__(self, now: int = 0) -> None:
        self.now = now
        self._queue: list[tuple[int, int, Handle]] = []
        self._seq = itertools.count()

    def call_later(self, delay: int, callback: Callable[[], None]) -> Handle:
        handle = Handle(self.now + max(0, int(delay)), callback)
        heapq.heappush(self._queue, (handle.due, next(self._seq), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if h.active)

    def next_due(self) -> int | None:
        """Clock value of the earliest live callback, or ``None``."""
        for due, _, handle in sorted(self._queue):
            if handle.active:
                return due
        return None

    # -- time ----------------------------------------------------------------

    def advance(self, ms: int) -> int:
        """Move the clock forward by *ms*.  Returns the number fired."""
        return self.advance_to(self.now + ms)

    def advance_to(self, target: int) -> int:
        fired = 0
        # Callbacks may schedule more work; the heap picks it up if it is
        # due before *target*.
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self.now = max(self.now, due)
            handle.fired = True
            handle.callback()
            fired += 1
        self.now = max(self.now, target)
        return fired

    def run_all(self) -> int:
        """Fire everything outstanding, jumping the clock as needed."""
        fired = 0
        while (due := self.next_due()) is not None:
            fired += self.advance_to(due)
        return fired


class MonotonicScheduler(ManualScheduler):
    """``ManualScheduler`` whose clock follows ``time.monotonic``."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._origin = clock()
        super().__init__(now=0)

    def _elapsed_ms(self) -> int:
        return int((self._clock() - self._origin) * 1000)

    def call_later(self, delay: int, callback: Callable[[], None]) -> Handle:
        # Base the delay on wall time even if nobody has polled lately.
        self.now = max(self.now, self._elapsed_ms())
        return super().call_later(delay, callback)

    def poll(self) -> int:
        """Fire every callback that is due by now."""
        return self.advance_to(self._elapsed_ms())
