"""
scheduler.py — Autoplay Timers
===============================
The Stepper never sleeps and never owns a thread.  It asks a scheduler
for a one-shot callback and keeps the returned handle so it can cancel.

    handle = scheduler.call_later(0.4, callback)
    handle.cancel()

Two implementations share that shape:

  PollingScheduler – fires due callbacks when the host calls poll().
                     This is the tick-from-your-event-loop model: the
                     Flask app polls at the start of every request, and
                     tests drive it with a fake clock.
  AsyncioScheduler – thin wrapper over loop.call_later for asyncio hosts.

Catch-up rule (PollingScheduler):
  While a callback runs, now() reports the time it was DUE, not the
  wall-clock time.  A callback that reschedules itself therefore lands
  on a regular grid, and one poll() after a long gap fires every tick
  that fell due in between, in order.
"""

import asyncio
import heapq
import itertools
import logging
import time
from typing import Callable, List, Optional, Tuple


log = logging.getLogger(__name__)

Callback = Callable[[], None]


class TimerHandle:
    """One-shot timer.  Same surface as asyncio.TimerHandle."""

    __slots__ = ("when", "_callback", "_cancelled")

    def __init__(self, when: float, callback: Callback):
        self.when       = when
        self._callback  = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True
        self._callback  = None

    def cancelled(self) -> bool:
        return self._cancelled

    def _run(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None and not self._cancelled:
            callback()

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "pending"
        return f"TimerHandle(when={self.when:.3f}, {state})"


# ---------------------------------------------------------------------------
# PollingScheduler
# ---------------------------------------------------------------------------
class PollingScheduler:
    """
    Attributes:
        clock : zero-argument callable returning seconds (default time.monotonic).
        _heap : [(when, seq, TimerHandle)] min-heap of scheduled timers.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._heap: List[Tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()
        self._dispatch_time: Optional[float] = None

    def now(self) -> float:
        if self._dispatch_time is not None:
            return self._dispatch_time
        return self.clock()

    def call_later(self, delay: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(self.now() + max(0.0, delay), callback)
        heapq.heappush(self._heap, (handle.when, next(self._seq), handle))
        return handle

    def poll(self) -> int:
        """Fire every non-cancelled timer due by now.  Returns how many fired."""
        deadline = self.clock()
        fired = 0
        while self._heap and self._heap[0][0] <= deadline:
            when, _, handle = heapq.heappop(self._heap)
            if handle.cancelled():
                continue
            self._dispatch_time = when
            try:
                handle._run()
            finally:
                self._dispatch_time = None
            fired += 1
        if fired:
            log.debug("poll fired %d timer(s)", fired)
        return fired

    @property
    def pending(self) -> int:
        """Number of scheduled timers that have not fired or been cancelled."""
        return sum(1 for _, _, h in self._heap if not h.cancelled())

    def next_due(self) -> Optional[float]:
        live = [when for when, _, h in self._heap if not h.cancelled()]
        return min(live) if live else None


# ---------------------------------------------------------------------------
# AsyncioScheduler
# ---------------------------------------------------------------------------
class AsyncioScheduler:
    """Schedules on an asyncio loop; the handles are asyncio.TimerHandle."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def now(self) -> float:
        return self.loop.time()

    def call_later(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0.0, delay), callback)
