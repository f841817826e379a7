"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object the presentation layer drives during a
run.  It owns the immutable trace of the selected algorithm, a position
index into it, and at most one pending autoplay timer.

State machine:
    IDLE     →  select_algorithm() / load()  →  STOPPED
    STOPPED  →  play()                        →  RUNNING
    RUNNING  →  pause()                       →  STOPPED
    RUNNING  →  tick reaches last index       →  STOPPED
    any      →  select_algorithm() / load()  →  STOPPED at position 0

Timer discipline:
  - every schedule cancels the previous handle first, so there is never
    more than one pending tick
  - switching algorithms and close() cancel before anything else
  - a tick that fires after a pause finds state != RUNNING and does nothing

Thread safety:
  This class is NOT thread-safe.  Drive it from one thread, or from the
  event loop the scheduler belongs to.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from algorithms import Algorithm
from algorithms.step import Step, TraceError
from engine.scheduler import PollingScheduler


log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE    = "idle"        # nothing loaded
    STOPPED = "stopped"
    RUNNING = "running"


# ---------------------------------------------------------------------------
# Speed levels (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_DELAYS_MS: Dict[int, int] = {
    1: 100,     # fastest
    2: 200,
    3: 400,
    4: 800,
    5: 1500,    # teaching mode
}
MIN_SPEED     = min(SPEED_DELAYS_MS)
MAX_SPEED     = max(SPEED_DELAYS_MS)
DEFAULT_SPEED = 3


def clamp_speed(level: int) -> int:
    return max(MIN_SPEED, min(MAX_SPEED, int(level)))


# ---------------------------------------------------------------------------
# Snapshot for the presentation layer
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PlaybackState:
    algorithm_id: Optional[str]
    position:     int
    total_steps:  int
    is_playing:   bool
    speed:        int
    delay_ms:     int
    step:         Optional[Step]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm_id": self.algorithm_id,
            "position":     self.position,
            "total_steps":  self.total_steps,
            "is_playing":   self.is_playing,
            "speed":        self.speed,
            "delay_ms":     self.delay_ms,
            "step":         self.step.to_dict() if self.step else None,
        }


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        scheduler : Source of one-shot timers (PollingScheduler by default).
        trace     : Tuple of Steps of the loaded algorithm (empty when IDLE).
        algorithm : Descriptor of the loaded algorithm, if loaded via the registry.
        position  : Index into `trace` that is currently displayed.
        state     : Current StepperState.
        speed     : Speed level 1-5, see SPEED_DELAYS_MS.
        on_step   : Optional callback(Step) fired every time the position changes.
    """

    def __init__(
        self,
        scheduler=None,
        on_step: Optional[Callable[[Step], None]] = None,
        speed: int = DEFAULT_SPEED,
    ):
        self.scheduler                   = scheduler or PollingScheduler()
        self.trace:     Tuple[Step, ...] = ()
        self.algorithm: Optional[Algorithm] = None
        self.position:  int              = 0
        self.state:     StepperState     = StepperState.IDLE
        self.speed:     int              = clamp_speed(speed)
        self.on_step:   Optional[Callable[[Step], None]] = on_step

        self._timer = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def select_algorithm(self, algorithm: Algorithm, locale: Optional[str] = None) -> None:
        """Stop playback, regenerate the trace and show its first step."""
        self._cancel_timer()
        trace = algorithm.generate_steps(locale)
        self._install(trace, algorithm)
        log.debug("Selected %s (%d steps)", algorithm.id, len(trace))

    def load(self, trace: Sequence[Step]) -> None:
        """Install a raw trace that did not come from the registry."""
        self._cancel_timer()
        self._install(tuple(trace), None)

    def close(self) -> None:
        """Teardown: cancel the pending tick.  The trace stays readable."""
        self._cancel_timer()
        if self.state == StepperState.RUNNING:
            self.state = StepperState.STOPPED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state == StepperState.IDLE:
            return
        if self.is_at_end:
            # nothing left to animate
            self._stop()
            return
        self.state = StepperState.RUNNING
        self._schedule_tick()

    def pause(self) -> None:
        if self.state == StepperState.IDLE:
            return
        self._stop()

    def toggle_play(self) -> None:
        if self.state == StepperState.RUNNING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step.  Returns False if already at the end."""
        return self._move_to(self.position + 1)

    def step_backward(self) -> bool:
        """Go back one step.  Returns False if already at the start."""
        return self._move_to(self.position - 1)

    def set_current_step(self, index: int) -> bool:
        """Jump to `index`, clamped into the trace."""
        return self._move_to(index)

    def rewind(self) -> bool:
        return self._move_to(0)

    def jump_to_end(self) -> bool:
        return self._move_to(len(self.trace) - 1)

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, level: int) -> None:
        """Clamp to 1-5.  Takes effect from the next scheduled tick."""
        self.speed = clamp_speed(level)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.position < len(self.trace):
            return self.trace[self.position]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.trace)

    @property
    def delay_ms(self) -> int:
        return SPEED_DELAYS_MS[self.speed]

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.RUNNING

    @property
    def is_at_end(self) -> bool:
        return bool(self.trace) and self.position == len(self.trace) - 1

    @property
    def has_pending_timer(self) -> bool:
        return self._timer is not None

    def snapshot(self) -> PlaybackState:
        return PlaybackState(
            algorithm_id=self.algorithm.id if self.algorithm else None,
            position=self.position,
            total_steps=len(self.trace),
            is_playing=self.is_playing,
            speed=self.speed,
            delay_ms=self.delay_ms,
            step=self.current_step,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _install(self, trace: Tuple[Step, ...], algorithm: Optional[Algorithm]) -> None:
        if not trace:
            raise TraceError("cannot load an empty trace")
        self.trace     = trace
        self.algorithm = algorithm
        self.position  = 0
        self.state     = StepperState.STOPPED
        self._notify()

    def _move_to(self, index: int) -> bool:
        if self.state == StepperState.IDLE:
            return False
        index = max(0, min(len(self.trace) - 1, index))
        if index == self.position:
            return False
        self.position = index
        self._notify()
        if self.state == StepperState.RUNNING:
            # manual navigation restarts the countdown
            if self.is_at_end:
                self._stop()
            else:
                self._schedule_tick()
        return True

    def _tick(self) -> None:
        self._timer = None
        if self.state != StepperState.RUNNING:
            return
        if not self.is_at_end:
            self.position += 1
            self._notify()
        if self.is_at_end:
            self.state = StepperState.STOPPED
            log.debug("Autoplay reached the last step (%d)", self.position)
        else:
            self._schedule_tick()

    def _stop(self) -> None:
        self._cancel_timer()
        self.state = StepperState.STOPPED

    def _schedule_tick(self) -> None:
        self._cancel_timer()
        self._timer = self.scheduler.call_later(self.delay_ms / 1000.0, self._tick)
        log.debug("Tick scheduled in %d ms (position %d)", self.delay_ms, self.position)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            log.debug("Pending tick cancelled")

    def _notify(self) -> None:
        step = self.current_step
        if self.on_step and step is not None:
            self.on_step(step)
