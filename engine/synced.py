"""
synced.py — Side-by-Side Playback
===================================
Two Steppers on one scheduler, one per pane.

    synced   : play / pause / step / rewind / speed go to both panes, and
               both run at the shared `sync_speed`
    unsynced : each pane is driven on its own through `side("left")` /
               `side("right")`

Turning sync on pushes the shared speed into both panes; turning it off
leaves each pane at whatever speed it had.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from algorithms import Algorithm
from engine.scheduler import PollingScheduler
from engine.stepper import DEFAULT_SPEED, Stepper, clamp_speed


log = logging.getLogger(__name__)

SIDES: Tuple[str, ...] = ("left", "right")


class SyncedPlayback:
    """
    Attributes:
        left, right : The two Steppers.
        synced      : Whether controls apply to both panes.
        sync_speed  : Speed level shared while synced.
    """

    def __init__(self, scheduler=None, synced: bool = False, speed: int = DEFAULT_SPEED):
        self.scheduler  = scheduler or PollingScheduler()
        self.left       = Stepper(self.scheduler, speed=speed)
        self.right      = Stepper(self.scheduler, speed=speed)
        self.sync_speed = clamp_speed(speed)
        self.synced     = False
        self.set_synced(synced)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def select(self, left: Algorithm, right: Algorithm, locale: Optional[str] = None) -> None:
        self.left.select_algorithm(left, locale)
        self.right.select_algorithm(right, locale)

    def side(self, name: str) -> Stepper:
        if name not in SIDES:
            raise ValueError(f"Unknown side: {name!r} (expected one of {SIDES})")
        return getattr(self, name)

    def set_synced(self, synced: bool) -> None:
        self.synced = bool(synced)
        if self.synced:
            for stepper in self._both():
                stepper.set_speed(self.sync_speed)
        log.debug("Compare playback synced=%s", self.synced)

    def close(self) -> None:
        for stepper in self._both():
            stepper.close()

    # ------------------------------------------------------------------
    # Controls: both panes when synced, otherwise only `side`
    # ------------------------------------------------------------------
    def toggle_play(self, side: str = "left") -> None:
        if not self.synced:
            self.side(side).toggle_play()
            return
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def play(self, side: str = "left") -> None:
        for stepper in self._targets(side):
            stepper.play()

    def pause(self, side: str = "left") -> None:
        for stepper in self._targets(side):
            stepper.pause()

    def step_forward(self, side: str = "left") -> bool:
        return any([stepper.step_forward() for stepper in self._targets(side)])

    def step_backward(self, side: str = "left") -> bool:
        return any([stepper.step_backward() for stepper in self._targets(side)])

    def rewind(self, side: str = "left") -> None:
        for stepper in self._targets(side):
            stepper.rewind()

    def set_speed(self, level: int, side: str = "left") -> None:
        if self.synced:
            self.sync_speed = clamp_speed(level)
        for stepper in self._targets(side):
            stepper.set_speed(level)

    # ------------------------------------------------------------------
    # Read-only
    # ------------------------------------------------------------------
    @property
    def is_playing(self) -> bool:
        return self.left.is_playing or self.right.is_playing

    def snapshot(self) -> Dict[str, Any]:
        return {
            "synced":     self.synced,
            "sync_speed": self.sync_speed,
            "left":       self.left.snapshot().to_dict(),
            "right":      self.right.snapshot().to_dict(),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _both(self) -> Tuple[Stepper, Stepper]:
        return self.left, self.right

    def _targets(self, side: str) -> Tuple[Stepper, ...]:
        if self.synced:
            return self._both()
        return (self.side(side),)
