"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, PollingScheduler, Recorder, compare
"""

from engine.scheduler import PollingScheduler, AsyncioScheduler, TimerHandle
from engine.stepper   import (
    Stepper, StepperState, PlaybackState,
    SPEED_DELAYS_MS, DEFAULT_SPEED, clamp_speed,
)
from engine.recorder  import Recorder, RunMetrics, ComparisonResult, compare
from engine.synced    import SyncedPlayback

__all__ = [
    "PollingScheduler",
    "AsyncioScheduler",
    "TimerHandle",
    "Stepper",
    "StepperState",
    "PlaybackState",
    "SPEED_DELAYS_MS",
    "DEFAULT_SPEED",
    "clamp_speed",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "SyncedPlayback",
]
