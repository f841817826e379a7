import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from algorithms import get_algorithm
from engine.scheduler import PollingScheduler


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.t = start

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock) -> PollingScheduler:
    return PollingScheduler(clock=clock)


@pytest.fixture
def run():
    """run("bubble-sort", "es") -> tuple of Steps."""

    def _run(algorithm_id, locale="en"):
        return get_algorithm(algorithm_id).generate_steps(locale)

    return _run
