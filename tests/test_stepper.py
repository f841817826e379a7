import asyncio

import pytest

from algorithms import get_algorithm
from algorithms.step import StepBuilder, TraceError
from engine.scheduler import AsyncioScheduler
from engine.stepper import SPEED_DELAYS_MS, Stepper, StepperState, clamp_speed


def _trace(n):
    sb = StepBuilder()
    return [sb.array([i], en=f"step {i}", es=f"paso {i}", final=i == n - 1) for i in range(n)]


@pytest.fixture
def stepper(scheduler):
    s = Stepper(scheduler)
    s.load(_trace(5))
    return s


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------
def test_new_stepper_is_idle(scheduler):
    s = Stepper(scheduler)
    assert s.state == StepperState.IDLE
    assert s.snapshot().step is None
    s.play()
    assert not s.is_playing and not s.step_forward()


def test_empty_trace_is_rejected(scheduler):
    with pytest.raises(TraceError):
        Stepper(scheduler).load([])


def test_select_algorithm_shows_first_step(scheduler):
    s = Stepper(scheduler)
    s.select_algorithm(get_algorithm("binary-search"), "es")
    snap = s.snapshot()
    assert snap.algorithm_id == "binary-search"
    assert snap.position == 0 and snap.total_steps == 7
    assert snap.step.description.startswith("Arreglo ordenado")
    assert s.state == StepperState.STOPPED


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------
def test_step_backward_at_start_is_noop(stepper):
    assert not stepper.step_backward()
    assert stepper.position == 0


def test_step_forward_clamps_at_end(stepper):
    for _ in range(10):
        stepper.step_forward()
    assert stepper.position == 4
    assert stepper.is_at_end
    assert not stepper.step_forward()


def test_set_current_step_clamps(stepper):
    stepper.set_current_step(99)
    assert stepper.position == 4
    stepper.set_current_step(-3)
    assert stepper.position == 0
    assert stepper.set_current_step(2)
    assert stepper.current_step.data.values == (2,)


def test_on_step_fires_on_every_move(scheduler):
    seen = []
    s = Stepper(scheduler, on_step=lambda step: seen.append(step.step_number))
    s.load(_trace(3))
    s.step_forward()
    s.step_forward()
    s.step_forward()
    s.rewind()
    assert seen == [0, 1, 2, 0]


# ---------------------------------------------------------------------------
# Autoplay
# ---------------------------------------------------------------------------
def test_autoplay_advances_one_step_per_delay(stepper, clock, scheduler):
    stepper.play()
    assert stepper.is_playing and stepper.has_pending_timer
    clock.advance(0.3)
    scheduler.poll()
    assert stepper.position == 0
    clock.advance(0.2)  # t = 0.5, first tick due at 0.4
    scheduler.poll()
    assert stepper.position == 1


def test_autoplay_catches_up_after_a_long_gap(stepper, clock, scheduler):
    stepper.play()
    clock.advance(1.0)  # ticks at 0.4 and 0.8
    assert scheduler.poll() == 2
    assert stepper.position == 2


def test_autoplay_stops_at_last_step(stepper, clock, scheduler):
    stepper.play()
    clock.advance(60)
    scheduler.poll()
    assert stepper.position == 4
    assert stepper.state == StepperState.STOPPED
    assert not stepper.has_pending_timer
    assert scheduler.pending == 0


def test_play_at_end_does_nothing(stepper, scheduler):
    stepper.jump_to_end()
    stepper.play()
    assert not stepper.is_playing
    assert scheduler.pending == 0


def test_pause_cancels_pending_tick(stepper, clock, scheduler):
    stepper.play()
    stepper.toggle_play()
    assert not stepper.is_playing
    assert scheduler.pending == 0
    clock.advance(5)
    scheduler.poll()
    assert stepper.position == 0


def test_manual_step_while_playing_restarts_countdown(stepper, clock, scheduler):
    stepper.play()
    clock.advance(0.3)
    stepper.step_forward()
    assert stepper.position == 1
    assert scheduler.pending == 1
    clock.advance(0.2)  # t = 0.5; the old tick (0.4) was replaced by one at 0.7
    scheduler.poll()
    assert stepper.position == 1
    clock.advance(0.3)
    scheduler.poll()
    assert stepper.position == 2


def test_manual_jump_to_end_while_playing_stops(stepper, scheduler):
    stepper.play()
    stepper.jump_to_end()
    assert not stepper.is_playing
    assert scheduler.pending == 0


def test_switching_algorithm_leaves_no_stale_timer(stepper, clock, scheduler):
    stepper.play()
    stepper.select_algorithm(get_algorithm("bubble-sort"))
    assert not stepper.is_playing
    assert scheduler.pending == 0
    clock.advance(1.0)              # the old tick would have been due at 0.4
    scheduler.poll()
    assert stepper.position == 0
    stepper.play()
    stepper.select_algorithm(get_algorithm("quick-sort"))
    stepper.play()
    assert scheduler.pending == 1
    clock.advance(0.5)
    scheduler.poll()
    assert stepper.algorithm.id == "quick-sort"
    assert stepper.position == 1


def test_close_cancels_timer(stepper, scheduler):
    stepper.play()
    stepper.close()
    assert scheduler.pending == 0
    assert stepper.state == StepperState.STOPPED


# ---------------------------------------------------------------------------
# Speed
# ---------------------------------------------------------------------------
def test_clamp_speed():
    assert clamp_speed(0) == 1
    assert clamp_speed(9) == 5
    assert clamp_speed(4) == 4


def test_speed_levels_map_to_delays(stepper):
    for level, delay in SPEED_DELAYS_MS.items():
        stepper.set_speed(level)
        assert stepper.delay_ms == delay
    stepper.set_speed(42)
    assert stepper.speed == 5


def test_speed_change_applies_from_next_tick(stepper, clock, scheduler):
    stepper.play()                  # first tick due at 0.4
    stepper.set_speed(5)            # 1.5 s from now on
    clock.advance(0.4)
    scheduler.poll()
    assert stepper.position == 1
    clock.advance(1.0)
    scheduler.poll()
    assert stepper.position == 1
    clock.advance(0.6)
    scheduler.poll()
    assert stepper.position == 2


# ---------------------------------------------------------------------------
# asyncio host
# ---------------------------------------------------------------------------
def test_autoplay_on_asyncio_loop():
    async def main():
        s = Stepper(AsyncioScheduler(), speed=1)
        s.load(_trace(3))
        s.play()
        for _ in range(100):
            if not s.is_playing:
                break
            await asyncio.sleep(0.05)
        return s

    s = asyncio.run(main())
    assert s.position == 2
    assert not s.is_playing
