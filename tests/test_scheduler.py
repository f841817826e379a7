from engine.scheduler import PollingScheduler


def test_poll_fires_due_callbacks_in_time_order(clock, scheduler):
    fired = []
    scheduler.call_later(0.3, lambda: fired.append("b"))
    scheduler.call_later(0.1, lambda: fired.append("a"))
    scheduler.call_later(0.9, lambda: fired.append("c"))
    clock.advance(0.5)
    assert scheduler.poll() == 2
    assert fired == ["a", "b"]
    assert scheduler.pending == 1
    assert scheduler.next_due() == 0.9


def test_cancelled_handle_never_fires(clock, scheduler):
    fired = []
    handle = scheduler.call_later(0.1, lambda: fired.append(1))
    handle.cancel()
    assert handle.cancelled()
    clock.advance(1)
    assert scheduler.poll() == 0
    assert fired == []
    assert scheduler.next_due() is None


def test_now_is_due_time_inside_callback(clock, scheduler):
    seen = []
    scheduler.call_later(0.25, lambda: seen.append(scheduler.now()))
    clock.advance(10)
    scheduler.poll()
    assert seen == [0.25]
    assert scheduler.now() == 10


def test_rescheduling_callback_catches_up():
    t = [0.0]
    sched = PollingScheduler(clock=lambda: t[0])
    ticks = []

    def tick():
        ticks.append(sched.now())
        sched.call_later(1.0, tick)

    sched.call_later(1.0, tick)
    t[0] = 3.5
    assert sched.poll() == 3
    assert ticks == [1.0, 2.0, 3.0]
    assert sched.pending == 1
