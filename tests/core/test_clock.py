import pytest

from lifeboard.core.clock import Clock
from lifeboard.core.session import SimulationSession


class RecordingSubscriber:
    def __init__(self):
        self.counts = []

    def tick(self, count: int = 1) -> None:
        self.counts.append(count)


class FailingSubscriber:
    def __init__(self):
        self.calls = 0

    def tick(self, count: int = 1) -> None:
        self.calls += 1
        raise TypeError("broken subscriber")


class FailingRenderer:
    def __init__(self, fail_on: int):
        self.calls = 0
        self.fail_on = fail_on

    def render(self, state, generation):
        self.calls += 1
        if self.calls == self.fail_on:
            raise TypeError("render failed")


def test_clock_subscribe_unsubscribe_and_tick():
    clock = Clock(interval_ms=50)
    sub = RecordingSubscriber()

    clock.subscribe(sub)
    clock.subscribe(sub)  # should not duplicate
    clock.tick(5)

    assert clock.tick_count == 5
    assert sub.counts == [5]

    clock.unsubscribe(sub)
    clock.tick(2)
    assert sub.counts == [5]  # no new calls after unsubscribe


def test_clock_zero_ticks_is_noop():
    clock = Clock()
    sub = RecordingSubscriber()
    clock.subscribe(sub)

    clock.tick(0)
    assert clock.tick_count == 0
    assert clock.elapsed_ms == 0
    assert sub.counts == []


def test_subscriber_errors_propagate_without_replay():
    clock = Clock()
    failing = FailingSubscriber()
    clock.subscribe(failing)

    with pytest.raises(TypeError, match="broken subscriber"):
        clock.tick(3)

    assert failing.calls == 1


def test_session_error_mid_batch_is_not_replayed():
    session = SimulationSession(4, 4, randomize=False)
    session.attach_renderer(FailingRenderer(fail_on=2))
    session.start()
    clock = Clock()
    clock.subscribe(session)

    with pytest.raises(TypeError, match="render failed"):
        clock.tick(2)

    # The first generation completed; the second failed before advancing.
    assert session.generation == 1


def test_clock_interval():
    clock = Clock()
    assert clock.interval_ms == 100
    assert clock.interval_seconds == pytest.approx(0.1)

    assert Clock(interval_ms=250).interval_seconds == pytest.approx(0.25)


def test_elapsed_time_follows_variable_cadence():
    clock = Clock(interval_ms=100)
    clock.tick(3)
    clock.set_interval(40)
    clock.tick(2)

    assert clock.tick_count == 5
    assert clock.elapsed_ms == 380
    assert clock.interval_ms == 40


def test_clock_reset_keeps_interval():
    clock = Clock(interval_ms=20)
    clock.tick(4)
    clock.reset()

    assert clock.tick_count == 0
    assert clock.elapsed_ms == 0
    assert clock.interval_ms == 20


@pytest.mark.parametrize("interval", [0, -100, 2.5, True, "100"])
def test_clock_invalid_interval(interval):
    with pytest.raises(ValueError):
        Clock(interval_ms=interval)
    with pytest.raises(ValueError):
        Clock().set_interval(interval)


def test_clock_negative_count():
    clock = Clock()
    with pytest.raises(ValueError):
        clock.tick(-1)
