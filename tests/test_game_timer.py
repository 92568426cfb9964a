import pytest

from nayukicore.game_timer import GameTimer, GameTimerState


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def test_delta_time(clock):
    timer = GameTimer(clock=clock)
    clock.sleep(1.02)
    timer.tick()
    assert timer.delta_time() > 1.0
    assert timer.delta_time() < 1.1


def test_total_time(clock):
    timer = GameTimer(clock=clock)
    clock.sleep(0.301)
    timer.stop()
    timer.tick()
    clock.sleep(0.401)
    timer.start()
    timer.tick()
    clock.sleep(0.701)
    timer.tick()

    assert 1.0 < timer.running_total_time() < 1.1
    assert 0.4 < timer.paused_total_time() < 0.42
    assert 1.4 < timer.total_time() < 1.5


def test_stop_takes_effect_on_next_tick(clock):
    timer = GameTimer(clock=clock)
    timer.stop()
    assert timer.state is GameTimerState.RUNNING
    timer.tick()
    assert timer.state is GameTimerState.PAUSED


def test_start_while_running_is_ignored(clock):
    timer = GameTimer(clock=clock)
    timer.start()
    clock.sleep(0.5)
    timer.tick()
    assert timer.state is GameTimerState.RUNNING
    assert timer.running_total_time() == pytest.approx(0.5)
    assert timer.paused_total_time() == 0.0


def test_initially_paused_accumulates_paused_time(clock):
    timer = GameTimer(GameTimerState.PAUSED, clock=clock)
    clock.sleep(0.25)
    timer.tick()
    assert timer.paused_total_time() == pytest.approx(0.25)
    assert timer.running_total_time() == 0.0


def test_stop_then_start_before_tick_cancels(clock):
    timer = GameTimer(clock=clock)
    timer.stop()
    timer.start()
    timer.tick()
    assert timer.state is GameTimerState.RUNNING


def test_total_is_sum_of_parts(clock):
    timer = GameTimer(clock=clock)
    for step in (0.1, 0.2, 0.3):
        clock.sleep(step)
        timer.stop() if timer.state is GameTimerState.RUNNING else timer.start()
        timer.tick()
    assert timer.total_time() == pytest.approx(
        timer.running_total_time() + timer.paused_total_time()
    )
    assert timer.total_time() == pytest.approx(0.6)


def test_default_clock_delta_is_non_negative():
    timer = GameTimer()
    timer.tick()
    assert timer.delta_time() >= 0.0