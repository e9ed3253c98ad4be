import pytest

from emblib.chrono import Milliseconds, Seconds, SteadyClock
from emblib.scheduler import BasicScheduler, TaskExecStatus


class _FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return Milliseconds(self.now)


@pytest.fixture
def clock():
    fake = _FakeClock()
    SteadyClock.init(fake)
    yield fake
    SteadyClock.deinit()


def _recorder(calls, status=TaskExecStatus.SUCCESS):
    def task(index):
        calls.append(index)
        return status

    return task


def test_requires_initialized_clock():
    SteadyClock.deinit()
    with pytest.raises(RuntimeError):
        BasicScheduler()


def test_task_runs_each_period(clock):
    sched = BasicScheduler()
    calls = []
    sched.add_task(_recorder(calls), Milliseconds(10))
    clock.now = 5
    sched.run()
    assert calls == []
    clock.now = 10
    sched.run()
    assert calls == [0]
    clock.now = 15
    sched.run()
    assert calls == [0]
    clock.now = 20
    sched.run()
    assert calls == [0, 0]


def test_failed_task_is_retried(clock):
    sched = BasicScheduler()
    calls = []
    sched.add_task(_recorder(calls, TaskExecStatus.FAIL), Milliseconds(10))
    clock.now = 10
    sched.run()
    clock.now = 11
    sched.run()
    assert calls == [0, 0]


def test_tasks_receive_their_index(clock):
    sched = BasicScheduler()
    calls = []
    sched.add_task(_recorder(calls), Milliseconds(10))
    sched.add_task(_recorder(calls), Milliseconds(10))
    clock.now = 10
    sched.run()
    assert calls == [0, 1]


def test_period_in_seconds(clock):
    sched = BasicScheduler()
    calls = []
    sched.add_task(_recorder(calls), Seconds(1))
    clock.now = 999
    sched.run()
    assert calls == []
    clock.now = 1000
    sched.run()
    assert calls == [0]


def test_set_task_period(clock):
    sched = BasicScheduler()
    calls = []
    sched.add_task(_recorder(calls), Milliseconds(10))
    sched.set_task_period(0, Milliseconds(100))
    sched.set_task_period(5, Milliseconds(1))
    clock.now = 10
    sched.run()
    assert calls == []
    clock.now = 100
    sched.run()
    assert calls == [0]


def test_reset_restarts_periods(clock):
    sched = BasicScheduler()
    calls = []
    sched.add_task(_recorder(calls), Milliseconds(10))
    clock.now = 8
    sched.reset()
    clock.now = 10
    sched.run()
    assert calls == []
    clock.now = 18
    sched.run()
    assert calls == [0]


def test_delayed_task_runs_once(clock):
    sched = BasicScheduler()
    fired = []
    sched.add_delayed_task(lambda: fired.append(True), Milliseconds(50))
    clock.now = 49
    sched.run()
    assert fired == []
    clock.now = 50
    sched.run()
    assert fired == [True]
    clock.now = 100
    sched.run()
    assert fired == [True]


def test_delayed_task_with_zero_delay_never_runs(clock):
    sched = BasicScheduler()
    fired = []
    sched.add_delayed_task(lambda: fired.append(True), Milliseconds(0))
    clock.now = 1000
    sched.run()
    assert fired == []


def test_task_capacity(clock):
    sched = BasicScheduler()
    for _ in range(8):
        sched.add_task(_recorder([]), Milliseconds(1))
    with pytest.raises(IndexError):
        sched.add_task(_recorder([]), Milliseconds(1))


def test_period_must_be_duration(clock):
    sched = BasicScheduler()
    with pytest.raises(TypeError):
        sched.add_task(_recorder([]), 10)