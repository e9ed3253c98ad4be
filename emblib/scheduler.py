"""Cooperative periodic task scheduler driven by the steady clock."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from emblib.chrono import Duration, Milliseconds, SteadyClock, duration_cast

MAX_TASK_COUNT = 8


class TaskExecStatus(Enum):
    """Result a periodic task reports; a failed task is retried on the next run."""

    SUCCESS = auto()
    FAIL = auto()


@dataclass
class _Task:
    period: Milliseconds
    timepoint: Milliseconds
    func: Callable[[int], TaskExecStatus]


def _as_ms(value: Duration) -> Milliseconds:
    if not isinstance(value, Duration):
        raise TypeError("a Duration is required")
    return duration_cast(Milliseconds, value)


class BasicScheduler:
    """Runs up to eight periodic tasks and one delayed task.

    Requires :class:`SteadyClock` to be initialized before construction.
    """

    def __init__(self) -> None:
        if not SteadyClock.initialized():
            raise RuntimeError("steady clock is not initialized")
        self._tasks: list[_Task] = []
        self._delayed_task: Callable[[], None] | None = None
        self._delayed_start = Milliseconds(0)
        self._delayed_delay = Milliseconds(0)

    def add_task(self, func: Callable[[int], TaskExecStatus], period: Duration) -> None:
        """Register ``func``, called with its task index every ``period``."""
        if len(self._tasks) >= MAX_TASK_COUNT:
            raise IndexError("too many tasks")
        self._tasks.append(_Task(_as_ms(period), SteadyClock.now(), func))

    def set_task_period(self, index: int, period: Duration) -> None:
        """Change a task's period; an unknown index is ignored."""
        if 0 <= index < len(self._tasks):
            self._tasks[index].period = _as_ms(period)

    def add_delayed_task(self, func: Callable[[], None], delay: Duration) -> None:
        """Call ``func`` once after ``delay``; a zero delay disables it."""
        self._delayed_task = func
        self._delayed_delay = _as_ms(delay)
        self._delayed_start = SteadyClock.now()

    def run(self) -> None:
        """Call every task that is due, then the delayed task if it is due."""
        now = SteadyClock.now()
        for index, task in enumerate(self._tasks):
            if now >= task.timepoint + task.period:
                if task.func(index) == TaskExecStatus.SUCCESS:
                    task.timepoint = now

        if self._delayed_delay.count != 0:
            if now >= self._delayed_start + self._delayed_delay:
                if self._delayed_task is not None:
                    self._delayed_task()
                self._delayed_delay = Milliseconds(0)

    def reset(self) -> None:
        """Restart the period of every task from now."""
        now = SteadyClock.now()
        for task in self._tasks:
            task.timepoint = now