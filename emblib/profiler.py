"""Context managers that measure and report how long a block of code takes."""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from emblib.chrono import Duration, Nanoseconds, duration_cast

MESSAGE_LEN_MAX = 32
ASYNC_CHANNELS = 10


def _zero_time() -> Nanoseconds:
    return Nanoseconds(0)


def _zero_clock() -> int:
    return 0


def _short(message: str) -> str:
    return message[: MESSAGE_LEN_MAX - 1]


def _nanoseconds(now: Callable[[], Duration]) -> int:
    return duration_cast(Nanoseconds, now()).count


class DurationLogger:
    """Prints the time a ``with`` block took, in microseconds."""

    _time_now: ClassVar[Any] = staticmethod(_zero_time)

    def __init__(self, message: str) -> None:
        self._message = _short(message)
        self._start = 0

    @classmethod
    def init(cls, time_now: Callable[[], Duration]) -> None:
        """Install the function that reports the current time."""
        cls._time_now = staticmethod(time_now)

    def __enter__(self) -> DurationLogger:
        self._start = _nanoseconds(type(self)._time_now)
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> bool:
        finish = _nanoseconds(type(self)._time_now)
        if finish < self._start:
            print(f"{self._message}: timer overflow")
        else:
            print(f"{self._message}: {(finish - self._start) / 1000:.3f} us")
        return False


class ClockDurationLogger:
    """Prints the clock cycles a ``with`` block took, using a down-counting timer."""

    _time_now: ClassVar[Any] = staticmethod(_zero_clock)

    def __init__(self, message: str) -> None:
        self._message = _short(message)
        self._start = 0

    @classmethod
    def init(cls, time_now: Callable[[], int]) -> None:
        """Install the function that reads the down-counting timer."""
        cls._time_now = staticmethod(time_now)

    def __enter__(self) -> ClockDurationLogger:
        self._start = operator.index(type(self)._time_now())
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> bool:
        finish = operator.index(type(self)._time_now())
        if finish > self._start:
            print(f"{self._message}: timer overflow")
        else:
            print(f"{self._message}: {self._start - finish} clock cycles")
        return False


@dataclass
class _Record:
    message: str = ""
    value: float = 0.0


class AsyncDurationLogger:
    """Stores the time a ``with`` block took in one of ten channels.

    The stored values are printed later by :meth:`report`.
    """

    _time_now: ClassVar[Any] = staticmethod(_zero_time)
    _records: ClassVar[list[_Record]] = [_Record() for _ in range(ASYNC_CHANNELS)]

    def __init__(self, message: str, channel: int) -> None:
        channel = operator.index(channel)
        if not 0 <= channel < ASYNC_CHANNELS:
            raise IndexError("channel out of range")
        self._channel = channel
        self._message = message
        self._start = 0

    @classmethod
    def init(cls, time_now: Callable[[], Duration]) -> None:
        """Install the function that reports the current time."""
        cls._time_now = staticmethod(time_now)

    def __enter__(self) -> AsyncDurationLogger:
        AsyncDurationLogger._records[self._channel].message = self._message
        self._start = _nanoseconds(type(self)._time_now)
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> bool:
        finish = _nanoseconds(type(self)._time_now)
        record = AsyncDurationLogger._records[self._channel]
        if finish < self._start:
            record.value = 0.0
        else:
            record.value = (finish - self._start) / 1000
        return False

    @classmethod
    def report(cls) -> None:
        """Print every channel whose last measured duration is not zero."""
        for record in AsyncDurationLogger._records:
            if record.value != 0:
                print(f"{record.message}: {record.value:.3f} us")