"""Integer tick durations, a replaceable steady clock and a timeout watchdog."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any, ClassVar, TypeVar

_D = TypeVar("_D", bound="Duration")


class Duration:
    """A whole number of ticks; each tick lasts ``divider`` nanoseconds.

    Arithmetic and ordering are defined only between durations of the same
    unit; use :func:`duration_cast` to convert between units.
    """

    divider: ClassVar[int] = 1
    __slots__ = ("_ticks",)

    def __init__(self, count: int = 0) -> None:
        self._ticks = operator.index(count)

    @property
    def count(self) -> int:
        """Number of ticks."""
        return self._ticks

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._ticks})"

    def _peer_ticks(self, other: Any) -> int | None:
        if type(other) is type(self):
            return other._ticks
        return None

    def __add__(self: _D, other: Any) -> _D:
        ticks = self._peer_ticks(other)
        if ticks is None:
            return NotImplemented
        return type(self)(self._ticks + ticks)

    def __sub__(self: _D, other: Any) -> _D:
        ticks = self._peer_ticks(other)
        if ticks is None:
            return NotImplemented
        return type(self)(self._ticks - ticks)

    def __neg__(self: _D) -> _D:
        return type(self)(-self._ticks)

    def __lt__(self, other: Any) -> bool:
        ticks = self._peer_ticks(other)
        if ticks is None:
            return NotImplemented
        return self._ticks < ticks

    def __le__(self, other: Any) -> bool:
        ticks = self._peer_ticks(other)
        if ticks is None:
            return NotImplemented
        return self._ticks <= ticks

    def __gt__(self, other: Any) -> bool:
        ticks = self._peer_ticks(other)
        if ticks is None:
            return NotImplemented
        return self._ticks > ticks

    def __ge__(self, other: Any) -> bool:
        ticks = self._peer_ticks(other)
        if ticks is None:
            return NotImplemented
        return self._ticks >= ticks

    def __eq__(self, other: object) -> bool:
        ticks = self._peer_ticks(other)
        if ticks is None:
            return NotImplemented
        return self._ticks == ticks

    def __hash__(self) -> int:
        return hash((type(self).divider, self._ticks))


class Nanoseconds(Duration):
    divider = 1
    __slots__ = ()


class Microseconds(Duration):
    divider = 1_000
    __slots__ = ()


class Milliseconds(Duration):
    divider = 1_000_000
    __slots__ = ()


class Seconds(Duration):
    divider = 1_000_000_000
    __slots__ = ()


def duration_cast(target: type[_D], duration: Duration) -> _D:
    """Convert ``duration`` to the unit ``target``, truncating toward zero."""
    total = duration.count * type(duration).divider
    whole = abs(total) // target.divider
    return target(whole if total >= 0 else -whole)


def _zero_clock() -> Milliseconds:
    return Milliseconds(0)


class SteadyClock:
    """Process-wide millisecond clock whose time source the application supplies."""

    _now_getter: ClassVar[Any] = staticmethod(_zero_clock)
    _initialized: ClassVar[bool] = False

    @classmethod
    def init(cls, now_getter: Callable[[], Milliseconds]) -> None:
        """Install the function that reports the current time."""
        cls._now_getter = staticmethod(now_getter)
        cls._initialized = True

    @classmethod
    def now(cls) -> Milliseconds:
        return cls._now_getter()

    @classmethod
    def initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def deinit(cls) -> None:
        """Restore the default source, which always reports zero."""
        cls._now_getter = staticmethod(_zero_clock)
        cls._initialized = False


class Watchdog:
    """Reports whether less than ``timeout`` has passed since the last reset.

    A negative timeout never expires.
    """

    def __init__(self, timeout: Duration | None = None) -> None:
        self._timeout = self._as_ms(timeout)
        self._start = SteadyClock.now()

    @staticmethod
    def _as_ms(timeout: Duration | None) -> Milliseconds:
        if timeout is None:
            return Milliseconds(0)
        return duration_cast(Milliseconds, timeout)

    def good(self) -> bool:
        if self._timeout.count < 0:
            return True
        return not (SteadyClock.now() - self._start > self._timeout)

    def bad(self) -> bool:
        return not self.good()

    def reset(self, timeout: Duration | None = None) -> None:
        """Restart the timer, optionally with a new timeout."""
        if timeout is not None:
            self._timeout = self._as_ms(timeout)
        self._start = SteadyClock.now()