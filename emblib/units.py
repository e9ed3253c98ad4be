"""Values tagged with a physical unit so that different units cannot be mixed."""

from __future__ import annotations

import functools
import numbers
from typing import Any


@functools.total_ordering
class NamedUnit:
    """A number carrying its unit; arithmetic works only within one unit."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = 0.0) -> None:
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __add__(self, other: Any) -> Any:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._value + other._value)

    def __sub__(self, other: Any) -> Any:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._value - other._value)

    def __mul__(self, factor: Any) -> Any:
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return type(self)(self._value * factor)

    def __rmul__(self, factor: Any) -> Any:
        return self.__mul__(factor)

    def __truediv__(self, divisor: Any) -> Any:
        if not isinstance(divisor, numbers.Real):
            return NotImplemented
        return type(self)(self._value / divisor)

    def __neg__(self) -> Any:
        return type(self)(-self._value)

    def __abs__(self) -> Any:
        return type(self)(abs(self._value))

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


class Rpm(NamedUnit):
    """Mechanical speed in revolutions per minute."""

    __slots__ = ()


class Eradps(NamedUnit):
    """Electrical speed in radians per second."""

    __slots__ = ()


class Erad(NamedUnit):
    """Electrical angle in radians."""

    __slots__ = ()


class Edeg(NamedUnit):
    """Electrical angle in degrees."""

    __slots__ = ()


class Mrad(NamedUnit):
    """Mechanical angle in radians."""

    __slots__ = ()


class Mdeg(NamedUnit):
    """Mechanical angle in degrees."""

    __slots__ = ()