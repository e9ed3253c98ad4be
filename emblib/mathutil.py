"""Numeric helpers: constants, angle utilities, ranges, integrators and per-unit values."""

from __future__ import annotations

import functools
import math
import numbers
import operator
from typing import Any, Generic, TypeVar

from emblib.algorithm import clamp

T = TypeVar("T")

FLT_MAX = 3.4028234663852886e38

PI = math.pi
PI_OVER_2 = PI / 2
PI_OVER_4 = PI / 4
PI_OVER_3 = PI / 3
PI_OVER_6 = PI / 6
TWO_PI = 2 * PI
SQRT_2 = math.sqrt(2.0)
SQRT_3 = math.sqrt(3.0)
INV_SQRT3 = 0.57735026918963


def sgn(v: Any) -> int:
    """Return 1, -1 or 0 according to the sign of ``v``."""
    return int(v > 0) - int(v < 0)


def to_rad(deg: float) -> float:
    return PI * deg / 180


def to_deg(rad: float) -> float:
    return 180 * rad / PI


def ispow2(v: int) -> bool:
    """Return True if the non-negative integer ``v`` is a power of two."""
    v = operator.index(v)
    if v < 0:
        raise ValueError("value must not be negative")
    return v != 0 and (v & (v - 1)) == 0


def rem_2pi(v: float) -> float:
    """Wrap an angle into ``[0, 2*pi)``."""
    v = math.fmod(v, TWO_PI)
    if v < 0:
        v += TWO_PI
    return v


def rem_pi(v: float) -> float:
    """Wrap an angle into ``[-pi, pi)``."""
    v = math.fmod(v + PI, TWO_PI)
    if v < 0:
        v += TWO_PI
    return v - PI


class Range(Generic[T]):
    """Closed interval; the bounds are ordered on construction."""

    def __init__(self, v1: T, v2: T) -> None:
        if v1 < v2:  # type: ignore[operator]
            self._lower, self._upper = v1, v2
        else:
            self._lower, self._upper = v2, v1

    def __repr__(self) -> str:
        return f"Range({self._lower!r}, {self._upper!r})"

    def contains(self, v: T) -> bool:
        return self._lower <= v <= self._upper  # type: ignore[operator]

    def lower_bound(self) -> T:
        return self._lower

    def set_lower_bound(self, v: T) -> None:
        """Move the lower bound; ignored if it would pass the upper bound."""
        if v <= self._upper:  # type: ignore[operator]
            self._lower = v

    def upper_bound(self) -> T:
        return self._upper

    def set_upper_bound(self, v: T) -> None:
        """Move the upper bound; ignored if it would pass the lower bound."""
        if v >= self._lower:  # type: ignore[operator]
            self._upper = v

    def length(self) -> T:
        return self._upper - self._lower  # type: ignore[operator]


class Integrator(Generic[T]):
    """Discrete integrator whose output is held within ``output_range``."""

    def __init__(self, ts: Any, output_range: Range[T], initvalue: T) -> None:
        self._ts = ts
        self._initval = initvalue
        self.output_range: Range[T] = Range(
            output_range.lower_bound(), output_range.upper_bound()
        )
        self.reset()

    def _limit(self, v: T) -> T:
        return clamp(v, self.output_range.lower_bound(), self.output_range.upper_bound())

    def push(self, v: T) -> None:
        """Integrate ``v`` over one sampling period."""
        self._sum = self._limit(self._sum + v * self._ts)  # type: ignore[operator]

    def add(self, v: T) -> None:
        """Add ``v`` directly to the accumulated sum."""
        self._sum = self._limit(self._sum + v)  # type: ignore[operator]

    def output(self) -> T:
        return self._sum

    def reset(self) -> None:
        self._sum = self._limit(self._initval)

    def set_sampling_period(self, v: Any) -> None:
        self._ts = v


def _saturate(value: float, base: float | None, lower: float, upper: float) -> float:
    v = float(value) if base is None else value / base
    return clamp(float(v), lower, upper)


@functools.total_ordering
class _PerUnit:
    """Shared comparison and conversion behaviour of per-unit values."""

    __slots__ = ("_value",)
    _value: float

    @property
    def value(self) -> float:
        return self._value

    def __float__(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


class SignedPerUnit(_PerUnit):
    """Per-unit value saturated to ``[-1, 1]``."""

    __slots__ = ()

    def __init__(self, value: float = 0.0, base: float | None = None) -> None:
        self._value = _saturate(value, base, -1.0, 1.0)

    def __add__(self, other: Any) -> Any:
        if type(other) is not SignedPerUnit:
            return NotImplemented
        return SignedPerUnit(self._value + other._value)

    def __sub__(self, other: Any) -> Any:
        if type(other) is not SignedPerUnit:
            return NotImplemented
        return SignedPerUnit(self._value - other._value)

    def __mul__(self, factor: Any) -> Any:
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return SignedPerUnit(self._value * factor)

    def __rmul__(self, factor: Any) -> Any:
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return SignedPerUnit(factor * self._value)

    def __truediv__(self, divisor: Any) -> Any:
        if not isinstance(divisor, numbers.Real):
            return NotImplemented
        return SignedPerUnit(self._value / divisor)


class UnsignedPerUnit(_PerUnit):
    """Per-unit value saturated to ``[0, 1]``."""

    __slots__ = ()

    def __init__(self, value: float = 0.0, base: float | None = None) -> None:
        self._value = _saturate(value, base, 0.0, 1.0)

    def __add__(self, other: Any) -> Any:
        if type(other) is not UnsignedPerUnit:
            return NotImplemented
        return UnsignedPerUnit(self._value + other._value)

    def __sub__(self, other: Any) -> Any:
        if type(other) is not UnsignedPerUnit:
            return NotImplemented
        return UnsignedPerUnit(self._value - other._value)

    def __mul__(self, factor: Any) -> Any:
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return UnsignedPerUnit(self._value * factor)

    def __rmul__(self, factor: Any) -> Any:
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return UnsignedPerUnit(factor * self._value)

    def __truediv__(self, divisor: Any) -> Any:
        if not isinstance(divisor, numbers.Real):
            return NotImplemented
        return UnsignedPerUnit(self._value / divisor)