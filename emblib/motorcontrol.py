"""Motor-control helpers: speed and angle conversions, reference-frame transforms and PWM."""

from __future__ import annotations

import math
import operator
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from emblib.algorithm import clamp, minmax_element
from emblib.mathutil import (
    INV_SQRT3,
    PI_OVER_3,
    SQRT_3,
    TWO_PI,
    UnsignedPerUnit,
    rem_2pi,
    to_deg,
    to_rad,
)
from emblib.units import Edeg, Erad, Eradps, Mdeg, Mrad, NamedUnit, Rpm


class Phase3(IntEnum):
    """Phases of a three-phase system, usable as indexes into phase triples."""

    A = 0
    B = 1
    C = 2


def to_eradps(n: Any, p: int) -> Any:
    """Convert mechanical speed in rpm to electrical rad/s for ``p`` pole pairs.

    A plain number gives a float; an :class:`Rpm` gives an :class:`Eradps`.
    """
    if isinstance(n, Rpm):
        return Eradps(to_eradps(n.value, p))
    if isinstance(n, NamedUnit):
        raise TypeError("speed in rpm is required")
    return TWO_PI * float(p) * n / 60.0


def to_rpm(w: Any, p: int) -> Any:
    """Convert electrical rad/s to mechanical rpm for ``p`` pole pairs.

    A plain number gives a float; an :class:`Eradps` gives an :class:`Rpm`.
    """
    if isinstance(w, Eradps):
        return Rpm(to_rpm(w.value, p))
    if isinstance(w, NamedUnit):
        raise TypeError("speed in electrical rad/s is required")
    return 60.0 * w / (TWO_PI * float(p))


def _pole_pairs(p: int) -> int:
    p = operator.index(p)
    if p <= 0:
        raise ValueError("pole pair count must be positive")
    return p


class MotorSpeed:
    """Rotor speed that can be read in electrical rad/s or in mechanical rpm."""

    __slots__ = ("_p", "_w")

    def __init__(self, p: int, value: Eradps | Rpm | None = None) -> None:
        self._p = _pole_pairs(p)
        self._w = 0.0
        if value is not None:
            self.set(value)

    @property
    def p(self) -> int:
        """Number of pole pairs."""
        return self._p

    def __repr__(self) -> str:
        return f"MotorSpeed(p={self._p}, eradps={self._w!r})"

    def set(self, value: Eradps | Rpm) -> None:
        """Assign a new speed given in either unit."""
        if isinstance(value, Eradps):
            self._w = float(value.value)
        elif isinstance(value, Rpm):
            self._w = TWO_PI * float(self._p) * value.value / 60.0
        else:
            raise TypeError("speed must be Eradps or Rpm")

    def eradps(self) -> Eradps:
        return Eradps(self._w)

    def rpm(self) -> Rpm:
        return Rpm(60.0 * self._w / (TWO_PI * float(self._p)))

    def __mul__(self, factor: Any) -> Any:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return MotorSpeed(self._p, self.eradps() * factor)

    def __rmul__(self, factor: Any) -> Any:
        return self.__mul__(factor)

    def __truediv__(self, divisor: Any) -> Any:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return MotorSpeed(self._p, self.eradps() / divisor)


class MotorAngle:
    """Rotor angle readable in electrical or mechanical radians or degrees."""

    __slots__ = ("_p", "_rad")

    def __init__(self, p: int, value: Erad | Mrad | Edeg | Mdeg | None = None) -> None:
        self._p = _pole_pairs(p)
        self._rad = 0.0
        if value is not None:
            self.set(value)

    @property
    def p(self) -> int:
        """Number of pole pairs."""
        return self._p

    def __repr__(self) -> str:
        return f"MotorAngle(p={self._p}, erad={self._rad!r})"

    def set(self, value: Erad | Mrad | Edeg | Mdeg) -> None:
        """Assign a new angle given in any of the four angle units."""
        if isinstance(value, Erad):
            self._rad = float(value.value)
        elif isinstance(value, Mrad):
            self._rad = value.value * float(self._p)
        elif isinstance(value, Edeg):
            self._rad = to_rad(value.value)
        elif isinstance(value, Mdeg):
            self._rad = to_rad(value.value) * float(self._p)
        else:
            raise TypeError("angle must be Erad, Mrad, Edeg or Mdeg")

    def erad(self) -> Erad:
        return Erad(self._rad)

    def mrad(self) -> Mrad:
        return Mrad(self._rad / float(self._p))

    def edeg(self) -> Edeg:
        return Edeg(to_deg(self._rad))

    def mdeg(self) -> Mdeg:
        return Mdeg(to_deg(self._rad) / float(self._p))


@dataclass(frozen=True)
class VecAlpha:
    """Space vector in polar form: magnitude and angle."""

    mag: float
    theta: float


@dataclass(frozen=True)
class VecAlphaBeta:
    """Space vector in the stationary alpha-beta frame."""

    alpha: float
    beta: float


@dataclass(frozen=True)
class VecDq:
    """Space vector in the rotating d-q frame."""

    d: float
    q: float


def park_transform(v: VecAlphaBeta, sine: float, cosine: float) -> VecDq:
    """Rotate an alpha-beta vector into the d-q frame."""
    return VecDq(
        d=v.alpha * cosine + v.beta * sine,
        q=v.beta * cosine - v.alpha * sine,
    )


def invpark_transform(v: VecDq, sine: float, cosine: float) -> VecAlphaBeta:
    """Rotate a d-q vector back into the alpha-beta frame."""
    return VecAlphaBeta(
        alpha=v.d * cosine - v.q * sine,
        beta=v.q * cosine + v.d * sine,
    )


def clarke_transform(
    a: float | Sequence[float], b: float | None = None, c: float | None = None
) -> VecAlphaBeta:
    """Clarke transform of phase quantities.

    Accepts three phase values, a sequence of three, or two phase values
    (the third being implied by a zero sum).
    """
    if b is None and c is None:
        pa, pb, pc = a  # type: ignore[misc]
        return VecAlphaBeta(alpha=pa, beta=(pb - pc) * INV_SQRT3)
    if b is None:
        raise TypeError("phase b is required when phase c is given")
    if c is None:
        return VecAlphaBeta(alpha=a, beta=(a + 2 * b) * INV_SQRT3)  # type: ignore[operator]
    return VecAlphaBeta(alpha=a, beta=(b - c) * INV_SQRT3)  # type: ignore[arg-type]


def invclarke_transform(v: VecAlphaBeta) -> tuple[float, float, float]:
    """Return the three phase quantities of an alpha-beta vector."""
    return (
        v.alpha,
        (-v.alpha + SQRT_3 * v.beta) * 0.5,
        (-v.alpha - SQRT_3 * v.beta) * 0.5,
    )


def calculate_sinpwm(
    v_s: VecAlphaBeta, v_dc: float
) -> tuple[UnsignedPerUnit, UnsignedPerUnit, UnsignedPerUnit]:
    """Duty cycles of sinusoidal PWM for the voltage vector ``v_s``."""
    voltage_base = v_dc / 1.5
    a, b, c = (UnsignedPerUnit(v / voltage_base) for v in invclarke_transform(v_s))
    return a, b, c


def calculate_svpwm(
    v_s: VecAlpha, v_dc: float
) -> tuple[UnsignedPerUnit, UnsignedPerUnit, UnsignedPerUnit]:
    """Duty cycles of space-vector PWM for the voltage vector ``v_s``."""
    theta_s = rem_2pi(v_s.theta)
    mag = clamp(v_s.mag, 0.0, v_dc / SQRT_3)

    sector = int(theta_s / PI_OVER_3)
    theta = theta_s - float(sector) * PI_OVER_3
    sector %= 6

    tb1 = SQRT_3 * (mag / v_dc) * math.sin(PI_OVER_3 - theta)
    tb2 = SQRT_3 * (mag / v_dc) * math.sin(theta)
    tb0 = (1.0 - tb1 - tb2) / 2.0

    full = tb1 + tb2 + tb0
    pulses = {
        0: (full, tb2 + tb0, tb0),
        1: (tb1 + tb0, full, tb0),
        2: (tb0, full, tb2 + tb0),
        3: (tb0, tb1 + tb0, full),
        4: (tb2 + tb0, tb0, full),
        5: (full, tb0, tb1 + tb0),
    }[sector]
    a, b, c = (UnsignedPerUnit(p) for p in pulses)
    return a, b, c


def compensate_deadtime_v1(
    dutycycles: Sequence[UnsignedPerUnit],
    currents: Sequence[float],
    current_threshold: float,
    pwm_period: float,
    deadtime: float,
) -> tuple[UnsignedPerUnit, ...]:
    """Shift each duty cycle by the dead time according to its current's sign."""
    deadtime_dutycycle = UnsignedPerUnit(deadtime / pwm_period)
    result = []
    for duty, current in zip(dutycycles, currents, strict=True):
        if current > current_threshold:
            result.append(duty + deadtime_dutycycle)
        elif current < -current_threshold:
            result.append(duty - deadtime_dutycycle)
        else:
            result.append(duty)
    return tuple(result)


def compensate_deadtime_v2(
    dutycycles: Sequence[UnsignedPerUnit],
    currents: Sequence[float],
    current_threshold: float,
    pwm_period: float,
    deadtime: float,
) -> tuple[UnsignedPerUnit, ...]:
    """Compensate dead time on the single phase whose current sign differs.

    Kirchhoff's current law tells whether one current is positive and two
    negative, or the other way round; only that phase is corrected, by twice
    the dead-time duty cycle. ``current_threshold`` is not used.
    """
    if len(dutycycles) != len(currents):
        raise ValueError("duty cycles and currents differ in length")
    result = list(dutycycles)
    deadtime_dutycycle = UnsignedPerUnit(deadtime / pwm_period)
    min_index, max_index = minmax_element(currents)
    balance = currents[min_index] + currents[max_index]
    if balance > 0:
        result[max_index] = result[max_index] + 2 * deadtime_dutycycle
    elif balance < 0:
        result[min_index] = result[min_index] - 2 * deadtime_dutycycle
    return tuple(result)