"""Discrete signal filters: moving average, median, exponential and ramp."""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import Any

from emblib.algorithm import clamp
from emblib.circular_buffer import CircularBuffer
from emblib.mathutil import FLT_MAX


class Filter(ABC):
    """Common interface of all filters."""

    @abstractmethod
    def push(self, value: Any) -> None:
        """Feed one input sample."""

    @abstractmethod
    def output(self) -> Any:
        """Return the current filter output."""

    @abstractmethod
    def set_output(self, value: Any) -> None:
        """Force the filter into a steady state at ``value``."""

    @abstractmethod
    def reset(self) -> None:
        """Return the filter to a steady state at zero."""


class MovingAverageFilter(Filter):
    """Average of the last ``size()`` samples.

    With an integral ``value_type`` the average is truncated toward zero.
    """

    def __init__(self, window_size: int, value_type: type = float) -> None:
        if window_size <= 0:
            raise ValueError("window size must be positive")
        self._capacity = window_size
        self._type = value_type
        self._size = window_size
        self._window: list[Any] = [value_type(0)] * window_size
        self._index = 0
        self._sum: Any = value_type(0)
        self.reset()

    def push(self, value: Any) -> None:
        self._sum = self._sum + value - self._window[self._index]
        self._window[self._index] = value
        self._index = (self._index + 1) % self._size

    def output(self) -> Any:
        if issubclass(self._type, numbers.Integral):
            quotient = abs(self._sum) // self._size
            return quotient if self._sum >= 0 else -quotient
        return self._sum / self._type(self._size)

    def set_output(self, value: Any) -> None:
        self._window[: self._size] = [value] * self._size
        self._index = 0
        self._sum = value * self._type(self._size)

    def reset(self) -> None:
        self.set_output(self._type(0))

    def size(self) -> int:
        return self._size

    def resize(self, size: int) -> None:
        """Change the window length, capped at the construction size; zero is ignored."""
        if size == 0:
            return
        self._size = min(size, self._capacity)
        self.reset()


def _check_odd_window(window_size: int) -> None:
    if window_size <= 0 or window_size % 2 != 1:
        raise ValueError("window size must be a positive odd number")


def _median(window: CircularBuffer) -> Any:
    values = sorted(window.data())
    return values[len(values) // 2]


class MedianFilter(Filter):
    """Median of the last ``window_size`` samples; the size must be odd."""

    def __init__(self, window_size: int) -> None:
        _check_odd_window(window_size)
        self._window = CircularBuffer(window_size)
        self._out: Any = 0
        self.reset()

    def push(self, value: Any) -> None:
        self._window.push_back(value)
        self._out = _median(self._window)

    def output(self) -> Any:
        return self._out

    def set_output(self, value: Any) -> None:
        self._window.fill(value)
        self._out = value

    def reset(self) -> None:
        self.set_output(0)


def _smooth_factor(sampling_period: float, time_constant: float) -> float:
    if time_constant == 0:
        raise ValueError("time constant must not be zero")
    return clamp(sampling_period / time_constant, 0.0, 1.0)


def _check_pair(sampling_period: float | None, time_constant: float | None) -> None:
    if (sampling_period is None) != (time_constant is None):
        raise TypeError("give both sampling_period and time_constant or neither")


class ExpFilter(Filter):
    """First-order exponential smoothing filter."""

    def __init__(
        self,
        sampling_period: float | None = None,
        time_constant: float | None = None,
    ) -> None:
        _check_pair(sampling_period, time_constant)
        if sampling_period is None or time_constant is None:
            self._sampling_period = 0.0
            self._time_constant = FLT_MAX
            self._smooth_factor = 0.0
        else:
            self.init(sampling_period, time_constant)
        self._out: Any = 0.0
        self.reset()

    def push(self, value: Any) -> None:
        self._out = self._out + self._smooth_factor * (value - self._out)

    def output(self) -> Any:
        return self._out

    def set_output(self, value: Any) -> None:
        self._out = value

    def reset(self) -> None:
        self.set_output(0.0)

    def init(self, sampling_period: float, time_constant: float) -> None:
        """Set the sampling period and time constant; the factor is held in [0, 1]."""
        self._smooth_factor = _smooth_factor(sampling_period, time_constant)
        self._sampling_period = sampling_period
        self._time_constant = time_constant

    def set_sampling_period(self, value: float) -> None:
        self._smooth_factor = _smooth_factor(value, self._time_constant)
        self._sampling_period = value

    def smooth_factor(self) -> float:
        return self._smooth_factor


class ExpMedianFilter(Filter):
    """Exponential smoothing applied to the median of the last samples."""

    def __init__(
        self,
        window_size: int,
        sampling_period: float | None = None,
        time_constant: float | None = None,
    ) -> None:
        _check_odd_window(window_size)
        _check_pair(sampling_period, time_constant)
        self._window = CircularBuffer(window_size)
        if sampling_period is None or time_constant is None:
            self._sampling_period = 0.0
            self._time_constant = FLT_MAX
            self._smooth_factor = 0.0
        else:
            self.init(sampling_period, time_constant)
        self._out: Any = 0.0
        self.reset()

    def push(self, value: Any) -> None:
        self._window.push_back(value)
        median = _median(self._window)
        self._out = self._out + self._smooth_factor * (median - self._out)

    def output(self) -> Any:
        return self._out

    def set_output(self, value: Any) -> None:
        self._window.fill(value)
        self._out = value

    def reset(self) -> None:
        self.set_output(0.0)

    def init(self, sampling_period: float, time_constant: float) -> None:
        """Set the sampling period and time constant; the factor is held in [0, 1]."""
        self._smooth_factor = _smooth_factor(sampling_period, time_constant)
        self._sampling_period = sampling_period
        self._time_constant = time_constant

    def set_sampling_period(self, value: float) -> None:
        self._smooth_factor = _smooth_factor(value, self._time_constant)
        self._sampling_period = value

    def smooth_factor(self) -> float:
        return self._smooth_factor


class RampFilter(Filter):
    """Moves its output toward the reference by a fixed step per update."""

    def __init__(self, update_period: float | None = None, slope: Any = None) -> None:
        if (update_period is None) != (slope is None):
            raise TypeError("give both update_period and slope or neither")
        if update_period is None:
            self._update_period = 0.0
            self._slope: Any = 0.0
            self._step: Any = 0.0
        else:
            self.init(update_period, slope)
        self._ref: Any = 0.0
        self._out: Any = 0.0
        self.reset()

    def push(self, value: Any) -> None:
        """Set a new reference; the output follows on :meth:`update`."""
        self._ref = value

    def output(self) -> Any:
        return self._out

    def set_output(self, value: Any) -> None:
        self._ref = value
        self._out = value

    def reset(self) -> None:
        self.set_output(0.0)

    def init(self, update_period: float, slope: Any) -> None:
        if not update_period > 0:
            raise ValueError("update period must be positive")
        if not slope > 0:
            raise ValueError("slope must be positive")
        self._update_period = update_period
        self._slope = slope
        self._step = clamp(update_period * slope, -FLT_MAX, FLT_MAX)

    def update(self) -> None:
        """Advance the output one step toward the reference."""
        if self._out < self._ref:
            self._out = min(self._out + self._step, self._ref)
        else:
            self._out = max(self._out - self._step, self._ref)

    def steady(self) -> bool:
        return self._out == self._ref