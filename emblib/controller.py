"""Proportional and proportional-integral controllers with output limits."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from emblib.algorithm import clamp
from emblib.mathutil import FLT_MAX


class ControllerLogic(Enum):
    """Sign convention of the control error."""

    DIRECT = "direct"
    INVERSE = "inverse"

    def error(self, ref: float, meas: float) -> float:
        if self is ControllerLogic.DIRECT:
            return ref - meas
        return meas - ref


class PController:
    """Proportional controller with a saturated output."""

    def __init__(
        self, logic: ControllerLogic, kp: float, lower_limit: float, upper_limit: float
    ) -> None:
        self.logic = ControllerLogic(logic)
        self.kp = kp
        self.lower_limit = lower_limit
        self.upper_limit = upper_limit
        self._out = 0.0

    def push(self, ref: float, meas: float) -> None:
        out = self.kp * self.logic.error(ref, meas)
        self._out = clamp(out, self.lower_limit, self.upper_limit)

    def reset(self) -> None:
        self._out = 0.0

    def output(self) -> float:
        return self._out


class AbstractPIController(ABC):
    """Shared state of the PI controllers; subclasses choose the anti-windup scheme."""

    def __init__(
        self,
        logic: ControllerLogic,
        kp: float,
        ki: float,
        ts: float,
        lower_limit: float,
        upper_limit: float,
    ) -> None:
        self.logic = ControllerLogic(logic)
        self.kp = kp
        self.ki = ki
        self.ts = ts
        self.lower_limit = lower_limit
        self.upper_limit = upper_limit
        self._out_i = 0.0
        self._out = 0.0

    @abstractmethod
    def push(self, ref: float, meas: float) -> None:
        """Process one sample of reference and measurement."""

    def reset(self) -> None:
        self._out_i = 0.0
        self._out = 0.0

    def output(self) -> float:
        return self._out

    def integral(self) -> float:
        return self._out_i


class BackcalcPIController(AbstractPIController):
    """PI controller with back-calculation anti-windup of gain ``kc``."""

    def __init__(
        self,
        logic: ControllerLogic,
        kp: float,
        ki: float,
        ts: float,
        kc: float,
        lower_limit: float,
        upper_limit: float,
    ) -> None:
        super().__init__(logic, kp, ki, ts, lower_limit, upper_limit)
        self.kc = kc

    def push(self, ref: float, meas: float) -> None:
        error = self.logic.error(ref, meas)
        out = clamp(error * self.kp + self._out_i, -FLT_MAX, FLT_MAX)
        self._out = clamp(out, self.lower_limit, self.upper_limit)
        out_i = self._out_i + self.ki * self.ts * error - self.kc * (out - self._out)
        self._out_i = clamp(out_i, -FLT_MAX, FLT_MAX)


class ClampingPIController(AbstractPIController):
    """PI controller with trapezoidal integration and integrator clamping."""

    def __init__(
        self,
        logic: ControllerLogic,
        kp: float,
        ki: float,
        ts: float,
        lower_limit: float,
        upper_limit: float,
    ) -> None:
        super().__init__(logic, kp, ki, ts, lower_limit, upper_limit)
        self._error = 0.0

    def push(self, ref: float, meas: float) -> None:
        error = self.logic.error(ref, meas)
        out_p = error * self.kp
        out_i = (error + self._error) * 0.5 * self.ki * self.ts + self._out_i
        self._error = error
        out = out_p + out_i

        if out > self.upper_limit:
            self._out = self.upper_limit
            if out_p < self.upper_limit:
                self._out_i = self.upper_limit - out_p
        elif out < self.lower_limit:
            self._out = self.lower_limit
            if out_p > self.lower_limit:
                self._out_i = self.lower_limit - out_p
        else:
            self._out = out
            self._out_i = out_i

    def reset(self) -> None:
        super().reset()
        self._error = 0.0