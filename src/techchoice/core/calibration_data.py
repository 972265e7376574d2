"""Calibration targets for technologies.

A calibration target anchors a technology to an observed input or output
quantity in its vintage year. Targets convert between input and output
using the technology's effective efficiency.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, PrivateAttr

if TYPE_CHECKING:
    from techchoice.markets.interfaces import Demographics


class CalibrationTarget(BaseModel, ABC):
    """Base class for technology calibration targets."""

    model_config = {"frozen": False}

    def init_calc(self, demographics: Demographics | None, period: int) -> None:
        """Per-period initialization. Most targets need none."""

    @abstractmethod
    def get_cal_input(self, efficiency: float) -> float:
        """Calibrated input at the given efficiency."""
        ...

    @abstractmethod
    def get_cal_output(self, efficiency: float) -> float:
        """Calibrated output at the given efficiency."""
        ...

    @abstractmethod
    def scale_value(self, scale_factor: float) -> None:
        """Scale the calibration value in place."""
        ...

    def clone(self) -> CalibrationTarget:
        """Return an independent copy."""
        return self.model_copy(deep=True)


class CalDataInput(CalibrationTarget):
    """Calibration on an observed input quantity."""

    value: float = Field(..., description="Calibrated input")

    def get_cal_input(self, efficiency: float) -> float:
        return self.value

    def get_cal_output(self, efficiency: float) -> float:
        return self.value * efficiency

    def scale_value(self, scale_factor: float) -> None:
        self.value *= scale_factor


class CalDataOutput(CalibrationTarget):
    """Calibration on an observed output quantity."""

    value: float = Field(..., description="Calibrated output")

    def get_cal_input(self, efficiency: float) -> float:
        assert efficiency > 0
        return self.value / efficiency

    def get_cal_output(self, efficiency: float) -> float:
        return self.value

    def scale_value(self, scale_factor: float) -> None:
        self.value *= scale_factor


class CalDataOutputPercap(CalibrationTarget):
    """Calibration on per-capita output, scaled by population each period."""

    value_per_capita: float = Field(..., description="Calibrated output per capita")
    _total_output: float = PrivateAttr(default=0.0)

    def init_calc(self, demographics: Demographics | None, period: int) -> None:
        assert demographics is not None, "per-capita calibration needs demographics"
        self._total_output = self.value_per_capita * demographics.get_total(period)

    def get_cal_input(self, efficiency: float) -> float:
        assert efficiency > 0
        return self._total_output / efficiency

    def get_cal_output(self, efficiency: float) -> float:
        return self._total_output

    def scale_value(self, scale_factor: float) -> None:
        self.value_per_capita *= scale_factor
        self._total_output *= scale_factor
