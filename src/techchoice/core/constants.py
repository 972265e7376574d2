"""Shared constants and fuel classification for technology calculations."""

from __future__ import annotations

from enum import Enum

LOGIT_EXP_DEFAULT: float = -6.0

# Fixed output sentinel meaning "no fixed output constraint".
FIXED_OUTPUT_DEFAULT: float = -1.0

# Market info counter value meaning "demand for this fuel is not all fixed".
MKT_NOT_ALL_FIXED: float = -1.0

CAL_DEMAND_KEY = "calDemand"
CAL_FIXED_DEMAND_KEY = "calFixedDemand"

CO2_NAME = "CO2"


class FuelKind(str, Enum):
    """Pricing treatment of a technology's input fuel."""

    NONE = "none"
    RENEWABLE = "renewable"
    MARKET = "market"

    @classmethod
    def from_fuel_name(cls, fuel_name: str | None) -> FuelKind:
        """Classify a fuel name; empty names behave like ``none``."""
        normalized = str(fuel_name or "").strip()
        if normalized in {"", cls.NONE.value}:
            return cls.NONE
        if normalized == cls.RENEWABLE.value:
            return cls.RENEWABLE
        return cls.MARKET

    @property
    def is_priced(self) -> bool:
        """Whether the fuel is priced and metered on the marketplace."""
        return self is FuelKind.MARKET
