"""Per-technology emission lookup maps for reporting.

Maps are keyed by gas name or by a ``(gas, fuel)`` tuple, so names that
happen to contain each other never collide.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from techchoice.emissions.base import GHG


class EmissionsSummary(BaseModel):
    """Emission maps for one technology and period.

    Attributes:
        by_gas: Net emissions keyed by gas
        by_gas_fuel: Net emissions keyed by (gas, fuel)
        fuel_emissions: Gross emissions from fuel keyed by (gas, fuel)
        sequestered_geologic: Geologically stored amount keyed by gas
        sequestered_non_energy: Non-energy sequestered amount keyed by gas
    """

    by_gas: dict[str, float] = Field(default_factory=dict)
    by_gas_fuel: dict[tuple[str, str], float] = Field(default_factory=dict)
    fuel_emissions: dict[tuple[str, str], float] = Field(default_factory=dict)
    sequestered_geologic: dict[str, float] = Field(default_factory=dict)
    sequestered_non_energy: dict[str, float] = Field(default_factory=dict)

    @classmethod
    def build(cls, ghgs: Iterable[GHG], fuel_name: str, period: int) -> EmissionsSummary:
        """Build the maps from scratch from a technology's gases."""
        summary = cls()
        for ghg in ghgs:
            emission = ghg.get_emission(period)
            summary.by_gas[ghg.name] = emission
            summary.by_gas_fuel[(ghg.name, fuel_name)] = emission
            summary.fuel_emissions[(ghg.name, fuel_name)] = ghg.get_emiss_fuel(period)
            summary.sequestered_geologic[ghg.name] = ghg.get_sequest_amount_geologic()
            summary.sequestered_non_energy[ghg.name] = ghg.get_sequest_amount_non_energy()
        return summary

    def get(self, gas_name: str, default: float = 0.0) -> float:
        """Net emissions of one gas."""
        return self.by_gas.get(gas_name, default)

    def to_dict(self) -> dict[str, Any]:
        """Convert to nested dictionaries (gas -> fuel -> value for tuple keys)."""
        return {
            "by_gas": dict(self.by_gas),
            "by_gas_fuel": _nest(self.by_gas_fuel),
            "fuel_emissions": _nest(self.fuel_emissions),
            "sequestered_geologic": dict(self.sequestered_geologic),
            "sequestered_non_energy": dict(self.sequestered_non_energy),
        }


def _nest(values: dict[tuple[str, str], float]) -> dict[str, dict[str, float]]:
    nested: dict[str, dict[str, float]] = {}
    for (gas, fuel), value in values.items():
        nested.setdefault(gas, {})[fuel] = value
    return nested
