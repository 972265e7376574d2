"""Technology parameter containers.

A technology either owns its :class:`TechnologyParameters` or holds a
reference to a shared block from the :class:`ParameterStore`. Parameter
blocks are frozen, so sharing a reference across regions is safe.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ParameterSource(str, Enum):
    """Where a technology's parameters come from."""

    OWNED = "owned"
    SHARED = "shared"


class TechnologyParameters(BaseModel):
    """Physical and economic parameters of one technology.

    Attributes:
        name: Technology name
        fuel_name: Input fuel; "none"/"" or "renewable" are not priced
        efficiency: Raw output/input ratio
        efficiency_penalty: Fractional efficiency loss
        non_energy_cost: Raw non-energy cost per unit output
        non_energy_cost_penalty: Fractional non-energy cost increase
        fuel_multiplier: Multiplier on the fuel price
        fuel_pref_elasticity: Elasticity of share to scaled GDP per capita

    Example:
        >>> params = TechnologyParameters(name="coal", fuel_name="coal", efficiency=0.4)
        >>> params.effective_efficiency
        0.4
    """

    name: str = Field(..., min_length=1, description="Technology name")
    fuel_name: str = Field(default="", description="Input fuel name")
    efficiency: float = Field(default=1.0, gt=0, description="Output/input ratio")
    efficiency_penalty: float = Field(
        default=0.0, ge=0, lt=1, description="Fractional efficiency loss"
    )
    non_energy_cost: float = Field(default=0.0, description="Non-energy cost")
    non_energy_cost_penalty: float = Field(
        default=0.0, description="Fractional non-energy cost increase"
    )
    fuel_multiplier: float = Field(default=1.0, description="Fuel price multiplier")
    fuel_pref_elasticity: float = Field(
        default=0.0, description="Fuel preference elasticity"
    )

    model_config = {"frozen": True}

    @property
    def effective_efficiency(self) -> float:
        """Efficiency after the efficiency penalty."""
        return self.efficiency * (1.0 - self.efficiency_penalty)

    @property
    def effective_non_energy_cost(self) -> float:
        """Non-energy cost after the cost penalty."""
        return self.non_energy_cost * (1.0 + self.non_energy_cost_penalty)

    def to_dict(self) -> dict[str, Any]:
        """Convert parameters to dictionary."""
        return self.model_dump()


class ParameterStore:
    """Shared, read-only technology parameters keyed by name and year.

    Technologies flagged to use global parameters resolve their handle
    from the store once, in ``complete_init``.
    """

    def __init__(self) -> None:
        self._params: dict[tuple[str, int], TechnologyParameters] = {}

    def add(self, year: int, params: TechnologyParameters) -> None:
        """Add a parameter block for ``(params.name, year)``.

        Raises:
            ValueError: If the key already exists
        """
        key = (params.name, year)
        if key in self._params:
            msg = f"Global technology '{params.name}' for {year} already exists"
            raise ValueError(msg)
        self._params[key] = params

    def get(self, name: str, year: int) -> TechnologyParameters:
        """Get the shared parameters for a technology vintage.

        Raises:
            KeyError: If no parameters were registered
        """
        key = (name, year)
        if key not in self._params:
            msg = f"Global technology '{name}' for {year} not found"
            raise KeyError(msg)
        return self._params[key]

    def find(self, name: str, year: int) -> TechnologyParameters | None:
        """Get the shared parameters or ``None`` when absent."""
        return self._params.get((name, year))

    def __contains__(self, key: tuple[str, int]) -> bool:
        return key in self._params

    def __len__(self) -> int:
        return len(self._params)

    def list_technologies(self) -> list[tuple[str, int]]:
        """Return all (name, year) keys."""
        return list(self._params.keys())
