"""Greenhouse gas base class.

A GHG object computes one gas's emissions for its technology each period,
values those emissions per unit of output for the cost calculation, and
keeps per-period state for reporting. Emissions are driven by fuel input
unless the gas is flagged as output driven.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, model_validator

from techchoice.markets.interfaces import NO_MARKET_PRICE

if TYPE_CHECKING:
    from techchoice.markets.interfaces import GDP, Marketplace
    from techchoice.outputs.base import Output
    from techchoice.reporting.visitor import Visitor

logger = logging.getLogger(__name__)


class GHG(BaseModel):
    """Base class for technology emissions of one gas.

    Attributes:
        name: Gas name; also the name of its constraint/tax market
        unit: Emissions unit
        gwp: Global warming potential applied to the gas price
        emissions_coef: Emissions per unit of driver (input or output)
        output_driven: Drive emissions from primary output instead of input
        remove_fraction: Fraction captured and stored geologically
        storage_cost: Cost per unit of captured emissions
        non_energy_fraction: Fraction sequestered in non-energy products
    """

    name: str = Field(..., min_length=1, description="Gas name")
    unit: str = Field(default="Tg", description="Emissions unit")
    gwp: float = Field(default=1.0, description="Global warming potential")
    emissions_coef: float = Field(default=0.0, description="Emissions per unit driver")
    output_driven: bool = Field(default=False, description="Driven by primary output")
    remove_fraction: float = Field(default=0.0, ge=0, le=1, description="Captured fraction")
    storage_cost: float = Field(default=0.0, description="Cost per unit captured")
    non_energy_fraction: float = Field(
        default=0.0, ge=0, le=1, description="Fraction sequestered in non-energy use"
    )

    emissions: dict[int, float] = Field(default_factory=dict, description="Net emissions")
    emissions_fuel: dict[int, float] = Field(
        default_factory=dict, description="Gross emissions from fuel"
    )
    carbon_tax_paid: dict[int, float] = Field(default_factory=dict, description="Tax paid")
    sequestered_geologic: float = Field(default=0.0, description="Last geologic storage")
    sequestered_non_energy: float = Field(default=0.0, description="Last non-energy storage")

    model_config = {"frozen": False}

    @model_validator(mode="after")
    def check_fractions(self) -> GHG:
        if self.remove_fraction + self.non_energy_fraction > 1.0:
            msg = f"GHG '{self.name}': removed and non-energy fractions exceed 1"
            raise ValueError(msg)
        return self

    def init_calc(
        self,
        region_name: str,
        fuel_name: str,
        subsector_info: Mapping[str, Any] | None,
        marketplace: Marketplace,
        period: int,
    ) -> None:
        """Per-period initialization."""

    def _gross_per_output(self, efficiency: float) -> float:
        if self.output_driven:
            return self.emissions_coef
        assert efficiency > 0
        return self.emissions_coef / efficiency

    def _gas_price(self, region_name: str, marketplace: Marketplace, period: int) -> float:
        price = marketplace.get_price(self.name, region_name, period)
        # No market means no policy on this gas.
        return 0.0 if price == NO_MARKET_PRICE else price

    def get_ghg_value(
        self,
        region_name: str,
        fuel_name: str,
        outputs: Sequence[Output],
        efficiency: float,
        marketplace: Marketplace,
        period: int,
    ) -> float:
        """Emissions cost per unit of primary output (tax plus storage)."""
        gross = self._gross_per_output(efficiency)
        price = self._gas_price(region_name, marketplace, period)
        emitted = gross * (1.0 - self.remove_fraction - self.non_energy_fraction)
        captured = gross * self.remove_fraction
        return price * self.gwp * emitted + self.storage_cost * captured

    def calc_emission(
        self,
        region_name: str,
        fuel_name: str,
        input_value: float,
        outputs: Sequence[Output],
        gdp: GDP | None,
        marketplace: Marketplace,
        period: int,
    ) -> None:
        """Calculate this period's emissions from the technology's flows."""
        if self.output_driven:
            driver = outputs[0].get_physical_output(period) if outputs else 0.0
        else:
            driver = input_value

        gross = self.emissions_coef * driver
        self.sequestered_geologic = gross * self.remove_fraction
        self.sequestered_non_energy = gross * self.non_energy_fraction
        net = gross - self.sequestered_geologic - self.sequestered_non_energy

        self.emissions_fuel[period] = gross
        self.emissions[period] = net
        self.carbon_tax_paid[period] = (
            net * self.gwp * self._gas_price(region_name, marketplace, period)
        )
        marketplace.add_to_demand(self.name, region_name, net, period)

    def get_emission(self, period: int) -> float:
        return self.emissions.get(period, 0.0)

    def get_emiss_fuel(self, period: int) -> float:
        return self.emissions_fuel.get(period, 0.0)

    def get_sequest_amount_geologic(self) -> float:
        return self.sequestered_geologic

    def get_sequest_amount_non_energy(self) -> float:
        return self.sequestered_non_energy

    def get_carbon_tax_paid(self, region_name: str, period: int) -> float:
        return self.carbon_tax_paid.get(period, 0.0)

    def copy_ghg_parameters(self, previous: GHG) -> None:
        """Carry emission parameters forward from the previous period's gas.

        Args:
            previous: Gas of the same name from the previous period

        Raises:
            ValueError: If the copied fractions sum to more than 1
        """
        if previous.name != self.name:
            logger.warning(
                "Cannot copy GHG parameters from %s into %s", previous.name, self.name
            )
            return
        self.gwp = previous.gwp
        self.emissions_coef = previous.emissions_coef
        self.output_driven = previous.output_driven
        self.remove_fraction = previous.remove_fraction
        self.non_energy_fraction = previous.non_energy_fraction
        self.storage_cost = previous.storage_cost
        self.check_fractions()

    def accept(self, visitor: Visitor, period: int) -> None:
        visitor.start_visit_ghg(self, period)
        visitor.end_visit_ghg(self, period)

    def clone(self) -> GHG:
        """Return an independent copy."""
        return self.model_copy(deep=True)
