"""Concrete greenhouse gas implementations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import Field

from techchoice.core.constants import CO2_NAME, FuelKind
from techchoice.emissions.base import GHG

if TYPE_CHECKING:
    from techchoice.markets.interfaces import Marketplace

# Market info key holding a fuel's carbon content per unit of fuel.
CO2_COEF_KEY = "CO2Coef"


class GHGEmissions(GHG):
    """Gas with a configured emissions coefficient (CH4, N2O, SO2, ...)."""


class CO2Emissions(GHG):
    """Carbon dioxide from fuel combustion.

    The emissions coefficient is the carbon content of the input fuel, read
    each period from the fuel market's ``CO2Coef`` counter when present.
    Fuels without a market keep the configured coefficient.
    """

    name: str = Field(default=CO2_NAME, min_length=1, description="Gas name")

    def init_calc(
        self,
        region_name: str,
        fuel_name: str,
        subsector_info: Mapping[str, Any] | None,
        marketplace: Marketplace,
        period: int,
    ) -> None:
        if not FuelKind.from_fuel_name(fuel_name).is_priced:
            return
        info = marketplace.get_market_info(fuel_name, region_name, period)
        if info is not None:
            self.emissions_coef = info.get_double(CO2_COEF_KEY, self.emissions_coef)
