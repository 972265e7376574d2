"""Secondary (by-product) outputs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import Field

from techchoice.markets.interfaces import NO_MARKET_PRICE
from techchoice.outputs.base import Output

if TYPE_CHECKING:
    from techchoice.markets.interfaces import DependencyRegistrar, Marketplace

logger = logging.getLogger(__name__)


class SecondaryOutput(Output):
    """By-product produced in fixed proportion to the primary output.

    Attributes:
        output_ratio: Units of by-product per unit of primary output
        price_multiplier: Multiplier on the by-product market price
    """

    output_ratio: float = Field(default=0.0, ge=0, description="Output per primary output")
    price_multiplier: float = Field(default=1.0, description="Price multiplier")

    def complete_init(
        self,
        sector_name: str,
        dependency_finder: DependencyRegistrar | None,
        is_technology_operating: bool,
    ) -> None:
        # The by-product market depends on the producing sector.
        if dependency_finder is not None and is_technology_operating:
            dependency_finder.add_dependency(self.name, sector_name)

    def set_physical_output(
        self,
        primary_output: float,
        region_name: str,
        marketplace: Marketplace,
        period: int,
    ) -> None:
        output = primary_output * self.output_ratio
        self.physical_output[period] = output
        # Secondary output offsets demand for the good instead of adding supply.
        marketplace.add_to_demand(self.name, region_name, -output, period)

    def get_value(self, region_name: str, marketplace: Marketplace, period: int) -> float:
        price = marketplace.get_price(self.name, region_name, period)
        if price == NO_MARKET_PRICE:
            logger.debug("No price for secondary output %s in %s", self.name, region_name)
            return 0.0
        return price * self.price_multiplier * self.output_ratio
