from __future__ import annotations

from typing import Any

from techchoice.core import ModelConfiguration, ModelContext, ModelTime, TechnologyParameters
from techchoice.markets import InMemoryMarketplace
from techchoice.technologies import Technology

REGION = "USA"
SECTOR = "electricity"
START_YEAR = 2005


class StubGDP:
    """Macro driver returning a constant scaled GDP per capita."""

    def __init__(self, value: float) -> None:
        self.value = value

    def get_scaled_gdp_per_capita(self, period: int) -> float:
        return self.value


class StubDemographics:
    """Population that is constant across periods."""

    def __init__(self, population: float) -> None:
        self.population = population

    def get_total(self, period: int) -> float:
        return self.population


def make_context(
    marketplace: InMemoryMarketplace | None = None,
    debug_checking: bool = False,
    periods: int = 4,
) -> ModelContext:
    """Build a context with a short model time starting in 2005."""
    config = ModelConfiguration(
        debug_checking=debug_checking,
        modeltime=ModelTime(start_year=START_YEAR, time_step=5, periods=periods),
    )
    return ModelContext(
        marketplace=marketplace if marketplace is not None else InMemoryMarketplace(),
        config=config,
    )


def make_technology(
    name: str = "coal",
    fuel_name: str = "coal",
    efficiency: float = 0.5,
    non_energy_cost: float = 2.0,
    year: int = START_YEAR,
    param_overrides: dict[str, Any] | None = None,
    **kwargs: Any,
) -> Technology:
    """Build a technology with owned parameters."""
    params = TechnologyParameters(
        name=name,
        fuel_name=fuel_name,
        efficiency=efficiency,
        non_energy_cost=non_energy_cost,
        **(param_overrides or {}),
    )
    return Technology(name=name, year=year, parameters=params, **kwargs)


def make_marketplace(prices: dict[str, float], periods: int = 4) -> InMemoryMarketplace:
    """Create markets for the given goods in REGION for every period."""
    marketplace = InMemoryMarketplace()
    for period in range(periods):
        for good, price in prices.items():
            marketplace.create_market(good, REGION, period, price=price)
    return marketplace
