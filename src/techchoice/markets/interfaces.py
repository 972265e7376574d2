"""Collaborator contracts consumed by technologies.

The marketplace, macro driver, demographics and dependency registrar are
owned outside this package. Technologies only rely on the minimal surface
declared here.
"""

from __future__ import annotations

from typing import Protocol

NO_MARKET_PRICE: float = float("inf")


class MarketInfo(Protocol):
    """Auxiliary per-market counter store."""

    def get_double(self, key: str, default: float = 0.0) -> float: ...

    def set_double(self, key: str, value: float) -> None: ...


class Marketplace(Protocol):
    """Price/demand ledger shared by all technologies in a run."""

    def get_price(self, good: str, region: str, period: int) -> float: ...

    def add_to_demand(self, good: str, region: str, value: float, period: int) -> None: ...

    def add_to_supply(self, good: str, region: str, value: float, period: int) -> None: ...

    def get_market_info(self, good: str, region: str, period: int) -> MarketInfo | None: ...


class GDP(Protocol):
    """Macro driver supplying scaled GDP per capita."""

    def get_scaled_gdp_per_capita(self, period: int) -> float: ...


class Demographics(Protocol):
    """Regional population."""

    def get_total(self, period: int) -> float: ...


class DependencyRegistrar(Protocol):
    """Records that one sector consumes another sector's product."""

    def add_dependency(self, consumer: str, producer: str) -> bool: ...
