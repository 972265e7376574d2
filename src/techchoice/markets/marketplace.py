"""In-memory marketplace and dependency finder.

These are reference implementations of the collaborator contracts in
:mod:`techchoice.markets.interfaces`, suitable for driving a subsector
outside a full equilibrium solver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from techchoice.markets.interfaces import NO_MARKET_PRICE

logger = logging.getLogger(__name__)


@dataclass
class MarketInfoStore:
    """Named float counters attached to one market."""

    values: dict[str, float] = field(default_factory=dict)

    def get_double(self, key: str, default: float = 0.0) -> float:
        return self.values.get(key, default)

    def set_double(self, key: str, value: float) -> None:
        self.values[key] = value


@dataclass
class Market:
    """State of one good in one region and period."""

    good: str
    region: str
    period: int
    price: float = NO_MARKET_PRICE
    demand: float = 0.0
    supply: float = 0.0
    info: MarketInfoStore = field(default_factory=MarketInfoStore)


class InMemoryMarketplace:
    """Dictionary-backed price and demand ledger.

    Markets must be created with :meth:`create_market` before prices are
    set; demand and supply for unknown markets are ignored and logged.

    Example:
        >>> mp = InMemoryMarketplace()
        >>> mp.create_market("coal", "USA", period=0, price=2.0)
        >>> mp.get_price("coal", "USA", 0)
        2.0
    """

    def __init__(self) -> None:
        self._markets: dict[tuple[str, str, int], Market] = {}

    def create_market(
        self,
        good: str,
        region: str,
        period: int,
        price: float = NO_MARKET_PRICE,
    ) -> Market:
        """Create (or return the existing) market for a good.

        Args:
            good: Good traded on the market
            region: Region name
            period: Model period
            price: Initial price; an existing market keeps its price unless given

        Returns:
            The market for ``(good, region, period)``
        """
        key = (good, region, period)
        market = self._markets.get(key)
        if market is None:
            market = Market(good=good, region=region, period=period, price=price)
            self._markets[key] = market
        elif price != NO_MARKET_PRICE:
            market.price = price
        return market

    def has_market(self, good: str, region: str, period: int) -> bool:
        return (good, region, period) in self._markets

    def set_price(self, good: str, region: str, value: float, period: int) -> None:
        self.create_market(good, region, period).price = value

    def get_price(self, good: str, region: str, period: int) -> float:
        market = self._markets.get((good, region, period))
        return NO_MARKET_PRICE if market is None else market.price

    def add_to_demand(self, good: str, region: str, value: float, period: int) -> None:
        market = self._markets.get((good, region, period))
        if market is None:
            logger.debug("No market for %s in %s; demand %s dropped", good, region, value)
            return
        market.demand += value

    def add_to_supply(self, good: str, region: str, value: float, period: int) -> None:
        market = self._markets.get((good, region, period))
        if market is None:
            logger.debug("No market for %s in %s; supply %s dropped", good, region, value)
            return
        market.supply += value

    def get_demand(self, good: str, region: str, period: int) -> float:
        market = self._markets.get((good, region, period))
        return 0.0 if market is None else market.demand

    def get_supply(self, good: str, region: str, period: int) -> float:
        market = self._markets.get((good, region, period))
        return 0.0 if market is None else market.supply

    def get_market_info(self, good: str, region: str, period: int) -> MarketInfoStore | None:
        market = self._markets.get((good, region, period))
        return None if market is None else market.info

    def reset_demands(self, period: int) -> None:
        """Zero demand and supply of every market in a period."""
        for market in self._markets.values():
            if market.period == period:
                market.demand = 0.0
                market.supply = 0.0

    def to_frame(self) -> pd.DataFrame:
        """Return all markets as a DataFrame, one row per market."""
        rows: list[dict[str, Any]] = [
            {
                "good": m.good,
                "region": m.region,
                "period": m.period,
                "price": m.price,
                "demand": m.demand,
                "supply": m.supply,
            }
            for m in self._markets.values()
        ]
        return pd.DataFrame(rows, columns=["good", "region", "period", "price", "demand", "supply"])


class DependencyFinder:
    """Records sector dependencies as (consumer, producer) edges.

    Ordering the sectors is the scheduler's job; this only stores edges.
    """

    def __init__(self) -> None:
        self._dependencies: dict[str, set[str]] = {}

    def add_dependency(self, consumer: str, producer: str) -> bool:
        """Add an edge. Returns False when it was already present."""
        if not producer:
            return False
        producers = self._dependencies.setdefault(consumer, set())
        if producer in producers:
            return False
        producers.add(producer)
        return True

    def get_dependencies(self, consumer: str) -> set[str]:
        return set(self._dependencies.get(consumer, set()))

    def __contains__(self, edge: tuple[str, str]) -> bool:
        consumer, producer = edge
        return producer in self._dependencies.get(consumer, set())
