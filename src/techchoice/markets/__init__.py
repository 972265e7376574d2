"""Marketplace and other external collaborators for techchoice."""

from techchoice.markets.interfaces import (
    GDP,
    NO_MARKET_PRICE,
    Demographics,
    DependencyRegistrar,
    MarketInfo,
    Marketplace,
)
from techchoice.markets.marketplace import (
    DependencyFinder,
    InMemoryMarketplace,
    Market,
    MarketInfoStore,
)

__all__ = [
    "NO_MARKET_PRICE",
    "Marketplace",
    "MarketInfo",
    "GDP",
    "Demographics",
    "DependencyRegistrar",
    "InMemoryMarketplace",
    "Market",
    "MarketInfoStore",
    "DependencyFinder",
]
