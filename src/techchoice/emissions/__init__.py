"""Greenhouse gas emissions attached to technologies."""

from techchoice.emissions.base import GHG
from techchoice.emissions.factory import (
    STANDARD_GASES,
    GHGFactory,
    get_ghg_factory,
    register_ghg,
)
from techchoice.emissions.ghg import CO2_COEF_KEY, CO2Emissions, GHGEmissions
from techchoice.emissions.summary import EmissionsSummary

__all__ = [
    "GHG",
    "CO2Emissions",
    "GHGEmissions",
    "CO2_COEF_KEY",
    "EmissionsSummary",
    "GHGFactory",
    "STANDARD_GASES",
    "get_ghg_factory",
    "register_ghg",
]
