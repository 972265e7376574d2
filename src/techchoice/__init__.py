"""techchoice - Technology cost, share and production for partial equilibrium models."""

from techchoice.core import (
    CalDataInput,
    CalDataOutput,
    CalDataOutputPercap,
    ModelConfiguration,
    ModelContext,
    ModelTime,
    ParameterStore,
    TechnologyParameters,
    load_model_config,
)
from techchoice.emissions import CO2Emissions, GHGEmissions, get_ghg_factory
from techchoice.markets import DependencyFinder, InMemoryMarketplace
from techchoice.outputs import PrimaryOutput, SecondaryOutput
from techchoice.reporting import EmissionsReportVisitor, Visitor
from techchoice.technologies import Subsector, Technology
from techchoice.version import __version__

__all__ = [
    "__version__",
    "Technology",
    "Subsector",
    "TechnologyParameters",
    "ParameterStore",
    "CalDataInput",
    "CalDataOutput",
    "CalDataOutputPercap",
    "ModelTime",
    "ModelConfiguration",
    "ModelContext",
    "load_model_config",
    "CO2Emissions",
    "GHGEmissions",
    "get_ghg_factory",
    "PrimaryOutput",
    "SecondaryOutput",
    "InMemoryMarketplace",
    "DependencyFinder",
    "Visitor",
    "EmissionsReportVisitor",
]
