"""Subsector: a group of competing technologies producing the same good.

The subsector is the only caller that sees all sibling technologies. It
computes the aggregates (share sum, fixed output total, variable share
total) and passes them into each technology; technologies never read each
other's state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np
from pydantic import BaseModel, Field, field_validator

from techchoice.core.config import ModelContext
from techchoice.technologies.technology import Technology

if TYPE_CHECKING:
    from techchoice.core.parameters import ParameterStore
    from techchoice.markets.interfaces import GDP, Demographics, DependencyRegistrar
    from techchoice.reporting.visitor import Visitor

logger = logging.getLogger(__name__)


class Subsector(BaseModel):
    """Coordinator for the technologies of one subsector in one region.

    Attributes:
        name: Subsector name
        sector_name: Parent sector name (the good produced)
        region_name: Region name
        technologies: Competing technologies
        info: Subsector information passed through to technologies

    Example:
        >>> subsector = Subsector(
        ...     name="coal", sector_name="electricity", region_name="USA",
        ...     technologies=[coal_steam, coal_igcc],
        ... )
        >>> subsector.complete_init(context)
        >>> subsector.run_period(demand=100.0, period=0)
    """

    name: str = Field(..., min_length=1, description="Subsector name")
    sector_name: str = Field(..., min_length=1, description="Sector name")
    region_name: str = Field(..., min_length=1, description="Region name")
    technologies: list[Technology] = Field(default_factory=list, description="Technologies")
    info: dict[str, Any] = Field(default_factory=dict, description="Subsector information")

    model_config = {"arbitrary_types_allowed": True}

    @field_validator("technologies")
    @classmethod
    def validate_unique_technologies(cls, v: list[Technology]) -> list[Technology]:  # noqa: N805
        """Ensure technology (name, year) pairs are unique."""
        keys = [(tech.name, tech.year) for tech in v]
        if len(keys) != len(set(keys)):
            msg = "Technology name and year must be unique within a subsector"
            raise ValueError(msg)
        return v

    def add_technology(self, technology: Technology) -> None:
        """Add a technology.

        Raises:
            ValueError: If a technology with the same name and year exists
        """
        for existing in self.technologies:
            if (existing.name, existing.year) == (technology.name, technology.year):
                msg = f"Technology '{technology.name}' [{technology.year}] already exists"
                raise ValueError(msg)
        self.technologies.append(technology)

    def get_technology(self, name: str) -> Technology:
        """Get a technology by name.

        Raises:
            KeyError: If no technology has that name
        """
        for tech in self.technologies:
            if tech.name == name:
                return tech
        msg = f"Technology '{name}' not found in subsector '{self.name}'"
        raise KeyError(msg)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def complete_init(
        self,
        context: ModelContext,
        dependency_finder: DependencyRegistrar | None = None,
        global_tech_db: ParameterStore | None = None,
    ) -> None:
        """Complete initialization of every technology."""
        for tech in self.technologies:
            tech.complete_init(
                self.sector_name, context, dependency_finder, self.info, global_tech_db
            )
        logger.debug(
            "Initialized subsector %s with %d technologies", self.name, len(self.technologies)
        )

    def init_calc(self, demographics: Demographics | None, period: int) -> None:
        for tech in self.technologies:
            tech.init_calc(self.region_name, self.sector_name, self.info, demographics, period)

    def calc_cost(self, period: int) -> None:
        for tech in self.technologies:
            tech.calc_cost(self.region_name, self.sector_name, period)

    def calc_shares(self, gdp: GDP | None, period: int) -> np.ndarray:
        """Compute and normalize technology shares.

        Returns:
            Normalized shares in technology order
        """
        for tech in self.technologies:
            tech.calc_share(self.region_name, self.sector_name, gdp, period)

        unnormalized = np.array([tech.unnormalized_share for tech in self.technologies], dtype=float)
        share_sum = float(unnormalized.sum())
        for tech in self.technologies:
            tech.norm_share(share_sum)
        return self.get_shares()

    def adjust_for_fixed_output(self, subsector_demand: float, period: int) -> None:
        """Reconcile shares with fixed output.

        Fixed outputs are reset to their configured values, scaled down
        proportionally when together they exceed demand, and then shares of
        all technologies are adjusted.
        """
        for tech in self.technologies:
            tech.reset_fixed_output(period)

        fixed_total = self.get_total_fixed_output()
        if fixed_total > subsector_demand and fixed_total > 0:
            scale_ratio = subsector_demand / fixed_total
            for tech in self.technologies:
                tech.scale_fixed_output(scale_ratio)
            fixed_total = self.get_total_fixed_output()

        variable_share_total = float(
            np.sum([tech.share for tech in self.technologies if tech.fixed_output_current < 0])
        )
        for tech in self.technologies:
            tech.adj_shares(subsector_demand, fixed_total, variable_share_total, period)

    def adjust_for_calibration(self, subsector_demand: float, period: int) -> None:
        for tech in self.technologies:
            if tech.get_calibration_status():
                tech.adjust_for_calibration(subsector_demand, self.region_name, self.info, period)

    def production(self, subsector_demand: float, gdp: GDP | None, period: int) -> None:
        for tech in self.technologies:
            tech.production(self.region_name, self.sector_name, subsector_demand, gdp, period)

    def calc_emission(self, period: int) -> None:
        for tech in self.technologies:
            tech.calc_emission(self.sector_name, period)

    def tabulate_fixed_demands(self, period: int) -> None:
        for tech in self.technologies:
            tech.tabulate_fixed_demands(self.region_name, period)

    def run_period(
        self,
        demand: float,
        period: int,
        gdp: GDP | None = None,
        demographics: Demographics | None = None,
        calibrate: bool = False,
    ) -> np.ndarray:
        """Run one full cost, share and production pass.

        Args:
            demand: Subsector demand
            period: Model period
            gdp: Macro driver, needed for fuel preference elasticities
            demographics: Population, needed for per-capita calibration
            calibrate: Adjust share weights toward calibration targets

        Returns:
            Final shares in technology order
        """
        self.init_calc(demographics, period)
        self.calc_cost(period)
        self.calc_shares(gdp, period)
        self.adjust_for_fixed_output(demand, period)
        if calibrate:
            self.adjust_for_calibration(demand, period)
        self.production(demand, gdp, period)
        self.calc_emission(period)
        return self.get_shares()

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def get_shares(self) -> np.ndarray:
        return np.array([tech.share for tech in self.technologies], dtype=float)

    def get_total_fixed_output(self) -> float:
        return float(np.sum([tech.get_fixed_output() for tech in self.technologies]))

    def get_output(self, period: int) -> float:
        return float(np.sum([tech.get_output(period) for tech in self.technologies]))

    def get_input(self) -> float:
        return float(np.sum([tech.get_input() for tech in self.technologies]))

    def all_output_fixed(self) -> bool:
        """True if no technology responds to prices."""
        return all(tech.output_fixed() for tech in self.technologies)

    def accept(self, visitor: Visitor, period: int) -> None:
        for tech in self.technologies:
            tech.accept(visitor, period)

    def clone(self) -> Subsector:
        """Copy the subsector with cloned technologies."""
        return self.model_copy(
            update={
                "technologies": [tech.clone() for tech in self.technologies],
                "info": dict(self.info),
            }
        )
