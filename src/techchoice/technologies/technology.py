"""Technology: one vintage of one technology choice in a subsector.

A technology converts one input fuel into its sector's product. Each
period the subsector drives it through a fixed lifecycle::

    init_calc -> calc_cost -> calc_share -> norm_share / adj_shares
              -> production -> calc_emission

Cost is a power-law discrete choice input: lower cost means a larger
unnormalized share. Fixed output and calibration overrides are applied by
the subsector between share passes through ``adj_shares`` and
``adjust_for_calibration``.

All recoverable configuration problems are logged and corrected locally;
contract violations (non-positive efficiency, invalid demand) are asserted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import numpy as np
from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator

from techchoice.core.calibration_data import CalibrationTarget
from techchoice.core.config import ModelConfiguration, ModelContext
from techchoice.core.constants import (
    CAL_DEMAND_KEY,
    CAL_FIXED_DEMAND_KEY,
    CO2_NAME,
    FIXED_OUTPUT_DEFAULT,
    LOGIT_EXP_DEFAULT,
    MKT_NOT_ALL_FIXED,
    FuelKind,
)
from techchoice.core.parameters import ParameterSource, ParameterStore, TechnologyParameters
from techchoice.emissions.base import GHG
from techchoice.emissions.factory import get_ghg_factory
from techchoice.emissions.summary import EmissionsSummary
from techchoice.markets.interfaces import NO_MARKET_PRICE
from techchoice.outputs.base import Output
from techchoice.outputs.primary import PrimaryOutput

if TYPE_CHECKING:
    from techchoice.markets.interfaces import (
        GDP,
        Demographics,
        DependencyRegistrar,
        Marketplace,
    )
    from techchoice.reporting.visitor import Visitor

logger = logging.getLogger(__name__)

_TINY = 1e-10


class Technology(BaseModel):
    """One technology vintage competing inside a subsector.

    Attributes:
        name: Technology name
        year: Vintage year (must be nonzero after initialization)
        share_weight: Calibration lever on discrete-choice attractiveness
        price_multiplier: Multiplier on total cost
        logit_exponent: Power-law cost sensitivity; run default when None
        fixed_output: Mandated output (>= 0) or -1 for no constraint
        use_global_parameters: Resolve parameters from the shared store
        parameters: Owned parameters (None until initialization when shared)
        calibration: Optional calibration target for the vintage year
        ghgs: Gases, one per name; CO2 present after initialization
        outputs: Outputs; the primary output is inserted at index 0
        note: Free-form comment

    Period state (set by the lifecycle methods):
        fuel_cost, total_cost, unnormalized_share, share, fuel_input,
        fixed_output_current, emissions

    Example:
        >>> tech = Technology(
        ...     name="coal",
        ...     year=2005,
        ...     parameters=TechnologyParameters(
        ...         name="coal", fuel_name="coal", efficiency=0.5, non_energy_cost=2.0
        ...     ),
        ... )
        >>> tech.complete_init("electricity", ModelContext(marketplace=marketplace))
        >>> tech.calc_cost("USA", "electricity", period=0)
    """

    name: str = Field(..., min_length=1, description="Technology name")
    year: int = Field(default=0, description="Vintage year")
    share_weight: float = Field(default=1.0, description="Share weight")
    price_multiplier: float = Field(default=1.0, description="Total cost multiplier")
    logit_exponent: float | None = Field(default=None, description="Logit exponent")
    fixed_output: float = Field(default=FIXED_OUTPUT_DEFAULT, description="Fixed output")
    use_global_parameters: bool = Field(default=False, description="Use shared parameters")
    parameters: TechnologyParameters | None = Field(default=None, description="Parameters")
    calibration: CalibrationTarget | None = Field(default=None, description="Calibration")
    ghgs: list[GHG] = Field(default_factory=list, description="Greenhouse gases")
    outputs: list[Output] = Field(default_factory=list, description="Outputs")
    note: str = Field(default="", description="Comment")

    fuel_cost: float = Field(default=0.0, description="Fuel cost per unit output")
    total_cost: float = Field(default=0.0, description="Total cost per unit output")
    unnormalized_share: float = Field(default=0.0, description="Unnormalized share")
    share: float = Field(default=0.0, description="Share of subsector output")
    fuel_input: float = Field(default=0.0, description="Fuel input")
    fixed_output_current: float = Field(
        default=FIXED_OUTPUT_DEFAULT, description="Working fixed output"
    )
    emissions: EmissionsSummary = Field(
        default_factory=EmissionsSummary, description="Emission maps"
    )

    model_config = {"arbitrary_types_allowed": True}

    _context: ModelContext | None = PrivateAttr(default=None)
    _sector_name: str = PrivateAttr(default="")
    _parameter_source: ParameterSource = PrivateAttr(default=ParameterSource.OWNED)

    @field_validator("ghgs")
    @classmethod
    def validate_unique_ghgs(cls, v: list[GHG]) -> list[GHG]:  # noqa: N805
        """Ensure there is at most one GHG per gas name."""
        names = [ghg.name for ghg in v]
        if len(names) != len(set(names)):
            msg = "GHG names must be unique within a technology"
            raise ValueError(msg)
        return v

    @field_validator("outputs")
    @classmethod
    def validate_outputs(cls, v: list[Output]) -> list[Output]:  # noqa: N805
        """Only index 0 may hold the primary output; output names are unique."""
        if any(output.is_primary for output in v[1:]):
            msg = "The primary output can only be the first output"
            raise ValueError(msg)
        names = [output.name for output in v]
        if len(names) != len(set(names)):
            msg = "Output names must be unique within a technology"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def owned_parameters_override_global(self) -> Technology:
        # Technology-specific parameters take precedence over the shared store.
        if self.parameters is not None and self.use_global_parameters:
            self.use_global_parameters = False
        return self

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def complete_init(
        self,
        sector_name: str,
        context: ModelContext,
        dependency_finder: DependencyRegistrar | None = None,
        subsector_info: Mapping[str, Any] | None = None,
        global_tech_db: ParameterStore | None = None,
    ) -> None:
        """Complete initialization. Called once per model run.

        Args:
            sector_name: Sector name, also the name of the product
            context: Marketplace and run configuration
            dependency_finder: Regional dependency registrar
            subsector_info: Parent subsector information
            global_tech_db: Shared technology parameter store
        """
        self._context = context
        self._sector_name = sector_name

        if self.year == 0:
            logger.error(
                "Technology %s in sector %s has an invalid year attribute.",
                self.name,
                sector_name,
            )

        self._resolve_parameters(global_tech_db)

        if self.logit_exponent is None:
            self.logit_exponent = context.config.logit_exponent_default

        if CO2_NAME not in self.get_ghg_names():
            self.ghgs.append(get_ghg_factory().create(CO2_NAME))

        # Every technology has a primary output, always at position 0.
        if not self.outputs or not self.outputs[0].is_primary:
            self.outputs.insert(0, PrimaryOutput(name=sector_name))

        operating = not self.has_no_input_or_output()
        for output in self.outputs:
            output.complete_init(sector_name, dependency_finder, operating)

        # A technology that never operates cannot affect any market.
        if dependency_finder is not None and operating:
            dependency_finder.add_dependency(sector_name, self.get_fuel_name())

        if self.fixed_output >= 0:
            self.fixed_output_current = self.fixed_output

    def _resolve_parameters(self, global_tech_db: ParameterStore | None) -> None:
        if self.use_global_parameters and global_tech_db is not None:
            shared = global_tech_db.find(self.name, self.year)
            if shared is not None:
                self.parameters = shared
                self._parameter_source = ParameterSource.SHARED
                return
            logger.warning(
                "Global technology %s for %s not found; using default parameters.",
                self.name,
                self.year,
            )
        if self.parameters is None:
            self.parameters = TechnologyParameters(name=self.name)
            self._parameter_source = ParameterSource.OWNED

    def init_calc(
        self,
        region_name: str,
        sector_name: str,
        subsector_info: Mapping[str, Any] | None,
        demographics: Demographics | None,
        period: int,
    ) -> None:
        """Per-period initialization.

        A calibration target that implies a negative input at the current
        efficiency is removed for the rest of the run.
        """
        if self.calibration is not None:
            self.calibration.init_calc(demographics, period)
            if self.calibration.get_cal_input(self.get_efficiency(period)) < 0:
                logger.debug(
                    "Negative calibration value for technology %s. Calibration removed.",
                    self.name,
                )
                self.calibration = None

        marketplace = self._marketplace
        for ghg in self.ghgs:
            ghg.init_calc(region_name, self.get_fuel_name(), subsector_info, marketplace, period)

        for output in self.outputs:
            output.init_calc(region_name, period)

    # ------------------------------------------------------------------
    # Cost and share
    # ------------------------------------------------------------------

    def calc_secondary_value(self, region_name: str, period: int) -> float:
        """Net value of everything except the primary output.

        GHG costs are subtracted and output values added; the primary
        output contributes zero.
        """
        marketplace = self._marketplace
        total = -self.get_total_ghg_cost(region_name, period)
        for output in self.outputs:
            total += output.get_value(region_name, marketplace, period)
        return total

    def calc_cost(self, region_name: str, sector_name: str, period: int) -> None:
        """Calculate fuel cost and total cost per unit of output."""
        config = self._config
        fuel_name = self.get_fuel_name()

        if not FuelKind.from_fuel_name(fuel_name).is_priced:
            fuel_price = 0.0
        else:
            fuel_price = self._marketplace.get_price(fuel_name, region_name, period)
            if fuel_price == NO_MARKET_PRICE:
                logger.error(
                    "Requested fuel >%s< with no price in technology %s in sector %s "
                    "in region %s.",
                    fuel_name,
                    self.name,
                    sector_name,
                    region_name,
                )
                fuel_price = config.large_number

        params = self._params
        self.fuel_cost = fuel_price * params.fuel_multiplier / self.get_efficiency(period)
        total_cost = (self.fuel_cost + self.get_non_energy_cost(period)) * self.price_multiplier
        total_cost -= self.calc_secondary_value(region_name, period)

        # Total cost can drift below zero in disequilibrium.
        self.total_cost = max(total_cost, config.small_number)

    def calc_share(
        self,
        region_name: str,
        sector_name: str,
        gdp: GDP | None,
        period: int,
    ) -> None:
        """Calculate the unnormalized share from total cost.

        Overflow of the power law (very negative exponents on small costs)
        is clamped to the configured large number.
        """
        large_number = self._config.large_number
        exponent = LOGIT_EXP_DEFAULT if self.logit_exponent is None else self.logit_exponent
        with np.errstate(over="ignore"):
            attractiveness = min(float(np.power(self.total_cost, exponent)), large_number)
            share = self.share_weight * attractiveness

            elasticity = self._params.fuel_pref_elasticity
            if elasticity != 0:
                assert gdp is not None, "fuel preference elasticity needs a GDP driver"
                gdp_per_capita = gdp.get_scaled_gdp_per_capita(period)
                share *= float(np.power(gdp_per_capita, elasticity))

        share = min(share, large_number)
        self.unnormalized_share = share
        self.share = share

    def norm_share(self, share_sum: float) -> None:
        """Normalize by the subsector-wide sum of unnormalized shares."""
        if share_sum == 0:
            self.share = 0.0
        else:
            self.share = self.unnormalized_share / share_sum

    # ------------------------------------------------------------------
    # Fixed output
    # ------------------------------------------------------------------

    def has_no_input_or_output(self) -> bool:
        """True if fixed output was configured as exactly zero."""
        return abs(self.fixed_output) < _TINY

    def output_fixed(self) -> bool:
        """True if output does not respond to prices this period."""
        return self.get_calibration_status() or self.fixed_output >= 0 or self.share_weight == 0

    def tech_available(self) -> bool:
        """True if the technology can vary its output in response to demand."""
        if not self.get_calibration_status() and (
            self.fixed_output >= 0 or self.share_weight == 0
        ):
            return False
        return True

    def reset_fixed_output(self, period: int) -> None:
        """Restore the working fixed output to the configured value."""
        if self.fixed_output >= 0:
            self.fixed_output_current = self.fixed_output

    def get_fixed_output(self) -> float:
        """Current fixed output, or 0 when unconstrained."""
        if self.fixed_output_current == FIXED_OUTPUT_DEFAULT:
            return 0.0
        return self.fixed_output_current

    def get_fixed_input(self, period: int) -> float:
        """Input needed for the fixed output, only in the vintage year."""
        if (
            self.fixed_output_current == FIXED_OUTPUT_DEFAULT
            or self.year != self._config.modeltime.per_to_yr(period)
        ):
            return 0.0
        return self.fixed_output_current / self.get_efficiency(period)

    def get_input_required_for_output(self, required_output: float, period: int) -> float:
        """Input required to produce ``required_output``."""
        efficiency = self.get_efficiency(period)
        assert efficiency > 0
        return required_output / efficiency

    def scale_fixed_output(self, scale_ratio: float) -> None:
        """Scale the working fixed output, e.g. when fixed supply exceeds demand."""
        if self.fixed_output_current >= 0:
            self.fixed_output_current *= scale_ratio

    def compute_adjusted_share(
        self,
        subsector_demand: float,
        subsector_fixed_output: float,
        variable_share_total: float,
    ) -> float:
        """Share consistent with the subsector's fixed output.

        Fixed technologies take ``fixed / demand``; variable technologies
        split the remaining demand in proportion to their shares. Returns
        the current share when the subsector has no fixed output.
        """
        if subsector_fixed_output <= 0:
            return self.share

        remaining_demand = max(subsector_demand - subsector_fixed_output, 0.0)
        if subsector_demand <= 0:
            return 0.0
        if self.fixed_output_current >= 0:
            return self.fixed_output_current / subsector_demand
        if variable_share_total <= 0:
            return 0.0
        return self.share * (remaining_demand / subsector_demand) / variable_share_total

    def downscale_fixed_output(
        self,
        subsector_demand: float,
        subsector_fixed_output: float,
    ) -> None:
        """Cap a fixed output larger than demand at the subsector's fixed total."""
        if subsector_fixed_output <= 0 or subsector_demand <= 0:
            return
        if self.fixed_output_current >= 0 and self.fixed_output_current > subsector_demand:
            self.fixed_output_current = subsector_fixed_output

    def adj_shares(
        self,
        subsector_demand: float,
        subsector_fixed_output: float,
        variable_share_total: float,
        period: int,
    ) -> None:
        """Adjust the share for fixed output in the subsector.

        Args:
            subsector_demand: Subsector demand
            subsector_fixed_output: Total fixed output in the subsector
            variable_share_total: Sum of shares of technologies without fixed output
            period: Model period
        """
        if subsector_fixed_output <= 0:
            return
        self.share = self.compute_adjusted_share(
            subsector_demand, subsector_fixed_output, variable_share_total
        )
        self.downscale_fixed_output(subsector_demand, subsector_fixed_output)

    # ------------------------------------------------------------------
    # Calibration
    # ------------------------------------------------------------------

    def adjust_for_calibration(
        self,
        subsector_demand: float,
        region_name: str,
        subsector_info: Mapping[str, Any] | None,
        period: int,
    ) -> None:
        """Rescale the share weight so output moves toward the calibration value.

        Only relative shares within the subsector are calibrated here; the
        overall scale follows subsector demand.
        """
        cal_output = self.get_calibration_output(period)

        # A zero share weight always gives a zero share.
        if self.share_weight == 0 and cal_output > 0:
            self.share_weight = 1.0

        technology_demand = self.share * subsector_demand
        if technology_demand > 0:
            self.share_weight *= cal_output / technology_demand

        if self.share_weight < 0:
            logger.warning(
                "Share weight is less than zero in technology %s. "
                "Share weight was %s (reset to 1).",
                self.name,
                self.share_weight,
            )
            self.share_weight = 1.0

        config = self._config
        if config.debug_checking and self.share_weight > config.large_share_weight:
            logger.warning("Large share weight in calibration for technology: %s", self.name)

    def get_calibration_status(self) -> bool:
        return self.calibration is not None

    def get_calibration_input(self, period: int) -> float:
        """Calibrated input in the vintage year, else 0."""
        if self.calibration is not None and self._is_vintage_period(period):
            return self.calibration.get_cal_input(self.get_efficiency(period))
        return 0.0

    def get_calibration_output(self, period: int) -> float:
        """Calibrated output in the vintage year, else 0."""
        if self.calibration is not None and self._is_vintage_period(period):
            return self.calibration.get_cal_output(self.get_efficiency(period))
        return 0.0

    def scale_calibration_input(self, scale_factor: float) -> None:
        if self.calibration is not None:
            self.calibration.scale_value(scale_factor)

    def tabulate_fixed_demands(self, region_name: str, period: int) -> None:
        """Record fixed or calibrated fuel demand in the fuel's market counters.

        Fuels without a market (e.g. renewable) are skipped.
        """
        info = self._marketplace.get_market_info(self.get_fuel_name(), region_name, period)
        if info is None:
            return

        if not self.output_fixed():
            info.set_double(CAL_DEMAND_KEY, MKT_NOT_ALL_FIXED)
            return

        fixed_or_cal_input = 0.0
        fixed_input = 0.0
        if self.get_calibration_status():
            fixed_or_cal_input = self.get_calibration_input(period)
        elif self.fixed_output >= 0:
            fixed_or_cal_input = self.get_fixed_input(period)
            fixed_input = fixed_or_cal_input

        existing = max(info.get_double(CAL_DEMAND_KEY, 0.0), 0.0)
        info.set_double(CAL_DEMAND_KEY, existing + fixed_or_cal_input)

        # Fixed demand is tracked separately since it is never scaled.
        existing = max(info.get_double(CAL_FIXED_DEMAND_KEY, 0.0), 0.0)
        info.set_double(CAL_FIXED_DEMAND_KEY, existing + fixed_input)

    # ------------------------------------------------------------------
    # Production and emissions
    # ------------------------------------------------------------------

    def production(
        self,
        region_name: str,
        sector_name: str,
        demand: float,
        gdp: GDP | None,
        period: int,
    ) -> None:
        """Produce this technology's share of subsector demand.

        Sets the fuel input, registers it as demand for priced fuels, and
        computes outputs and emissions.
        """
        assert np.isfinite(demand) and demand >= 0, f"invalid demand {demand}"

        primary_output = self.share * demand
        if primary_output < 0:
            logger.error("Primary output value less than zero for technology %s", self.name)

        self.fuel_input = primary_output / self.get_efficiency(period)

        fuel_name = self.get_fuel_name()
        if FuelKind.from_fuel_name(fuel_name).is_priced:
            self._marketplace.add_to_demand(fuel_name, region_name, self.fuel_input, period)

        self.calc_emissions_and_outputs(region_name, self.fuel_input, primary_output, gdp, period)

    def calc_emissions_and_outputs(
        self,
        region_name: str,
        input_value: float,
        primary_output: float,
        gdp: GDP | None,
        period: int,
    ) -> None:
        """Set outputs, then calculate each gas once flows are known."""
        marketplace = self._marketplace
        for output in self.outputs:
            output.set_physical_output(primary_output, region_name, marketplace, period)

        fuel_name = self.get_fuel_name()
        for ghg in self.ghgs:
            ghg.calc_emission(
                region_name, fuel_name, input_value, self.outputs, gdp, marketplace, period
            )

    def calc_emission(self, good_name: str, period: int) -> None:
        """Rebuild the emission maps from the gases' current state."""
        self.emissions = EmissionsSummary.build(self.ghgs, self.get_fuel_name(), period)

    def get_total_ghg_cost(self, region_name: str, period: int) -> float:
        """Carbon tax and storage cost per unit output across all gases."""
        marketplace = self._marketplace
        fuel_name = self.get_fuel_name()
        efficiency = self.get_efficiency(period)
        return sum(
            ghg.get_ghg_value(region_name, fuel_name, self.outputs, efficiency, marketplace, period)
            for ghg in self.ghgs
        )

    def get_carbon_tax_paid(self, region_name: str, period: int) -> float:
        return sum(ghg.get_carbon_tax_paid(region_name, period) for ghg in self.ghgs)

    # ------------------------------------------------------------------
    # GHG access
    # ------------------------------------------------------------------

    def get_ghg_names(self) -> list[str]:
        return [ghg.name for ghg in self.ghgs]

    def get_num_ghgs(self) -> int:
        return len(self.ghgs)

    def add_ghg(self, gas_name: str, **kwargs: Any) -> GHG | None:
        """Create a gas through the GHG factory and attach it.

        A gas that already exists is replaced in place, keeping its position.

        Args:
            gas_name: Gas name
            **kwargs: Field values passed to the GHG class

        Returns:
            The new gas, or None if the name is not a known GHG
        """
        factory = get_ghg_factory()
        if not factory.is_ghg_name(gas_name):
            logger.warning(
                "Unrecognized GHG name %s in technology %s; gas ignored.", gas_name, self.name
            )
            return None

        ghg = factory.create(gas_name, **kwargs)
        for index, existing in enumerate(self.ghgs):
            if existing.name == gas_name:
                self.ghgs[index] = ghg
                return ghg
        self.ghgs.append(ghg)
        return ghg

    def get_ghg(self, gas_name: str) -> GHG:
        """Get a gas by name.

        Raises:
            KeyError: If the technology has no such gas
        """
        for ghg in self.ghgs:
            if ghg.name == gas_name:
                return ghg
        msg = f"Technology '{self.name}' has no GHG '{gas_name}'"
        raise KeyError(msg)

    def copy_ghg_parameters(self, previous: GHG) -> None:
        """Carry a gas's parameters forward from the previous period."""
        try:
            ghg = self.get_ghg(previous.name)
        except KeyError:
            logger.warning(
                "Technology %s has no GHG %s to copy parameters into.",
                self.name,
                previous.name,
            )
            return
        ghg.copy_ghg_parameters(previous)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_fuel_name(self) -> str:
        return self._params.fuel_name

    def get_efficiency(self, period: int) -> float:
        """Effective efficiency after the efficiency penalty."""
        return self._params.effective_efficiency

    def get_intensity(self, period: int) -> float:
        """Input per unit output."""
        efficiency = self.get_efficiency(period)
        assert efficiency > 0
        return 1.0 / efficiency

    def get_non_energy_cost(self, period: int) -> float:
        """Effective non-energy cost after the cost penalty."""
        return self._params.effective_non_energy_cost

    def get_share(self) -> float:
        return self.share

    def set_tech_share(self, share: float) -> None:
        self.share = share

    def get_share_weight(self) -> float:
        return self.share_weight

    def set_share_weight(self, share_weight: float) -> None:
        self.share_weight = share_weight

    def scale_share_weight(self, scale_value: float) -> None:
        self.share_weight *= scale_value

    def get_input(self) -> float:
        return self.fuel_input

    def get_output(self, period: int) -> float:
        """Primary output quantity."""
        return self.outputs[0].get_physical_output(period)

    def get_fuel_cost(self) -> float:
        return self.fuel_cost

    def get_total_cost(self) -> float:
        return self.total_cost

    def set_year(self, year: int) -> None:
        if year <= 0:
            logger.error("Invalid year passed to set year for technology %s.", self.name)
        else:
            self.year = year

    @property
    def parameter_source(self) -> ParameterSource:
        return self._parameter_source

    @property
    def is_initialized(self) -> bool:
        return self._context is not None

    # ------------------------------------------------------------------
    # Reporting and copying
    # ------------------------------------------------------------------

    def accept(self, visitor: Visitor, period: int) -> None:
        """Visit the technology, its outputs, then its gases."""
        visitor.start_visit_technology(self, period)
        for output in self.outputs:
            output.accept(visitor, period)
        for ghg in self.ghgs:
            ghg.accept(visitor, period)
        visitor.end_visit_technology(self, period)

    def clone(self) -> Technology:
        """Deep copy for carrying a technology into a new period.

        Outputs, gases and calibration are independent copies. Shared
        parameters stay a reference into the store; owned ones are copied.
        """
        parameters = self.parameters
        if parameters is not None and self._parameter_source is ParameterSource.OWNED:
            parameters = parameters.model_copy()
        return self.model_copy(
            update={
                "parameters": parameters,
                "calibration": self.calibration.clone() if self.calibration else None,
                "ghgs": [ghg.clone() for ghg in self.ghgs],
                "outputs": [output.clone() for output in self.outputs],
                "emissions": self.emissions.model_copy(deep=True),
            }
        )

    def summary(self, period: int) -> dict[str, Any]:
        """Period state as a dictionary for debugging."""
        return {
            "name": self.name,
            "sector": self._sector_name,
            "year": self.year,
            "share_weight": self.share_weight,
            "parameters": self._params.to_dict(),
            "parameter_source": self._parameter_source.value,
            "calibrated": self.get_calibration_status(),
            "efficiency_effective": self.get_efficiency(period),
            "non_energy_cost_effective": self.get_non_energy_cost(period),
            "price_multiplier": self.price_multiplier,
            "logit_exponent": self.logit_exponent,
            "fuel_cost": self.fuel_cost,
            "total_cost": self.total_cost,
            "share": self.share,
            "input": self.fuel_input,
            "fixed_output": self.fixed_output,
            "outputs": {o.name: o.get_physical_output(period) for o in self.outputs},
            "emissions": {g.name: g.get_emission(period) for g in self.ghgs},
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @property
    def _params(self) -> TechnologyParameters:
        if self.parameters is None:
            msg = f"Technology '{self.name}' has no parameters; call complete_init first"
            raise RuntimeError(msg)
        return self.parameters

    @property
    def _marketplace(self) -> Marketplace:
        if self._context is None:
            msg = f"Technology '{self.name}' has not been initialized"
            raise RuntimeError(msg)
        return self._context.marketplace

    @property
    def _config(self) -> ModelConfiguration:
        if self._context is None:
            msg = f"Technology '{self.name}' has not been initialized"
            raise RuntimeError(msg)
        return self._context.config

    def _is_vintage_period(self, period: int) -> bool:
        return self.year == self._config.modeltime.per_to_yr(period)

    def __repr__(self) -> str:
        return f"Technology {self.name}[{self.year}]: share={self.share:.4g}, cost={self.total_cost:.4g}"
