"""Tests for technology construction and initialization."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from techchoice.core import ParameterStore, TechnologyParameters
from techchoice.core.parameters import ParameterSource
from techchoice.emissions import CO2Emissions, GHGEmissions
from techchoice.markets import DependencyFinder
from techchoice.outputs import PrimaryOutput, SecondaryOutput
from techchoice.technologies import Technology
from tests.fixtures import SECTOR, make_context, make_technology


class TestConstruction:
    """Tests for configuration-time validation."""

    def test_duplicate_ghg_names_rejected(self):
        with pytest.raises(ValidationError):
            make_technology(ghgs=[GHGEmissions(name="CH4"), GHGEmissions(name="CH4")])

    def test_primary_output_only_first(self):
        with pytest.raises(ValidationError):
            make_technology(
                outputs=[SecondaryOutput(name="heat"), PrimaryOutput(name=SECTOR)]
            )

    def test_duplicate_output_names_rejected(self):
        with pytest.raises(ValidationError):
            make_technology(
                outputs=[SecondaryOutput(name="heat"), SecondaryOutput(name="heat")]
            )

    def test_owned_parameters_clear_global_flag(self):
        tech = make_technology(use_global_parameters=True)
        assert tech.use_global_parameters is False

    def test_lifecycle_requires_complete_init(self):
        tech = make_technology()
        assert not tech.is_initialized
        with pytest.raises(RuntimeError):
            tech.calc_cost("USA", SECTOR, 0)


class TestCompleteInit:
    """Tests for Technology.complete_init."""

    def test_adds_co2_and_primary_output(self):
        tech = make_technology(outputs=[SecondaryOutput(name="heat", output_ratio=0.5)])
        tech.complete_init(SECTOR, make_context())

        assert tech.get_ghg_names() == ["CO2"]
        assert isinstance(tech.get_ghg("CO2"), CO2Emissions)
        assert tech.outputs[0].is_primary
        assert tech.outputs[0].name == SECTOR
        assert [o.name for o in tech.outputs] == [SECTOR, "heat"]

    def test_existing_co2_kept(self):
        tech = make_technology(ghgs=[CO2Emissions(emissions_coef=0.02)])
        tech.complete_init(SECTOR, make_context())

        assert tech.get_num_ghgs() == 1
        assert tech.get_ghg("CO2").emissions_coef == pytest.approx(0.02)

    def test_repeated_complete_init_keeps_single_primary(self):
        tech = make_technology()
        context = make_context()
        tech.complete_init(SECTOR, context)
        tech.complete_init(SECTOR, context)

        assert sum(1 for o in tech.outputs if o.is_primary) == 1
        assert tech.get_num_ghgs() == 1

    def test_default_logit_exponent_from_config(self):
        tech = make_technology()
        tech.complete_init(SECTOR, make_context())
        assert tech.logit_exponent == pytest.approx(-6.0)

    def test_configured_logit_exponent_kept(self):
        tech = make_technology(logit_exponent=-3.0)
        tech.complete_init(SECTOR, make_context())
        assert tech.logit_exponent == pytest.approx(-3.0)

    def test_zero_year_logged(self, caplog):
        tech = make_technology(year=0)
        with caplog.at_level(logging.ERROR):
            tech.complete_init(SECTOR, make_context())
        assert "invalid year" in caplog.text

    def test_registers_dependencies(self):
        finder = DependencyFinder()
        tech = make_technology(outputs=[SecondaryOutput(name="heat", output_ratio=0.5)])
        tech.complete_init(SECTOR, make_context(), dependency_finder=finder)

        assert (SECTOR, "coal") in finder
        assert ("heat", SECTOR) in finder

    def test_inert_technology_registers_nothing(self):
        finder = DependencyFinder()
        tech = make_technology(
            fixed_output=0.0, outputs=[SecondaryOutput(name="heat", output_ratio=0.5)]
        )
        tech.complete_init(SECTOR, make_context(), dependency_finder=finder)

        assert tech.has_no_input_or_output()
        assert finder.get_dependencies(SECTOR) == set()
        assert finder.get_dependencies("heat") == set()

    def test_fixed_output_working_copy(self):
        tech = make_technology(fixed_output=50.0)
        tech.complete_init(SECTOR, make_context())
        assert tech.fixed_output_current == pytest.approx(50.0)
        assert tech.get_fixed_output() == pytest.approx(50.0)


class TestGlobalParameters:
    """Tests for resolving shared parameters."""

    def test_shared_parameters_resolved(self):
        store = ParameterStore()
        shared = TechnologyParameters(name="nuclear", fuel_name="uranium", efficiency=0.33)
        store.add(2005, shared)

        tech = Technology(name="nuclear", year=2005, use_global_parameters=True)
        tech.complete_init(SECTOR, make_context(), global_tech_db=store)

        assert tech.parameters is shared
        assert tech.parameter_source is ParameterSource.SHARED
        assert tech.get_fuel_name() == "uranium"

    def test_missing_shared_parameters_fall_back(self, caplog):
        tech = Technology(name="nuclear", year=2005, use_global_parameters=True)
        with caplog.at_level(logging.WARNING):
            tech.complete_init(SECTOR, make_context(), global_tech_db=ParameterStore())

        assert "not found" in caplog.text
        assert tech.parameter_source is ParameterSource.OWNED
        assert tech.get_efficiency(0) == pytest.approx(1.0)

    def test_default_parameters_created(self):
        tech = Technology(name="hydro", year=2005)
        tech.complete_init(SECTOR, make_context())
        assert tech.parameters is not None
        assert tech.get_fuel_name() == ""


class TestAddGHG:
    """Tests for attaching gases through the GHG factory."""

    def test_add_known_gas(self):
        tech = make_technology()
        ghg = tech.add_ghg("CH4", emissions_coef=0.1)

        assert isinstance(ghg, GHGEmissions)
        assert tech.get_ghg("CH4") is ghg
        assert tech.get_ghg("CH4").emissions_coef == pytest.approx(0.1)

    def test_add_co2_uses_co2_class(self):
        tech = make_technology()
        assert isinstance(tech.add_ghg("CO2"), CO2Emissions)

    def test_existing_gas_replaced_in_place(self):
        tech = make_technology(ghgs=[GHGEmissions(name="CH4"), GHGEmissions(name="N2O")])
        tech.add_ghg("CH4", gwp=21.0)

        assert tech.get_ghg_names() == ["CH4", "N2O"]
        assert tech.get_ghg("CH4").gwp == pytest.approx(21.0)

    def test_unrecognized_gas_warns(self, caplog):
        tech = make_technology()
        with caplog.at_level(logging.WARNING):
            assert tech.add_ghg("XYZ") is None

        assert "Unrecognized GHG name XYZ" in caplog.text
        assert tech.get_num_ghgs() == 0


class TestAccessors:
    """Tests for simple accessors."""

    def test_efficiency_and_intensity(self):
        tech = make_technology(param_overrides={"efficiency_penalty": 0.2})
        tech.complete_init(SECTOR, make_context())
        assert tech.get_efficiency(0) == pytest.approx(0.4)
        assert tech.get_intensity(0) == pytest.approx(2.5)
        assert tech.get_input_required_for_output(10.0, 0) == pytest.approx(25.0)

    def test_share_weight_setters(self):
        tech = make_technology(share_weight=2.0)
        tech.scale_share_weight(1.5)
        assert tech.get_share_weight() == pytest.approx(3.0)
        tech.set_share_weight(0.5)
        assert tech.get_share_weight() == pytest.approx(0.5)

    def test_set_year(self, caplog):
        tech = make_technology()
        tech.set_year(2010)
        assert tech.year == 2010
        tech.set_year(0)
        assert tech.year == 2010
        assert "Invalid year" in caplog.text

    def test_get_missing_ghg_raises(self):
        tech = make_technology()
        tech.complete_init(SECTOR, make_context())
        with pytest.raises(KeyError):
            tech.get_ghg("CH4")

    def test_copy_ghg_parameters(self):
        tech = make_technology(ghgs=[GHGEmissions(name="CH4")])
        tech.copy_ghg_parameters(GHGEmissions(name="CH4", gwp=21.0))
        assert tech.get_ghg("CH4").gwp == pytest.approx(21.0)

    def test_copy_ghg_parameters_unknown_gas(self, caplog):
        tech = make_technology()
        tech.copy_ghg_parameters(GHGEmissions(name="N2O"))
        assert "has no GHG N2O" in caplog.text
