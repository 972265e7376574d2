"""Tests for the Subsector coordinator."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import ValidationError

from techchoice.core import CalDataOutput
from techchoice.markets import DependencyFinder
from techchoice.technologies import Subsector
from tests.fixtures import REGION, SECTOR, make_context, make_marketplace, make_technology


@pytest.fixture
def context():
    return make_context(make_marketplace({"coal": 10.0, "gas": 5.0, SECTOR: 30.0}))


def _subsector(*technologies) -> Subsector:
    return Subsector(
        name="fossil", sector_name=SECTOR, region_name=REGION, technologies=list(technologies)
    )


class TestSubsectorSetup:
    """Tests for building a subsector."""

    def test_duplicate_technologies_rejected(self):
        with pytest.raises(ValidationError):
            _subsector(make_technology(), make_technology())

    def test_add_and_get_technology(self):
        subsector = _subsector(make_technology())
        subsector.add_technology(make_technology(name="gas", fuel_name="gas"))
        assert subsector.get_technology("gas").get_share_weight() == 1.0

        with pytest.raises(ValueError):
            subsector.add_technology(make_technology(name="gas", fuel_name="gas"))
        with pytest.raises(KeyError):
            subsector.get_technology("oil")

    def test_complete_init_registers_dependencies(self, context):
        finder = DependencyFinder()
        subsector = _subsector(make_technology(), make_technology(name="gas", fuel_name="gas"))
        subsector.complete_init(context, dependency_finder=finder)

        assert finder.get_dependencies(SECTOR) == {"coal", "gas"}


class TestSubsectorShares:
    """Tests for share calculation across technologies."""

    def test_shares_normalized(self, context):
        subsector = _subsector(make_technology(), make_technology(name="gas", fuel_name="gas"))
        subsector.complete_init(context)
        subsector.init_calc(None, 0)
        subsector.calc_cost(0)
        shares = subsector.calc_shares(None, 0)

        expected_gas = 12.0**-6 / (12.0**-6 + 22.0**-6)
        assert shares.sum() == pytest.approx(1.0)
        assert shares[1] == pytest.approx(expected_gas)
        assert shares[1] > shares[0]

    def test_all_zero_weights(self, context):
        subsector = _subsector(
            make_technology(share_weight=0.0),
            make_technology(name="gas", fuel_name="gas", share_weight=0.0),
        )
        subsector.complete_init(context)
        subsector.calc_cost(0)
        shares = subsector.calc_shares(None, 0)
        np.testing.assert_array_equal(shares, np.zeros(2))

    def test_fixed_and_variable(self, context):
        subsector = _subsector(
            make_technology(fixed_output=40.0),
            make_technology(name="gas", fuel_name="gas"),
        )
        subsector.complete_init(context)
        shares = subsector.run_period(demand=100.0, period=0)

        np.testing.assert_allclose(shares, [0.4, 0.6])
        assert subsector.get_output(0) == pytest.approx(100.0)

    def test_fixed_output_scaled_to_demand(self, context):
        subsector = _subsector(
            make_technology(name="coal_a", fixed_output=80.0),
            make_technology(name="coal_b", fixed_output=70.0),
            make_technology(name="gas", fuel_name="gas"),
        )
        subsector.complete_init(context)
        shares = subsector.run_period(demand=100.0, period=0)

        np.testing.assert_allclose(shares, [80.0 / 150.0, 70.0 / 150.0, 0.0])
        assert subsector.get_total_fixed_output() == pytest.approx(100.0)

    def test_fixed_output_reset_each_pass(self, context):
        subsector = _subsector(
            make_technology(name="coal_a", fixed_output=80.0),
            make_technology(name="gas", fuel_name="gas"),
        )
        subsector.complete_init(context)
        subsector.run_period(demand=40.0, period=0)
        assert subsector.get_total_fixed_output() == pytest.approx(40.0)

        subsector.run_period(demand=200.0, period=0)
        assert subsector.get_total_fixed_output() == pytest.approx(80.0)


class TestSubsectorPeriod:
    """Tests for a full period pass."""

    def test_production_meets_demand(self, context):
        subsector = _subsector(make_technology(), make_technology(name="gas", fuel_name="gas"))
        subsector.complete_init(context)
        subsector.run_period(demand=100.0, period=0)

        assert subsector.get_output(0) == pytest.approx(100.0)
        assert context.marketplace.get_supply(SECTOR, REGION, 0) == pytest.approx(100.0)
        assert subsector.get_input() == pytest.approx(200.0)

    def test_rerun_is_idempotent(self, context):
        subsector = _subsector(make_technology(), make_technology(name="gas", fuel_name="gas"))
        subsector.complete_init(context)
        first = subsector.run_period(demand=100.0, period=0)
        second = subsector.run_period(demand=100.0, period=0)
        np.testing.assert_array_equal(first, second)

    def test_calibration_moves_toward_target(self, context):
        coal = make_technology(calibration=CalDataOutput(value=30.0))
        gas = make_technology(name="gas", fuel_name="gas")
        subsector = _subsector(coal, gas)
        subsector.complete_init(context)

        subsector.init_calc(None, 0)
        subsector.calc_cost(0)
        shares = subsector.calc_shares(None, 0)
        subsector.adjust_for_calibration(100.0, 0)

        assert coal.get_share_weight() == pytest.approx(30.0 / (100.0 * shares[0]))
        assert gas.get_share_weight() == 1.0

    def test_all_output_fixed(self, context):
        subsector = _subsector(make_technology(fixed_output=10.0))
        subsector.complete_init(context)
        assert subsector.all_output_fixed()

    def test_tabulate_fixed_demands(self, context):
        subsector = _subsector(
            make_technology(fixed_output=10.0),
            make_technology(name="gas", fuel_name="gas"),
        )
        subsector.complete_init(context)
        subsector.tabulate_fixed_demands(0)

        coal_info = context.marketplace.get_market_info("coal", REGION, 0)
        gas_info = context.marketplace.get_market_info("gas", REGION, 0)
        assert coal_info.get_double("calDemand") == pytest.approx(20.0)
        assert gas_info.get_double("calDemand") == -1.0

    def test_clone(self, context):
        subsector = _subsector(make_technology(), make_technology(name="gas", fuel_name="gas"))
        subsector.complete_init(context)
        copy = subsector.clone()

        assert copy.technologies[0] is not subsector.technologies[0]
        np.testing.assert_array_equal(
            copy.run_period(demand=50.0, period=0),
            subsector.run_period(demand=50.0, period=0),
        )
