from __future__ import annotations

import pytest

from techchoice.emissions import (
    GHG,
    STANDARD_GASES,
    CO2Emissions,
    GHGEmissions,
    GHGFactory,
    get_ghg_factory,
    register_ghg,
)


def test_factory_knows_standard_gases() -> None:
    factory = GHGFactory()
    assert factory.is_ghg_name("CO2")
    for gas in STANDARD_GASES:
        assert factory.is_ghg_name(gas)
    assert not factory.is_ghg_name("XYZ")


def test_create_co2_uses_co2_class() -> None:
    ghg = GHGFactory().create("CO2", emissions_coef=0.02)
    assert isinstance(ghg, CO2Emissions)
    assert ghg.emissions_coef == pytest.approx(0.02)


def test_create_generic_gas() -> None:
    ghg = GHGFactory().create("CH4", gwp=21.0)
    assert type(ghg) is GHGEmissions
    assert ghg.name == "CH4"


def test_create_unknown_gas_raises() -> None:
    with pytest.raises(KeyError):
        GHGFactory().create("XYZ")


def test_register_duplicate_raises() -> None:
    factory = GHGFactory()
    with pytest.raises(ValueError):
        factory.register("CH4", GHGEmissions)


def test_register_ghg_decorator_uses_global_factory() -> None:
    @register_ghg("HCFC141b")
    class HCFCEmissions(GHG):
        pass

    assert get_ghg_factory() is get_ghg_factory()
    ghg = get_ghg_factory().create("HCFC141b")
    assert isinstance(ghg, HCFCEmissions)
    assert "HCFC141b" in get_ghg_factory().list_gases()
