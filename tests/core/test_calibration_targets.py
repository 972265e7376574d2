"""Tests for calibration targets."""

from __future__ import annotations

import pytest

from techchoice.core import CalDataInput, CalDataOutput, CalDataOutputPercap
from tests.fixtures import StubDemographics


def test_cal_data_input_converts_with_efficiency() -> None:
    target = CalDataInput(value=30.0)
    assert target.get_cal_input(0.5) == pytest.approx(30.0)
    assert target.get_cal_output(0.5) == pytest.approx(15.0)


def test_cal_data_output_converts_with_efficiency() -> None:
    target = CalDataOutput(value=30.0)
    assert target.get_cal_output(0.5) == pytest.approx(30.0)
    assert target.get_cal_input(0.5) == pytest.approx(60.0)


def test_cal_data_output_percap_scales_by_population() -> None:
    target = CalDataOutputPercap(value_per_capita=2.0)
    target.init_calc(StubDemographics(10.0), period=0)

    assert target.get_cal_output(0.5) == pytest.approx(20.0)
    assert target.get_cal_input(0.5) == pytest.approx(40.0)


def test_cal_data_output_percap_requires_demographics() -> None:
    target = CalDataOutputPercap(value_per_capita=2.0)
    with pytest.raises(AssertionError):
        target.init_calc(None, period=0)


@pytest.mark.parametrize(
    "target",
    [CalDataInput(value=10.0), CalDataOutput(value=10.0)],
)
def test_scale_value(target) -> None:
    target.scale_value(1.5)
    assert target.value == pytest.approx(15.0)


def test_percap_scale_value_scales_total() -> None:
    target = CalDataOutputPercap(value_per_capita=2.0)
    target.init_calc(StubDemographics(10.0), period=0)
    target.scale_value(0.5)

    assert target.value_per_capita == pytest.approx(1.0)
    assert target.get_cal_output(1.0) == pytest.approx(10.0)


def test_clone_is_independent() -> None:
    target = CalDataOutput(value=10.0)
    copy = target.clone()
    copy.scale_value(2.0)

    assert target.value == pytest.approx(10.0)
    assert copy.value == pytest.approx(20.0)
