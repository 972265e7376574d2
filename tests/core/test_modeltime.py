"""Tests for ModelTime."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from techchoice.core import ModelTime


class TestModelTime:
    """Tests for the period/year mapping."""

    def test_generated_years(self):
        mt = ModelTime(start_year=2005, time_step=5, periods=4)
        assert mt.years == (2005, 2010, 2015, 2020)
        assert len(mt) == 4

    def test_per_to_yr_and_back(self):
        mt = ModelTime(start_year=2005, time_step=5, periods=4)
        assert mt.per_to_yr(2) == 2015
        assert mt.yr_to_per(2015) == 2

    def test_explicit_years(self):
        """Test irregular explicit years override the generated ones."""
        mt = ModelTime(years=[1975, 1990, 2005, 2010])
        assert mt.start_year == 1975
        assert mt.periods == 4
        assert mt.per_to_yr(1) == 1990

    def test_years_must_increase(self):
        with pytest.raises(ValidationError):
            ModelTime(years=[2005, 2005, 2010])

    @pytest.mark.parametrize("period", [-1, 4])
    def test_period_out_of_range(self, period):
        mt = ModelTime(periods=4)
        with pytest.raises(IndexError):
            mt.per_to_yr(period)

    def test_unknown_year(self):
        mt = ModelTime(periods=4)
        with pytest.raises(KeyError):
            mt.yr_to_per(2007)
