"""Model time: mapping between model periods and calendar years."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ModelTime(BaseModel):
    """Period/year mapping for a model run.

    Either give ``years`` explicitly or let them be generated from
    ``start_year``, ``time_step`` and ``periods``.

    Example:
        >>> mt = ModelTime(start_year=2005, time_step=5, periods=4)
        >>> mt.per_to_yr(2)
        2015
    """

    start_year: int = Field(default=2005, description="Year of period 0")
    time_step: int = Field(default=5, gt=0, description="Years per period")
    periods: int = Field(default=20, gt=0, description="Number of periods")
    years: tuple[int, ...] = Field(
        default_factory=tuple, description="Explicit year of each period"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _fill_years(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        years = data.get("years")
        if years:
            years = tuple(int(y) for y in years)
            if any(b <= a for a, b in zip(years, years[1:])):
                raise ValueError("Model years must be strictly increasing")
            return {**data, "years": years, "start_year": years[0], "periods": len(years)}
        start = int(data.get("start_year", 2005))
        step = int(data.get("time_step", 5))
        count = int(data.get("periods", 20))
        return {**data, "years": tuple(start + step * i for i in range(count))}

    def per_to_yr(self, period: int) -> int:
        """Return the calendar year of a period."""
        if period < 0 or period >= len(self.years):
            msg = f"Period {period} outside model time (0..{len(self.years) - 1})"
            raise IndexError(msg)
        return self.years[period]

    def yr_to_per(self, year: int) -> int:
        """Return the period whose year is ``year``."""
        try:
            return self.years.index(year)
        except ValueError:
            msg = f"Year {year} is not a model year"
            raise KeyError(msg) from None

    def __len__(self) -> int:
        return len(self.years)
