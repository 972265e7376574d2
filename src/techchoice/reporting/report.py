"""Tabular report of technology flows and emissions."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from techchoice.reporting.visitor import Visitor

if TYPE_CHECKING:
    from techchoice.emissions.base import GHG
    from techchoice.outputs.base import Output
    from techchoice.technologies.technology import Technology

REPORT_COLUMNS = ["period", "technology", "vintage", "kind", "name", "value", "unit"]


@dataclass
class ReportRow:
    """One reported quantity."""

    period: int
    technology: str
    vintage: int
    kind: str
    name: str
    value: float
    unit: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class EmissionsReportVisitor(Visitor):
    """Collects fuel input, outputs and emissions of visited technologies.

    Each technology visit yields one ``input`` row, one ``output`` row per
    output and one ``emissions`` row per gas.

    Example:
        >>> report = EmissionsReportVisitor()
        >>> subsector.accept(report, period=0)
        >>> report.to_frame().pivot_table(index="technology", columns="name", values="value")
    """

    def __init__(self) -> None:
        self.rows: list[ReportRow] = []
        self._technology: Technology | None = None

    def start_visit_technology(self, technology: Technology, period: int) -> None:
        self._technology = technology
        self._add(period, "input", technology.get_fuel_name() or "none", technology.get_input())

    def end_visit_technology(self, technology: Technology, period: int) -> None:
        self._technology = None

    def start_visit_output(self, output: Output, period: int) -> None:
        self._add(period, "output", output.name, output.get_physical_output(period))

    def start_visit_ghg(self, ghg: GHG, period: int) -> None:
        self._add(period, "emissions", ghg.name, ghg.get_emission(period), ghg.unit)

    def _add(self, period: int, kind: str, name: str, value: float, unit: str = "") -> None:
        if self._technology is None:
            # Outputs and gases visited on their own carry no technology.
            technology, vintage = "", 0
        else:
            technology, vintage = self._technology.name, self._technology.year
        self.rows.append(
            ReportRow(
                period=period,
                technology=technology,
                vintage=vintage,
                kind=kind,
                name=name,
                value=value,
                unit=unit,
            )
        )

    def to_frame(self) -> pd.DataFrame:
        """Return collected rows as a DataFrame."""
        return pd.DataFrame([row.to_dict() for row in self.rows], columns=REPORT_COLUMNS)

    def total_emissions(self, gas_name: str) -> float:
        """Sum of reported emissions for one gas."""
        return sum(row.value for row in self.rows if row.kind == "emissions" and row.name == gas_name)

    def clear(self) -> None:
        self.rows.clear()
