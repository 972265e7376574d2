"""Output channel base class.

Every technology owns an ordered list of outputs. The primary output is
always at index 0 and carries no secondary value; secondary outputs derive
their quantity from the primary output and may carry market value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from techchoice.markets.interfaces import DependencyRegistrar, Marketplace
    from techchoice.reporting.visitor import Visitor


class Output(BaseModel, ABC):
    """Base class for technology outputs.

    Attributes:
        name: Name of the good produced
        physical_output: Physical output by period
    """

    name: str = Field(..., min_length=1, description="Output good name")
    physical_output: dict[int, float] = Field(
        default_factory=dict, description="Physical output by period"
    )

    model_config = {"frozen": False}

    def complete_init(
        self,
        sector_name: str,
        dependency_finder: DependencyRegistrar | None,
        is_technology_operating: bool,
    ) -> None:
        """Once-per-run initialization."""

    def init_calc(self, region_name: str, period: int) -> None:
        """Per-period initialization."""

    @abstractmethod
    def set_physical_output(
        self,
        primary_output: float,
        region_name: str,
        marketplace: Marketplace,
        period: int,
    ) -> None:
        """Set the physical output for a period from the primary output."""
        ...

    @abstractmethod
    def get_value(self, region_name: str, marketplace: Marketplace, period: int) -> float:
        """Value of this output per unit of primary output."""
        ...

    @property
    def is_primary(self) -> bool:
        return False

    def get_physical_output(self, period: int) -> float:
        return self.physical_output.get(period, 0.0)

    def accept(self, visitor: Visitor, period: int) -> None:
        visitor.start_visit_output(self, period)
        visitor.end_visit_output(self, period)

    def clone(self) -> Output:
        """Return an independent copy."""
        return self.model_copy(deep=True)
