"""Primary output of a technology."""

from __future__ import annotations

from typing import TYPE_CHECKING

from techchoice.outputs.base import Output

if TYPE_CHECKING:
    from techchoice.markets.interfaces import Marketplace


class PrimaryOutput(Output):
    """The sector's own product. Its value is already the market price, so
    it contributes nothing to the secondary value."""

    @property
    def is_primary(self) -> bool:
        return True

    def set_physical_output(
        self,
        primary_output: float,
        region_name: str,
        marketplace: Marketplace,
        period: int,
    ) -> None:
        self.physical_output[period] = primary_output
        marketplace.add_to_supply(self.name, region_name, primary_output, period)

    def get_value(self, region_name: str, marketplace: Marketplace, period: int) -> float:
        return 0.0
