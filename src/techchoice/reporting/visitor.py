"""Visitor interface for reporting traversal.

``Technology.accept`` visits the technology, then each output in order,
then each GHG in order, and finally closes the technology visit. Every
method defaults to a no-op so visitors only override what they report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from techchoice.emissions.base import GHG
    from techchoice.outputs.base import Output
    from techchoice.technologies.technology import Technology


class Visitor:
    """Base reporting visitor."""

    def start_visit_technology(self, technology: Technology, period: int) -> None:
        pass

    def end_visit_technology(self, technology: Technology, period: int) -> None:
        pass

    def start_visit_output(self, output: Output, period: int) -> None:
        pass

    def end_visit_output(self, output: Output, period: int) -> None:
        pass

    def start_visit_ghg(self, ghg: GHG, period: int) -> None:
        pass

    def end_visit_ghg(self, ghg: GHG, period: int) -> None:
        pass
