"""Registry and factory for GHG classes.

Maps gas names to the class that computes them. CO2 has its own class;
the other standard gases share :class:`GHGEmissions`.
"""

from __future__ import annotations

from typing import Any

from techchoice.core.constants import CO2_NAME
from techchoice.emissions.base import GHG
from techchoice.emissions.ghg import CO2Emissions, GHGEmissions

STANDARD_GASES: tuple[str, ...] = (
    "CH4",
    "N2O",
    "SO2",
    "NOx",
    "CO",
    "NMVOC",
    "BC",
    "OC",
    "HFC",
    "PFC",
    "SF6",
)


class GHGFactory:
    """Registry of GHG classes keyed by gas name.

    Example:
        >>> factory = GHGFactory()
        >>> factory.create("CH4", emissions_coef=0.1).name
        'CH4'
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[GHG]] = {CO2_NAME: CO2Emissions}
        for gas in STANDARD_GASES:
            self._classes[gas] = GHGEmissions

    def register(self, gas_name: str, ghg_class: type[GHG]) -> None:
        """Register a GHG class for a gas.

        Args:
            gas_name: Gas name the class computes
            ghg_class: GHG subclass to instantiate for the gas

        Raises:
            ValueError: If the gas is already registered
        """
        if gas_name in self._classes:
            msg = f"GHG '{gas_name}' is already registered"
            raise ValueError(msg)
        self._classes[gas_name] = ghg_class

    def is_ghg_name(self, gas_name: str) -> bool:
        return gas_name in self._classes

    def create(self, gas_name: str, **kwargs: Any) -> GHG:
        """Create a GHG object for a gas.

        Args:
            gas_name: Registered gas name
            **kwargs: Field values passed to the GHG class

        Returns:
            New GHG instance named ``gas_name``

        Raises:
            KeyError: If the gas is not registered
        """
        if gas_name not in self._classes:
            msg = f"GHG '{gas_name}' not found in registry"
            raise KeyError(msg)
        return self._classes[gas_name](name=gas_name, **kwargs)

    def list_gases(self) -> list[str]:
        return list(self._classes.keys())


_global_factory: GHGFactory | None = None


def get_ghg_factory() -> GHGFactory:
    """Get the global GHG factory."""
    global _global_factory
    if _global_factory is None:
        _global_factory = GHGFactory()
    return _global_factory


def register_ghg(gas_name: str):
    """Decorator registering a GHG class for ``gas_name``.

    Example:
        >>> @register_ghg("HCFC")
        ... class HCFCEmissions(GHG):
        ...     pass
    """

    def decorator(ghg_class: type[GHG]) -> type[GHG]:
        get_ghg_factory().register(gas_name, ghg_class)
        return ghg_class

    return decorator
