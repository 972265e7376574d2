"""Run configuration for technology calculations.

Configuration is an explicit value passed to every technology through
:class:`ModelContext` at initialization; nothing is read from process-wide
state.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from techchoice.core.constants import LOGIT_EXP_DEFAULT
from techchoice.core.modeltime import ModelTime


class ModelConfiguration(BaseModel):
    """Numerical and diagnostic settings for a model run.

    Attributes:
        debug_checking: Enable extra diagnostics (large share weights)
        large_number: Substitute price for fuels with no market price
        small_number: Floor applied to technology total cost
        large_share_weight: Share weight above which calibration is reported
        logit_exponent_default: Logit exponent used when none is configured
        modeltime: Period/year mapping
    """

    debug_checking: bool = Field(default=False, description="Extra diagnostics")
    large_number: float = Field(default=1e40, gt=0, description="Large finite number")
    small_number: float = Field(default=1e-6, gt=0, description="Small positive number")
    large_share_weight: float = Field(
        default=1e6, gt=0, description="Share weight reported as divergent"
    )
    logit_exponent_default: float = Field(
        default=LOGIT_EXP_DEFAULT, description="Default logit exponent"
    )
    modeltime: ModelTime = Field(default_factory=ModelTime, description="Model time")

    model_config = {"frozen": True}


class ModelContext(BaseModel):
    """External collaborators a technology needs after initialization.

    Attributes:
        marketplace: Price/demand ledger (see ``techchoice.markets.Marketplace``)
        config: Run configuration
    """

    marketplace: Any = Field(..., description="Price and demand ledger")
    config: ModelConfiguration = Field(
        default_factory=ModelConfiguration, description="Run configuration"
    )

    model_config = {"arbitrary_types_allowed": True, "frozen": True}


def _section(payload: dict[str, Any], name: str) -> dict[str, Any]:
    value = payload.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a mapping")
    return value


def load_model_config(config_path: Path | str) -> ModelConfiguration:
    """Load a :class:`ModelConfiguration` from a YAML file.

    Expected layout::

        debug_checking: true
        numerics:
          large_number: 1.0e40
          small_number: 1.0e-6
          large_share_weight: 1.0e6
          logit_exponent_default: -6
        modeltime:
          start_year: 2005
          time_step: 5
          periods: 10
    """
    path = Path(config_path)
    payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError("Model configuration YAML must define a top-level mapping")

    numerics = _section(payload, "numerics")
    modeltime = _section(payload, "modeltime")

    return ModelConfiguration(
        debug_checking=bool(payload.get("debug_checking", False)),
        modeltime=ModelTime(**modeltime),
        **numerics,
    )
