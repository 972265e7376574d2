"""Core value containers for techchoice.

This module provides:
- Parameters: physical/economic technology parameters and the shared store
- Calibration: historical input/output anchors
- Model time and run configuration
"""

from techchoice.core.calibration_data import (
    CalDataInput,
    CalDataOutput,
    CalDataOutputPercap,
    CalibrationTarget,
)
from techchoice.core.config import ModelConfiguration, ModelContext, load_model_config
from techchoice.core.constants import FuelKind
from techchoice.core.modeltime import ModelTime
from techchoice.core.parameters import (
    ParameterSource,
    ParameterStore,
    TechnologyParameters,
)

__all__ = [
    # Parameters
    "TechnologyParameters",
    "ParameterStore",
    "ParameterSource",
    "FuelKind",
    # Calibration
    "CalibrationTarget",
    "CalDataInput",
    "CalDataOutput",
    "CalDataOutputPercap",
    # Configuration
    "ModelTime",
    "ModelConfiguration",
    "ModelContext",
    "load_model_config",
]
