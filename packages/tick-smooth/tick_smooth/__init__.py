"""tick-smooth - Frame-rate independent exponential smoothing of transforms."""
from __future__ import annotations

from tick_smooth import mat4, quat
from tick_smooth.components import TransformComponent
from tick_smooth.composition import Composition, begin, then
from tick_smooth.config import DEFAULTS, SmoothingDefaults, rate_from_retention
from tick_smooth.smoothers import SMOOTHERS, linear, rotational
from tick_smooth.types import ComponentBusyError, CompositionConsumedError

__all__ = [
    "DEFAULTS",
    "SMOOTHERS",
    "ComponentBusyError",
    "Composition",
    "CompositionConsumedError",
    "SmoothingDefaults",
    "TransformComponent",
    "begin",
    "linear",
    "mat4",
    "quat",
    "rate_from_retention",
    "rotational",
    "then",
]
