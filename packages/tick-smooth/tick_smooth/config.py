"""Default smoothing rates."""
from __future__ import annotations

import math
from dataclasses import dataclass


def rate_from_retention(retention: float) -> float:
    """Convert a per-second retention fraction into a decay rate (1/s)."""
    if not 0.0 < retention < 1.0:
        raise ValueError("retention must be in (0, 1)")
    return -math.log(retention)


@dataclass(frozen=True)
class SmoothingDefaults:
    """Immutable default retentions for the convenience constructors.

    A retention is the fraction of the remaining gap still left after one
    second of driving. Closer to 0.0 follows the target tightly, closer to 1.0
    lags behind it.

    Attributes:
        translate_retention: Used by ``TransformComponent.new_translate``.
        rotate_retention: Used by ``TransformComponent.new_rotate``.
        zoom_retention: Used by ``TransformComponent.new_zoom``.
        angle_retention: Used by ``TransformComponent.new_angle``.
    """

    translate_retention: float = 0.01
    rotate_retention: float = 0.04
    zoom_retention: float = 0.03
    angle_retention: float = 0.04

    @property
    def translate_rate(self) -> float:
        return rate_from_retention(self.translate_retention)

    @property
    def rotate_rate(self) -> float:
        return rate_from_retention(self.rotate_retention)

    @property
    def zoom_rate(self) -> float:
        return rate_from_retention(self.zoom_retention)

    @property
    def angle_rate(self) -> float:
        return rate_from_retention(self.angle_retention)


DEFAULTS = SmoothingDefaults()
