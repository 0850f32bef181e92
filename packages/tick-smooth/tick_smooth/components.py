"""Exponentially smoothed transform component."""
from __future__ import annotations

import copy
import logging
import math
import weakref
from typing import Any

import numpy as np

from tick_smooth import quat
from tick_smooth.composition import Composition, then
from tick_smooth.config import DEFAULTS, rate_from_retention
from tick_smooth.smoothers import linear, resolve, rotational
from tick_smooth.types import Combine, ComponentBusyError, Mapping, Smoother

logger = logging.getLogger(__name__)


def _frozen(value: Any) -> Any:
    """Private copy of ``value``; arrays are made read-only."""
    if isinstance(value, np.ndarray):
        value = value.copy()
        value.setflags(write=False)
        return value
    return copy.copy(value)


class TransformComponent:
    """One smoothed value chasing a caller-set target.

    ``current`` only changes through :meth:`drive`, which closes
    ``1 - exp(-rate * dt)`` of the remaining gap. Splitting an interval into
    several shorter drives lands on the same value as one long drive, so the
    motion does not depend on frame rate.

    Drive a component once per frame. Driving twice applies the decay twice;
    this is not detected.

    NaN or infinite values in ``target`` propagate into ``current`` unchecked.
    Stored arrays are read-only copies, so ``current`` cannot be edited in
    place or through the array passed as ``initial``.
    """

    def __init__(self, rate: float, initial: Any, smoother: Smoother | str = linear) -> None:
        if not 0.0 < rate < math.inf:
            raise ValueError("rate must be positive and finite")
        self._rate = float(rate)
        self._smoother = resolve(smoother)
        self._current = _frozen(initial)
        # Separate object so in-place edits like ``target += v`` leave current alone.
        self.target = copy.copy(initial)
        self._holder: weakref.ref[Composition] | None = None

    @classmethod
    def from_retention(
        cls, retention: float, initial: Any, smoother: Smoother | str = linear
    ) -> TransformComponent:
        """Build from the fraction of the gap left after one second."""
        return cls(rate_from_retention(retention), initial, smoother)

    @classmethod
    def new_translate(cls, initial: Any, rate: float | None = None) -> TransformComponent:
        """Linear component, default retention 0.01 (rate ~4.61/s)."""
        return cls(DEFAULTS.translate_rate if rate is None else rate, initial, linear)

    @classmethod
    def new_rotate(cls, initial: Any = None, rate: float | None = None) -> TransformComponent:
        """Quaternion component, default retention 0.04 (rate ~3.22/s)."""
        if initial is None:
            initial = quat.identity()
        return cls(DEFAULTS.rotate_rate if rate is None else rate, initial, rotational)

    @classmethod
    def new_zoom(cls, initial: Any, rate: float | None = None) -> TransformComponent:
        """Linear component, default retention 0.03 (rate ~3.51/s)."""
        return cls(DEFAULTS.zoom_rate if rate is None else rate, initial, linear)

    @classmethod
    def new_angle(cls, initial: Any, rate: float | None = None) -> TransformComponent:
        """Linear component, default retention 0.04 (rate ~3.22/s)."""
        return cls(DEFAULTS.angle_rate if rate is None else rate, initial, linear)

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def retention(self) -> float:
        return math.exp(-self._rate)

    @property
    def smoother(self) -> Smoother:
        return self._smoother

    @property
    def current(self) -> Any:
        return self._current

    @property
    def holder(self) -> Composition | None:
        """The live composition currently holding this component, if any."""
        if self._holder is None:
            return None
        composition = self._holder()
        if composition is None or composition.consumed:
            return None
        return composition

    def drive(self, dt: float) -> Any:
        """Advance ``current`` toward ``target`` by ``dt`` seconds and return it."""
        if self.holder is not None:
            raise ComponentBusyError(
                self, "component is held by a live composition; drive the composition"
            )
        return self._advance(dt)

    def snap(self, value: Any) -> Any:
        """Set ``target`` and jump ``current`` onto it exactly.

        Also clears a NaN ``current`` left behind by bad input.
        """
        self.target = value
        return self.drive(math.inf)

    def begin(self, mapping: Mapping, combine: Combine = then) -> Composition:
        """Start a composition with this component as the first entry."""
        return Composition(self, mapping, combine)

    def _advance(self, dt: float) -> Any:
        if dt < 0.0:
            logger.debug("negative dt %s clamped to 0", dt)
            dt = 0.0
        alpha = 1.0 - math.exp(-self._rate * dt)
        if alpha == 1.0:
            self._current = _frozen(self.target)
        else:
            self._current = _frozen(self._smoother(self._current, self.target, alpha))
        return self._current

    def _claim(self, composition: Composition) -> None:
        self._holder = weakref.ref(composition)

    def _release(self, composition: Composition) -> None:
        if self._holder is not None and self._holder() is composition:
            self._holder = None

    def __repr__(self) -> str:
        return (
            f"TransformComponent(rate={self._rate!r}, current={self._current!r}, "
            f"target={self.target!r}, smoother={getattr(self._smoother, '__name__', self._smoother)})"
        )
