"""Per-kind blending steps used to move a current value toward its target."""
from __future__ import annotations

from tick_smooth import quat
from tick_smooth.types import Smoother


def linear(current, target, alpha: float):
    """Close ``alpha`` of the gap with a straight lerp. Floats and arrays."""
    return current + (target - current) * alpha


def rotational(current, target, alpha: float):
    """Slerp a unit quaternion along the shortest arc, then renormalize."""
    return quat.normalize(quat.slerp(current, target, alpha))


SMOOTHERS: dict[str, Smoother] = {
    "linear": linear,
    "rotational": rotational,
}


def resolve(smoother: Smoother | str) -> Smoother:
    """Look up a registered smoother by name; callables pass through."""
    if callable(smoother):
        return smoother
    try:
        return SMOOTHERS[smoother]
    except KeyError:
        known = ", ".join(sorted(SMOOTHERS))
        raise KeyError(f"unknown smoother {smoother!r} (known: {known})") from None
