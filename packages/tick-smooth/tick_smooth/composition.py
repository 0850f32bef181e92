"""Single-use builder that drives several components and folds their results."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tick_smooth.types import (
    Combine,
    ComponentBusyError,
    CompositionConsumedError,
    Mapping,
)

if TYPE_CHECKING:
    from tick_smooth.components import TransformComponent

logger = logging.getLogger(__name__)


def then(first: Any, second: Any) -> Any:
    """Default combine: apply ``first``, then ``second`` (column-vector matrices)."""
    return second @ first


class Composition:
    """Ordered list of (component, mapping) entries, executed by ``drive``.

    Built with :func:`begin` and extended with :meth:`and_then`. Nothing is
    advanced until :meth:`drive`, which steps every component by the same
    ``dt`` in recorded order, maps each new ``current`` and left-folds the
    mapped values with ``combine``::

        combine(combine(R_1, R_2), R_3) ...

    With the default :func:`then` combine and matrix mappings,
    ``a.begin(S).and_then(b, T).drive(dt)`` yields ``T @ S``: the transform
    recorded first is applied first.

    While the composition is live (not yet driven) it holds each recorded
    component exclusively. A composition can be driven once.
    """

    def __init__(
        self,
        component: TransformComponent,
        mapping: Mapping,
        combine: Combine = then,
    ) -> None:
        self._combine = combine
        self._entries: list[tuple[TransformComponent, Mapping]] = []
        self._consumed = False
        self._record(component, mapping)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __len__(self) -> int:
        return len(self._entries)

    def and_then(self, component: TransformComponent, mapping: Mapping) -> Composition:
        """Queue another component after the ones already recorded."""
        self._check_live()
        self._record(component, mapping)
        return self

    def drive(self, dt: float) -> Any:
        """Advance every recorded component by ``dt`` and return the folded result.

        If a mapping raises, the components recorded before it (and the one it
        was mapping) have already advanced while later ones have not. The
        composition is consumed and its components released either way.
        """
        self._check_live()
        self._consumed = True
        logger.debug("driving composition of %d components, dt=%s", len(self._entries), dt)
        try:
            result: Any = None
            for index, (component, mapping) in enumerate(self._entries):
                value = mapping(component._advance(dt))
                result = value if index == 0 else self._combine(result, value)
        finally:
            for component, _ in self._entries:
                component._release(self)
        return result

    def _check_live(self) -> None:
        if self._consumed:
            raise CompositionConsumedError("composition has already been driven")

    def _record(self, component: TransformComponent, mapping: Mapping) -> None:
        holder = component.holder
        if holder is not None:
            where = "this" if holder is self else "another"
            raise ComponentBusyError(
                component, f"component is already recorded in {where} live composition"
            )
        component._claim(self)
        self._entries.append((component, mapping))


def begin(
    component: TransformComponent,
    mapping: Mapping,
    combine: Combine = then,
) -> Composition:
    """Start a composition with ``component`` as its first entry."""
    return Composition(component, mapping, combine)
