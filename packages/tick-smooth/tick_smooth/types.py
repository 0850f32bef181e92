"""Shared type aliases and exceptions for tick-smooth."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from tick_smooth.components import TransformComponent

Smoother = Callable[[Any, Any, float], Any]
Mapping = Callable[[Any], Any]
Combine = Callable[[Any, Any], Any]


class ComponentBusyError(RuntimeError):
    """Raised when a component is already held by a live composition."""

    def __init__(self, component: TransformComponent, message: str) -> None:
        self.component = component
        super().__init__(message)


class CompositionConsumedError(RuntimeError):
    """Raised when a composition is used after it has been driven."""
