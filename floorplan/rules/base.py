"""Abstract base class for all layout rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each places a specific kind of element
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from floorplan.models.context import BuildContext
from floorplan.models.placement import PlacedElement


class LayoutRule(ABC):
    """
    Base class for all layout rules.

    Subclasses implement `applies()` and `generate()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'rooms.walls')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Room Walls')."""
        ...

    @abstractmethod
    def applies(self, context: BuildContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: BuildContext) -> list[PlacedElement]:
        """
        Place elements for the given context.

        The context provides the floor plan, params, and any diagnostics
        recorded by rules that ran earlier.
        """
        ...
