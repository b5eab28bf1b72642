"""Scene apply step: materialize a layout into a live scene root.

Builds are pure; this is the only place that mutates state. Every
materialize call destroys all previously generated children first.
"""

from __future__ import annotations
import logging
from typing import Iterable

from floorplan.models import PlacedElement

logger = logging.getLogger(__name__)


class SceneRoot:
    """A parent node holding generated elements, one child group per owner."""

    def __init__(self, name: str = "LayoutRoot") -> None:
        self.name = name
        self._children: dict[str, list[PlacedElement]] = {}

    @property
    def child_count(self) -> int:
        return sum(len(v) for v in self._children.values())

    def children(self, group: str) -> list[PlacedElement]:
        return list(self._children.get(group, []))

    def group_names(self) -> list[str]:
        return list(self._children)

    def clear(self) -> int:
        """Destroy all generated children. Returns how many were removed."""
        removed = self.child_count
        self._children.clear()
        return removed

    def materialize(self, elements: Iterable[PlacedElement]) -> int:
        """Replace the scene's contents with `elements`."""
        removed = self.clear()
        for element in elements:
            self._children.setdefault(element.group, []).append(element)
        logger.info(
            "%s: removed %d, materialized %d elements in %d groups",
            self.name, removed, self.child_count, len(self._children),
        )
        return self.child_count

    def summary(self) -> dict[str, int]:
        return {group: len(items) for group, items in self._children.items()}
