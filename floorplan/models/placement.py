"""Placed geometry produced by a build."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

from .geometry import Point3D, Vector3D


class ElementKind(str, Enum):
    WALL = "wall"
    DOOR = "door"
    FLOOR = "floor"


class PlacedElement(BaseModel):
    """An axis-aligned box positioned in world space."""
    name: str
    group: str = ""      # Owning room, "OuterBoundary", "Doors", ...
    kind: ElementKind = ElementKind.WALL
    position: Point3D
    rotation_y: float = 0.0  # Yaw in degrees
    scale: Vector3D

    @property
    def path(self) -> str:
        return f"{self.group}/{self.name}" if self.group else self.name


class LayoutStats(BaseModel):
    """Summary counts for a build, for sanity-checking a run."""
    rooms_processed: int = 0
    rects_processed: int = 0
    doors_placed: int = 0
    boundary_doors: int = 0
    orphan_doors: int = 0
    walls: int = 0
    total_elements: int = 0


class WallLayout(BaseModel):
    """The complete generated layout; a description, not a live scene."""
    elements: list[PlacedElement]
    stats: LayoutStats = Field(default_factory=LayoutStats)

    @property
    def walls(self) -> list[PlacedElement]:
        return [e for e in self.elements if e.kind == ElementKind.WALL]

    def of_kind(self, kind: ElementKind) -> list[PlacedElement]:
        return [e for e in self.elements if e.kind == kind]

    def groups(self) -> dict[str, list[PlacedElement]]:
        out: dict[str, list[PlacedElement]] = {}
        for e in self.elements:
            out.setdefault(e.group, []).append(e)
        return out
