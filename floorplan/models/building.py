"""Authored floor plan models: rooms, rectangles, doors."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field, field_validator, model_validator


class Side(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def runs_along_x(self) -> bool:
        """North/South edges run along X; East/West along Z."""
        return self in (Side.NORTH, Side.SOUTH)


class RectDef(BaseModel):
    """Inclusive grid-cell bounding box of one room footprint."""
    x_min: int
    x_max: int
    y_min: int
    y_max: int

    @model_validator(mode="after")
    def _check_bounds(self) -> RectDef:
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ValueError(
                f"empty rectangle x=[{self.x_min}, {self.x_max}] "
                f"y=[{self.y_min}, {self.y_max}]"
            )
        return self


class DoorSpec(BaseModel):
    """A door on one edge of one of its room's rectangles."""
    side: Side
    rect_index: int = 0
    t: float = 0.5  # Normalized position along the edge (0..1)

    @field_validator("t")
    @classmethod
    def _clamp_t(cls, v: float) -> float:
        return max(0.0, min(1.0, v))


class Room(BaseModel):
    name: str
    rects: list[RectDef] = []
    doors: list[DoorSpec] = []

    def doors_on(self, rect_index: int, side: Side) -> list[float]:
        """Door offsets for one rectangle side, in authoring order."""
        return [
            d.t for d in self.doors
            if d.rect_index == rect_index and d.side == side
        ]

    def orphan_doors(self) -> list[DoorSpec]:
        """Doors whose rect_index does not name one of this room's rectangles."""
        return [
            d for d in self.doors
            if not 0 <= d.rect_index < len(self.rects)
        ]


class FloorPlanSpec(BaseModel):
    """A complete hand-authored floor plan on a fixed grid."""
    name: str = "floorplan"
    grid_width: int = Field(default=15, gt=0)
    grid_height: int = Field(default=15, gt=0)
    rooms: list[Room] = []

    @property
    def door_count(self) -> int:
        return sum(len(r.doors) for r in self.rooms)
