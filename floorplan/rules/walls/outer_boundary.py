"""Outer boundary: the perimeter wall around the whole grid.

A room door opens the perimeter only when its rectangle touches the map
edge on the door's side. The door's world position is projected back onto
the boundary edge as a normalized offset, and each boundary side is built
as one wall run over all of its projected doors.
"""

from __future__ import annotations
import logging

from floorplan.core.grid import door_pose, grid_bounds, rect_bounds
from floorplan.core.wall_run import build_wall_run, materialize_run_segment
from floorplan.rules.base import LayoutRule
from floorplan.rules.walls.room_walls import RUN_ORDER
from floorplan.models import (
    BuildContext, FloorPlanSpec, PlacedElement, RectDef, Side, inverse_lerp,
)

logger = logging.getLogger(__name__)

BOUNDARY_GROUP = "OuterBoundary"


def on_boundary(rect: RectDef, side: Side, plan: FloorPlanSpec) -> bool:
    """True if the rectangle's edge on `side` lies on the map's outer extent."""
    if side == Side.SOUTH:
        return rect.y_min == 1
    if side == Side.NORTH:
        return rect.y_max == plan.grid_height
    if side == Side.WEST:
        return rect.x_min == 1
    return rect.x_max == plan.grid_width


def collect_boundary_doors(plan: FloorPlanSpec, cell_size: float) -> dict[Side, list[float]]:
    """Door offsets per boundary side, normalized along the boundary edge."""
    b_min, b_max = grid_bounds(plan.grid_width, plan.grid_height, cell_size)
    offsets: dict[Side, list[float]] = {side: [] for side in RUN_ORDER}

    for room in plan.rooms:
        for i, rect in enumerate(room.rects):
            r_min, r_max = rect_bounds(rect, cell_size)
            for door in room.doors:
                if door.rect_index != i or not on_boundary(rect, door.side, plan):
                    continue
                p, _ = door_pose(r_min, r_max, door.side, door.t)
                if door.side.runs_along_x:
                    t = inverse_lerp(b_min.x, b_max.x, p.x)
                else:
                    t = inverse_lerp(b_min.z, b_max.z, p.z)
                offsets[door.side].append(t)

    return offsets


class OuterBoundaryRule(LayoutRule):
    """Perimeter walls with openings aligned to edge-touching room doors."""

    priority = 70

    def get_id(self) -> str:
        return "boundary.walls"

    def get_name(self) -> str:
        return "Outer Boundary"

    def applies(self, context: BuildContext) -> bool:
        return True

    def generate(self, context: BuildContext) -> list[PlacedElement]:
        params = context.params
        plan = context.plan
        b_min, b_max = grid_bounds(plan.grid_width, plan.grid_height, params.cell_size)

        offsets = collect_boundary_doors(plan, params.cell_size)
        context.boundary_doors = offsets

        elements: list[PlacedElement] = []
        for side in RUN_ORDER:
            run = build_wall_run(
                side, b_min, b_max, offsets[side],
                params.door_width, params.wall_thickness,
            )
            for seg in run:
                elements.append(materialize_run_segment(
                    seg, side, b_min, b_max,
                    params.wall_height, params.wall_thickness,
                    group=BOUNDARY_GROUP,
                ))

        logger.debug(
            "Outer boundary: %d openings, %d wall pieces",
            sum(len(v) for v in offsets.values()), len(elements),
        )
        return elements
