"""Room walls: one wall run per side of every room rectangle.

Doors on a rectangle side cut door-width gaps out of that side's run.
Doors naming a rectangle the room does not have are skipped and counted.
"""

from __future__ import annotations
import logging

from floorplan.core.grid import rect_bounds
from floorplan.core.wall_run import build_wall_run, materialize_run_segment
from floorplan.rules.base import LayoutRule
from floorplan.models import BuildContext, PlacedElement, Room, Side

logger = logging.getLogger(__name__)

RUN_ORDER = (Side.SOUTH, Side.NORTH, Side.WEST, Side.EAST)


class RoomWallsRule(LayoutRule):
    """Walls around each room rectangle, with door gaps."""

    priority = 50

    def get_id(self) -> str:
        return "rooms.walls"

    def get_name(self) -> str:
        return "Room Walls"

    def applies(self, context: BuildContext) -> bool:
        return any(r.rects for r in context.plan.rooms)

    def generate(self, context: BuildContext) -> list[PlacedElement]:
        elements: list[PlacedElement] = []
        for room in context.plan.rooms:
            if not room.rects:
                continue
            elements.extend(self._room_walls(room, context))
        return elements

    def _room_walls(self, room: Room, context: BuildContext) -> list[PlacedElement]:
        params = context.params
        elements: list[PlacedElement] = []

        orphans = room.orphan_doors()
        if orphans:
            logger.warning(
                "Room %r: %d door(s) reference a missing rectangle, skipped",
                room.name, len(orphans),
            )
            context.orphan_doors += len(orphans)

        for i, rect in enumerate(room.rects):
            box_min, box_max = rect_bounds(rect, params.cell_size)
            for side in RUN_ORDER:
                doors = room.doors_on(i, side)
                context.doors_placed += len(doors)
                run = build_wall_run(
                    side, box_min, box_max, doors,
                    params.door_width, params.wall_thickness,
                )
                for seg in run:
                    elements.append(materialize_run_segment(
                        seg, side, box_min, box_max,
                        params.wall_height, params.wall_thickness,
                        group=room.name,
                    ))

        logger.debug("Room %r: %d wall pieces", room.name, len(elements))
        return elements
