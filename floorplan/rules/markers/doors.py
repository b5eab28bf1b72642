"""Door markers: one placed element at the pose of every valid door."""

from __future__ import annotations

from floorplan.core.grid import door_pose, rect_bounds
from floorplan.rules.base import LayoutRule
from floorplan.models import (
    BuildContext, ElementKind, PlacedElement, Point3D, Vector3D, DOORS_GROUP,
)


class DoorMarkersRule(LayoutRule):
    """Door-sized boxes standing in each door gap."""

    priority = 60
    dependencies = ["rooms.walls"]

    def get_id(self) -> str:
        return "rooms.doors"

    def get_name(self) -> str:
        return "Door Markers"

    def applies(self, context: BuildContext) -> bool:
        return context.plan.door_count > 0

    def generate(self, context: BuildContext) -> list[PlacedElement]:
        params = context.params
        markers: list[PlacedElement] = []

        for room in context.plan.rooms:
            for door in room.doors:
                if not 0 <= door.rect_index < len(room.rects):
                    continue
                r_min, r_max = rect_bounds(room.rects[door.rect_index], params.cell_size)
                p, yaw = door_pose(r_min, r_max, door.side, door.t)
                markers.append(PlacedElement(
                    name=f"Door_{room.name}_{door.side.value}",
                    group=DOORS_GROUP,
                    kind=ElementKind.DOOR,
                    position=Point3D(x=p.x, y=params.door_height * 0.5, z=p.z),
                    rotation_y=yaw,
                    # Door local X runs along the wall it sits in
                    scale=Vector3D(
                        x=params.door_width,
                        y=params.door_height,
                        z=params.wall_thickness,
                    ),
                ))

        return markers
