"""Layout export: capture placed elements as a layout record.

Walls go to the "Walls" group, door markers to "Doors", and the floor to
"Floor". Every item's path is "<group>/<name>", mirroring a scene hierarchy
of one parent per room.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Iterable

from floorplan.models import (
    DOORS_GROUP, FLOOR_GROUP, WALLS_GROUP,
    ElementKind, InstanceGroup, LayoutRecord, PlacedElement,
    PlacedInstanceRecord, WallLayout,
)

GROUP_FOR_KIND = {
    ElementKind.WALL: WALLS_GROUP,
    ElementKind.DOOR: DOORS_GROUP,
    ElementKind.FLOOR: FLOOR_GROUP,
}


def to_instance_record(element: PlacedElement) -> PlacedInstanceRecord:
    return PlacedInstanceRecord(
        name=element.name,
        path=element.path,
        px=element.position.x,
        py=element.position.y,
        pz=element.position.z,
        ry=element.rotation_y,
        sx=element.scale.x,
        sy=element.scale.y,
        sz=element.scale.z,
        tag=element.kind.value.capitalize(),
    )


def export_elements(
    elements: Iterable[PlacedElement],
    scene_name: str,
    grid_size: float,
    wall_thickness_default: float,
    exported_at: datetime | None = None,
) -> LayoutRecord:
    """Build a record with one group per element kind, in kind order."""
    if exported_at is None:
        exported_at = datetime.now(timezone.utc)

    groups: dict[str, InstanceGroup] = {
        name: InstanceGroup(group_name=name) for name in GROUP_FOR_KIND.values()
    }

    for element in elements:
        groups[GROUP_FOR_KIND[element.kind]].items.append(to_instance_record(element))

    return LayoutRecord(
        scene_name=scene_name,
        exported_at=exported_at.isoformat(),
        grid_size=grid_size,
        wall_thickness_default=wall_thickness_default,
        groups=[g for g in groups.values() if g.items],
    )


def export_layout(
    layout: WallLayout,
    scene_name: str,
    grid_size: float = 0.5,
    wall_thickness_default: float = 0.15,
    exported_at: datetime | None = None,
) -> LayoutRecord:
    return export_elements(
        layout.elements, scene_name, grid_size,
        wall_thickness_default, exported_at,
    )
