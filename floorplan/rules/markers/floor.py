"""Floor slab covering the whole grid."""

from __future__ import annotations

from floorplan.rules.base import LayoutRule
from floorplan.models import (
    BuildContext, ElementKind, PlacedElement, Point3D, Vector3D, FLOOR_GROUP,
)


class FloorSlabRule(LayoutRule):
    """One thin box under the map, top face at y = 0."""

    priority = 10  # Run first, everything stands on it

    def get_id(self) -> str:
        return "floor.slab"

    def get_name(self) -> str:
        return "Floor Slab"

    def applies(self, context: BuildContext) -> bool:
        return True

    def generate(self, context: BuildContext) -> list[PlacedElement]:
        params = context.params
        plan = context.plan
        cs = params.cell_size
        ft = params.floor_thickness

        return [PlacedElement(
            name="Floor",
            group=FLOOR_GROUP,
            kind=ElementKind.FLOOR,
            position=Point3D(
                x=plan.grid_width * cs * 0.5 + cs * 0.5,
                y=-ft * 0.5,
                z=plan.grid_height * cs * 0.5 + cs * 0.5,
            ),
            scale=Vector3D(x=plan.grid_width * cs, y=ft, z=plan.grid_height * cs),
        )]
