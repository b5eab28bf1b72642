"""Layout record: the exported, human-diffable JSON exchange format.

Field names on the wire are camelCase (``sceneName``, ``groupName``,
``prefabHint``...). Unknown fields and groups are ignored so that records
carrying extra data still load.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

WALLS_GROUP = "Walls"
DOORS_GROUP = "Doors"
FLOOR_GROUP = "Floor"

DEFAULT_NOTES = "Positions are world-space; rotationY only is captured for 2D layout."


class PlacedInstanceRecord(BaseModel):
    """One captured transform: world position, yaw, local scale."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    path: str = ""
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    ry: float = 0.0  # Yaw in degrees
    sx: float = 1.0
    sy: float = 1.0
    sz: float = 1.0
    prefab_hint: str = Field(default="", alias="prefabHint")
    tag: str = "Untagged"
    layer: int = 0


class InstanceGroup(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    group_name: str = Field(alias="groupName")
    items: list[PlacedInstanceRecord] = []


class LayoutRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    scene_name: str = Field(default="", alias="sceneName")
    exported_at: str = Field(default="", alias="exportedAt")  # ISO-8601
    grid_size: float | None = Field(default=None, alias="gridSize")
    wall_thickness_default: float = Field(default=0.2, alias="wallThicknessDefault")
    groups: list[InstanceGroup] = []
    notes: str = DEFAULT_NOTES

    def find_group(self, name: str) -> InstanceGroup | None:
        """Case-insensitive lookup by group name."""
        wanted = name.casefold()
        for g in self.groups:
            if g.group_name.casefold() == wanted:
                return g
        return None

    def items_in(self, name: str) -> list[PlacedInstanceRecord]:
        """All items of every group matching `name` (case-insensitive)."""
        wanted = name.casefold()
        return [
            item
            for g in self.groups if g.group_name.casefold() == wanted
            for item in g.items
        ]

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
