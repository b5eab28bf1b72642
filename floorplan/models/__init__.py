from .geometry import Point2D, Point3D, Vector3D, lerp, inverse_lerp, snap
from .building import Side, RectDef, DoorSpec, Room, FloorPlanSpec
from .placement import ElementKind, PlacedElement, LayoutStats, WallLayout
from .parameters import BuildParams, ReconstructParams, GenerationConfig, OrientationMode
from .segments import Orientation, WallSegment, ReconstructionStats, ReconstructionResult
from .record import (
    PlacedInstanceRecord, InstanceGroup, LayoutRecord,
    WALLS_GROUP, DOORS_GROUP, FLOOR_GROUP,
)
from .context import BuildContext

__all__ = [
    "Point2D", "Point3D", "Vector3D", "lerp", "inverse_lerp", "snap",
    "Side", "RectDef", "DoorSpec", "Room", "FloorPlanSpec",
    "ElementKind", "PlacedElement", "LayoutStats", "WallLayout",
    "BuildParams", "ReconstructParams", "GenerationConfig", "OrientationMode",
    "Orientation", "WallSegment", "ReconstructionStats", "ReconstructionResult",
    "PlacedInstanceRecord", "InstanceGroup", "LayoutRecord",
    "WALLS_GROUP", "DOORS_GROUP", "FLOOR_GROUP",
    "BuildContext",
]
