"""Build and reconstruction parameters."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field


class OrientationMode(str, Enum):
    COMBINED = "combined"   # Axis-aligned yaw required, longest scale axis is the run
    ROTATION = "rotation"   # Yaw alone decides; length read from sx or sz
    SCALE = "scale"         # Larger horizontal scale component decides, yaw ignored


class BuildParams(BaseModel):
    """Geometry settings for the forward (authoring) path."""
    cell_size: float = Field(default=2.3, gt=0)     # Meters per grid cell
    wall_thickness: float = Field(default=0.15, gt=0)
    wall_height: float = Field(default=2.8, gt=0)
    door_width: float = Field(default=1.2, gt=0)
    door_height: float = Field(default=2.3, gt=0)
    floor_thickness: float = Field(default=0.1, gt=0)


class ReconstructParams(BaseModel):
    """Settings for rebuilding merged walls from a layout record."""
    grid_size: float = Field(default=0.5, gt=0)     # Overridden by a record's positive gridSize
    wall_thickness: float = Field(default=0.15, gt=0)
    wall_height: float = Field(default=2.8, gt=0)
    merge_tolerance: float = Field(default=0.05, ge=0)
    min_segment_length: float = Field(default=0.3, gt=0)
    snap_to_grid: bool = True
    min_marker_size: float = Field(default=0.2, ge=0)  # Below this on both axes = marker
    angle_tolerance: float = Field(default=5.0, ge=0, lt=45)  # Degrees
    orientation_mode: OrientationMode = OrientationMode.COMBINED
    require_wall_name: bool = False  # Only accept items whose name contains "wall"


class GenerationConfig(BaseModel):
    """Controls which layout rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
