"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from floorplan.models import (
    BuildParams, FloorPlanSpec, GenerationConfig, LayoutRecord,
    ReconstructParams, ReconstructionStats, WallLayout, WallSegment,
)


class BuildRequest(BaseModel):
    """Request body for /build and /export. No plan = bundled default."""
    plan: FloorPlanSpec | None = None
    params: BuildParams = BuildParams()
    config: GenerationConfig = GenerationConfig()
    materialize: bool = True


class BuildResponse(BaseModel):
    layout: WallLayout
    rule_count: int
    room_count: int


class ExportRequest(BaseModel):
    plan: FloorPlanSpec | None = None
    params: BuildParams = BuildParams()
    config: GenerationConfig = GenerationConfig()
    scene_name: str = "floorplan"
    grid_size: float = 0.5


class ReconstructRequest(BaseModel):
    record: LayoutRecord | None = None
    params: ReconstructParams = ReconstructParams()
    materialize: bool = False


class ReconstructResponse(BaseModel):
    segments: list[WallSegment]
    stats: ReconstructionStats
    grid_size: float
    empty: bool
    record: LayoutRecord


class RuleInfo(BaseModel):
    id: str
    name: str


class SceneInfo(BaseModel):
    name: str
    child_count: int
    groups: dict[str, int]
