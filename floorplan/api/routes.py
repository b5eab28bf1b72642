"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from floorplan.core.errors import LayoutRecordError
from floorplan.models import LayoutRecord
from floorplan.services.layout_service import LayoutService
from floorplan.api.schemas import (
    BuildRequest, BuildResponse, ExportRequest, ReconstructRequest,
    ReconstructResponse, RuleInfo, SceneInfo,
)

router = APIRouter()

# Shared service instance
_service = LayoutService()


@router.post("/build", response_model=BuildResponse)
async def build_layout(request: BuildRequest) -> BuildResponse:
    """Build walls, doors and floor for a floor plan."""
    layout = _service.build(request.plan, request.params, request.config)
    if request.materialize:
        _service.rebuild_scene(layout.elements)

    return BuildResponse(
        layout=layout,
        rule_count=len(_service.list_rules()),
        room_count=layout.stats.rooms_processed,
    )


@router.post("/export", response_model=LayoutRecord)
async def export_layout(request: ExportRequest) -> LayoutRecord:
    """Build a floor plan and return it as a layout record."""
    layout = _service.build(request.plan, request.params, request.config)
    return _service.export(
        layout, request.scene_name, request.grid_size, request.params.wall_thickness,
    )


@router.post("/reconstruct", response_model=ReconstructResponse)
async def reconstruct_layout(request: ReconstructRequest) -> ReconstructResponse:
    """Merge the Walls group of a layout record into a minimal wall set."""
    try:
        result, merged = _service.reconstruct_to_record(request.record, request.params)
    except LayoutRecordError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if request.materialize:
        _service.rebuild_scene(_service.reconstruct_elements(result, request.params))

    return ReconstructResponse(
        segments=result.segments,
        stats=result.stats,
        grid_size=result.grid_size,
        empty=result.empty,
        record=merged,
    )


@router.get("/scene", response_model=SceneInfo)
async def scene_info() -> SceneInfo:
    """Describe what the last materialized run left in the scene."""
    scene = _service.scene
    return SceneInfo(name=scene.name, child_count=scene.child_count, groups=scene.summary())


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available layout rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
