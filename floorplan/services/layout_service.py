"""High-level layout service: facade for the API and CLI layers."""

from __future__ import annotations
import logging
from datetime import datetime

from pydantic import ValidationError

from floorplan.models import (
    BuildParams, FloorPlanSpec, GenerationConfig, LayoutRecord,
    PlacedElement, ReconstructParams, ReconstructionResult, WallLayout,
)
from floorplan.core.errors import LayoutRecordError
from floorplan.core.exporter import export_elements, export_layout
from floorplan.core.generator import LayoutGenerator
from floorplan.core.plans import default_floor_plan
from floorplan.core.reconstruct import reconstruct_record, segments_to_elements
from floorplan.core.registry import RuleRegistry, create_default_registry
from floorplan.core.scene import SceneRoot

logger = logging.getLogger(__name__)


def parse_record(text: str | bytes | None) -> LayoutRecord:
    """Parse a layout record; missing, malformed or group-less records are errors."""
    if text is None or not text.strip():
        raise LayoutRecordError("no layout record provided")
    try:
        record = LayoutRecord.model_validate_json(text)
    except ValidationError as exc:
        raise LayoutRecordError(f"failed to parse layout record: {exc}") from exc
    return check_record(record)


def check_record(record: LayoutRecord | None) -> LayoutRecord:
    if record is None:
        raise LayoutRecordError("no layout record provided")
    if not record.groups:
        raise LayoutRecordError("layout record has no groups")
    return record


class LayoutService:
    """Validates input, delegates to the generator/reconstructor, owns the scene."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = LayoutGenerator(self.registry)
        self.scene = SceneRoot()

    def build(
        self,
        plan: FloorPlanSpec | None = None,
        params: BuildParams | None = None,
        config: GenerationConfig | None = None,
    ) -> WallLayout:
        if plan is None:
            plan = default_floor_plan()
        return self.generator.generate(plan, params, config)

    def export(
        self,
        layout: WallLayout,
        scene_name: str,
        grid_size: float = 0.5,
        wall_thickness: float = 0.15,
        exported_at: datetime | None = None,
    ) -> LayoutRecord:
        return export_layout(layout, scene_name, grid_size, wall_thickness, exported_at)

    def reconstruct(
        self,
        record: LayoutRecord | None,
        params: ReconstructParams | None = None,
    ) -> ReconstructionResult:
        record = check_record(record)
        result = reconstruct_record(record, params)
        if result.empty:
            logger.warning("Record %r: 0 segments produced", record.scene_name)
        return result

    def reconstruct_elements(
        self,
        result: ReconstructionResult,
        params: ReconstructParams | None = None,
    ) -> list[PlacedElement]:
        if params is None:
            params = ReconstructParams()
        return segments_to_elements(result.segments, params.wall_height, params.wall_thickness)

    def reconstruct_to_record(
        self,
        record: LayoutRecord,
        params: ReconstructParams | None = None,
    ) -> tuple[ReconstructionResult, LayoutRecord]:
        """Reconstruct and export the merged walls as a new record."""
        if params is None:
            params = ReconstructParams()
        result = self.reconstruct(record, params)
        merged = export_elements(
            self.reconstruct_elements(result, params),
            scene_name=record.scene_name,
            grid_size=result.grid_size,
            wall_thickness_default=params.wall_thickness,
        )
        return result, merged

    def rebuild_scene(self, elements: list[PlacedElement]) -> int:
        """Discard the previous run's children and materialize `elements`."""
        return self.scene.materialize(elements)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
