"""Floor plan loading from JSON data files."""

from __future__ import annotations
import logging
from pathlib import Path

from pydantic import ValidationError

from floorplan.core.errors import FloorPlanError
from floorplan.models import FloorPlanSpec

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_PLAN = DATA_DIR / "hospital.json"


def parse_floor_plan(text: str) -> FloorPlanSpec:
    try:
        return FloorPlanSpec.model_validate_json(text)
    except ValidationError as exc:
        raise FloorPlanError(f"invalid floor plan: {exc}") from exc


def load_floor_plan(path: str | Path) -> FloorPlanSpec:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FloorPlanError(f"cannot read floor plan {path}: {exc}") from exc
    plan = parse_floor_plan(text)
    logger.info("Loaded floor plan %r from %s: %d rooms", plan.name, path, len(plan.rooms))
    return plan


def default_floor_plan() -> FloorPlanSpec:
    """The bundled hospital floor plan."""
    return load_floor_plan(DEFAULT_PLAN)
