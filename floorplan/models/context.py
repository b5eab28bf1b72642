"""Build context: accumulates state during a layout build."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import FloorPlanSpec, Side
from .placement import PlacedElement
from .parameters import BuildParams, GenerationConfig


class BuildContext(BaseModel):
    """
    Holds all state during a single build pass.

    Rules read the plan and params, add placed elements,
    and record diagnostics. The generator orchestrates the flow.
    """
    # Input
    plan: FloorPlanSpec
    params: BuildParams = Field(default_factory=BuildParams)
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Diagnostics (populated by rules)
    boundary_doors: dict[Side, list[float]] = {}
    doors_placed: int = 0
    orphan_doors: int = 0

    # Output (populated by rules)
    elements: list[PlacedElement] = []

    def add_elements(self, elements: list[PlacedElement]) -> None:
        self.elements.extend(elements)
