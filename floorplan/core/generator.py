"""Layout generator: runs the layout rules over a floor plan."""

from __future__ import annotations
import logging

from floorplan.models import (
    BuildContext, BuildParams, ElementKind, FloorPlanSpec, GenerationConfig,
    LayoutStats, WallLayout,
)
from floorplan.core.registry import RuleRegistry

logger = logging.getLogger(__name__)


class LayoutGenerator:
    """
    Stateless layout generator.

    Takes a floor plan + params, executes applicable rules, and returns
    a WallLayout describing every placed element. Nothing here touches a
    live scene; see SceneRoot for the apply step.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry

    def generate(
        self,
        plan: FloorPlanSpec,
        params: BuildParams | None = None,
        config: GenerationConfig | None = None,
    ) -> WallLayout:
        if params is None:
            params = BuildParams()
        if config is None:
            config = GenerationConfig()

        context = BuildContext(plan=plan, params=params, config=config)

        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            elements = rule.generate(context)
            logger.debug("Rule %s placed %d elements", rule.get_id(), len(elements))
            context.add_elements(elements)

        stats = LayoutStats(
            rooms_processed=sum(1 for r in plan.rooms if r.rects),
            rects_processed=sum(len(r.rects) for r in plan.rooms),
            doors_placed=context.doors_placed,
            boundary_doors=sum(len(v) for v in context.boundary_doors.values()),
            orphan_doors=context.orphan_doors,
            walls=sum(1 for e in context.elements if e.kind == ElementKind.WALL),
            total_elements=len(context.elements),
        )
        layout = WallLayout(elements=context.elements, stats=stats)

        logger.info(
            "Built %r: %d rooms, %d doors placed, %d boundary doors, %d walls",
            plan.name, layout.stats.rooms_processed, layout.stats.doors_placed,
            layout.stats.boundary_doors, layout.stats.walls,
        )
        return layout
