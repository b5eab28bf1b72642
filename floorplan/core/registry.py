"""Rule registry: holds the layout rules and decides their run order."""

from __future__ import annotations
import logging
from typing import Iterable

from floorplan.models.context import BuildContext
from floorplan.models.parameters import GenerationConfig
from floorplan.rules.base import LayoutRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Layout rules keyed by id.

    A build runs the selected, applicable rules in priority order, each
    after the rules it depends on. A rule whose dependency is disabled or
    does not apply is skipped along with everything that depends on it.
    """

    def __init__(self, rules: Iterable[LayoutRule] = ()) -> None:
        self._rules: dict[str, LayoutRule] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: LayoutRule) -> None:
        rule_id = rule.get_id()
        if rule_id in self._rules:
            raise ValueError(f"layout rule {rule_id!r} is already registered")
        self._rules[rule_id] = rule

    def list_rules(self) -> list[LayoutRule]:
        return list(self._rules.values())

    def _selected(self, config: GenerationConfig) -> list[LayoutRule]:
        rules = self.list_rules()
        if config.enabled_rules:
            rules = [r for r in rules if r.get_id() in config.enabled_rules]
        return [r for r in rules if r.get_id() not in config.disabled_rules]

    def get_applicable_rules(self, context: BuildContext) -> list[LayoutRule]:
        """Selected rules that apply to `context`, in run order."""
        candidates = {
            r.get_id(): r for r in self._selected(context.config) if r.applies(context)
        }
        runnable: dict[str, bool] = {}
        ordered: list[LayoutRule] = []

        def resolve(rule_id: str) -> bool:
            if rule_id in runnable:
                return runnable[rule_id]
            rule = candidates.get(rule_id)
            if rule is None:
                return False
            runnable[rule_id] = False  # Cycles resolve as missing
            missing = [dep for dep in rule.dependencies if not resolve(dep)]
            if missing:
                logger.warning(
                    "Skipping rule %s: required rule(s) %s will not run",
                    rule_id, ", ".join(missing),
                )
                return False
            runnable[rule_id] = True
            ordered.append(rule)
            return True

        for rule in sorted(candidates.values(), key=lambda r: r.priority):
            resolve(rule.get_id())
        return ordered


def create_default_registry() -> RuleRegistry:
    """Registry with the floor slab, room walls, door markers and boundary."""
    from floorplan.rules.markers.doors import DoorMarkersRule
    from floorplan.rules.markers.floor import FloorSlabRule
    from floorplan.rules.walls.outer_boundary import OuterBoundaryRule
    from floorplan.rules.walls.room_walls import RoomWallsRule

    return RuleRegistry([
        FloorSlabRule(),
        RoomWallsRule(),
        DoorMarkersRule(),
        OuterBoundaryRule(),
    ])
