import pytest

from floorplan.core.generator import LayoutGenerator
from floorplan.core.plans import default_floor_plan
from floorplan.core.registry import create_default_registry
from floorplan.rules.walls.outer_boundary import BOUNDARY_GROUP, collect_boundary_doors
from floorplan.models import (
    BuildContext, DoorSpec, ElementKind, FloorPlanSpec, GenerationConfig,
    LayoutStats, RectDef, Room, Side, WallLayout,
)


@pytest.fixture
def generator() -> LayoutGenerator:
    return LayoutGenerator(create_default_registry())


def test_single_room_layout_counts(generator, single_room_plan, params):
    layout = generator.generate(single_room_plan, params)

    groups = layout.groups()
    assert len(groups["Room A"]) == 5        # south split by the door + 3 full sides
    assert len(groups[BOUNDARY_GROUP]) == 5  # south split by the projected door
    assert len(layout.of_kind(ElementKind.FLOOR)) == 1
    assert len(layout.of_kind(ElementKind.DOOR)) == 1

    stats = layout.stats
    assert stats.rooms_processed == 1
    assert stats.doors_placed == 1
    assert stats.boundary_doors == 1
    assert stats.orphan_doors == 0
    assert stats.walls == 10
    assert stats.total_elements == 12


def test_room_south_wall_leaves_door_gap(generator, single_room_plan, params):
    layout = generator.generate(single_room_plan, params)
    south = sorted(
        (w for w in layout.groups()["Room A"] if w.position.z == 1.0),
        key=lambda w: w.position.x,
    )
    assert len(south) == 2
    assert south[0].position.x == pytest.approx(1.7)
    assert south[0].scale.x == pytest.approx(1.4)
    assert south[1].position.x == pytest.approx(4.3)


def test_boundary_projection_of_edge_door(single_room_plan):
    offsets = collect_boundary_doors(single_room_plan, 2.0)
    # Door world x = 3, boundary spans x in [1, 9]
    assert offsets[Side.SOUTH] == [pytest.approx(0.25)]
    assert offsets[Side.NORTH] == []
    assert offsets[Side.WEST] == []
    assert offsets[Side.EAST] == []


def test_interior_doors_do_not_open_the_boundary():
    plan = FloorPlanSpec(
        grid_width=6, grid_height=6,
        rooms=[
            Room(name="inner", rects=[RectDef(x_min=2, x_max=3, y_min=2, y_max=3)],
                 doors=[DoorSpec(side=Side.SOUTH, t=0.5), DoorSpec(side=Side.WEST, t=0.5)]),
            Room(name="top", rects=[RectDef(x_min=4, x_max=6, y_min=5, y_max=6)],
                 doors=[DoorSpec(side=Side.NORTH, t=0.5), DoorSpec(side=Side.EAST, t=0.25)]),
        ],
    )
    offsets = collect_boundary_doors(plan, 1.0)
    assert offsets[Side.SOUTH] == []
    assert offsets[Side.WEST] == []
    # top room spans x in [3.5, 6.5] on a boundary x in [0.5, 6.5]
    assert offsets[Side.NORTH] == [pytest.approx(0.75)]
    # east door at z = 4.5 + 0.25 * 2 on a boundary z in [0.5, 6.5]
    assert offsets[Side.EAST] == [pytest.approx(4.5 / 6.0)]


def test_orphan_doors_are_counted_not_fatal(generator, params):
    plan = FloorPlanSpec(
        grid_width=4, grid_height=4,
        rooms=[Room(
            name="R",
            rects=[RectDef(x_min=2, x_max=3, y_min=2, y_max=3)],
            doors=[DoorSpec(side=Side.NORTH, rect_index=3, t=0.5)],
        )],
    )
    layout = generator.generate(plan, params)
    assert layout.stats.orphan_doors == 1
    assert layout.stats.doors_placed == 0
    assert len(layout.groups()["R"]) == 4
    assert layout.of_kind(ElementKind.DOOR) == []


def test_door_t_is_clamped():
    assert DoorSpec(side=Side.EAST, t=1.7).t == 1.0
    assert DoorSpec(side=Side.EAST, t=-0.2).t == 0.0


def test_floor_slab_covers_grid(generator, single_room_plan, params):
    (floor,) = generator.generate(single_room_plan, params).of_kind(ElementKind.FLOOR)
    assert (floor.position.x, floor.position.z) == pytest.approx((5.0, 5.0))
    assert floor.position.y == pytest.approx(-0.05)
    assert (floor.scale.x, floor.scale.z) == pytest.approx((8.0, 8.0))


def test_door_marker_pose(generator, single_room_plan, params):
    (door,) = generator.generate(single_room_plan, params).of_kind(ElementKind.DOOR)
    assert door.position.x == pytest.approx(3.0)
    assert door.position.z == pytest.approx(1.0)
    assert door.rotation_y == 0.0
    assert door.group == "Doors"


def test_rule_order_and_filters(single_room_plan, params):
    registry = create_default_registry()
    generator = LayoutGenerator(registry)

    ctx = BuildContext(plan=single_room_plan, params=params)
    assert [r.get_id() for r in registry.get_applicable_rules(ctx)] == [
        "floor.slab", "rooms.walls", "rooms.doors", "boundary.walls",
    ]

    only_rooms = generator.generate(
        single_room_plan, params, GenerationConfig(enabled_rules=["rooms.walls"]),
    )
    assert len(only_rooms.elements) == 5

    no_floor = generator.generate(
        single_room_plan, params, GenerationConfig(disabled_rules=["floor.slab"]),
    )
    assert no_floor.of_kind(ElementKind.FLOOR) == []


def test_disabled_dependency_skips_dependent_rule(generator, single_room_plan, params, caplog):
    config = GenerationConfig(disabled_rules=["rooms.walls"])
    ctx = BuildContext(plan=single_room_plan, params=params, config=config)
    registry = generator.registry

    with caplog.at_level("WARNING", logger="floorplan.core.registry"):
        ids = [r.get_id() for r in registry.get_applicable_rules(ctx)]
    assert ids == ["floor.slab", "boundary.walls"]
    assert "Skipping rule rooms.doors" in caplog.text

    layout = generator.generate(single_room_plan, params, config)
    assert layout.of_kind(ElementKind.DOOR) == []
    assert set(layout.groups()) == {"Floor", BOUNDARY_GROUP}


def test_duplicate_rule_id_is_rejected():
    registry = create_default_registry()
    (walls,) = [r for r in registry.list_rules() if r.get_id() == "rooms.walls"]
    with pytest.raises(ValueError, match="rooms.walls"):
        registry.register(walls)


def test_hospital_plan_build(generator):
    plan = default_floor_plan()
    layout = generator.generate(plan)

    assert layout.stats.rooms_processed == 22
    assert layout.stats.doors_placed == 25
    assert layout.stats.orphan_doors == 0
    # Only the lobby's front door sits on the map edge
    assert layout.stats.boundary_doors == 1


def test_hospital_lobby_door_projection():
    offsets = collect_boundary_doors(default_floor_plan(), 2.3)
    assert offsets[Side.SOUTH] == [pytest.approx(0.1)]


def test_build_is_idempotent(generator, single_room_plan, params):
    first = generator.generate(single_room_plan, params)
    second = generator.generate(single_room_plan, params)
    assert first.model_dump() == second.model_dump()


def test_bare_layout_has_zeroed_stats():
    layout = WallLayout(elements=[])
    assert layout.stats == LayoutStats()
    assert layout.stats.walls == 0
