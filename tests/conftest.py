import pytest

from floorplan.models import (
    BuildParams, DoorSpec, FloorPlanSpec, PlacedInstanceRecord, RectDef, Room, Side,
)


@pytest.fixture
def params() -> BuildParams:
    """Round numbers: 2m cells, 1.2m doors, 0.15m walls, 2.8m high."""
    return BuildParams(cell_size=2.0)


@pytest.fixture
def single_room_plan() -> FloorPlanSpec:
    """4x4 grid, one 2x1-cell room in the bottom-left corner with a south door."""
    return FloorPlanSpec(
        name="single",
        grid_width=4,
        grid_height=4,
        rooms=[Room(
            name="Room A",
            rects=[RectDef(x_min=1, x_max=2, y_min=1, y_max=1)],
            doors=[DoorSpec(side=Side.SOUTH, rect_index=0, t=0.5)],
        )],
    )


def _item(name="Wall", px=0.0, pz=0.0, ry=0.0, sx=1.0, sz=0.15, **kw) -> PlacedInstanceRecord:
    return PlacedInstanceRecord(name=name, px=px, pz=pz, ry=ry, sx=sx, sz=sz, **kw)


@pytest.fixture
def make_item():
    """Factory for wall-like instance records (default: 1m along X at origin)."""
    return _item
