import json
from datetime import datetime, timezone

import pytest

from floorplan.core.errors import LayoutRecordError
from floorplan.core.exporter import export_layout
from floorplan.core.generator import LayoutGenerator
from floorplan.core.reconstruct import reconstruct_record
from floorplan.core.registry import create_default_registry
from floorplan.models import Orientation, ReconstructParams
from floorplan.services.layout_service import parse_record

UNITY_DUMP = """
{
    "sceneName": "Hospital",
    "exportedAt": "2025-03-01T10:20:30.1234567Z",
    "gridSize": 0.5,
    "wallThicknessDefault": 0.2,
    "groups": [
        {
            "groupName": "WALLS",
            "items": [
                {"name": "Wall", "path": "Lobby/Wall", "px": 1.0, "py": 1.4, "pz": 0.0,
                 "ry": 0.0, "sx": 2.0, "sy": 2.8, "sz": 0.15,
                 "prefabHint": "", "tag": "Untagged", "layer": 0, "color": "grey"},
                {"name": "Lobby", "path": "Lobby", "px": 0.0, "py": 0.0, "pz": 0.0,
                 "ry": 0.0, "sx": 0.05, "sy": 1.0, "sz": 0.08,
                 "prefabHint": "", "tag": "Untagged", "layer": 0}
            ]
        },
        {"groupName": "Lights", "items": []}
    ],
    "notes": "Positions are world-space; rotationY only is captured for 2D layout.",
    "version": 3
}
"""


def test_parse_unity_style_record_ignores_extras():
    record = parse_record(UNITY_DUMP)
    assert record.scene_name == "Hospital"
    assert record.grid_size == 0.5
    walls = record.find_group("Walls")
    assert walls is not None
    assert len(walls.items) == 2
    assert walls.items[0].sx == 2.0
    assert record.find_group("Doors") is None


def test_parsed_record_reconstructs_without_markers():
    result = reconstruct_record(parse_record(UNITY_DUMP))
    assert result.stats.markers_skipped == 1
    assert len(result.segments) == 1


@pytest.mark.parametrize("text", [None, "", "   ", "not json", "[1, 2]"])
def test_unparsable_record_is_an_error(text):
    with pytest.raises(LayoutRecordError):
        parse_record(text)


def test_record_without_groups_is_an_error():
    with pytest.raises(LayoutRecordError, match="no groups"):
        parse_record('{"sceneName": "x", "groups": []}')


def test_export_groups_and_paths(single_room_plan, params):
    layout = LayoutGenerator(create_default_registry()).generate(single_room_plan, params)
    when = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    record = export_layout(layout, "single", exported_at=when)

    assert [g.group_name for g in record.groups] == ["Walls", "Doors", "Floor"]
    assert len(record.find_group("Walls").items) == 10
    assert record.find_group("Walls").items[0].path == "Room A/Wall"
    assert record.exported_at == "2025-01-02T03:04:05+00:00"

    data = json.loads(record.to_json())
    assert data["sceneName"] == "single"
    assert data["groups"][0]["groupName"] == "Walls"
    assert "prefabHint" in data["groups"][0]["items"][0]

    assert parse_record(record.to_json()) == record


def test_build_export_reconstruct_round_trip(single_room_plan, params):
    layout = LayoutGenerator(create_default_registry()).generate(single_room_plan, params)
    record = parse_record(export_layout(layout, "single").to_json())

    result = reconstruct_record(record, ReconstructParams())
    assert result.stats.raw_segments == 10
    assert result.stats.merged_segments == 7

    horizontal: dict[float, list[tuple[float, float]]] = {}
    for s in result.segments:
        if s.orientation == Orientation.HORIZONTAL:
            horizontal.setdefault(s.line, []).append((s.start, s.end))

    # Room and boundary south walls coincide; the door gap survives the merge
    assert horizontal[1.0] == [(1.0, 2.5), (3.5, 9.0)]
    assert horizontal[3.0] == [(1.0, 5.0)]
    assert horizontal[9.0] == [(1.0, 9.0)]

    vertical = {s.line: (s.start, s.end) for s in result.segments
                if s.orientation == Orientation.VERTICAL}
    assert vertical == {1.0: (1.0, 9.0), 5.0: (1.0, 3.0), 9.0: (1.0, 9.0)}
