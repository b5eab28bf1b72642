import json

from floorplan.cli import main


def test_build_then_reconstruct(tmp_path):
    record_path = tmp_path / "layout.json"
    merged_path = tmp_path / "merged.json"

    assert main(["build", "--out", str(record_path)]) == 0
    record = json.loads(record_path.read_text(encoding="utf-8"))
    assert record["sceneName"] == "hospital"
    assert {g["groupName"] for g in record["groups"]} == {"Walls", "Doors", "Floor"}

    assert main(["reconstruct", str(record_path), "--out", str(merged_path)]) == 0
    merged = json.loads(merged_path.read_text(encoding="utf-8"))
    walls = merged["groups"][0]["items"]
    assert merged["groups"][0]["groupName"] == "Walls"
    assert 0 < len(walls) < len(record["groups"][0]["items"])


def test_build_custom_plan(tmp_path, single_room_plan):
    plan_path = tmp_path / "plan.json"
    plan_path.write_text(single_room_plan.model_dump_json(), encoding="utf-8")
    out = tmp_path / "out.json"

    assert main(["build", "--plan", str(plan_path), "--cell-size", "2", "--out", str(out)]) == 0
    record = json.loads(out.read_text(encoding="utf-8"))
    assert record["sceneName"] == "single"
    assert len(record["groups"][0]["items"]) == 10


def test_bad_inputs_exit_with_2(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{nope", encoding="utf-8")
    assert main(["reconstruct", str(bad)]) == 2
    assert main(["reconstruct", str(tmp_path / "missing.json")]) == 2
    assert main(["build", "--plan", str(bad)]) == 2


def test_invalid_options_and_undecodable_record_exit_with_2(tmp_path):
    record_path = tmp_path / "layout.json"
    assert main(["build", "--out", str(record_path)]) == 0

    assert main(["reconstruct", str(record_path), "--merge-tolerance", "-1"]) == 2
    assert main(["build", "--cell-size", "-1", "--out", str(tmp_path / "x.json")]) == 2

    latin1 = tmp_path / "latin1.json"
    latin1.write_bytes(b'{"sceneName": "Caf\xe9", "groups": []}')
    assert main(["reconstruct", str(latin1)]) == 2
