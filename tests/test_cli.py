"""
Tests for the command-line interface
"""

import json

import pytest

from parcel_boundary.cli import main

from conftest import polygon, square


@pytest.fixture
def store_dir(tmp_path):
    return str(tmp_path / "boundaries")


@pytest.fixture
def write_geojson(tmp_path):
    def write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return write


def run(capsys, *argv):
    code = main(list(argv))
    return code, capsys.readouterr().out


def test_save_then_get(capsys, store_dir, write_geojson):
    path = write_geojson("a.json", polygon(square(0, 0)))
    
    code, out = run(capsys, "--store-dir", store_dir, "save", "--parcel-id", "PARCEL-001", "--geojson", path)
    assert code == 0
    saved = json.loads(out)
    assert saved["parcel_id"] == "PARCEL-001"
    assert saved["area_sqm"] == pytest.approx(111320 * 111320, rel=0.01)
    
    code, out = run(capsys, "--store-dir", store_dir, "get", "--parcel-id", "PARCEL-001")
    assert code == 0
    assert json.loads(out)["id"] == saved["id"]


def test_overlaps(capsys, store_dir, write_geojson):
    run(capsys, "--store-dir", store_dir, "save", "--parcel-id", "A",
        "--geojson", write_geojson("a.json", polygon(square(0, 0))))
    run(capsys, "--store-dir", store_dir, "save", "--parcel-id", "B",
        "--geojson", write_geojson("b.json", polygon(square(1, 1))))
    
    code, out = run(capsys, "--store-dir", store_dir, "overlaps", "--parcel-id", "A")
    assert code == 0
    assert json.loads(out) == [{"parcel_id": "B", "shared_vertex_count": 1}]


def test_invalid_geometry_exits_nonzero(capsys, store_dir, write_geojson):
    path = write_geojson("bad.json", {"type": "Point", "coordinates": [0, 0]})
    
    code, out = run(capsys, "--store-dir", store_dir, "save", "--parcel-id", "A", "--geojson", path)
    assert code == 1
    assert out == ""


def test_missing_parcel_exits_nonzero(capsys, store_dir):
    code, _ = run(capsys, "--store-dir", store_dir, "get", "--parcel-id", "nope")
    assert code == 1


def test_missing_file_exits_nonzero(capsys, store_dir, tmp_path):
    code, _ = run(capsys, "--store-dir", store_dir, "save", "--parcel-id", "A",
                  "--geojson", str(tmp_path / "missing.json"))
    assert code == 1


def test_validate(capsys, write_geojson):
    good = write_geojson("good.json", polygon(square(0, 0)))
    bad = write_geojson("open.json", polygon([[0, 0], [1, 0], [1, 1], [0, 1], [0, 2]]))
    
    assert run(capsys, "validate", "--geojson", good)[0] == 0
    assert run(capsys, "validate", "--geojson", bad)[0] == 1


def test_export(capsys, store_dir, write_geojson, tmp_path):
    run(capsys, "--store-dir", store_dir, "save", "--parcel-id", "A",
        "--geojson", write_geojson("a.json", polygon(square(0, 0))))
    output = tmp_path / "export.geojson"
    
    code, _ = run(capsys, "--store-dir", store_dir, "export", "--output", str(output))
    assert code == 0
    
    collection = json.loads(output.read_text(encoding="utf-8"))
    assert collection["type"] == "FeatureCollection"
    assert len(collection["features"]) == 1
    feature = collection["features"][0]
    assert feature["geometry"]["type"] == "Polygon"
    assert feature["properties"]["parcel_id"] == "A"


def test_no_command_prints_help(capsys):
    assert main([]) == 1


def test_save_rejects_infinity_in_file(capsys, store_dir, tmp_path):
    path = tmp_path / "inf.json"
    path.write_text(
        '{"type": "Polygon", "coordinates": [[[0, 0], [Infinity, 0], [1, 1], [0, 1], [0, 0]]]}',
        encoding="utf-8"
    )
    
    code, out = run(capsys, "--store-dir", store_dir, "save", "--parcel-id", "A", "--geojson", str(path))
    assert code == 1
    assert out == ""
