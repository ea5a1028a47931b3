"""
Tests for the vertex-sharing overlap heuristic
"""

from parcel_boundary.geometry import build_coordinate_set, extract_coordinate_keys, parse_geometry, position_key
from parcel_boundary.models import BoundaryRecord
from parcel_boundary.overlap import rank_overlaps

from conftest import polygon, square


def record(parcel_id, raw):
    geometry = parse_geometry(raw)
    return BoundaryRecord(parcel_id=parcel_id, geometry=geometry, area_sqm=0.0)


def test_position_key_uses_default_number_format():
    assert position_key([3, 6.5]) == "3,6.5"
    assert position_key([3.0, 6.5]) == "3.0,6.5"
    assert position_key([1, 2, 300]) == "1,2"


def test_extract_keys_flattens_multipolygon_rings():
    geometry = parse_geometry({
        "type": "MultiPolygon",
        "coordinates": [[square(0, 0)], [square(5, 5), square(8, 8)]],
    })
    keys = extract_coordinate_keys(geometry)
    
    assert len(keys) == 15
    assert len(build_coordinate_set(geometry)) == 12


def test_no_shared_vertices_gives_empty_result():
    source = parse_geometry(polygon(square(0, 0)))
    others = [record("B", polygon(square(10, 10))), record("C", polygon(square(0.5, 0.5)))]
    
    assert rank_overlaps(source, others) == []


def test_single_shared_corner():
    source = parse_geometry(polygon(square(0, 0)))
    # Shared corner is the neighbour's first and closing vertex
    others = [record("B", polygon(square(1, 1)))]
    
    result = rank_overlaps(source, others)
    assert [(r.parcel_id, r.shared_vertex_count) for r in result] == [("B", 1)]


def test_results_sorted_by_shared_count():
    source = parse_geometry(polygon([[0, 0], [1, 0], [2, 0], [2, 1], [1, 1], [0, 1], [0, 0]]))
    one = record("one", polygon([[2, 1], [3, 1], [3, 2], [2, 2], [2, 1]]))
    three = record("three", polygon([[0, 0], [1, 0], [1, 1], [0.5, 2], [0, 0]]))
    two = record("two", polygon([[1, 0], [2, 0], [1.5, -1], [1.2, -1], [1, 0]]))
    
    result = rank_overlaps(source, [one, three, two])
    assert [r.parcel_id for r in result] == ["three", "two", "one"]
    assert [r.shared_vertex_count for r in result] == [3, 2, 1]


def test_ties_keep_candidate_order():
    source = parse_geometry(polygon(square(0, 0)))
    first = record("first", polygon(square(1, 1)))
    second = record("second", polygon(square(-1, -1)))
    
    result = rank_overlaps(source, [first, second])
    assert [r.parcel_id for r in result] == ["first", "second"]


def test_differently_formatted_numbers_do_not_match():
    source = parse_geometry(polygon(square(0, 0)))
    other = record("B", polygon([[1.0, 1.0], [2, 1], [2, 2], [1, 2], [1.0, 1.0]]))
    
    assert rank_overlaps(source, [other]) == []


def test_overlapping_parcels_without_common_vertex_are_missed():
    source = parse_geometry(polygon(square(0, 0, 2)))
    inside = record("B", polygon(square(0.5, 0.5, 1)))
    
    assert rank_overlaps(source, [inside]) == []


def test_logs_overlap_statistics(log_messages):
    source = parse_geometry(polygon(square(0, 0)))
    rank_overlaps(source, [record("B", polygon(square(1, 1)))])
    
    assert any("4 source vertices, 1 candidates, 1 sharing vertices" in m for m in log_messages)
