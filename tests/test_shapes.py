"""
Tests the shape classes, part reassembly and WKT rendering.
"""

import pytest

import shpwkt


def test_point_wkt_and_bbox():
    point = shpwkt.Point(5, -5)
    assert point.wkt == "POINT(5.000000 -5.000000)"
    assert point.bbox == (5, -5, 5, -5)
    assert point.numParts == 1
    assert point.shapeType == shpwkt.POINT
    assert point.shapeTypeName == "POINT"


def test_single_part_polyline_wkt():
    line = shpwkt.Polyline([(0, 0), (1, 1), (2, 2)])
    assert line.wkt == (
        "LINESTRING(0.000000 0.000000, 1.000000 1.000000, 2.000000 2.000000)"
    )
    assert line.numParts == 1
    assert line.parts == [0]


def test_multi_part_polyline_wkt():
    line = shpwkt.Polyline(
        points=[(0, 0), (1, 1), (5, 5), (6, 6), (7, 7)], parts=[0, 2]
    )
    assert line.lines == [[(0, 0), (1, 1)], [(5, 5), (6, 6), (7, 7)]]
    assert line.wkt == (
        "MULTILINESTRING((0.000000 0.000000, 1.000000 1.000000), "
        "(5.000000 5.000000, 6.000000 6.000000, 7.000000 7.000000))"
    )
    assert line.numParts == 2


def test_single_ring_polygon_wkt():
    polygon = shpwkt.Polygon([(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)])
    assert polygon.wkt == (
        "POLYGON((0.000000 0.000000, 0.000000 1.000000, 1.000000 1.000000, "
        "1.000000 0.000000, 0.000000 0.000000))"
    )


def test_multi_ring_polygon_wkt():
    polygon = shpwkt.Polygon(
        [(0, 0), (0, 1), (1, 1), (0, 0)],
        [(5, 5), (5, 6), (6, 6), (5, 5)],
    )
    assert polygon.rings == [
        [(0, 0), (0, 1), (1, 1), (0, 0)],
        [(5, 5), (5, 6), (6, 6), (5, 5)],
    ]
    assert polygon.wkt == (
        "MULTIPOLYGON(((0.000000 0.000000, 0.000000 1.000000, 1.000000 1.000000, "
        "0.000000 0.000000)), ((5.000000 5.000000, 5.000000 6.000000, "
        "6.000000 6.000000, 5.000000 5.000000)))"
    )
    assert polygon.numParts == 2


def test_polygon_rings_not_closed():
    # Ring closure is not enforced
    polygon = shpwkt.Polygon([(0, 0), (0, 1), (1, 1)])
    assert polygon.rings == [[(0, 0), (0, 1), (1, 1)]]


def test_multipoint_wkt():
    multipoint = shpwkt.MultiPoint((1, 2), (3, 4))
    assert multipoint.wkt == "MULTIPOINT((1.000000 2.000000), (3.000000 4.000000))"
    assert multipoint.numParts == 2
    assert multipoint.bbox == (1, 2, 3, 4)


def test_null_shape():
    shape = shpwkt.NullShape(oid=3)
    assert shape.wkt == "GEOMETRYCOLLECTION EMPTY"
    assert shape.numParts == 0
    assert shape.bbox is None
    assert shape.points == []
    assert shape.oid == 3
    assert repr(shape) == "NullShape #3"


@pytest.mark.parametrize(
    "shape,expected",
    [
        (shpwkt.Polyline(points=[], parts=[]), "LINESTRING EMPTY"),
        (shpwkt.Polygon(points=[], parts=[]), "POLYGON EMPTY"),
        (shpwkt.MultiPoint(points=[]), "MULTIPOINT EMPTY"),
    ],
)
def test_empty_shapes_wkt(shape, expected):
    assert shape.wkt == expected
    assert shape.numParts == 0


def test_explicit_bbox_kept_as_given():
    bbox = (9.0, 9.0, -9.0, -9.0)
    line = shpwkt.Polyline([(0, 0), (1, 1)], bbox=bbox)
    assert line.bbox == bbox


def test_generic_shape_renders_by_type():
    shape = shpwkt.Shape(shpwkt.POLYLINE, [(1, 1), (2, 1), (10, 10), (20, 10)], [0, 2])
    assert shape.wkt.startswith("MULTILINESTRING((1.000000 1.000000")
    assert repr(shape) == "Shape #-1: POLYLINE"


def test_unsupported_shape_type_has_no_wkt():
    shape = shpwkt.Shape(shpwkt.MULTIPATCH, [(1, 1)], [0])
    with pytest.raises(shpwkt.UnsupportedShapeType) as excinfo:
        shape.wkt
    assert excinfo.value.code == 31


def test_decimals_are_rounded_to_six_places():
    assert shpwkt.point_wkt(0.1234567, 1e-7) == "POINT(0.123457 0.000000)"


@pytest.mark.parametrize(
    "points,parts",
    [
        ([(0, 0)], [0]),
        ([(0, 0), (1, 1), (2, 2)], [0]),
        ([(0, 0), (1, 1), (2, 2)], [0, 1, 2]),
        ([(0, 0), (1, 1), (2, 2), (3, 3)], [0, 2]),
        ([(0, 0), (1, 1), (2, 2), (3, 3)], [0, 0, 4]),
        ([(i, i) for i in range(10)], [0, 3, 3, 7]),
    ],
)
def test_split_parts_partitions_points(points, parts):
    split = shpwkt.split_parts(points, parts)
    assert len(split) == len(parts)
    # no gaps, no overlaps
    assert [p for part in split for p in part] == points
    for part, start in zip(split, parts):
        if part:
            assert part[0] == points[start]


def test_split_parts_no_parts():
    assert shpwkt.split_parts([(0, 0)], []) == []


@pytest.mark.parametrize(
    "parts,bad_index,bad_value",
    [
        ([0, 4], 1, 4),  # beyond the points
        ([0, 2, 1], 2, 1),  # decreasing
    ],
)
def test_split_parts_malformed(parts, bad_index, bad_value):
    points = [(0, 0), (1, 1), (2, 2)]
    with pytest.raises(shpwkt.MalformedPartIndex) as excinfo:
        shpwkt.split_parts(points, parts)
    assert excinfo.value.index == bad_index
    assert excinfo.value.value == bad_value
    assert excinfo.value.numPoints == 3


def test_bbox_overlap():
    assert shpwkt.bbox_overlap((0, 0, 2, 2), (1, 1, 3, 3))
    assert shpwkt.bbox_overlap((0, 0, 2, 2), (2, 2, 3, 3))
    assert not shpwkt.bbox_overlap((0, 0, 1, 1), (2, 2, 3, 3))


def test_shape_type_codes():
    assert shpwkt.ShapeType.MULTIPATCH == 31
    assert shpwkt.ShapeType.__members__ == set(shpwkt.SHAPETYPE_LOOKUP)
    assert shpwkt.SUPPORTED_SHAPETYPES == {0, 1, 3, 5, 8}
    assert set(shpwkt.SHAPE_CLASS_FROM_SHAPETYPE) == shpwkt.SUPPORTED_SHAPETYPES


def test_wkt_reuses_reassembled_parts(monkeypatch):
    line = shpwkt.Polyline([(0, 0), (1, 1)], [(2, 2), (3, 3)])
    polygon = shpwkt.Polygon([(0, 0), (0, 1), (1, 1), (0, 0)])

    def fail(points, parts):
        raise AssertionError("parts split again")

    monkeypatch.setattr(shpwkt.wkt, "split_parts", fail)
    assert line.wkt.startswith("MULTILINESTRING((0.000000 0.000000")
    assert polygon.wkt.startswith("POLYGON((0.000000 0.000000")
