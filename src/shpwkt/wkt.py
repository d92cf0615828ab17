from __future__ import annotations

from collections.abc import Iterable, Sequence

from .constants import MULTIPOINT, NULL, POINT, POLYGON, POLYLINE, SHAPETYPE_LOOKUP
from .exceptions import UnsupportedShapeType
from .geometric_calculations import split_parts
from .types import PartsT, Point2D, PointsT

NULL_WKT = "GEOMETRYCOLLECTION EMPTY"


def format_coord(point: Point2D) -> str:
    # Fixed point, 6 decimal places
    return "%f %f" % (point[0], point[1])


def format_coords(points: Iterable[Point2D]) -> str:
    return ", ".join(format_coord(p) for p in points)


def point_wkt(x: float, y: float) -> str:
    return f"POINT({format_coord((x, y))})"


def multipoint_wkt(points: PointsT) -> str:
    if not points:
        return "MULTIPOINT EMPTY"
    return "MULTIPOINT(" + ", ".join(f"({format_coord(p)})" for p in points) + ")"


def linestring_wkt(lines: PartsT) -> str:
    """A single part is written as a LINESTRING, several parts as a
    MULTILINESTRING with one parenthesized coordinate list per part."""
    if not lines:
        return "LINESTRING EMPTY"

    if len(lines) == 1:
        return f"LINESTRING({format_coords(lines[0])})"

    parts = ", ".join(f"({format_coords(line)})" for line in lines)
    return f"MULTILINESTRING({parts})"


def polygon_wkt(rings: PartsT) -> str:
    """A single ring is written as a POLYGON. Several rings are written
    as a MULTIPOLYGON holding one single-ring polygon per ring, so every
    ring gets an extra level of parentheses compared to MULTILINESTRING.
    Rings are not grouped into exteriors and holes.
    """
    if not rings:
        return "POLYGON EMPTY"

    if len(rings) == 1:
        return f"POLYGON(({format_coords(rings[0])}))"

    polys = ", ".join(f"(({format_coords(ring)}))" for ring in rings)
    return f"MULTIPOLYGON({polys})"


class WKTSerializableShape:
    shapeType: int
    points: PointsT
    parts: Sequence[int]

    def _split_parts(self) -> PartsT:
        return split_parts(self.points, self.parts)

    @property
    def wkt(self) -> str:
        if self.shapeType == NULL:
            return NULL_WKT

        if self.shapeType == POINT:
            if len(self.points) == 0:
                # the shape has no coordinate information, i.e. is 'empty'
                return "POINT EMPTY"
            x, y = self.points[0]
            return point_wkt(x, y)

        if self.shapeType == MULTIPOINT:
            return multipoint_wkt(self.points)

        if self.shapeType == POLYLINE:
            return linestring_wkt(self._split_parts())

        if self.shapeType == POLYGON:
            return polygon_wkt(self._split_parts())

        raise UnsupportedShapeType(
            self.shapeType, SHAPETYPE_LOOKUP.get(self.shapeType)
        )
