from __future__ import annotations

from collections.abc import Sequence
from typing import Final, cast

from .constants import (
    MULTIPOINT,
    NULL,
    POINT,
    POLYGON,
    POLYLINE,
    SHAPETYPE_LOOKUP,
    SHAPETYPENUM_LOOKUP,
)
from .geometric_calculations import bbox_from_points, split_parts
from .helpers import StreamReader
from .types import BBox, PartsT, PointsT
from .wkt import WKTSerializableShape


class _NoShapeTypeSentinel:
    """For use as a default value for Shape.__init__, so the shape
    type can be derived from the name of the subclass.
    """


_NO_SHAPE_TYPE_SENTINEL: Final = _NoShapeTypeSentinel()


class Shape(WKTSerializableShape):
    def __init__(
        self,
        shapeType: int | _NoShapeTypeSentinel = _NO_SHAPE_TYPE_SENTINEL,
        points: PointsT | None = None,
        parts: Sequence[int] | None = None,  # index of start point of each part
        lines: PartsT | None = None,
        oid: int | None = None,
        *,
        bbox: BBox | None = None,
    ):
        """Stores the geometry of one record of a .shp file. Every
        shape type except the "Null" type contains points at some
        level, for example the vertices of a polygon. If a record
        holds several runs of points (the lines of a polyline or the
        rings of a polygon) then those runs are called parts. Parts
        are designated by their starting index in the record's flat
        list of points.
        Lines allows the points-lists and parts to be denoted together
        in one argument.
        """
        if shapeType is not _NO_SHAPE_TYPE_SENTINEL:
            self.shapeType = cast(int, shapeType)
        else:
            class_name = self.__class__.__name__
            self.shapeType = SHAPETYPENUM_LOOKUP.get(class_name.upper(), NULL)

        default_points: PointsT = []
        default_parts: list[int] = []

        if lines is not None:
            default_points, default_parts = self._points_and_parts_indexes_from_lines(
                lines
            )
        elif points and parts is None and self.shapeType in _CanHaveParts_shapeTypes:
            # Polylines and Polygons with no part information are a single part
            default_parts = [0]

        self.points: PointsT = points if points is not None else default_points

        self.parts: Sequence[int] = parts if parts is not None else default_parts

        # the record number of the shape in the .shp file
        self.__oid: int = -1 if oid is None else oid

        self.bbox: BBox | None
        if bbox is not None:
            self.bbox = bbox
        elif self.points:
            self.bbox = bbox_from_points(self.points)
        else:
            self.bbox = None

    @staticmethod
    def _points_and_parts_indexes_from_lines(
        parts: PartsT,
    ) -> tuple[PointsT, list[int]]:
        """From a list of parts (each part a list of points) return
        a flattened list of points, and a list of indexes into that
        flattened list corresponding to the start of each part.
        """
        part_indexes: list[int] = []
        points: PointsT = []

        for part in parts:
            # set part index position
            part_indexes.append(len(points))
            points.extend(part)

        return points, part_indexes

    @property
    def oid(self) -> int:
        """The record number of the shape in the .shp file"""
        return self.__oid

    @property
    def shapeTypeName(self) -> str:
        return SHAPETYPE_LOOKUP[self.shapeType]

    @property
    def numParts(self) -> int:
        """The number of geometries making up the shape: lines for a
        polyline, rings for a polygon, points for a multipoint."""
        if self.shapeType == NULL:
            return 0
        if self.shapeType == POINT:
            return 1 if self.points else 0
        if self.shapeType == MULTIPOINT:
            return len(self.points)
        return len(self.parts)

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        if class_name == "Shape":
            return f"Shape #{self.__oid}: {self.shapeTypeName}"
        return f"{class_name} #{self.__oid}"


class NullShape(Shape):
    # Shape.shapeType = NULL already,
    # to preserve handling of default args in Shape.__init__
    # Repeated for the avoidance of doubt.
    def __init__(
        self,
        oid: int | None = None,
    ):
        Shape.__init__(self, shapeType=NULL, oid=oid)

    @staticmethod
    def from_byte_stream(reader: StreamReader, oid: int | None = None) -> NullShape:
        # A null record has no content after its shape type
        return NullShape(oid=oid)


class Point(Shape):
    def __init__(
        self,
        x: float,
        y: float,
        oid: int | None = None,
    ):
        # The bounding box of a single point collapses to the point
        Shape.__init__(self, points=[(x, y)], oid=oid, bbox=(x, y, x, y))

    @property
    def x(self) -> float:
        return self.points[0][0]

    @property
    def y(self) -> float:
        return self.points[0][1]

    @staticmethod
    def from_byte_stream(reader: StreamReader, oid: int | None = None) -> Point:
        x, y = reader.read_point()
        return Point(x=x, y=y, oid=oid)


class _CanHaveBBox(Shape):
    """Base of the shapes that carry their own bounding box in the
    file (multipoints, polylines and polygons), read as
    xmin, ymin, xmax, ymax and kept exactly as stored.
    """

    @staticmethod
    def _read_bbox_from_byte_stream(reader: StreamReader) -> BBox:
        return reader.read_bbox()

    @staticmethod
    def _read_npoints_from_byte_stream(reader: StreamReader) -> int:
        return reader.read_uint32_le()


class MultiPoint(_CanHaveBBox):
    def __init__(
        self,
        *args: tuple[float, float],
        points: PointsT | None = None,
        bbox: BBox | None = None,
        oid: int | None = None,
    ):
        if args:
            points = list(args)
        Shape.__init__(self, points=points, bbox=bbox, oid=oid)

    @classmethod
    def from_byte_stream(
        cls, reader: StreamReader, oid: int | None = None
    ) -> MultiPoint:
        bbox = cls._read_bbox_from_byte_stream(reader)
        # The point count is a 4 byte integer and is the only loop bound
        nPoints = cls._read_npoints_from_byte_stream(reader)
        points = reader.read_points(nPoints)
        return MultiPoint(points=points, bbox=bbox, oid=oid)


_CanHaveParts_shapeTypes = frozenset([POLYLINE, POLYGON])


class _CanHaveParts(_CanHaveBBox):
    # The parts attribute is initialised by
    # the base class Shape's __init__, to parts or [].

    @staticmethod
    def _read_nparts_from_byte_stream(reader: StreamReader) -> int:
        return reader.read_uint32_le()

    @classmethod
    def _read_parts_from_byte_stream(
        cls, reader: StreamReader
    ) -> tuple[list[int], PointsT]:
        """Reads the part count, the point count, the index of the
        first point of each part and then all the points."""
        nParts = cls._read_nparts_from_byte_stream(reader)
        nPoints = cls._read_npoints_from_byte_stream(reader)
        parts = reader.read_uint32s_le(nParts)
        points = reader.read_points(nPoints)
        return parts, points

    @classmethod
    def from_byte_stream(
        cls, reader: StreamReader, oid: int | None = None
    ) -> _CanHaveParts:
        bbox = cls._read_bbox_from_byte_stream(reader)
        parts, points = cls._read_parts_from_byte_stream(reader)
        return cls(points=points, parts=parts, bbox=bbox, oid=oid)


class Polyline(_CanHaveParts):
    def __init__(
        self,
        *args: PointsT,
        lines: PartsT | None = None,
        points: PointsT | None = None,
        parts: list[int] | None = None,
        bbox: BBox | None = None,
        oid: int | None = None,
    ):
        lines = list(args) if args else lines
        Shape.__init__(
            self,
            lines=lines,
            points=points,
            parts=parts,
            bbox=bbox,
            oid=oid,
        )
        self.lines: PartsT = split_parts(self.points, self.parts)

    def _split_parts(self) -> PartsT:
        return self.lines


class Polygon(_CanHaveParts):
    def __init__(
        self,
        *args: PointsT,
        lines: PartsT | None = None,
        points: PointsT | None = None,
        parts: list[int] | None = None,
        bbox: BBox | None = None,
        oid: int | None = None,
    ):
        lines = list(args) if args else lines
        Shape.__init__(
            self,
            lines=lines,
            points=points,
            parts=parts,
            bbox=bbox,
            oid=oid,
        )
        # Rings are kept in file order, closure and winding are not checked
        self.rings: PartsT = split_parts(self.points, self.parts)

    def _split_parts(self) -> PartsT:
        return self.rings


SHAPE_CLASS_FROM_SHAPETYPE: dict[int, type[NullShape | Point | _CanHaveBBox]] = {
    NULL: NullShape,
    POINT: Point,
    POLYLINE: Polyline,
    POLYGON: Polygon,
    MULTIPOINT: MultiPoint,
}
