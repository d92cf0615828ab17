from __future__ import annotations

from typing import NamedTuple

from .constants import SHAPETYPE_LOOKUP
from .exceptions import ShapefileException, UnrecognizedShapeType
from .shapes import Shape
from .types import BBox


class Header(NamedTuple):
    """The fixed 100 byte header of a .shp file.

    length is the declared file length in 16-bit words, as stored.
    shapeType is the code as read, even when it is not a known code,
    in which case error holds an UnrecognizedShapeType describing it.
    The header is still usable, since every record carries its own
    shape type.
    """

    length: int
    shapeType: int
    bbox: BBox
    error: UnrecognizedShapeType | None = None

    @property
    def byte_length(self) -> int:
        return self.length * 2

    @property
    def shapeTypeName(self) -> str | None:
        return SHAPETYPE_LOOKUP.get(self.shapeType)


class ShapeRecord:
    """A decoded record: its record number, shape type and shape."""

    def __init__(self, recordNumber: int, shapeType: int, shape: Shape):
        self.recordNumber = recordNumber
        self.shapeType = shapeType
        self.shape = shape

    @property
    def wkt(self) -> str:
        return self.shape.wkt

    @property
    def numParts(self) -> int:
        return self.shape.numParts

    @property
    def bbox(self) -> BBox | None:
        return self.shape.bbox

    @property
    def shapeTypeName(self) -> str:
        return SHAPETYPE_LOOKUP[self.shapeType]

    def __repr__(self) -> str:
        return f"ShapeRecord #{self.recordNumber}: {self.shapeTypeName}"


class ShapeRecords(list[ShapeRecord]):
    """A class to hold a list of ShapeRecord objects. Subclasses list to
    reuse all the optimizations of the builtin list."""

    def __repr__(self) -> str:
        return f"ShapeRecords: {list(self)}"

    def wkts(self) -> list[str]:
        return [rec.wkt for rec in self]


class DecodeResult(NamedTuple):
    """The outcome of decoding a whole .shp file.

    Decoding is all or nothing: when error is set, records is empty,
    unless the prefix decoded before the error was explicitly kept.
    header is None when the failure happened while reading the header.
    """

    header: Header | None
    records: ShapeRecords
    error: ShapefileException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
