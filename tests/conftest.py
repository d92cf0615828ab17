"""
Builds .shp files in memory for the tests, so no sample shapefiles
have to be checked in.
"""

import io
from struct import pack

import pytest

import shpwkt


def _bbox_of(points):
    if not points:
        return (0.0, 0.0, 0.0, 0.0)
    return shpwkt.bbox_from_points(points)


class ShpBuilder:
    """Packs headers and record contents following the .shp layout."""

    @staticmethod
    def header(shapeType=shpwkt.POLYGON, bbox=(0.0, 0.0, 0.0, 0.0), length=50):
        header = bytearray(100)
        header[0:4] = pack(">i", 9994)  # file code
        header[24:28] = pack(">I", length)
        header[28:32] = pack("<i", 1000)  # version
        header[32:36] = pack("<I", shapeType)
        header[36:68] = pack("<4d", *bbox)
        return bytes(header)

    @staticmethod
    def record(recNum, content, declared_words=None):
        if declared_words is None:
            declared_words = len(content) // 2
        return pack(">2I", recNum, declared_words) + content

    @staticmethod
    def null():
        return pack("<I", shpwkt.NULL)

    @staticmethod
    def point(x, y):
        return pack("<I2d", shpwkt.POINT, x, y)

    @staticmethod
    def multipoint(points, bbox=None):
        bbox = bbox or _bbox_of(points)
        flat = [c for p in points for c in p]
        return pack(
            f"<I4dI{len(flat)}d", shpwkt.MULTIPOINT, *bbox, len(points), *flat
        )

    @staticmethod
    def with_parts(shapeType, lines, bbox=None, parts=None, nPoints=None):
        points = [p for line in lines for p in line]
        if parts is None:
            parts = []
            start = 0
            for line in lines:
                parts.append(start)
                start += len(line)
        if nPoints is None:
            nPoints = len(points)
        bbox = bbox or _bbox_of(points)
        flat = [c for p in points for c in p]
        return pack(
            f"<I4d2I{len(parts)}I{len(flat)}d",
            shapeType,
            *bbox,
            len(parts),
            nPoints,
            *parts,
            *flat,
        )

    @classmethod
    def polyline(cls, *lines, **kwargs):
        return cls.with_parts(shpwkt.POLYLINE, list(lines), **kwargs)

    @classmethod
    def polygon(cls, *rings, **kwargs):
        return cls.with_parts(shpwkt.POLYGON, list(rings), **kwargs)

    @classmethod
    def shp(cls, *contents, shapeType=shpwkt.POLYGON, bbox=(0.0, 0.0, 0.0, 0.0)):
        """Returns the bytes of a whole .shp file, numbering records from 1."""
        body = b"".join(
            cls.record(i, content) for i, content in enumerate(contents, start=1)
        )
        length = (100 + len(body)) // 2
        return cls.header(shapeType=shapeType, bbox=bbox, length=length) + body

    @classmethod
    def stream(cls, *contents, **kwargs):
        return io.BytesIO(cls.shp(*contents, **kwargs))


@pytest.fixture
def builder():
    return ShpBuilder
