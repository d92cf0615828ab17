from __future__ import annotations

import os
from os import PathLike
from struct import Struct, unpack
from typing import Any, cast, overload

from .exceptions import UnexpectedEof
from .types import BBox, Point2D, PointsT, ReadSeekableBinStream, T

# Helpers

unpack_uint32_be = Struct(">I").unpack
unpack_uint32_le = Struct("<I").unpack
unpack_float64_le = Struct("<d").unpack
unpack_2_float64_le = Struct("<2d").unpack
unpack_4_float64_le = Struct("<4d").unpack


@overload
def fsdecode_if_pathlike(path: PathLike[Any]) -> str: ...
@overload
def fsdecode_if_pathlike(path: T) -> T: ...
def fsdecode_if_pathlike(path: Any) -> Any:
    if isinstance(path, PathLike):
        return os.fsdecode(path)  # str

    return path


class StreamReader:
    """Reads the fixed width fields of a .shp file from a seekable
    binary stream. Integers in the file and record headers are big
    endian, everything inside a record's content is little endian.

    The total length of the stream is determined once, by seeking to
    its end, because some shapefiles report an incorrect file length
    in their header. Every read that would run past that end raises
    UnexpectedEof instead of returning a short value.
    """

    def __init__(self, b_io: ReadSeekableBinStream):
        self.b_io = b_io
        checkpoint = b_io.tell()
        b_io.seek(0, 2)
        self.length: int = b_io.tell()
        b_io.seek(checkpoint)

    def seek(self, offset: int) -> int:
        """Moves to an absolute offset from the start of the stream."""
        return self.b_io.seek(offset)

    def tell(self) -> int:
        return self.b_io.tell()

    def at_eof(self) -> bool:
        return self.b_io.tell() >= self.length

    def read_exact(self, size: int) -> bytes:
        offset = self.b_io.tell()
        available = max(self.length - offset, 0)
        if size > available:
            raise UnexpectedEof(size, available, offset)
        data = self.b_io.read(size)
        if len(data) < size:
            raise UnexpectedEof(size, len(data), offset)
        return data

    def read_uint32_be(self) -> int:
        return cast(int, unpack_uint32_be(self.read_exact(4))[0])

    def read_uint32_le(self) -> int:
        return cast(int, unpack_uint32_le(self.read_exact(4))[0])

    def read_float64_le(self) -> float:
        return cast(float, unpack_float64_le(self.read_exact(8))[0])

    def read_uint32s_le(self, n: int) -> list[int]:
        if not n:
            return []
        return list(unpack(f"<{n}I", self.read_exact(4 * n)))

    def read_bbox(self) -> BBox:
        # xmin, ymin, xmax, ymax
        return cast(BBox, unpack_4_float64_le(self.read_exact(32)))

    def read_point(self) -> Point2D:
        x, y = unpack_2_float64_le(self.read_exact(16))
        return x, y

    def read_points(self, n: int) -> PointsT:
        if not n:
            return []
        flat = unpack(f"<{2 * n}d", self.read_exact(16 * n))
        return list(zip(*(iter(flat),) * 2))
