from __future__ import annotations

import io
from os import PathLike
from typing import IO, Any, Final, Protocol, TypeVar, Union

from .constants import (
    MULTIPATCH,
    MULTIPOINT,
    MULTIPOINTM,
    MULTIPOINTZ,
    NULL,
    POINT,
    POINTM,
    POINTZ,
    POLYGON,
    POLYGONM,
    POLYGONZ,
    POLYLINE,
    POLYLINEM,
    POLYLINEZ,
)

## Custom type variables

T = TypeVar("T")
Point2D = tuple[float, float]
PointsT = list[Point2D]
PartsT = list[PointsT]

BBox = tuple[float, float, float, float]


class ReadableBinStream(Protocol):
    def read(self, size: int = -1) -> bytes: ...


class ReadSeekableBinStream(Protocol):
    def seek(self, offset: int, whence: int = 0) -> int: ...
    def tell(self) -> int: ...
    def read(self, size: int = -1) -> bytes: ...


# File name, file object or anything with a read() method that returns bytes.
BinaryFileT = Union[str, PathLike[Any], IO[bytes]]
BinaryFileStreamT = Union[IO[bytes], io.BytesIO, ReadSeekableBinStream]


class ShapeType:
    """A bare bones 'enum' of the shape type codes, as the enum
    library noticeably slows performance."""

    NULL: Final = NULL
    POINT: Final = POINT
    POLYLINE: Final = POLYLINE
    POLYGON: Final = POLYGON
    MULTIPOINT: Final = MULTIPOINT
    POINTZ: Final = POINTZ
    POLYLINEZ: Final = POLYLINEZ
    POLYGONZ: Final = POLYGONZ
    MULTIPOINTZ: Final = MULTIPOINTZ
    POINTM: Final = POINTM
    POLYLINEM: Final = POLYLINEM
    POLYGONM: Final = POLYGONM
    MULTIPOINTM: Final = MULTIPOINTM
    MULTIPATCH: Final = MULTIPATCH
    __members__: set[int] = {
        NULL,
        POINT,
        POLYLINE,
        POLYGON,
        MULTIPOINT,
        POINTZ,
        POLYLINEZ,
        POLYGONZ,
        MULTIPOINTZ,
        POINTM,
        POLYLINEM,
        POLYGONM,
        MULTIPOINTM,
        MULTIPATCH,
    }
