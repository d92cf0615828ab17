"""
shpwkt
Decodes the geometry file (.shp) of ESRI Shapefiles into typed shapes
rendered as Well-Known-Text.
Compatible with Python versions >=3.9
"""

from __future__ import annotations

import logging

from .__version__ import __version__
from .classes import DecodeResult, Header, ShapeRecord, ShapeRecords
from .constants import (
    HEADER_LENGTH,
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
    SHAPETYPE_LOOKUP,
    SHAPETYPENUM_LOOKUP,
    SUPPORTED_SHAPETYPES,
)
from .exceptions import (
    MalformedPartIndex,
    RecordLengthMismatch,
    ShapefileException,
    UnexpectedEof,
    UnrecognizedShapeType,
    UnsupportedShapeType,
)
from .geometric_calculations import bbox_from_points, bbox_overlap, split_parts
from .helpers import StreamReader, fsdecode_if_pathlike
from .reader import Reader, decode, decode_header, decode_records, iter_records
from .shapes import (
    SHAPE_CLASS_FROM_SHAPETYPE,
    MultiPoint,
    NullShape,
    Point,
    Polygon,
    Polyline,
    Shape,
)
from .types import (
    BBox,
    BinaryFileStreamT,
    BinaryFileT,
    PartsT,
    Point2D,
    PointsT,
    ReadableBinStream,
    ReadSeekableBinStream,
    ShapeType,
)
from .wkt import (
    NULL_WKT,
    format_coord,
    format_coords,
    linestring_wkt,
    multipoint_wkt,
    point_wkt,
    polygon_wkt,
)

__all__ = [
    "__version__",
    "NULL",
    "POINT",
    "POLYLINE",
    "POLYGON",
    "MULTIPOINT",
    "POINTZ",
    "POLYLINEZ",
    "POLYGONZ",
    "MULTIPOINTZ",
    "POINTM",
    "POLYLINEM",
    "POLYGONM",
    "MULTIPOINTM",
    "MULTIPATCH",
    "SHAPETYPE_LOOKUP",
    "SHAPETYPENUM_LOOKUP",
    "SUPPORTED_SHAPETYPES",
    "HEADER_LENGTH",
    "ShapeType",
    "Reader",
    "decode",
    "decode_header",
    "decode_records",
    "iter_records",
    "StreamReader",
    "fsdecode_if_pathlike",
    "Shape",
    "NullShape",
    "Point",
    "Polyline",
    "Polygon",
    "MultiPoint",
    "SHAPE_CLASS_FROM_SHAPETYPE",
    "split_parts",
    "bbox_from_points",
    "bbox_overlap",
    "NULL_WKT",
    "format_coord",
    "format_coords",
    "point_wkt",
    "multipoint_wkt",
    "linestring_wkt",
    "polygon_wkt",
    "Header",
    "ShapeRecord",
    "ShapeRecords",
    "DecodeResult",
    "Point2D",
    "PointsT",
    "PartsT",
    "BBox",
    "ReadableBinStream",
    "ReadSeekableBinStream",
    "BinaryFileT",
    "BinaryFileStreamT",
    "ShapefileException",
    "UnexpectedEof",
    "UnsupportedShapeType",
    "UnrecognizedShapeType",
    "MalformedPartIndex",
    "RecordLengthMismatch",
]

logger = logging.getLogger(__name__)
