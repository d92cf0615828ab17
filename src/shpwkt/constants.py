from __future__ import annotations

import os

# Module settings
VERBOSE = True

# Opt-in cross check of each record's declared content length
STRICT_RECORD_LENGTH = (
    os.getenv("SHPWKT_STRICT_RECORD_LENGTH", "").lower() == "yes"
)

# Main file header layout
HEADER_LENGTH = 100
FILE_LENGTH_OFFSET = 24
SHAPETYPE_OFFSET = 32

# Constants for shape types
NULL = 0
POINT = 1
POLYLINE = 3
POLYGON = 5
MULTIPOINT = 8
POINTZ = 11
POLYLINEZ = 13
POLYGONZ = 15
MULTIPOINTZ = 18
POINTM = 21
POLYLINEM = 23
POLYGONM = 25
MULTIPOINTM = 28
MULTIPATCH = 31

SHAPETYPE_LOOKUP = {
    NULL: "NULL",
    POINT: "POINT",
    POLYLINE: "POLYLINE",
    POLYGON: "POLYGON",
    MULTIPOINT: "MULTIPOINT",
    POINTZ: "POINTZ",
    POLYLINEZ: "POLYLINEZ",
    POLYGONZ: "POLYGONZ",
    MULTIPOINTZ: "MULTIPOINTZ",
    POINTM: "POINTM",
    POLYLINEM: "POLYLINEM",
    POLYGONM: "POLYGONM",
    MULTIPOINTM: "MULTIPOINTM",
    MULTIPATCH: "MULTIPATCH",
}

SHAPETYPENUM_LOOKUP = {name: code for code, name in SHAPETYPE_LOOKUP.items()}

# Only the 2D shape types have decoders. The Z, M and MultiPatch
# variants are named in the lookup but rejected when found in a record.
SUPPORTED_SHAPETYPES = frozenset([NULL, POINT, POLYLINE, POLYGON, MULTIPOINT])
