from __future__ import annotations


class ShapefileException(Exception):
    """An exception to handle shapefile specific problems."""


class UnexpectedEof(ShapefileException):
    """The stream ended before a field could be read in full."""

    def __init__(self, expected: int, got: int, offset: int):
        self.expected = expected
        self.got = got
        self.offset = offset
        super().__init__(
            f"Unexpected end of stream at byte {offset}: "
            f"needed {expected} bytes, got {got}."
        )


class UnsupportedShapeType(ShapefileException):
    """A record uses a shape type this package cannot decode."""

    def __init__(self, code: int, name: str | None = None):
        self.code = code
        self.name = name
        label = name if name is not None else "unknown"
        super().__init__(f"The shape type {code} ({label}) is not supported.")


class UnrecognizedShapeType(ShapefileException):
    """The file header names a shape type code that is not in the format."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Unrecognized shape type in file header: {code}")


class MalformedPartIndex(ShapefileException):
    def __init__(self, index: int, value: int, numPoints: int):
        self.index = index
        self.value = value
        self.numPoints = numPoints
        super().__init__(
            f"Part index {index} starts at point {value}, which is out of order "
            f"or outside the record's {numPoints} points."
        )


class RecordLengthMismatch(ShapefileException):
    def __init__(self, recordNumber: int, declared: int, consumed: int):
        self.recordNumber = recordNumber
        self.declared = declared
        self.consumed = consumed
        super().__init__(
            f"Record {recordNumber} declares {declared} bytes of content "
            f"but {consumed} were read."
        )
