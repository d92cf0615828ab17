from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterator
from os import PathLike
from types import TracebackType
from typing import IO, Any, cast

from .classes import DecodeResult, Header, ShapeRecord, ShapeRecords
from .constants import (
    FILE_LENGTH_OFFSET,
    HEADER_LENGTH,
    SHAPETYPE_LOOKUP,
    SHAPETYPE_OFFSET,
    STRICT_RECORD_LENGTH,
    VERBOSE,
)
from .exceptions import (
    RecordLengthMismatch,
    ShapefileException,
    UnrecognizedShapeType,
    UnsupportedShapeType,
)
from .geometric_calculations import bbox_overlap
from .helpers import StreamReader, fsdecode_if_pathlike
from .shapes import SHAPE_CLASS_FROM_SHAPETYPE
from .types import BBox, BinaryFileStreamT, BinaryFileT, ReadSeekableBinStream

logger = logging.getLogger(__name__)


def decode_header(reader: StreamReader) -> Header:
    """Reads the header information from a .shp file.

    An unknown shape type code in the header does not stop decoding,
    the records carry their own shape type. It is reported on the
    returned Header instead.
    """
    # File length (16-bit words)
    reader.seek(FILE_LENGTH_OFFSET)
    length = reader.read_uint32_be()
    # Shape type
    reader.seek(SHAPETYPE_OFFSET)
    shapeType = reader.read_uint32_le()
    # The shapefile's bounding box (lower left, upper right)
    bbox = reader.read_bbox()

    error = None
    if shapeType not in SHAPETYPE_LOOKUP:
        error = UnrecognizedShapeType(shapeType)
        if VERBOSE:
            logger.warning(str(error))

    logger.debug(
        "Read .shp header: %d words, shape type %d, bbox %s", length, shapeType, bbox
    )
    return Header(length=length, shapeType=shapeType, bbox=bbox, error=error)


def _read_record(reader: StreamReader, strict_length: bool) -> ShapeRecord:
    """Returns the record number, shape type and geometry of a single record."""
    recNum = reader.read_uint32_be()
    # Content length in 16-bit words, excluding this 8 byte record header
    recLength = reader.read_uint32_be()
    start = reader.tell()

    shapeType = reader.read_uint32_le()
    ShapeClass = SHAPE_CLASS_FROM_SHAPETYPE.get(shapeType)
    if ShapeClass is None:
        raise UnsupportedShapeType(shapeType, SHAPETYPE_LOOKUP.get(shapeType))

    shape = ShapeClass.from_byte_stream(reader, oid=recNum)

    if strict_length:
        consumed = reader.tell() - start
        if consumed != 2 * recLength:
            raise RecordLengthMismatch(recNum, 2 * recLength, consumed)

    logger.debug("Decoded record %d (%s)", recNum, SHAPETYPE_LOOKUP[shapeType])
    return ShapeRecord(recordNumber=recNum, shapeType=shapeType, shape=shape)


def iter_records(
    reader: StreamReader,
    *,
    strict_length: bool = False,
    bbox: BBox | None = None,
) -> Iterator[ShapeRecord]:
    """Returns a generator of the records following the file header,
    until the end of the stream.
    To only yield records within a given spatial region, specify the 'bbox'
    arg as a tuple of xmin,ymin,xmax,ymax. Records are still decoded in
    full, and null shapes never overlap.
    """
    # Each step seeks back to where the previous record ended, so other
    # reads through the same stream between steps do not lose records
    pos = HEADER_LENGTH
    while True:
        reader.seek(pos)
        if reader.at_eof():
            break
        shapeRecord = _read_record(reader, strict_length)
        pos = reader.tell()
        if bbox is not None:
            if shapeRecord.bbox is None or not bbox_overlap(bbox, shapeRecord.bbox):
                continue
        yield shapeRecord


def decode_records(
    reader: StreamReader,
    *,
    strict_length: bool = False,
    bbox: BBox | None = None,
) -> ShapeRecords:
    shapeRecords = ShapeRecords()
    shapeRecords.extend(iter_records(reader, strict_length=strict_length, bbox=bbox))
    return shapeRecords


def decode(
    stream: ReadSeekableBinStream,
    *,
    strict_length: bool | None = None,
    keep_partial: bool = False,
) -> DecodeResult:
    """Decodes the header and every record of a .shp stream.

    The first ShapefileException ends decoding and is returned as the
    result's error, together with no records. With keep_partial=True the
    records decoded before the error are returned as well.
    """
    if strict_length is None:
        strict_length = STRICT_RECORD_LENGTH

    header = None
    shapeRecords = ShapeRecords()
    try:
        reader = StreamReader(stream)
        header = decode_header(reader)
        for shapeRecord in iter_records(reader, strict_length=strict_length):
            shapeRecords.append(shapeRecord)
    except ShapefileException as e:
        logger.debug(
            "Decoding stopped after %d records: %s", len(shapeRecords), e
        )
        if not keep_partial:
            shapeRecords = ShapeRecords()
        return DecodeResult(header=header, records=shapeRecords, error=e)

    return DecodeResult(header=header, records=shapeRecords)


class Reader:
    """Reads the geometry file (.shp) of a shapefile. The "shapefile"
    argument in the constructor is the name of the file you want to
    open, with or without its .shp extension. A file-like object can
    be given instead with the shp keyword argument.

    Only the header is read upon loading. Records are decoded when
    required. Counting records and fetching one by index only read the
    8 byte record headers to find record offsets.
    """

    def __init__(
        self,
        shapefile_path: str | PathLike[Any] = "",
        /,
        *,
        shp: BinaryFileT | None = None,
        strict_length: bool | None = None,
    ):
        self.shp: IO[bytes] | None = None
        self._reader: StreamReader | None = None
        self._files_to_close: list[BinaryFileStreamT] = []
        self.shapeName = "Not specified"
        self.header: Header | None = None
        self._offsets: list[int] = []
        self.numShapes: int | None = None
        self.strict_length = (
            STRICT_RECORD_LENGTH if strict_length is None else strict_length
        )
        # See if a shapefile name was passed as the first argument
        if shapefile_path:
            path = fsdecode_if_pathlike(shapefile_path)
            self.load(path)
            return

        if shp is not None:
            self.shp = self.__seek_0_on_file_obj_wrap_or_open_from_name(shp)
            self.__shpHeader()

    def __seek_0_on_file_obj_wrap_or_open_from_name(
        self,
        file_: BinaryFileT,
    ) -> IO[bytes] | None:
        if isinstance(file_, (str, PathLike)):
            baseName, __ = os.path.splitext(file_)
            return self._load_constituent_file(baseName)

        if hasattr(file_, "read"):
            # Copy if required
            try:
                file_.seek(0)
                return file_
            except (AttributeError, io.UnsupportedOperation):
                return io.BytesIO(file_.read())

        raise ShapefileException(f"Could not load .shp file from: {file_}")

    def __str__(self) -> str:
        """
        Use some general info on the shapefile as __str__
        """
        info = ["shapefile Reader"]
        if self.header is not None:
            info.append(
                f"    {len(self)} shapes (type '{self.shapeTypeName or self.shapeType}')"
            )
        return "\n".join(info)

    def __enter__(self) -> Reader:
        """
        Enter phase of context manager.
        """
        return self

    def __exit__(
        self,
        exc_type: BaseException | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool | None:
        """
        Exit phase of context manager, close opened files.
        """
        self.close()
        return None

    def __len__(self) -> int:
        """Returns the number of records in the .shp file."""
        if not self.shp:
            # No file loaded yet, treat as 'empty' shapefile
            return 0

        if self.numShapes is None:
            self.__shpOffsets()

        return cast(int, self.numShapes)

    def __iter__(self) -> Iterator[ShapeRecord]:
        """Iterates through the records in the .shp file."""
        yield from self.iterShapeRecords()

    @property
    def shapeType(self) -> int:
        return self.__getHeader().shapeType

    @property
    def shapeTypeName(self) -> str | None:
        return self.__getHeader().shapeTypeName

    @property
    def bbox(self) -> BBox:
        return self.__getHeader().bbox

    @property
    def shpLength(self) -> int:
        """The file length declared in the header, in bytes."""
        return self.__getHeader().byte_length

    def load(self, shapefile: str | None = None) -> None:
        """Opens a .shp file from a filename. Normally this method would
        be called by the constructor with the file name as an argument."""
        if shapefile:
            (shapeName, __ext) = os.path.splitext(shapefile)
            self.shapeName = shapeName
            self.load_shp(shapeName)
            if not self.shp:
                raise ShapefileException(f"Unable to open {shapeName}.shp.")
        if self.shp:
            self.__shpHeader()

    def _try_get_open_constituent_file(self, shapefile_name: str) -> IO[bytes] | None:
        """
        Attempts to open a .shp file, with both lower case and upper case
        file extensions, and return it.  If it was not possible to open the
        file, None is returned.
        """
        try:
            return open(f"{shapefile_name}.shp", "rb")
        except OSError:
            try:
                return open(f"{shapefile_name}.SHP", "rb")
            except OSError:
                return None

    def _load_constituent_file(self, shapefile_name: str) -> IO[bytes] | None:
        """
        Attempts to open a .shp file, and if successful append it to
        self._files_to_close.
        """
        shp_file = self._try_get_open_constituent_file(shapefile_name)
        if shp_file is not None:
            self._files_to_close.append(shp_file)
        return shp_file

    def load_shp(self, shapefile_name: str) -> None:
        """
        Attempts to load file with .shp extension as both lower and upper case
        """
        self.shp = self._load_constituent_file(shapefile_name)

    def __del__(self) -> None:
        self.close()

    def close(self) -> None:
        # Close any files that the reader opened (but not those given by user)
        for attribute in self._files_to_close:
            if hasattr(attribute, "close"):
                try:
                    attribute.close()
                except OSError:
                    pass
        self._files_to_close = []

    def __getReader(self) -> StreamReader:
        """Checks to see if the .shp file object is available.
        If not a ShapefileException is raised."""
        if not self.shp:
            raise ShapefileException(
                "Shapefile Reader requires a shapefile or file-like object."
            )
        if self._reader is None:
            self.__shpHeader()
        return self._reader  # type: ignore[return-value]

    def __getHeader(self) -> Header:
        self.__getReader()
        return self.header  # type: ignore[return-value]

    def __shpHeader(self) -> None:
        """Reads the header information from the .shp file."""
        if not self.shp:
            raise ShapefileException(
                "Shapefile Reader requires a shapefile or file-like object. (no shp file found)"
            )
        self._reader = StreamReader(self.shp)
        self.header = decode_header(self._reader)

    def __shpOffsets(self) -> None:
        """Finds the offset of every record by jumping from one record
        header to the next with its declared content length. Record
        contents are not decoded."""
        reader = self.__getReader()
        # Return to previous file position afterwards
        checkpoint = reader.tell()
        offsets = []
        pos = HEADER_LENGTH
        try:
            reader.seek(pos)
            while not reader.at_eof():
                offsets.append(pos)
                # Unpack the record header only
                __recNum = reader.read_uint32_be()
                recLength = reader.read_uint32_be()
                # Jump to next record position
                pos += 8 + (2 * recLength)
                reader.seek(pos)
        finally:
            reader.seek(checkpoint)
        self._offsets = offsets
        self.numShapes = len(offsets)

    def shapeRecord(self, i: int = 0) -> ShapeRecord:
        """Returns a single record from the .shp file, by its position
        in the file (not its record number). Negative indexes count
        from the end of the file. Only the requested record is decoded.
        """
        reader = self.__getReader()
        if self.numShapes is None:
            self.__shpOffsets()
        nShapes = cast(int, self.numShapes)
        if not -nShapes <= i < nShapes:
            raise ShapefileException(
                f"Shape index {i} is out of bounds; the .shp file only contains {nShapes} shapes"
            )

        checkpoint = reader.tell()
        reader.seek(self._offsets[i])
        try:
            return _read_record(reader, self.strict_length)
        finally:
            reader.seek(checkpoint)

    def shapeRecords(self, bbox: BBox | None = None) -> ShapeRecords:
        """Returns all records in the .shp file.
        To only read records within a given spatial region, specify the 'bbox'
        arg as a list or tuple of xmin,ymin,xmax,ymax.
        """
        shapeRecords = ShapeRecords()
        shapeRecords.extend(self.iterShapeRecords(bbox=bbox))
        return shapeRecords

    def iterShapeRecords(self, bbox: BBox | None = None) -> Iterator[ShapeRecord]:
        """Returns a generator of records in the .shp file. Useful
        for handling large shapefiles.
        To only read records within a given spatial region, specify the 'bbox'
        arg as a list or tuple of xmin,ymin,xmax,ymax.
        """
        reader = self.__getReader()
        yield from iter_records(reader, strict_length=self.strict_length, bbox=bbox)

    def decode(self, keep_partial: bool = False) -> DecodeResult:
        """Decodes the whole .shp file, returning any error in the result
        instead of raising it. See shpwkt.decode()."""
        if not self.shp:
            raise ShapefileException(
                "Shapefile Reader requires a shapefile or file-like object."
            )
        return decode(
            self.shp, strict_length=self.strict_length, keep_partial=keep_partial
        )
