"""Reading and writing of BSON int32, int64, datetime, object id and regex values."""

from __future__ import annotations

import struct
from datetime import datetime, timedelta, timezone
from typing import BinaryIO

from hanawire.primitives import encode_cstring, read_cstring, read_exact
from hanawire.values import BSONError, Int64, ObjectID, Regex

_INT32 = struct.Struct("<i")
_INT64 = struct.Struct("<q")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def read_int32(stream: BinaryIO) -> int:
    """Read a little-endian signed 32-bit integer."""
    (value,) = _INT32.unpack(read_exact(stream, 4))
    return value


def encode_int32(value: int) -> bytes:
    """Encode an integer as a little-endian signed 32-bit value."""
    try:
        return _INT32.pack(int(value))
    except struct.error as exc:
        raise BSONError(f"{value} does not fit in 32 bits") from exc


def read_int64(stream: BinaryIO) -> Int64:
    """Read a little-endian signed 64-bit integer."""
    (value,) = _INT64.unpack(read_exact(stream, 8))
    return Int64(value)


def encode_int64(value: int) -> bytes:
    """Encode an integer as a little-endian signed 64-bit value."""
    try:
        return _INT64.pack(int(value))
    except struct.error as exc:
        raise BSONError(f"{value} does not fit in 64 bits") from exc


def read_datetime(stream: BinaryIO) -> datetime:
    """Read a datetime stored as milliseconds since the Unix epoch, in UTC."""
    (millis,) = _INT64.unpack(read_exact(stream, 8))
    try:
        return _EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise BSONError(f"datetime {millis} ms is out of range") from exc


def encode_datetime(value: datetime) -> bytes:
    """Encode a datetime as milliseconds since the Unix epoch.

    Naive datetimes are taken to be in UTC; sub-millisecond parts are dropped.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    millis = (value - _EPOCH) // _MILLISECOND
    return encode_int64(millis)


def read_object_id(stream: BinaryIO) -> ObjectID:
    """Read a 12-byte object id."""
    return ObjectID(read_exact(stream, 12))


def encode_object_id(value: ObjectID) -> bytes:
    """Encode an object id as its 12 raw bytes."""
    return bytes(value)


def read_regex(stream: BinaryIO) -> Regex:
    """Read a regex as two NUL-terminated strings: pattern and options."""
    try:
        pattern = read_cstring(stream)
    except BSONError as exc:
        raise BSONError(f"regex pattern: {exc}") from exc
    try:
        options = read_cstring(stream)
    except BSONError as exc:
        raise BSONError(f"regex options: {exc}") from exc
    return Regex(pattern=pattern, options=options)


def encode_regex(value: Regex) -> bytes:
    """Encode a regex as its pattern and options, each NUL-terminated."""
    return encode_cstring(value.pattern) + encode_cstring(value.options)