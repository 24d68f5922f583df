"""Reading and writing of BSON documents and arrays.

Documents are plain dicts whose insertion order is the element order on the
wire; arrays are lists.
"""

from __future__ import annotations

import io
import struct
from collections.abc import Callable, Mapping, Sequence
from typing import Any, BinaryIO

from hanawire.primitives import (
    encode_bool,
    encode_cstring,
    encode_double,
    encode_string,
    read_bool,
    read_cstring,
    read_double,
    read_exact,
    read_string,
)
from hanawire.scalars import (
    encode_datetime,
    encode_int32,
    encode_int64,
    encode_object_id,
    encode_regex,
    read_datetime,
    read_int32,
    read_int64,
    read_object_id,
    read_regex,
)
from hanawire.tag import Tag
from hanawire.values import BSONError, bson_tag

MAX_DOCUMENT_LENGTH = 16777216
MIN_DOCUMENT_LENGTH = 5

_INT32 = struct.Struct("<i")


def _tag_name(code: int) -> str:
    try:
        return str(Tag(code))
    except ValueError:
        return f"tag({code})"


def _parse_elements(body: bytes) -> dict[str, Any]:
    buf = io.BytesIO(body)
    document: dict[str, Any] = {}
    while True:
        marker = buf.read(1)
        if not marker:
            raise BSONError("document has no terminating byte: EOF")
        code = marker[0]
        if code == 0:
            if buf.read(1):
                raise BSONError("unexpected end of the document")
            return document

        key = read_cstring(buf)
        if key in document:
            raise BSONError(f"duplicate key {key!r}")

        if code == Tag.UNDEFINED:
            raise BSONError(
                "unhandled element type `Undefined (value) — Deprecated`"
            )
        reader = _READERS.get(code)
        if reader is None:
            raise BSONError(
                f"unhandled element type {code:#04x} ({_tag_name(code)})"
            )
        try:
            document[key] = reader(buf)
        except BSONError as exc:
            raise BSONError(f"{_tag_name(code)} {key!r}: {exc}") from exc


def read_document(stream: BinaryIO) -> dict[str, Any]:
    """Read one length-prefixed document from a binary stream."""
    (length,) = _INT32.unpack(read_exact(stream, 4))
    if not MIN_DOCUMENT_LENGTH <= length <= MAX_DOCUMENT_LENGTH:
        raise BSONError(f"invalid length {length}")
    try:
        body = read_exact(stream, length - 4)
    except BSONError as exc:
        raise BSONError(f"expected {length} bytes: {exc}") from exc
    return _parse_elements(body)


def encode_document(document: Mapping[str, Any]) -> bytes:
    """Encode a mapping as a document, keeping its key order."""
    parts = []
    for key, value in document.items():
        if not isinstance(key, str):
            raise BSONError(f"document key must be a string, got {type(key).__name__}")
        if "\x00" in key:
            raise BSONError(f"document key {key!r} contains a NUL byte")
        tag = bson_tag(value)
        parts.append(bytes([tag]) + encode_cstring(key) + _ENCODERS[tag](value))
    elements = b"".join(parts)
    return _INT32.pack(len(elements) + 5) + elements + b"\x00"


def read_array(stream: BinaryIO) -> list[Any]:
    """Read an array: a document whose keys are "0", "1", ... in order."""
    document = read_document(stream)
    for index, key in enumerate(document):
        if key != str(index):
            raise BSONError(f'key {index} is "{key}"')
    return list(document.values())


def encode_array(array: Sequence[Any]) -> bytes:
    """Encode a sequence as an array document."""
    return encode_document({str(index): value for index, value in enumerate(array)})


def decode_document(data: bytes) -> dict[str, Any]:
    """Decode a document from bytes that must hold exactly one document."""
    stream = io.BytesIO(data)
    document = read_document(stream)
    rest = stream.read()
    if rest:
        raise BSONError(f"{len(rest)} trailing bytes after the document")
    return document


_READERS: dict[int, Callable[[BinaryIO], Any]] = {
    Tag.DOUBLE: read_double,
    Tag.STRING: read_string,
    Tag.DOCUMENT: read_document,
    Tag.ARRAY: read_array,
    Tag.OBJECT_ID: read_object_id,
    Tag.BOOL: read_bool,
    Tag.DATETIME: read_datetime,
    Tag.NULL: lambda stream: None,
    Tag.REGEX: read_regex,
    Tag.INT32: read_int32,
    Tag.INT64: read_int64,
}

_ENCODERS: dict[Tag, Callable[[Any], bytes]] = {
    Tag.DOUBLE: encode_double,
    Tag.STRING: encode_string,
    Tag.DOCUMENT: encode_document,
    Tag.ARRAY: encode_array,
    Tag.OBJECT_ID: encode_object_id,
    Tag.BOOL: encode_bool,
    Tag.DATETIME: encode_datetime,
    Tag.NULL: lambda value: b"",
    Tag.REGEX: encode_regex,
    Tag.INT32: encode_int32,
    Tag.INT64: encode_int64,
}