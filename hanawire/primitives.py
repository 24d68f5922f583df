"""Reading and writing of BSON bool, cstring, string and double values."""

from __future__ import annotations

import struct
from typing import BinaryIO

from hanawire.values import BSONError

_INT32 = struct.Struct("<i")
_DOUBLE = struct.Struct("<d")


def _decode_text(raw: bytes) -> str:
    return raw.decode("utf-8", "surrogateescape")


def _encode_text(text: str) -> bytes:
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError as exc:
        raise BSONError(f"cannot encode text: {exc}") from exc


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising BSONError if the stream ends first."""
    if size < 0:
        raise ValueError(f"negative size {size}")
    chunks = bytearray()
    while len(chunks) < size:
        chunk = stream.read(size - len(chunks))
        if not chunk:
            break
        chunks += chunk
    if len(chunks) == size:
        return bytes(chunks)
    if not chunks:
        raise BSONError("EOF")
    raise BSONError("unexpected EOF")


def read_bool(stream: BinaryIO) -> bool:
    """Read a one-byte boolean."""
    (byte,) = read_exact(stream, 1)
    if byte == 0:
        return False
    if byte == 1:
        return True
    raise BSONError(f"unexpected byte {byte:#04x}")


def encode_bool(value: bool) -> bytes:
    """Encode a boolean as one byte."""
    return b"\x01" if value else b"\x00"


def read_cstring(stream: BinaryIO) -> str:
    """Read a NUL-terminated string."""
    raw = bytearray()
    while True:
        byte = stream.read(1)
        if not byte:
            raise BSONError("EOF")
        if byte == b"\x00":
            return _decode_text(bytes(raw))
        raw += byte


def encode_cstring(value: str) -> bytes:
    """Encode a string followed by a terminating NUL."""
    return _encode_text(value) + b"\x00"


def read_string(stream: BinaryIO) -> str:
    """Read a length-prefixed, NUL-terminated string."""
    (length,) = _INT32.unpack(read_exact(stream, 4))
    if length <= 0:
        raise BSONError(f"invalid length {length}")
    try:
        raw = read_exact(stream, length)
    except BSONError as exc:
        raise BSONError(f"expected {length} bytes: {exc}") from exc
    if raw[-1] != 0:
        raise BSONError(f"unexpected terminating byte {raw[-1]:#04x}")
    return _decode_text(raw[:-1])


def encode_string(value: str) -> bytes:
    """Encode a string with its length prefix and terminating NUL."""
    raw = _encode_text(value)
    return _INT32.pack(len(raw) + 1) + raw + b"\x00"


def read_double(stream: BinaryIO) -> float:
    """Read a little-endian IEEE 754 double."""
    (value,) = _DOUBLE.unpack(read_exact(stream, 8))
    return value


def encode_double(value: float) -> bytes:
    """Encode a float as a little-endian IEEE 754 double."""
    return _DOUBLE.pack(float(value))