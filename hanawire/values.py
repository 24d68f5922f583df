"""Value types carried in BSON documents and the mapping from values to tags."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from hanawire.tag import Tag

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


class BSONError(ValueError):
    """Raised when BSON data cannot be read or written."""


@dataclass(frozen=True)
class ObjectID:
    """A 12-byte object identifier."""

    raw: bytes = bytes(12)

    def __post_init__(self) -> None:
        raw = bytes(self.raw)
        if len(raw) != 12:
            raise BSONError(f"object id must be 12 bytes, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.raw.hex()


@dataclass(frozen=True)
class Regex:
    """A regular expression pattern with its option letters."""

    pattern: str = ""
    options: str = ""


class Int64(int):
    """An integer that is stored as a 64-bit BSON value."""

    def __new__(cls, value: int = 0) -> "Int64":
        number = int(value)
        if not _INT64_MIN <= number <= _INT64_MAX:
            raise BSONError(f"{number} does not fit in 64 bits")
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        return f"Int64({int(self)})"


def bson_tag(value: object) -> Tag:
    """Return the tag under which a value is written in a document."""
    if value is None:
        return Tag.NULL
    if isinstance(value, bool):
        return Tag.BOOL
    if isinstance(value, Int64):
        return Tag.INT64
    if isinstance(value, int):
        if _INT32_MIN <= value <= _INT32_MAX:
            return Tag.INT32
        if _INT64_MIN <= value <= _INT64_MAX:
            return Tag.INT64
        raise BSONError(f"{value} does not fit in 64 bits")
    if isinstance(value, float):
        return Tag.DOUBLE
    if isinstance(value, str):
        return Tag.STRING
    if isinstance(value, ObjectID):
        return Tag.OBJECT_ID
    if isinstance(value, Regex):
        return Tag.REGEX
    if isinstance(value, datetime):
        return Tag.DATETIME
    if isinstance(value, Mapping):
        return Tag.DOCUMENT
    if isinstance(value, (list, tuple)):
        return Tag.ARRAY
    raise BSONError(f"unhandled element type {type(value).__name__}")