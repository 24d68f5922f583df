"""Element type tags of the BSON format."""

from __future__ import annotations

from enum import IntEnum


class Tag(IntEnum):
    """The one-byte type marker that precedes every element of a document."""

    def __new__(cls, value: int, label: str) -> "Tag":
        member = int.__new__(cls, value)
        member._value_ = value
        member._label = label
        return member

    DOUBLE = (0x01, "Double")
    STRING = (0x02, "String")
    DOCUMENT = (0x03, "Document")
    ARRAY = (0x04, "Array")
    BINARY = (0x05, "Binary")
    UNDEFINED = (0x06, "Undefined")
    OBJECT_ID = (0x07, "ObjectID")
    BOOL = (0x08, "Bool")
    DATETIME = (0x09, "DateTime")
    NULL = (0x0A, "Null")
    REGEX = (0x0B, "Regex")
    DB_POINTER = (0x0C, "DBPointer")
    JAVASCRIPT = (0x0D, "JavaScript")
    SYMBOL = (0x0E, "Symbol")
    JAVASCRIPT_SCOPE = (0x0F, "JavaScriptScope")
    INT32 = (0x10, "Int32")
    TIMESTAMP = (0x11, "Timestamp")
    INT64 = (0x12, "Int64")
    DECIMAL = (0x13, "Decimal")
    MIN_KEY = (0xFF, "MinKey")
    MAX_KEY = (0x7F, "MaxKey")

    def __str__(self) -> str:
        return self._label