"""Type aliases and kind classification for decoded JSON values.

Decoded payloads are plain Python containers: `dict` for objects (key order
preserved), `list` for arrays, `float` for every number, plus `str`, `bool`
and `None`. `JsonKind` is the closed set of kinds the renderer dispatches on.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TypeAlias

JsonPrimitive: TypeAlias = str | float | bool | None
JsonValue: TypeAlias = JsonPrimitive | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
JsonArray: TypeAlias = list[JsonValue]


class JsonKind(StrEnum):
    """Runtime kind of a decoded JSON value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: object) -> JsonKind:
    """Classify a decoded value; raises TypeError for non-JSON objects."""
    match value:
        case None:
            return JsonKind.NULL
        # bool must precede the numeric case since bool subclasses int
        case bool():
            return JsonKind.BOOLEAN
        case int() | float():
            return JsonKind.NUMBER
        case str():
            return JsonKind.STRING
        case list() | tuple():
            return JsonKind.ARRAY
        case dict():
            return JsonKind.OBJECT
        case _:
            raise TypeError(f"not a JSON value: {type(value).__name__}")


__all__ = [
    "JsonPrimitive",
    "JsonValue",
    "JsonObject",
    "JsonArray",
    "JsonKind",
    "kind_of",
]
