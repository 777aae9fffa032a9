"""Decode raw request payloads into JSON value trees."""

from __future__ import annotations

import json
import math
import re
from typing import NoReturn

from reqparser.errors import DecodeError
from reqparser.json_types import JsonValue

DEFAULT_MAX_DEPTH = 512

# Paired escapes are already joined into one code point by the json module.
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _reject_constant(name: str) -> NoReturn:
    raise DecodeError(f"invalid JSON literal {name}")


def _parse_number(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise DecodeError(f"number {literal[:32]} is out of range for a 64-bit float")
    return value


def decode(payload: bytes, *, max_depth: int = DEFAULT_MAX_DEPTH) -> JsonValue:
    """Parse a UTF-8 JSON payload.

    Every number is returned as a float, including integral literals; literals
    outside the float range are rejected. Objects keep their source key order
    and unpaired surrogate escapes become U+FFFD. Raises `DecodeError` for
    empty or malformed payloads and for documents nested deeper than
    `max_depth`.
    """
    if not payload:
        raise DecodeError("empty payload")
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"payload is not valid UTF-8: {exc.reason}", position=exc.start) from exc

    try:
        value = json.loads(
            text,
            parse_int=_parse_number,
            parse_float=_parse_number,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as exc:
        raise DecodeError(f"json decode error: {exc.msg}", position=exc.pos) from exc
    except RecursionError as exc:
        raise DecodeError("json nesting too deep") from exc

    depth = _max_depth(value)
    if depth > max_depth:
        raise DecodeError(f"json nesting depth {depth} exceeds limit {max_depth}")
    if "\\u" in text:
        value = _replace_lone_surrogates(value)
    return value


def _max_depth(value: JsonValue) -> int:
    """Return container nesting depth without recursing."""
    deepest = 0
    stack: list[tuple[JsonValue, int]] = [(value, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            continue
        depth += 1
        deepest = max(deepest, depth)
        stack.extend((child, depth) for child in children)
    return deepest


def _replace_lone_surrogates(value: JsonValue) -> JsonValue:
    if isinstance(value, str):
        return _LONE_SURROGATE_RE.sub("\ufffd", value)
    if isinstance(value, dict):
        return {
            _LONE_SURROGATE_RE.sub("\ufffd", key): _replace_lone_surrogates(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_replace_lone_surrogates(item) for item in value]
    return value


__all__ = ["DEFAULT_MAX_DEPTH", "decode"]
