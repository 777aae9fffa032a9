"""Render decoded JSON values as log-friendly text."""

from __future__ import annotations

import json
from enum import StrEnum

from reqparser.json_types import JsonValue

COMPACT_LABEL = "JSON-Body: "
DELIMITER = "\n=========="
INDENT_WIDTH = 4

# Integral floats below this magnitude print without a fractional part.
_INTEGRAL_FLOAT_LIMIT = 1e21


class PrintMode(StrEnum):
    COMPACT = "compact"
    DELIMITED = "delimited"


def _normalize_numbers(value: JsonValue) -> object:
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _INTEGRAL_FLOAT_LIMIT:
            return int(value)
        return value
    if isinstance(value, dict):
        return {key: _normalize_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalize_numbers(item) for item in value]
    return value


def format_json(value: JsonValue, mode: PrintMode = PrintMode.COMPACT) -> str:
    """Serialize `value` for display.

    Compact mode yields a single labelled line; delimited mode yields indented
    JSON between START/END banners. Serialization failures are returned as an
    error string rather than raised.
    """
    normalized = _normalize_numbers(value)
    try:
        if mode is PrintMode.DELIMITED:
            body = json.dumps(normalized, indent=INDENT_WIDTH, ensure_ascii=False, allow_nan=False)
        else:
            body = json.dumps(normalized, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        return f"Error formatting JSON: {exc}"

    if mode is PrintMode.DELIMITED:
        return f"{DELIMITER}\nJSON START{DELIMITER}\n{body}\n{DELIMITER}\nJSON END{DELIMITER}"
    return f"{COMPACT_LABEL}{body}"


__all__ = ["PrintMode", "format_json"]
