"""Render the shape of a decoded JSON value as a struct declaration."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from reqparser.errors import UnsupportedTargetError
from reqparser.json_types import JsonKind, JsonValue, kind_of

STRUCT_NAME = "GeneratedStruct"
INDENT = "    "


class RenderTarget(StrEnum):
    """Declaration syntaxes the renderer can emit."""

    GO = "go"
    RUST = "rust"

    @classmethod
    def parse(cls, value: RenderTarget | str) -> RenderTarget:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedTargetError(value)


@dataclass(frozen=True, slots=True)
class TargetSyntax:
    """Type vocabulary and boilerplate for one target."""

    type_tokens: Mapping[JsonKind, str]
    header: str
    field_line: Callable[[str, str], str]
    opaque_field: str

    def declaration(self, fields: list[str]) -> str:
        return f"{self.header}{{\n{''.join(fields)}}}"


def _tag_literal(key: str) -> str:
    return json.dumps(key, ensure_ascii=False)


def _go_field(key: str, type_token: str) -> str:
    return f"{INDENT}{key} {type_token} `json:{_tag_literal(key)}`\n"


def _rust_field(key: str, type_token: str) -> str:
    return f"{INDENT}#[serde(rename = {_tag_literal(key)})]\n{INDENT}{key}: {type_token},\n"


_SYNTAX: dict[RenderTarget, TargetSyntax] = {
    RenderTarget.GO: TargetSyntax(
        type_tokens={
            JsonKind.BOOLEAN: "bool",
            JsonKind.NUMBER: "float64",
            JsonKind.STRING: "string",
            JsonKind.ARRAY: "[]interface{}",
            JsonKind.OBJECT: "map[string]interface{}",
            JsonKind.NULL: "interface{}",
        },
        header=f"type {STRUCT_NAME} struct ",
        field_line=_go_field,
        opaque_field=f'{INDENT}Data interface{{}} `json:"data"`\n',
    ),
    RenderTarget.RUST: TargetSyntax(
        type_tokens={
            JsonKind.BOOLEAN: "bool",
            JsonKind.NUMBER: "f64",
            JsonKind.STRING: "String",
            JsonKind.ARRAY: "Vec<serde_json::Value>",
            JsonKind.OBJECT: "serde_json::Map<String, serde_json::Value>",
            JsonKind.NULL: "Option<serde_json::Value>",
        },
        header=f"#[derive(Debug, Serialize, Deserialize)]\nstruct {STRUCT_NAME} ",
        field_line=_rust_field,
        opaque_field=f"{INDENT}data: serde_json::Value,\n",
    ),
}


def type_token(value: JsonValue, target: RenderTarget | str) -> str:
    """Return the field type token for a single value."""
    syntax = _SYNTAX[RenderTarget.parse(target)]
    return syntax.type_tokens[kind_of(value)]


def render(value: JsonValue, target: RenderTarget | str) -> str:
    """Render the top-level shape of `value` as a declaration in `target` syntax.

    Objects produce one field per key in iteration order; nested containers are
    typed generically rather than expanded into named declarations. Any other
    top-level value produces a single opaque `data` field.
    """
    syntax = _SYNTAX[RenderTarget.parse(target)]
    if not isinstance(value, dict):
        return syntax.declaration([syntax.opaque_field])
    fields = [
        syntax.field_line(key, syntax.type_tokens[kind_of(item)])
        for key, item in value.items()
    ]
    return syntax.declaration(fields)


__all__ = ["RenderTarget", "STRUCT_NAME", "TargetSyntax", "render", "type_token"]
