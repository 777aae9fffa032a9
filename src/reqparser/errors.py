"""Exceptions raised by the decoder and schema renderer."""

from __future__ import annotations


class ReqparserError(Exception):
    """Base class for reqparser failures."""


class DecodeError(ReqparserError, ValueError):
    """Raised when a request payload is not well-formed JSON."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class RenderError(ReqparserError):
    """Raised when a type declaration cannot be rendered."""


class UnsupportedTargetError(RenderError):
    """Raised when the rendering target is not one of the known syntaxes."""

    def __init__(self, target: object) -> None:
        super().__init__(f"unsupported format type: {target}")
        self.target = target


__all__ = [
    "ReqparserError",
    "DecodeError",
    "RenderError",
    "UnsupportedTargetError",
]
