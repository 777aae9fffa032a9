"""HTTP listener that logs JSON request bodies and the struct declarations describing them."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
