"""Utility functions for ubjcodec."""

from __future__ import annotations

from .text import from_wire_bytes, is_numeric_text, to_wire_bytes

__all__ = [
    "from_wire_bytes",
    "is_numeric_text",
    "to_wire_bytes",
]
