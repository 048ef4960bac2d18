"""Codec options.

This module provides the per-call configuration shared by the encoder and
the decoder. Options are immutable; pass a new CodecOptions to change them.
"""

from __future__ import annotations

import enum
import sys

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Nesting limit for containers. The encoder and decoder recurse twice per
# level, so this stays well under the interpreter's recursion limit.
MAX_DEPTH = 256

# Frames kept free for callers and for the per-token helpers
_STACK_RESERVE = 250


def max_depth_ceiling() -> int:
    """Return the largest max_depth the interpreter stack can hold.

    Decoding and lifting recurse twice per nesting level, so the ceiling is
    half of what remains of the recursion limit after a fixed reserve.
    """
    return max(1, (sys.getrecursionlimit() - _STACK_RESERVE) // 2)


def check_max_depth(value: int) -> int:
    """Validate a nesting limit against max_depth_ceiling().

    Raises:
        ValueError: If value is below 1 or above the ceiling
    """
    if value < 1:
        raise ValueError(f"max_depth must be at least 1, got {value}")
    ceiling = max_depth_ceiling()
    if value > ceiling:
        raise ValueError(
            f"max_depth={value} exceeds the recursion-safe ceiling of {ceiling} "
            f"(recursion limit {sys.getrecursionlimit()})"
        )
    return value


class TargetShape(str, enum.Enum):
    """How object-tagged structures are materialized by the decoder.

    OBJECT: ``{...}`` decodes to a ``dict``.
    ARRAY: ``{...}`` decodes to a ``list`` of ``(key, value)`` tuples in
        insertion order.

    Array-tagged structures always decode to a ``list``.
    """

    OBJECT = "object"
    ARRAY = "array"


class CodecOptions(BaseModel):
    """Options for encode() and decode().

    Example:
        >>> opts = CodecOptions(target_shape=TargetShape.ARRAY, max_depth=16)
        >>> decode(b"{CaU\\x01}", options=opts)
        [('a', 1)]

    Attributes:
        target_shape: Representation of decoded objects (default OBJECT)
        max_depth: Maximum container nesting accepted by encode and decode
        max_bytes: Maximum encoded size in bytes (optional, encode only)
    """

    model_config = ConfigDict(
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    target_shape: TargetShape = TargetShape.OBJECT
    max_depth: int = Field(default=MAX_DEPTH, ge=1)
    max_bytes: int | None = Field(default=None, ge=0)

    @field_validator("max_depth")
    @classmethod
    def _max_depth_fits_stack(cls, value: int) -> int:
        return check_max_depth(value)
