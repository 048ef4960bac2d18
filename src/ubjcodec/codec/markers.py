"""Wire markers and integer width selection.

Every encoded unit starts with a one-byte marker. Markers are kept as
1-byte ``bytes`` objects so they can be written and compared directly.
"""

from __future__ import annotations

from ..exceptions import UnrepresentableNumberError

# Value types
TYPE_NULL = b"Z"
TYPE_NOOP = b"N"
TYPE_BOOL_TRUE = b"T"
TYPE_BOOL_FALSE = b"F"
TYPE_INT8 = b"i"
TYPE_UINT8 = b"U"
TYPE_INT16 = b"I"
TYPE_INT32 = b"l"
TYPE_INT64 = b"L"
TYPE_FLOAT32 = b"d"
TYPE_FLOAT64 = b"D"
TYPE_CHAR = b"C"
TYPE_STRING = b"S"
TYPE_HIGH_PREC = b"H"

# Container delimiters
ARRAY_START = b"["
ARRAY_END = b"]"
OBJECT_START = b"{"
OBJECT_END = b"}"

# Recognized by the format but not implemented
UNSUPPORTED_MARKERS = frozenset({TYPE_INT64, TYPE_FLOAT64, TYPE_NOOP})

# Markers allowed in front of a string length
LENGTH_MARKERS = frozenset({TYPE_INT8, TYPE_UINT8, TYPE_INT16, TYPE_INT32})

# Integer ranges (inclusive lower, exclusive upper) tried in this order.
# Negative numbers skip UINT8 and land in INT16 or INT32; INT8 is never
# chosen automatically.
INT_WIDTHS: tuple[tuple[bytes, int, int], ...] = (
    (TYPE_UINT8, 0, 1 << 8),
    (TYPE_INT16, -(1 << 15), 1 << 15),
    (TYPE_INT32, -(1 << 31), 1 << 31),
)


def select_int_marker(value: int) -> bytes:
    """Return the marker used for a native integer.

    Args:
        value: Integer to encode

    Returns:
        One of TYPE_UINT8, TYPE_INT16 or TYPE_INT32

    Raises:
        UnrepresentableNumberError: If value is outside the int32 range
    """
    for marker, low, high in INT_WIDTHS:
        if low <= value < high:
            return marker
    raise UnrepresentableNumberError(
        f"Integer {value} is outside the encodable range [{-(1 << 31)}, {1 << 31})"
    )


def marker_name(marker: bytes | None) -> str:
    """Return a printable name for a marker (used in messages and dumps)."""
    if marker is None:
        return "EOF"
    return _MARKER_NAMES.get(marker, f"0x{marker.hex()}")


_MARKER_NAMES: dict[bytes, str] = {
    TYPE_NULL: "NULL",
    TYPE_NOOP: "NOOP",
    TYPE_BOOL_TRUE: "TRUE",
    TYPE_BOOL_FALSE: "FALSE",
    TYPE_INT8: "INT8",
    TYPE_UINT8: "UINT8",
    TYPE_INT16: "INT16",
    TYPE_INT32: "INT32",
    TYPE_INT64: "INT64",
    TYPE_FLOAT32: "FLOAT32",
    TYPE_FLOAT64: "FLOAT64",
    TYPE_CHAR: "CHAR",
    TYPE_STRING: "STRING",
    TYPE_HIGH_PREC: "HIGH_PRECISION",
    ARRAY_START: "ARRAY_START",
    ARRAY_END: "ARRAY_END",
    OBJECT_START: "OBJECT_START",
    OBJECT_END: "OBJECT_END",
}
