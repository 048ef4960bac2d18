"""Binary encoder for the value model.

This module provides the encode() function that converts a value (a value
model instance or native Python data) into its compact binary form.
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import DepthLimitError, EncodeError, UnrepresentableNumberError
from ..models.options import CodecOptions
from ..models.value import (
    Array,
    Bool,
    Char,
    Float32,
    Int8,
    Int16,
    Int32,
    Map,
    Null,
    String,
    UInt8,
    Value,
    to_value,
)
from ..utils.text import is_numeric_text
from . import markers
from .bytepack import ByteWriter

logger = logging.getLogger(__name__)


def encode(value: Any, *, options: CodecOptions | None = None) -> bytes:
    """Encode a value to compact binary format.

    Native Python data is first lifted with ``to_value()``, which picks the
    smallest integer marker in the fixed order UINT8, INT16, INT32. Containers
    are written recursively in order.

    Args:
        value: Value model instance or native Python data
        options: Codec options (max_depth, max_bytes)

    Returns:
        Compact binary representation

    Raises:
        UnrepresentableNumberError: If a number has no wire representation
        EncodeError: If text cannot be encoded or the output exceeds max_bytes
        DepthLimitError: If nesting exceeds max_depth

    Examples:
        ```python
        from ubjcodec import encode

        encode({"a": 1})    # b'{CaU\\x01}'
        encode([1, -1])     # b'[U\\x01I\\xff\\xff]'
        encode("123")       # b'HU\\x03123'
        ```
    """
    opts = options or CodecOptions()
    root = to_value(value, max_depth=opts.max_depth)

    writer = ByteWriter()
    _encode_value(writer, root, 0, opts.max_depth)
    size = writer.byte_length()
    if opts.max_bytes is not None and size > opts.max_bytes:
        raise EncodeError(
            f"Encoded size ({size} bytes) exceeds max_bytes={opts.max_bytes}"
        )

    encoded = writer.to_bytes()
    logger.debug("Encoded %s into %d bytes", type(root).__name__, len(encoded))
    return encoded


def encoded_size(value: Any, *, options: CodecOptions | None = None) -> int:
    """Return the size in bytes of the encoding of value.

    Example:
        >>> encoded_size({"a": 1})
        6
    """
    return len(encode(value, options=options))


def _encode_value(writer: ByteWriter, value: Value, depth: int, max_depth: int) -> None:
    """Encode a single value.

    Args:
        writer: ByteWriter to write to
        value: Value to encode
        depth: Container nesting of the enclosing structure
        max_depth: Maximum container nesting

    Raises:
        EncodeError: If value is invalid
    """
    if isinstance(value, Map):
        _enter(depth + 1, max_depth)
        writer.write_marker(markers.OBJECT_START)
        for key, item in value.entries:
            _encode_string(writer, key)
            _encode_value(writer, item, depth + 1, max_depth)
        writer.write_marker(markers.OBJECT_END)
        return

    if isinstance(value, Array):
        _enter(depth + 1, max_depth)
        writer.write_marker(markers.ARRAY_START)
        for item in value.items:
            _encode_value(writer, item, depth + 1, max_depth)
        writer.write_marker(markers.ARRAY_END)
        return

    if isinstance(value, Null):
        writer.write_marker(markers.TYPE_NULL)
        return

    if isinstance(value, Bool):
        writer.write_marker(markers.TYPE_BOOL_TRUE if value.value else markers.TYPE_BOOL_FALSE)
        return

    if isinstance(value, (UInt8, Int8, Int16, Int32)):
        _encode_int(writer, value.value, _EXPLICIT_INT_MARKERS[type(value)])
        return

    if isinstance(value, Float32):
        writer.write_marker(markers.TYPE_FLOAT32)
        try:
            writer.write_float32(value.value)
        except OverflowError as e:
            raise UnrepresentableNumberError(
                f"Float {value.value!r} is too large for single precision"
            ) from e
        return

    if isinstance(value, Char):
        writer.write_marker(markers.TYPE_CHAR)
        writer.write_bytes(value.value)
        return

    if isinstance(value, String):
        _encode_string(writer, value.value)
        return

    raise EncodeError(f"Unsupported value variant {type(value).__name__}")


_EXPLICIT_INT_MARKERS: dict[type[Value], bytes] = {
    Int8: markers.TYPE_INT8,
    UInt8: markers.TYPE_UINT8,
    Int16: markers.TYPE_INT16,
    Int32: markers.TYPE_INT32,
}

_INT_WRITERS = {
    markers.TYPE_INT8: ByteWriter.write_int8,
    markers.TYPE_UINT8: ByteWriter.write_uint8,
    markers.TYPE_INT16: ByteWriter.write_int16,
    markers.TYPE_INT32: ByteWriter.write_int32,
}


def _encode_int(writer: ByteWriter, value: int, marker: bytes | None = None) -> None:
    """Write marker + payload; the marker is chosen by width when not given."""
    if marker is None:
        marker = markers.select_int_marker(value)
    writer.write_marker(marker)
    try:
        _INT_WRITERS[marker](writer, value)
    except ValueError as e:
        raise UnrepresentableNumberError(str(e)) from e


def _encode_string(writer: ByteWriter, raw: bytes) -> None:
    """Write a string, a one-byte string as CHAR, otherwise length-prefixed."""
    if len(raw) == 1:
        writer.write_marker(markers.TYPE_CHAR)
        writer.write_bytes(raw)
        return

    writer.write_marker(markers.TYPE_HIGH_PREC if is_numeric_text(raw) else markers.TYPE_STRING)
    _encode_int(writer, len(raw))
    writer.write_bytes(raw)


def _enter(depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise DepthLimitError(f"Nesting depth {depth} exceeds max_depth={max_depth}")
