"""Byte-level packing and unpacking utilities.

This module provides the fixed-width numeric primitives of the wire format.
All multi-byte values are little-endian; signed values use two's complement.
"""

from __future__ import annotations

import struct

_INT8 = struct.Struct("<b")
_UINT8 = struct.Struct("<B")
_INT16 = struct.Struct("<h")
_INT32 = struct.Struct("<i")
_FLOAT32 = struct.Struct("<f")


class ByteWriter:
    """Accumulates encoded bytes.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_marker(b"U")
        >>> writer.write_uint8(42)
        >>> writer.to_bytes()
        b'U*'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_marker(self, marker: bytes) -> None:
        """Write a one-byte marker.

        Args:
            marker: Marker to write (must be exactly one byte)

        Raises:
            ValueError: If marker is not a single byte
        """
        if len(marker) != 1:
            raise ValueError(f"marker must be a single byte, got {marker!r}")
        self._buffer += marker

    def write_int8(self, value: int) -> None:
        """Write a signed 8-bit integer.

        Raises:
            ValueError: If value doesn't fit in 8 bits
        """
        self._pack(_INT8, value, -(1 << 7), (1 << 7) - 1)

    def write_uint8(self, value: int) -> None:
        """Write an unsigned 8-bit integer.

        Raises:
            ValueError: If value doesn't fit in 8 bits
        """
        self._pack(_UINT8, value, 0, (1 << 8) - 1)

    def write_int16(self, value: int) -> None:
        """Write a signed 16-bit little-endian integer.

        Raises:
            ValueError: If value doesn't fit in 16 bits
        """
        self._pack(_INT16, value, -(1 << 15), (1 << 15) - 1)

    def write_int32(self, value: int) -> None:
        """Write a signed 32-bit little-endian integer.

        Raises:
            ValueError: If value doesn't fit in 32 bits
        """
        self._pack(_INT32, value, -(1 << 31), (1 << 31) - 1)

    def write_float32(self, value: float) -> None:
        """Write an IEEE-754 single precision float.

        Raises:
            OverflowError: If value is finite but too large for single precision
        """
        self._buffer += _FLOAT32.pack(value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer += data

    def byte_length(self) -> int:
        """Return the current number of bytes written."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the accumulated bytes."""
        return bytes(self._buffer)

    def _pack(self, fmt: struct.Struct, value: int, min_value: int, max_value: int) -> None:
        if value < min_value or value > max_value:
            raise ValueError(
                f"Value {value} doesn't fit in {fmt.size * 8} bits "
                f"(range: {min_value} to {max_value})"
            )
        self._buffer += fmt.pack(value)


class ByteReader:
    """Reads fixed-width values from an immutable byte buffer.

    The reader owns a cursor that only moves forward.

    Example:
        >>> reader = ByteReader(b"I\\x00\\x01")
        >>> reader.read(1)
        b'I'
        >>> reader.read_int16()
        256
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read (copied into an immutable bytes object)
        """
        self._data = bytes(data)
        self._position = 0

    def read(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from buffer

        Raises:
            IndexError: If not enough bytes are available
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        end = self._position + num_bytes
        if end > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )
        result = self._data[self._position : end]
        self._position = end
        return result

    def read_int8(self) -> int:
        """Read a signed 8-bit integer."""
        return _INT8.unpack(self.read(1))[0]

    def read_uint8(self) -> int:
        """Read an unsigned 8-bit integer."""
        return _UINT8.unpack(self.read(1))[0]

    def read_int16(self) -> int:
        """Read a signed 16-bit little-endian integer."""
        return _INT16.unpack(self.read(2))[0]

    def read_int32(self) -> int:
        """Read a signed 32-bit little-endian integer."""
        return _INT32.unpack(self.read(4))[0]

    def read_float32(self) -> float:
        """Read an IEEE-754 single precision float."""
        return _FLOAT32.unpack(self.read(4))[0]

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def at_end(self) -> bool:
        """Return True when the cursor is at or past the end of the buffer."""
        return self._position >= len(self._data)

    def position(self) -> int:
        """Return the current byte offset."""
        return self._position

    def __len__(self) -> int:
        return len(self._data)
