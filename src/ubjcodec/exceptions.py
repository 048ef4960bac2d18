"""Exception hierarchy for ubjcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UbjcodecError for easy catching of any ubjcodec-specific error.
"""

from __future__ import annotations


class UbjcodecError(Exception):
    """Base exception for all ubjcodec errors."""

    pass


class EncodeError(UbjcodecError):
    """Raised when encoding a value fails.

    Examples:
        - Text that cannot be converted to bytes
        - Duplicate map keys after key coercion
        - Encoded output exceeds max_bytes
    """

    pass


class UnrepresentableNumberError(EncodeError):
    """Raised when a number has no wire representation.

    Integers outside the int32 range and floats that overflow single
    precision cannot be encoded.
    """

    pass


class DecodeError(UbjcodecError):
    """Raised when decoding binary data fails."""

    pass


class UnsupportedTagError(DecodeError):
    """Raised when the input contains a reserved but unsupported marker (L, D or N)."""

    pass


class MalformedLengthError(DecodeError):
    """Raised when a string length is not one of the integer markers or is negative."""

    pass


class TruncatedInputError(DecodeError):
    """Raised when a payload or a declared string length runs past the end of input."""

    pass


class DepthLimitError(UbjcodecError):
    """Raised when container nesting exceeds the configured max_depth."""

    pass
