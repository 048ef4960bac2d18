"""Text helpers for string payloads.

Strings travel as raw bytes. Python text is converted with UTF-8 and the
``surrogateescape`` error handler so that any byte sequence read from the
wire converts back to exactly the same bytes.
"""

from __future__ import annotations

_DIGITS = frozenset(b"0123456789")
_DOT = ord(".")


def to_wire_bytes(text: str) -> bytes:
    """Convert text to its wire bytes.

    Raises:
        UnicodeEncodeError: If text holds lone surrogates outside U+DC80-U+DCFF
    """
    return text.encode("utf-8", "surrogateescape")


def from_wire_bytes(raw: bytes) -> str:
    """Convert wire bytes to text (never fails)."""
    return raw.decode("utf-8", "surrogateescape")


def is_numeric_text(raw: bytes) -> bool:
    """Return True if raw is formatted like a decimal number.

    The accepted shape is one or more ASCII digits, optionally followed by a
    single ``.`` and one or more digits (``"123"``, ``"3.14"``). Signs,
    exponents and leading or trailing dots are rejected.

    Example:
        >>> is_numeric_text(b"12.50")
        True
        >>> is_numeric_text(b"12.")
        False
    """
    integer_digits = 0
    fraction_digits = 0
    seen_dot = False
    for byte in raw:
        if byte in _DIGITS:
            if seen_dot:
                fraction_digits += 1
            else:
                integer_digits += 1
        elif byte == _DOT and not seen_dot:
            seen_dot = True
        else:
            return False
    if integer_digits == 0:
        return False
    return fraction_digits > 0 if seen_dot else True
