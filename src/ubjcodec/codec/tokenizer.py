"""Tokenizer for the binary format.

The tokenizer reads one marker at the cursor, decodes its payload, and stores
the result on a ParseState. The state is created by a single decode call and
is threaded explicitly through the tokenizer and the structure builder.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator, NamedTuple

from ..exceptions import MalformedLengthError, TruncatedInputError, UnsupportedTagError
from ..models.options import MAX_DEPTH, TargetShape
from ..utils.text import from_wire_bytes
from . import markers
from .bytepack import ByteReader


class TokenKind(enum.Enum):
    """Classification of the current token."""

    EOF = "eof"
    DATA = "data"
    ARRAY_START = "array_start"
    ARRAY_END = "array_end"
    OBJECT_START = "object_start"
    OBJECT_END = "object_end"


CLOSERS = frozenset({TokenKind.ARRAY_END, TokenKind.OBJECT_END})

_STRUCTURAL: dict[bytes, TokenKind] = {
    markers.ARRAY_START: TokenKind.ARRAY_START,
    markers.ARRAY_END: TokenKind.ARRAY_END,
    markers.OBJECT_START: TokenKind.OBJECT_START,
    markers.OBJECT_END: TokenKind.OBJECT_END,
}

_CONSTANTS: dict[bytes, Any] = {
    markers.TYPE_NULL: None,
    markers.TYPE_BOOL_TRUE: True,
    markers.TYPE_BOOL_FALSE: False,
}

_FIXED_READERS: dict[bytes, Callable[[ByteReader], Any]] = {
    markers.TYPE_INT8: ByteReader.read_int8,
    markers.TYPE_UINT8: ByteReader.read_uint8,
    markers.TYPE_INT16: ByteReader.read_int16,
    markers.TYPE_INT32: ByteReader.read_int32,
    markers.TYPE_FLOAT32: ByteReader.read_float32,
    markers.TYPE_CHAR: lambda reader: from_wire_bytes(reader.read(1)),
}


@dataclass
class ParseState:
    """Mutable state of one decode call.

    Attributes:
        reader: Cursor over the immutable source buffer
        target_shape: Representation of decoded objects
        max_depth: Maximum container nesting
        token: Kind of the current token
        token_value: Decoded payload of the current token (DATA only)
        token_marker: Marker byte of the current token, None at end of input
        token_offset: Offset of the current token's marker
    """

    reader: ByteReader
    target_shape: TargetShape = TargetShape.OBJECT
    max_depth: int = MAX_DEPTH
    token: TokenKind = TokenKind.EOF
    token_value: Any = None
    token_marker: bytes | None = None
    token_offset: int = 0

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        target_shape: TargetShape = TargetShape.OBJECT,
        max_depth: int = MAX_DEPTH,
    ) -> ParseState:
        return cls(ByteReader(data), target_shape, max_depth)


class Token(NamedTuple):
    """A token as yielded by iter_tokens()."""

    offset: int
    marker: bytes | None
    kind: TokenKind
    value: Any


def next_token(state: ParseState) -> TokenKind:
    """Advance to the next token.

    Reads the marker at the cursor and its payload, then stores the token
    kind and payload on state. An unknown marker, or a cursor at the end of
    input, yields EOF (the unknown byte is still consumed).

    Args:
        state: Parse state to advance

    Returns:
        The new token kind

    Raises:
        UnsupportedTagError: If the marker is L, D or N
        MalformedLengthError: If a string length marker or value is invalid
        TruncatedInputError: If a payload runs past the end of input
    """
    reader = state.reader
    state.token = TokenKind.EOF
    state.token_value = None
    state.token_marker = None
    state.token_offset = reader.position()

    if reader.at_end():
        return state.token

    marker = reader.read(1)
    state.token_marker = marker

    if marker in _FIXED_READERS:
        state.token_value = _read_payload(state, _FIXED_READERS[marker], marker)
        state.token = TokenKind.DATA
    elif marker in _CONSTANTS:
        state.token_value = _CONSTANTS[marker]
        state.token = TokenKind.DATA
    elif marker == markers.TYPE_STRING or marker == markers.TYPE_HIGH_PREC:
        state.token_value = _read_string(state, marker)
        state.token = TokenKind.DATA
    elif marker in _STRUCTURAL:
        state.token = _STRUCTURAL[marker]
    elif marker in markers.UNSUPPORTED_MARKERS:
        raise UnsupportedTagError(
            f"Unsupported marker {marker!r} ({markers.marker_name(marker)}) "
            f"at offset {state.token_offset}"
        )

    return state.token


def iter_tokens(data: bytes) -> Iterator[Token]:
    """Yield every token of data in stream order, ending before EOF.

    Example:
        >>> [t.value for t in iter_tokens(b"[U\\x01U\\x02]")]
        [None, 1, 2, None]
    """
    state = ParseState.from_bytes(data)
    while next_token(state) is not TokenKind.EOF:
        yield Token(state.token_offset, state.token_marker, state.token, state.token_value)


def _read_payload(state: ParseState, read: Callable[[ByteReader], Any], marker: bytes) -> Any:
    try:
        return read(state.reader)
    except IndexError as e:
        raise TruncatedInputError(
            f"Truncated data while reading {markers.marker_name(marker)} payload "
            f"at offset {state.token_offset}: {e}"
        ) from e


def _read_string(state: ParseState, marker: bytes) -> str:
    """Read the length marker, the length and the raw string bytes."""
    length_marker = _read_payload(state, lambda reader: reader.read(1), marker)
    if length_marker not in markers.LENGTH_MARKERS:
        raise MalformedLengthError(
            f"Invalid length marker {length_marker!r} for {markers.marker_name(marker)} "
            f"at offset {state.token_offset}"
        )

    length = _read_payload(state, _FIXED_READERS[length_marker], marker)
    if length < 0:
        raise MalformedLengthError(
            f"Negative string length {length} at offset {state.token_offset}"
        )
    if length == 0:
        return ""
    return from_wire_bytes(_read_payload(state, lambda reader: reader.read(length), marker))
