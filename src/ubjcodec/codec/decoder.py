"""Binary decoder.

This module provides the decode() function that converts binary data back
to native Python values. Decoding is a single pass with one token of
lookahead: decode_value() consumes scalar tokens and hands containers to
decode_struct(), which recurses for nested containers.

Unterminated containers are accepted: when the input ends before a close
marker, the partially built container is returned without error and a
warning is logged. A truncated stream can therefore decode "successfully";
callers that need to detect this must check the data length themselves.
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import DepthLimitError
from ..models.options import CodecOptions, TargetShape
from .tokenizer import CLOSERS, ParseState, TokenKind, next_token

logger = logging.getLogger(__name__)


def decode(
    data: bytes,
    target_shape: TargetShape | str | None = None,
    *,
    options: CodecOptions | None = None,
) -> Any:
    """Decode binary data to a native Python value.

    Only the first root value is decoded; bytes after it are ignored.
    Empty input decodes to None.

    Args:
        data: Binary data to decode
        target_shape: Representation of object-tagged structures, overriding
            options.target_shape. OBJECT gives a dict, ARRAY a list of
            (key, value) tuples.
        options: Codec options (target_shape, max_depth)

    Returns:
        Decoded value: None, bool, int, float, str, list or dict

    Raises:
        UnsupportedTagError: If the data holds an int64, float64 or no-op marker
        MalformedLengthError: If a string length is invalid
        TruncatedInputError: If a payload runs past the end of data
        DepthLimitError: If nesting exceeds max_depth

    Examples:
        ```python
        from ubjcodec import TargetShape, decode

        decode(b"[U\\x01U\\x02]")                        # [1, 2]
        decode(b"{CaU\\x01}")                            # {'a': 1}
        decode(b"{CaU\\x01}", TargetShape.ARRAY)         # [('a', 1)]
        ```
    """
    opts = options or CodecOptions()
    shape = TargetShape(target_shape) if target_shape is not None else opts.target_shape

    state = ParseState.from_bytes(data, shape, opts.max_depth)
    next_token(state)
    result = decode_value(state, 0)

    logger.debug(
        "Decoded %s from %d of %d bytes",
        type(result).__name__,
        state.token_offset,
        len(state.reader),
    )
    return result


def decode_value(state: ParseState, depth: int) -> Any:
    """Decode the value starting at the current token.

    A DATA token yields its payload and advances. An open marker delegates to
    decode_struct(). A close marker or EOF yields None without advancing.
    """
    if state.token is TokenKind.DATA:
        result = state.token_value
        next_token(state)
        return result

    if state.token is TokenKind.ARRAY_START or state.token is TokenKind.OBJECT_START:
        return decode_struct(state, depth + 1)

    return None


def decode_struct(state: ParseState, depth: int) -> Any:
    """Build the container opened by the current token.

    Args:
        state: Parse state positioned on ARRAY_START or OBJECT_START
        depth: Nesting depth of this container (root container is 1)

    Returns:
        dict for objects under TargetShape.OBJECT, list of (key, value)
        tuples for objects under TargetShape.ARRAY, list for arrays

    Raises:
        DepthLimitError: If depth exceeds state.max_depth
    """
    if depth > state.max_depth:
        raise DepthLimitError(
            f"Nesting depth {depth} exceeds max_depth={state.max_depth} "
            f"at offset {state.token_offset}"
        )

    is_object = state.token is TokenKind.OBJECT_START
    as_dict = is_object and state.target_shape is TargetShape.OBJECT
    open_offset = state.token_offset

    result: Any = {} if as_dict else []

    token = next_token(state)
    while token is not TokenKind.EOF and token not in CLOSERS:
        if is_object:
            key = state.token_value
            next_token(state)

        value = decode_value(state, depth)

        if as_dict:
            result[key] = value
        elif is_object:
            result.append((key, value))
        else:
            # arrays are keyed by position
            result.append(value)

        token = state.token

    if token is TokenKind.EOF and state.token_marker is not None:
        logger.warning(
            "Unknown marker %r at offset %d ends %s opened at offset %d",
            state.token_marker,
            state.token_offset,
            "object" if is_object else "array",
            open_offset,
        )
    elif token is TokenKind.EOF:
        logger.warning(
            "Unterminated %s opened at offset %d; returning partial container",
            "object" if is_object else "array",
            open_offset,
        )

    # Consume the close marker
    next_token(state)
    return result
