"""Token dump CLI command."""

from __future__ import annotations

from typing import TextIO

from ..codec.markers import marker_name
from ..codec.tokenizer import TokenKind, iter_tokens


def dump_tokens(data: bytes, out: TextIO) -> int:
    """Print one line per token of data, indented by container nesting.

    Args:
        data: Binary data to inspect
        out: Text stream to write to

    Returns:
        Number of tokens printed
    """
    print(f"{len(data)} bytes", file=out)

    depth = 0
    count = 0
    for token in iter_tokens(data):
        if token.kind in (TokenKind.ARRAY_END, TokenKind.OBJECT_END):
            depth = max(0, depth - 1)

        line = f"{token.offset:>8}  {'  ' * depth}{marker_name(token.marker)}"
        if token.kind is TokenKind.DATA:
            line += f" {token.value!r}"
        print(line, file=out)
        count += 1

        if token.kind in (TokenKind.ARRAY_START, TokenKind.OBJECT_START):
            depth += 1

    print(f"{count} token{'s' if count != 1 else ''}", file=out)
    return count
