"""Binary codec for ubjcodec.

This module provides encoding and decoding between the value model and the
compact binary format.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode, encoded_size
from .tokenizer import ParseState, Token, TokenKind, iter_tokens, next_token

__all__ = [
    "encode",
    "decode",
    "encoded_size",
    "iter_tokens",
    "next_token",
    "ParseState",
    "Token",
    "TokenKind",
]
