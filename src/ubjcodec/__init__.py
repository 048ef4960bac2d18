"""ubjcodec: compact binary codec for JSON-like data

A Python library for a UBJSON-style binary format. Values (null, booleans,
integers up to 32 bits, single precision floats, strings, arrays and maps)
are written as one-byte markers followed by fixed-width little-endian
payloads, with no schema.

Key Features:
- Pydantic-based value model (tagged variants)
- Smallest-fit integer markers
- Single-pass decoder with one token of lookahead
- Pure Python implementation

Quick Start:
    >>> from ubjcodec import decode, encode
    >>>
    >>> data = encode({"name": "probe", "depth": 1500, "tags": ["a", "b"]})
    >>> decode(data)
    {'name': 'probe', 'depth': 1500, 'tags': ['a', 'b']}
"""

from __future__ import annotations

from .codec import decode, encode, encoded_size, iter_tokens
from .exceptions import (
    DecodeError,
    DepthLimitError,
    EncodeError,
    MalformedLengthError,
    TruncatedInputError,
    UbjcodecError,
    UnrepresentableNumberError,
    UnsupportedTagError,
)
from .models import (
    Array,
    Bool,
    Char,
    CodecOptions,
    Float32,
    Int8,
    Int16,
    Int32,
    Map,
    Null,
    String,
    TargetShape,
    UInt8,
    Value,
    max_depth_ceiling,
    to_value,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encoded_size",
    "iter_tokens",
    # Options
    "CodecOptions",
    "TargetShape",
    "max_depth_ceiling",
    # Value model
    "Value",
    "Null",
    "Bool",
    "Int8",
    "UInt8",
    "Int16",
    "Int32",
    "Float32",
    "Char",
    "String",
    "Array",
    "Map",
    "to_value",
    # Exceptions
    "UbjcodecError",
    "EncodeError",
    "UnrepresentableNumberError",
    "DecodeError",
    "UnsupportedTagError",
    "MalformedLengthError",
    "TruncatedInputError",
    "DepthLimitError",
    # Version
    "__version__",
]
