"""Value model and codec options for ubjcodec."""

from __future__ import annotations

from .options import MAX_DEPTH, CodecOptions, TargetShape, max_depth_ceiling
from .value import (
    AnyValue,
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
    integer_value,
    to_value,
)

__all__ = [
    "CodecOptions",
    "TargetShape",
    "MAX_DEPTH",
    "max_depth_ceiling",
    "Value",
    "AnyValue",
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
    "integer_value",
]
