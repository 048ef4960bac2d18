"""Value model: the tagged variant that the encoder consumes.

Each wire type has its own frozen pydantic model, discriminated by ``kind``.
Native Python data is lifted into this model with ``to_value()``; integer
widths are chosen there, so explicit variants such as ``Int8(value=-1)``
are only produced on request.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..codec.markers import TYPE_INT16, TYPE_INT32, TYPE_UINT8, select_int_marker
from ..exceptions import DepthLimitError, EncodeError
from ..utils.text import to_wire_bytes
from .options import MAX_DEPTH, check_max_depth

logger = logging.getLogger(__name__)


class Value(BaseModel):
    """Base class for all value variants."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


class Null(Value):
    kind: Literal["null"] = "null"


class Bool(Value):
    kind: Literal["bool"] = "bool"
    value: bool


class Int8(Value):
    kind: Literal["int8"] = "int8"
    value: int = Field(ge=-(1 << 7), le=(1 << 7) - 1)


class UInt8(Value):
    kind: Literal["uint8"] = "uint8"
    value: int = Field(ge=0, le=(1 << 8) - 1)


class Int16(Value):
    kind: Literal["int16"] = "int16"
    value: int = Field(ge=-(1 << 15), le=(1 << 15) - 1)


class Int32(Value):
    kind: Literal["int32"] = "int32"
    value: int = Field(ge=-(1 << 31), le=(1 << 31) - 1)


class Float32(Value):
    kind: Literal["float32"] = "float32"
    value: float


class Char(Value):
    """A single raw byte."""

    kind: Literal["char"] = "char"
    value: bytes = Field(min_length=1, max_length=1)


class String(Value):
    kind: Literal["string"] = "string"
    value: bytes


class Array(Value):
    kind: Literal["array"] = "array"
    items: list[AnyValue] = Field(default_factory=list)


class Map(Value):
    """Ordered key/value entries with unique string keys (as raw bytes)."""

    kind: Literal["map"] = "map"
    entries: list[tuple[bytes, AnyValue]] = Field(default_factory=list)

    @field_validator("entries")
    @classmethod
    def _unique_keys(cls, v: list[tuple[bytes, Any]]) -> list[tuple[bytes, Any]]:
        seen: set[bytes] = set()
        for key, _ in v:
            if key in seen:
                raise ValueError(f"duplicate map key {key!r}")
            seen.add(key)
        return v


AnyValue = Annotated[
    Union[Null, Bool, Int8, UInt8, Int16, Int32, Float32, Char, String, Array, Map],
    Field(discriminator="kind"),
]

Array.model_rebuild()
Map.model_rebuild()

_INT_VARIANTS: dict[bytes, type[Value]] = {
    TYPE_UINT8: UInt8,
    TYPE_INT16: Int16,
    TYPE_INT32: Int32,
}


def integer_value(value: int) -> Value:
    """Return the smallest-fit integer variant for value.

    Raises:
        UnrepresentableNumberError: If value is outside the int32 range
    """
    return _INT_VARIANTS[select_int_marker(value)](value=value)


def to_value(obj: Any, *, max_depth: int = MAX_DEPTH) -> Value:
    """Lift a native Python object into the value model.

    Mapping rules:
        - ``None`` -> Null, ``bool`` -> Bool
        - ``int`` -> UInt8, Int16 or Int32 (see ``select_int_marker``)
        - ``float`` -> Float32
        - ``str``, ``bytes``, ``bytearray`` -> String
        - ``list``, ``tuple`` -> Array
        - any ``Mapping`` -> Map, keys coerced to ``str``
        - pydantic models and dataclass instances -> Map of their fields
        - anything else -> Null
        - Value instances are returned unchanged

    Args:
        obj: Object to lift
        max_depth: Maximum container nesting

    Returns:
        Value model instance

    Raises:
        EncodeError: If two keys of one mapping coerce to the same string
        UnrepresentableNumberError: If an integer is outside the int32 range
        DepthLimitError: If nesting exceeds max_depth
        ValueError: If max_depth is above max_depth_ceiling()
    """
    return _lift(obj, 0, check_max_depth(max_depth))


def _lift(obj: Any, depth: int, max_depth: int) -> Value:
    if isinstance(obj, Value):
        return obj

    if obj is None:
        return Null()

    # bool must be checked before int
    if isinstance(obj, bool):
        return Bool(value=obj)

    if isinstance(obj, int):
        return integer_value(int(obj))

    if isinstance(obj, float):
        return Float32(value=obj)

    if isinstance(obj, (str, bytes, bytearray)):
        return String(value=_text_bytes(obj))

    if isinstance(obj, (list, tuple)):
        _check_depth(depth + 1, max_depth)
        return Array(items=[_lift(item, depth + 1, max_depth) for item in obj])

    if isinstance(obj, Mapping):
        return _lift_mapping(obj.items(), depth, max_depth)

    if isinstance(obj, BaseModel):
        fields = type(obj).model_fields
        return _lift_mapping(((name, getattr(obj, name)) for name in fields), depth, max_depth)

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        fields = dataclasses.fields(obj)
        return _lift_mapping(
            ((f.name, getattr(obj, f.name)) for f in fields), depth, max_depth
        )

    logger.debug("Encoding unsupported %s as null", type(obj).__name__)
    return Null()


def _lift_mapping(items: Any, depth: int, max_depth: int) -> Map:
    _check_depth(depth + 1, max_depth)
    entries: list[tuple[bytes, Value]] = []
    seen: set[bytes] = set()
    for key, item in items:
        # numeric and other non-string keys use their string representation
        raw_key = _text_bytes(key if isinstance(key, (str, bytes, bytearray)) else str(key))
        if raw_key in seen:
            raise EncodeError(f"Duplicate map key {key!r} after coercion to string")
        seen.add(raw_key)
        entries.append((raw_key, _lift(item, depth + 1, max_depth)))
    return Map(entries=entries)


def _text_bytes(text: str | bytes | bytearray) -> bytes:
    if not isinstance(text, str):
        return bytes(text)
    try:
        return to_wire_bytes(text)
    except UnicodeEncodeError as e:
        raise EncodeError(f"Cannot encode text {text!r}: {e}") from e


def _check_depth(depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise DepthLimitError(f"Nesting depth {depth} exceeds max_depth={max_depth}")
