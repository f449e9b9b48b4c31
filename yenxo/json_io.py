"""Conversion of variants to and from JSON text and plain Python data."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .types import TypeTag
from .variant import Variant

_INT32 = (-(2**31), 2**31 - 1)
_UINT32 = (0, 2**32 - 1)
_INT64 = (-(2**63), 2**63 - 1)
_UINT64 = (0, 2**64 - 1)


def _document_int(value: int) -> Variant:
    for tag, (low, high) in (
        (TypeTag.INT32, _INT32),
        (TypeTag.UINT32, _UINT32),
        (TypeTag.INT64, _INT64),
        (TypeTag.UINT64, _UINT64),
    ):
        if low <= value <= high:
            return Variant(value, tag)
    return Variant(float(value))


def from_python(obj: Any) -> Variant:
    """Build a variant from JSON-like Python data.

    Integers become int32, uint32, int64 or uint64, whichever is the first to
    hold the value; larger ones become doubles.
    """
    if isinstance(obj, Variant):
        return obj.copy()
    if obj is None or isinstance(obj, (bool, float, str)):
        return Variant(obj)
    if isinstance(obj, int):
        return _document_int(obj)
    if isinstance(obj, (list, tuple)):
        return Variant([from_python(item) for item in obj])
    if isinstance(obj, Mapping):
        result: dict[str, Variant] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"map keys must be str, not {type(key).__name__}")
            result[key] = from_python(item)
        return Variant(result)
    raise TypeError(f"cannot build a variant from {type(obj).__name__}")


def to_python(var: Variant) -> Any:
    """Turn a variant into plain Python data: None, bool, int, float, str, list, dict."""
    tag = var.type()
    if tag is TypeTag.NULL:
        return None
    if tag is TypeTag.VEC:
        return [to_python(item) for item in var.vec()]
    if tag is TypeTag.MAP:
        return {key: to_python(item) for key, item in var.map().items()}
    return var.as_type(tag)


def _reader_int(text: str) -> Variant:
    value = int(text)
    if text.startswith("-"):
        ranges = ((TypeTag.INT32, _INT32), (TypeTag.INT64, _INT64))
    else:
        ranges = ((TypeTag.UINT32, _UINT32), (TypeTag.UINT64, _UINT64))
    for tag, (low, high) in ranges:
        if low <= value <= high:
            return Variant(value, tag)
    return Variant(float(value))


def _reader_float(text: str) -> Variant:
    return Variant(float(text))


def _reject_constant(text: str) -> Any:
    raise ValueError(f"invalid value: {text}")


def from_json(text: str) -> Variant:
    """Parse JSON text into a variant.

    Non-negative integers become uint32 or uint64, negative ones int32 or
    int64; integers too large for 64 bits and all other numbers become
    doubles. Raises ValueError on malformed input.
    """
    parsed = json.loads(
        text,
        parse_int=_reader_int,
        parse_float=_reader_float,
        parse_constant=_reject_constant,
    )
    return Variant(parsed)


def to_json(var: Variant) -> str:
    """Compact JSON text of the variant."""
    return json.dumps(
        to_python(var), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


def to_pretty_json(var: Variant) -> str:
    """Indented JSON text of the variant."""
    return json.dumps(to_python(var), indent=4, ensure_ascii=False, allow_nan=False)