"""Type tags of variant values and checked conversions between them."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

from .errors import VariantBadType, VariantEmpty, VariantIntegralOverflow


class TypeTag(Enum):
    """Kind of value held by a variant; the value is its canonical string."""

    NULL = "null"
    BOOLEAN = "boolean"
    CHAR = "char"
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    DOUBLE = "double_"
    STRING = "string"
    VEC = "vec"
    MAP = "map"

    def __str__(self) -> str:
        return self.value

    def is_scalar(self) -> bool:
        """True unless the tag is a container (vec or map)."""
        return self not in (TypeTag.VEC, TypeTag.MAP)

    def is_arithmetic(self) -> bool:
        """True for boolean, character, integer and floating tags."""
        return self in _ARITHMETIC


_INTEGER_LIMITS: dict[TypeTag, tuple[int, int]] = {
    TypeTag.CHAR: (-(2**7), 2**7 - 1),
    TypeTag.INT8: (-(2**7), 2**7 - 1),
    TypeTag.UINT8: (0, 2**8 - 1),
    TypeTag.INT16: (-(2**15), 2**15 - 1),
    TypeTag.UINT16: (0, 2**16 - 1),
    TypeTag.INT32: (-(2**31), 2**31 - 1),
    TypeTag.UINT32: (0, 2**32 - 1),
    TypeTag.INT64: (-(2**63), 2**63 - 1),
    TypeTag.UINT64: (0, 2**64 - 1),
}

_ARITHMETIC = frozenset(_INTEGER_LIMITS) | {TypeTag.BOOLEAN, TypeTag.DOUBLE}

_TYPE_NAMES: dict[TypeTag, str] = {
    TypeTag.NULL: "NullType",
    TypeTag.BOOLEAN: "boolean",
    TypeTag.DOUBLE: "double",
    TypeTag.STRING: "string",
    TypeTag.VEC: "list of variant",
    TypeTag.MAP: "map of string-variant",
    **{tag: tag.value for tag in _INTEGER_LIMITS},
}


def type_name(tag: TypeTag) -> str:
    """Human readable name of the type behind ``tag``, as used in error messages."""
    return _TYPE_NAMES[tag]


def infer_tag(value: Any) -> TypeTag:
    """Choose the tag for a plain Python value.

    Integers take the narrowest of int32, int64 and uint64 that holds them.
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, int):
        for tag in (TypeTag.INT32, TypeTag.INT64, TypeTag.UINT64):
            low, high = _INTEGER_LIMITS[tag]
            if low <= value <= high:
                return tag
        widest = TypeTag.INT64 if value < 0 else TypeTag.UINT64
        raise VariantIntegralOverflow(type_name(widest), str(value))
    if isinstance(value, float):
        return TypeTag.DOUBLE
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (list, tuple)):
        return TypeTag.VEC
    if isinstance(value, Mapping):
        return TypeTag.MAP
    raise TypeError(f"a variant cannot hold a value of type {type(value).__name__}")


def _format_value(tag: TypeTag, value: Any) -> str:
    if tag is TypeTag.DOUBLE:
        return f"{value:f}"
    return str(int(value))


def checked_cast(target: TypeTag, source: TypeTag, value: Any) -> Any:
    """Convert ``value`` held under ``source`` to the type of ``target``.

    Raises VariantEmpty for null, VariantBadType for incompatible kinds
    (booleans never mix with numbers) and VariantIntegralOverflow when the
    number is not representable in the target.
    """
    if source is TypeTag.NULL:
        if target is TypeTag.NULL:
            return None
        raise VariantEmpty(type_name(target))
    if target is source and not target.is_arithmetic():
        return value
    if not (target.is_arithmetic() and source.is_arithmetic()):
        raise VariantBadType(type_name(target), type_name(source))
    if (target is TypeTag.BOOLEAN) != (source is TypeTag.BOOLEAN):
        raise VariantBadType(type_name(target), type_name(source))
    if target is TypeTag.BOOLEAN:
        return bool(value)
    if target is TypeTag.DOUBLE:
        return float(value)
    if source is TypeTag.DOUBLE:
        if not math.isfinite(value) or not float(value).is_integer():
            raise VariantIntegralOverflow(type_name(target), _format_value(source, value))
        value = int(value)
    low, high = _INTEGER_LIMITS[target]
    if not low <= value <= high:
        raise VariantIntegralOverflow(type_name(target), str(int(value)))
    return int(value)


def checked_equal(lhs_tag: TypeTag, lhs: Any, rhs_tag: TypeTag, rhs: Any) -> bool:
    """Compare two scalar payloads, converting between arithmetic types.

    Integers compare by exact value regardless of width and signedness; a
    floating operand makes the comparison happen in floating point; a boolean
    equals only another boolean. Non-arithmetic values must share their tag.
    """
    if lhs_tag is TypeTag.NULL:
        return rhs_tag is TypeTag.NULL
    if lhs_tag.is_arithmetic():
        if not rhs_tag.is_arithmetic():
            return False
        if (lhs_tag is TypeTag.BOOLEAN) != (rhs_tag is TypeTag.BOOLEAN):
            return False
        if TypeTag.DOUBLE in (lhs_tag, rhs_tag):
            return float(lhs) == float(rhs)
        return lhs == rhs
    return lhs_tag is rhs_tag and lhs == rhs