"""Value equality of variants that converts between arithmetic types."""

from __future__ import annotations

from typing import Any

from .types import TypeTag, checked_equal
from .variant import Variant


def _as_variant(value: Any) -> Variant:
    return value if isinstance(value, Variant) else Variant(value)


def _payload(var: Variant) -> Any:
    if var.null():
        return None
    return var.as_type(var.type())


def equal(lhs: Any, rhs: Any) -> bool:
    """Compare two variants by value.

    Unlike ``==``, which also requires the same type tag, numbers of any width,
    signedness or floating type compare equal when their values are equal.
    Booleans equal only booleans; strings, lists and maps must share their
    kind, and lists and maps are compared element by element with this same
    rule. Plain Python values are turned into variants first.
    """
    lhs = _as_variant(lhs)
    rhs = _as_variant(rhs)
    tag = lhs.type()

    if tag is TypeTag.VEC:
        if rhs.type() is not TypeTag.VEC:
            return False
        left, right = lhs.vec(), rhs.vec()
        return len(left) == len(right) and all(
            equal(a, b) for a, b in zip(left, right)
        )

    if tag is TypeTag.MAP:
        if rhs.type() is not TypeTag.MAP:
            return False
        left, right = lhs.map(), rhs.map()
        return left.keys() == right.keys() and all(
            equal(item, right[key]) for key, item in left.items()
        )

    if tag is TypeTag.STRING:
        return lhs == rhs

    return checked_equal(tag, _payload(lhs), rhs.type(), _payload(rhs))