"""A dynamically typed value tree: scalars, strings, lists and string-keyed maps."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import VariantError
from .types import TypeTag, checked_cast, infer_tag, type_name


def _normalise(tag: TypeTag, value: Any) -> Any:
    """Check ``value`` against ``tag`` and return the payload to store."""
    if not isinstance(tag, TypeTag):
        raise TypeError(f"tag must be a TypeTag, not {type(tag).__name__}")
    if tag is TypeTag.NULL:
        if value is not None:
            raise TypeError("a null variant cannot hold a value")
        return None
    if tag is TypeTag.BOOLEAN:
        if not isinstance(value, bool):
            raise TypeError(f"expected a bool, got {type(value).__name__}")
        return value
    if tag is TypeTag.STRING:
        if not isinstance(value, str):
            raise TypeError(f"expected a str, got {type(value).__name__}")
        return value
    if tag is TypeTag.VEC:
        if not isinstance(value, (list, tuple)):
            raise TypeError(f"expected a list, got {type(value).__name__}")
        return [Variant(item) for item in value]
    if tag is TypeTag.MAP:
        if not isinstance(value, Mapping):
            raise TypeError(f"expected a mapping, got {type(value).__name__}")
        result: dict[str, Variant] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"map keys must be str, not {type(key).__name__}")
            result[key] = Variant(item)
        return result
    if tag is TypeTag.CHAR and isinstance(value, str):
        if len(value) != 1:
            raise TypeError("a char variant needs a single character")
        value = ord(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    if tag is TypeTag.DOUBLE:
        return float(value)
    return checked_cast(tag, infer_tag(value), value)


class Variant:
    """A value of one of the types listed by :class:`TypeTag`.

    Without an explicit ``tag`` the type is inferred from the Python value;
    objects providing a ``to_variant()`` method are converted through it.
    Lists and mappings are copied into lists and dicts of variants.
    """

    __slots__ = ("_tag", "_value")

    def __init__(self, value: Any = None, tag: TypeTag | None = None) -> None:
        if isinstance(value, Variant):
            if tag is None or tag is value._tag:
                tag, value = value._tag, value._value
            else:
                value = value.as_type(tag)
        elif tag is None:
            to_variant = getattr(value, "to_variant", None)
            if callable(to_variant):
                converted = to_variant()
                if not isinstance(converted, Variant):
                    raise TypeError("to_variant() must return a Variant")
                tag, value = converted._tag, converted._value
            else:
                tag = infer_tag(value)
        self._tag: TypeTag = tag
        self._value: Any = _normalise(tag, value)

    def type(self) -> TypeTag:
        """Tag of the held value."""
        return self._tag

    def null(self) -> bool:
        """True if the variant holds null."""
        return self._tag is TypeTag.NULL

    def is_scalar(self) -> bool:
        """True unless the variant holds a list or a map."""
        return self._tag.is_scalar()

    def type_name(self) -> str:
        """Name of the type of the held value."""
        return type_name(self._tag)

    def as_type(self, tag: TypeTag) -> Any:
        """Read the value as the type of ``tag``, converting numbers where exact.

        Lists and maps are returned as the live containers.
        """
        return checked_cast(tag, self._tag, self._value)

    def as_or(self, tag: TypeTag, default: Any) -> Any:
        """Like :meth:`as_type`, but return ``default`` when the variant is null."""
        if self.null():
            return default
        return self.as_type(tag)

    def as_null(self) -> None:
        """Return None if null; raise VariantBadType otherwise."""
        return checked_cast(TypeTag.NULL, self._tag, self._value)

    def boolean(self) -> bool:
        return self.as_type(TypeTag.BOOLEAN)

    def boolean_or(self, default: bool) -> bool:
        return self.as_or(TypeTag.BOOLEAN, default)

    def character(self) -> int:
        return self.as_type(TypeTag.CHAR)

    def character_or(self, default: int) -> int:
        return self.as_or(TypeTag.CHAR, default)

    def int8(self) -> int:
        return self.as_type(TypeTag.INT8)

    def int8_or(self, default: int) -> int:
        return self.as_or(TypeTag.INT8, default)

    def uint8(self) -> int:
        return self.as_type(TypeTag.UINT8)

    def uint8_or(self, default: int) -> int:
        return self.as_or(TypeTag.UINT8, default)

    def int16(self) -> int:
        return self.as_type(TypeTag.INT16)

    def int16_or(self, default: int) -> int:
        return self.as_or(TypeTag.INT16, default)

    def uint16(self) -> int:
        return self.as_type(TypeTag.UINT16)

    def uint16_or(self, default: int) -> int:
        return self.as_or(TypeTag.UINT16, default)

    def int32(self) -> int:
        return self.as_type(TypeTag.INT32)

    def int32_or(self, default: int) -> int:
        return self.as_or(TypeTag.INT32, default)

    def uint32(self) -> int:
        return self.as_type(TypeTag.UINT32)

    def uint32_or(self, default: int) -> int:
        return self.as_or(TypeTag.UINT32, default)

    def int64(self) -> int:
        return self.as_type(TypeTag.INT64)

    def int64_or(self, default: int) -> int:
        return self.as_or(TypeTag.INT64, default)

    def uint64(self) -> int:
        return self.as_type(TypeTag.UINT64)

    def uint64_or(self, default: int) -> int:
        return self.as_or(TypeTag.UINT64, default)

    def floating(self) -> float:
        return self.as_type(TypeTag.DOUBLE)

    def floating_or(self, default: float) -> float:
        return self.as_or(TypeTag.DOUBLE, default)

    def str(self) -> str:
        return self.as_type(TypeTag.STRING)

    def str_or(self, default: str) -> str:
        return self.as_or(TypeTag.STRING, default)

    def vec(self) -> list[Variant]:
        """The held list of variants."""
        return self.as_type(TypeTag.VEC)

    def vec_or(self, default: list[Variant]) -> list[Variant]:
        """A copy of the held list, or ``default`` when null."""
        if self.null():
            return default
        return [item.copy() for item in self.vec()]

    def modify_vec(self) -> list[Variant]:
        """The held list, for in-place modification."""
        return self.as_type(TypeTag.VEC)

    def map(self) -> dict[str, Variant]:
        """The held map of variants."""
        return self.as_type(TypeTag.MAP)

    def map_or(self, default: dict[str, Variant]) -> dict[str, Variant]:
        """A copy of the held map, or ``default`` when null."""
        if self.null():
            return default
        return {key: item.copy() for key, item in self.map().items()}

    def modify_map(self) -> dict[str, Variant]:
        """The held map, for in-place modification."""
        return self.as_type(TypeTag.MAP)

    def copy(self) -> Variant:
        """A deep copy of this variant."""
        return Variant(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            try:
                other = Variant(other)
            except (TypeError, VariantError):
                return NotImplemented
        return self._tag is other._tag and self._value == other._value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        tag, value = self._tag, self._value
        if tag is TypeTag.NULL:
            return "Null"
        if tag is TypeTag.BOOLEAN:
            return "1" if value else "0"
        if tag is TypeTag.CHAR:
            return chr(value % 256)
        if tag is TypeTag.DOUBLE:
            return f"{value:g}"
        if tag is TypeTag.STRING:
            return value
        if tag is TypeTag.VEC:
            if not value:
                return "[ ]"
            return "[ " + ", ".join(f"{item}" for item in value) + " ]"
        if tag is TypeTag.MAP:
            return "{ " + "".join(f"{key}: {item}; " for key, item in value.items()) + "}"
        return f"{value}"

    def __repr__(self) -> str:
        return f"Variant({self._value!r}, TypeTag.{self._tag.name})"