"""Conversion of values, enumerations in particular, to and from strings.

An enumeration member's string forms are, in order of preference: its
``strings`` attribute (a sequence of strings, or a method returning one), its
value when that is a string or a non-empty tuple of strings, or its name.
The first form is the one a member is written as; any form is accepted when
reading.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import StringConversionError


def _representations(member: Enum) -> tuple[str, ...]:
    strings = getattr(member, "strings", None)
    if callable(strings):
        strings = strings()
    if strings is not None:
        return (strings,) if isinstance(strings, str) else tuple(strings)
    value = member.value
    if isinstance(value, str):
        return (value,)
    if isinstance(value, tuple) and value and all(isinstance(s, str) for s in value):
        return value
    return (member.name,)


def to_string(value: Any) -> str:
    """String form of ``value``.

    Enumeration members give their first string form, integers and booleans
    their decimal digits, floats six decimal places, strings themselves, and
    objects with their own ``__str__`` its result.
    """
    if isinstance(value, Enum):
        return _representations(value)[0]
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if type(value).__str__ is not object.__str__:
        return str(value)
    raise TypeError(f"{type(value).__name__} is not convertible to string")


def to_strings(value: Enum, index: int) -> str:
    """The string form number ``index`` of an enumeration member."""
    if not isinstance(value, Enum):
        raise TypeError(f"{type(value).__name__} is not an enumeration")
    representations = _representations(value)
    if 0 <= index < len(representations):
        return representations[index]
    raise StringConversionError(
        f"enum variant '{representations[0]}' doesn't have string representation {index}"
    )


def from_string(target: type, text: str) -> Any:
    """Convert ``text`` to a value of ``target``.

    An enumeration yields the member having ``text`` among its string forms
    and raises StringConversionError when none has; any other type is
    constructed from the string.
    """
    if isinstance(target, type) and issubclass(target, Enum):
        for member in target:
            if text in _representations(member):
                return member
        raise StringConversionError(text, target.__name__)
    if target is str:
        return text
    return target(text)