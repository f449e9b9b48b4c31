"""Exceptions raised when reading values out of a variant or converting strings."""

from __future__ import annotations


class VariantError(Exception):
    """Base class of every error raised while reading a variant."""


class VariantEmpty(VariantError, ValueError):
    """A value was requested from a variant that holds null."""

    def __init__(self, expected: str) -> None:
        self.expected = expected
        super().__init__(f"variant is empty, expected '{expected}'")


class VariantBadType(VariantError, TypeError):
    """The variant holds a value of a type that cannot be read as requested."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected '{expected}', actual '{actual}'")


class VariantIntegralOverflow(VariantError, OverflowError):
    """The stored number is not representable in the requested type."""

    def __init__(self, type_name: str, value: str) -> None:
        self.type_name = type_name
        self.value = value
        super().__init__(f"The type '{type_name}' can not hold the value '{value}'")


class StringConversionError(ValueError):
    """A value could not be converted to or from its string form.

    With a ``type_name`` the message states that ``text`` is not of that type;
    without one, ``text`` is the whole message.
    """

    def __init__(self, text: str, type_name: str | None = None) -> None:
        self.text = text
        self.type_name = type_name
        if type_name is None:
            message = text
        else:
            message = f"'{text}' is not of type '{type_name}'"
        super().__init__(message)