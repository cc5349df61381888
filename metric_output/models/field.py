"""Renderer argument values as an explicit tagged variant.

Every positional argument handed to a renderer is normalised into one of
``Missing``, ``Text``, ``Number`` or ``Error`` so renderers branch on the
variant instead of probing runtime types.
"""

from dataclasses import dataclass


class Field:
    """Base class of all renderer argument variants."""

    __slots__ = ()

    @property
    def is_missing(self) -> bool:
        return False

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Missing(Field):
    """An argument that was not supplied."""

    @property
    def is_missing(self) -> bool:
        return True

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class Text(Field):
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Number(Field):
    number: int | float

    @property
    def is_integer(self) -> bool:
        return isinstance(self.number, int)

    def __str__(self) -> str:
        return str(self.number)


@dataclass(frozen=True)
class Error(Field):
    """A caller-supplied error; renderers print its message verbatim."""

    message: str

    @property
    def is_error(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.message


MISSING = Missing()


def field_of(value: object) -> Field:
    if value is None:
        return MISSING
    if isinstance(value, Field):
        return value
    if isinstance(value, BaseException):
        return Error(str(value))
    # bool is an int subclass but never a numeric reading
    if isinstance(value, bool):
        return Text(str(value))
    if isinstance(value, (int, float)):
        return Number(value)
    return Text(str(value))
