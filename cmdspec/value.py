# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Typed values held by positional arguments and flags.

A `Value` pairs a `ValueType` with its Python payload. Scalar types carry a
`bool`, an `int` or a `str`; plural types (`bools`, `numbers`, `strings`) carry
a list that is owned by the value and grows as tokens are collected.

Functions:
- is_truthy: Convert a token to a boolean using the strict truthy grammar.
- parse_number: Convert a token to a signed 64-bit integer.
- parse_default: Convert a declared default literal for a scalar type.
- coerce_element: Convert one token to the element type of a value type.
- make_value: Build the initial `Value` for a declared type and default.

Example:
    make_value("bool", "true")   → Value(type=ValueType.BOOL, data=True)
    make_value("numbers", None)  → Value(type=ValueType.NUMBERS, data=[])
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cmdspec.exceptions import (
    IntegerParseError,
    InvalidTypeStringError,
    InvalidValueError,
    ListDefaultNotAllowedError,
    UnknownDefaultValueError,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


class ValueType(Enum):
    """
    Declared type of an argument or flag.

    Members:
        BOOL: A boolean, toggled by flag presence.
        NUMBER: A signed 64-bit integer.
        STRING: A string, stored verbatim.
        BOOLS: A list of booleans.
        NUMBERS: A list of integers.
        STRINGS: A list of strings.

    Example:
        ValueType("numbers") → ValueType.NUMBERS
    """

    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    BOOLS = "bools"
    NUMBERS = "numbers"
    STRINGS = "strings"

    @classmethod
    def choices(cls) -> list[ValueType]:
        """Return a list of all value types."""
        return list(cls)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        valid = ", ".join(str(member) for member in cls.choices())
        raise InvalidTypeStringError(
            f"Invalid type {value!r}. Must be one of: {valid}"
        )

    @property
    def is_plural(self) -> bool:
        return self in (ValueType.BOOLS, ValueType.NUMBERS, ValueType.STRINGS)

    @property
    def element_type(self) -> ValueType:
        """Return the scalar type of one element (the type itself for scalars)."""
        return {
            ValueType.BOOLS: ValueType.BOOL,
            ValueType.NUMBERS: ValueType.NUMBER,
            ValueType.STRINGS: ValueType.STRING,
        }.get(self, self)

    def __str__(self) -> str:
        return self.value


def is_truthy(value: str) -> bool:
    """
    Convert a token to a boolean.

    Only 'true'/'false' and 't'/'f' are accepted, case-insensitively.

    Raises:
        InvalidValueError: If the token is any other string.
    """
    lowered = value.lower()
    if lowered in ("true", "t"):
        return True
    if lowered in ("false", "f"):
        return False
    raise InvalidValueError(f"Value '{value}' is not a boolean (true/false/t/f)")


def _check_range(number: int, value: str) -> int:
    if not INT64_MIN <= number <= INT64_MAX:
        raise IntegerParseError(f"Value '{value}' does not fit in a 64-bit integer")
    return number


def parse_number(value: str, auto_radix: bool = True) -> int:
    """
    Convert a token to a signed 64-bit integer.

    With `auto_radix`, a `0x`, `0o` or `0b` prefix (after an optional sign)
    selects the base; anything else is read as decimal, leading zeros included.

    Args:
        value (str): The token to convert.
        auto_radix (bool): Whether radix prefixes are honoured.

    Returns:
        int: The parsed number.

    Raises:
        IntegerParseError: If the token is not an integer or overflows 64 bits.
    """
    sign = ""
    body = value
    if body[:1] in ("+", "-"):
        sign, body = body[0], body[1:]
    base = 10
    if auto_radix and body[:2].lower() in _RADIX_PREFIXES:
        base = _RADIX_PREFIXES[body[:2].lower()]
        body = body[2:]
    if not body or not body.isascii() or body[0] in "+-_" or body != body.strip():
        raise IntegerParseError(f"Value '{value}' is not a valid integer")
    try:
        number = int(body, base)
    except ValueError as error:
        raise IntegerParseError(f"Value '{value}' is not a valid integer") from error
    return _check_range(-number if sign == "-" else number, value)


def parse_default(value_type: ValueType, literal: str) -> bool | int | str:
    """Convert a declared default literal for a scalar type."""
    if value_type is ValueType.BOOL:
        if literal == "true":
            return True
        if literal == "false":
            return False
        raise UnknownDefaultValueError(
            f"Unknown default '{literal}' for a bool: expected 'true' or 'false'"
        )
    if value_type is ValueType.NUMBER:
        return parse_number(literal, auto_radix=False)
    return literal


def coerce_element(value_type: ValueType, value: str) -> bool | int | str:
    """Convert one token to the element type of `value_type`."""
    element_type = value_type.element_type
    if element_type is ValueType.BOOL:
        return is_truthy(value)
    if element_type is ValueType.NUMBER:
        return parse_number(value)
    return value


@dataclass
class Value:
    """
    A typed value owned by an argument or a flag.

    Attributes:
        type (ValueType): The declared type.
        data (Any): `bool`, `int` or `str` for scalars, a `list` for plural types.
    """

    type: ValueType
    data: Any

    @property
    def is_plural(self) -> bool:
        return self.type.is_plural

    @property
    def is_bool(self) -> bool:
        return self.type is ValueType.BOOL

    def toggle(self) -> None:
        """Flip a boolean value."""
        if not self.is_bool:
            raise TypeError(f"Cannot toggle a {self.type} value")
        self.data = not self.data

    def assign(self, token: str) -> None:
        """Overwrite a scalar value with a coerced token."""
        if self.is_plural:
            raise TypeError(f"Cannot assign a single token to a {self.type} value")
        self.data = coerce_element(self.type, token)

    def append(self, token: str) -> None:
        """Coerce a token and append it to a list value."""
        if not self.is_plural:
            raise TypeError(f"Cannot append to a {self.type} value")
        self.data.append(coerce_element(self.type, token))

    def copy(self) -> Value:
        """Return an independent copy, list storage included."""
        return Value(self.type, deepcopy(self.data))


def make_value(type_string: str, default: str | None = None) -> Value:
    """
    Build the initial value for a declared type.

    Scalars take the default literal when one is given, otherwise the zero
    value (`False`, `0` or `""`). Plural types always start empty.

    Args:
        type_string (str): One of the `ValueType` names.
        default (str | None): The declared default literal; empty means none.

    Returns:
        Value: The initial value.

    Raises:
        InvalidTypeStringError: If the type name is unknown.
        UnknownDefaultValueError: If a bool default is not 'true' or 'false'.
        IntegerParseError: If a number default is not a base-10 integer.
        ListDefaultNotAllowedError: If a default is declared on a plural type.
    """
    value_type = ValueType(type_string)
    if value_type.is_plural:
        if default:
            raise ListDefaultNotAllowedError(
                f"Type '{value_type}' does not accept a default (got '{default}')"
            )
        return Value(value_type, [])
    if default:
        return Value(value_type, parse_default(value_type, default))
    zero: dict[ValueType, bool | int | str] = {
        ValueType.BOOL: False,
        ValueType.NUMBER: 0,
        ValueType.STRING: "",
    }
    return Value(value_type, zero[value_type])
