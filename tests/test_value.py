import pytest

from cmdspec.exceptions import (
    IntegerParseError,
    InvalidTypeStringError,
    InvalidValueError,
    ListDefaultNotAllowedError,
    ParseError,
    SpecError,
    UnknownDefaultValueError,
)
from cmdspec.value import Value, ValueType, is_truthy, make_value, parse_number


@pytest.mark.parametrize(
    "token, expected",
    [
        ("true", True),
        ("TRUE", True),
        ("t", True),
        ("T", True),
        ("false", False),
        ("False", False),
        ("f", False),
        ("F", False),
    ],
)
def test_is_truthy(token, expected):
    assert is_truthy(token) is expected


@pytest.mark.parametrize("token", ["yes", "no", "1", "0", "", "tru", "on"])
def test_is_truthy_rejects_other_strings(token):
    with pytest.raises(InvalidValueError):
        is_truthy(token)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+7", 7),
        ("010", 10),
        ("0x1F", 31),
        ("0X1f", 31),
        ("-0x10", -16),
        ("0o17", 15),
        ("0b101", 5),
        ("1_000", 1000),
        ("0xff_ff", 65535),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
    ],
)
def test_parse_number(token, expected):
    assert parse_number(token) == expected


@pytest.mark.parametrize(
    "token",
    [
        "",
        "abc",
        "12abc",
        "0x",
        "--5",
        "_1",
        "1__0",
        " 5",
        "9223372036854775808",
        "1.5",
        "\u0661\u0662",
        "\uff11\uff12",
        "0x\u0661",
    ],
)
def test_parse_number_invalid(token):
    with pytest.raises(IntegerParseError):
        parse_number(token)


def test_parse_number_without_auto_radix():
    assert parse_number("010", auto_radix=False) == 10
    with pytest.raises(IntegerParseError):
        parse_number("0x10", auto_radix=False)


def test_integer_parse_error_is_both_families():
    with pytest.raises(SpecError):
        parse_number("nope")
    with pytest.raises(ParseError):
        parse_number("nope")
    with pytest.raises(ValueError):
        parse_number("nope")


def test_value_type_lookup():
    assert ValueType("numbers") is ValueType.NUMBERS
    assert ValueType.NUMBERS.is_plural
    assert not ValueType.NUMBER.is_plural
    assert ValueType.BOOLS.element_type is ValueType.BOOL
    assert ValueType.STRING.element_type is ValueType.STRING
    assert str(ValueType.STRINGS) == "strings"
    assert len(ValueType.choices()) == 6


@pytest.mark.parametrize("type_string", ["float", "", "Bool", "list"])
def test_value_type_invalid(type_string):
    with pytest.raises(InvalidTypeStringError) as exc_info:
        ValueType(type_string)
    assert "bool, number, string, bools, numbers, strings" in str(exc_info.value)


@pytest.mark.parametrize(
    "type_string, default, expected",
    [
        ("bool", None, False),
        ("bool", "true", True),
        ("bool", "false", False),
        ("number", None, 0),
        ("number", "", 0),
        ("number", "010", 10),
        ("number", "-3", -3),
        ("string", None, ""),
        ("string", "hello", "hello"),
        ("bools", None, []),
        ("numbers", "", []),
        ("strings", None, []),
    ],
)
def test_make_value(type_string, default, expected):
    value = make_value(type_string, default)
    assert value.type is ValueType(type_string)
    assert value.data == expected


def test_make_value_invalid_defaults():
    with pytest.raises(UnknownDefaultValueError):
        make_value("bool", "yes")
    with pytest.raises(UnknownDefaultValueError):
        make_value("bool", "True")
    with pytest.raises(IntegerParseError):
        make_value("number", "0x10")
    with pytest.raises(IntegerParseError):
        make_value("number", "\uff11\uff12")
    with pytest.raises(ListDefaultNotAllowedError):
        make_value("strings", "a")
    with pytest.raises(InvalidTypeStringError):
        make_value("text")


def test_value_toggle():
    value = Value(ValueType.BOOL, False)
    value.toggle()
    assert value.data is True
    value.toggle()
    assert value.data is False

    with pytest.raises(TypeError):
        Value(ValueType.STRING, "").toggle()


def test_value_assign_coerces():
    number = Value(ValueType.NUMBER, 0)
    number.assign("0b11")
    assert number.data == 3

    flag = Value(ValueType.BOOL, False)
    flag.assign("T")
    assert flag.data is True

    with pytest.raises(TypeError):
        Value(ValueType.STRINGS, []).assign("x")


def test_value_append():
    numbers = Value(ValueType.NUMBERS, [])
    numbers.append("1")
    numbers.append("0x10")
    assert numbers.data == [1, 16]

    with pytest.raises(InvalidValueError):
        Value(ValueType.BOOLS, []).append("maybe")
    with pytest.raises(TypeError):
        Value(ValueType.NUMBER, 0).append("1")


def test_value_copy_is_independent():
    original = Value(ValueType.STRINGS, ["a"])
    duplicate = original.copy()
    duplicate.append("b")
    assert original.data == ["a"]
    assert duplicate.data == ["a", "b"]
    assert duplicate.type is ValueType.STRINGS
