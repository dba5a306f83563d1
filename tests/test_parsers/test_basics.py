import pytest

from cmdspec import ParseError, SpecArgumentParser
from cmdspec.exceptions import (
    ArgumentOverflowedError,
    CannotFindFlagError,
    FlagValueNotFoundError,
    IntegerParseError,
    InvalidValueError,
)

NUMBERS_BODY = """
#arg
meta: COUNT
type: number
#flag
long: level
short: l
type: number
default: 3
#flag
long: name
type: string
"""


def test_empty_argv_keeps_defaults(simple_parser):
    result = simple_parser.parse_args([])
    assert result.arg("PRINT") == ""
    assert result.flag("conti") is False
    assert result.is_help is False
    assert result.subcommand is None
    assert result.argv == ()


def test_none_argv(simple_parser):
    assert simple_parser.parse_args(None).arg("PRINT") == ""


def test_positional_and_flag(simple_parser):
    result = simple_parser.parse_args(["hello", "-c"])
    assert result.arg("PRINT") == "hello"
    assert result.flag("conti") is True
    assert result.argv == ("hello", "-c")


def test_long_flag_before_positional(simple_parser):
    result = simple_parser.parse_args(["--conti", "hello"])
    assert result.arg("PRINT") == "hello"
    assert result.flag("conti") is True


def test_double_dash_and_single_dash_are_ignored(simple_parser):
    result = simple_parser.parse_args(["--", "-", "hello"])
    assert result.arg("PRINT") == "hello"
    assert result.flag("conti") is False


def test_argument_overflow(simple_parser):
    with pytest.raises(ArgumentOverflowedError) as exc_info:
        simple_parser.parse_args(["one", "two"])
    assert "two" in str(exc_info.value)


@pytest.mark.parametrize("argv", [["--nope"], ["-x"], ["-cx"], ["--c"]])
def test_unknown_flags(simple_parser, argv):
    with pytest.raises(CannotFindFlagError):
        simple_parser.parse_args(argv)


def test_short_only_key_is_not_a_long_name(make_parser):
    parser = make_parser("#flag\nshort: q\ntype: bool")
    assert parser.parse_args(["-q"]).flag("q!") is True
    with pytest.raises(CannotFindFlagError):
        parser.parse_args(["--q!"])
    with pytest.raises(CannotFindFlagError):
        parser.parse_args(["--q"])


def test_number_values(make_parser):
    parser = make_parser(NUMBERS_BODY)
    result = parser.parse_args(["0x10", "--level", "010", "--name", "bob"])
    assert result.arg("COUNT") == 16
    assert result.flag("level") == 10
    assert result.flag("name") == "bob"


def test_number_default(make_parser):
    assert make_parser(NUMBERS_BODY).parse_args([]).flag("level") == 3


def test_last_value_wins(make_parser):
    result = make_parser(NUMBERS_BODY).parse_args(["-l", "1", "-l", "2"])
    assert result.flag("level") == 2


def test_invalid_number(make_parser):
    with pytest.raises(IntegerParseError) as exc_info:
        make_parser(NUMBERS_BODY).parse_args(["--level", "many"])
    assert isinstance(exc_info.value, ParseError)
    assert "Usage: prog" in exc_info.value.help_message


@pytest.mark.parametrize(
    "argv",
    [
        ["--level"],
        ["--level", "--name", "x"],
        ["--level", "-5"],
        ["-l", "--"],
        ["--name"],
    ],
)
def test_flag_value_not_found(make_parser, argv):
    with pytest.raises(FlagValueNotFoundError):
        make_parser(NUMBERS_BODY).parse_args(argv)


def test_value_may_look_like_anything_positional(make_parser):
    result = make_parser(NUMBERS_BODY).parse_args(["--name", "a-b=c"])
    assert result.flag("name") == "a-b=c"


def test_bool_positional_uses_truthy_grammar(make_parser):
    parser = make_parser("#arg\nmeta: ENABLED\ntype: bool")
    assert parser.parse_args(["T"]).arg("ENABLED") is True
    assert parser.parse_args(["false"]).arg("ENABLED") is False
    with pytest.raises(InvalidValueError):
        parser.parse_args(["yes"])


def test_positionals_fill_in_order_around_flags(make_parser):
    parser = make_parser(
        "#arg\nmeta: SRC\ntype: string\n#arg\nmeta: DST\ntype: string\n"
        "#flag\nlong: force\nshort: f\ntype: bool"
    )
    result = parser.parse_args(["a", "-f", "b"])
    assert result.arg("SRC") == "a"
    assert result.arg("DST") == "b"
    assert result.flag("force") is True


def test_parse_error_carries_help(simple_parser):
    with pytest.raises(ParseError) as exc_info:
        simple_parser.parse_args(["--nope"])
    assert exc_info.value.help_message == simple_parser.format_help()


def test_parser_is_reusable(make_parser):
    parser = make_parser("#flag\nlong: tags\ntype: strings\n#flag\nlong: on\ntype: bool")
    first = parser.parse_args(["--tags", "a", "b", "--on"])
    second = parser.parse_args([])
    assert first.flag("tags") == ["a", "b"]
    assert first.flag("on") is True
    assert second.flag("tags") == []
    assert second.flag("on") is False
    assert parser.program.main.flags["tags"].value.data == []


def test_parser_from_document():
    parser = SpecArgumentParser.from_document(
        {"name": "doc", "flags": [{"long": "x", "type": "bool"}]}
    )
    assert parser.parse_args(["--x"]).flag("x") is True
    assert str(parser) == "SpecArgumentParser(program='doc', subcommands=0)"


@pytest.mark.parametrize("token", ["١٢", "１２"])
def test_non_ascii_digits_are_not_numbers(make_parser, token):
    with pytest.raises(IntegerParseError):
        make_parser(NUMBERS_BODY).parse_args(["--level", token])
    with pytest.raises(IntegerParseError):
        make_parser(NUMBERS_BODY).parse_args([token])
