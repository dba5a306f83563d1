import pytest

from cmdspec import SpecArgumentParser
from cmdspec.exceptions import (
    ArgumentOverflowedError,
    CannotFindFlagError,
    InvalidSubcommandError,
)


@pytest.fixture
def parser(program):
    return SpecArgumentParser(program)


def test_first_token_selects_subcommand(parser):
    result = parser.parse_args(
        ["init", "target", "--foo", "a", "b", "-q", "--bar", "-b", "5"]
    )
    assert result.subcommand == "init"
    assert result.is_subcommand_active("init")
    assert not result.is_subcommand_active(None)
    assert result.arg("TARGET") == "target"
    assert result.flag("foo") == ["a", "b"]
    assert result.flag("q!") is True
    assert result.flag("bar") is False
    assert result.flag("baz") == 5


def test_subcommand_values_only(parser):
    result = parser.parse_args(["init"])
    assert set(result.args) == {"TARGET"}
    assert set(result.flags) == {"help", "foo", "q!", "bar", "baz"}
    assert result.flag("bar") is True


def test_unknown_subcommand(parser, program):
    with pytest.raises(InvalidSubcommandError) as exc_info:
        parser.parse_args(["deploy"])
    assert "deploy" in str(exc_info.value)
    assert exc_info.value.help_message == parser.format_help()
    assert "Subcommands:" in exc_info.value.help_message


def test_main_positional_after_flag(parser):
    result = parser.parse_args(["-c", "hello"])
    assert result.subcommand is None
    assert result.is_subcommand_active(None)
    assert result.arg("PRINT") == "hello"
    assert result.flag("conti") is True


def test_subcommand_name_is_only_special_first(parser):
    result = parser.parse_args(["--conti", "init"])
    assert result.subcommand is None
    assert result.arg("PRINT") == "init"


def test_main_flags_are_not_visible_in_subcommand(parser):
    with pytest.raises(CannotFindFlagError) as exc_info:
        parser.parse_args(["init", "--conti"])
    assert exc_info.value.help_message == parser.format_help("init")
    assert exc_info.value.help_message.startswith("Initialize something\n")


def test_subcommand_overflow(parser):
    with pytest.raises(ArgumentOverflowedError):
        parser.parse_args(["init", "one", "two"])


def test_subcommand_help(parser):
    result = parser.parse_args(["init", "-h"])
    assert result.is_help
    assert result.help_message == parser.format_help("init")
    assert "Usage: demo init [flags] TARGET" in result.help_message


def test_main_help(parser):
    result = parser.parse_args(["--help"])
    assert result.is_help
    assert result.subcommand is None
    assert "Usage: demo [subcommands] [flags] PRINT" in result.help_message


def test_subcommand_without_main_arguments():
    parser = SpecArgumentParser.from_text("{ #main\n#name: git }\n{ #name: status }")
    assert parser.parse_args(["status"]).subcommand == "status"
    with pytest.raises(InvalidSubcommandError):
        parser.parse_args(["stash"])
