# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the outcome of one `SpecArgumentParser.parse_args()` call.

The result owns the values filled during parsing (copies of the schema
defaults), the captured argument vector and the rendered help text. Values are
only available for the active scope: the main command, or the subcommand named
by the first token.

Example:
    result = parser.parse_args(["hello", "-c"])
    result.arg("PRINT")   # "hello"
    result.flag("conti")  # True
    result.is_help        # False
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rich.console import Console

from cmdspec.console import console as default_console
from cmdspec.schema import ProgramSpec
from cmdspec.value import Value


@dataclass
class ParseResult:
    """
    Parsed values for the active scope.

    Attributes:
        program (ProgramSpec): The schema the arguments were parsed against.
        subcommand (str | None): The active subcommand, or None for the main command.
        args (dict[str, Value]): Positional values by metavariable.
        flags (dict[str, Value]): Flag values by effective key.
        is_help (bool): True if `-h`/`--help` appeared anywhere.
        help_message (str): Help text for the active scope.
        argv (tuple[str, ...]): The parsed argument vector.
    """

    program: ProgramSpec = field(repr=False)
    subcommand: str | None
    args: dict[str, Value]
    flags: dict[str, Value]
    is_help: bool = False
    help_message: str = field(default="", repr=False)
    argv: tuple[str, ...] = ()

    def arg(self, meta: str) -> Any:
        """Return the value of a positional argument by metavariable."""
        return self.args[meta].data

    def flag(self, key: str) -> Any:
        """Return the value of a flag by effective key (long name or `<short>!`)."""
        return self.flags[key].data

    def is_subcommand_active(self, name: str | None) -> bool:
        """
        Check which scope is active.

        `None` matches when no subcommand was selected; a name matches when
        that subcommand was selected.
        """
        return self.subcommand == name

    def as_dict(self) -> dict[str, Any]:
        """Return a plain-data snapshot of the result."""
        return {
            "subcommand": self.subcommand,
            "args": {meta: value.data for meta, value in self.args.items()},
            "flags": {key: value.data for key, value in self.flags.items()},
            "is_help": self.is_help,
        }

    def print_help(self, console: Console | None = None) -> None:
        """Print the pre-rendered help text."""
        (console or default_console).print(
            self.help_message, end="", markup=False, highlight=False
        )
