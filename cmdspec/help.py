# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Plain-text help rendering for a compiled program.

The help text for a scope looks like this:

    A demo program

    Usage: demo [subcommands] [flags] PRINT FILES...

    Arguments:
        PRINT          Text to print
        FILES...       Files to read

    Options:
        -h, --help     Print this help message
        -c, --conti    Continue on error
            --names... Names to greet

    Subcommands:
        init           Initialize something

Every description starts at the same column: the widest metavariable, long
flag name or (top level only) subcommand name, with flag and subcommand
names counted as at least 4 characters, plus 14.
"""
from __future__ import annotations

from rich.console import Console
from rich.text import Text

from cmdspec.schema import ArgumentDef, CommandSpec, FlagDef, ProgramSpec

INDENT = "    "
MIN_NAME_WIDTH = 4
DESC_OFFSET = 14


class HelpFormatter:
    """Renders help text for the main command or one of its subcommands."""

    def __init__(self, program: ProgramSpec) -> None:
        self.program: ProgramSpec = program

    def _get_width(self, command: CommandSpec, is_top_level: bool) -> int:
        widths = [len(argument.meta) for argument in command.arguments]
        widths.extend(
            max(len(flag.long or ""), MIN_NAME_WIDTH) for flag in command.flags.values()
        )
        if is_top_level:
            widths.extend(
                max(len(name), MIN_NAME_WIDTH) for name in self.program.subcommands
            )
        return max(widths, default=0)

    def get_usage(self, subcommand: str | None = None) -> str:
        """Return the usage line for a scope."""
        command = self.program.get_command(subcommand)
        parts = ["Usage:", self.program.name]
        if subcommand is not None:
            parts.append(subcommand)
        elif self.program.has_subcommands:
            parts.append("[subcommands]")
        parts.append("[flags]")
        parts.extend(argument.get_usage_text() for argument in command.arguments)
        return " ".join(parts)

    @staticmethod
    def _format_row(left: str, desc: str | None, column: int) -> str:
        return f"{left:<{column}}{desc or ''}".rstrip()

    def _format_argument(self, argument: ArgumentDef, column: int) -> str:
        return self._format_row(
            f"{INDENT}{argument.get_usage_text()}", argument.desc, column
        )

    def _format_flag(self, flag: FlagDef, column: int) -> str:
        short = f"-{flag.short}," if flag.short else "   "
        long = f" --{flag.long}" if flag.long else "   "
        plural = "..." if flag.value.is_plural else ""
        return self._format_row(f"{INDENT}{short}{long}{plural}", flag.desc, column)

    def format_help(self, subcommand: str | None = None) -> str:
        """
        Render the help text for a scope.

        Args:
            subcommand (str | None): The active subcommand, or None for the
                main command.

        Returns:
            str: The help text, ending with a newline.
        """
        command = self.program.get_command(subcommand)
        is_top_level = subcommand is None
        column = self._get_width(command, is_top_level) + DESC_OFFSET

        sections: list[list[str]] = []
        desc = command.desc or self.program.desc
        if desc:
            sections.append([desc])
        sections.append([self.get_usage(subcommand)])
        sections.append(
            ["Arguments:"]
            + [self._format_argument(argument, column) for argument in command.arguments]
        )
        sections.append(
            ["Options:"]
            + [self._format_flag(flag, column) for flag in command.flags.values()]
        )
        if is_top_level and self.program.has_subcommands:
            sections.append(
                ["Subcommands:"]
                + [
                    self._format_row(f"{INDENT}{name}", subcmd.desc, column)
                    for name, subcmd in self.program.subcommands.items()
                ]
            )
        return "\n\n".join("\n".join(lines) for lines in sections) + "\n"

    def render_help(self, console: Console, subcommand: str | None = None) -> None:
        """Print the help text for a scope to a rich console."""
        console.print(Text(self.format_help(subcommand)), end="")
