"""
Cmdspec CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from cmdspec.console import console
from cmdspec.exceptions import ParseError, SpecError
from cmdspec.loader import find_spec_file, loader
from cmdspec.parser import SpecArgumentParser
from cmdspec.result import ParseResult
from cmdspec.utils import setup_logging
from cmdspec.version import __version__


def get_root_parser(prog: str = "cmdspec") -> ArgumentParser:
    """Construct the ArgumentParser for the cmdspec inspector."""
    parser = ArgumentParser(
        prog=prog,
        description="Parse arguments against a cmdspec spec and show the result.",
        epilog=(
            "Without --spec, the current directory is searched for cmdspec.yaml, "
            "cmdspec.toml, cmdspec.json or command.cmdspec."
        ),
    )
    parser.add_argument(
        "-s",
        "--spec",
        help="Path to a spec file (.cmdspec, .txt, .yaml, .yml, .toml or .json).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default="cli",
        help="Console logging format.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "arguments",
        nargs=REMAINDER,
        help="Arguments to parse against the spec, after '--'.",
    )
    return parser


def build_result_table(result: ParseResult) -> Table:
    """Render a parse result as a rich table."""
    scope = result.subcommand or result.program.name or "main"
    table = Table(title=f"[bold]{escape(scope)}[/bold]", show_lines=False)
    table.add_column("Kind", style="dim")
    table.add_column("Name")
    table.add_column("Type", style="dim")
    table.add_column("Value")
    for meta, value in result.args.items():
        table.add_row("arg", escape(meta), str(value.type), escape(repr(value.data)))
    for key, value in result.flags.items():
        table.add_row("flag", escape(key), str(value.type), escape(repr(value.data)))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    namespace = get_root_parser().parse_args(argv)
    setup_logging(
        mode=namespace.log_mode,
        console_log_level=logging.DEBUG if namespace.verbose else logging.WARNING,
    )

    spec_path = Path(namespace.spec) if namespace.spec else find_spec_file()
    if spec_path is None:
        console.print(
            "[bold red]No spec file found.[/] Pass one with --spec or add "
            "command.cmdspec to the current directory."
        )
        return 1
    try:
        program = loader(spec_path)
    except (SpecError, OSError, ValueError) as error:
        console.print(
            f"[bold red]Invalid spec '{escape(str(spec_path))}':[/] {escape(str(error))}"
        )
        return 1

    arguments = list(namespace.arguments)
    if arguments[:1] == ["--"]:
        arguments = arguments[1:]

    parser = SpecArgumentParser(program)
    try:
        result = parser.parse_args(arguments)
    except ParseError as error:
        console.print(f"[bold red]error:[/] {escape(str(error))}\n")
        console.print(Text(error.help_message), end="")
        return 1

    if result.is_help:
        result.print_help()
        return 0
    console.print(build_result_table(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
