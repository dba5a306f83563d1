"""demo.py

Run with e.g.:
    python examples/demo.py init hello --foo a b -c --bar -b 42
"""
import sys
from pathlib import Path

from cmdspec import ParseError, SpecArgumentParser, compile_spec
from cmdspec.console import console

SPEC_PATH = Path(__file__).parent / "command.cmdspec"


def main() -> int:
    parser = SpecArgumentParser(compile_spec(SPEC_PATH.read_text(encoding="UTF-8")))
    try:
        result = parser.parse_args(sys.argv[1:])
    except ParseError as error:
        console.print(f"[bold red]error:[/] {error}")
        return 1

    if result.is_help:
        result.print_help()
        return 0

    if not result.is_subcommand_active("init"):
        console.print("Other subcommand was found. Quitting...")
        return 0

    console.print(f"|{result.arg('PRINT')}|", markup=False)
    for string in result.flag("foo"):
        console.print(f"<{string}>", markup=False)
    if result.flag("c!"):
        console.print("flag -c sets to true")
    if not result.flag("bar"):
        console.print("flag --bar sets to false")
    console.print(f"flag --baz sets to {result.flag('baz')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
