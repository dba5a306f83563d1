# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `SpecArgumentParser`, the runtime parsing engine that
fills a compiled `ProgramSpec` from an argument vector.

Parsing is a small state machine over tokens:

- `SCANNING_MAIN`: tokens resolve against the main command.
- `SCANNING_SUBCOMMAND`: entered when the first token is a positional naming a
  declared subcommand; all later tokens resolve against that subcommand.
- `DONE` / `FAILED`: terminal states.

Each token is classified by `cmdspec.tokens.classify()`:

- Positional tokens fill the next unfilled positional slot of the active scope.
- `--name` resolves a flag by long name (`--` alone is ignored).
- `-abc` expands a cluster of short flags; only the last one may take a value.

Value assignment is shared by flags and positionals:

- bool flags toggle and never consume a token,
- number/string values take exactly the next token, which must be positional,
- list values take every following positional token up to the next flag.

Parsing stops at the first error. The raised `ParseError` carries the help
text of the scope that was active.

Example Usage:
    program = compile_spec(SPEC_TEXT)
    parser = SpecArgumentParser(program)
    result = parser.parse_args(["hello", "-c"])
    if result.is_help:
        result.print_help()
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Sequence

from rich.console import Console

from cmdspec.compiler import compile_document, compile_spec
from cmdspec.console import console
from cmdspec.exceptions import (
    ArgumentOverflowedError,
    CannotFindFlagError,
    FlagValueNotFoundError,
    InvalidMultipleShortFlagsError,
    InvalidSubcommandError,
    ParseError,
)
from cmdspec.help import HelpFormatter
from cmdspec.logger import logger
from cmdspec.result import ParseResult
from cmdspec.schema import CommandSpec, FlagDef, ProgramSpec
from cmdspec.tokens import TokenKind, classify
from cmdspec.value import Value


class ParserState(Enum):
    SCANNING_MAIN = "scanning_main"
    SCANNING_SUBCOMMAND = "scanning_subcommand"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RuntimeState:
    """Mutable state owned by a single `parse_args()` call."""

    command: CommandSpec
    phase: ParserState = ParserState.SCANNING_MAIN
    subcommand: str | None = None
    cursors: dict[str | None, int] = field(default_factory=dict)
    is_help: bool = False
    args: dict[str, Value] = field(default_factory=dict)
    flags: dict[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._load_values()

    def _load_values(self) -> None:
        self.args = {
            argument.meta: argument.value.copy() for argument in self.command.arguments
        }
        self.flags = {key: flag.value.copy() for key, flag in self.command.flags.items()}
        self.cursors.setdefault(self.subcommand, 0)

    def enter_subcommand(self, name: str, command: CommandSpec) -> None:
        """Switch the active scope to a subcommand."""
        self.phase = ParserState.SCANNING_SUBCOMMAND
        self.subcommand = name
        self.command = command
        self._load_values()

    def next_slot(self) -> int:
        """Return the current positional cursor and advance it."""
        slot = self.cursors[self.subcommand]
        self.cursors[self.subcommand] = slot + 1
        return slot


class SpecArgumentParser:
    """
    Parses argument vectors against a compiled `ProgramSpec`.

    The schema is shared and never modified; every `parse_args()` call works
    on fresh copies of the default values, so one parser can be reused.

    Args:
        program (ProgramSpec): The compiled schema.
    """

    def __init__(self, program: ProgramSpec) -> None:
        self.program: ProgramSpec = program
        self.formatter: HelpFormatter = HelpFormatter(program)
        self.console: Console = console

    @classmethod
    def from_text(cls, text: str) -> SpecArgumentParser:
        """Compile block-structured spec text and return a parser for it."""
        return cls(compile_spec(text))

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> SpecArgumentParser:
        """Compile a structured spec document and return a parser for it."""
        return cls(compile_document(document))

    def _require_positional(self, tokens: list[str], index: int, flag: FlagDef) -> str:
        if index >= len(tokens) or classify(tokens[index]).kind != TokenKind.POSITIONAL:
            raise FlagValueNotFoundError(
                f"Flag '{flag.get_flags_text()}' requires a {flag.type} value"
            )
        return tokens[index]

    def _collect_list(self, value: Value, tokens: list[str], start: int) -> int:
        index = start
        while index < len(tokens) and classify(tokens[index]).is_positional:
            value.append(tokens[index])
            index += 1
        return index

    def _assign_flag(
        self, flag: FlagDef, tokens: list[str], i: int, state: RuntimeState
    ) -> int:
        """Apply a flag found at `tokens[i]` and return the next index to scan."""
        value = state.flags[flag.key]
        if value.is_bool:
            value.toggle()
            return i + 1
        if value.is_plural:
            return self._collect_list(value, tokens, i + 1)
        value.assign(self._require_positional(tokens, i + 1, flag))
        return i + 2

    def _handle_positional(self, tokens: list[str], i: int, state: RuntimeState) -> int:
        arguments = state.command.arguments
        slot = state.next_slot()
        if slot >= len(arguments):
            raise ArgumentOverflowedError(
                f"Unexpected positional argument '{tokens[i]}': "
                f"'{state.command.name}' takes {len(arguments)}"
            )
        value = state.args[arguments[slot].meta]
        if value.is_plural:
            return self._collect_list(value, tokens, i)
        value.assign(tokens[i])
        return i + 1

    def _handle_long(
        self, name: str, tokens: list[str], i: int, state: RuntimeState
    ) -> int:
        if not name:
            return i + 1
        flag = state.command.registry.resolve_long(name)
        if flag is None:
            raise CannotFindFlagError(
                f"Unrecognized option '--{name}'. Use --help to see available options."
            )
        if flag.long == "help":
            state.is_help = True
        return self._assign_flag(flag, tokens, i, state)

    def _handle_short(
        self, cluster: str, tokens: list[str], i: int, state: RuntimeState
    ) -> int:
        if not cluster:
            return i + 1
        resolved: list[FlagDef] = []
        for char in cluster:
            if char == "h":
                state.is_help = True
            flag = state.command.registry.resolve_short(char)
            if flag is None:
                raise CannotFindFlagError(
                    f"Unrecognized option '-{char}'. Use --help to see available options."
                )
            resolved.append(flag)

        for flag in resolved[:-1]:
            if not flag.value.is_bool:
                raise InvalidMultipleShortFlagsError(
                    f"Flag '-{flag.short}' takes a value and must be last in '-{cluster}'"
                )

        next_index = i + 1
        for flag in resolved:
            next_index = self._assign_flag(flag, tokens, i, state)
        return next_index

    def _enter_subcommand(self, name: str, state: RuntimeState) -> None:
        command = self.program.subcommands.get(name)
        if command is None:
            choices = ", ".join(self.program.subcommands)
            raise InvalidSubcommandError(
                f"Unknown subcommand '{name}'. Expected one of: {choices}"
            )
        state.enter_subcommand(name, command)
        logger.debug("[%s] Selected subcommand '%s'", self.program.name, name)

    def _handle_token(self, tokens: list[str], i: int, state: RuntimeState) -> int:
        token = classify(tokens[i])
        if token.kind == TokenKind.LONG:
            return self._handle_long(token.text, tokens, i, state)
        if token.kind == TokenKind.SHORT:
            return self._handle_short(token.text, tokens, i, state)
        if (
            i == 0
            and state.phase == ParserState.SCANNING_MAIN
            and self.program.has_subcommands
        ):
            self._enter_subcommand(token.text, state)
            return i + 1
        return self._handle_positional(tokens, i, state)

    def parse_args(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Parse an argument vector.

        Args:
            args (Sequence[str] | None): The arguments, without the program name.

        Returns:
            ParseResult: Values for the active scope, the help flag and help text.

        Raises:
            ParseError: On the first token that does not fit the schema. The
                error's `help_message` holds the help text for the active scope.
        """
        tokens = list(args or [])
        state = RuntimeState(command=self.program.main)

        i = 0
        try:
            while i < len(tokens):
                i = self._handle_token(tokens, i, state)
        except ParseError as error:
            state.phase = ParserState.FAILED
            error.help_message = self.format_help(state.subcommand)
            logger.debug("[%s] Parsing failed: %s", self.program.name, error)
            raise
        state.phase = ParserState.DONE

        logger.debug(
            "[%s] Parsed %d token(s) for scope '%s'",
            self.program.name,
            len(tokens),
            state.subcommand or state.command.name,
        )
        return ParseResult(
            program=self.program,
            subcommand=state.subcommand,
            args=state.args,
            flags=state.flags,
            is_help=state.is_help,
            help_message=self.format_help(state.subcommand),
            argv=tuple(tokens),
        )

    def format_help(self, subcommand: str | None = None) -> str:
        """Return the help text for the main command or a subcommand."""
        return self.formatter.format_help(subcommand)

    def render_help(self, subcommand: str | None = None) -> None:
        """Print the help text for the main command or a subcommand."""
        self.formatter.render_help(self.console, subcommand)

    def __str__(self) -> str:
        return (
            f"SpecArgumentParser(program={self.program.name!r}, "
            f"subcommands={len(self.program.subcommands)})"
        )

    def __repr__(self) -> str:
        return str(self)
