# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Compiles spec text or a structured document into a `ProgramSpec`.

Spec text is a series of `{...}` blocks, one per command. Inside a block,
statements are separated by newlines or `;`:

    {
        #main
        #name: demo
        #desc: A demo program

        #arg
        meta: PRINT
        type: string

        #flag
        long: conti
        short: c
        type: bool
        default: false
    }
    {
        #name: init
        #desc: Initialize something
    }

Exactly one block must carry `#main`; every other block is a subcommand.
`parse_spec_text()` turns the text into the same mapping a YAML/TOML document
would hold, and `compile_document()` validates that mapping with the pydantic
models in `cmdspec.config` and builds the registries for every scope.

Functions:
- parse_spec_text: Spec text → structured document.
- compile_document: Structured document → ProgramSpec.
- compile_spec: Spec text → ProgramSpec.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import ValidationError

from cmdspec.config import RawArgument, RawFlag, RawProgram
from cmdspec.exceptions import (
    CommandParseFailedError,
    InvalidFlagNameError,
    ShortFlagNameTooLongError,
    SubcommandConflictedError,
)
from cmdspec.logger import logger
from cmdspec.registry import CommandRegistry
from cmdspec.schema import (
    ONLY_SHORT_SUFFIX,
    ArgumentDef,
    CommandSpec,
    FlagDef,
    ProgramSpec,
)
from cmdspec.value import make_value

_STATEMENT_SEPARATORS = re.compile(r"[;\n\r]")


def _split_blocks(text: str) -> list[str]:
    """Return the bodies of the top-level `{...}` blocks."""
    blocks: list[str] = []
    start: int | None = None
    for index, char in enumerate(text):
        if char == "{":
            if start is not None:
                raise CommandParseFailedError(
                    f"Nested '{{' at offset {index}: blocks cannot be nested"
                )
            start = index + 1
        elif char == "}":
            if start is None:
                raise CommandParseFailedError(f"Unmatched '}}' at offset {index}")
            blocks.append(text[start:index])
            start = None
        elif start is None and not char.isspace():
            raise CommandParseFailedError(
                f"Unexpected {char!r} at offset {index}: "
                "text must be inside a '{...}' block"
            )
    if start is not None:
        raise CommandParseFailedError("Unterminated block: missing '}'")
    return blocks


def _parse_block(body: str) -> tuple[bool, dict[str, Any]]:
    """Parse one block body into `(is_main, command document)`."""
    is_main = False
    command: dict[str, Any] = {"args": [], "flags": []}
    current: dict[str, str] | None = None

    for raw_line in _STATEMENT_SEPARATORS.split(body):
        line = raw_line.strip(" \t")
        if not line:
            continue
        if line.startswith("#"):
            directive = line[1:]
            if directive == "arg":
                current = {}
                command["args"].append(current)
            elif directive == "flag":
                current = {}
                command["flags"].append(current)
            elif directive == "main":
                is_main = True
            else:
                key, separator, value = directive.partition(":")
                key = key.strip(" \t")
                if not separator or key not in ("name", "desc"):
                    raise CommandParseFailedError(
                        "Only `#main`, `#name`, `#desc`, `#arg` and `#flag` are "
                        f"allowed, but got '{line}'"
                    )
                command[key] = value.strip(" \t")
            continue

        key, separator, value = line.partition(":")
        if not separator:
            raise CommandParseFailedError(f"Expected 'key: value' but got '{line}'")
        if current is None:
            raise CommandParseFailedError(
                f"'{line}' must follow an `#arg` or `#flag` directive"
            )
        current[key.strip(" \t")] = value.strip(" \t")

    return is_main, command


def parse_spec_text(text: str) -> dict[str, Any]:
    """
    Convert spec text into a structured document.

    Args:
        text (str): The block-structured spec.

    Returns:
        dict[str, Any]: A mapping with `name`, `desc`, `args`, `flags` and
        `subcmds`, ready for `compile_document()`.

    Raises:
        CommandParseFailedError: If the blocks are malformed, a directive is
            unknown, a key/value line has no `#arg`/`#flag` context, or there is
            not exactly one `#main` block.
    """
    main: dict[str, Any] | None = None
    subcmds: list[dict[str, Any]] = []
    for body in _split_blocks(text):
        is_main, command = _parse_block(body)
        if not is_main:
            subcmds.append(command)
        elif main is not None:
            raise CommandParseFailedError("Two `#main` blocks found")
        else:
            main = command
    if main is None:
        raise CommandParseFailedError("No `#main` block found")
    main["subcmds"] = subcmds
    return main


def _build_argument(raw: RawArgument) -> ArgumentDef:
    return ArgumentDef(
        meta=raw.meta,
        value=make_value(raw.type, raw.default),
        desc=raw.desc,
    )


def _build_flag(raw: RawFlag) -> FlagDef:
    if not raw.long and not raw.short:
        raise InvalidFlagNameError(
            "A flag needs a long name, a short name, or both"
        )
    if raw.long and ONLY_SHORT_SUFFIX in raw.long:
        raise InvalidFlagNameError(
            f"Long flag name '{raw.long}' must not contain '{ONLY_SHORT_SUFFIX}'"
        )
    if raw.short and len(raw.short) > 1:
        raise ShortFlagNameTooLongError(
            f"Short flag name '{raw.short}' must be a single character"
        )
    return FlagDef(
        long=raw.long,
        short=raw.short,
        value=make_value(raw.type, raw.default),
        desc=raw.desc,
    )


def _build_command(
    name: str,
    desc: str | None,
    raw_args: list[RawArgument],
    raw_flags: list[RawFlag],
    is_main: bool = False,
) -> CommandSpec:
    registry = CommandRegistry(
        flags=[_build_flag(raw_flag) for raw_flag in raw_flags],
        arguments=[_build_argument(raw_arg) for raw_arg in raw_args],
    )
    return CommandSpec(name=name, registry=registry, desc=desc, is_main=is_main)


def compile_document(document: Mapping[str, Any]) -> ProgramSpec:
    """
    Compile a structured document into a `ProgramSpec`.

    Args:
        document (Mapping[str, Any]): The top-level mapping describes the main
            command; `subcmds` lists the subcommands.

    Returns:
        ProgramSpec: The validated, immutable schema.

    Raises:
        SpecError: If the document is invalid. See `cmdspec.exceptions`.
    """
    if not isinstance(document, Mapping):
        raise CommandParseFailedError(
            f"A spec document must be a mapping, got {type(document).__name__}"
        )
    try:
        raw = RawProgram.model_validate(dict(document))
    except ValidationError as error:
        raise CommandParseFailedError(f"Invalid spec document: {error}") from error

    main = _build_command(raw.name, raw.desc, raw.args, raw.flags, is_main=True)
    subcommands: dict[str, CommandSpec] = {}
    for raw_subcmd in raw.subcmds:
        if raw_subcmd.name in subcommands:
            raise SubcommandConflictedError(
                f"Subcommand '{raw_subcmd.name}' is already defined"
            )
        subcommands[raw_subcmd.name] = _build_command(
            raw_subcmd.name, raw_subcmd.desc, raw_subcmd.args, raw_subcmd.flags
        )

    logger.debug(
        "[%s] Compiled spec: %d argument(s), %d flag(s), %d subcommand(s)",
        main.name,
        len(main.arguments),
        len(main.flags),
        len(subcommands),
    )
    return ProgramSpec(main=main, subcommands=MappingProxyType(subcommands))


def compile_spec(text: str) -> ProgramSpec:
    """Compile block-structured spec text into a `ProgramSpec`."""
    return compile_document(parse_spec_text(text))
