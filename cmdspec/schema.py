# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the immutable schema produced by the spec compiler.

- `ArgumentDef`: one positional argument, addressed by its metavariable.
- `FlagDef`: one flag with a long name, a short character, or both.
- `CommandSpec`: a command scope (the main command or one subcommand) and the
  registry holding its lookup tables.
- `ProgramSpec`: exactly one main command plus its named subcommands.

All records are frozen. The `Value` stored in a definition is the default;
`SpecArgumentParser` works on copies and never mutates the schema. `Value` is
mutable, so definitions hash on their names and type only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from cmdspec.value import Value, ValueType

if TYPE_CHECKING:
    from cmdspec.registry import CommandRegistry

ONLY_SHORT_SUFFIX = "!"


def make_flag_key(long: str | None, short: str | None) -> str:
    """
    Return the effective key of a flag.

    The long name is used when present. A short-only flag is keyed by its
    character followed by `!`, e.g. `c!`.
    """
    if long:
        return long
    assert short, "a flag needs a long or a short name"
    return f"{short}{ONLY_SHORT_SUFFIX}"


@dataclass(frozen=True)
class ArgumentDef:
    """
    Represents a positional argument.

    Attributes:
        meta (str): Metavariable, used as the lookup key and in help output.
        value (Value): Default value.
        desc (str | None): Help text.
    """

    meta: str
    value: Value
    desc: str | None = None

    @property
    def type(self) -> ValueType:
        return self.value.type

    def get_usage_text(self) -> str:
        """Return the metavariable as shown in the usage line."""
        return f"{self.meta}..." if self.value.is_plural else self.meta

    def __hash__(self) -> int:
        return hash((self.meta, self.type))


@dataclass(frozen=True)
class FlagDef:
    """
    Represents a flag.

    Attributes:
        long (str | None): Long name without the leading `--`.
        short (str | None): Single short character without the leading `-`.
        value (Value): Default value.
        desc (str | None): Help text.
    """

    long: str | None
    short: str | None
    value: Value
    desc: str | None = None

    @property
    def key(self) -> str:
        return make_flag_key(self.long, self.short)

    @property
    def type(self) -> ValueType:
        return self.value.type

    def get_flags_text(self) -> str:
        """Return the flag spellings, e.g. `-c, --conti`."""
        spellings = []
        if self.short:
            spellings.append(f"-{self.short}")
        if self.long:
            spellings.append(f"--{self.long}")
        return ", ".join(spellings)

    def __hash__(self) -> int:
        return hash((self.long, self.short, self.type))


@dataclass(frozen=True)
class CommandSpec:
    """
    A compiled command scope.

    Attributes:
        name (str): Command name (the program name for the main command).
        registry (CommandRegistry): Flag map, short table and positional list.
        desc (str | None): Description shown at the top of the help text.
        is_main (bool): True for the main command.
    """

    name: str
    registry: CommandRegistry = field(repr=False)
    desc: str | None = None
    is_main: bool = False

    @property
    def arguments(self) -> tuple[ArgumentDef, ...]:
        return self.registry.arguments

    @property
    def flags(self) -> Mapping[str, FlagDef]:
        return self.registry.flags

    def __str__(self) -> str:
        return (
            f"CommandSpec(name={self.name!r}, args={len(self.arguments)}, "
            f"flags={len(self.flags)})"
        )


@dataclass(frozen=True)
class ProgramSpec:
    """
    A compiled program: one main command and its subcommands.

    Attributes:
        main (CommandSpec): The main command.
        subcommands (Mapping[str, CommandSpec]): Subcommands by name, in
            declaration order.
    """

    main: CommandSpec
    subcommands: Mapping[str, CommandSpec] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def name(self) -> str:
        return self.main.name

    @property
    def desc(self) -> str | None:
        return self.main.desc

    @property
    def has_subcommands(self) -> bool:
        return bool(self.subcommands)

    def get_command(self, subcommand: str | None = None) -> CommandSpec:
        """Return the scope for `subcommand`, or the main command for None."""
        if subcommand is None:
            return self.main
        return self.subcommands[subcommand]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProgramSpec):
            return False
        return self.main == other.main and dict(self.subcommands) == dict(
            other.subcommands
        )

    def __hash__(self) -> int:
        return hash((self.main.name, tuple(self.subcommands)))
