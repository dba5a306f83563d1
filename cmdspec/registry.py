# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-command lookup structures used by the parsing engine.

`CommandRegistry` is built once for each command scope while the spec is
compiled. It holds:

- a flag map keyed by effective key (`help` is always registered first),
- a 256-entry table from short character code to effective key, used to
  expand clusters like `-abc` in constant time per character,
- the positional arguments in declaration order.

Registration rejects a short character or an effective key that is already
taken. Once built, the registry only exposes read-only views.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from cmdspec.exceptions import (
    CommandParseFailedError,
    InvalidFlagNameError,
    ShortFlagNameAlreadyExistsError,
)
from cmdspec.schema import ArgumentDef, FlagDef
from cmdspec.value import Value, ValueType

SHORT_TABLE_SIZE = 256


def make_help_flag() -> FlagDef:
    """Return the help flag injected into every command scope."""
    return FlagDef(
        long="help",
        short="h",
        value=Value(ValueType.BOOL, False),
        desc="Print this help message",
    )


class CommandRegistry:
    """
    Flag and positional lookup tables for one command scope.

    Args:
        flags (Iterable[FlagDef]): User-declared flags, in declaration order.
        arguments (Iterable[ArgumentDef]): Positional arguments, in declaration order.
    """

    def __init__(
        self,
        flags: Iterable[FlagDef] = (),
        arguments: Iterable[ArgumentDef] = (),
    ) -> None:
        self._flag_map: dict[str, FlagDef] = {}
        self._short_table: list[str | None] = [None] * SHORT_TABLE_SIZE
        self._register_flag(make_help_flag())
        for flag in flags:
            self._register_flag(flag)

        self._arguments: tuple[ArgumentDef, ...] = tuple(arguments)
        self._argument_map: dict[str, ArgumentDef] = {}
        for argument in self._arguments:
            if argument.meta in self._argument_map:
                raise CommandParseFailedError(
                    f"Metavariable '{argument.meta}' is already defined"
                )
            self._argument_map[argument.meta] = argument

    def _register_flag(self, flag: FlagDef) -> None:
        key = flag.key
        if key in self._flag_map:
            raise ShortFlagNameAlreadyExistsError(f"Flag '{key}' is already defined")
        if flag.short:
            code = ord(flag.short)
            if code >= SHORT_TABLE_SIZE:
                raise InvalidFlagNameError(
                    f"Short flag '-{flag.short}' must be a single-byte character"
                )
            existing = self._short_table[code]
            if existing is not None:
                raise ShortFlagNameAlreadyExistsError(
                    f"Short flag '-{flag.short}' is already used by flag '{existing}'"
                )
            self._short_table[code] = key
        self._flag_map[key] = flag

    @property
    def flags(self) -> Mapping[str, FlagDef]:
        return MappingProxyType(self._flag_map)

    @property
    def arguments(self) -> tuple[ArgumentDef, ...]:
        return self._arguments

    @property
    def short_table(self) -> tuple[str | None, ...]:
        return tuple(self._short_table)

    def resolve_long(self, name: str) -> FlagDef | None:
        """Return the flag whose long name is `name`."""
        flag = self._flag_map.get(name)
        if flag is None or flag.long != name:
            return None
        return flag

    def resolve_short(self, char: str) -> FlagDef | None:
        """Return the flag registered for the short character `char`."""
        code = ord(char)
        if code >= SHORT_TABLE_SIZE:
            return None
        key = self._short_table[code]
        if key is None:
            return None
        return self._flag_map[key]

    def get_flag(self, key: str) -> FlagDef | None:
        return self._flag_map.get(key)

    def get_argument(self, meta: str) -> ArgumentDef | None:
        return self._argument_map.get(meta)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandRegistry):
            return False
        return (
            list(self._flag_map.items()) == list(other._flag_map.items())
            and self._arguments == other._arguments
        )

    def __hash__(self) -> int:
        return hash(
            (tuple(self._flag_map), tuple(argument.meta for argument in self._arguments))
        )

    def __str__(self) -> str:
        return (
            f"CommandRegistry(flags={len(self._flag_map)}, "
            f"arguments={len(self._arguments)})"
        )

    def __repr__(self) -> str:
        return str(self)
