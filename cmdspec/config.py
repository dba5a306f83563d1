# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Raw document models for cmdspec specs.

A structured spec is a mapping shaped like this (YAML shown):

    name: demo
    desc: A demo program
    args:
      - meta: PRINT
        type: string
    flags:
      - long: conti
        short: c
        type: bool
        default: false
    subcmds:
      - name: init
        desc: Initialize something
        args: []
        flags: []

The block text form is translated to the same shape before validation, so
both forms go through these models.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_default(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return value


def _empty_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value:
        return None
    return value


def _none_to_list(value: Any) -> Any:
    # a YAML key with no items loads as None, or "" with the base loader
    return [] if value is None or value == "" else value


class RawArgument(BaseModel):
    """Raw positional argument definition."""

    model_config = ConfigDict(extra="forbid")

    meta: str = Field(min_length=1)
    desc: str | None = None
    type: str = ""
    default: str | None = None

    @field_validator("default", mode="before")
    @classmethod
    def validate_default(cls, value: Any) -> Any:
        return _normalize_default(value)

    @field_validator("desc", mode="before")
    @classmethod
    def validate_desc(cls, value: Any) -> Any:
        return _empty_to_none(value)


class RawFlag(BaseModel):
    """Raw flag definition."""

    model_config = ConfigDict(extra="forbid")

    long: str | None = None
    short: str | None = None
    desc: str | None = None
    type: str = ""
    default: str | None = None

    @field_validator("default", mode="before")
    @classmethod
    def validate_default(cls, value: Any) -> Any:
        return _normalize_default(value)

    @field_validator("long", "short", "desc", mode="before")
    @classmethod
    def validate_optional_text(cls, value: Any) -> Any:
        return _empty_to_none(value)


class RawSubcommand(BaseModel):
    """Raw subcommand definition. Subcommands cannot declare subcommands."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    desc: str | None = None
    args: list[RawArgument] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)

    @field_validator("desc", mode="before")
    @classmethod
    def validate_desc(cls, value: Any) -> Any:
        return _empty_to_none(value)

    @field_validator("args", "flags", mode="before")
    @classmethod
    def validate_lists(cls, value: Any) -> Any:
        return _none_to_list(value)


class RawProgram(BaseModel):
    """Raw program definition: the main command plus its subcommands."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    desc: str | None = None
    args: list[RawArgument] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)
    subcmds: list[RawSubcommand] = Field(default_factory=list)

    @field_validator("desc", mode="before")
    @classmethod
    def validate_desc(cls, value: Any) -> Any:
        return _empty_to_none(value)

    @field_validator("args", "flags", "subcmds", mode="before")
    @classmethod
    def validate_lists(cls, value: Any) -> Any:
        return _none_to_list(value)
