"""
Cmdspec CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .compiler import compile_document, compile_spec, parse_spec_text
from .exceptions import CmdspecError, ParseError, SpecError
from .loader import find_spec_file, loader
from .parser import SpecArgumentParser
from .result import ParseResult
from .schema import ArgumentDef, CommandSpec, FlagDef, ProgramSpec
from .value import Value, ValueType
from .version import __version__

__all__ = [
    "ArgumentDef",
    "CmdspecError",
    "CommandSpec",
    "FlagDef",
    "ParseError",
    "ParseResult",
    "ProgramSpec",
    "SpecArgumentParser",
    "SpecError",
    "Value",
    "ValueType",
    "__version__",
    "compile_document",
    "compile_spec",
    "find_spec_file",
    "loader",
    "parse_spec_text",
]
