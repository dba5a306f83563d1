# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by cmdspec.

Errors fall into two families that match the two phases of the library:

- `SpecError`: raised while compiling a spec into a `ProgramSpec`, before any
  argument vector is read.
- `ParseError`: raised by `SpecArgumentParser.parse_args()` on the first bad
  token. Every `ParseError` carries the help text of the scope that was active
  when parsing stopped, so callers can show it next to the error.

All exceptions inherit from `CmdspecError`, the base exception for the package.

Exception Hierarchy:
- CmdspecError
    ├── SpecError
    │   ├── CommandParseFailedError
    │   ├── InvalidFlagNameError
    │   ├── ShortFlagNameTooLongError
    │   ├── ShortFlagNameAlreadyExistsError
    │   ├── InvalidTypeStringError
    │   ├── UnknownDefaultValueError
    │   ├── ListDefaultNotAllowedError
    │   └── SubcommandConflictedError
    ├── ParseError
    │   ├── CannotFindFlagError
    │   ├── ArgumentOverflowedError
    │   ├── FlagValueNotFoundError
    │   ├── InvalidMultipleShortFlagsError
    │   ├── InvalidSubcommandError
    │   └── InvalidValueError
    └── IntegerParseError (SpecError, ParseError)
"""


class CmdspecError(Exception):
    """Base exception for every error raised by cmdspec."""


class SpecError(CmdspecError):
    """Exception raised when a spec cannot be compiled into a schema."""


class CommandParseFailedError(SpecError):
    """Exception raised when the spec text or document is structurally malformed."""


class InvalidFlagNameError(SpecError):
    """Exception raised when a flag has neither a long nor a usable short name."""


class ShortFlagNameTooLongError(SpecError):
    """Exception raised when a short flag name is longer than one character."""


class ShortFlagNameAlreadyExistsError(SpecError):
    """Exception raised when a short character or flag key is registered twice."""


class InvalidTypeStringError(SpecError):
    """Exception raised when a declared type is not one of the known type names."""


class UnknownDefaultValueError(SpecError):
    """Exception raised when a bool default is neither 'true' nor 'false'."""


class ListDefaultNotAllowedError(SpecError):
    """Exception raised when a default is declared on a list type."""


class SubcommandConflictedError(SpecError):
    """Exception raised when two subcommands share the same name."""


class ParseError(CmdspecError):
    """Exception raised when an argument vector does not match the schema."""

    def __init__(self, message: str = "", help_message: str = "") -> None:
        super().__init__(message)
        self.help_message: str = help_message


class CannotFindFlagError(ParseError):
    """Exception raised when a long or short flag is not defined in the active scope."""


class ArgumentOverflowedError(ParseError):
    """Exception raised when more positional values are given than slots declared."""


class FlagValueNotFoundError(ParseError):
    """Exception raised when a valued flag is not followed by a plain value."""


class InvalidMultipleShortFlagsError(ParseError):
    """Exception raised when a non-boolean flag is not last in a short cluster."""


class InvalidSubcommandError(ParseError):
    """Exception raised when the first token names an undeclared subcommand."""


class InvalidValueError(ParseError):
    """Exception raised when a token is not a valid boolean literal."""


class IntegerParseError(SpecError, ParseError, ValueError):
    """Exception raised when a default or a token is not a valid 64-bit integer."""

    def __init__(self, message: str = "", help_message: str = "") -> None:
        ParseError.__init__(self, message, help_message)
