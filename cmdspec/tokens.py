# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Classification of raw argument tokens.

- `--name` → `TokenKind.LONG` with text `name` (`--` alone gives empty text)
- `-abc`   → `TokenKind.SHORT` with text `abc`, a cluster of short flags
- others   → `TokenKind.POSITIONAL` with the token unchanged
"""
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    LONG = "long"
    SHORT = "short"
    POSITIONAL = "positional"


@dataclass(frozen=True)
class Token:
    """A classified argv token."""

    kind: TokenKind
    text: str
    raw: str

    @property
    def is_positional(self) -> bool:
        return self.kind is TokenKind.POSITIONAL


def classify(token: str) -> Token:
    """Classify one argv token as a long flag, a short cluster or a positional."""
    if token.startswith("--"):
        return Token(TokenKind.LONG, token[2:], token)
    if token.startswith("-"):
        return Token(TokenKind.SHORT, token[1:], token)
    return Token(TokenKind.POSITIONAL, token, token)
