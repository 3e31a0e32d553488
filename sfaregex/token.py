"""Tokens produced by the regular expression lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.IntEnum):
    """Kind of a lexical token."""

    CHARACTER = 0
    UNION = 1
    STAR = 2
    PLUS = 3
    LPAREN = 4
    RPAREN = 5
    EOF = 6

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    """A single token: its symbol and its kind."""

    value: str
    kind: TokenType

    def __str__(self) -> str:
        return f"V -> \x1b[32m{self.value}\x1b[0m\tKind -> \x1b[32m{self.kind}\x1b[0m"