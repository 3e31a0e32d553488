"""Lexer for the small regular expression language."""

from __future__ import annotations

from dataclasses import dataclass

from .token import Token, TokenType

_OPERATORS = {
    "\x00": TokenType.EOF,
    "|": TokenType.UNION,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "*": TokenType.STAR,
    "+": TokenType.PLUS,
}


@dataclass(frozen=True)
class Lexer:
    """Splits a pattern into tokens."""

    pattern: str

    def scan(self) -> list[Token]:
        """Return the tokens of the pattern; a backslash escapes the next symbol."""
        tokens: list[Token] = []
        chars = iter(self.pattern)
        for ch in chars:
            if ch == "\\":
                escaped = next(chars, None)
                if escaped is None:
                    raise ValueError("pattern ends with an unfinished escape")
                tokens.append(Token(escaped, TokenType.CHARACTER))
            else:
                tokens.append(Token(ch, _OPERATORS.get(ch, TokenType.CHARACTER)))
        return tokens