"""Recursive descent parser for the small regular expression language."""

from __future__ import annotations

from collections import deque

from .lexer import Lexer
from .nfa import EPSILON
from .node import Character, Concat, Node, Plus, Star, Union
from .token import Token, TokenType

_SEQUENCE_START = (TokenType.LPAREN, TokenType.CHARACTER)


class RegexSyntaxError(ValueError):
    """Raised when a pattern does not follow the grammar."""

    def __init__(self, expected: TokenType, actual: TokenType) -> None:
        super().__init__(f"syntax error: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class Parser:
    """Parses a pattern into a syntax tree.

    Grammar::

        expression -> subexpr EOF
        subexpr    -> seq ('|' seq)*
        seq        -> subseq | epsilon
        subseq     -> sufope subseq | sufope
        sufope     -> factor ('*' | '+')?
        factor     -> '(' subexpr ')' | CHARACTER
    """

    def __init__(self, pattern: str) -> None:
        self._tokens: deque[Token] = deque(Lexer(pattern).scan())
        self._look = Token("\x00", TokenType.EOF)
        self._move()

    def get_ast(self) -> Node:
        """Parse the whole pattern and return the root node."""
        return self._expression()

    def _move(self) -> None:
        if self._tokens:
            self._look = self._tokens.popleft()
        else:
            self._look = Token("\x00", TokenType.EOF)

    def _expect(self, kind: TokenType) -> None:
        if self._look.kind != kind:
            raise RegexSyntaxError(kind, self._look.kind)
        self._move()

    def _expression(self) -> Node:
        node = self._subexpr()
        self._expect(TokenType.EOF)
        return node

    def _subexpr(self) -> Node:
        node = self._seq()
        while self._look.kind == TokenType.UNION:
            self._expect(TokenType.UNION)
            node = Union(node, self._seq())
        return node

    def _seq(self) -> Node:
        if self._look.kind in _SEQUENCE_START:
            return self._subseq()
        return Character(EPSILON)

    def _subseq(self) -> Node:
        items = [self._sufope()]
        while self._look.kind in _SEQUENCE_START:
            items.append(self._sufope())
        node = items.pop()
        for item in reversed(items):
            node = Concat(item, node)
        return node

    def _sufope(self) -> Node:
        node = self._factor()
        if self._look.kind == TokenType.STAR:
            self._move()
            return Star(node)
        if self._look.kind == TokenType.PLUS:
            self._move()
            return Plus(node)
        return node

    def _factor(self) -> Node:
        if self._look.kind == TokenType.LPAREN:
            self._expect(TokenType.LPAREN)
            node = self._subexpr()
            self._expect(TokenType.RPAREN)
            return node
        node = Character(self._look.value)
        self._expect(TokenType.CHARACTER)
        return node


def parse(pattern: str) -> Node:
    """Parse a pattern into its syntax tree."""
    return Parser(pattern).get_ast()