"""Shared automaton primitives: numbered states and transition keys."""

from __future__ import annotations

from typing import NamedTuple


class State(int):
    """A numbered automaton state, shown as ``q<n>``."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"q{int(self)}"

    def __repr__(self) -> str:
        return f"State({int(self)})"


class RuleArg(NamedTuple):
    """Key of a transition function: the source state and the input symbol."""

    source: State
    symbol: str