"""Regular expressions compiled into deterministic finite automata."""

from __future__ import annotations

from .dfa import DFA
from .nfa import nfa_to_dfa
from .node import Context
from .parser import parse


class Regexp:
    """A compiled pattern together with the DFA that recognises it."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        fragment = parse(pattern).assemble(Context())
        self.dfa: DFA = nfa_to_dfa(fragment.build())

    def match(self, text: str) -> bool:
        """Whether the whole text is accepted by the automaton."""
        return self.dfa.match(text)

    def __repr__(self) -> str:
        return f"Regexp({self.pattern!r})"


def compile(pattern: str) -> Regexp:  # noqa: A001
    """Compile a pattern into a :class:`Regexp`."""
    return Regexp(pattern)