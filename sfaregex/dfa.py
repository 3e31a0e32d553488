"""Deterministic finite automata."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from itertools import combinations

from .common import RuleArg, State

# A missing transition leads to the zero state.
_ZERO = State(0)


def format_rules(rules: Mapping[RuleArg, object]) -> str:
    """Render a transition table, one rule per line."""
    return "\n".join(
        f"{arg.source}\t--['{arg.symbol}']-->\t{dst}" for arg, dst in rules.items()
    )


@dataclass
class DFA:
    """A deterministic automaton with an initial state, accept states and rules."""

    initial: State
    accepts: set[State] = field(default_factory=set)
    rules: dict[RuleArg, State] = field(default_factory=dict)

    def minimize(self) -> None:
        """Merge equivalent states in place."""
        merged: dict[State, State] = {}
        for i, j in combinations(range(len(self.all_states())), 2):
            q1, q2 = State(i), State(j)
            if not self._is_equivalent(q1, q2) or q2 in merged:
                continue
            merged[q2] = q1
            self._merge_state(q1, q2)

    def _replace_state(self, to: State, source: State) -> None:
        if self.initial == source:
            self.initial = to
        for arg, dst in self.rules.items():
            if dst == source:
                self.rules[arg] = to

    def _delete_state(self, state: State) -> None:
        for arg in [arg for arg in self.rules if arg.source == state]:
            del self.rules[arg]

    def _merge_state(self, to: State, source: State) -> None:
        self._replace_state(to, source)
        self._delete_state(source)

    def _is_equivalent(self, q1: State, q2: State) -> bool:
        if (q1 in self.accepts) != (q2 in self.accepts):
            return False
        return all(
            dst == self.rules.get(RuleArg(q2, arg.symbol), _ZERO)
            for arg, dst in self.rules.items()
            if arg.source == q1
        )

    def all_states(self) -> list[State]:
        """All states named by the automaton, sorted."""
        states = {self.initial}
        for arg, dst in self.rules.items():
            states.add(dst)
            states.add(arg.source)
        return sorted(states)

    def all_symbols(self) -> list[str]:
        """All input symbols used by the rules, sorted."""
        return sorted({arg.symbol for arg in self.rules})

    def match(self, text: str) -> bool:
        """Run the automaton over the text and report acceptance."""
        current = self.initial
        for ch in text:
            current = self.rules.get(RuleArg(current, ch), _ZERO)
        return current in self.accepts

    def __str__(self) -> str:
        return format_rules(self.rules)