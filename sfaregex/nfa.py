"""Nondeterministic finite automata, their construction and conversion to DFAs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .common import RuleArg, State
from .dfa import DFA

EPSILON = "ε"


def _format_states(states: Iterable[State]) -> str:
    return "{" + ", ".join(str(State(q)) for q in sorted(states)) + "}"


def format_rules(rules: Mapping[RuleArg, Iterable[State]]) -> str:
    """Render an NFA transition table, one rule per line."""
    return "\n".join(
        f"{State(arg.source)}\t--['{arg.symbol}']-->\t{_format_states(dst)}"
        for arg, dst in rules.items()
    )


@dataclass
class NFA:
    """A nondeterministic automaton whose rules map to sets of states."""

    initial: State
    accepts: set[State] = field(default_factory=set)
    rules: dict[RuleArg, set[State]] = field(default_factory=dict)

    def _all_states(self) -> set[State]:
        return {arg.source for arg in self.rules}

    def all_symbols(self) -> set[str]:
        """All input symbols used by the rules, epsilon included."""
        return {arg.symbol for arg in self.rules}

    def calc_dst(self, state: State, symbol: str) -> set[State]:
        """States reached from ``state`` on ``symbol``; empty when there is no rule."""
        return set(self.rules.get(RuleArg(state, symbol), ()))

    def to_without_epsilon(self) -> None:
        """Replace the epsilon transitions by equivalent symbol transitions, in place."""
        if self.accepts <= self._epsilon_closure(self.initial):
            self.accepts.add(self.initial)
        self.rules = self._remove_epsilon_rules()

    def _remove_epsilon_rules(self) -> dict[RuleArg, set[State]]:
        symbols = self.all_symbols() - {EPSILON}
        new_rules: dict[RuleArg, set[State]] = {}
        for state in self._all_states():
            closure = self._epsilon_closure(state)
            for symbol in symbols:
                targets: set[State] = set()
                for mid in closure:
                    targets |= self._epsilon_expand(mid, symbol)
                if targets:
                    new_rules[RuleArg(state, symbol)] = targets
        return new_rules

    def _epsilon_expand(self, state: State, symbol: str) -> set[State]:
        """States reachable by epsilon moves, one ``symbol`` move, then epsilon moves."""
        stepped: set[State] = set()
        for q in self._epsilon_closure(state):
            stepped |= self.calc_dst(q, symbol)
        final: set[State] = set()
        for q in stepped:
            final |= self._epsilon_closure(q)
        return final

    def _epsilon_closure(self, state: State) -> set[State]:
        """States reachable from ``state`` through epsilon moves alone."""
        reachable = {state}
        pending = [state]
        while pending:
            for target in self.calc_dst(pending.pop(), EPSILON):
                if target not in reachable:
                    reachable.add(target)
                    pending.append(target)
        return reachable

    def subset_construction(self) -> DFA:
        """Build the equivalent DFA by the powerset construction."""
        start = frozenset({self.initial})
        numbering: dict[frozenset[State], State] = {start: State(0)}
        accepts: set[State] = set()
        rules: dict[RuleArg, State] = {}
        sigma = sorted(self.all_symbols())
        queue = deque([start])
        while queue:
            current = queue.popleft()
            source = numbering[current]
            if self.accepts & current:
                accepts.add(source)
            for symbol in sigma:
                following = frozenset().union(
                    *(self.rules.get(RuleArg(q, symbol), ()) for q in current)
                )
                target = numbering.get(following)
                if target is None:
                    target = State(len(numbering))
                    numbering[following] = target
                    queue.append(following)
                rules[RuleArg(source, symbol)] = target
        return DFA(State(0), accepts, rules)

    def __str__(self) -> str:
        return format_rules(self.rules)


@dataclass
class Fragment:
    """A piece of an NFA used while assembling a larger one."""

    initial: State = State(0)
    accepts: set[State] = field(default_factory=set)
    rules: dict[RuleArg, set[State]] = field(default_factory=dict)

    def add_rule(self, source: State, symbol: str, target: State) -> None:
        """Add the transition ``source --symbol--> target``."""
        self.rules.setdefault(RuleArg(source, symbol), set()).add(target)

    def create_skeleton(self) -> Fragment:
        """A fragment sharing this one's rule table, with default initial and accept states."""
        return Fragment(rules=self.rules)

    def merge_rule(self, other: Fragment) -> Fragment:
        """A skeleton whose rules are this fragment's merged with ``other``'s."""
        merged = self.create_skeleton()
        for key, targets in other.rules.items():
            merged.rules[key] = merged.rules.get(key, set()) | targets
        return merged

    def build(self) -> NFA:
        """Turn the fragment into an NFA."""
        return NFA(self.initial, self.accepts, self.rules)


def nfa_to_dfa(nfa: NFA) -> DFA:
    """Convert an NFA into a DFA that recognises the same language."""
    nfa.to_without_epsilon()
    return nfa.subset_construction()