"""Simultaneous finite automata, which allow matching text in parallel chunks."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .common import RuleArg, State
from .dfa import DFA

# A missing transition leads to the zero state.
_ZERO = State(0)


def find_state(
    states: Mapping[State, Mapping[State, State]], target: Mapping[State, State]
) -> State | None:
    """The state whose mapping equals ``target``, or None."""
    return next((state for state, mapping in states.items() if mapping == target), None)


@dataclass
class SFA:
    """An automaton whose states are maps from DFA states to DFA states."""

    initial: State
    accepts: set[State]
    dfa_accepts: set[State]
    rules: dict[RuleArg, State]
    states: dict[State, dict[State, State]]

    def to_dfa(self) -> DFA:
        """View the SFA as a plain DFA over its own states."""
        return DFA(self.initial, self.accepts, self.rules)

    def _run(self, chunk: str) -> State:
        current = self.initial
        for ch in chunk:
            current = self.rules.get(RuleArg(current, ch), _ZERO)
        return current

    def match(self, text: str, parallelism: int) -> bool:
        """Match the text by running ``parallelism`` chunks at once and composing them."""
        if parallelism < 1:
            raise ValueError("parallelism must be at least 1")
        size = len(text) // parallelism
        chunks = [text[i * size : (i + 1) * size] for i in range(parallelism - 1)]
        chunks.append(text[(parallelism - 1) * size :])

        with ThreadPoolExecutor(max_workers=parallelism) as pool:
            finals = list(pool.map(self._run, chunks))

        result = self.initial
        for final in finals:
            result = self.states.get(final, {}).get(result, _ZERO)
        return result in self.dfa_accepts


def build_sfa(dfa: DFA) -> SFA:
    """Construct the SFA of a DFA."""
    all_states = dfa.all_states()
    sigma = dfa.all_symbols()

    identity = {q: q for q in all_states}
    states: dict[State, dict[State, State]] = {dfa.initial: identity}
    index: dict[tuple[State, ...], State] = {tuple(identity.values()): dfa.initial}

    accepts = {dfa.initial} if dfa.initial in dfa.accepts else set()
    rules: dict[RuleArg, State] = {}
    queue = deque([dfa.initial])

    while queue:
        source = queue.popleft()
        mapping = states[source]
        for symbol in sigma:
            following = {
                q: dfa.rules.get(RuleArg(mapping[q], symbol), _ZERO) for q in all_states
            }
            key = tuple(following.values())
            target = index.get(key)
            if target is None:
                target = State(len(states))
                if following[dfa.initial] in dfa.accepts:
                    accepts.add(target)
                states[target] = following
                index[key] = target
                queue.append(target)
            rules[RuleArg(source, symbol)] = target

    return SFA(dfa.initial, accepts, set(dfa.accepts), rules, states)