import itertools

import pytest

from sfaregex.common import RuleArg, State
from sfaregex.dfa import DFA
from sfaregex.sfa import build_sfa, find_state


def _ab_star() -> DFA:
    """DFA for (ab)* over {a, b}, with a dead state."""
    q0, q1, q2 = State(0), State(1), State(2)
    rules = {
        RuleArg(q0, "a"): q1,
        RuleArg(q0, "b"): q2,
        RuleArg(q1, "a"): q2,
        RuleArg(q1, "b"): q0,
        RuleArg(q2, "a"): q2,
        RuleArg(q2, "b"): q2,
    }
    return DFA(q0, {q0}, rules)


def _words(max_len: int):
    for n in range(max_len + 1):
        for letters in itertools.product("ab", repeat=n):
            yield "".join(letters)


def test_initial_state_is_identity():
    dfa = _ab_star()
    sfa = build_sfa(dfa)
    assert sfa.initial == dfa.initial
    assert sfa.states[sfa.initial] == {q: q for q in dfa.all_states()}


def test_rules_are_total():
    dfa = _ab_star()
    sfa = build_sfa(dfa)
    for state in sfa.states:
        for symbol in dfa.all_symbols():
            assert sfa.rules[RuleArg(state, symbol)] in sfa.states


def test_accepts_follow_initial_image():
    dfa = _ab_star()
    sfa = build_sfa(dfa)
    for state, mapping in sfa.states.items():
        assert (state in sfa.accepts) == (mapping[dfa.initial] in dfa.accepts)


def test_state_maps_are_distinct():
    sfa = build_sfa(_ab_star())
    maps = [tuple(sorted(m.items())) for m in sfa.states.values()]
    assert len(maps) == len(set(maps))


@pytest.mark.parametrize("parallelism", [1, 2, 3, 5, 20])
def test_match_agrees_with_dfa(parallelism):
    dfa = _ab_star()
    sfa = build_sfa(dfa)
    for text in _words(6):
        assert sfa.match(text, parallelism) == dfa.match(text)


def test_match_long_text():
    sfa = build_sfa(_ab_star())
    assert sfa.match("ab" * 500, 7)
    assert not sfa.match("ab" * 500 + "a", 7)


def test_to_dfa_recognises_same_language():
    dfa = _ab_star()
    view = build_sfa(dfa).to_dfa()
    for text in _words(6):
        assert view.match(text) == dfa.match(text)


def test_match_rejects_non_positive_parallelism():
    sfa = build_sfa(_ab_star())
    with pytest.raises(ValueError):
        sfa.match("ab", 0)


def test_find_state_present_and_absent():
    dfa = _ab_star()
    sfa = build_sfa(dfa)
    identity = {q: q for q in dfa.all_states()}
    assert find_state(sfa.states, identity) == sfa.initial
    absent = {q: State(99) for q in dfa.all_states()}
    assert find_state(sfa.states, absent) is None