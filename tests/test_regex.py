import itertools
import re

import pytest

from sfaregex.common import State
from sfaregex.parser import RegexSyntaxError
from sfaregex.regex import Regexp, compile


def _strings(alphabet, max_len):
    for length in range(max_len + 1):
        for chars in itertools.product(alphabet, repeat=length):
            yield "".join(chars)


@pytest.mark.parametrize(
    "pattern, alphabet, max_len",
    [
        ("(ab|abab)*X", "abX", 6),
        ("a*b*", "ab", 5),
        ("(a|b)*abb", "ab", 6),
        ("ab|ba", "ab", 4),
        ("a+", "a", 5),
        ("(ab)*", "ab", 6),
    ],
)
def test_agrees_with_full_match(pattern, alphabet, max_len):
    regexp = compile(pattern)
    oracle = re.compile(pattern)
    for text in _strings(alphabet, max_len):
        assert regexp.match(text) == (oracle.fullmatch(text) is not None), text


def test_examples_of_main_pattern():
    regexp = compile("(ab|abab)*X")
    assert regexp.match("ababX")
    assert regexp.match("X")
    assert not regexp.match("abab")
    assert not regexp.match("aX")


def test_match_delegates_to_dfa():
    regexp = compile("(a|b)*abb")
    for text in _strings("ab", 5):
        assert regexp.match(text) == regexp.dfa.match(text)


def test_dfa_starts_in_state_zero():
    regexp = compile("ab|ba")
    assert regexp.dfa.initial == State(0)


def test_pattern_kept_and_repr():
    regexp = Regexp("a*b*")
    assert regexp.pattern == "a*b*"
    assert repr(regexp) == "Regexp('a*b*')"


def test_escaped_operator_is_literal():
    regexp = compile(r"a\*")
    assert regexp.match("a*")
    assert not regexp.match("a")
    assert not regexp.match("aa")


@pytest.mark.parametrize("pattern", ["(a", ")", "a)b"])
def test_syntax_errors(pattern):
    with pytest.raises(RegexSyntaxError):
        compile(pattern)