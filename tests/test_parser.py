import pytest

from sfaregex.nfa import EPSILON
from sfaregex.node import Character, Concat, Plus, Star, Union
from sfaregex.parser import Parser, RegexSyntaxError, parse
from sfaregex.token import TokenType

a, b, c = Character("a"), Character("b"), Character("c")


def test_single_character():
    assert parse("a") == a


def test_concat_is_right_associative():
    assert parse("abc") == Concat(a, Concat(b, c))


def test_union_is_left_associative():
    assert parse("a|b|c") == Union(Union(a, b), c)


def test_star_and_plus():
    assert parse("a*") == Star(a)
    assert parse("ab+") == Concat(a, Plus(b))


def test_group():
    assert parse("(ab)*") == Star(Concat(a, b))


def test_empty_pattern_is_epsilon():
    assert parse("") == Character(EPSILON)


def test_empty_alternative():
    assert parse("a|") == Union(a, Character(EPSILON))


def test_escaped_operator():
    assert parse("\\*") == Character("*")


def test_example_pattern():
    ab = Concat(a, b)
    abab = Concat(a, Concat(b, Concat(a, b)))
    expected = Concat(Star(Union(ab, abab)), Character("X"))
    assert parse("(ab|abab)*X") == expected


def test_parser_class_matches_parse():
    assert Parser("a(b|c)").get_ast() == parse("a(b|c)")


def test_unclosed_group():
    with pytest.raises(RegexSyntaxError) as info:
        parse("(a")
    assert info.value.expected == TokenType.RPAREN
    assert info.value.actual == TokenType.EOF


def test_unbalanced_close():
    with pytest.raises(RegexSyntaxError) as info:
        parse("a)")
    assert info.value.expected == TokenType.EOF
    assert info.value.actual == TokenType.RPAREN


def test_leading_star():
    with pytest.raises(RegexSyntaxError) as info:
        parse("*")
    assert info.value.actual == TokenType.STAR


def test_syntax_error_is_value_error():
    with pytest.raises(ValueError):
        parse("a**")