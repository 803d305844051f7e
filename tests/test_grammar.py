import itertools

import pytest

from algonotes.grammar import cyk, to_cnf


def _balanced(word):
    half = len(word) // 2
    return len(word) % 2 == 0 and half > 0 and word == "a" * half + "b" * half


@pytest.fixture
def anbn():
    return to_cnf(["S -> aSb | ab"])


def test_cnf_shape(anbn):
    for var, productions in anbn.items():
        assert productions
        for production in productions:
            if len(production) == 1:
                assert "a" <= production[0] <= "z"
            else:
                assert len(production) == 2
                assert all(sym in anbn for sym in production)


def test_terminals_become_variables(anbn):
    assert anbn["a"] == [("a",)]
    assert anbn["b"] == [("b",)]


@pytest.mark.parametrize("n", range(1, 5))
def test_accepts_balanced_words(anbn, n):
    assert cyk(anbn, "S", "a" * n + "b" * n)


def test_agrees_with_language_on_all_short_words(anbn):
    for size in range(0, 7):
        for letters in itertools.product("ab", repeat=size):
            word = "".join(letters)
            assert cyk(anbn, "S", word) == _balanced(word)


def test_empty_word_needs_epsilon_production():
    assert cyk({"S": [()]}, "S", "")
    assert not cyk({"S": [("a",)]}, "S", "")


def test_multiple_rules_and_alternatives():
    grammar = to_cnf(["S -> AB", "A -> a | aA", "B -> b"])
    for n in range(1, 5):
        assert cyk(grammar, "S", "a" * n + "b")
    assert not cyk(grammar, "S", "b")
    assert not cyk(grammar, "S", "abb")


def test_unit_production_rejected():
    with pytest.raises(ValueError):
        to_cnf(["S -> A"])


def test_malformed_rule_rejected():
    with pytest.raises(ValueError):
        to_cnf(["S aSb"])


def test_non_cnf_production_rejected():
    with pytest.raises(ValueError):
        cyk({"S": [("A", "B", "C")]}, "S", "abc")