"""Context-free grammars: conversion to Chomsky normal form and CYK parsing.

A grammar is a mapping from a variable to a list of productions. A production
is a tuple: ``(terminal,)`` for a single terminal character, ``(A, B)`` for a
pair of variables, or ``()`` for the empty word.
"""

from __future__ import annotations

from collections import defaultdict
from itertools import count


def _is_terminal(ch):
    return "a" <= ch <= "z"


def _parse_rule(rule):
    head, arrow, body = rule.partition("->")
    head = head.strip()
    if not arrow or len(head) != 1:
        raise ValueError(f"malformed rule: {rule!r}")
    return head, body.replace("|", " ").split()


def to_cnf(rules):
    """Build a CNF grammar from rules such as ``"S -> aSb | ab"``.

    Lowercase letters are terminals; every other character is a variable. Each
    terminal ``t`` becomes a variable of the same name with the production
    ``(t,)``, and longer right-hand sides are split with fresh variables.
    """
    parsed = [_parse_rule(rule) for rule in rules]
    grammar = {}
    for head, alternatives in parsed:
        grammar.setdefault(head, [])
        for exp in alternatives:
            for ch in exp:
                if _is_terminal(ch) and ch not in grammar:
                    grammar[ch] = [(ch,)]
    fresh = (f"X{i}" for i in count(1))

    def add(var, production):
        productions = grammar.setdefault(var, [])
        if production not in productions:
            productions.append(production)

    def chain(exp):
        if len(exp) == 1:
            return exp
        tail = chain(exp[1:])
        var = next(fresh)
        add(var, (exp[0], tail))
        return var

    for head, alternatives in parsed:
        for exp in alternatives:
            if len(exp) == 1:
                if not _is_terminal(exp):
                    raise ValueError(f"unit production {head} -> {exp} is not supported")
                add(head, (exp,))
            else:
                add(head, (exp[0], chain(exp[1:])))
    return grammar


def cyk(grammar, start, word):
    """Whether the CNF ``grammar`` derives ``word`` from ``start``."""
    if not word:
        return () in grammar.get(start, [])
    by_terminal = defaultdict(set)
    by_pair = defaultdict(set)
    for var, productions in grammar.items():
        for production in productions:
            if len(production) == 1:
                by_terminal[production[0]].add(var)
            elif len(production) == 2:
                by_pair[production].add(var)
            elif production:
                raise ValueError(f"production {production!r} of {var!r} is not in CNF")
    n = len(word)
    table = [[set() for _ in range(n)] for _ in range(n)]
    for i, ch in enumerate(word):
        table[i][i] = set(by_terminal.get(ch, ()))
    for span in range(2, n + 1):
        for i in range(n - span + 1):
            j = i + span - 1
            cell = table[i][j]
            for k in range(i, j):
                for left in table[i][k]:
                    for right in table[k + 1][j]:
                        cell |= by_pair.get((left, right), set())
    return start in table[0][n - 1]