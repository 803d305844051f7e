import os
import random

import pytest

from algonotes.strings import (
    AhoCorasick,
    PalindromicTree,
    Trie,
    kmp_prefix,
    kmp_search,
    lcp_array,
    manacher,
    rabin_karp,
    suffix_array,
    z_function,
)


def _random_strings(seed, count=30, alphabet="ab", max_len=12):
    rng = random.Random(seed)
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(1, max_len))) for _ in range(count)]


def _occurrences(text, pattern):
    return [i for i in range(len(text)) if text.startswith(pattern, i)]


def _longest_palindrome(s):
    return max(
        (j - i for i in range(len(s)) for j in range(i + 1, len(s) + 1) if s[i:j] == s[i:j][::-1]),
        default=0,
    )


def test_kmp_prefix_starts_with_minus_one():
    table = kmp_prefix("abcab")
    assert table[0] == -1
    assert len(table) == 6
    assert table[-1] == len("ab")


def test_kmp_search_overlapping():
    assert kmp_search("abababa", "aba") == [0, 2, 4]


@pytest.mark.parametrize("text", _random_strings(1, max_len=20))
def test_kmp_search_matches_startswith(text):
    for pattern in ("a", "ab", "aba", "bb"):
        assert kmp_search(text, pattern) == _occurrences(text, pattern)


def test_kmp_search_rejects_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("abc", "")


@pytest.mark.parametrize("s", _random_strings(2, alphabet="abc"))
def test_z_function_is_common_prefix_length(s):
    z = z_function(s)
    assert z[0] == len(s)
    for i in range(1, len(s)):
        assert z[i] == len(os.path.commonprefix([s, s[i:]]))


def test_z_function_empty():
    assert z_function("") == []


@pytest.mark.parametrize("s", _random_strings(3, alphabet="abc"))
def test_manacher_longest_palindrome(s):
    radii = manacher(s)
    assert len(radii) == 2 * len(s) + 3
    assert max(radii) == _longest_palindrome(s)


def test_manacher_even_palindrome():
    assert max(manacher("xabbay")) == len("abba")


@pytest.mark.parametrize("text", _random_strings(4, max_len=25))
def test_rabin_karp_agrees_with_kmp(text):
    for pattern in ("a", "ba", "abb"):
        assert rabin_karp(text, pattern) == kmp_search(text, pattern)


def test_rabin_karp_pattern_longer_than_text():
    assert rabin_karp("ab", "abc") == []


def test_rabin_karp_rejects_empty_pattern():
    with pytest.raises(ValueError):
        rabin_karp("abc", "")


def test_trie_membership():
    trie = Trie()
    for word in ("car", "cart", "dog"):
        trie.insert(word)
    assert "car" in trie
    assert "cart" in trie
    assert "dog" in trie
    assert "ca" not in trie
    assert "carts" not in trie
    assert "" not in trie
    assert 5 not in trie


def test_trie_empty_word():
    trie = Trie()
    trie.insert("")
    assert "" in trie
    assert "a" not in trie


@pytest.mark.parametrize("text", _random_strings(5, max_len=30))
def test_aho_corasick_finds_every_occurrence(text):
    patterns = ["a", "ab", "bab", "aa", "b"]
    automaton = AhoCorasick(patterns)
    found = automaton.search(text)
    expected = {(i, s) for i, p in enumerate(patterns) for s in _occurrences(text, p)}
    assert sorted(found) == sorted(expected)
    ends = [s + len(patterns[i]) for i, s in found]
    assert ends == sorted(ends)


def test_aho_corasick_rejects_empty_pattern():
    with pytest.raises(ValueError):
        AhoCorasick(["a", ""])


def test_palindromic_tree_counts_aaa():
    tree = PalindromicTree()
    created = [tree.add(c) for c in "aaa"]
    assert all(created)
    assert tree.count_palindromes() == 6


@pytest.mark.parametrize("s", _random_strings(6, alphabet="abc", max_len=15))
def test_palindromic_tree_invariants(s):
    tree = PalindromicTree()
    new_nodes = sum(tree.add(c) for c in s)
    subs = [s[i:j] for i in range(len(s)) for j in range(i + 1, len(s) + 1)]
    palindromes = [t for t in subs if t == t[::-1]]
    assert new_nodes == len(set(palindromes))
    assert tree.count_palindromes() == len(palindromes)


def test_suffix_array_banana():
    assert suffix_array("banana") == [5, 3, 1, 0, 4, 2]


@pytest.mark.parametrize("s", _random_strings(7, alphabet="abc", max_len=20))
def test_suffix_array_sorted_and_lcp(s):
    sa = suffix_array(s)
    assert sorted(sa) == list(range(len(s)))
    suffixes = [s[i:] for i in sa]
    assert suffixes == sorted(suffixes)
    lcp = lcp_array(s, sa)
    assert lcp[0] == 0
    for i in range(1, len(s)):
        assert lcp[i] == len(os.path.commonprefix([suffixes[i - 1], suffixes[i]]))


def test_lcp_array_rejects_bad_suffix_array():
    with pytest.raises(ValueError):
        lcp_array("abc", [0, 0, 1])