"""String algorithms: pattern matching, palindromes, tries and suffix arrays."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

DEFAULT_BASE = 107
DEFAULT_MOD = 34027797218763967


def kmp_prefix(pattern):
    """Knuth-Morris-Pratt border table of ``pattern``.

    The table has ``len(pattern) + 1`` entries; entry ``i`` is the length of the
    longest proper border of ``pattern[:i]``, and entry 0 is -1.
    """
    b = [0] * (len(pattern) + 1)
    b[0] = -1
    j = -1
    for i, ch in enumerate(pattern):
        while j >= 0 and ch != pattern[j]:
            j = b[j]
        j += 1
        b[i + 1] = j
    return b


def kmp_search(text, pattern):
    """Start indices of every occurrence of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("the pattern must not be empty")
    b = kmp_prefix(pattern)
    found = []
    j = 0
    for i, ch in enumerate(text):
        while j >= 0 and ch != pattern[j]:
            j = b[j]
        j += 1
        if j == len(pattern):
            found.append(i + 1 - j)
            j = b[j]
    return found


def z_function(s):
    """Z array: entry ``i`` is the length of the longest common prefix of ``s`` and ``s[i:]``."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    if n:
        z[0] = n
    return z


_START, _END, _SEP = object(), object(), object()


def manacher(s):
    """Palindrome radii over ``s`` interleaved with separators.

    The transformed sequence is ``^ # s0 # s1 # ... # $``; entry ``i`` of the
    result is the length of the longest palindrome of ``s`` centred at position
    ``i`` of that sequence.
    """
    trans = [_START, _SEP]
    for ch in s:
        trans.extend((ch, _SEP))
    trans.append(_END)
    p = [0] * len(trans)
    center = right = 0
    for i in range(1, len(trans) - 1):
        p[i] = min(right - i, p[2 * center - i]) if right > i else 0
        while trans[i + 1 + p[i]] == trans[i - 1 - p[i]]:
            p[i] += 1
        if i + p[i] > right:
            center, right = i, i + p[i]
    return p


def rabin_karp(text, pattern, base=DEFAULT_BASE, mod=DEFAULT_MOD):
    """Start indices where the rolling hash of ``text`` equals that of ``pattern``."""
    m = len(pattern)
    if m == 0:
        raise ValueError("the pattern must not be empty")
    if m > len(text):
        return []
    hp = ht = 0
    for pc, tc in zip(pattern, text):
        hp = (hp * base + ord(pc)) % mod
        ht = (ht * base + ord(tc)) % mod
    top = pow(base, m - 1, mod)
    matches = [0] if ht == hp else []
    for i in range(m, len(text)):
        ht = ((ht - ord(text[i - m]) * top) * base + ord(text[i])) % mod
        if ht == hp:
            matches.append(i - m + 1)
    return matches


@dataclass
class _TrieNode:
    children: dict = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """Set of words stored as a prefix tree."""

    def __init__(self):
        self._root = _TrieNode()

    def insert(self, word):
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def __contains__(self, word):
        if not isinstance(word, str):
            return False
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.terminal


class AhoCorasick:
    """Automaton finding every occurrence of many patterns in one pass."""

    def __init__(self, patterns):
        self.patterns = list(patterns)
        if any(not p for p in self.patterns):
            raise ValueError("patterns must not be empty")
        self._goto = [{}]
        self._fail = [0]
        self._out = [[]]
        for idx, pattern in enumerate(self.patterns):
            cur = 0
            for ch in pattern:
                nxt = self._goto[cur].get(ch)
                if nxt is None:
                    nxt = len(self._goto)
                    self._goto.append({})
                    self._fail.append(0)
                    self._out.append([])
                    self._goto[cur][ch] = nxt
                cur = nxt
            self._out[cur].append(idx)
        self._build_links()

    def _build_links(self):
        queue = deque(self._goto[0].values())
        while queue:
            cur = queue.popleft()
            for ch, child in self._goto[cur].items():
                queue.append(child)
                f = self._fail[cur]
                while f and ch not in self._goto[f]:
                    f = self._fail[f]
                link = self._goto[f].get(ch, 0)
                self._fail[child] = link if link != child else 0
                self._out[child].extend(self._out[self._fail[child]])

    def search(self, text):
        """List of ``(pattern_index, start)`` for every occurrence, by end position."""
        found = []
        state = 0
        for pos, ch in enumerate(text):
            while state and ch not in self._goto[state]:
                state = self._fail[state]
            state = self._goto[state].get(ch, 0)
            for idx in self._out[state]:
                found.append((idx, pos + 1 - len(self.patterns[idx])))
        return found


class PalindromicTree:
    """Eertree of a string built one character at a time."""

    def __init__(self):
        # Node 0 is the imaginary root of length -1, node 1 the empty palindrome.
        self._len = [-1, 0]
        self._suff = [0, 0]
        self._chain = [0, 0]
        self._occ = [0, 0]
        self._next = [{}, {}]
        self._chars = []
        self._last = 1
        self._total = 0

    def _fits(self, node, pos):
        start = pos - self._len[node] - 1
        return start >= 0 and self._chars[start] == self._chars[pos]

    def add(self, ch):
        """Append ``ch``; return True if it creates a new distinct palindrome."""
        pos = len(self._chars)
        self._chars.append(ch)
        cur = self._last
        while not self._fits(cur, pos):
            cur = self._suff[cur]
        existing = self._next[cur].get(ch)
        if existing is not None:
            self._last = existing
            self._occ[existing] += 1
            self._total += self._chain[existing]
            return False
        node = len(self._len)
        self._len.append(self._len[cur] + 2)
        self._suff.append(1)
        self._chain.append(1)
        self._occ.append(1)
        self._next.append({})
        self._next[cur][ch] = node
        self._last = node
        if self._len[node] > 1:
            cur = self._suff[cur]
            while not self._fits(cur, pos):
                cur = self._suff[cur]
            self._suff[node] = self._next[cur][ch]
            self._chain[node] = 1 + self._chain[self._suff[node]]
        self._total += self._chain[node]
        return True

    def count_palindromes(self):
        """Number of palindromic substrings, counted with multiplicity."""
        return self._total


def suffix_array(text):
    """Start indices of the suffixes of ``text`` in lexicographic order."""
    n = len(text)
    sa = list(range(n))
    if n <= 1:
        return sa
    rank = [ord(c) if isinstance(c, str) else c for c in text]
    k = 1
    while True:
        def key(i, rank=rank, k=k):
            return (rank[i], rank[i + k] if i + k < n else -1)

        sa.sort(key=key)
        new_rank = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            new_rank[cur] = new_rank[prev] + (key(cur) != key(prev))
        rank = new_rank
        if rank[sa[-1]] == n - 1:
            return sa
        k <<= 1


def lcp_array(text, sa):
    """Entry ``i`` is the longest common prefix of suffixes ``sa[i-1]`` and ``sa[i]``."""
    n = len(text)
    if sorted(sa) != list(range(n)):
        raise ValueError("sa is not a suffix array of text")
    rank = [0] * n
    for pos, start in enumerate(sa):
        rank[start] = pos
    lcp = [0] * n
    h = 0
    for i in range(n):
        if rank[i] == 0:
            h = 0
            continue
        j = sa[rank[i] - 1]
        while i + h < n and j + h < n and text[i + h] == text[j + h]:
            h += 1
        lcp[rank[i]] = h
        h = max(h - 1, 0)
    return lcp