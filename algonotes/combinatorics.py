"""Counting, ranking, impartial games and search helpers."""

from __future__ import annotations

import math
from functools import reduce
from operator import xor


def catalan(n):
    """The ``n``-th Catalan number."""
    if n < 0:
        raise ValueError("n must not be negative")
    return math.comb(2 * n, n) // (n + 1)


def derangements(n):
    """Number of permutations of ``n`` items with no fixed point."""
    if n < 0:
        raise ValueError("n must not be negative")
    prev, cur = 1, 0
    if n == 0:
        return prev
    for i in range(2, n + 1):
        prev, cur = cur, (i - 1) * (cur + prev)
    return cur


def subsets_below(n, m):
    """Yield, in increasing order, the subsets of ``n`` bits with at most ``m`` members."""
    i = 0
    while i < (1 << n):
        yield i
        i = i + 1 if bin(i).count("1") < m else (i | (i - 1)) + 1


def submasks(mask):
    """Yield the non-empty submasks of ``mask`` in decreasing order."""
    sub = mask
    while sub > 0:
        yield sub
        sub = (sub - 1) & mask


def rank_comb(n, c):
    """Lexicographic rank of the combination ``c`` among k-subsets of ``range(n)``."""
    c = sorted(c)
    k = len(c)
    res = 0
    prev = -1
    for i, v in enumerate(c):
        if not prev < v < n:
            raise ValueError("invalid combination")
        res += math.comb(n - 1 - prev, k - i) - math.comb(n - v, k - i)
        prev = v
    return res


def unrank_comb(n, k, r):
    """The ascending k-subset of ``range(n)`` with lexicographic rank ``r``."""
    if not 0 <= r < math.comb(n, k):
        raise ValueError("rank out of range")
    res = []
    prev = -1
    for i in range(k):
        for v in range(prev + 1, n):
            cnt = math.comb(n - 1 - v, k - i - 1)
            if r < cnt:
                res.append(v)
                prev = v
                break
            r -= cnt
    return res


def unrank_perm(n, k, r):
    """The k-permutation of ``range(n)`` with rank ``r``."""
    if not 0 <= k <= n:
        raise ValueError("k must be between 0 and n")
    ident = list(range(n))
    picked = []
    for m in range(n, n - k, -1):
        j = r % m
        ident[m - 1], ident[j] = ident[j], ident[m - 1]
        picked.append(ident[m - 1])
        r //= m
    return picked[::-1]


def rank_perm(n, pi):
    """Rank of the k-permutation ``pi`` of ``range(n)``; inverse of :func:`unrank_perm`."""
    pi = list(pi)
    k = len(pi)
    if k > n or len(set(pi)) != k or any(not 0 <= v < n for v in pi):
        raise ValueError("invalid permutation")
    pirev = list(range(n))
    for i, v in enumerate(pi):
        pirev[v] = i + n - k
    digits = []
    m, kk = n, k
    while kk:
        s = pi[kk - 1]
        j = pirev[m - 1] - (m - kk)
        pi[kk - 1], pi[j] = pi[j], pi[kk - 1]
        pirev[s], pirev[m - 1] = pirev[m - 1], pirev[s]
        digits.append((s, m))
        m -= 1
        kk -= 1
    ans = 0
    for s, base in reversed(digits):
        ans = s + base * ans
    return ans


def josephus(n, m):
    """0-based position of the survivor when every ``m``-th of ``n`` people leaves."""
    if n < 1:
        raise ValueError("n must be positive")
    survivor = 0
    for i in range(2, n + 1):
        survivor = (survivor + m % i) % i
    return survivor


def nim_move(heaps, misere=False):
    """Winning move ``(heap, amount)``, or ``(-1, 0)`` when the position is lost."""
    heaps = list(heaps)
    if not heaps:
        raise ValueError("no heaps given")
    x = reduce(xor, heaps, 0)
    largest = max(range(len(heaps)), key=lambda i: (heaps[i], -i))
    if x:
        for i, h in enumerate(heaps):
            if h ^ x < h:
                take = h - (h ^ x)
                more = sum(
                    1
                    for j, hj in enumerate(heaps)
                    if (i != j and hj > 1) or (i == j and hj > take)
                )
                ones = len(heaps) - more
                if not more:
                    return largest, heaps[largest] - (int(misere) ^ (ones % 2))
                return i, take
    if heaps[largest] == 1:
        return -1, 0
    return largest, heaps[largest]


def nim_greedy(heaps):
    """Move ``(heap, amount)`` in greedy nim, where only a largest heap may be played."""
    m = n = pm = pn = 0
    mi = -1
    for i, h in enumerate(heaps):
        if h > m:
            n, pn, m, pm, mi = m, pm, h, 1, i
        elif m > h > n:
            n, pn = h, 1
        elif h == m:
            pm += 1
        elif h == n:
            pn += 1
    if pm % 2 == 0:
        return mi, 0
    if pm == 1:
        return mi, (m - n if pn % 2 else m)
    return mi, m


def floyd_cycle(f, x0):
    """``(mu, lam)``: start index and length of the cycle of ``x0, f(x0), ...``."""
    tortoise, hare = f(x0), f(f(x0))
    while tortoise != hare:
        tortoise, hare = f(tortoise), f(f(hare))
    mu = 0
    hare = x0
    while tortoise != hare:
        tortoise, hare = f(tortoise), f(hare)
        mu += 1
    lam = 1
    hare = f(tortoise)
    while tortoise != hare:
        hare = f(hare)
        lam += 1
    return mu, lam


def ternary_search_min(f, lo=-1e6, hi=1e6, eps=1e-9):
    """Smallest value of a unimodal ``f`` seen while narrowing ``[lo, hi]``."""
    res = math.inf
    while abs(hi - lo) > eps:
        left = (hi - lo) / 3 + lo
        right = 2 * (hi - lo) / 3 + lo
        res_l, res_r = f(left), f(right)
        if res_l < res_r:
            hi = right
        else:
            lo = left
        res = min(res, res_l, res_r)
    return res


def binary_search_first(f, lo, hi):
    """Smallest ``x`` in ``[lo, hi)`` with ``f(x)`` true for a monotone ``f``; ``hi`` if none."""
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if f(mid):
            hi = mid
        else:
            lo = mid + 1
    return lo