"""Number theory: gcd, modular arithmetic, sieves, discrete logs and roots."""

from __future__ import annotations

import math


def gcd(a, b):
    """Greatest common divisor."""
    return math.gcd(a, b)


def egcd(a, b):
    """Return ``(d, x, y)`` with ``a*x + b*y == d == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    if old_r < 0:
        old_r, old_x, old_y = -old_r, -old_x, -old_y
    return old_r, old_x, old_y


def mod_inverse(a, n):
    """Solve ``a*x = 1 (mod n)``; ValueError when ``a`` is not invertible."""
    d, x, _ = egcd(a, n)
    if d > 1:
        raise ValueError(f"{a} has no inverse modulo {n}")
    return x % n


def msolve(a, b, n):
    """All solutions of ``a*x = b (mod n)`` in ``[0, n)``."""
    n = abs(n)
    d, x, _ = egcd(a, n)
    if b % d:
        return []
    x0 = (b // d * x) % n
    step = n // d
    return [(x0 + i * step) % n for i in range(d)]


def ldioph(a, b, c):
    """One solution ``(d, x, y)`` of ``a*x + b*y == c``, or None if none exists.

    All solutions are ``x + k*b/d``, ``y - k*a/d``.
    """
    d, x, y = egcd(a, b)
    if d == 0 or c % d:
        return None
    return d, x * (c // d), y * (c // d)


def crt_coprime(residues, moduli):
    """Smallest non-negative X with ``X = a_i (mod n_i)`` for pairwise coprime moduli."""
    residues, moduli = list(residues), list(moduli)
    if len(residues) != len(moduli):
        raise ValueError("residues and moduli differ in length")
    prod = math.prod(moduli)
    total = 0
    for a, n in zip(residues, moduli):
        p = prod // n
        total += a * mod_inverse(p, n) * p
    return total % prod


def chinese_remainder(residues, moduli):
    """Smallest positive X with ``X = a_i (mod n_i)``; moduli need not be coprime."""
    residues, moduli = list(residues), list(moduli)
    if len(residues) != len(moduli):
        raise ValueError("residues and moduli differ in length")
    for i, (ai, ni) in enumerate(zip(residues, moduli)):
        for aj, nj in zip(residues[:i], moduli[:i]):
            if (ai - aj) % math.gcd(ni, nj):
                raise ValueError("the congruences are inconsistent")
    a0, n0 = 0, 1
    for a1, n1 in zip(residues, moduli):
        d, p0, _ = egcd(n0, n1)
        ns = n0 // d * n1
        a0 = (a0 + p0 * n0 * ((a1 - a0) // d)) % ns
        n0 = ns
    if a0 == 0:
        a0 += n0
    return a0


def factor(n):
    """Prime factorisation as ascending ``(prime, exponent)`` pairs."""
    if n < 1:
        raise ValueError("only positive integers can be factored")
    res = []
    p = 2
    while p * p <= n:
        e = 0
        while n % p == 0:
            n //= p
            e += 1
        if e:
            res.append((p, e))
        p += 1 if p == 2 else 2
    if n > 1:
        res.append((n, 1))
    return res


def euler_phi(n, factors=None):
    """Count of positive integers up to ``n`` coprime to ``n``."""
    if factors is None:
        factors = factor(n)
    for p, _ in factors:
        n = n // p * (p - 1)
    return n


def phi_table(limit):
    """Euler's totient of every integer from 0 to ``limit``."""
    phi = list(range(limit + 1))
    for i in range(2, limit + 1):
        if phi[i] == i:
            for j in range(i, limit + 1, i):
                phi[j] -= phi[j] // i
    return phi


def mobius_table(limit):
    """Mobius function of every integer from 0 to ``limit`` (0 at index 0)."""
    mu = [0] * (limit + 1)
    if limit >= 1:
        mu[1] = 1
    for i in range(1, limit + 1):
        for j in range(2 * i, limit + 1, i):
            mu[j] -= mu[i]
    return mu


def divisor_count_table(limit):
    """Number of divisors of every integer from 0 to ``limit``."""
    count = [0] * (limit + 1)
    for i in range(1, limit + 1):
        for j in range(i, limit + 1, i):
            count[j] += 1
    return count


def divisor_sum_table(limit):
    """Sum of divisors of every integer from 0 to ``limit``."""
    total = [0] * (limit + 1)
    for i in range(1, limit + 1):
        for j in range(i, limit + 1, i):
            total[j] += i
    return total


def sieve(limit):
    """Primality flags for every integer from 0 to ``limit``."""
    if limit < 0:
        return []
    is_prime = [True] * (limit + 1)
    is_prime[0] = False
    if limit >= 1:
        is_prime[1] = False
    for i in range(2, math.isqrt(limit) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
    return is_prime


def primes_up_to(limit):
    """All primes not greater than ``limit``."""
    return [i for i, flag in enumerate(sieve(limit)) if flag]


def factor_table(limit):
    """Factorisation of every integer from 0 to ``limit`` (empty for 0 and 1)."""
    spf = list(range(limit + 1))
    for i in range(2, math.isqrt(max(limit, 0)) + 1):
        if spf[i] == i:
            for j in range(i * i, limit + 1, i):
                if spf[j] == j:
                    spf[j] = i
    table = [[] for _ in range(limit + 1)]
    for n in range(2, limit + 1):
        p = spf[n]
        rest = table[n // p]
        if rest and rest[0][0] == p:
            table[n] = [(p, rest[0][1] + 1)] + rest[1:]
        else:
            table[n] = [(p, 1)] + rest
    return table


def fastpow(n, p, mod):
    """``n**p % mod`` by repeated squaring."""
    if p < 0:
        raise ValueError("the exponent must not be negative")
    return pow(n, p, mod)


def is_primitive_root(g, n, phi_n, phi_factors):
    """Whether ``g`` generates the multiplicative group modulo ``n``."""
    return all(pow(g, phi_n // p, n) != 1 for p, _ in phi_factors)


def baby_giant(g, a, n):
    """Smallest ``x`` with ``g**x = a (mod n)``; ValueError when there is none."""
    m = math.isqrt(n)
    if m * m < n:
        m += 1
    table = {}
    gi = 1 % n
    for i in range(m):
        table.setdefault(gi, i)
        gi = gi * g % n
    q = mod_inverse(pow(g, m, n), n)
    y = a % n
    for i in range(m):
        if y in table:
            return i * m + table[y]
        y = y * q % n
    raise ValueError(f"no x with {g}**x = {a} (mod {n})")


def smallest_primitive_root(n):
    """Smallest primitive root modulo ``n`` greater than 1."""
    n_factors = factor(n)
    phi_n = euler_phi(n, n_factors)
    phi_factors = factor(phi_n)
    for i in range(2, n):
        if any(i % p == 0 for p, _ in n_factors):
            continue
        if is_primitive_root(i, n, phi_n, phi_factors):
            return i
    raise ValueError(f"{n} has no primitive root")


def disc_roots(n, k, a):
    """All ``x`` with ``x**k = a (mod n)``."""
    try:
        g = smallest_primitive_root(n)
        y = baby_giant(pow(g, k, n), a, n)
    except ValueError:
        return []
    phi_n = euler_phi(n)
    d = phi_n // math.gcd(k, phi_n)
    return [pow(g, i, n) for i in range(y % d, phi_n, d)]


def continued_fraction(m, n):
    """Continued fraction terms of ``m / n``."""
    terms = []
    while n:
        terms.append(m // n)
        m, n = n, m % n
    return terms


def mat_mul(a, b, mod):
    """Matrix product modulo ``mod``."""
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % mod for col in columns] for row in a]


def mat_pow(mat, power, mod):
    """Matrix power modulo ``mod``."""
    if power < 0:
        raise ValueError("the exponent must not be negative")
    size = len(mat)
    result = [[int(i == j) % mod for j in range(size)] for i in range(size)]
    base = [[x % mod for x in row] for row in mat]
    while power:
        if power & 1:
            result = mat_mul(result, base, mod)
        base = mat_mul(base, base, mod)
        power >>= 1
    return result


def fibosum(n, mod):
    """Sum of the Fibonacci numbers F(0)..F(n) modulo ``mod``."""
    if n < 2:
        return max(n, 0)
    step = [[0, 1, 0], [1, 1, 0], [1, 1, 1]]
    start = [[0], [1], [1]]
    return mat_mul(mat_pow(step, n - 1, mod), start, mod)[2][0]


def factorial_prime_power(n, p):
    """Exponent of prime ``p`` in ``n!``."""
    if p < 2:
        raise ValueError("p must be a prime")
    r = 0
    div = p
    while n >= div:
        r += n // div
        div *= p
    return r


def lucas_binomial(n, k, p):
    """``C(n, k) mod p`` for a prime ``p`` by Lucas' theorem."""
    if k < 0 or k > n:
        return 0
    result = 1
    while n or k:
        ni, ki = n % p, k % p
        if ki > ni:
            return 0
        result = result * math.comb(ni, ki) % p
        n //= p
        k //= p
    return result