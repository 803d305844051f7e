import math
from fractions import Fraction

import pytest

from algonotes.numtheory import (
    baby_giant,
    chinese_remainder,
    continued_fraction,
    crt_coprime,
    disc_roots,
    divisor_count_table,
    divisor_sum_table,
    egcd,
    euler_phi,
    factor,
    factor_table,
    factorial_prime_power,
    fastpow,
    fibosum,
    gcd,
    is_primitive_root,
    ldioph,
    lucas_binomial,
    mat_mul,
    mat_pow,
    mobius_table,
    mod_inverse,
    msolve,
    phi_table,
    primes_up_to,
    sieve,
    smallest_primitive_root,
)

PAIRS = [(240, 46), (17, 5), (46, 240), (0, 9), (12, 0), (-30, 42)]


def _fib(count):
    seq = [0, 1]
    while len(seq) < count:
        seq.append(seq[-1] + seq[-2])
    return seq


@pytest.mark.parametrize("a,b", PAIRS)
def test_egcd_bezout_identity(a, b):
    d, x, y = egcd(a, b)
    assert d == math.gcd(a, b)
    assert a * x + b * y == d
    assert gcd(a, b) == d


@pytest.mark.parametrize("a,n", [(3, 11), (10, 17), (7, 40)])
def test_mod_inverse(a, n):
    inv = mod_inverse(a, n)
    assert 0 <= inv < n
    assert a * inv % n == 1


def test_mod_inverse_missing_raises():
    with pytest.raises(ValueError):
        mod_inverse(2, 4)


def test_msolve_all_solutions():
    sols = msolve(14, 30, 100)
    assert len(sols) == math.gcd(14, 100)
    assert all(14 * x % 100 == 30 for x in sols)
    assert msolve(2, 1, 4) == []


def test_ldioph():
    d, x, y = ldioph(6, 10, 8)
    assert 6 * x + 10 * y == 8
    assert d == math.gcd(6, 10)
    assert ldioph(2, 4, 3) is None


def test_crt_coprime():
    moduli = [3, 5, 7]
    residues = [2, 3, 2]
    x = crt_coprime(residues, moduli)
    assert 0 <= x < math.prod(moduli)
    assert all(x % n == a for a, n in zip(residues, moduli))


def test_chinese_remainder_non_coprime():
    residues, moduli = [1, 3], [4, 6]
    x = chinese_remainder(residues, moduli)
    assert 0 < x <= math.lcm(*moduli)
    assert all(x % n == a for a, n in zip(residues, moduli))


def test_chinese_remainder_inconsistent_raises():
    with pytest.raises(ValueError):
        chinese_remainder([1, 2], [2, 4])


def test_phi_table_agrees_with_euler_phi_and_gauss_sum():
    table = phi_table(120)
    for n in range(1, 121):
        assert table[n] == euler_phi(n, factor(n))
        assert sum(table[d] for d in range(1, n + 1) if n % d == 0) == n


def test_mobius_divisor_sum():
    mu = mobius_table(100)
    for n in range(1, 101):
        assert sum(mu[d] for d in range(1, n + 1) if n % d == 0) == (n == 1)


def test_divisor_tables():
    counts = divisor_count_table(100)
    sums = divisor_sum_table(100)
    for p in primes_up_to(100):
        assert counts[p] == 2
        assert sums[p] == p + 1
    for perfect in (6, 28):
        assert sums[perfect] == 2 * perfect


def test_primes_up_to_small():
    assert primes_up_to(10) == [2, 3, 5, 7]


def test_sieve_matches_prime_list():
    flags = sieve(200)
    primes = set(primes_up_to(200))
    assert [i for i, f in enumerate(flags) if f] == sorted(primes)
    assert len(flags) == 201


def test_factor_reconstructs_number():
    for n in range(1, 300):
        parts = factor(n)
        assert math.prod(p**e for p, e in parts) == n
        assert all(flag for flag in (sieve(p)[p] for p, _ in parts))
    assert factor(1) == []
    with pytest.raises(ValueError):
        factor(0)


def test_factor_table_matches_factor():
    table = factor_table(300)
    assert table[0] == [] and table[1] == []
    for n in range(2, 301):
        assert table[n] == factor(n)


def test_fastpow_matches_pow():
    assert fastpow(3, 200, 1009) == pow(3, 200, 1009)
    with pytest.raises(ValueError):
        fastpow(3, -1, 7)


def test_primitive_roots():
    assert smallest_primitive_root(7) == 3
    assert is_primitive_root(3, 7, 6, factor(6))
    assert not is_primitive_root(2, 7, 6, factor(6))
    with pytest.raises(ValueError):
        smallest_primitive_root(8)


def test_baby_giant_discrete_log():
    for a in range(1, 11):
        x = baby_giant(2, a, 11)
        assert pow(2, x, 11) == a
    with pytest.raises(ValueError):
        baby_giant(2, 3, 7)


def test_disc_roots():
    assert set(disc_roots(7, 2, 2)) == {3, 4}
    roots = disc_roots(13, 3, 8)
    assert roots and all(pow(x, 3, 13) == 8 for x in roots)
    assert disc_roots(7, 2, 3) == []


def test_continued_fraction_round_trip():
    terms = continued_fraction(415, 93)
    value = Fraction(terms[-1])
    for t in reversed(terms[:-1]):
        value = t + 1 / value
    assert value == Fraction(415, 93)


def test_mat_pow_gives_fibonacci():
    fib = _fib(25)
    step = [[1, 1], [1, 0]]
    for n in range(1, 21):
        assert mat_pow(step, n, 10**9 + 7)[0][1] == fib[n]
    assert mat_pow(step, 0, 97) == [[1, 0], [0, 1]]
    with pytest.raises(ValueError):
        mat_pow(step, -1, 97)


def test_mat_mul_identity():
    m = [[2, 3], [4, 5]]
    assert mat_mul(m, [[1, 0], [0, 1]], 1000) == m


def test_fibosum_matches_running_sum():
    fib = _fib(40)
    mod = 10**9 + 7
    for n in range(0, 30):
        assert fibosum(n, mod) == sum(fib[: n + 1]) % mod
    assert fibosum(25, 97) == sum(fib[:26]) % 97


def test_factorial_prime_power():
    for n in range(0, 30):
        for p in (2, 3, 5):
            f = math.factorial(n)
            e = 0
            while f % p == 0:
                f //= p
                e += 1
            assert factorial_prime_power(n, p) == e
    with pytest.raises(ValueError):
        factorial_prime_power(5, 1)


def test_lucas_binomial_matches_comb():
    for p in (2, 3, 7):
        for n in range(0, 40):
            for k in range(0, n + 2):
                assert lucas_binomial(n, k, p) == math.comb(n, k) % p