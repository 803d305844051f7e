import math

import pytest

from algonotes.linalg import (
    TableauSimplex,
    determinant,
    fft,
    gaussian_elimination,
    precious_stones,
    revised_simplex,
    two_phase_simplex,
)

A = [[2.0, 1.0, 3.0], [0.0, 4.0, 1.0], [5.0, 2.0, 0.0]]
B = [[1.0, 2.0, 0.0], [3.0, 1.0, 1.0], [0.0, 2.0, 2.0]]


def _matmul(x, y):
    return [[sum(a * b for a, b in zip(row, col)) for col in zip(*y)] for row in x]


def test_determinant_multiplicative():
    assert determinant(_matmul(A, B)) == pytest.approx(determinant(A) * determinant(B))


def test_determinant_identity_and_swap():
    ident = [[1.0 if i == j else 0.0 for j in range(3)] for i in range(3)]
    assert determinant(ident) == pytest.approx(1.0)
    assert determinant([A[1], A[0], A[2]]) == pytest.approx(-determinant(A))


def test_determinant_singular():
    assert determinant([[1, 2], [2, 4]]) == 0.0


def test_gaussian_elimination_solves():
    rhs = [4.0, -1.0, 7.0]
    x = gaussian_elimination([row + [r] for row, r in zip(A, rhs)])
    for row, r in zip(A, rhs):
        assert sum(a * v for a, v in zip(row, x)) == pytest.approx(r)


def test_gaussian_elimination_singular():
    with pytest.raises(ValueError):
        gaussian_elimination([[1, 2, 3], [2, 4, 6]])


def test_fft_round_trip():
    data = [1, 2, 3, 4, 0, -1, 2, 5]
    back = fft(fft(data, 1), -1)
    assert [v / len(data) for v in back] == pytest.approx([complex(v) for v in data])


def test_fft_convolution():
    p, q = [1, 2, 3], [4, 0, 5]
    size = 8
    fp = fft(p + [0] * (size - 3), 1)
    fq = fft(q + [0] * (size - 3), 1)
    prod = fft([x * y for x, y in zip(fp, fq)], -1)
    got = [round((v / size).real) for v in prod][:5]
    naive = [sum(p[i] * q[k - i] for i in range(3) if 0 <= k - i < 3) for k in range(5)]
    assert got == naive


def test_fft_bad_length():
    with pytest.raises(ValueError):
        fft([1, 2, 3])


LP_A = [[1.0, 1.0], [1.0, 3.0], [1.0, 0.0]]
LP_B = [4.0, 6.0, 3.0]
LP_C = [3.0, 2.0]


def _feasible(x):
    return all(
        sum(a * v for a, v in zip(row, x)) <= bound + 1e-7 for row, bound in zip(LP_A, LP_B)
    ) and all(v >= -1e-9 for v in x)


def test_tableau_simplex_optimum():
    lp = TableauSimplex(LP_A, LP_B, list(LP_C))
    value = lp.solve()
    assert value == pytest.approx(11.0)
    assert _feasible(lp.x)
    assert sum(c * v for c, v in zip(LP_C, lp.x)) == pytest.approx(value)


def test_tableau_infeasible_and_unbounded():
    assert TableauSimplex([[1.0]], [-1.0], [1.0]).solve() == -math.inf
    assert TableauSimplex([[-1.0]], [1.0], [1.0]).solve() == math.inf


def test_revised_matches_tableau():
    value, x = revised_simplex(LP_C, [row + [b] for row, b in zip(LP_A, LP_B)])
    assert value == pytest.approx(TableauSimplex(LP_A, LP_B, list(LP_C)).solve())
    assert _feasible(x)
    assert sum(c * v for c, v in zip(LP_C, x)) == pytest.approx(value)


def test_revised_infeasible_and_unbounded():
    assert revised_simplex([1.0], [[1.0, -1.0]]) == (-math.inf, None)
    assert revised_simplex([1.0], [[-1.0, 1.0]]) == (math.inf, None)


def test_two_phase_matches_tableau():
    a = [row + [1.0 if j == i else 0.0 for j in range(3)] for i, row in enumerate(LP_A)]
    c = [-v for v in LP_C] + [0.0, 0.0, 0.0]
    x = two_phase_simplex(a, LP_B, c)
    for row, b in zip(a, LP_B):
        assert sum(r * v for r, v in zip(row, x)) == pytest.approx(b)
    assert all(v >= -1e-9 for v in x)
    best = TableauSimplex(LP_A, LP_B, list(LP_C)).solve()
    assert -sum(cv * v for cv, v in zip(c, x)) == pytest.approx(best)


def test_two_phase_infeasible():
    assert two_phase_simplex([[1.0, 1.0]], [-1.0], [1.0, 1.0]) is None


def test_precious_stones():
    assert precious_stones([2, 100], [100, 2]) == pytest.approx(100.0)