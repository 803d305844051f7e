"""Linear algebra: determinants, linear systems, FFT and linear programming."""

from __future__ import annotations

import cmath
import math

_EPS = 1e-9


def determinant(mat):
    """Determinant by Gaussian elimination with partial pivoting."""
    m = [[float(x) for x in row] for row in mat]
    n = len(m)
    if any(len(row) != n for row in m):
        raise ValueError("the matrix must be square")
    swaps = 0
    for i in range(n - 1):
        pivot = max(range(i, n), key=lambda r: abs(m[r][i]))
        if pivot != i:
            swaps += 1
            m[i], m[pivot] = m[pivot], m[i]
        if m[i][i] == 0:
            return 0.0
        for j in range(i + 1, n):
            factor = m[j][i] / m[i][i]
            for k in range(i, n):
                m[j][k] -= m[i][k] * factor
    res = -1.0 if swaps % 2 else 1.0
    for i in range(n):
        res *= m[i][i]
    return res


def gaussian_elimination(mat):
    """Solve the system given as an N x (N+1) augmented matrix."""
    m = [[float(x) for x in row] for row in mat]
    n = len(m)
    if any(len(row) != n + 1 for row in m):
        raise ValueError("an N x (N+1) augmented matrix is needed")
    for i in range(n):
        pivot = max(range(i, n), key=lambda r: abs(m[r][i]))
        m[i], m[pivot] = m[pivot], m[i]
        if abs(m[i][i]) < _EPS:
            raise ValueError("the system is singular")
        for j in range(i + 1, n):
            factor = m[j][i] / m[i][i]
            for k in range(i, n + 1):
                m[j][k] -= m[i][k] * factor
    res = [0.0] * n
    for j in range(n - 1, -1, -1):
        t = sum(m[j][k] * res[k] for k in range(j + 1, n))
        res[j] = (m[j][n] - t) / m[j][j]
    return res


def fft(a, direction=1):
    """Radix-2 FFT evaluating ``A`` at ``w**(direction*i)``; inverse needs scaling by 1/N."""
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("the length must be a power of two")
    if direction not in (1, -1):
        raise ValueError("direction must be 1 or -1")
    bits = n.bit_length() - 1
    out = [complex(a[int(format(i, f"0{bits}b")[::-1] or "0", 2)]) for i in range(n)]
    h = 1
    while h < n:
        w_m = cmath.exp(complex(0, direction * math.pi / h))
        for k in range(0, n, 2 * h):
            w = 1 + 0j
            for j in range(k, k + h):
                t = w * out[j + h]
                out[j + h] = out[j] - t
                out[j] += t
                w *= w_m
        h *= 2
    return out


class TableauSimplex:
    """Maximise ``c.x`` subject to ``A x <= b`` and ``x >= 0``."""

    EPS = 1e-11

    def __init__(self, a, b, c):
        c = [float(v) for v in c] + [0.0]
        self.m = len(b)
        self.n = len(c)
        m, n = self.m, self.n
        self.table = [[0.0] * (n + 2) for _ in range(m + 1)]
        self.basic = [0] * (m + 1)
        self.nonbasic = list(range(n))
        for i, row in enumerate(a):
            self.table[i][: len(row)] = [float(v) for v in row]
            self.table[i][n] = float(b[i])
            self.basic[i] = -i - 1
        for j in range(n):
            self.table[m][j] = -c[j]
        self.x = []

    def _pivot(self, e, l):
        t, n = self.table, self.n
        p = t[e][l]
        for j in range(n + 1):
            t[e][j] /= p
        for i in range(self.m + 1):
            if i != e:
                p = t[i][l]
                for j in range(n + 1):
                    t[i][j] -= p * t[e][j]
        self.basic[e], self.nonbasic[l] = self.nonbasic[l], self.basic[e]

    def solve(self):
        """Maximal goal value; ``-inf`` if infeasible, ``inf`` if unbounded.

        The optimal point is left in ``self.x``.
        """
        t, m, n, eps = self.table, self.m, self.n, self.EPS
        while True:
            mi = min(range(m), key=lambda i: t[i][n], default=0)
            if m == 0 or t[mi][n] > -eps:
                break
            mj = 0
            for j in range(1, n):
                if t[mi][j] < t[mi][mj]:
                    mj = j
            if t[mi][mj] >= -eps:
                return -math.inf
            self._pivot(mi, mj)
        while True:
            mj = 0
            for j in range(1, n):
                diff = t[m][mj] - t[m][j]
                if diff > 0 or (abs(diff) < eps and self.nonbasic[j] < self.nonbasic[mj]):
                    mj = j
            if t[m][mj] > -eps:
                break
            mi = m
            for i in range(m):
                if t[i][mj] <= eps:
                    continue
                if mi == m:
                    mi = i
                    continue
                diff = t[mi][n] / t[mi][mj] - t[i][n] / t[i][mj]
                if diff > eps or (abs(diff) < eps and self.basic[i] < self.basic[mi]):
                    mi = i
            if t[mi][mj] <= eps:
                return math.inf
            self._pivot(mi, mj)
        self.x = [0.0] * n
        for i in range(m):
            if self.basic[i] >= 0:
                self.x[self.basic[i]] = t[i][n]
        self.x = self.x[: n - 1]
        return t[m][n]


def revised_simplex(objective, constraints):
    """Maximise ``objective . x`` subject to rows ``[a_1..a_n, bound]`` meaning ``a.x <= bound``.

    Returns ``(value, x)``; value is ``-inf`` when infeasible and ``inf`` when
    unbounded, with ``x`` then None.
    """
    eps = 1e-9
    n = len(objective)
    m = len(constraints)
    ine = [[-float(v) for v in objective] + [0.0]]
    for row in constraints:
        if len(row) != n + 1:
            raise ValueError("each constraint needs n coefficients and a bound")
        ine.append([float(v) for v in row])
    basis = [-i for i in range(m + 1)]
    out = list(range(n + 1))

    def pivot(a, b):
        for i in range(m + 1):
            if i != a:
                for j in range(n + 1):
                    if j != b:
                        ine[i][j] -= ine[a][j] * ine[i][b] / ine[a][b]
        for j in range(n + 1):
            if j != b:
                ine[a][j] /= ine[a][b]
        for i in range(m + 1):
            if i != a:
                ine[i][b] = -ine[i][b] / ine[a][b]
        ine[a][b] = 1 / ine[a][b]
        basis[a], out[b] = out[b], basis[a]

    while m:
        ii = 1
        for i in range(1, m + 1):
            if ine[i][n] < ine[ii][n] or (ine[i][n] == ine[ii][n] and basis[i] < basis[ii]):
                ii = i
        if ine[ii][n] >= -eps:
            break
        jj = 0
        for j in range(n):
            if ine[ii][j] < ine[ii][jj] - eps:
                jj = j
        if ine[ii][jj] >= -eps:
            return -math.inf, None
        pivot(ii, jj)
    while True:
        jj = 0
        for j in range(n):
            if ine[0][j] < ine[0][jj] or (ine[0][j] == ine[0][jj] and out[j] < out[jj]):
                jj = j
        if ine[0][jj] > -eps:
            break
        ii = 0
        for i in range(1, m + 1):
            if ine[i][jj] <= eps:
                continue
            if ii == 0:
                ii = i
                continue
            ri = ine[i][n] / ine[i][jj]
            rii = ine[ii][n] / ine[ii][jj]
            if ri < rii - eps or (ri < rii + eps and basis[i] < basis[ii]):
                ii = i
        if ine[ii][jj] <= eps:
            return math.inf, None
        pivot(ii, jj)
    x = [0.0] * n
    for i in range(1, m + 1):
        if basis[i] >= 0:
            x[basis[i]] = ine[i][n]
    return ine[0][n], x


def two_phase_simplex(a, b, c):
    """Minimise ``c.x`` subject to ``A x = b`` and ``x >= 0``.

    Returns the optimal ``x``, or None when infeasible or unbounded.
    """
    eps = 1e-10
    inf = math.inf
    n, m = len(c), len(b)
    a = [[float(v) for v in row] for row in a]
    b = [float(v) for v in b]
    for i in range(m):
        if b[i] < 0:
            a[i] = [-v for v in a[i]]
            b[i] = -b[i]
    bx = [n + i for i in range(m)]
    nx = list(range(n))
    a = [row + [0.0] * (n + m - len(row)) for row in a]
    a += [[0.0] * (n + m) for _ in range(2)]
    for i in range(m):
        a[i][n + i] = 1.0
        for j in range(n):
            a[m][j] += a[i][j]
    b.append(sum(b))
    for j in range(n):
        a[m + 1][j] = -float(c[j])
    for i in range(m):
        a[m + 1][n + i] = -inf
    b.append(0.0)

    for phase in range(2):
        while True:
            ni = -1
            for i in range(n):
                if a[m][nx[i]] > eps and (ni < 0 or nx[i] < nx[ni]):
                    ni = i
            if ni < 0:
                break
            nv = nx[ni]
            bound = [inf if a[i][nv] < eps else b[i] / a[i][nv] for i in range(m)]
            if not min(bound, default=inf) < inf:
                return None
            bi = 0
            for i in range(m):
                if bound[i] < bound[bi] - eps or (
                    bound[i] < bound[bi] + eps and bx[i] < bx[bi]
                ):
                    bi = i
            pd = a[bi][nv]
            a[bi] = [v / pd for v in a[bi]]
            b[bi] /= pd
            for i in range(m + 2):
                if i != bi:
                    pn = a[i][nv]
                    if pn:
                        a[i] = [v - w * pn for v, w in zip(a[i], a[bi])]
                        b[i] -= b[bi] * pn
            nx[ni], bx[bi] = bx[bi], nx[ni]
        if phase == 0 and abs(b[m]) > eps:
            return None
        a[m], a[m + 1] = a[m + 1], a[m]
        b[m], b[m + 1] = b[m + 1], b[m]

    x = [0.0] * (n + m)
    for i in range(m):
        x[bx[i]] = b[i]
    return x[:n]


def precious_stones(silver, gold):
    """Most silver one side can get when stones may be split so both sides' shares balance."""
    n = len(silver)
    a = [[0.0] * (2 * n) for _ in range(n + 1)]
    b = [0.0] * (n + 1)
    c = [0.0] * (2 * n)
    for i in range(n):
        a[0][i] = silver[i] + gold[i]
        b[0] += gold[i]
        c[i] = -silver[i]
        a[1 + i][i] = 1.0
        a[1 + i][n + i] = 1.0
        b[1 + i] = 1.0
    x = two_phase_simplex(a, b, c)
    if x is None:
        return 0.0
    return -sum(c[i] * x[i] for i in range(n))