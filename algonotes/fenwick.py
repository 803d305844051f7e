"""Binary indexed (Fenwick) trees: point and range updates, prefix sums, 2-D sums.

All trees are 1-based: valid positions run from 1 to ``n``.
"""

from __future__ import annotations


class FenwickTree:
    """Prefix sums over positions ``1..n`` with point updates."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must not be negative")
        self.n = n
        self._tree = [0] * (n + 1)

    def update(self, idx, val):
        """Add ``val`` at position ``idx``."""
        if not 1 <= idx <= self.n:
            raise IndexError(f"position {idx} is outside 1..{self.n}")
        while idx <= self.n:
            self._tree[idx] += val
            idx += idx & -idx

    def query(self, idx):
        """Sum of positions ``1..idx``; ``query(0)`` is 0."""
        if not 0 <= idx <= self.n:
            raise IndexError(f"position {idx} is outside 0..{self.n}")
        total = 0
        while idx > 0:
            total += self._tree[idx]
            idx -= idx & -idx
        return total

    def range_query(self, a, b):
        """Sum of positions ``a..b`` inclusive."""
        if not 1 <= a <= b + 1 or b > self.n:
            raise ValueError(f"invalid range {a}..{b}")
        return self.query(b) - self.query(a - 1)

    def _top_mask(self):
        return 1 << (self.n.bit_length() - 1) if self.n else 0

    def find(self, val):
        """Some position whose prefix sum is ``val``, or -1 if there is none.

        Assumes every stored value is non-negative.
        """
        idx = 0
        mask = self._top_mask()
        while mask and idx < self.n:
            nidx = idx + mask
            if nidx <= self.n:
                if val == self._tree[nidx]:
                    return nidx
                if val > self._tree[nidx]:
                    idx = nidx
                    val -= self._tree[nidx]
            mask >>= 1
        return -1 if val else idx

    def find_greatest(self, val):
        """The greatest position whose prefix sum is ``val``, or -1 if there is none.

        Assumes every stored value is non-negative.
        """
        idx = 0
        mask = self._top_mask()
        while mask and idx < self.n:
            nidx = idx + mask
            if nidx <= self.n and val >= self._tree[nidx]:
                idx = nidx
                val -= self._tree[nidx]
            mask >>= 1
        return -1 if val else idx


def _check_range(a, b, n):
    if not 1 <= a <= b <= n:
        raise ValueError(f"invalid range {a}..{b} for size {n}")


def _add(tree, idx, val):
    if idx <= tree.n:
        tree.update(idx, val)


class RangeUpdatePointQuery:
    """Add a value over a range; read single positions."""

    def __init__(self, n):
        self.n = n
        self._tree = FenwickTree(n)

    def update_range(self, a, b, val):
        """Add ``val`` to every position in ``a..b``."""
        _check_range(a, b, self.n)
        _add(self._tree, a, val)
        _add(self._tree, b + 1, -val)

    def query_point(self, idx):
        """Current value at position ``idx``."""
        if not 1 <= idx <= self.n:
            raise IndexError(f"position {idx} is outside 1..{self.n}")
        return self._tree.query(idx)


class RangeUpdateRangeQuery:
    """Add a value over a range; read sums over ranges."""

    def __init__(self, n):
        self.n = n
        self._first = FenwickTree(n)
        self._second = FenwickTree(n)

    def update_range(self, a, b, val):
        """Add ``val`` to every position in ``a..b``."""
        _check_range(a, b, self.n)
        _add(self._first, a, val)
        _add(self._first, b + 1, -val)
        _add(self._second, a, val * (a - 1))
        _add(self._second, b + 1, -val * b)

    def _prefix(self, idx):
        return self._first.query(idx) * idx - self._second.query(idx)

    def query_range(self, a, b):
        """Sum of positions ``a..b``."""
        _check_range(a, b, self.n)
        return self._prefix(b) - self._prefix(a - 1)


class FenwickTree2D:
    """Prefix sums over an ``n`` by ``n`` grid with point updates."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must not be negative")
        self.n = n
        self._tree = [[0] * (n + 1) for _ in range(n + 1)]

    def update(self, x, y, val):
        """Add ``val`` at cell ``(x, y)``."""
        if not (1 <= x <= self.n and 1 <= y <= self.n):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        i = x
        while i <= self.n:
            row = self._tree[i]
            j = y
            while j <= self.n:
                row[j] += val
                j += j & -j
            i += i & -i

    def query(self, x, y):
        """Sum of the cells ``(i, j)`` with ``i <= x`` and ``j <= y``."""
        if not (0 <= x <= self.n and 0 <= y <= self.n):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        total = 0
        i = x
        while i > 0:
            row = self._tree[i]
            j = y
            while j > 0:
                total += row[j]
                j -= j & -j
            i -= i & -i
        return total