import random

import pytest

from algonotes.fenwick import (
    FenwickTree,
    FenwickTree2D,
    RangeUpdatePointQuery,
    RangeUpdateRangeQuery,
)

VALUES = [3, 0, 4, 1, 5, 9, 2, 6]


def build(values):
    tree = FenwickTree(len(values))
    for i, v in enumerate(values, 1):
        tree.update(i, v)
    return tree


def test_prefix_sums():
    tree = build(VALUES)
    for i in range(len(VALUES) + 1):
        assert tree.query(i) == sum(VALUES[:i])


def test_range_query_matches_slices():
    tree = build(VALUES)
    n = len(VALUES)
    for a in range(1, n + 1):
        for b in range(a, n + 1):
            assert tree.range_query(a, b) == sum(VALUES[a - 1 : b])


def test_find_gives_position_with_that_prefix():
    tree = build(VALUES)
    for i in range(1, len(VALUES) + 1):
        v = tree.query(i)
        assert tree.query(tree.find(v)) == v


def test_find_greatest_is_last_position_with_prefix():
    tree = build(VALUES)
    n = len(VALUES)
    for i in range(1, n + 1):
        v = tree.query(i)
        j = tree.find_greatest(v)
        assert tree.query(j) == v
        assert j == n or tree.query(j + 1) > v
    assert tree.find_greatest(3) == 2


def test_find_missing_value():
    tree = build(VALUES)
    total = tree.query(len(VALUES))
    assert tree.find(total + 1) == -1
    assert tree.find(1) == -1
    assert tree.find_greatest(1) == -1


def test_update_out_of_range():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.update(0, 1)
    with pytest.raises(IndexError):
        tree.update(5, 1)


def test_range_update_point_query():
    ops = [(2, 4, 5), (3, 6, -2), (1, 1, 7)]
    tree = RangeUpdatePointQuery(6)
    for a, b, v in ops:
        tree.update_range(a, b, v)
    for i in range(1, 7):
        assert tree.query_point(i) == sum(v for a, b, v in ops if a <= i <= b)


def test_range_update_range_query():
    rng = random.Random(3)
    n = 10
    tree = RangeUpdateRangeQuery(n)
    points = [0] * (n + 1)
    for _ in range(30):
        a = rng.randint(1, n)
        b = rng.randint(a, n)
        v = rng.randint(-5, 5)
        tree.update_range(a, b, v)
        for i in range(a, b + 1):
            points[i] += v
        x = rng.randint(1, n)
        y = rng.randint(x, n)
        assert tree.query_range(x, y) == sum(points[x : y + 1])


def test_invalid_range():
    with pytest.raises(ValueError):
        RangeUpdateRangeQuery(5).update_range(3, 2, 1)
    with pytest.raises(ValueError):
        RangeUpdatePointQuery(5).update_range(1, 6, 1)


def test_two_dimensional_sums():
    cells = [(2, 3, 7), (1, 1, 4), (5, 2, -3), (4, 4, 2)]
    tree = FenwickTree2D(5)
    for x, y, v in cells:
        tree.update(x, y, v)
    for x in range(6):
        for y in range(6):
            expected = sum(v for px, py, v in cells if px <= x and py <= y)
            assert tree.query(x, y) == expected
    with pytest.raises(IndexError):
        tree.update(6, 1, 1)