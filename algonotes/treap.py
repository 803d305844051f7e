"""Treap: a randomised balanced search tree with order statistics."""

from __future__ import annotations

import random


class _Node:
    __slots__ = ("key", "priority", "size", "left", "right")

    def __init__(self, key, priority):
        self.key = key
        self.priority = priority
        self.size = 1
        self.left = None
        self.right = None


def _size(node):
    return node.size if node is not None else 0


def _priority(node):
    return node.priority if node is not None else -1.0


def _update(node):
    if node is not None:
        node.size = _size(node.left) + 1 + _size(node.right)


def _rotate_left(root):
    top = root.right
    root.right = top.left
    top.left = root
    _update(root)
    _update(top)
    return top


def _rotate_right(root):
    top = root.left
    root.left = top.right
    top.right = root
    _update(root)
    _update(top)
    return top


def _balance(root):
    if root.priority < _priority(root.left):
        return _rotate_right(root)
    if root.priority < _priority(root.right):
        return _rotate_left(root)
    return root


class Treap:
    """Set of distinct keys supporting k-th smallest and rank queries."""

    def __init__(self, rng=None):
        self._rng = rng or random.Random()
        self._root = None

    def _insert(self, k, root):
        if root is None:
            return _Node(k, self._rng.random())
        if k < root.key:
            root.left = self._insert(k, root.left)
        elif k > root.key:
            root.right = self._insert(k, root.right)
        _update(root)
        return _balance(root)

    def _erase(self, k, root):
        if root is None:
            return None
        if k < root.key:
            root.left = self._erase(k, root.left)
            _update(root)
            return root
        if k > root.key:
            root.right = self._erase(k, root.right)
            _update(root)
            return root
        if root.left is None and root.right is None:
            return None
        if _priority(root.left) < _priority(root.right):
            root = _rotate_left(root)
        else:
            root = _rotate_right(root)
        return self._erase(k, root)

    def insert(self, k):
        """Add ``k``; keys already present are left alone."""
        self._root = self._insert(k, self._root)

    def erase(self, k):
        """Remove ``k`` if it is present."""
        self._root = self._erase(k, self._root)

    def kth(self, k):
        """The ``k``-th smallest key, counting from 0."""
        if not 0 <= k < len(self):
            raise IndexError(f"rank {k} is out of range")
        node = self._root
        while True:
            left = _size(node.left)
            if k < left:
                node = node.left
            elif k > left:
                k -= left + 1
                node = node.right
            else:
                return node.key

    def count(self, k):
        """Number of keys smaller than ``k``."""
        total = 0
        node = self._root
        while node is not None:
            if k < node.key:
                node = node.left
            elif k > node.key:
                total += _size(node.left) + 1
                node = node.right
            else:
                return total + _size(node.left)
        return total

    def __len__(self):
        return _size(self._root)

    def __iter__(self):
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right