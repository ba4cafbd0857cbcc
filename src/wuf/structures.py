"""Weighted union-find over a fixed set of integer nodes."""

from __future__ import annotations

import numbers

import numpy as np


class Graph:
    """Disjoint-set forest with path halving and union by size.

    Nodes are the integers ``0 .. count() - 1``. ``parent`` holds the forest,
    a node being a root when it is its own parent. ``size`` is a relative
    weight that is only read at roots to decide which tree absorbs the other;
    it starts at zero for every node and is not a member count.

    ``find_root`` and ``connected`` are queries that still write to
    ``parent`` while compressing paths, so a shared instance needs external
    locking.
    """

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f"node count must be an integer, got {type(n).__name__}")
        if n < 0:
            raise ValueError("node count must be non-negative")
        self._count = int(n)
        self.parent = np.arange(self._count, dtype=np.int64)
        self.size = np.zeros(self._count, dtype=np.int64)

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"Graph(n={self._count})"

    def count(self) -> int:
        """Return the number of nodes."""

        return self._count

    def find_root(self, node: int) -> int:
        """Return the root of the tree containing `node`, halving the path on the way."""

        node = self._check_node(node)
        parent = self.parent
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return int(node)

    def connected(self, a: int, b: int) -> bool:
        self._check_node(a)
        self._check_node(b)
        return self.find_root(a) == self.find_root(b)

    def connect(self, a: int, b: int) -> None:
        """Merge the components of `a` and `b`.

        The root with the strictly smaller weight goes under the other one; on
        equal weights the root of `b` goes under the root of `a`.
        """

        self._check_node(a)
        self._check_node(b)
        root_a = self.find_root(a)
        root_b = self.find_root(b)
        if root_a == root_b:
            return
        if self.size[root_a] < self.size[root_b]:
            self.parent[root_a] = root_b
            self.size[root_b] += self.size[root_a]
        else:
            self.parent[root_b] = root_a
            self.size[root_a] += self.size[root_b]

    union = connect

    def _check_node(self, node: int) -> int:
        if isinstance(node, bool) or not isinstance(node, numbers.Integral):
            raise TypeError(f"node index must be an integer, got {type(node).__name__}")
        if not 0 <= node < self._count:
            raise IndexError(
                f"node index {node} out of bounds for graph with {self._count} nodes"
            )
        return int(node)
