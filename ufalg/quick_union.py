"""Quick-union: sites in the same component form a tree.

``parent[k]`` points to the parent of site ``k``; a root is its own parent and
two sites are connected when they have the same root.

Performance characteristics:

- ``find`` is slow: O(N), trees can get tall and degenerate into lists
- ``union`` is quick but includes the cost of ``find``: O(N)
- processing N sites with N connections costs O(N^2) in the worst case
"""

from __future__ import annotations

import numpy as np

from .base import UnionFind
from .complexity import time_complexity


class QuickUnion(UnionFind):
    """Union-find backed by an unbalanced parent-link forest."""

    @time_complexity("O(N)", op="initialize")
    def __init__(self, n: int):
        super().__init__(n)
        self._parent = np.arange(self._n, dtype=np.intp)

    @time_complexity("O(N)", op="union", comment="includes the cost of finding the root")
    def union(self, p: int, q: int) -> None:
        p = self._check_index(p)
        q = self._check_index(q)

        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return
        self._parent[root_p] = root_q
        self._count -= 1

    @time_complexity(
        "O(N)",
        op="find",
        comment="worst case, trees can get tall and resemble a list",
    )
    def find(self, p: int) -> int:
        p = self._check_index(p)
        parent = self._parent
        while p != parent[p]:
            p = int(parent[p])
        return p

    def forest(self) -> np.ndarray:
        return self._parent.copy()
