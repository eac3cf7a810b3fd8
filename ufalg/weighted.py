"""Weighted quick-union with path compression.

Improves on :class:`~ufalg.quick_union.QuickUnion`, whose trees can grow to
height N. Two changes keep the trees flat:

- **weighting**: the size of every tree is tracked and the smaller tree is
  always attached below the root of the larger one, which bounds the height
  by ``lg N``;
- **path compression** (halving): while ``find`` walks up to the root, every
  other site on the path is relinked to its grandparent.

Performance characteristics:

- ``union`` is O(lg N), including the finds
- ``find`` is O(lg N)
- ``connected`` is O(lg N)
"""

from __future__ import annotations

import numpy as np

from .base import UnionFind
from .complexity import time_complexity


class WeightedQuickUnion(UnionFind):
    """Union-find backed by a size-balanced, path-compressed parent forest."""

    @time_complexity("O(N)", op="initialize")
    def __init__(self, n: int):
        super().__init__(n)
        # Every site is its own tree of size 1 at the start.
        self._parent = np.arange(self._n, dtype=np.intp)
        self._size = np.ones(self._n, dtype=np.intp)

    @time_complexity("O(lgN)", op="union")
    def union(self, p: int, q: int) -> None:
        p = self._check_index(p)
        q = self._check_index(q)

        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self._size[root_p] < self._size[root_q]:  # tree of q is larger, attach p to q
            self._parent[root_p] = root_q
            self._size[root_q] += self._size[root_p]
        else:  # tree of p is larger (or equal), attach q to p
            self._parent[root_q] = root_p
            self._size[root_p] += self._size[root_q]
        self._count -= 1

    @time_complexity("O(lgN)", op="connected")
    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    @time_complexity("O(lgN)", op="find")
    def find(self, p: int) -> int:
        p = self._check_index(p)
        parent = self._parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]  # path halving
            p = int(parent[p])
        return p

    def size_of(self, p: int) -> int:
        """Number of sites in the component containing ``p``."""
        return int(self._size[self.find(p)])

    def forest(self) -> np.ndarray:
        return self._parent.copy()
