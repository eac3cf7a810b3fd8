"""Quick-find: connected sites share the same component id.

``union`` rewrites the component ids of one group, so ``find`` is a single
array lookup while ``union`` touches every site.

Performance characteristics:

- ``find`` is quick: O(1)
- construction is linear: O(N)
- ``union`` is linear: O(N)
- processing N sites with N connections costs O(N^2)
"""

from __future__ import annotations

import numpy as np

from .base import UnionFind
from .complexity import stateful, time_complexity


@time_complexity("O(N^2)", op="process N points")
@stateful
class QuickFind(UnionFind):
    """Union-find backed by a component-id array indexed by site."""

    @time_complexity("O(N)", op="initialize")
    def __init__(self, n: int):
        super().__init__(n)
        # Every site is its own component at the start.
        self._id = np.arange(self._n, dtype=np.intp)

    @time_complexity("O(N)", op="union")
    def union(self, p: int, q: int) -> None:
        pid = self.find(p)
        qid = self.find(q)
        if pid == qid:
            return
        self._id[self._id == pid] = qid
        self._count -= 1

    @time_complexity("O(1)", op="find")
    def find(self, p: int) -> int:
        p = self._check_index(p)
        return int(self._id[p])

    def forest(self) -> np.ndarray:
        # A component id is always one of its own members, so the id array is a
        # forest of depth at most one.
        return self._id.copy()
