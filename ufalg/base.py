"""The union-find (dynamic connectivity) contract.

Sites are integers ``0..n-1``. A :class:`UnionFind` starts with every site in
its own component and merges components with :meth:`UnionFind.union`.
Implementations differ in how they store the component structure and hence in
the cost of ``union`` versus ``find`` (see :mod:`ufalg.complexity`).
"""

from __future__ import annotations

import abc
import operator
from typing import Iterable, List, Tuple

import numpy as np


def _check_size(n) -> int:
    if isinstance(n, bool):
        raise TypeError("n must be an integer, not bool")
    n = operator.index(n)
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    return n


class UnionFind(abc.ABC):
    """A data structure which can dynamically determine whether two sites are connected."""

    def __init__(self, n: int):
        self._n = _check_size(n)
        self._count = self._n

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def union(self, p: int, q: int) -> None:
        """Add a connection between sites ``p`` and ``q``.

        Both sites must be in ``[0, n-1]``. Connecting two sites that are already
        connected is a no-op.
        """

    @abc.abstractmethod
    def find(self, p: int) -> int:
        """Return the component identifier of site ``p``."""

    def connected(self, p: int, q: int) -> bool:
        """Return True when ``p`` and ``q`` are in the same component."""
        return self.find(p) == self.find(q)

    def count(self) -> int:
        """Return the number of components (``1 <= count <= n``)."""
        return self._count

    @abc.abstractmethod
    def forest(self) -> np.ndarray:
        """Return a copy of the parent array (roots satisfy ``a[r] == r``)."""

    # ------------------------------------------------------------------
    # Helpers shared by all implementations
    # ------------------------------------------------------------------

    @property
    def n(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self._n}, count={self._count})"

    def _check_index(self, i) -> int:
        if isinstance(i, (bool, np.bool_)):
            raise TypeError("site index must be an integer, not bool")
        i = operator.index(i)
        if i < 0 or i > self._n - 1:
            raise ValueError(f"index {i} is out of bounds.")
        return i

    def union_all(self, pairs: Iterable[Tuple[int, int]]) -> "UnionFind":
        for p, q in pairs:
            self.union(p, q)
        return self

    def groups(self) -> List[List[int]]:
        """Return the components as sorted lists of sites, ordered by their smallest site."""
        members = {}
        for site in range(self._n):
            members.setdefault(self.find(site), []).append(site)
        # sites are visited in increasing order, so each list is already sorted
        return sorted(members.values(), key=lambda g: g[0])
