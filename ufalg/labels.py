"""Batch connected-component labeling.

The union-find classes process connections one at a time. When the whole set
of pairs is known up front, components can instead be labeled with array
operations only, which lets the work run on JAX:

1. *hook*: for every pair, the root with the larger label is pointed at the
   smaller of the two root labels (scatter-min);
2. *jump*: pointer jumping ``lab = lab[lab]`` until every site points at a root.

The two steps repeat until no pair joins two different roots. Labels only ever
decrease and a root always carries its own index, so the final label of each
site is the smallest site index in its component.
"""

from __future__ import annotations

import math
import operator
from typing import Any

import numpy as np

from ._compat import has_jax, jit, jnp, to_numpy
from .base import UnionFind
from .diagnostics import forest_roots


def _check_pairs(n: Any, pairs: Any) -> tuple[int, np.ndarray]:
    if isinstance(n, bool):
        raise TypeError("n must be an integer, not bool")
    n = operator.index(n)
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    arr = np.asarray(pairs)
    if arr.size == 0:
        arr = arr.reshape(0, 2).astype(np.intp)
    elif arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"pairs must contain integer sites, got dtype {arr.dtype}")
    else:
        arr = arr.astype(np.intp, copy=False)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"pairs must have shape (k, 2), got {arr.shape}")
    if arr.size and (arr.min() < 0 or arr.max() >= n):
        raise ValueError(f"pairs contain sites outside [0, {n - 1}]")
    return n, arr


def _n_jumps(n: int) -> int:
    # After k jumps a path of length L has length ceil(L / 2**k); L <= n - 1.
    return max(1, math.ceil(math.log2(max(n, 2)))) + 1


def _step_numpy(lab: np.ndarray, p: np.ndarray, q: np.ndarray) -> np.ndarray:
    lp = lab[p]
    lq = lab[q]
    m = np.minimum(lp, lq)
    new = lab.copy()
    np.minimum.at(new, lp, m)
    np.minimum.at(new, lq, m)
    for _ in range(_n_jumps(lab.size)):
        new = new[new]
    return new


def _step_jax(lab, p, q):
    lp = lab[p]
    lq = lab[q]
    m = jnp.minimum(lp, lq)
    new = lab.at[lp].min(m).at[lq].min(m)
    # shapes are static under jit, so the jump count is a Python constant
    for _ in range(_n_jumps(lab.shape[0])):
        new = new[new]
    return new


_step_jax_jit = jit(_step_jax) if has_jax() else None


def component_labels(n: int, pairs: Any, *, use_jax: bool | None = None) -> np.ndarray:
    """Label each of ``n`` sites with the smallest site index of its component.

    ``use_jax=None`` uses JAX when it is installed.
    """
    n, arr = _check_pairs(n, pairs)
    if use_jax is None:
        use_jax = has_jax()
    if use_jax and not has_jax():
        raise ImportError("component_labels(use_jax=True) requires jax")

    if arr.shape[0] == 0:
        return np.arange(n, dtype=np.intp)

    if use_jax:
        lab = jnp.arange(n)
        p = jnp.asarray(arr[:, 0])
        q = jnp.asarray(arr[:, 1])
        while True:
            new = _step_jax_jit(lab, p, q)
            if bool(jnp.all(new == lab)):
                break
            lab = new
        return to_numpy(lab).astype(np.intp)

    lab = np.arange(n, dtype=np.intp)
    p = arr[:, 0]
    q = arr[:, 1]
    while True:
        new = _step_numpy(lab, p, q)
        if np.array_equal(new, lab):
            return lab
        lab = new


def count_components(n: int, pairs: Any, *, use_jax: bool | None = None) -> int:
    lab = component_labels(n, pairs, use_jax=use_jax)
    return int(np.count_nonzero(lab == np.arange(lab.size)))


def labels_from_union_find(uf: UnionFind) -> np.ndarray:
    """Canonical (smallest-member) labels for the components of ``uf``."""
    roots = forest_roots(uf.forest())
    # smallest site of each root's component
    smallest = np.full(roots.size, roots.size, dtype=np.intp)
    np.minimum.at(smallest, roots, np.arange(roots.size, dtype=np.intp))
    return smallest[roots]
