"""Lightweight diagnostic helpers.

These utilities are dependency-free (NumPy-only) and print compact statistics
about a union-find forest: how deep the trees are and how large the
components are. They are used by the CLI ``--verbose`` mode, the examples and
the tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

import numpy as np

from .base import UnionFind
from .complexity import format_complexity_table


@dataclass(frozen=True)
class Summary:
    name: str
    shape: Tuple[int, ...]
    dtype: str
    min: float
    max: float
    mean: float
    std: float
    n_zero: int
    q: Tuple[float, float, float, float, float]


def summarize_array(name: str, x: Any, *, q: Sequence[float] = (0.0, 0.25, 0.5, 0.75, 1.0)) -> Summary:
    """Return basic stats + quantiles for an array-like."""
    a = np.asarray(x)
    af = a.reshape(-1)
    if af.size == 0:
        return Summary(
            name=name,
            shape=tuple(a.shape),
            dtype=str(a.dtype),
            min=float("nan"),
            max=float("nan"),
            mean=float("nan"),
            std=float("nan"),
            n_zero=0,
            q=(float("nan"),) * 5,
        )

    return Summary(
        name=name,
        shape=tuple(a.shape),
        dtype=str(a.dtype),
        min=float(np.min(af)),
        max=float(np.max(af)),
        mean=float(np.mean(af)),
        std=float(np.std(af)),
        n_zero=int(np.sum(af == 0)),
        q=tuple(float(np.quantile(af, qq)) for qq in q),
    )


def print_summary(s: Summary, *, indent: str = "") -> None:
    """Pretty-print a Summary."""
    q0, q25, q50, q75, q100 = s.q
    print(
        f"{indent}{s.name}: shape={s.shape} dtype={s.dtype} "
        f"min={s.min:.6g} max={s.max:.6g} mean={s.mean:.6g} std={s.std:.6g}"
    )
    print(
        f"{indent}  q[0%]={q0:.6g} q[25%]={q25:.6g} q[50%]={q50:.6g} q[75%]={q75:.6g} q[100%]={q100:.6g}"
    )
    if s.n_zero:
        print(f"{indent}  counts: zero={s.n_zero}")


def summarize_many(names_and_arrays: Iterable[Tuple[str, Any]], *, indent: str = "") -> None:
    """Summarize many arrays."""
    for name, arr in names_and_arrays:
        print_summary(summarize_array(name, arr), indent=indent)


def tree_depths(uf: UnionFind) -> np.ndarray:
    """Depth of every site in the parent forest (roots have depth 0).

    Works on a copy of the forest, so path compression in ``uf`` is not
    triggered.
    """
    parent = uf.forest()
    n = parent.size
    depth = np.full(n, -1, dtype=np.intp)
    depth[parent == np.arange(n)] = 0
    for site in range(n):
        if depth[site] >= 0:
            continue
        path = []
        k = site
        while depth[k] < 0:
            path.append(k)
            k = int(parent[k])
        d = int(depth[k])
        for j in reversed(path):
            d += 1
            depth[j] = d
    return depth


def forest_roots(parent: Any) -> np.ndarray:
    """Root of every site of a parent array, by pointer jumping."""
    roots = np.asarray(parent, dtype=np.intp).copy()
    while True:
        nxt = roots[roots]
        if np.array_equal(nxt, roots):
            return roots
        roots = nxt


def component_sizes(uf: UnionFind) -> np.ndarray:
    """Component sizes, largest first."""
    parent = uf.forest()
    sizes = np.bincount(forest_roots(parent), minlength=parent.size)
    sizes = sizes[sizes > 0]
    return np.sort(sizes)[::-1]


def print_forest_stats(uf: UnionFind, *, indent: str = "", complexity: bool = False) -> None:
    """Print the component count plus depth and size summaries for ``uf``."""
    depths = tree_depths(uf)
    sizes = component_sizes(uf)
    print(f"{indent}{type(uf).__name__}: n={uf.n} components={uf.count()} max_depth={int(depths.max())}")
    summarize_many([("depth", depths), ("component size", sizes)], indent=indent + "  ")
    if complexity:
        print(format_complexity_table(type(uf), indent=indent + "  "))
