"""matplotlib figures for doubling experiments and forest shapes.

matplotlib is imported lazily with the Agg backend so the rest of the package
does not depend on it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import numpy as np

from .base import UnionFind
from .benchmark import DoublingResult
from .diagnostics import tree_depths


def _pyplot():
    import matplotlib as mpl

    mpl.use("Agg", force=True)
    import matplotlib.pyplot as plt

    return plt


def _ensure_parent(path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def plot_doubling(results: Iterable[DoublingResult], path: str | Path, *, title: str | None = None) -> Path:
    """Log-log plot of running time against problem size, one line per algorithm."""
    plt = _pyplot()
    path = _ensure_parent(path)

    fig, ax = plt.subplots(figsize=(6.5, 4.5), constrained_layout=True)
    for res in results:
        n = np.asarray(res.n, dtype=float)
        t = np.asarray(res.seconds, dtype=float)
        ok = t > 0
        ax.loglog(n[ok], t[ok], marker="o", label=res.algorithm)
    ax.set_xlabel("N (sites = connections)")
    ax.set_ylabel("time [s]")
    ax.set_title(title or "union-find doubling experiment")
    ax.grid(True, which="both", alpha=0.3)
    ax.legend()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def plot_tree_depths(uf: UnionFind, path: str | Path) -> Path:
    """Histogram of site depths in the parent forest of ``uf``."""
    plt = _pyplot()
    path = _ensure_parent(path)

    depths = tree_depths(uf)
    bins = np.arange(int(depths.max()) + 2) - 0.5
    fig, ax = plt.subplots(figsize=(6.0, 4.0), constrained_layout=True)
    ax.hist(depths, bins=bins)
    ax.set_xlabel("depth")
    ax.set_ylabel("sites")
    ax.set_title(f"{type(uf).__name__}: n={uf.n}, components={uf.count()}")
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path
