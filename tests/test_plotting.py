from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from ufalg.benchmark import DoublingResult
from ufalg.quick_union import QuickUnion


def test_plot_doubling(tmp_path: Path):
    pytest.importorskip("matplotlib")
    from ufalg.plotting import plot_doubling

    n = np.array([10, 20, 40])
    res = [
        DoublingResult("quick-find", n, np.array([1e-4, 4e-4, 1.6e-3]), np.array([np.nan, 4.0, 4.0])),
        DoublingResult("weighted-quick-union", n, np.array([1e-4, 2e-4, 0.0]), np.array([np.nan, 2.0, 0.0])),
    ]
    out = plot_doubling(res, tmp_path / "figs" / "doubling.png")
    assert out.exists() and out.stat().st_size > 0


def test_plot_tree_depths(tmp_path: Path, tiny_uf):
    pytest.importorskip("matplotlib")
    from ufalg.plotting import plot_tree_depths

    uf = QuickUnion(tiny_uf.total).union_all(tiny_uf)
    out = plot_tree_depths(uf, tmp_path / "depths.png")
    assert out.exists()
