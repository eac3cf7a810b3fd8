from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from ufalg.benchmark import (
    DoublingResult,
    estimate_exponent,
    run_doubling,
    save_doubling,
    save_npz,
    time_union_find,
)


def test_time_union_find_is_positive():
    t = time_union_find("qf", 64, seed=0, repeat=2)
    assert t > 0.0


def test_run_doubling_shapes(capsys):
    res = run_doubling("wqu", start=16, steps=3, seed=1, verbose=True)
    assert res.algorithm == "weighted-quick-union"
    np.testing.assert_array_equal(res.n, [16, 32, 64])
    assert res.seconds.shape == (3,)
    assert np.isnan(res.ratio[0])
    assert np.all(np.isfinite(res.ratio[1:]))
    out = capsys.readouterr().out
    assert "==== doubling: weighted-quick-union ====" in out


@pytest.mark.parametrize("kwargs", [{"start": 0}, {"steps": 0}])
def test_run_doubling_rejects_bad_sizes(kwargs):
    with pytest.raises(ValueError):
        run_doubling("qf", **kwargs)


def test_estimate_exponent_on_synthetic_data():
    n = np.array([100, 200, 400, 800])
    res = DoublingResult(algorithm="quick-find", n=n, seconds=1e-6 * n.astype(float) ** 2, ratio=np.full(4, np.nan))
    assert estimate_exponent(res) == pytest.approx(2.0)
    with pytest.raises(ValueError):
        estimate_exponent(DoublingResult("qf", n[:1], np.ones(1), np.ones(1)))


def test_save_helpers(tmp_path: Path):
    path = save_npz(tmp_path / "a" / "demo.npz", a=[1, 2, 3])
    assert path.exists()

    res = run_doubling("qu", start=8, steps=2, seed=0)
    out = save_doubling(tmp_path / "doubling.npz", res)
    d = np.load(out)
    assert set(d.files) == {"quick_union_n", "quick_union_seconds", "quick_union_ratio"}


def test_quadratic_vs_linearithmic_growth():
    from conftest import require_slow

    require_slow()
    qf = run_doubling("quick-find", start=1000, steps=4, seed=0, repeat=3)
    wqu = run_doubling("weighted-quick-union", start=1000, steps=4, seed=0, repeat=3)
    assert estimate_exponent(qf) > estimate_exponent(wqu)
