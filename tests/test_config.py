from __future__ import annotations

import pytest

from ufalg.config import (
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    UFConfig,
    config_from_dataset,
    load_config,
    make_union_find,
    resolve_algorithm,
)
from ufalg.quick_find import QuickFind
from ufalg.quick_union import QuickUnion
from ufalg.weighted import WeightedQuickUnion


@pytest.mark.parametrize(
    "name, expected",
    [
        ("quick-find", "quick-find"),
        ("QF", "quick-find"),
        ("quick_union", "quick-union"),
        ("qu", "quick-union"),
        ("wqu", "weighted-quick-union"),
        ("Weighted", "weighted-quick-union"),
        (" weighted_quick_union ", "weighted-quick-union"),
    ],
)
def test_resolve_algorithm(name, expected):
    assert resolve_algorithm(name) == expected


def test_default_algorithm_and_env_override(monkeypatch):
    assert resolve_algorithm() == DEFAULT_ALGORITHM == "weighted-quick-union"
    monkeypatch.setenv("UFALG_ALGORITHM", "qf")
    assert resolve_algorithm() == "quick-find"
    # explicit names win over the environment
    assert resolve_algorithm("qu") == "quick-union"


def test_unknown_algorithm():
    with pytest.raises(ValueError, match="unknown union-find algorithm"):
        resolve_algorithm("bogus")


def test_load_config(data_dir):
    cfg, dataset = load_config(data_dir / "tinyUF.txt", algorithm="qf")
    assert cfg == UFConfig(algorithm="quick-find", n=10, fmt=None)
    assert cfg.cls is QuickFind
    assert len(dataset) == 11


def test_config_rejects_unknown_format(tiny_uf):
    with pytest.raises(ValueError):
        config_from_dataset(tiny_uf, fmt="xml")


def test_make_union_find():
    assert isinstance(make_union_find("qu", 3), QuickUnion)
    assert isinstance(make_union_find(None, 3), WeightedQuickUnion)
    cfg = UFConfig(algorithm="quick-find", n=4)
    uf = make_union_find(cfg)
    assert isinstance(uf, QuickFind) and uf.n == 4
    with pytest.raises(ValueError):
        make_union_find(cfg, 5)
    with pytest.raises(ValueError):
        make_union_find("qf")


def test_registry_names():
    assert set(ALGORITHMS) == {"quick-find", "quick-union", "weighted-quick-union"}
