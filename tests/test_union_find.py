from __future__ import annotations

import math

import numpy as np
import pytest

from ufalg.config import make_union_find
from ufalg.dataset import random_dataset
from ufalg.diagnostics import tree_depths
from ufalg.quick_find import QuickFind
from ufalg.quick_union import QuickUnion
from ufalg.weighted import WeightedQuickUnion


GROUP_A = [4, 3, 8, 9]
GROUP_B = [0, 1, 2, 5, 6, 7]


def _assert_tiny_components(uf):
    for group in (GROUP_A, GROUP_B):
        for i, p in enumerate(group):
            for q in group[i + 1:]:
                assert uf.connected(p, q), (p, q)
    assert not uf.connected(4, 5)
    for p in GROUP_A:
        for q in GROUP_B:
            assert not uf.connected(p, q)
    assert uf.count() == 2


def test_tiny_dataset_components(tiny_uf, algorithm):
    uf = make_union_find(algorithm, tiny_uf.total)
    for p, q in tiny_uf:
        uf.union(p, q)
    _assert_tiny_components(uf)
    assert uf.groups() == [sorted(GROUP_B), sorted(GROUP_A)]


def test_initial_state(algorithm):
    uf = make_union_find(algorithm, 5)
    assert uf.count() == 5
    assert len(uf) == 5 and uf.n == 5
    assert [uf.find(i) for i in range(5)] == [0, 1, 2, 3, 4]
    assert uf.groups() == [[0], [1], [2], [3], [4]]
    np.testing.assert_array_equal(uf.forest(), np.arange(5))


def test_union_of_connected_sites_keeps_count(algorithm):
    uf = make_union_find(algorithm, 4)
    uf.union(0, 1)
    uf.union(1, 2)
    assert uf.count() == 2
    uf.union(0, 2)
    uf.union(2, 0)
    uf.union(3, 3)
    assert uf.count() == 2


def test_count_matches_groups_on_random_pairs(algorithm):
    data = random_dataset(200, 150, seed=3)
    uf = make_union_find(algorithm, data.total).union_all(data)
    groups = uf.groups()
    assert uf.count() == len(groups)
    assert sorted(s for g in groups for s in g) == list(range(200))


@pytest.mark.parametrize("bad", [-1, 10, 11, 100])
def test_out_of_bounds_index(algorithm, bad):
    uf = make_union_find(algorithm, 10)
    with pytest.raises(ValueError, match=f"index {bad} is out of bounds."):
        uf.find(bad)
    with pytest.raises(ValueError):
        uf.connected(0, bad)
    with pytest.raises(ValueError):
        uf.union(bad, 0)
    with pytest.raises(ValueError):
        uf.union(0, bad)
    # nothing was merged by the failed unions
    assert uf.count() == 10


def test_non_integer_index(algorithm):
    uf = make_union_find(algorithm, 3)
    with pytest.raises(TypeError):
        uf.find(1.5)
    with pytest.raises(TypeError):
        uf.find(True)
    assert uf.find(np.int64(2)) == 2


@pytest.mark.parametrize("cls", [QuickFind, QuickUnion, WeightedQuickUnion])
@pytest.mark.parametrize("n", [0, -3])
def test_size_must_be_positive(cls, n):
    with pytest.raises(ValueError):
        cls(n)


def test_quick_find_ids_point_at_members():
    uf = QuickFind(6)
    uf.union(0, 1)
    uf.union(1, 2)
    uf.union(4, 5)
    ids = uf.forest()
    # q side wins: ids are rewritten to the id of the second argument
    assert uf.find(0) == uf.find(1) == uf.find(2) == 2
    assert uf.find(4) == 5
    assert np.all(ids[ids] == ids)
    assert int(tree_depths(uf).max()) <= 1


def test_quick_union_links_root_of_p_under_root_of_q():
    uf = QuickUnion(4)
    uf.union(0, 1)
    uf.union(1, 2)
    uf.union(2, 3)
    np.testing.assert_array_equal(uf.forest(), [1, 2, 3, 3])
    assert uf.find(0) == 3
    assert list(tree_depths(uf)) == [3, 2, 1, 0]


def test_weighted_attaches_smaller_tree():
    uf = WeightedQuickUnion(5)
    uf.union(0, 1)  # equal sizes: 1 goes under 0
    assert uf.find(1) == 0
    uf.union(2, 0)  # tree of 0 is larger: 2 goes under 0
    assert uf.find(2) == 0
    assert uf.size_of(2) == 3
    uf.union(3, 4)
    uf.union(4, 2)  # {3,4} smaller than {0,1,2}
    assert uf.find(3) == 0
    assert uf.size_of(4) == 5
    assert uf.count() == 1


def test_weighted_height_is_logarithmic():
    n = 1024
    data = random_dataset(n, 4 * n, seed=11)
    uf = WeightedQuickUnion(n).union_all(data)
    assert int(tree_depths(uf).max()) <= int(math.log2(n))


def test_weighted_path_compression_flattens():
    uf = WeightedQuickUnion(8)
    for a, b in [(0, 1), (2, 3), (0, 2), (4, 5), (6, 7), (4, 6), (0, 4)]:
        uf.union(a, b)
    before = int(tree_depths(uf).max())
    assert before == 3
    uf.find(7)
    assert int(tree_depths(uf).max()) < before


def test_repr():
    uf = WeightedQuickUnion(3)
    uf.union(0, 2)
    assert repr(uf) == "WeightedQuickUnion(n=3, count=2)"


def test_against_scipy_connected_components(algorithm):
    sp = pytest.importorskip("scipy.sparse")
    csgraph = pytest.importorskip("scipy.sparse.csgraph")

    data = random_dataset(300, 200, seed=5)
    uf = make_union_find(algorithm, data.total).union_all(data)

    adj = sp.coo_matrix(
        (np.ones(len(data)), (data.pairs[:, 0], data.pairs[:, 1])),
        shape=(data.total, data.total),
    )
    ncomp, labels = csgraph.connected_components(adj, directed=False)
    assert uf.count() == ncomp
    for p in range(0, data.total, 7):
        for q in range(0, data.total, 11):
            assert uf.connected(p, q) == (labels[p] == labels[q])
