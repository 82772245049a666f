import pytest

from pipelineplanner.model.union_find import UnionFind


def test_initially_every_element_is_its_own_root():
    uf = UnionFind(5)
    assert [uf.find(i) for i in range(5)] == [0, 1, 2, 3, 4]
    assert uf.count_sets() == 5


def test_find_is_idempotent():
    uf = UnionFind(6)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(1, 3)
    for x in range(6):
        assert uf.find(uf.find(x)) == uf.find(x)


def test_union_connects_and_second_union_is_noop():
    uf = UnionFind(4)
    assert uf.union(0, 1) is True
    assert uf.find(0) == uf.find(1)

    parent, rank = uf.parent.copy(), uf.rank.copy()
    assert uf.union(0, 1) is False
    assert uf.union(1, 0) is False
    assert (uf.parent == parent).all()
    assert (uf.rank == rank).all()


def test_rank_tie_attaches_second_root_under_first():
    uf = UnionFind(2)
    uf.union(0, 1)
    assert uf.parent[1] == 0
    assert uf.rank[0] == 1
    assert uf.rank[1] == 0


def test_lower_rank_root_goes_under_higher_rank_root():
    uf = UnionFind(3)
    uf.union(1, 2)  # root 1, rank 1
    uf.union(0, 1)  # root 0 has rank 0 -> under 1
    assert uf.find(0) == 1
    assert uf.rank[1] == 1


def test_find_compresses_long_chain_without_recursion():
    n = 50_000
    uf = UnionFind(n)
    # Hand-build a degenerate chain 0 -> 1 -> ... -> n-1
    for i in range(n - 1):
        uf.parent[i] = i + 1

    assert uf.find(0) == n - 1
    assert uf.parent[0] == n - 1
    assert uf.parent[n // 2] == n - 1


@pytest.mark.parametrize("x", [-1, 3, 100])
def test_out_of_range_element_raises(x):
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(x)
    with pytest.raises(IndexError):
        uf.union(0, x)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        UnionFind(-1)


def test_empty_forest():
    uf = UnionFind(0)
    assert len(uf) == 0
    assert uf.count_sets() == 0


def test_connected_and_count_sets():
    uf = UnionFind(5)
    uf.union(0, 4)
    uf.union(4, 2)
    assert uf.connected(0, 2)
    assert not uf.connected(0, 1)
    assert uf.count_sets() == 3
