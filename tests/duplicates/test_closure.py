"""Tests for transitive closure over duplicates."""

from integraum.duplicates import Duplicate, UnionFind, transitive_closure


class TestUnionFind:
    """Tests for the disjoint-set forest."""

    def test_components(self):
        """Test that unions merge components."""
        forest = UnionFind()
        forest.union(1, 2)
        forest.union(4, 5)
        forest.union(2, 3)
        forest.find(9)
        assert forest.components() == [[1, 2, 3], [4, 5], [9]]

    def test_find_is_idempotent(self):
        """Test that repeated finds agree after path compression."""
        forest = UnionFind()
        for i in range(10):
            forest.union(i, i + 1)
        root = forest.find(0)
        assert all(forest.find(i) == root for i in range(11))


class TestTransitiveClosure:
    """Tests for transitive_closure."""

    def test_chain_is_closed(self):
        """Test that a chain of pairs yields every pair of the cluster."""
        closed = transitive_closure([Duplicate(1, 2, 0.9), Duplicate(2, 3, 0.85)])
        assert closed == {Duplicate(1, 2), Duplicate(2, 3), Duplicate(1, 3)}

    def test_inferred_pairs_flagged(self):
        """Test that only new pairs are inferred and given pairs keep their score."""
        closed = {
            (d.index1, d.index2): d
            for d in transitive_closure([Duplicate(1, 2, 0.9), Duplicate(2, 3, 0.85)])
        }
        assert not closed[(1, 2)].inferred
        assert closed[(1, 2)].similarity == 0.9
        assert closed[(1, 3)].inferred
        assert closed[(1, 3)].similarity == 0.85

    def test_separate_clusters_stay_separate(self):
        """Test that unrelated pairs are not joined."""
        closed = transitive_closure([Duplicate(1, 2), Duplicate(5, 6)])
        assert closed == {Duplicate(1, 2), Duplicate(5, 6)}

    def test_trivial_inputs(self):
        """Test empty and single-pair inputs."""
        assert transitive_closure([]) == set()
        assert transitive_closure([Duplicate(0, 1)]) == {Duplicate(0, 1)}

    def test_closure_is_idempotent(self):
        """Test that closing twice changes nothing."""
        once = transitive_closure([Duplicate(0, 1), Duplicate(1, 2), Duplicate(2, 3)])
        assert transitive_closure(once) == once
        assert len(once) == 6
