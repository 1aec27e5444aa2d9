"""Tests for partition indexes."""

import random

import pytest

from integraum.core.exceptions import StructuralMismatchError
from integraum.profiling.ucc import AttributeCombination, PartitionIndex


def _column_partition(values, index=0):
    return PartitionIndex.from_column(AttributeCombination.of(index), values)


class TestFromColumn:
    """Tests for single-column construction."""

    def test_groups_equal_values(self):
        """Test that rows with equal values share a class."""
        partition = _column_partition(["a", "b", "a", "c", "b"])
        assert partition.canonical_classes() == {frozenset({0, 2}), frozenset({1, 4})}
        assert not partition.is_unique()

    def test_drops_singleton_classes(self):
        """Test that only classes with two or more rows are kept."""
        partition = _column_partition(["a", "b", "c"])
        assert partition.classes == ()
        assert partition.is_unique()

    def test_trims_whitespace(self):
        """Test that values are compared after trimming."""
        partition = _column_partition(["x ", " x", "y"])
        assert partition.canonical_classes() == {frozenset({0, 1})}

    def test_missing_values_are_equal(self):
        """Test that missing cells compare equal to each other and to empty strings."""
        partition = _column_partition([None, "", "  ", "v"])
        assert partition.canonical_classes() == {frozenset({0, 1, 2})}

    def test_empty_and_single_row_are_unique(self):
        """Test that zero or one rows are vacuously unique."""
        assert _column_partition([]).is_unique()
        assert _column_partition(["only"]).is_unique()

    def test_rejects_multi_column_combination(self):
        """Test that from_column needs a singleton combination."""
        with pytest.raises(ValueError):
            PartitionIndex.from_column(AttributeCombination.of(0, 1), ["a"])

    def test_key_error(self):
        """Test the number of rows to remove for uniqueness."""
        assert _column_partition(["a", "a", "a", "b", "b", "c"]).key_error == 3


class TestIntersect:
    """Tests for partition refinement."""

    def test_refines_to_unique(self):
        """Test intersecting two non-unique columns into a unique pair."""
        left = _column_partition(["1", "1", "2"], 0)
        right = _column_partition(["x", "y", "x"], 1)
        combined = left.intersect(right)
        assert combined.combination == AttributeCombination.of(0, 1)
        assert combined.is_unique()

    def test_keeps_shared_collisions(self):
        """Test that rows equal on both columns stay together."""
        left = _column_partition(["1", "1", "1", "2"], 0)
        right = _column_partition(["x", "x", "y", "y"], 1)
        combined = left.intersect(right)
        assert combined.canonical_classes() == {frozenset({0, 1})}

    def test_is_commutative(self):
        """Test that the order of intersection does not change the classes."""
        left = _column_partition(["1", "1", "1", "2", "2"], 0)
        right = _column_partition(["x", "x", "y", "y", "y"], 1)
        assert (
            left.intersect(right).canonical_classes()
            == right.intersect(left).canonical_classes()
        )

    def test_row_count_mismatch(self):
        """Test that partitions over different row counts cannot be combined."""
        with pytest.raises(StructuralMismatchError):
            _column_partition(["a", "a"]).intersect(_column_partition(["a", "a", "a"], 1))

    def test_matches_direct_construction(self):
        """Test that refinement equals building from the combined values."""
        rng = random.Random(7)
        for _ in range(25):
            num_rows = rng.randint(0, 30)
            columns = [[rng.choice("abc") for _ in range(num_rows)] for _ in range(3)]
            partitions = [_column_partition(column, i) for i, column in enumerate(columns)]

            refined = partitions[0].intersect(partitions[1]).intersect(partitions[2])
            direct = PartitionIndex.from_columns(AttributeCombination.of(0, 1, 2), columns)

            assert refined.combination == direct.combination
            assert refined.canonical_classes() == direct.canonical_classes()
            assert refined.is_unique() == direct.is_unique()


class TestFromColumns:
    """Tests for multi-column construction."""

    def test_requires_one_column_per_index(self):
        """Test that the column count must match the combination."""
        with pytest.raises(StructuralMismatchError):
            PartitionIndex.from_columns(AttributeCombination.of(0, 1), [["a"]])

    def test_requires_equal_lengths(self):
        """Test that columns of different length are rejected."""
        with pytest.raises(StructuralMismatchError):
            PartitionIndex.from_columns(AttributeCombination.of(0, 1), [["a"], ["a", "b"]])
