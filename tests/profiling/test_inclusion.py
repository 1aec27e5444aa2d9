"""Tests for unary inclusion dependency discovery."""

import pytest

from integraum.core.models import Table
from integraum.profiling import InclusionDependency, discover_inclusion_dependencies
from integraum.profiling.inclusion import column_value_set


@pytest.fixture
def region() -> Table:
    return Table(
        "region",
        ["r_regionkey", "r_name"],
        [["0", "AFRICA"], ["1", "AMERICA"], ["2", "ASIA"], ["3", "EUROPE"], ["4", "MIDDLE EAST"]],
    )


@pytest.fixture
def nation() -> Table:
    return Table(
        "nation",
        ["n_nationkey", "n_regionkey"],
        [["0", "0"], ["1", "1 "], ["2", "1"], ["3", None]],
    )


class TestColumnValueSet:
    """Tests for value set extraction."""

    def test_trims_and_skips_missing(self):
        """Test that values are trimmed and empty cells ignored."""
        assert column_value_set([" a", "a", None, "", "b "]) == {"a", "b"}


class TestDiscoverInclusionDependencies:
    """Tests for discover_inclusion_dependencies."""

    def test_foreign_key_detected(self, nation, region):
        """Test that the foreign key column is found in both directions it holds."""
        dependencies = discover_inclusion_dependencies([nation, region])

        assert InclusionDependency(
            dependent_table="nation",
            dependent_column="n_regionkey",
            referenced_table="region",
            referenced_column="r_regionkey",
        ) in dependencies
        # 0..3 are all region keys as well
        assert InclusionDependency(
            dependent_table="nation",
            dependent_column="n_nationkey",
            referenced_table="region",
            referenced_column="r_regionkey",
        ) in dependencies

    def test_reverse_direction_not_included(self, nation, region):
        """Test that region keys 2..4 prevent the reverse dependency."""
        dependencies = discover_inclusion_dependencies([nation, region])
        assert all(ind.dependent_table != "region" or ind.referenced_column != "n_regionkey"
                   for ind in dependencies)

    def test_same_table_pairs_skipped(self, nation):
        """Test that a single table yields no dependencies."""
        assert discover_inclusion_dependencies([nation]) == []

    def test_empty_columns_are_trivial(self, region):
        """Test that columns without values are not reported as dependents."""
        empty = Table("empty", ["e"], [[None], [""]])
        assert discover_inclusion_dependencies([empty, region]) == []

    def test_deterministic_order(self, nation, region):
        """Test that dependencies come out in table and column order."""
        dependencies = discover_inclusion_dependencies([nation, region])
        assert [str(ind) for ind in dependencies] == [
            "nation.n_nationkey ⊆ region.r_regionkey",
            "nation.n_regionkey ⊆ region.r_regionkey",
        ]

    def test_nary_not_supported(self, nation, region):
        """Test that n-ary discovery is refused."""
        with pytest.raises(NotImplementedError):
            discover_inclusion_dependencies([nation, region], discover_nary=True)

    def test_duplicate_table_names_rejected(self, nation):
        """Test that tables must be distinguishable by name."""
        with pytest.raises(ValueError):
            discover_inclusion_dependencies([nation, nation])
