"""Tests for instance-based schema matching."""

import numpy as np
import pytest

from integraum.core.exceptions import StructuralMismatchError
from integraum.matching import (
    CorrespondenceMatrix,
    SimilarityMatrix,
    match_instances,
    select_correspondences,
)
from integraum.similarity import Levenshtein


@pytest.fixture
def source(make_table):
    return make_table(
        ["id", "city"],
        [["1", "Berlin"], ["2", "Paris"], ["3", "Rome"]],
        name="source",
    )


@pytest.fixture
def target(make_table):
    return make_table(
        ["town", "key"],
        [["Berlin", "1"], ["Rome", "2"], ["Madrid", "4"]],
        name="target",
    )


class TestMatchInstances:
    """Tests for match_instances."""

    def test_value_overlap(self, source, target):
        """Test that columns sharing values are similar."""
        similarities = match_instances(source, target)

        assert similarities.matrix.shape == (2, 2)
        assert similarities.similarity("id", "key") == pytest.approx(0.5)
        assert similarities.similarity("city", "town") == pytest.approx(0.5)
        assert similarities.similarity("id", "town") == 0.0

    def test_custom_measure(self, source, target):
        """Test that the measure can be replaced."""
        similarities = match_instances(source, target, measure=Levenshtein())
        assert similarities.similarity("id", "key") == pytest.approx(2 / 3)

    def test_unknown_attribute(self, source, target):
        """Test that looking up a missing attribute raises."""
        with pytest.raises(KeyError):
            match_instances(source, target).similarity("nope", "key")

    def test_shape_checked(self, source, target):
        """Test that the matrix must fit both schemas."""
        with pytest.raises(StructuralMismatchError):
            SimilarityMatrix(np.zeros((3, 2)), source, target)


class TestSelectCorrespondences:
    """Tests for select_correspondences."""

    def test_one_to_one_assignment(self, source, target):
        """Test that each attribute is matched at most once."""
        correspondences = select_correspondences(match_instances(source, target))

        assert isinstance(correspondences, CorrespondenceMatrix)
        assert correspondences.matrix.tolist() == [[0, 1], [1, 0]]
        assert list(correspondences.correspondences()) == [
            ("id", "key", pytest.approx(0.5)),
            ("city", "town", pytest.approx(0.5)),
        ]

    def test_maximises_total_similarity(self, make_table):
        """Test that the global optimum beats greedy choices."""
        source = make_table(["a", "b"], [])
        target = make_table(["x", "y"], [])
        # Greedy would take a-x (0.9) and be left with b-y (0.1)
        matrix = np.array([[0.9, 0.8], [0.8, 0.1]])
        correspondences = select_correspondences(SimilarityMatrix(matrix, source, target))
        assert correspondences.matrix.tolist() == [[0, 1], [1, 0]]

    def test_min_similarity_filters(self, source, target):
        """Test that weak assignments are dropped."""
        correspondences = select_correspondences(
            match_instances(source, target), min_similarity=0.6
        )
        assert correspondences.matrix.sum() == 0
        assert list(correspondences.correspondences()) == []

    def test_rectangular_schemas(self, make_table, target):
        """Test that surplus attributes stay unmatched."""
        wide = make_table(["k", "t", "extra"], [["1", "Berlin", "z"]], name="wide")
        correspondences = select_correspondences(match_instances(wide, target))

        assert correspondences.matrix.shape == (3, 2)
        assert correspondences.matrix.sum(axis=0).tolist() == [1, 1]
        assert correspondences.matrix.sum(axis=1).max() <= 1

    def test_empty_schema(self, make_table, target):
        """Test that a schema without attributes yields no correspondences."""
        empty = make_table([], [], name="empty")
        correspondences = select_correspondences(match_instances(empty, target))
        assert correspondences.matrix.shape == (0, 2)
        assert list(correspondences.correspondences()) == []
