"""Schema matching models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from integraum.core.exceptions import StructuralMismatchError
from integraum.core.models import Table


def _check_shape(matrix: np.ndarray, source: Table, target: Table) -> None:
    expected = (source.num_attributes, target.num_attributes)
    if matrix.shape != expected:
        raise StructuralMismatchError(
            f"Matrix shape {matrix.shape} does not match attribute counts {expected}"
        )


@dataclass(frozen=True, eq=False)
class SimilarityMatrix:
    """Attribute-to-attribute similarities; rows are source, columns target attributes."""

    matrix: np.ndarray
    source: Table
    target: Table

    def __post_init__(self) -> None:
        _check_shape(self.matrix, self.source, self.target)

    def similarity(self, source_attribute: str, target_attribute: str) -> float:
        i = self.source.attribute_index(source_attribute)
        j = self.target.attribute_index(target_attribute)
        return float(self.matrix[i, j])


@dataclass(frozen=True, eq=False)
class CorrespondenceMatrix:
    """Binary matrix marking the selected attribute correspondences."""

    matrix: np.ndarray
    similarities: SimilarityMatrix

    def __post_init__(self) -> None:
        _check_shape(self.matrix, self.source, self.target)

    @property
    def source(self) -> Table:
        return self.similarities.source

    @property
    def target(self) -> Table:
        return self.similarities.target

    def correspondences(self) -> Iterator[tuple[str, str, float]]:
        """Selected (source attribute, target attribute, similarity) triples."""
        for i, j in zip(*np.nonzero(self.matrix), strict=True):
            yield (
                self.source.attributes[i],
                self.target.attributes[j],
                float(self.similarities.matrix[i, j]),
            )
