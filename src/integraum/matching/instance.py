"""First-line schema matching on instance data.

Each source column is compared with each target column through the Jaccard
similarity of their distinct value sets.
"""

from __future__ import annotations

import numpy as np

from integraum.core.logging import get_logger
from integraum.core.models import Table
from integraum.matching.models import SimilarityMatrix
from integraum.profiling.inclusion import column_value_set
from integraum.similarity import Jaccard, SimilarityMeasure

logger = get_logger(__name__)


def match_instances(
    source: Table,
    target: Table,
    measure: SimilarityMeasure | None = None,
) -> SimilarityMatrix:
    """Build the source x target similarity matrix from column values.

    Args:
        source: Table providing the matrix rows
        target: Table providing the matrix columns
        measure: Measure applied to the two sorted value lists (set Jaccard by default)
    """
    measure = measure or Jaccard(bag=False)
    source_values = [
        sorted(column_value_set(source.column(i))) for i in range(source.num_attributes)
    ]
    target_values = [
        sorted(column_value_set(target.column(j))) for j in range(target.num_attributes)
    ]

    matrix = np.zeros((source.num_attributes, target.num_attributes), dtype=np.float64)
    for i, left in enumerate(source_values):
        for j, right in enumerate(target_values):
            matrix[i, j] = measure.calculate(left, right)

    logger.debug(
        "similarity_matrix_computed",
        source=source.name,
        target=target.name,
        shape=list(matrix.shape),
    )
    return SimilarityMatrix(matrix, source, target)
