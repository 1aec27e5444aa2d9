"""Second-line schema matching.

Turns a similarity matrix into one-to-one correspondences by solving the
maximum-weight bipartite assignment.
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment

from integraum.core.logging import get_logger
from integraum.matching.models import CorrespondenceMatrix, SimilarityMatrix

logger = get_logger(__name__)


def select_correspondences(
    similarities: SimilarityMatrix,
    min_similarity: float = 0.0,
) -> CorrespondenceMatrix:
    """Pick the assignment maximising total similarity.

    Each source and each target attribute takes part in at most one
    correspondence. With differently sized schemas the surplus attributes stay
    unmatched. Assigned pairs below ``min_similarity`` are dropped.
    """
    matrix = similarities.matrix
    correspondence = np.zeros(matrix.shape, dtype=np.int8)

    if matrix.size:
        rows, cols = linear_sum_assignment(1.0 - matrix)
        for i, j in zip(rows, cols, strict=True):
            if matrix[i, j] >= min_similarity:
                correspondence[i, j] = 1

    logger.debug(
        "correspondences_selected",
        source=similarities.source.name,
        target=similarities.target.name,
        correspondences=int(correspondence.sum()),
    )
    return CorrespondenceMatrix(correspondence, similarities)
