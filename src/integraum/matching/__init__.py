"""Schema matching: instance-based similarities and one-to-one assignment."""

from integraum.matching.assignment import select_correspondences
from integraum.matching.instance import match_instances
from integraum.matching.models import CorrespondenceMatrix, SimilarityMatrix

__all__ = [
    "CorrespondenceMatrix",
    "SimilarityMatrix",
    "match_instances",
    "select_correspondences",
]
