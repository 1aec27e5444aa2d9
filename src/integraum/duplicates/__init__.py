"""Duplicate record detection: sorted neighbourhood plus transitive closure."""

from integraum.duplicates.closure import UnionFind, transitive_closure
from integraum.duplicates.comparator import (
    AttributeSimilarity,
    RecordComparator,
    suggest_record_comparator,
)
from integraum.duplicates.models import Duplicate
from integraum.duplicates.sorted_neighborhood import detect_duplicates

__all__ = [
    # Main entry points
    "detect_duplicates",
    "transitive_closure",
    "suggest_record_comparator",
    # Components
    "AttributeSimilarity",
    "RecordComparator",
    "UnionFind",
    # Models
    "Duplicate",
]
