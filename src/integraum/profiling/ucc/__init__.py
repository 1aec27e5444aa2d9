"""Unique column combination discovery.

Finds every minimal set of columns whose combined values are pairwise distinct,
walking the attribute lattice level-wise and validating candidates by
partition refinement.
"""

from integraum.profiling.ucc.attributes import AttributeCombination
from integraum.profiling.ucc.engine import Frontier, UCCEngine, profile_uccs
from integraum.profiling.ucc.models import UCC, UCCProfileResult
from integraum.profiling.ucc.partition import PartitionIndex, normalize_cell
from integraum.profiling.ucc.validators import (
    CandidateValidator,
    HashValidator,
    PartitionValidator,
    Validation,
    get_validator,
)

__all__ = [
    # Main entry points
    "UCCEngine",
    "profile_uccs",
    # Lattice structures
    "AttributeCombination",
    "Frontier",
    "PartitionIndex",
    "normalize_cell",
    # Validation strategies
    "CandidateValidator",
    "HashValidator",
    "PartitionValidator",
    "Validation",
    "get_validator",
    # Models
    "UCC",
    "UCCProfileResult",
]
