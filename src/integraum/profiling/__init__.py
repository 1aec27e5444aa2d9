"""Data profiling: unique column combinations and inclusion dependencies."""

from integraum.profiling.inclusion import (
    InclusionDependency,
    discover_inclusion_dependencies,
)
from integraum.profiling.ucc import UCC, UCCEngine, UCCProfileResult, profile_uccs

__all__ = [
    "InclusionDependency",
    "UCC",
    "UCCEngine",
    "UCCProfileResult",
    "discover_inclusion_dependencies",
    "profile_uccs",
]
