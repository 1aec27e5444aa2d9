"""Candidate validation strategies for the UCC search.

The engine owns candidate generation and pruning; a validator only decides
whether one candidate is unique. Swapping the validator never changes which
candidates are looked at, so every strategy yields the same result set.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce

from integraum.core.models import Table
from integraum.profiling.ucc.attributes import AttributeCombination
from integraum.profiling.ucc.partition import PartitionIndex, normalize_cell


@dataclass(frozen=True)
class Validation:
    """Outcome of validating one candidate."""

    combination: AttributeCombination
    unique: bool
    partition: PartitionIndex | None = None


class CandidateValidator(ABC):
    """Decides uniqueness of lattice candidates."""

    name: str

    def seed(self, table: Table, index: int) -> PartitionIndex:
        """Build the single-column partition for one attribute."""
        combination = AttributeCombination.from_singleton(index)
        return PartitionIndex.from_column(combination, table.column(index))

    @abstractmethod
    def validate(
        self,
        table: Table,
        candidate: AttributeCombination,
        parent: PartitionIndex | None,
        columns: Mapping[int, PartitionIndex],
    ) -> Validation:
        """Validate ``candidate``.

        Args:
            table: Table being profiled
            candidate: Combination to check
            parent: Partition of the frontier node the candidate extends, if kept
            columns: Single-column partitions keyed by column index
        """


class PartitionValidator(CandidateValidator):
    """Validates by refining partitions instead of rescanning values."""

    name = "partition"

    def validate(
        self,
        table: Table,
        candidate: AttributeCombination,
        parent: PartitionIndex | None,
        columns: Mapping[int, PartitionIndex],
    ) -> Validation:
        if parent is not None and parent.combination.is_strict_subset_of(candidate):
            partition = parent
            missing = [i for i in candidate if i not in parent.combination]
        else:
            first, *missing = candidate.indices
            partition = columns[first]

        partition = reduce(lambda acc, index: acc.intersect(columns[index]), missing, partition)
        return Validation(candidate, partition.is_unique(), partition)


class HashValidator(CandidateValidator):
    """Validates by hashing the projected rows of every candidate."""

    name = "hash"

    def validate(
        self,
        table: Table,
        candidate: AttributeCombination,
        parent: PartitionIndex | None,
        columns: Mapping[int, PartitionIndex],
    ) -> Validation:
        for index in candidate:
            table.check_column(index)

        seen: set[tuple[str, ...]] = set()
        for row in table.rows:
            key = tuple(normalize_cell(row[index]) for index in candidate)
            if key in seen:
                return Validation(candidate, False)
            seen.add(key)
        return Validation(candidate, True)


def get_validator(name: str) -> CandidateValidator:
    """Look up a validation strategy by name."""
    validators: dict[str, type[CandidateValidator]] = {
        PartitionValidator.name: PartitionValidator,
        HashValidator.name: HashValidator,
    }
    try:
        return validators[name]()
    except KeyError:
        raise ValueError(
            f"Unknown UCC validation strategy {name!r}; expected one of {sorted(validators)}"
        ) from None
