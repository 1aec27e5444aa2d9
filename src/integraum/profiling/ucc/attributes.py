"""Immutable sets of column indices.

Combinations are the nodes of the attribute lattice. They compare and hash by
their index set, so the same combination reached through different generation
paths collapses to one entry in a set or dict.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from integraum.core.models import Table


class AttributeCombination:
    """A non-empty, order-irrelevant set of column indices."""

    __slots__ = ("_indices", "_hash")

    def __init__(self, indices: Iterable[int]):
        unique = sorted(set(indices))
        if not unique:
            raise ValueError("An attribute combination needs at least one column")
        if unique[0] < 0:
            raise ValueError(f"Column indices must be non-negative, got {unique[0]}")
        self._indices: tuple[int, ...] = tuple(unique)
        self._hash = hash(self._indices)

    @classmethod
    def of(cls, *indices: int) -> AttributeCombination:
        return cls(indices)

    @classmethod
    def from_singleton(cls, index: int) -> AttributeCombination:
        return cls((index,))

    @property
    def indices(self) -> tuple[int, ...]:
        """Indices in ascending order."""
        return self._indices

    @property
    def last(self) -> int:
        """Largest index."""
        return self._indices[-1]

    def size(self) -> int:
        return len(self._indices)

    def union(self, other: AttributeCombination) -> AttributeCombination:
        return AttributeCombination(self._indices + other._indices)

    def remove(self, index: int) -> AttributeCombination:
        """Combination without ``index``; unchanged copy when it is absent.

        Removing the only column is rejected since combinations are never empty.
        """
        if index not in self._indices:
            return AttributeCombination(self._indices)
        return AttributeCombination(i for i in self._indices if i != index)

    def contains(self, index: int) -> bool:
        return index in self._indices

    def contains_all(self, other: AttributeCombination) -> bool:
        return set(other._indices).issubset(self._indices)

    def is_subset_of(self, other: AttributeCombination) -> bool:
        return other.contains_all(self)

    def is_strict_subset_of(self, other: AttributeCombination) -> bool:
        return len(self._indices) < len(other._indices) and self.is_subset_of(other)

    def subsets_one_smaller(self) -> Iterator[AttributeCombination]:
        """All subsets with exactly one column removed, in index order."""
        if len(self._indices) < 2:
            return
        for index in self._indices:
            yield self.remove(index)

    def names(self, table: Table) -> list[str]:
        """Attribute names of the combination in index order."""
        for index in self._indices:
            table.check_column(index)
        return [table.attributes[index] for index in self._indices]

    def sort_key(self) -> tuple[int, tuple[int, ...]]:
        """Key ordering combinations by size, then lexicographically."""
        return len(self._indices), self._indices

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self._indices)

    def __contains__(self, index: object) -> bool:
        return index in self._indices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeCombination):
            return NotImplemented
        return self._indices == other._indices

    def __lt__(self, other: AttributeCombination) -> bool:
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"AttributeCombination{set(self._indices)}"
