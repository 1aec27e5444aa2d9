"""Duplicate detection models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, order=True)
class Duplicate:
    """An unordered pair of row indices classified as the same entity.

    The pair is stored with ``index1 < index2`` and two duplicates are equal when
    they name the same rows, whatever their similarity.
    """

    index1: int
    index2: int
    similarity: float = field(default=1.0, compare=False)
    inferred: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if self.index1 == self.index2:
            raise ValueError(f"A record cannot duplicate itself (row {self.index1})")
        if self.index1 > self.index2:
            first, second = self.index2, self.index1
            object.__setattr__(self, "index1", first)
            object.__setattr__(self, "index2", second)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index1": self.index1,
            "index2": self.index2,
            "similarity": self.similarity,
            "inferred": self.inferred,
        }
