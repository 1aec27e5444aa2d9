"""Common interface for string similarity measures."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

Tokens = Sequence[str]


@runtime_checkable
class SimilarityMeasure(Protocol):
    """Similarity in [0, 1] between two strings or two token lists."""

    def calculate(self, left: str | Tokens | None, right: str | Tokens | None) -> float: ...
