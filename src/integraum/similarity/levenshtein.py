"""Edit-distance similarity.

Similarity is ``1 - distance / max(len(left), len(right))``. The same dynamic
programme works on strings (characters) and token lists (tokens).
"""

from collections.abc import Sequence
from dataclasses import dataclass

from integraum.similarity.base import Tokens


def edit_distance(left: Sequence[str], right: Sequence[str], damerau: bool = False) -> int:
    """Levenshtein distance, optionally with adjacent transpositions.

    The Damerau variant is the optimal string alignment distance: a transposed
    pair counts as one edit, and no substring is edited twice.
    """
    if len(left) < len(right):
        left, right = right, left
    if not right:
        return len(left)

    before_previous: list[int] = []
    previous = list(range(len(right) + 1))
    for i in range(1, len(left) + 1):
        current = [i] + [0] * len(right)
        for j in range(1, len(right) + 1):
            cost = 0 if left[i - 1] == right[j - 1] else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
            if (
                damerau
                and i > 1
                and j > 1
                and left[i - 1] == right[j - 2]
                and left[i - 2] == right[j - 1]
            ):
                current[j] = min(current[j], before_previous[j - 2] + 1)
        before_previous, previous = previous, current
    return previous[-1]


def levenshtein_similarity(
    left: Sequence[str] | None, right: Sequence[str] | None, damerau: bool = False
) -> float:
    """Normalised edit similarity in [0, 1]; two empty inputs are identical."""
    left = left or ""
    right = right or ""
    longest = max(len(left), len(right))
    if longest == 0:
        return 1.0
    return 1.0 - edit_distance(left, right, damerau) / longest


@dataclass(frozen=True)
class Levenshtein:
    """(Damerau-)Levenshtein similarity over strings or token lists."""

    damerau: bool = False

    def calculate(self, left: str | Tokens | None, right: str | Tokens | None) -> float:
        return levenshtein_similarity(left, right, self.damerau)
