"""Record comparison for duplicate detection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from integraum.core.exceptions import InvalidColumnError
from integraum.core.logging import get_logger
from integraum.core.models import Cell, Table
from integraum.similarity import Jaccard, Levenshtein, SimilarityMeasure, Tokenizer

logger = get_logger(__name__)

SHORT_VALUE_WEIGHT = 0.1
LONG_VALUE_WEIGHT = 0.2


@dataclass(frozen=True)
class AttributeSimilarity:
    """How one attribute contributes to a record similarity."""

    index: int
    measure: SimilarityMeasure
    weight: float = 1.0


class RecordComparator:
    """Weighted mean of per-attribute similarities with a duplicate threshold."""

    def __init__(self, attribute_similarities: Sequence[AttributeSimilarity], threshold: float):
        if not attribute_similarities:
            raise ValueError("RecordComparator needs at least one attribute similarity")
        if any(attribute.weight < 0 for attribute in attribute_similarities):
            raise ValueError("Attribute weights must be non-negative")
        total_weight = sum(attribute.weight for attribute in attribute_similarities)
        if total_weight <= 0:
            raise ValueError("At least one attribute weight must be positive")

        self.attribute_similarities = tuple(attribute_similarities)
        self.threshold = threshold
        self._total_weight = total_weight

    def compare(self, record1: Sequence[Cell], record2: Sequence[Cell]) -> float:
        """Similarity of two records in [0, 1]."""
        score = 0.0
        for attribute in self.attribute_similarities:
            for record in (record1, record2):
                if not 0 <= attribute.index < len(record):
                    raise InvalidColumnError(attribute.index, len(record))
            left = (record1[attribute.index] or "").strip()
            right = (record2[attribute.index] or "").strip()
            score += attribute.weight * attribute.measure.calculate(left, right)
        return score / self._total_weight

    def is_duplicate(self, similarity: float) -> bool:
        return similarity >= self.threshold


def _average_length(values: Sequence[Cell]) -> float:
    lengths = [len(value) for value in values if value is not None]
    return sum(lengths) / len(lengths) if lengths else 0.0


def suggest_record_comparator(
    table: Table,
    short_value_length: int = 10,
    threshold: float = 0.8,
    tokenizer: Tokenizer | None = None,
) -> RecordComparator:
    """Pick a similarity measure per attribute from its average value length.

    Short values (codes, names, dates) are compared by Damerau-Levenshtein;
    longer free text by set Jaccard on q-grams, with twice the weight.
    """
    if table.num_attributes == 0:
        raise ValueError(f"Table {table.name!r} has no attributes to compare")

    tokenizer = tokenizer or Tokenizer(4, padding=True)
    attributes: list[AttributeSimilarity] = []
    for index in range(table.num_attributes):
        if _average_length(table.column(index)) < short_value_length:
            attributes.append(
                AttributeSimilarity(index, Levenshtein(damerau=True), SHORT_VALUE_WEIGHT)
            )
        else:
            attributes.append(
                AttributeSimilarity(index, Jaccard(tokenizer, bag=False), LONG_VALUE_WEIGHT)
            )

    logger.debug(
        "record_comparator_suggested",
        table=table.name,
        edit_distance_attributes=sum(
            isinstance(attribute.measure, Levenshtein) for attribute in attributes
        ),
        threshold=threshold,
    )
    return RecordComparator(attributes, threshold)
