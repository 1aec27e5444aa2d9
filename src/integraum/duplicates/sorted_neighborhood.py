"""Sorted Neighbourhood Method.

Each run sorts the records by one sorting key and compares every record with
its successors inside a sliding window. The duplicates of all runs are unioned.
"""

from __future__ import annotations

from collections.abc import Sequence

from integraum.core.logging import get_logger
from integraum.core.models import Table
from integraum.duplicates.comparator import RecordComparator
from integraum.duplicates.models import Duplicate

logger = get_logger(__name__)


def _sort_order(table: Table, key: int) -> list[int]:
    """Row ids ordered by the trimmed value of ``key``; missing values last."""
    column = table.column(key)
    return sorted(
        range(table.num_rows),
        key=lambda row_id: (column[row_id] is None, (column[row_id] or "").strip()),
    )


def detect_duplicates(
    table: Table,
    sorting_keys: Sequence[int],
    window_size: int,
    comparator: RecordComparator,
) -> set[Duplicate]:
    """Find duplicate record pairs with one Sorted Neighbourhood run per key.

    Args:
        table: Table whose rows are compared
        sorting_keys: Attribute indices, one sort-and-window pass each
        window_size: Number of consecutive records compared together
        comparator: Record similarity and duplicate threshold

    Returns:
        All duplicate pairs found by any run
    """
    if window_size < 2:
        raise ValueError(f"window_size must be >= 2, got {window_size}")
    for key in sorting_keys:
        table.check_column(key)

    duplicates: set[Duplicate] = set()
    for key in sorting_keys:
        order = _sort_order(table, key)
        comparisons = 0
        found = 0
        for position, row_id in enumerate(order):
            for other_id in order[position + 1 : position + window_size]:
                pair = tuple(sorted((row_id, other_id)))
                similarity = comparator.compare(table.row(pair[0]), table.row(pair[1]))
                comparisons += 1
                if comparator.is_duplicate(similarity):
                    duplicates.add(Duplicate(pair[0], pair[1], similarity))
                    found += 1

        logger.debug(
            "sorted_neighborhood_run",
            table=table.name,
            sorting_key=table.attributes[key],
            comparisons=comparisons,
            duplicates=found,
        )

    logger.info("duplicates_detected", table=table.name, duplicates=len(duplicates))
    return duplicates
