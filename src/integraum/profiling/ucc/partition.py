"""Position list indexes (stripped partitions).

A PartitionIndex groups row ids that agree on the values of a column
combination. Only classes with at least two rows are kept: a row that is alone
in its class can never collide again under any refinement, so uniqueness only
depends on the retained classes.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

from integraum.core.exceptions import StructuralMismatchError
from integraum.core.models import Cell
from integraum.profiling.ucc.attributes import AttributeCombination


def normalize_cell(value: Cell) -> str:
    """Trim incidental whitespace; missing cells compare equal to ""."""
    if value is None:
        return ""
    return value.strip()


class PartitionIndex:
    """Stripped partition of row ids for one attribute combination."""

    __slots__ = ("combination", "classes", "num_rows")

    def __init__(
        self,
        combination: AttributeCombination,
        classes: Sequence[Sequence[int]],
        num_rows: int,
    ):
        self.combination = combination
        self.classes: tuple[tuple[int, ...], ...] = tuple(
            tuple(members) for members in classes if len(members) > 1
        )
        self.num_rows = num_rows

    @classmethod
    def from_column(
        cls, combination: AttributeCombination, values: Sequence[Cell]
    ) -> PartitionIndex:
        """Group row ids by the normalised values of a single column."""
        if combination.size() != 1:
            raise ValueError(f"from_column expects a single column, got {combination!r}")

        groups: dict[str, list[int]] = defaultdict(list)
        for row_id, value in enumerate(values):
            groups[normalize_cell(value)].append(row_id)
        return cls(combination, list(groups.values()), len(values))

    @classmethod
    def from_columns(
        cls, combination: AttributeCombination, columns: Sequence[Sequence[Cell]]
    ) -> PartitionIndex:
        """Group row ids by the combined values of several columns.

        ``columns`` holds one value sequence per index of ``combination``, in
        ascending index order.
        """
        if len(columns) != combination.size():
            raise StructuralMismatchError(
                f"Expected {combination.size()} columns for {combination!r}, got {len(columns)}"
            )
        lengths = {len(column) for column in columns}
        if len(lengths) > 1:
            raise StructuralMismatchError(f"Columns differ in length: {sorted(lengths)}")
        num_rows = lengths.pop() if lengths else 0

        groups: dict[tuple[str, ...], list[int]] = defaultdict(list)
        for row_id, row in enumerate(zip(*columns, strict=True)):
            groups[tuple(normalize_cell(value) for value in row)].append(row_id)
        return cls(combination, list(groups.values()), num_rows)

    def intersect(self, other: PartitionIndex) -> PartitionIndex:
        """Refine this partition by the class membership of ``other``.

        Runs in time linear in the rows covered by both partitions: ``other`` is
        turned into a row -> class probe table, then every class here is split by
        probing its rows. Rows absent from the probe table are singletons in
        ``other`` and therefore singletons in the result.
        """
        if self.num_rows != other.num_rows:
            raise StructuralMismatchError(
                f"Cannot intersect partitions over {self.num_rows} and {other.num_rows} rows"
            )

        probe: dict[int, int] = {}
        for class_id, members in enumerate(other.classes):
            for row_id in members:
                probe[row_id] = class_id

        refined: list[list[int]] = []
        for members in self.classes:
            split: dict[int, list[int]] = defaultdict(list)
            for row_id in members:
                class_id = probe.get(row_id)
                if class_id is not None:
                    split[class_id].append(row_id)
            refined.extend(group for group in split.values() if len(group) > 1)

        return PartitionIndex(self.combination.union(other.combination), refined, self.num_rows)

    def is_unique(self) -> bool:
        """True when no two rows share a value combination."""
        return not self.classes

    @property
    def key_error(self) -> int:
        """Rows that would have to be removed to make the combination unique."""
        return sum(len(members) for members in self.classes) - len(self.classes)

    def canonical_classes(self) -> frozenset[frozenset[int]]:
        """Order-independent view of the classes, used for comparisons."""
        return frozenset(frozenset(members) for members in self.classes)

    def __repr__(self) -> str:
        return (
            f"PartitionIndex({self.combination!r}, classes={len(self.classes)}, "
            f"rows={self.num_rows})"
        )
