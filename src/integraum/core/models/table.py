"""In-memory relation consumed by every profiler.

A Table is an immutable snapshot: attribute names plus rows of string cells.
Cells may be ``None`` for missing values; profilers decide how to normalise them.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cached_property

from integraum.core.exceptions import InvalidColumnError, StructuralMismatchError

Cell = str | None
Row = tuple[Cell, ...]


class Table:
    """Immutable relation with named attributes and string rows."""

    def __init__(self, name: str, attributes: Sequence[str], rows: Sequence[Sequence[Cell]]):
        attributes = tuple(attributes)
        if len(set(attributes)) != len(attributes):
            raise StructuralMismatchError(f"Table {name!r} has duplicate attribute names")

        frozen_rows = tuple(tuple(row) for row in rows)
        width = len(attributes)
        for position, row in enumerate(frozen_rows):
            if len(row) != width:
                raise StructuralMismatchError(
                    f"Row {position} of table {name!r} has {len(row)} cells, expected {width}"
                )

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "attributes", attributes)
        object.__setattr__(self, "rows", frozen_rows)

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError("Table is immutable")

    def __repr__(self) -> str:
        return (
            f"Table(name={self.name!r}, attributes={len(self.attributes)}, "
            f"rows={len(self.rows)})"
        )

    @classmethod
    def from_records(
        cls, name: str, attributes: Sequence[str], records: Iterable[Sequence[Cell]]
    ) -> Table:
        """Build a table from any iterable of records."""
        return cls(name, attributes, list(records))

    @property
    def num_attributes(self) -> int:
        return len(self.attributes)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @cached_property
    def columns(self) -> tuple[tuple[Cell, ...], ...]:
        """Column-major view of the rows."""
        if not self.rows:
            return tuple(() for _ in self.attributes)
        return tuple(zip(*self.rows, strict=True))

    def check_column(self, index: int) -> None:
        """Fail fast on a column index outside the attribute range."""
        if not 0 <= index < len(self.attributes):
            raise InvalidColumnError(index, len(self.attributes))

    def column(self, index: int) -> tuple[Cell, ...]:
        """Values of one column in row order."""
        self.check_column(index)
        return self.columns[index]

    def row(self, index: int) -> Row:
        return self.rows[index]

    def attribute_index(self, name: str) -> int:
        """Position of an attribute by name."""
        try:
            return self.attributes.index(name)
        except ValueError:
            raise KeyError(f"Table {self.name!r} has no attribute {name!r}") from None
