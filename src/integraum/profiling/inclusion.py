"""Unary inclusion dependency discovery.

A column A of one table is included in a column B of another table when every
value of A also occurs in B (A ⊆ B). Such pairs are foreign-key candidates.
Values are compared after trimming; missing and empty cells are ignored.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from integraum.core.logging import get_logger
from integraum.core.models import Cell, Table
from integraum.profiling.ucc.partition import normalize_cell

logger = get_logger(__name__)


class InclusionDependency(BaseModel):
    """dependent_table.dependent_column ⊆ referenced_table.referenced_column"""

    model_config = ConfigDict(frozen=True)

    dependent_table: str
    dependent_column: str
    referenced_table: str
    referenced_column: str

    def __str__(self) -> str:
        return (
            f"{self.dependent_table}.{self.dependent_column} ⊆ "
            f"{self.referenced_table}.{self.referenced_column}"
        )


def column_value_set(values: Sequence[Cell]) -> frozenset[str]:
    """Distinct trimmed, non-empty values of a column."""
    normalized = (normalize_cell(value) for value in values)
    return frozenset(value for value in normalized if value)


def discover_inclusion_dependencies(
    tables: Sequence[Table],
    discover_nary: bool = False,
) -> list[InclusionDependency]:
    """Find all non-trivial unary inclusion dependencies between tables.

    Every ordered pair of different tables is checked column by column. Columns
    without any value are skipped as dependents, since an empty set is trivially
    included everywhere.

    Args:
        tables: Tables to compare
        discover_nary: Must be False; n-ary dependencies are not supported

    Returns:
        Inclusion dependencies ordered by dependent, then referenced column
    """
    if discover_nary:
        raise NotImplementedError("n-ary inclusion dependency discovery is not supported")

    names = [table.name for table in tables]
    if len(set(names)) != len(names):
        raise ValueError(f"Table names must be unique, got {names}")

    # Value sets are computed once per column and reused for every pair
    value_sets = {
        table.name: [column_value_set(table.column(i)) for i in range(table.num_attributes)]
        for table in tables
    }

    dependencies: list[InclusionDependency] = []
    for dependent in tables:
        for referenced in tables:
            if dependent.name == referenced.name:
                continue
            for i, dependent_values in enumerate(value_sets[dependent.name]):
                if not dependent_values:
                    continue
                for j, referenced_values in enumerate(value_sets[referenced.name]):
                    if dependent_values <= referenced_values:
                        dependencies.append(
                            InclusionDependency(
                                dependent_table=dependent.name,
                                dependent_column=dependent.attributes[i],
                                referenced_table=referenced.name,
                                referenced_column=referenced.attributes[j],
                            )
                        )

    logger.info(
        "inclusion_dependencies_discovered",
        tables=len(tables),
        dependencies=len(dependencies),
    )
    return dependencies
