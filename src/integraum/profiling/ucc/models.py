"""UCC discovery models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from integraum.core.models import Table
from integraum.profiling.ucc.attributes import AttributeCombination


@dataclass(frozen=True)
class UCC:
    """A minimal unique column combination of a table."""

    table: Table
    attributes: AttributeCombination

    @property
    def column_names(self) -> list[str]:
        return self.attributes.names(self.table)

    def to_dict(self) -> dict[str, Any]:
        return {
            "table": self.table.name,
            "columns": self.column_names,
            "indices": list(self.attributes.indices),
        }

    def __str__(self) -> str:
        return f"{self.table.name}[{', '.join(self.column_names)}]"


class UCCProfileResult(BaseModel):
    """Summary of one UCC discovery run."""

    table_name: str
    attributes: list[str] = Field(default_factory=list)
    row_count: int = 0

    uccs: list[list[str]] = Field(default_factory=list)

    strategy: str = "partition"
    levels: int = 0
    candidates_generated: int = 0
    candidates_pruned: int = 0
    candidates_validated: int = 0

    computed_at: datetime | None = None
    duration_seconds: float = 0.0
