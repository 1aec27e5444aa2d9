"""Shared models: the Result type and the in-memory Table."""

from integraum.core.models.base import Result
from integraum.core.models.table import Cell, Row, Table

__all__ = [
    "Cell",
    "Result",
    "Row",
    "Table",
]
