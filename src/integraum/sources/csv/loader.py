"""CSV file loader - untyped source read as VARCHAR.

CSV files are untyped: every cell is loaded as text through DuckDB so no value
is altered by type sniffing. Empty fields become missing cells.
"""

from __future__ import annotations

import time
from pathlib import Path

import duckdb

from integraum.core.config import Settings, get_settings
from integraum.core.logging import get_logger
from integraum.core.models import Result, Table

logger = get_logger(__name__)


def _sql_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def load_csv(
    path: str | Path,
    name: str | None = None,
    settings: Settings | None = None,
) -> Result[Table]:
    """Load a delimited text file into an in-memory Table.

    Args:
        path: CSV file location
        name: Table name (defaults to the file stem)
        settings: Delimiter, quote and header configuration

    Returns:
        Result containing the Table
    """
    settings = settings or get_settings()
    path = Path(path)
    if not path.exists():
        return Result.fail(f"CSV file not found: {path}")

    table_name = name or path.stem
    start_time = time.time()

    sql = f"""
        SELECT * FROM read_csv(
            {_sql_literal(str(path))},
            header = {"true" if settings.csv_header else "false"},
            delim = {_sql_literal(settings.csv_delimiter)},
            quote = {_sql_literal(settings.csv_quote)},
            all_varchar = true,
            auto_detect = true
        )
    """

    try:
        conn = duckdb.connect(":memory:")
        try:
            cursor = conn.execute(sql)
            attributes = [column[0] for column in cursor.description]
            rows = cursor.fetchall()
        finally:
            conn.close()
    except duckdb.Error as e:
        return Result.fail(f"Failed to read CSV {path}: {e}")

    table = Table(table_name, attributes, rows)
    logger.info(
        "csv_loaded",
        table=table_name,
        attributes=table.num_attributes,
        rows=table.num_rows,
        duration_seconds=round(time.time() - start_time, 4),
    )
    return Result.ok(table)


def load_csv_directory(
    directory: str | Path,
    settings: Settings | None = None,
) -> Result[list[Table]]:
    """Load every ``*.csv`` file of a directory, ordered by file name."""
    directory = Path(directory)
    if not directory.is_dir():
        return Result.fail(f"Not a directory: {directory}")

    tables: list[Table] = []
    warnings: list[str] = []
    for path in sorted(directory.glob("*.csv")):
        result = load_csv(path, settings=settings)
        if result.success and result.value is not None:
            tables.append(result.value)
        elif result.error:
            warnings.append(result.error)

    if not tables:
        return Result.fail(f"No readable CSV files in {directory}")
    return Result.ok(tables, warnings=warnings)
