"""Shared CLI utilities and constants."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console

from integraum.core.config import Settings, get_settings
from integraum.core.logging import configure_logging
from integraum.core.models import Table
from integraum.sources import load_csv

# Load .env file from current directory
load_dotenv()

# Shared console instance
console = Console()

# Common type aliases for typer options
CsvFileArg = Annotated[
    Path,
    typer.Argument(
        help="Delimited text file holding the table",
        exists=True,
        dir_okay=False,
        file_okay=True,
        resolve_path=True,
    ),
]

DelimiterOption = Annotated[
    str | None,
    typer.Option(
        "--delimiter",
        "-d",
        help="Field delimiter (defaults to INTEGRAUM_CSV_DELIMITER or ';')",
    ),
]

NoHeaderFlag = Annotated[
    bool,
    typer.Option(
        "--no-header",
        help="Treat the first line as data, not attribute names",
    ),
]

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(verbosity: int = 0, log_format: str | None = None) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2+=DEBUG
        log_format: "console" or "json"; defaults to the configured format
    """
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = "WARNING"

    log_format = log_format or get_settings().log_format
    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
    )


def cli_settings(
    delimiter: str | None = None, no_header: bool = False, **overrides: Any
) -> Settings:
    """Settings with command-line overrides applied on top of the environment.

    Options left at None keep their configured value. Invalid values exit with
    status 2.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    if delimiter is not None:
        values["csv_delimiter"] = delimiter
    if no_header:
        values["csv_header"] = False
    if not values:
        return get_settings()

    try:
        return Settings(**values)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"[red]Invalid option {field}: {error['msg']}[/red]")
        raise typer.Exit(2) from None


def load_table_or_exit(path: Path, settings: Settings) -> Table:
    """Load a CSV file, exiting with status 1 when it cannot be read."""
    result = load_csv(path, settings=settings)
    if not result.success or result.value is None:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)
    return result.value
