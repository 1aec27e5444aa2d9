"""IND command - discover unary inclusion dependencies between tables."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table as RichTable

from integraum.cli.common import (
    DelimiterOption,
    JsonFlag,
    NoHeaderFlag,
    VerboseOption,
    cli_settings,
    console,
    load_table_or_exit,
    setup_logging,
)
from integraum.core.models import Table
from integraum.profiling.inclusion import discover_inclusion_dependencies
from integraum.sources import load_csv_directory


def inds(
    paths: Annotated[
        list[Path],
        typer.Argument(
            help="CSV files, or a single directory of CSV files",
            exists=True,
            resolve_path=True,
        ),
    ],
    delimiter: DelimiterOption = None,
    no_header: NoHeaderFlag = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Discover unary inclusion dependencies (foreign-key candidates).

    Examples:

        integraum inds data/tpch_nation.csv data/tpch_region.csv

        integraum inds data/ --json
    """
    setup_logging(verbose)
    settings = cli_settings(delimiter, no_header)

    tables: list[Table]
    if len(paths) == 1 and paths[0].is_dir():
        result = load_csv_directory(paths[0], settings=settings)
        if not result.success:
            console.print(f"[red]{result.error}[/red]")
            raise typer.Exit(1)
        for warning in result.warnings:
            console.print(f"[yellow]{warning}[/yellow]")
        tables = result.unwrap()
    else:
        tables = [load_table_or_exit(path, settings) for path in paths]

    if len(tables) < 2:
        console.print("[yellow]At least two tables are needed.[/yellow]")
        raise typer.Exit(1)

    try:
        dependencies = discover_inclusion_dependencies(tables)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps([ind.model_dump() for ind in dependencies], indent=2))
        return

    if not dependencies:
        console.print("[yellow]No inclusion dependency found.[/yellow]")
        return

    rich_table = RichTable(show_header=True, header_style="bold")
    rich_table.add_column("Dependent")
    rich_table.add_column("")
    rich_table.add_column("Referenced")
    for ind in dependencies:
        rich_table.add_row(
            f"{ind.dependent_table}.{ind.dependent_column}",
            "⊆",
            f"{ind.referenced_table}.{ind.referenced_column}",
        )
    console.print(rich_table)
