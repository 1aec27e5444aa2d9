"""UCC command - discover minimal unique column combinations."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.table import Table as RichTable

from integraum.cli.common import (
    CsvFileArg,
    DelimiterOption,
    JsonFlag,
    NoHeaderFlag,
    VerboseOption,
    cli_settings,
    console,
    load_table_or_exit,
    setup_logging,
)
from integraum.profiling.ucc import profile_uccs


def uccs(
    path: CsvFileArg,
    delimiter: DelimiterOption = None,
    no_header: NoHeaderFlag = False,
    max_size: Annotated[
        int | None,
        typer.Option("--max-size", help="Largest combination to explore (0 = all columns)"),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-w", help="Threads validating one lattice level"),
    ] = None,
    strategy: Annotated[
        str | None,
        typer.Option("--strategy", help="Validation strategy: partition or hash"),
    ] = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Discover the minimal unique column combinations (candidate keys) of a table.

    Examples:

        integraum uccs data/tpch_nation.csv

        integraum uccs data/orders.csv --max-size 3 --json
    """
    setup_logging(verbose)
    settings = cli_settings(
        delimiter,
        no_header,
        ucc_max_size=max_size,
        ucc_max_workers=workers,
        ucc_strategy=strategy,
    )

    table = load_table_or_exit(path, settings)
    result = profile_uccs(table, settings)
    if not result.success:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)
    profile = result.unwrap()

    if json_output:
        typer.echo(json.dumps(profile.model_dump(mode="json"), indent=2))
        return

    console.print(
        f"\n[bold]{profile.table_name}[/bold]: {profile.row_count} rows, "
        f"{len(profile.attributes)} attributes"
    )
    if not profile.uccs:
        console.print("[yellow]No unique column combination found.[/yellow]")
        return

    rich_table = RichTable(show_header=True, header_style="bold")
    rich_table.add_column("#", justify="right")
    rich_table.add_column("Size", justify="right")
    rich_table.add_column("Columns")
    for position, columns in enumerate(profile.uccs, start=1):
        rich_table.add_row(str(position), str(len(columns)), ", ".join(columns))
    console.print(rich_table)
    console.print(
        f"[dim]{profile.levels} levels, {profile.candidates_validated} candidates validated, "
        f"{profile.candidates_pruned} pruned in {profile.duration_seconds:.3f}s[/dim]"
    )
