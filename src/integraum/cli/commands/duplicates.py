"""Duplicates command - detect near-duplicate records."""

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
from integraum.duplicates import (
    detect_duplicates,
    suggest_record_comparator,
    transitive_closure,
)
from integraum.similarity import Tokenizer


def duplicates(
    path: CsvFileArg,
    keys: Annotated[
        list[str] | None,
        typer.Option("--key", "-k", help="Sorting key attribute (repeatable, default: all)"),
    ] = None,
    window: Annotated[
        int | None,
        typer.Option("--window", help="Sorted neighbourhood window size"),
    ] = None,
    threshold: Annotated[
        float | None,
        typer.Option("--threshold", help="Record similarity counted as duplicate"),
    ] = None,
    closure: Annotated[
        bool,
        typer.Option("--closure/--no-closure", help="Add transitively implied pairs"),
    ] = True,
    delimiter: DelimiterOption = None,
    no_header: NoHeaderFlag = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Detect duplicate records with the Sorted Neighbourhood Method.

    Examples:

        integraum duplicates data/restaurants.csv --key name --key city

        integraum duplicates data/restaurants.csv --window 10 --json
    """
    setup_logging(verbose)
    settings = cli_settings(
        delimiter,
        no_header,
        duplicate_window_size=window,
        duplicate_threshold=threshold,
    )
    table = load_table_or_exit(path, settings)

    try:
        sorting_keys = (
            [table.attribute_index(key) for key in keys]
            if keys
            else list(range(table.num_attributes))
        )
    except KeyError as e:
        console.print(f"[red]{e.args[0]}[/red]")
        raise typer.Exit(1) from None

    comparator = suggest_record_comparator(
        table,
        short_value_length=settings.duplicate_short_value_length,
        threshold=settings.duplicate_threshold,
        tokenizer=Tokenizer.from_settings(settings),
    )
    found = detect_duplicates(table, sorting_keys, settings.duplicate_window_size, comparator)
    if closure:
        found = transitive_closure(found)
    ordered = sorted(found)

    if json_output:
        typer.echo(json.dumps([duplicate.to_dict() for duplicate in ordered], indent=2))
        return

    if not ordered:
        console.print("[yellow]No duplicates found.[/yellow]")
        return

    rich_table = RichTable(show_header=True, header_style="bold")
    rich_table.add_column("Row 1", justify="right")
    rich_table.add_column("Row 2", justify="right")
    rich_table.add_column("Similarity", justify="right")
    rich_table.add_column("Inferred")
    for duplicate in ordered:
        rich_table.add_row(
            str(duplicate.index1),
            str(duplicate.index2),
            f"{duplicate.similarity:.3f}",
            "yes" if duplicate.inferred else "",
        )
    console.print(rich_table)
