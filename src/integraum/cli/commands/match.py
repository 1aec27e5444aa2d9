"""Match command - find attribute correspondences between two tables."""

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
from integraum.matching import match_instances, select_correspondences
from integraum.similarity import LocalitySensitiveHashing


def match(
    source: CsvFileArg,
    target: CsvFileArg,
    min_similarity: Annotated[
        float | None,
        typer.Option("--min-similarity", help="Drop correspondences below this similarity"),
    ] = None,
    approximate: Annotated[
        bool,
        typer.Option("--approximate", help="Estimate value overlap with MinHash signatures"),
    ] = False,
    delimiter: DelimiterOption = None,
    no_header: NoHeaderFlag = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Match the attributes of two tables by their instance values.

    Examples:

        integraum match data/source.csv data/target.csv --min-similarity 0.2

        integraum match data/source.csv data/target.csv --approximate
    """
    setup_logging(verbose)
    settings = cli_settings(delimiter, no_header, match_min_similarity=min_similarity)
    source_table = load_table_or_exit(source, settings)
    target_table = load_table_or_exit(target, settings)

    measure = LocalitySensitiveHashing.from_settings(settings) if approximate else None
    similarities = match_instances(source_table, target_table, measure)
    correspondences = select_correspondences(similarities, settings.match_min_similarity)
    pairs = list(correspondences.correspondences())

    if json_output:
        typer.echo(
            json.dumps(
                [
                    {"source": left, "target": right, "similarity": similarity}
                    for left, right, similarity in pairs
                ],
                indent=2,
            )
        )
        return

    if not pairs:
        console.print("[yellow]No correspondences found.[/yellow]")
        return

    rich_table = RichTable(show_header=True, header_style="bold")
    rich_table.add_column(source_table.name)
    rich_table.add_column(target_table.name)
    rich_table.add_column("Similarity", justify="right")
    for left, right, similarity in pairs:
        rich_table.add_row(left, right, f"{similarity:.3f}")
    console.print(rich_table)
