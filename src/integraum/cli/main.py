"""Main CLI application entry point."""

from __future__ import annotations

import typer

from integraum.cli.commands import duplicates, inds, match, uccs

app = typer.Typer(
    name="integraum",
    help="integraum - discover keys, inclusion dependencies, duplicates and schema matches.",
    no_args_is_help=True,
)

# Register commands
app.command()(uccs.uccs)
app.command()(inds.inds)
app.command()(duplicates.duplicates)
app.command()(match.match)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
