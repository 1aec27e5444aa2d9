"""Command line interface."""

from integraum.cli.main import app, main

__all__ = ["app", "main"]
