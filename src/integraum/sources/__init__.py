"""Data sources that produce in-memory Tables."""

from integraum.sources.csv import load_csv, load_csv_directory

__all__ = ["load_csv", "load_csv_directory"]
