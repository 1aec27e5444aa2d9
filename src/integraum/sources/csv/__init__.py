"""CSV source loading."""

from integraum.sources.csv.loader import load_csv, load_csv_directory

__all__ = ["load_csv", "load_csv_directory"]
