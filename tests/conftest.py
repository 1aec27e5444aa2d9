"""Shared pytest fixtures for all tests."""

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from integraum.core.config import Settings
from integraum.core.models import Table


@pytest.fixture
def make_table() -> Callable[..., Table]:
    """Factory building a Table from attribute names and rows."""

    def _make(
        attributes: Sequence[str],
        rows: Sequence[Sequence[str | None]],
        name: str = "test_table",
    ) -> Table:
        return Table(name, attributes, rows)

    return _make


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write CSV content into the test's temporary directory."""

    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def nation_table() -> Table:
    """Small nation table in the shape of the TPC-H nation relation."""
    return Table(
        "tpch_nation",
        ["n_nationkey", "n_name", "n_regionkey", "n_comment"],
        [
            ["0", "ALGERIA", "0", "final deposits"],
            ["1", "ARGENTINA", "1", "idly pending"],
            ["2", "BRAZIL", "1", "final deposits"],
            ["3", "CANADA", "1", "slyly express"],
            ["4", "EGYPT", "4", "idly pending"],
        ],
    )
