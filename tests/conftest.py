"""Pytest fixtures for tabprint tests."""

import pytest

from tabprint import Table


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep a developer's TABPRINT_LINE_TERMINATOR from leaking into tests."""
    monkeypatch.delenv("TABPRINT_LINE_TERMINATOR", raising=False)


@pytest.fixture
def people() -> Table:
    """Two-column table with two rows."""
    tab = Table(["Name", "Age"])
    tab.add_row(["Alice", "30"])
    tab.add_row(["Bob", "7"])
    return tab


@pytest.fixture
def people_lines() -> list[str]:
    """Expected rendering of the ``people`` table."""
    return [
        "+-------+-----+",
        "| Name  | Age |",
        "+-------+-----+",
        "| Alice | 30  |",
        "+-------+-----+",
        "| Bob   | 7   |",
        "+-------+-----+",
    ]
