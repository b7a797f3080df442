"""
Shorthand constructors for literal tables.

    from tabprint import table, ptable

    tab = table(["Title1", "Title2", "Title3"])
    tab = table(
        ["Title1", "Title2", "Title3"],
        ["Element1", "Element2", "Element3"],
        [1, 2, 3],
    )

Every title and element is converted with ``str()``. A row of the wrong
length is treated as a programming error and raises
``TableConstructionError`` instead of the recoverable ``RowArityError``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .exceptions import RowArityError, TableConstructionError
from .renderer import print_table
from .table import Table


def table(titles: Iterable[Any], *rows: Iterable[Any]) -> Table:
    """
    Create a table from titles and optional initial rows.

    Args:
        titles: Column titles
        *rows: Initial rows, one value per column

    Returns:
        The populated table

    Raises:
        TableConstructionError: If no titles are given or a row has the
            wrong number of values
    """
    try:
        tab = Table(titles)
    except ValueError as e:
        raise TableConstructionError(str(e)) from e
    for row in rows:
        try:
            tab.add_row(row)
        except RowArityError as e:
            raise TableConstructionError(str(e)) from e
    return tab


def ptable(titles: Iterable[Any], *rows: Iterable[Any]) -> Table:
    """Create a table like ``table()``, print it to standard output, and return it."""
    tab = table(titles, *rows)
    print_table(tab)
    return tab
