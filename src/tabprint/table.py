"""
Table data model.

A ``Table`` owns a title row and an ordered, growable list of data rows.
The number of columns is fixed by the titles at construction time and
every stored row always has exactly that many cells.

Rows are addressed by index. ``add_row`` returns the index of the new row
and mutable access goes through ``set_element``, ``set_row`` or the scoped
``edit_row`` context manager, so no caller ever holds a reference into the
table's internal storage.

Example:
    from tabprint import Table

    table = Table(["Name", "Age"])
    idx = table.add_row(["Alice", 30])
    table.set_element(31, column=1, row=idx)
    print(table)
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from .exceptions import ColumnIndexError, RowArityError, RowIndexError
from .models import Row, Separators

logger = logging.getLogger(__name__)


def _to_cells(values: Iterable[Any]) -> Row:
    return [str(value) for value in values]


class Table:
    """A printable table with fixed columns and a variable number of rows."""

    def __init__(self, titles: Iterable[Any]) -> None:
        """
        Create a table whose column count equals the number of titles.

        Args:
            titles: Column titles, converted to display strings with ``str()``

        Raises:
            ValueError: If no titles are given
        """
        self._titles: Row = _to_cells(titles)
        if not self._titles:
            raise ValueError("a table needs at least one column title")
        self._rows: list[Row] = []
        self._separators = Separators()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def column_count(self) -> int:
        """Number of columns, fixed at construction."""
        return len(self._titles)

    @property
    def titles(self) -> tuple[str, ...]:
        return tuple(self._titles)

    @property
    def separators(self) -> Separators:
        return self._separators

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        for row in self._rows:
            yield tuple(row)

    def __repr__(self) -> str:
        return f"Table(titles={self._titles!r}, rows={len(self._rows)})"

    def __str__(self) -> str:
        from .renderer import render_to_string

        return render_to_string(self)

    def copy(self) -> Table:
        """Return an independent copy of this table, rows and separators included."""
        return copy.deepcopy(self)

    def iter_lines(self) -> Iterator[tuple[str, ...]]:
        """Yield the title row followed by every data row, in print order."""
        yield tuple(self._titles)
        yield from self

    def get_row(self, row: int) -> tuple[str, ...]:
        """
        Get an immutable snapshot of a row.

        Raises:
            RowIndexError: If ``row`` is not a valid row index
        """
        self._check_row(row)
        return tuple(self._rows[row])

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_separators(self, col: str, line: str, cross: str) -> None:
        """
        Change the characters used to draw the table.

        Args:
            col: Column separator
            line: Character used for horizontal rules
            cross: Character printed where rules and column separators meet

        Raises:
            ValueError: If any argument is not a single character
        """
        self._separators = Separators(column=col, rule=line, corner=cross)

    def add_row(self, row: Iterable[Any]) -> int:
        """
        Append a row to the table.

        Args:
            row: One value per column, converted to display strings

        Returns:
            Index of the inserted row

        Raises:
            RowArityError: If the row length differs from ``column_count``.
                The table is left unchanged.
        """
        cells = self._checked_cells(row)
        self._rows.append(cells)
        return len(self._rows) - 1

    def add_empty_row(self) -> int:
        """Append a row of empty cells and return its index."""
        return self.add_row([""] * self.column_count)

    def set_row(self, row: int, values: Iterable[Any]) -> None:
        """
        Replace every cell of an existing row.

        Raises:
            RowIndexError: If ``row`` is not a valid row index
            RowArityError: If ``values`` has the wrong number of cells
        """
        self._check_row(row)
        self._rows[row] = self._checked_cells(values)

    def set_element(self, value: Any, column: int, row: int) -> None:
        """
        Overwrite a single cell.

        Args:
            value: New cell value, converted with ``str()``
            column: Column index
            row: Row index; must be strictly less than ``len(table)``

        Raises:
            ColumnIndexError: If ``column`` is out of range
            RowIndexError: If ``row`` is out of range
        """
        self._check_column(column)
        self._check_row(row)
        self._rows[row][column] = str(value)

    @contextmanager
    def edit_row(self, row: int) -> Iterator[Row]:
        """
        Edit a row in place within a ``with`` block.

        Yields a mutable copy of the row. When the block exits normally the
        copy is written back, subject to the same arity check as
        ``add_row``. If the block raises, the table is left untouched.

        Example:
            with table.edit_row(0) as cells:
                cells[1] = "42"

        Raises:
            RowIndexError: If ``row`` is out of range
            RowArityError: If the edited row no longer has one cell per column
        """
        self._check_row(row)
        cells = list(self._rows[row])
        yield cells
        self.set_row(row, cells)

    def remove_row(self, row: int) -> None:
        """Remove a row. Silently does nothing if ``row`` does not exist."""
        if 0 <= row < len(self._rows):
            del self._rows[row]
        else:
            logger.debug("remove_row(%d) ignored, table has %d rows", row, len(self._rows))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _checked_cells(self, values: Iterable[Any]) -> Row:
        cells = _to_cells(values)
        if len(cells) != self.column_count:
            raise RowArityError(self.column_count, len(cells))
        return cells

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.column_count:
            raise ColumnIndexError(column, self.column_count)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._rows):
            raise RowIndexError(row, len(self._rows))
