"""
Column width computation.

Widths are measured with ``len()``, i.e. in code points. Wide (East Asian)
characters and combining sequences therefore misalign; display-width aware
alignment is intentionally not attempted.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import ColumnIndexError

if TYPE_CHECKING:
    from .table import Table

logger = logging.getLogger(__name__)


def column_width(table: Table, column_index: int) -> int:
    """
    Width of one column: the longest of its title and all of its cells.

    Args:
        table: Table to measure
        column_index: Column to measure

    Returns:
        Maximum ``len()`` over the title and every row's cell in the column

    Raises:
        ColumnIndexError: If ``column_index`` is out of range
    """
    if not 0 <= column_index < table.column_count:
        raise ColumnIndexError(column_index, table.column_count)
    return max(len(line[column_index]) for line in table.iter_lines())


def column_widths(table: Table) -> list[int]:
    """Width of every column, computed in a single pass over the table."""
    widths = [0] * table.column_count
    for line in table.iter_lines():
        for i, cell in enumerate(line):
            if len(cell) > widths[i]:
                widths[i] = len(cell)
    logger.debug("Computed column widths %s", widths)
    return widths
