"""
tabprint: formatted and aligned text tables.

Example:
    from tabprint import Table, render_to_string

    tab = Table(["Name", "Age"])
    tab.add_row(["Alice", 30])
    tab.add_row(["Bob", 7])
    print(render_to_string(tab), end="")

    +-------+-----+
    | Name  | Age |
    +-------+-----+
    | Alice | 30  |
    +-------+-----+
    | Bob   | 7   |
    +-------+-----+
"""

from .builder import ptable, table
from .exceptions import (
    ColumnIndexError,
    OutputEncodingError,
    OutputError,
    OutputWriteError,
    RowArityError,
    RowIndexError,
    TableConstructionError,
    TableError,
    TableIndexError,
    TabprintError,
)
from .layout import column_width, column_widths
from .models import LineTerminator, Row, Separators
from .renderer import TableRenderer, print_table, render, render_to_string
from .sinks import BufferSink, OutputSink, StreamSink
from .table import Table
from .version import __version__

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "TableRenderer",
    # Rendering
    "render",
    "render_to_string",
    "print_table",
    "column_width",
    "column_widths",
    # Construction helpers
    "table",
    "ptable",
    # Sinks
    "OutputSink",
    "StreamSink",
    "BufferSink",
    # Models
    "Row",
    "Separators",
    "LineTerminator",
    # Exceptions
    "TabprintError",
    "TableError",
    "TableIndexError",
    "RowArityError",
    "ColumnIndexError",
    "RowIndexError",
    "OutputError",
    "OutputWriteError",
    "OutputEncodingError",
    "TableConstructionError",
]
