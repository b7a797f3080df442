"""Exceptions for tabprint."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TabprintError(Exception):
    """
    Base exception for all tabprint errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class TableError(TabprintError):
    """
    Base exception for table model errors.

    Raised when a mutation or lookup would violate the table's
    column-count or row-index invariants. The table is left unchanged.
    """

    pass


class TableIndexError(TableError, IndexError):
    """Base exception for out-of-range column or row indices."""

    pass


class OutputError(TabprintError):
    """
    Base exception for rendering output errors.

    The sink may have been partially written when this is raised.
    """

    pass


# ---------------------------------------------------------------------------
# Table Exceptions
# ---------------------------------------------------------------------------


class RowArityError(TableError):
    """Raised when a row does not have exactly one cell per column."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row does not have the proper number of columns: "
            f"expected {expected}, got {actual}"
        )


class ColumnIndexError(TableIndexError):
    """Raised when a column index is outside ``0 <= index < column_count``."""

    def __init__(self, index: int, column_count: int) -> None:
        self.index = index
        self.column_count = column_count
        super().__init__(
            f"Column index {index} is out of range for a table with {column_count} columns"
        )


class RowIndexError(TableIndexError):
    """Raised when a row index is outside ``0 <= index < row_count``."""

    def __init__(self, index: int, row_count: int) -> None:
        self.index = index
        self.row_count = row_count
        super().__init__(f"Row index {index} is out of range for a table with {row_count} rows")


# ---------------------------------------------------------------------------
# Output Exceptions
# ---------------------------------------------------------------------------


class OutputWriteError(OutputError):
    """Raised when the output sink fails to accept bytes or to flush."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot write table: {reason}")


class OutputEncodingError(OutputError):
    """
    Raised when rendered text and bytes disagree with the sink encoding.

    This covers cells that cannot be encoded and bytes written to a
    text sink that do not decode.
    """

    def __init__(self, encoding: str, reason: str) -> None:
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"Invalid {encoding} text: {reason}")


# ---------------------------------------------------------------------------
# Construction Exceptions
# ---------------------------------------------------------------------------


class TableConstructionError(TabprintError):
    """
    Raised by the ``table()`` and ``ptable()`` helpers when a row is rejected.

    Unlike ``RowArityError`` this is not meant to be recovered from: the
    caller supplied a malformed literal table.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot create table from: {reason}")
