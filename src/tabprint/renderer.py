"""
Table renderer.

Turns a ``Table`` into boxed, aligned text:

    +-------+-----+
    | Name  | Age |
    +-------+-----+
    | Alice | 30  |
    +-------+-----+
    | Bob   | 7   |
    +-------+-----+

Column widths are computed once per render, then the opening rule, the
title line and a rule are written, followed by one content line and one
rule per row. A table with ``n`` rows always renders to ``2 * n + 3``
lines.
"""

from __future__ import annotations

import codecs
import logging
import sys
from typing import TYPE_CHECKING

from .config import DEFAULT_ENCODING, resolve_line_terminator, validate_encoding
from .exceptions import OutputEncodingError, OutputError
from .layout import column_widths
from .models import LineTerminator, Separators
from .sinks import BufferSink, OutputSink, StreamSink

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .table import Table

logger = logging.getLogger(__name__)


class TableRenderer:
    """Render tables as box-drawing text."""

    def __init__(
        self,
        line_terminator: LineTerminator | str | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Initialize the table renderer.

        Args:
            line_terminator: Terminator written after every line. ``None``
                uses ``TABPRINT_LINE_TERMINATOR`` or the platform default.
            encoding: Encoding used to turn lines into bytes

        Raises:
            ValueError: If the line terminator or encoding is not recognized
        """
        self.line_terminator = resolve_line_terminator(line_terminator)
        self.encoding = validate_encoding(encoding)

    @staticmethod
    def rule_line(widths: Sequence[int], separators: Separators) -> str:
        """Build a horizontal rule, e.g. ``+-------+-----+``."""
        return separators.corner + "".join(
            separators.rule * (w + 2) + separators.corner for w in widths
        )

    @staticmethod
    def content_line(
        cells: Sequence[str], widths: Sequence[int], separators: Separators
    ) -> str:
        """Build a title or data line with left-aligned, right-padded cells."""
        sep = separators.column
        return sep + "".join(f" {cell.ljust(w)} {sep}" for cell, w in zip(cells, widths))

    def format_lines(self, table: Table) -> list[str]:
        """
        Render a table to a list of lines, without terminators.

        Args:
            table: Table to render

        Returns:
            ``2 * len(table) + 3`` lines
        """
        widths = column_widths(table)
        separators = table.separators
        rule = self.rule_line(widths, separators)

        lines: list[str] = [rule]
        for cells in table.iter_lines():
            lines.append(self.content_line(cells, widths, separators))
            lines.append(rule)
        return lines

    def render(self, table: Table, sink: OutputSink) -> None:
        """
        Write a table to ``sink`` and flush it.

        Args:
            table: Table to render
            sink: Destination for the rendered bytes

        Raises:
            OutputWriteError: If the sink fails to write or flush
            OutputEncodingError: If a cell cannot be encoded, or the sink
                rejects the encoded bytes
        """
        lines = self.format_lines(table)
        logger.debug(
            "Rendering table: %d columns, %d rows, %d lines",
            table.column_count,
            len(table),
            len(lines),
        )
        # One encoder per render so stateful encodings emit a single BOM.
        encoder = codecs.getincrementalencoder(self.encoding)(errors="strict")
        terminator = self.line_terminator.value
        try:
            for line in lines:
                sink.write(encoder.encode(line + terminator))
            tail = encoder.encode("", final=True)
        except UnicodeEncodeError as e:
            raise OutputEncodingError(self.encoding, str(e)) from e
        if tail:
            sink.write(tail)
        sink.flush()
        logger.debug("Rendered %d lines", len(lines))

    def render_to_string(self, table: Table) -> str:
        """Render a table through an in-memory sink and return the text."""
        sink = BufferSink(self.encoding)
        self.render(table, sink)
        return sink.getvalue()


def render(
    table: Table,
    sink: OutputSink,
    line_terminator: LineTerminator | str | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Render ``table`` to ``sink``. See ``TableRenderer.render``."""
    TableRenderer(line_terminator, encoding).render(table, sink)


def render_to_string(
    table: Table,
    line_terminator: LineTerminator | str | None = None,
) -> str:
    """Render ``table`` and return the text. See ``TableRenderer.render_to_string``."""
    return TableRenderer(line_terminator).render_to_string(table)


def print_table(
    table: Table,
    line_terminator: LineTerminator | str | None = None,
) -> None:
    """
    Print a table to standard output.

    Unlike ``render``, output failures are not returned to the caller:
    they terminate the program.

    Raises:
        SystemExit: If writing to standard output fails
    """
    try:
        sys.stdout.flush()
        buffer = getattr(sys.stdout, "buffer", None)
        if buffer is not None:
            render(table, StreamSink(buffer), line_terminator)
        else:
            # Text-only stdout (StringIO, some IDE consoles)
            sys.stdout.write(render_to_string(table, line_terminator))
            sys.stdout.flush()
    except (OSError, OutputError) as e:
        logger.critical("Cannot print table to standard output: %s", e)
        raise SystemExit(f"Cannot print table to standard output: {e}") from e
