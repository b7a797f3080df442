"""Command-line interface for tabprint."""

from __future__ import annotations

import csv
import logging
from typing import BinaryIO, TextIO

import click

from .builder import table
from .exceptions import OutputError, TableConstructionError
from .layout import column_widths
from .renderer import TableRenderer
from .sinks import StreamSink
from .table import Table

logger = logging.getLogger(__name__)


def _load_table(source: TextIO, delimiter: str) -> Table:
    """Read CSV records: the first is the title row, the rest are data rows."""
    try:
        records = [record for record in csv.reader(source, delimiter=delimiter) if record]
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Input is not valid {e.encoding}: {e.reason}") from e
    except (csv.Error, TypeError) as e:
        raise click.BadParameter(str(e), param_hint="--delimiter") from e
    if not records:
        raise click.ClickException("Input contains no CSV records")
    logger.debug(
        "Read %d CSV records from %s", len(records), getattr(source, "name", "<input>")
    )
    try:
        return table(records[0], *records[1:])
    except TableConstructionError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="tabprint")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """tabprint table rendering CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--delimiter",
    default=",",
    show_default=True,
    help="CSV field delimiter of the input",
)
@click.option(
    "--column-separator",
    default="|",
    show_default=True,
    help="Character printed between cells",
)
@click.option(
    "--rule-char",
    default="-",
    show_default=True,
    help="Character used to draw horizontal rules",
)
@click.option(
    "--corner-char",
    default="+",
    show_default=True,
    help="Character printed where rules meet column separators",
)
@click.option(
    "--line-terminator",
    type=click.Choice(["lf", "crlf", "native"], case_sensitive=False),
    default=None,
    help="Line terminator (default: $TABPRINT_LINE_TERMINATOR or native)",
)
@click.option(
    "--output",
    "-o",
    type=click.File("wb"),
    default=None,
    help="Output file (default: stdout)",
)
def render(
    source: TextIO,
    delimiter: str,
    column_separator: str,
    rule_char: str,
    corner_char: str,
    line_terminator: str | None,
    output: BinaryIO | None,
) -> None:
    """Render CSV input as a boxed text table.

    The first CSV record provides the column titles. SOURCE defaults to
    standard input.
    """
    tab = _load_table(source, delimiter)
    try:
        tab.set_separators(column_separator, rule_char, corner_char)
        renderer = TableRenderer(line_terminator=line_terminator)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    stream = output if output is not None else click.get_binary_stream("stdout")
    try:
        renderer.render(tab, StreamSink(stream))
    except OutputError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--delimiter",
    default=",",
    show_default=True,
    help="CSV field delimiter of the input",
)
def widths(source: TextIO, delimiter: str) -> None:
    """Show the computed width of every column of CSV input."""
    tab = _load_table(source, delimiter)
    for title, width in zip(tab.titles, column_widths(tab)):
        click.echo(f"{title}: {width}")


if __name__ == "__main__":
    cli()
