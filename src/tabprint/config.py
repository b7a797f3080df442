"""Configuration defaults.

Rendering defaults can be overridden through environment variables so that
scripts and the CLI pick up a site-wide choice without threading it through
every call. An explicit argument always wins over the environment.
"""

from __future__ import annotations

import codecs
import os

from .models import LineTerminator

LINE_TERMINATOR_ENV_VAR = "TABPRINT_LINE_TERMINATOR"
"""Environment variable selecting the default line terminator (lf, crlf or native)."""

DEFAULT_ENCODING = "utf-8"
"""Encoding used to turn rendered lines into bytes."""


def resolve_line_terminator(
    explicit: LineTerminator | str | None = None,
) -> LineTerminator:
    """
    Resolve the line terminator for a render.

    Args:
        explicit: Terminator (or terminator name) requested by the caller

    Returns:
        The explicit terminator if given, else the one named by
        ``TABPRINT_LINE_TERMINATOR``, else the platform's native terminator

    Raises:
        ValueError: If the explicit or environment value is not recognized
    """
    if isinstance(explicit, LineTerminator):
        return explicit
    name = explicit or os.environ.get(LINE_TERMINATOR_ENV_VAR)
    if not name:
        return LineTerminator.native()
    return LineTerminator.parse(name)


def validate_encoding(encoding: str) -> str:
    """
    Check that ``encoding`` names a codec known to Python.

    Returns:
        The encoding name, unchanged

    Raises:
        ValueError: If no codec is registered under that name
    """
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ValueError(f"Unknown encoding {encoding!r}") from None
    return encoding
