"""Value types for tabprint."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

Row = list[str]
"""A row in a table: one display string per column."""


@dataclass(frozen=True)
class Separators:
    """
    Characters used to draw a table.

    Attributes:
        column: Column separator printed between cells (default ``|``)
        rule: Character repeated to draw horizontal rules (default ``-``)
        corner: Printed where a rule meets a column boundary (default ``+``)
    """

    column: str = "|"
    rule: str = "-"
    corner: str = "+"

    def __post_init__(self) -> None:
        for field_name in ("column", "rule", "corner"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{field_name} separator must be a single character")


class LineTerminator(Enum):
    """Line terminator written after every rendered line."""

    LF = "\n"
    CRLF = "\r\n"

    @classmethod
    def native(cls) -> LineTerminator:
        """Terminator conventional on the running platform."""
        if sys.platform == "win32":
            return cls.CRLF
        return cls.LF

    @classmethod
    def parse(cls, name: str) -> LineTerminator:
        """
        Parse a terminator name.

        Args:
            name: ``lf``, ``crlf`` or ``native`` (case-insensitive)

        Returns:
            The matching terminator

        Raises:
            ValueError: If the name is not recognized
        """
        normalized = name.strip().lower()
        if normalized == "native":
            return cls.native()
        try:
            return cls[normalized.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown line terminator {name!r} (expected lf, crlf or native)"
            ) from None
