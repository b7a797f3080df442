#!/usr/bin/env python3
"""
Basic Table Example

Demonstrates building, editing and rendering a table.

    python examples/basic_table.py
"""

import io

from tabprint import (
    LineTerminator,
    RowArityError,
    StreamSink,
    Table,
    ptable,
    render,
    render_to_string,
)


def main() -> None:
    """Build a table by hand and render it a few ways."""
    print("=== Building a table ===\n")

    tab = Table(["Planet", "Moons", "Ring system"])
    tab.add_row(["Mercury", 0, "no"])
    earth = tab.add_row(["Earth", 1, "no"])
    tab.add_row(["Saturn", 83, "yes"])

    # Rows are addressed by index
    tab.set_element("1 (Luna)", column=1, row=earth)
    with tab.edit_row(2) as cells:
        cells[1] = "146"

    print(render_to_string(tab, LineTerminator.LF))

    print("=== Rejected rows leave the table unchanged ===\n")
    try:
        tab.add_row(["Pluto"])
    except RowArityError as e:
        print(f"add_row failed: {e}\n")

    print("=== Custom separators, rendered to bytes ===\n")
    tab.set_separators(":", "=", "#")
    buffer = io.BytesIO()
    render(tab, StreamSink(buffer), LineTerminator.CRLF)
    print(f"{len(buffer.getvalue())} bytes, first line: {buffer.getvalue().splitlines()[0]!r}\n")

    print("=== One-shot construction and printing ===\n")
    ptable(["Title1", "Title2", "Title3"], ["Element1", "Element2", "Element3"], [1, 2, 3])


if __name__ == "__main__":
    main()
