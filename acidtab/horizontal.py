"""
Row-major ("horizontal") table rendering: one line per row.
"""

from typing import TYPE_CHECKING, Sequence, TextIO

from acidtab.borders import Close
from acidtab.formatting import Align
from acidtab.width import display_width

if TYPE_CHECKING:
    from acidtab.table import Table


def render_horizontal(table: "Table", out: TextIO) -> None:
    """Write a table to out with every row on its own line."""
    borders = table.borders
    pad_line = borders.line * display_width(table.pad)

    if Close.TOP in table.close:
        _write_rule(
            table, out, pad_line, borders.line_top, borders.top_left, borders.top_right
        )

    if table.show_header:
        _write_row(table, out, table.header, always_center=True)
        _write_rule(
            table, out, pad_line, borders.cross, borders.bar_right, borders.bar_left
        )

    for row in table.rows:
        _write_row(table, out, row)

    if Close.BOTTOM in table.close:
        _write_rule(
            table,
            out,
            pad_line,
            borders.line_bottom,
            borders.bottom_left,
            borders.bottom_right,
        )


def _write_row(
    table: "Table", out: TextIO, row: Sequence[str], always_center: bool = False
) -> None:
    close_right = Close.RIGHT in table.close
    columns = table.columns
    last = len(columns) - 1

    parts = [table.prefix]
    if Close.LEFT in table.close:
        parts.append(table.borders.bar)

    # Rows may be shorter (header grown since) or longer (header shrunk since)
    # than the header.
    for i, column in enumerate(columns):
        cell = row[i] if i < len(row) else ""
        slack = max(0, column.width - display_width(cell))
        # No trailing spaces or bar on an open right edge
        trailing = close_right or i != last

        parts.append(table.pad)
        align = Align.CENTER if always_center else column.align
        if align == Align.RIGHT:
            parts.append(" " * slack)
            parts.append(cell)
        elif align == Align.CENTER:
            parts.append(" " * (slack // 2))
            parts.append(cell)
            if trailing:
                parts.append(" " * (slack - slack // 2))
        else:
            # Align.AUTO only remains when columns were added after the first
            # row; treat as left.
            parts.append(cell)
            if trailing:
                parts.append(" " * slack)

        if trailing:
            parts.append(table.pad)
            parts.append(table.borders.bar)

    parts.append("\n")
    out.write("".join(parts))


def _write_rule(
    table: "Table", out: TextIO, pad_line: str, junction: str, first: str, last: str
) -> None:
    """Write a horizontal line across the table."""
    columns = table.columns

    parts = [table.prefix]
    if Close.LEFT in table.close:
        parts.append(first)
    for i, column in enumerate(columns):
        parts.append(pad_line)
        parts.append(table.borders.line * column.width)
        parts.append(pad_line)
        if i < len(columns) - 1:
            parts.append(junction)
        elif Close.RIGHT in table.close:
            parts.append(last)

    parts.append("\n")
    out.write("".join(parts))
