"""
Field-major ("vertical") table rendering: every row is printed as a block of
"label | value" lines.

Values are always left-aligned and the header is always shown: per-column
alignment and Table.show_header are ignored.
"""

from typing import TYPE_CHECKING, TextIO

from acidtab.borders import Close
from acidtab.width import display_width

if TYPE_CHECKING:
    from acidtab.table import Table


def render_vertical(table: "Table", out: TextIO) -> None:
    """Write a table to out with every value on its own line."""
    borders = table.borders
    close_left = Close.LEFT in table.close
    close_right = Close.RIGHT in table.close

    # Column widths are tracked for horizontal output; the label column is
    # as wide as the widest label and the value column as the widest column.
    label_widths = [display_width(label) for label in table.header]
    header_width = max(label_widths, default=0)
    value_width = max(table.widths, default=0)

    pad_line = borders.line * display_width(table.pad)
    header_line = borders.line * header_width
    value_line = borders.line * value_width

    def write_rule(junction: str, first: str, last: str) -> None:
        parts = [table.prefix]
        if close_left:
            parts.append(first)
        parts += [pad_line, header_line, pad_line, junction]
        parts += [pad_line, value_line, pad_line]
        if close_right:
            parts.append(last)
        parts.append("\n")
        out.write("".join(parts))

    if Close.TOP in table.close:
        write_rule(borders.line_top, borders.top_left, borders.top_right)

    for index, row in enumerate(table.rows):
        if index > 0:
            write_rule(borders.cross, borders.bar_right, borders.bar_left)

        for i, (label, label_width) in enumerate(zip(table.header, label_widths)):
            value = row[i] if i < len(row) else ""

            parts = [table.prefix]
            if close_left:
                parts.append(borders.bar)
            parts += [table.pad, label, table.pad, " " * (header_width - label_width)]
            parts += [borders.bar, table.pad, value]
            if close_right:
                parts.append(" " * max(0, value_width - display_width(value)))
                parts.append(table.pad)
                parts.append(borders.bar)
            parts.append("\n")
            out.write("".join(parts))

    if Close.BOTTOM in table.close:
        write_rule(borders.line_bottom, borders.bottom_left, borders.bottom_right)
