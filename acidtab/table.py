"""
The table model: header, per-column settings and the (pre-formatted) rows.

Values are formatted as soon as a row is added and the width of every
column is tracked as rows come in, so a table can be rendered at any time
(and rendered again after more rows are added) without a separate layout
pass.

Mistakes such as adding a row with too many values do not raise. Instead,
the first such error is recorded (see :py:attr:`Table.error`) and the
offending call does nothing, leaving the table usable::

    >>> t = Table("one", "two").append_row(1, 2, 3)
    >>> t.error
    ShapeError('too many values (3); there are only 2 columns')
"""

from typing import Any, TextIO

import io
import logging

from acidtab.borders import BORDER_PRESETS, BORDERS_DEFAULT, Borders, Close
from acidtab.errors import CellFormatError, ColumnIndexError, ShapeError, TableError
from acidtab.formatting import (
    Align,
    Column,
    FormatFunc,
    default_align,
    format_cell,
)
from acidtab.horizontal import render_horizontal
from acidtab.vertical import render_vertical
from acidtab.width import display_width


logger = logging.getLogger(__name__)


class Table:
    """
    A table of values which can be printed with aligned columns.

    All setters and the row-adding methods return the table itself so calls
    can be chained::

        Table("Name", "Age").set_close(Close.ALL).append_rows(
            "Alice", 31,
            "Bob", 27,
        )
    """

    def __init__(self, *header: str) -> None:
        self._header: list[str] = []
        self._columns: list[Column] = []
        self._rows: list[list[str]] = []
        self._error: TableError | None = None

        self.close = Close.NONE
        self.borders = BORDERS_DEFAULT
        self.pad = "  "
        self.prefix = ""
        self.show_header = True

        self.set_header(True, *header)

    # -- Read accessors ------------------------------------------------------

    @property
    def header(self) -> tuple[str, ...]:
        return tuple(self._header)

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        """The formatted rows, exactly as added (rows may be short)."""
        return tuple(tuple(row) for row in self._rows)

    @property
    def widths(self) -> tuple[int, ...]:
        return tuple(column.width for column in self._columns)

    @property
    def aligns(self) -> tuple[Align, ...]:
        return tuple(column.align for column in self._columns)

    @property
    def error(self) -> TableError | None:
        """The first error encountered while building this table, if any."""
        return self._error

    def _record(self, error: TableError) -> None:
        if self._error is None:
            logger.debug("Recorded table error: %s", error)
            self._error = error
        else:
            logger.debug("Ignoring table error (one already recorded): %s", error)

    def _column(self, col: int) -> Column | None:
        """Get a column for configuration, recording an error if out of range."""
        if not 0 <= col < len(self._columns):
            self._record(
                ColumnIndexError(
                    f"cannot set column {col} as there are only "
                    f"{len(self._columns)} columns"
                )
            )
            return None
        return self._columns[col]

    # -- Configuration -------------------------------------------------------

    def set_header(self, show: bool, *labels: str) -> "Table":
        """
        Set whether the header is shown and, optionally, replace its labels.

        The header may be made longer or shorter than before, even after rows
        have been added. Settings of columns which remain are kept and new
        columns start with the defaults. Rows are never modified: cells past
        the end of a shortened header are simply not shown and rows missing
        cells for new columns are shown with those cells blank.
        """
        self.show_header = show
        if not labels:
            return self

        old_count = len(self._columns)
        if len(labels) < old_count:
            del self._columns[len(labels) :]
        else:
            self._columns.extend(Column() for _ in range(len(labels) - old_count))
        self._header = list(labels)

        for i, (column, label) in enumerate(zip(self._columns, self._header)):
            column.width = max(column.width, display_width(label))
            if i >= old_count:
                # Rows added before an earlier shrink may still hold cells here
                for row in self._rows:
                    if i < len(row):
                        column.width = max(column.width, display_width(row[i]))

        return self

    def set_align(self, col: int, align: Align) -> "Table":
        """Set the alignment of a column (ignored when printing vertically)."""
        column = self._column(col)
        if column is not None:
            column.align = align
        return self

    def set_format(self, col: int, pattern: str) -> "Table":
        """
        Set the :py:meth:`str.format` pattern used to show values in a column
        (e.g. ``"{:.2f}"`` or ``"{!r}"``). Applies to rows added afterwards.
        """
        column = self._column(col)
        if column is not None:
            column.pattern = pattern
        return self

    def set_format_func(self, col: int, func: FormatFunc | None) -> "Table":
        """
        Set a callback used to show values in a column. If the callback returns
        None the column's pattern is used instead. Applies to rows added
        afterwards.
        """
        column = self._column(col)
        if column is not None:
            column.func = func
        return self

    def set_close(self, close: Close) -> "Table":
        """Set which sides of the table are closed off with a border."""
        self.close = close
        return self

    def set_pad(self, pad: str) -> "Table":
        """Set the padding placed either side of every cell."""
        self.pad = pad
        return self

    def set_prefix(self, prefix: str) -> "Table":
        """Set a string to print at the start of every line (e.g. indentation)."""
        self.prefix = prefix
        return self

    def set_borders(self, borders: Borders | str) -> "Table":
        """Set the border glyphs, either as a Borders value or a preset name."""
        if isinstance(borders, str):
            try:
                borders = BORDER_PRESETS[borders]
            except KeyError:
                raise ValueError(
                    f"unknown borders {borders!r}, expected one of "
                    f"{', '.join(BORDER_PRESETS)}"
                ) from None
        self.borders = borders
        return self

    # -- Adding rows ---------------------------------------------------------

    def grow(self, n: int) -> "Table":
        """
        Hint that about n more rows are going to be added.

        Python lists already grow in amortised constant time so this has no
        effect beyond checking n.
        """
        if n < 0:
            raise ValueError(f"cannot grow by a negative number of rows ({n})")
        return self

    def append_row(self, *values: Any) -> "Table":
        """
        Add a row.

        Fewer values than there are columns may be given: the remaining cells
        are shown blank. More values than columns is an error.

        The first row added decides the alignment of every column which has
        not been explicitly aligned: right for numbers, left for everything
        else.
        """
        if len(values) > len(self._columns):
            self._record(
                ShapeError(
                    f"too many values ({len(values)}); there are only "
                    f"{len(self._columns)} columns"
                )
            )
            return self

        # Format everything before touching any state so that a value which
        # can't be formatted leaves the table unchanged.
        try:
            row = [
                format_cell(column, value)
                for column, value in zip(self._columns, values)
            ]
        except CellFormatError as exc:
            self._record(exc)
            return self

        if not self._rows:
            for column, value in zip(self._columns, values):
                if column.align == Align.AUTO:
                    column.align = default_align(value)

        for column, cell in zip(self._columns, row):
            column.width = max(column.width, display_width(cell))

        self._rows.append(row)
        return self

    def append_rows(self, *values: Any) -> "Table":
        """
        Add several rows given as one flat sequence of values. The number of
        values must be an exact multiple of the number of columns.

        For example::

            t.append_rows(
                "row1", "row1",
                "row2", "row2",
            )
        """
        if not values:
            return self

        count = len(self._columns)
        if count == 0 or len(values) % count != 0:
            self._record(
                ShapeError(
                    f"number of values ({len(values)}) is not a multiple of "
                    f"the number of columns ({count})"
                )
            )
            return self

        self.grow(len(values) // count)
        for start in range(0, len(values), count):
            self.append_row(*values[start : start + count])
        return self

    def append_rows_from_delimited_string(
        self,
        col_delim: str,
        row_delim: str,
        use_first_row_as_header: bool,
        text: str,
    ) -> "Table":
        """
        Add rows from delimited text such as tab-separated values.

        Surrounding whitespace is removed from the text as a whole and from
        every field. All values are added as strings. When
        use_first_row_as_header is True, the first row replaces the header.
        """
        text = text.strip()
        if not text:
            return self

        lines = text.split(row_delim)
        if use_first_row_as_header:
            first, *lines = lines
            self.set_header(
                self.show_header,
                *(field.strip() for field in first.split(col_delim)),
            )

        self.grow(len(lines))
        for line in lines:
            self.append_row(*(field.strip() for field in line.split(col_delim)))
        return self

    # -- Output --------------------------------------------------------------

    def width(self) -> int:
        """
        The display width of the (horizontally printed) table, including the
        prefix, padding and borders.

        The width may grow as more rows are added.
        """
        width = display_width(self.prefix)
        if Close.LEFT in self.close:
            width += 1
        if not self._columns:
            return width

        overhead = display_width(self.pad) * 2 + 1  # 1 for the bar
        width += sum(column.width + overhead for column in self._columns)
        if Close.RIGHT not in self.close:
            width -= 1
        return width

    def horizontal(self, out: TextIO) -> None:
        """Print the table with one row per line."""
        render_horizontal(self, out)

    def vertical(self, out: TextIO) -> None:
        """Print every row as a block of "label | value" lines."""
        render_vertical(self, out)

    def __str__(self) -> str:
        out = io.StringIO()
        self.horizontal(out)
        return out.getvalue()
