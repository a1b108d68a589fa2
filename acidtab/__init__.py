__version__ = "0.1.0"

import os
import sys
import logging
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from dataclasses import replace
from pathlib import Path

from acidtab.borders import (
    BORDER_PRESETS,
    BORDERS_ASCII,
    BORDERS_BLANK,
    BORDERS_DEFAULT,
    BORDERS_DOUBLE,
    BORDERS_HEAVY,
    BORDERS_LIGHT,
    Borders,
    Close,
    parse_close,
)
from acidtab.config import Style, load_style
from acidtab.errors import (
    CellFormatError,
    ColumnIndexError,
    ConfigError,
    ShapeError,
    TableError,
)
from acidtab.formatting import Align, Kind, format_as_float, format_as_num, kind_of
from acidtab.table import Table
from acidtab.width import display_width

__all__ = [
    "Align",
    "BORDER_PRESETS",
    "BORDERS_ASCII",
    "BORDERS_BLANK",
    "BORDERS_DEFAULT",
    "BORDERS_DOUBLE",
    "BORDERS_HEAVY",
    "BORDERS_LIGHT",
    "Borders",
    "CellFormatError",
    "Close",
    "ColumnIndexError",
    "ConfigError",
    "Kind",
    "ShapeError",
    "Style",
    "Table",
    "TableError",
    "display_width",
    "format_as_float",
    "format_as_num",
    "kind_of",
    "load_style",
    "main",
]


def delimiter(value: str) -> str:
    """Argument type for delimiters: interprets escapes such as '\\t'."""
    try:
        value = value.encode("latin-1", "backslashreplace").decode("unicode_escape")
    except UnicodeError as exc:
        raise ArgumentTypeError(f"invalid escape in delimiter: {exc}")
    if value == "":
        raise ArgumentTypeError("delimiter must not be empty")
    return value


def column_alignment(value: str) -> tuple[int, Align]:
    """Argument type for COLUMN=ALIGNMENT (columns numbered from 1)."""
    column, _, align = value.partition("=")
    try:
        index = int(column) - 1
        if index < 0:
            raise ValueError(column)
        return index, Align(align.strip().lower())
    except ValueError:
        raise ArgumentTypeError(
            f"expected COLUMN=ALIGNMENT with ALIGNMENT one of "
            f"{', '.join(a.value for a in Align)}, got {value!r}"
        )


def style_from_args(args: Namespace, style: Style) -> Style:
    """Override the configured style with any command line options given."""
    if args.borders is not None:
        style = replace(style, borders=BORDER_PRESETS[args.borders])
    if args.close is not None:
        style = replace(style, close=parse_close(args.close))
    if args.pad is not None:
        style = replace(style, pad=" " * args.pad)
    if args.prefix is not None:
        style = replace(style, prefix=args.prefix)
    if args.hide_header:
        style = replace(style, header=False)
    return style


def read_table(args: Namespace, text: str, style: Style) -> Table:
    """Build a table from delimited input text."""
    lines = text.strip().split(args.row_delim) if text.strip() else []

    if args.header_row and lines:
        first = lines.pop(0)
        labels = [field.strip() for field in first.split(args.col_delim)]
    else:
        # Number the columns instead
        count = max((len(line.split(args.col_delim)) for line in lines), default=0)
        labels = [str(n) for n in range(1, count + 1)]

    table = style.apply(Table(*labels))
    for column, align in args.align:
        table.set_align(column, align)
    for column in args.group_digits:
        table.set_format_func(column - 1, format_as_num())

    return table.append_rows_from_delimited_string(
        args.col_delim, args.row_delim, False, args.row_delim.join(lines)
    )


def horizontal_command(parser: ArgumentParser, args: Namespace, table: Table) -> None:
    """Implements the 'horizontal' command."""
    table.horizontal(sys.stdout)


def vertical_command(parser: ArgumentParser, args: Namespace, table: Table) -> None:
    """Implements the 'vertical' command."""
    table.vertical(sys.stdout)


def main(argv: list[str] | None = None) -> None:
    parser = ArgumentParser(
        description="""
            Print delimited text (e.g. tab separated values) as an aligned
            table.
        """
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=os.environ.get("ACIDTAB_CONFIG"),
        help="""
            A TOML file with style defaults. Defaults to the value of the
            ACIDTAB_CONFIG environment variable or, if that is not defined,
            style.toml in the user's config directory (which may not exist).
        """,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="""
            Log debugging information to stderr.
        """,
    )

    subparsers = parser.add_subparsers(title="command", required=True)

    def add_table_arguments(table_parser: ArgumentParser) -> None:
        table_parser.add_argument(
            "file",
            nargs="?",
            type=Path,
            default=None,
            help="""
                The file to read. Defaults to stdin.
            """,
        )
        table_parser.add_argument(
            "--col-delim",
            "-d",
            type=delimiter,
            default="\t",
            help="""
                The column delimiter. Escapes such as '\\t' and '\\0' are
                understood. Default: tab.
            """,
        )
        table_parser.add_argument(
            "--row-delim",
            type=delimiter,
            default="\n",
            help="""
                The row delimiter. Default: newline.
            """,
        )
        table_parser.add_argument(
            "--no-header-row",
            dest="header_row",
            action="store_false",
            default=True,
            help="""
                The first row is data rather than the header. Columns are
                labelled with their number instead.
            """,
        )
        table_parser.add_argument(
            "--hide-header",
            action="store_true",
            default=False,
            help="""
                Do not print the header (horizontal tables only).
            """,
        )
        table_parser.add_argument(
            "--borders",
            "-b",
            choices=list(BORDER_PRESETS),
            default=None,
            help="""
                The border style to draw with.
            """,
        )
        table_parser.add_argument(
            "--close",
            "-c",
            action="append",
            metavar="SIDE",
            choices=["top", "bottom", "left", "right", "all", "none"],
            default=None,
            help="""
                Draw a border on a side of the table (top, bottom, left,
                right, all or none). May be given several times.
            """,
        )
        table_parser.add_argument(
            "--pad",
            type=int,
            metavar="N",
            default=None,
            help="""
                The number of spaces either side of every cell.
            """,
        )
        table_parser.add_argument(
            "--prefix",
            default=None,
            help="""
                A string to print at the start of every line.
            """,
        )
        table_parser.add_argument(
            "--align",
            "-a",
            type=column_alignment,
            action="append",
            metavar="COLUMN=ALIGNMENT",
            default=[],
            help="""
                Align a column (numbered from 1) left, right or center. May be
                given several times.
            """,
        )
        table_parser.add_argument(
            "--group-digits",
            "-g",
            type=int,
            action="append",
            metavar="COLUMN",
            default=[],
            help="""
                Show integers in a column (numbered from 1) with ',' thousands
                separators. May be given several times.
            """,
        )

    horizontal_parser = subparsers.add_parser(
        "horizontal",
        aliases=["h"],
        help="""
            Print one row per line.
        """,
    )
    horizontal_parser.set_defaults(command=horizontal_command)
    add_table_arguments(horizontal_parser)

    vertical_parser = subparsers.add_parser(
        "vertical",
        aliases=["v"],
        help="""
            Print every row as a block of 'label | value' lines.
        """,
    )
    vertical_parser.set_defaults(command=vertical_command)
    add_table_arguments(vertical_parser)

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    if args.pad is not None and args.pad < 0:
        parser.error(f"--pad must not be negative: {args.pad}")

    try:
        style = style_from_args(
            args, load_style(args.config, missing_ok=args.config is None)
        )

        if args.file is None:
            text = sys.stdin.read()
        else:
            text = args.file.read_text(encoding="utf-8")

        table = read_table(args, text, style)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except OSError as exc:
        print(f"Error: Cannot read input: {exc}", file=sys.stderr)
        sys.exit(1)

    if table.error is not None:
        print(f"Error: {table.error}", file=sys.stderr)
        sys.exit(1)

    # Run the command
    args.command(parser, args, table)
