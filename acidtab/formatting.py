"""
Conversion of cell values into display strings.

Every column has a format pattern (a :py:meth:`str.format` pattern, by
default ``"{}"``) and, optionally, a callback. The callback is tried first;
returning ``None`` from it defers to the pattern. For example, a callback
which only knows how to display booleans::

    def tick(value):
        if isinstance(value, bool):
            return "✔" if value else "✘"
        return None
"""

from typing import Any, Callable

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from numbers import Complex, Integral, Real

from acidtab.errors import CellFormatError


DEFAULT_PATTERN = "{}"

FormatFunc = Callable[[Any], str | None]


class Align(Enum):
    """Column alignment."""

    AUTO = "auto"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Kind(Enum):
    """The semantic kinds of value a cell may hold."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    COMPLEX = "complex"
    BOOLEAN = "boolean"
    BYTES = "bytes"
    OTHER = "other"


NUMERIC_KINDS = frozenset({Kind.INTEGER, Kind.FLOAT, Kind.COMPLEX})


def kind_of(value: Any) -> Kind:
    """Classify a value."""
    # NB: bool is a subclass of int so must be tested first
    if isinstance(value, bool):
        return Kind.BOOLEAN
    elif isinstance(value, str):
        return Kind.STRING
    elif isinstance(value, (bytes, bytearray, memoryview)):
        return Kind.BYTES
    elif isinstance(value, Integral):
        return Kind.INTEGER
    elif isinstance(value, (Real, Decimal)):
        return Kind.FLOAT
    elif isinstance(value, Complex):
        return Kind.COMPLEX
    else:
        return Kind.OTHER


def default_align(value: Any) -> Align:
    """The alignment a column takes when this is its first value."""
    return Align.RIGHT if kind_of(value) in NUMERIC_KINDS else Align.LEFT


@dataclass
class Column:
    """Per-column state of a table."""

    width: int = 0
    align: Align = Align.AUTO
    pattern: str = DEFAULT_PATTERN
    func: FormatFunc | None = None


def format_cell(column: Column, value: Any) -> str:
    """
    Format a value for display in the given column.

    Raises :py:exc:`CellFormatError` when neither the callback nor the
    pattern can deal with the value. Any exception raised by the callback
    counts as not being able to deal with it.
    """
    if column.func is not None:
        try:
            text = column.func(value)
        except Exception as exc:
            raise CellFormatError(
                f"cannot format {type(value).__name__} value {value!r}: {exc}"
            ) from exc
        if text is not None:
            if not isinstance(text, str):
                raise CellFormatError(
                    f"cannot format {type(value).__name__} value {value!r}: "
                    f"format function returned {type(text).__name__}, not str"
                )
            return text

    if column.pattern == DEFAULT_PATTERN and kind_of(value) == Kind.BYTES:
        return bytes(value).decode("utf-8", errors="replace")

    try:
        return column.pattern.format(value)
    except (TypeError, ValueError, IndexError, KeyError, AttributeError) as exc:
        raise CellFormatError(
            f"cannot format {type(value).__name__} value {value!r}: {exc}"
        ) from exc


def format_as_float(precision: int) -> FormatFunc:
    """
    Return a callback which shows numbers with a fixed number of decimals.

    Values between 0 and 1 lose their leading zero (e.g. ``.800``). Use
    precision=0 to round to the nearest whole number.
    """

    def format_float(value: Any) -> str:
        if kind_of(value) not in (Kind.FLOAT, Kind.INTEGER):
            raise TypeError(f"not a float but {type(value).__name__}: {value!r}")

        if not isinstance(value, Decimal):
            value = float(value)

        text = f"{value:.{precision}f}"
        if 0 <= value < 1 and text.startswith("0."):
            text = text[1:]
        return text

    return format_float


_INTEGER_STRING = re.compile(r"([+-]?)(\d+)")


def _group_digits(digits: str, sep: str = ",") -> str:
    """Insert a separator between every group of three digits."""
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return sep.join(groups)


def format_as_num() -> FormatFunc:
    """
    Return a callback which shows numbers with "," as thousands separator.

    Floats are rounded to whole numbers. Strings (and bytes) holding an
    integer are grouped too, any other string is shown unchanged.
    """

    def format_num(value: Any) -> str:
        kind = kind_of(value)
        if kind == Kind.INTEGER:
            return f"{int(value):,}"
        elif kind == Kind.FLOAT:
            if not isinstance(value, Decimal):
                value = float(value)
            return f"{value:,.0f}"
        elif kind in (Kind.STRING, Kind.BYTES):
            if kind == Kind.BYTES:
                value = bytes(value).decode("utf-8", errors="replace")
            match = _INTEGER_STRING.fullmatch(value)
            if match is None:
                return value
            sign, digits = match.groups()
            return sign + _group_digits(digits)
        else:
            raise TypeError(f"unsupported type: {type(value).__name__}: {value!r}")

    return format_num
