"""
Border glyph sets and the sides of a table which may be closed off.
"""

from dataclasses import dataclass
from enum import Flag


class Close(Flag):
    """Which sides of a table are drawn with a border."""

    NONE = 0
    BOTTOM = 1
    TOP = 2
    LEFT = 4
    RIGHT = 8
    ALL = BOTTOM | TOP | LEFT | RIGHT


@dataclass(frozen=True)
class Borders:
    """
    The glyphs used to draw a table.

    The junction names describe the glyph's shape: ``bar_right`` is a
    vertical bar with a branch to the right (``├``, used on the left
    edge), ``line_top`` a horizontal line with a branch downward (``┬``,
    used on the top edge) and so on.
    """

    line: str
    bar: str
    cross: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    bar_right: str
    bar_left: str
    line_top: str
    line_bottom: str


BORDERS_LIGHT = Borders("─", "│", "┼", "┌", "┐", "└", "┘", "├", "┤", "┬", "┴")
BORDERS_HEAVY = Borders("━", "┃", "╋", "┏", "┓", "┗", "┛", "┣", "┫", "┳", "┻")
BORDERS_DOUBLE = Borders("═", "║", "╬", "╔", "╗", "╚", "╝", "╠", "╣", "╦", "╩")
BORDERS_ASCII = Borders("-", "|", "+", "+", "+", "+", "+", "+", "+", "+", "+")
BORDERS_BLANK = Borders(" ", " ", " ", " ", " ", " ", " ", " ", " ", " ", " ")

BORDERS_DEFAULT = BORDERS_LIGHT

BORDER_PRESETS: dict[str, Borders] = {
    "light": BORDERS_LIGHT,
    "heavy": BORDERS_HEAVY,
    "double": BORDERS_DOUBLE,
    "ascii": BORDERS_ASCII,
    "blank": BORDERS_BLANK,
}


def parse_close(names: list[str] | tuple[str, ...] | str) -> Close:
    """
    Convert side names (e.g. ``["left", "right"]``) into a Close value.

    The names "all" and "none" are also accepted, either on their own or as
    a single string.
    """
    if isinstance(names, str):
        names = [names]

    close = Close.NONE
    for name in names:
        try:
            close |= Close[name.strip().upper()]
        except KeyError:
            raise ValueError(
                f"unknown side {name!r}, expected one of "
                "top, bottom, left, right, all or none"
            ) from None
    return close
