"""
Terminal display width measurement.
"""

import re

import wcwidth


# ANSI CSI sequences (colours, bold, ...) occupy no terminal columns.
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_ESCAPE.sub("", text)


def display_width(text: str) -> int:
    """
    Return the number of terminal columns the given string occupies.

    Wide (e.g. CJK and most emoji) characters count as two columns,
    combining marks and zero width joiners as none. ANSI escape sequences
    are ignored so that coloured text lines up with plain text.
    """
    if text.isascii() and text.isprintable():
        return len(text)

    text = strip_ansi(text)
    width = wcwidth.wcswidth(text)
    if width >= 0:
        return width

    # wcswidth gives up (-1) on strings containing non-printable characters;
    # count those as zero width instead.
    width = 0
    for char in text:
        char_width = wcwidth.wcwidth(char)
        if char_width > 0:
            width += char_width
    return width
