"""Left padding of formatted fragments.

Functions:
    pad_leading: Pad a string to a minimum width with a fill character.
    pad_number: Pad an integer's digits, keeping a minus sign in front.
"""

from __future__ import annotations

# Pad selection for the "-" modifier
NO_PADDING = ""

ZERO_PADDING = "0"
SPACE_PADDING = " "


def pad_leading(text: str, width: int, fill: str) -> str:
    """Prepend ``fill`` until ``text`` is at least ``width`` characters long.

    Text already at or beyond ``width`` is returned unchanged, as is any
    text when ``fill`` is NO_PADDING.

    Examples:
        >>> pad_leading("7", 2, "0")
        '07'
        >>> pad_leading("7", 5, " ")
        '    7'
        >>> pad_leading("2019", 2, "0")
        '2019'
        >>> pad_leading("7", 999, NO_PADDING)
        '7'
    """
    missing = width - len(text)
    if missing <= 0 or fill == NO_PADDING:
        return text
    return fill * missing + text


def pad_number(value: int, width: int, fill: str) -> str:
    """Format an integer and pad its digits to ``width``.

    The sign of a negative number is placed before the padding, so the
    digits alone fill the width.

    Examples:
        >>> pad_number(5, 4, "0")
        '0005'
        >>> pad_number(-44, 4, "0")
        '-0044'
    """
    if value < 0:
        return "-" + pad_leading(str(-value), width, fill)
    return pad_leading(str(value), width, fill)


__all__ = [
    "NO_PADDING",
    "ZERO_PADDING",
    "SPACE_PADDING",
    "pad_leading",
    "pad_number",
]
