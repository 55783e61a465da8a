"""The directive table.

Each directive character maps to a Directive holding its default width,
its default pad and how its text is obtained from the value's fields.

Supported Directives:
    %a - Abbreviated weekday name (Mon)
    %A - Full weekday name (Monday)
    %b - Abbreviated month name (Jan)
    %B - Full month name (January)
    %c - Preferred date+time representation (2018-10-17 12:34:56)
    %d - Day of the month (01-31)
    %f - Sub-second fraction at its recorded precision (0, 001, 012345)
    %H - Hour, 24-hour clock (00-23)
    %I - Hour, 12-hour clock (01-12)
    %j - Day of the year (001-366)
    %m - Month (01-12)
    %M - Minute (00-59)
    %p - "AM" or "PM" (noon is PM, midnight is AM)
    %P - "am" or "pm"
    %q - Quarter (1-4)
    %S - Second (00-60)
    %u - ISO day of the week (1=Monday, 7=Sunday)
    %x - Preferred date representation (2018-10-17)
    %X - Preferred time representation (12:34:56)
    %y - Year modulo 100 (00-99)
    %Y - Year (0001, 2019, -0044)
    %z - UTC offset as +hhmm/-hhmm (empty if naive)
    %Z - Zone abbreviation (empty if naive)
    %% - Literal %
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from nimble_strftime.formatting.fields import CalendarFields
from nimble_strftime.formatting.modifiers import Modifiers
from nimble_strftime.formatting.options import FormatOptions
from nimble_strftime.formatting.padding import (
    SPACE_PADDING,
    ZERO_PADDING,
    pad_leading,
    pad_number,
)
from nimble_strftime.units.meridiem import Meridiem

Extract = Callable[[CalendarFields, FormatOptions], Union[int, str]]
Render = Callable[[CalendarFields, FormatOptions, Modifiers], str]


@dataclass(frozen=True)
class Directive:
    """One row of the directive table.

    Attributes:
        char: The directive character.
        description: What the directive formats.
        default_width: Width used when the template gives none.
        default_pad: Pad used when the template gives none.
        extract: Returns the unpadded value; ints are padded as numbers.
        render: Replaces extract+padding for directives that handle
            width and pad themselves.
        preferred: True for %c, %x and %X, which expand a template.
    """

    char: str
    description: str
    default_width: int = 0
    default_pad: str = ZERO_PADDING
    extract: Extract | None = None
    render: Render | None = None
    preferred: bool = False

    def format(
        self, fields: CalendarFields, options: FormatOptions, modifiers: Modifiers
    ) -> str:
        """Format the value's field for this directive with the given modifiers."""
        if self.render is not None:
            return self.render(fields, options, modifiers)
        value = self.extract(fields, options)  # type: ignore[misc]
        if isinstance(value, int):
            return pad_number(value, modifiers.width, modifiers.pad)
        return pad_leading(value, modifiers.width, modifiers.pad)


def _meridiem(fields: CalendarFields, options: FormatOptions, directive: str) -> str:
    hour = fields.require("hour", directive)
    return options.am_pm_name(Meridiem.of_hour(hour))


def _render_fraction(
    fields: CalendarFields, options: FormatOptions, modifiers: Modifiers
) -> str:
    # Width and pad do not apply; the recorded precision decides the digits
    microsecond, precision = fields.fraction("f")
    return f"{microsecond:06d}"[: max(precision, 1)]


def _render_offset(
    fields: CalendarFields, options: FormatOptions, modifiers: Modifiers
) -> str:
    if not fields.is_aware:
        return ""
    total = fields.require("utc_offset", "z") + fields.require("std_offset", "z")
    sign = "+" if total >= 0 else "-"
    absolute = abs(total)
    hhmm = (absolute // 3600) * 100 + (absolute // 60) % 60
    return sign + pad_leading(str(hhmm), modifiers.width, modifiers.pad)


def _render_zone(
    fields: CalendarFields, options: FormatOptions, modifiers: Modifiers
) -> str:
    abbreviation = fields.get("zone_abbr", "")
    if not abbreviation:
        return ""
    return pad_leading(abbreviation, modifiers.width, modifiers.pad)


_TABLE: tuple[Directive, ...] = (
    Directive("%", "literal %", extract=lambda f, o: "%"),
    Directive(
        "a",
        "abbreviated weekday name",
        default_pad=SPACE_PADDING,
        extract=lambda f, o: o.day_of_week_name_abbreviated(f.day_of_week("a")),
    ),
    Directive(
        "A",
        "full weekday name",
        default_pad=SPACE_PADDING,
        extract=lambda f, o: o.day_of_week_name(f.day_of_week("A")),
    ),
    Directive(
        "b",
        "abbreviated month name",
        default_pad=SPACE_PADDING,
        extract=lambda f, o: o.month_name_abbreviated(f.require("month", "b")),
    ),
    Directive(
        "B",
        "full month name",
        default_pad=SPACE_PADDING,
        extract=lambda f, o: o.month_name(f.require("month", "B")),
    ),
    Directive("c", "preferred date+time representation", preferred=True),
    Directive(
        "d", "day of the month", 2, extract=lambda f, o: f.require("day", "d")
    ),
    Directive("f", "sub-second fraction", render=_render_fraction),
    Directive(
        "H", "hour, 24-hour clock", 2, extract=lambda f, o: f.require("hour", "H")
    ),
    Directive(
        "I",
        "hour, 12-hour clock",
        2,
        extract=lambda f, o: (f.require("hour", "I") + 23) % 12 + 1,
    ),
    Directive("j", "day of the year", 3, extract=lambda f, o: f.day_of_year("j")),
    Directive("m", "month", 2, extract=lambda f, o: f.require("month", "m")),
    Directive("M", "minute", 2, extract=lambda f, o: f.require("minute", "M")),
    Directive(
        "p",
        "AM or PM",
        default_pad=SPACE_PADDING,
        extract=lambda f, o: _meridiem(f, o, "p").upper(),
    ),
    Directive(
        "P",
        "am or pm",
        default_pad=SPACE_PADDING,
        extract=lambda f, o: _meridiem(f, o, "P").lower(),
    ),
    Directive("q", "quarter", extract=lambda f, o: f.quarter("q")),
    Directive("S", "second", 2, extract=lambda f, o: f.require("second", "S")),
    Directive("u", "ISO day of the week", 2, extract=lambda f, o: f.day_of_week("u")),
    Directive("x", "preferred date representation", preferred=True),
    Directive("X", "preferred time representation", preferred=True),
    Directive(
        "y", "year modulo 100", 2, extract=lambda f, o: f.require("year", "y") % 100
    ),
    Directive("Y", "year", 4, extract=lambda f, o: f.require("year", "Y")),
    Directive("z", "UTC offset", 4, render=_render_offset),
    Directive(
        "Z", "zone abbreviation", default_pad=SPACE_PADDING, render=_render_zone
    ),
)

DIRECTIVES: dict[str, Directive] = {directive.char: directive for directive in _TABLE}


def lookup(char: str | None) -> Directive | None:
    """Return the Directive for a character, or None if it is not one.

    Examples:
        >>> lookup("Y").default_width
        4
        >>> lookup("J") is None
        True
    """
    if char is None:
        return None
    return DIRECTIVES.get(char)


__all__ = ["Directive", "DIRECTIVES", "lookup"]
