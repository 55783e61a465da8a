"""strftime-style formatting of calendar values.

This module provides the template interpreter and its collaborators:
    - format / render: the entry points
    - FormatOptions: preferred templates and naming resolvers
    - CalendarFields: field access over any supported value
    - the directive table, modifier parser and padding helpers

Examples:
    >>> from nimble_strftime import DateTime
    >>> from nimble_strftime.formatting import format

    >>> format(DateTime(2019, 8, 15, 17, 7, 57), "%c")
    '2019-08-15 17:07:57'
"""

from __future__ import annotations

from nimble_strftime.formatting.directives import DIRECTIVES, Directive
from nimble_strftime.formatting.fields import CalendarFields
from nimble_strftime.formatting.modifiers import Modifiers, ParsedDirective, parse_modifiers
from nimble_strftime.formatting.options import DEFAULT_OPTIONS, FormatOptions, NameResolver
from nimble_strftime.formatting.padding import NO_PADDING, pad_leading
from nimble_strftime.formatting.strftime import format, render, strftime

__all__: list[str] = [
    # Entry points
    "format",
    "render",
    "strftime",
    # Options
    "FormatOptions",
    "NameResolver",
    "DEFAULT_OPTIONS",
    # Field access
    "CalendarFields",
    # Interpreter pieces
    "DIRECTIVES",
    "Directive",
    "Modifiers",
    "ParsedDirective",
    "parse_modifiers",
    "NO_PADDING",
    "pad_leading",
]
