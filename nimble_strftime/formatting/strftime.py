"""strftime-style formatting.

This module renders a calendar value through a format template. Literal
text is copied as is; each ``%<pad><width><directive>`` section is
replaced by the directive's text, padded to the requested width.

The three preferred directives (%c, %x, %X) expand to templates taken
from the FormatOptions and rendered against the same value. A preferred
directive reached again while its own expansion is still running raises
CyclicPreferredFormatError, whether it references itself directly or
through the other two.

Functions:
    format: Format a value, building options from keyword overrides.
    render: Render a template against a value with given options.

Examples:
    >>> from nimble_strftime import DateTime, Zone
    >>> from nimble_strftime.formatting import format

    >>> dt = DateTime(2019, 8, 26, 13, 52, 6, zone=Zone.utc())
    >>> format(dt, "%a, %B %d %Y")
    'Mon, August 26 2019'

    >>> format(dt, "%c", preferred_datetime="%H:%M:%S %d-%m-%y")
    '13:52:06 26-08-19'
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from nimble_strftime.errors import CyclicPreferredFormatError, MalformedDirectiveError
from nimble_strftime.formatting.directives import Directive, lookup
from nimble_strftime.formatting.fields import CalendarFields
from nimble_strftime.formatting.modifiers import Modifiers, ParsedDirective, parse_modifiers
from nimble_strftime.formatting.options import (
    DEFAULT_OPTIONS,
    PREFERRED_OPTIONS,
    FormatOptions,
)
from nimble_strftime.formatting.padding import pad_leading

logger = logging.getLogger(__name__)


class _Context(NamedTuple):
    """State shared by one render and everything it expands.

    ``expanding`` holds the preferred directives whose templates are being
    rendered further up the current descent.
    """

    fields: CalendarFields
    options: FormatOptions
    expanding: frozenset[str]


def format(
    value: Any,
    template: str,
    options: FormatOptions | None = None,
    **overrides: Any,
) -> str:
    """Format a calendar value using a strftime-style template.

    Args:
        value: A Date, Time or DateTime, a standard library date, time or
            datetime, or a mapping of field names.
        template: Format template with %-directives.
        options: Formatting options; defaults to FormatOptions().
        **overrides: FormatOptions fields to change for this call.

    Returns:
        Formatted string.

    Raises:
        MissingFieldError: If a directive needs a field the value lacks.
        MalformedDirectiveError: If the template holds an unknown directive
            (unless passthrough_unknown is set) or ends inside one.
        CyclicPreferredFormatError: If a preferred format expands into itself.
        TypeError: If value is not a supported calendar value or an
            override is not a FormatOptions field.

    Examples:
        >>> from nimble_strftime import Date, Time

        >>> format(Date(2019, 8, 26), "%A %-d %B")
        'Monday 26 August'

        >>> format(Time(17, 7, 57, microsecond=1000, precision=3), "%-999M")
        '7'

        >>> format({"month": 8}, "%B %b", month_names=["Jan.", "Feb.",
        ...     "Mar.", "Apr.", "May", "June", "July", "Aug.", "Sept.",
        ...     "Oct.", "Nov.", "Dec."])
        'Aug. Aug'
    """
    if options is None:
        options = FormatOptions(**overrides) if overrides else DEFAULT_OPTIONS
    elif overrides:
        options = options.replace(**overrides)
    return render(template, value, options)


def render(template: str, value: Any, options: FormatOptions | None = None) -> str:
    """Render ``template`` against ``value``.

    Args:
        template: Format template with %-directives.
        value: Any value accepted by CalendarFields.of.
        options: Formatting options; defaults to FormatOptions().

    Returns:
        Formatted string.
    """
    if not isinstance(template, str):
        raise TypeError(f"template must be a string, got {type(template).__name__}")
    if options is None:
        options = DEFAULT_OPTIONS
    context = _Context(CalendarFields.of(value), options, frozenset())
    return _render(template, context)


def _render(template: str, context: _Context) -> str:
    """Scan the template left to right, collecting fragments in order."""
    fragments: list[str] = []
    i = 0
    length = len(template)
    while i < length:
        percent = template.find("%", i)
        if percent == -1:
            fragments.append(template[i:])
            break
        if percent > i:
            fragments.append(template[i:percent])

        parsed = parse_modifiers(template, percent)
        fragments.append(_format_section(parsed, context))
        i = parsed.end

    return "".join(fragments)


def _format_section(parsed: ParsedDirective, context: _Context) -> str:
    """Format one directive section.

    Raises:
        MalformedDirectiveError: If the section holds no known directive
            and passthrough is off.
    """
    directive = lookup(parsed.directive)
    if directive is None:
        if context.options.passthrough_unknown:
            logger.debug(
                "passing unknown directive %r at %d through", parsed.section, parsed.start
            )
            return parsed.section
        if parsed.directive is None:
            raise MalformedDirectiveError(
                parsed.section, parsed.start, "format template ends inside directive"
            )
        raise MalformedDirectiveError(parsed.section, parsed.start)

    modifiers = parsed.resolve(directive.default_pad, directive.default_width)
    if directive.preferred:
        return _expand_preferred(directive, modifiers, context)
    return directive.format(context.fields, context.options, modifiers)


def _expand_preferred(
    directive: Directive, modifiers: Modifiers, context: _Context
) -> str:
    """Render a preferred template and pad the result as a single unit.

    The directive is marked as expanding only inside the nested render;
    the caller's context is left untouched, so sibling uses of the same
    directive later in the template are not affected.

    Raises:
        CyclicPreferredFormatError: If the directive is already expanding.
    """
    char = directive.char
    if char in context.expanding:
        raise CyclicPreferredFormatError(char, PREFERRED_OPTIONS[char])

    template = context.options.preferred_template(char)
    logger.debug("expanding %%%s to %r", char, template)
    nested = context._replace(expanding=context.expanding | {char})
    result = _render(template, nested)
    return pad_leading(result, modifiers.width, modifiers.pad)


# Alias matching the standard library's name
strftime = format


__all__ = ["format", "render", "strftime"]
