"""Parsing of the modifiers between % and a directive character.

A directive section reads::

    %<pad><width><directive>

where ``<pad>`` is at most one of ``-`` (no padding), ``0`` (zeros) or
``_`` (spaces), ``<width>`` is an optional run of decimal digits and
``<directive>`` is the single character that follows.

The pad selector is only recognized right after ``%``; any later ``0``
belongs to the width. A ``-`` pad forces the width to zero.
"""

from __future__ import annotations

from typing import NamedTuple

from nimble_strftime.formatting.padding import (
    NO_PADDING,
    SPACE_PADDING,
    ZERO_PADDING,
)

PAD_SELECTORS: dict[str, str] = {
    "-": NO_PADDING,
    "0": ZERO_PADDING,
    "_": SPACE_PADDING,
}


class Modifiers(NamedTuple):
    """A directive with its resolved width and pad."""

    directive: str
    width: int
    pad: str


class ParsedDirective(NamedTuple):
    """A directive section as read from the template, before defaulting.

    Attributes:
        directive: The directive character, or None if the template ended
            before one was found.
        pad: The pad selected in the template, or None if absent.
        width: The width given in the template, or None if absent.
        start: Index of the section's ``%``.
        end: Index just past the section.
        section: The raw section text, ``%`` included.
    """

    directive: str | None
    pad: str | None
    width: int | None
    start: int
    end: int
    section: str

    def resolve(self, default_pad: str, default_width: int) -> Modifiers:
        """Fill in the pad, then the width, from directive defaults.

        Examples:
            >>> parse_modifiers("%d", 0).resolve("0", 2)
            Modifiers(directive='d', width=2, pad='0')
            >>> parse_modifiers("%_d", 0).resolve("0", 2)
            Modifiers(directive='d', width=2, pad=' ')
            >>> parse_modifiers("%-999M", 0).resolve("0", 2)
            Modifiers(directive='M', width=0, pad='')
        """
        pad = default_pad if self.pad is None else self.pad
        width = default_width if self.width is None else self.width
        if pad == NO_PADDING:
            width = 0
        return Modifiers(self.directive, width, pad)


def parse_modifiers(template: str, start: int) -> ParsedDirective:
    """Read the directive section starting at ``template[start]``.

    Args:
        template: The whole format template.
        start: Index of a ``%`` in the template.

    Returns:
        The parsed section. Its ``end`` is where scanning resumes.

    Examples:
        >>> parse_modifiers("%_5M", 0)
        ParsedDirective(directive='M', pad=' ', width=5, start=0, end=4, section='%_5M')
        >>> parse_modifiers("%010d", 0).width
        10
        >>> parse_modifiers("ab%", 2).directive is None
        True
    """
    length = len(template)
    i = start + 1

    pad: str | None = None
    if i < length and template[i] in PAD_SELECTORS:
        pad = PAD_SELECTORS[template[i]]
        i += 1

    width: int | None = None
    while i < length and "0" <= template[i] <= "9":
        width = (width or 0) * 10 + (ord(template[i]) - ord("0"))
        i += 1

    if pad == NO_PADDING and width is not None:
        width = 0

    directive: str | None = None
    if i < length:
        directive = template[i]
        i += 1

    return ParsedDirective(directive, pad, width, start, i, template[start:i])


__all__ = [
    "PAD_SELECTORS",
    "Modifiers",
    "ParsedDirective",
    "parse_modifiers",
]
