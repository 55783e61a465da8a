"""nimble_strftime exception hierarchy.

All nimble_strftime-specific exceptions inherit from StrftimeError.
"""

from __future__ import annotations


class StrftimeError(Exception):
    """Base exception for all nimble_strftime errors."""

    pass


class ValidationError(StrftimeError, ValueError):
    """Invalid input values.

    Raised when a calendar value or a formatting option is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - A month name table without exactly 12 entries
    """

    pass


class MissingFieldError(StrftimeError, LookupError):
    """The value being formatted lacks a field a directive needs.

    Examples:
        - %Y on a Time
        - %X on a Date
        - %B on a mapping without a "month" key

    Attributes:
        field: Name of the missing field (e.g. "year").
        value_type: Type name of the formatted value.
        directive: The directive that asked for the field, if known.
    """

    def __init__(
        self, field: str, value_type: str, directive: str | None = None
    ) -> None:
        self.field = field
        self.value_type = value_type
        self.directive = directive
        if directive is None:
            message = f"{value_type} has no {field}"
        else:
            message = f"format directive %{directive} requires {field}, but {value_type} has no {field}"
        super().__init__(message)


class MalformedDirectiveError(StrftimeError, ValueError):
    """A format template contains a directive that cannot be resolved.

    Examples:
        - An unknown directive character such as %J
        - A pad selector after width digits such as %5_d
        - A template ending right after % or inside its modifiers

    Attributes:
        section: The raw template text of the offending directive.
        position: Index of the directive's % in the template.
    """

    def __init__(self, section: str, position: int, reason: str = "unknown format directive") -> None:
        self.section = section
        self.position = position
        super().__init__(f"{reason} {section!r} at position {position}")


class CyclicPreferredFormatError(StrftimeError):
    """A preferred format expanded into itself.

    Raised when %c, %x or %X is reached again while its own expansion is
    still in progress, either directly (preferred_datetime="%c") or
    through the other preferred formats.

    Attributes:
        directive: The preferred directive character that was re-entered.
        option: The option holding the cyclic template.
    """

    def __init__(self, directive: str, option: str) -> None:
        self.directive = directive
        self.option = option
        super().__init__(
            f"tried to format {option} (%{directive}) within another {option} format"
        )


__all__ = [
    "StrftimeError",
    "ValidationError",
    "MissingFieldError",
    "MalformedDirectiveError",
    "CyclicPreferredFormatError",
]
