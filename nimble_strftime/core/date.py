"""Date class representing a calendar date.

This module provides the Date class, the date-only value shape. A Date
publishes year, month and day to the formatter, nothing else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nimble_strftime._internal.calendar import (
    day_of_week,
    day_of_year,
    quarter_of_year,
    ymd_to_ordinal,
)
from nimble_strftime._internal.validation import (
    validate_day,
    validate_month,
    validate_year,
)

if TYPE_CHECKING:
    from nimble_strftime.formatting.options import FormatOptions


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Uses astronomical year numbering, where year 0 exists and equals 1 BCE.

    Attributes:
        year: The year (can be negative for BCE dates).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2019, 8, 26)
        >>> d.day_of_week  # Monday
        1
        >>> d.strftime("%A, %B %d %Y")
        'Monday, August 26 2019'
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Date(2024, 2, 30)  # February doesn't have 30 days
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 29 for 2024-02, got 30
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._year: int = year
        self._month: int = month
        self._day: int = day

    @classmethod
    def from_stdlib(cls, value: Any) -> Date:
        """Create a Date from a standard library ``datetime.date``."""
        return cls(value.year, value.month, value.day)

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._day

    @property
    def day_of_week(self) -> int:
        """Return the ISO day of the week.

        Returns:
            Day of week (1=Monday, 7=Sunday).

        Examples:
            >>> Date(2019, 8, 25).day_of_week  # Sunday
            7
        """
        return day_of_week(self._year, self._month, self._day)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(2019, 8, 15).day_of_year
            227
        """
        return day_of_year(self._year, self._month, self._day)

    @property
    def quarter(self) -> int:
        """Return the quarter of the year (1-4)."""
        return quarter_of_year(self._month)

    def to_ordinal(self) -> int:
        """Return the ordinal day number (0001-01-01 is 1)."""
        return ymd_to_ordinal(self._year, self._month, self._day)

    def calendar_fields(self) -> dict[str, Any]:
        """Return the fields this value guarantees to the formatter.

        Returns:
            A dict with year, month and day.
        """
        return {"year": self._year, "month": self._month, "day": self._day}

    def strftime(
        self, template: str, options: FormatOptions | None = None, **overrides: Any
    ) -> str:
        """Format this date using a strftime-style template.

        See ``nimble_strftime.formatting`` for the template syntax.
        """
        from nimble_strftime.formatting.strftime import format

        return format(self, template, options, **overrides)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self._year, self._month, self._day) == (
            other._year,
            other._month,
            other._day,
        )

    def __hash__(self) -> int:
        return hash((self._year, self._month, self._day))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)'.
        """
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the date formatted as %Y-%m-%d."""
        return self.strftime("%Y-%m-%d")


__all__ = ["Date"]
