"""Calendar utilities for nimble_strftime.

This module provides internal functions for the calendar arithmetic the
formatting directives need: leap years, month lengths, ordinals, day of
week, day of year and quarter, all in the proleptic Gregorian calendar.

Ordinal 1 = 0001-01-01 (a Monday).

This module is not part of the public API.
"""

from __future__ import annotations

from nimble_strftime._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of year 0 / 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    # Python's // floors toward negative infinity, so this holds for BCE years
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + days_before_month(year, month) + day


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the day of the year (1-366).

    Examples:
        >>> day_of_year(2019, 8, 15)
        227
        >>> day_of_year(2024, 12, 31)
        366
    """
    return days_before_month(year, month) + day


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the ISO day of the week, Monday as 1 through Sunday as 7.

    Examples:
        >>> day_of_week(2019, 8, 26)  # Monday
        1
        >>> day_of_week(2019, 8, 25)  # Sunday
        7
    """
    return (ymd_to_ordinal(year, month, day) - 1) % 7 + 1


def quarter_of_year(month: int) -> int:
    """Return the quarter (1-4) a month falls in.

    Examples:
        >>> quarter_of_year(1)
        1
        >>> quarter_of_year(8)
        3
    """
    return (month - 1) // 3 + 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_before_month",
    "ymd_to_ordinal",
    "day_of_year",
    "day_of_week",
    "quarter_of_year",
]
