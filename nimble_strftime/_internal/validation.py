"""Validation utilities for nimble_strftime.

This module provides range checks shared by the calendar value types and
the formatting options.

This module is not part of the public API.
"""

from __future__ import annotations

from nimble_strftime._internal.constants import (
    MAX_PRECISION,
    MAX_UTC_OFFSET_SECONDS,
    MAX_YEAR,
    MIN_YEAR,
)
from nimble_strftime.errors import ValidationError


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that an integer component is within an inclusive range.

    Args:
        name: The component name, used in the error message.
        value: The value to check.
        min_val: Smallest accepted value.
        max_val: Largest accepted value.

    Raises:
        ValidationError: If value is not an int or is out of range.

    Examples:
        >>> validate_range("hour", 25, 0, 23)
        Traceback (most recent call last):
        ...
        ValidationError: hour must be between 0 and 23, got 25
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < min_val or value > max_val:
        raise ValidationError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from nimble_strftime._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if not isinstance(day, int) or day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_precision(precision: int) -> None:
    """Validate a sub-second precision, counted in decimal digits (0-6)."""
    validate_range("precision", precision, 0, MAX_PRECISION)


def validate_offset(name: str, seconds: int) -> None:
    """Validate an offset in seconds against +/- 24 hours."""
    validate_range(name, seconds, -MAX_UTC_OFFSET_SECONDS, MAX_UTC_OFFSET_SECONDS)


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_precision",
    "validate_offset",
]
