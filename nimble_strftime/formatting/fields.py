"""Uniform field access over the values the formatter accepts.

CalendarFields is the single interface the directive table reads from.
It is built from one of:
    - a Date, Time or DateTime of this package (through calendar_fields())
    - a standard library datetime.date, datetime.time or datetime.datetime
    - any mapping of field names to values

A field the value does not carry raises MissingFieldError at the moment
a directive asks for it.
"""

from __future__ import annotations

import datetime as _datetime
from collections.abc import Mapping
from typing import Any

from nimble_strftime._internal.calendar import (
    day_of_week,
    day_of_year,
    quarter_of_year,
)
from nimble_strftime._internal.constants import MAX_PRECISION
from nimble_strftime.errors import MissingFieldError

# Fields a value may publish
FIELD_NAMES: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "microsecond",
    "utc_offset",
    "std_offset",
    "zone_abbr",
)


class CalendarFields:
    """Read-only view of the fields a calendar value provides.

    Examples:
        >>> fields = CalendarFields.of({"month": 8})
        >>> fields.require("month")
        8
        >>> fields.has("year")
        False
    """

    __slots__ = ("_values", "_type_name")

    def __init__(self, values: Mapping[str, Any], type_name: str = "value") -> None:
        self._values: dict[str, Any] = {
            name: values[name] for name in FIELD_NAMES if name in values
        }
        self._type_name: str = type_name

    @classmethod
    def of(cls, value: Any) -> CalendarFields:
        """Build the field view for any supported value.

        Raises:
            TypeError: If value is not a supported calendar value.
        """
        from nimble_strftime.core.date import Date
        from nimble_strftime.core.datetime import DateTime
        from nimble_strftime.core.time import Time

        if isinstance(value, CalendarFields):
            return value

        type_name = type(value).__name__
        calendar_fields = getattr(value, "calendar_fields", None)
        if callable(calendar_fields):
            return cls(calendar_fields(), type_name)

        # datetime.datetime is a subclass of datetime.date
        if isinstance(value, _datetime.datetime):
            return cls(DateTime.from_stdlib(value).calendar_fields(), type_name)
        if isinstance(value, _datetime.date):
            return cls(Date.from_stdlib(value).calendar_fields(), type_name)
        if isinstance(value, _datetime.time):
            return cls(Time.from_stdlib(value).calendar_fields(), type_name)

        if isinstance(value, Mapping):
            return cls(value, type_name)

        raise TypeError(
            f"expected a Date, Time, DateTime, datetime object or mapping, "
            f"got {type_name}"
        )

    @property
    def type_name(self) -> str:
        """Return the type name of the value these fields came from."""
        return self._type_name

    def has(self, name: str) -> bool:
        """Return True if the value carries the field."""
        return name in self._values

    def get(self, name: str, default: Any = None) -> Any:
        """Return a field's value, or ``default`` if the value lacks it."""
        return self._values.get(name, default)

    def require(self, name: str, directive: str | None = None) -> Any:
        """Return a field's value.

        Args:
            name: The field name.
            directive: The directive asking for it, for error messages.

        Raises:
            MissingFieldError: If the value does not carry the field.
        """
        try:
            return self._values[name]
        except KeyError:
            raise MissingFieldError(name, self._type_name, directive) from None

    @property
    def is_aware(self) -> bool:
        """Return True if the value carries both offset fields."""
        return "utc_offset" in self._values and "std_offset" in self._values

    def fraction(self, directive: str | None = None) -> tuple[int, int]:
        """Return the sub-second fraction as (microsecond, precision).

        A bare integer microsecond is taken at full precision.
        """
        microsecond = self.require("microsecond", directive)
        if isinstance(microsecond, tuple):
            return microsecond
        return microsecond, MAX_PRECISION

    def _ymd(self, directive: str | None) -> tuple[int, int, int]:
        return (
            self.require("year", directive),
            self.require("month", directive),
            self.require("day", directive),
        )

    def day_of_week(self, directive: str | None = None) -> int:
        """Return the ISO day of week (1=Monday, 7=Sunday)."""
        return day_of_week(*self._ymd(directive))

    def day_of_year(self, directive: str | None = None) -> int:
        """Return the day of the year (1-366)."""
        return day_of_year(*self._ymd(directive))

    def quarter(self, directive: str | None = None) -> int:
        """Return the quarter of the year (1-4)."""
        return quarter_of_year(self.require("month", directive))

    def __repr__(self) -> str:
        return f"CalendarFields({self._values!r}, {self._type_name!r})"


__all__ = ["FIELD_NAMES", "CalendarFields"]
