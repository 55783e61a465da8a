"""DateTime class combining date and time with an optional zone.

This module provides the DateTime class. A DateTime without a zone is
naive: %z and %Z format it as empty strings. With a Zone it is aware and
also publishes the UTC offset, daylight-saving offset and abbreviation.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Any

from nimble_strftime.core.date import Date
from nimble_strftime.core.time import Time
from nimble_strftime.errors import ValidationError
from nimble_strftime.units.zone import Zone

if TYPE_CHECKING:
    from nimble_strftime.formatting.options import FormatOptions


class DateTime:
    """A combined date and time with an optional zone.

    Attributes:
        year: The year component (can be negative for BCE).
        month: The month component (1-12).
        day: The day component (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-60).
        microsecond: The microsecond component (0-999999).
        precision: Recorded sub-second digits (0-6).
        zone: The Zone (None if naive).

    Examples:
        >>> dt = DateTime(2019, 8, 26, 13, 52, 6, zone=Zone.utc())
        >>> dt.strftime("%y-%m-%d %I:%M:%S %p")
        '19-08-26 01:52:06 PM'

        >>> DateTime(2019, 8, 15, 17, 7, 57).strftime("%z%Z")
        ''
    """

    __slots__ = ("_date", "_time", "_zone")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        microsecond: int = 0,
        precision: int | None = None,
        zone: Zone | None = None,
    ) -> None:
        """Create a DateTime from component parts.

        Raises:
            ValidationError: If any component is out of range or zone is
                not a Zone.

        Examples:
            >>> DateTime(2019, 8, 15, 17, 7, 57, microsecond=1000, precision=3)
            DateTime(2019, 8, 15, 17, 7, 57, microsecond=1000, precision=3)
        """
        if zone is not None and not isinstance(zone, Zone):
            raise ValidationError(f"zone must be a Zone, got {type(zone).__name__}")

        self._date: Date = Date(year, month, day)
        self._time: Time = Time(
            hour, minute, second, microsecond=microsecond, precision=precision
        )
        self._zone: Zone | None = zone

    @classmethod
    def combine(cls, date: Date, time: Time, *, zone: Zone | None = None) -> DateTime:
        """Combine a Date and a Time into a DateTime.

        Examples:
            >>> DateTime.combine(Date(2019, 8, 15), Time(17, 7, 57))
            DateTime(2019, 8, 15, 17, 7, 57, microsecond=0, precision=0)
        """
        return cls(
            date.year,
            date.month,
            date.day,
            time.hour,
            time.minute,
            time.second,
            microsecond=time.microsecond,
            precision=time.precision,
            zone=zone,
        )

    @classmethod
    def from_stdlib(cls, value: _datetime.datetime) -> DateTime:
        """Create a DateTime from a standard library ``datetime.datetime``.

        An aware value's ``utcoffset()`` is split into the standard offset
        and the ``dst()`` part; ``tzname()`` becomes the abbreviation.
        """
        zone = None
        offset = value.utcoffset()
        if offset is not None:
            dst = value.dst() or _datetime.timedelta(0)
            total = int(offset.total_seconds())
            std = int(dst.total_seconds())
            zone = Zone(total - std, std, value.tzname() or "")
        return cls.combine(Date.from_stdlib(value), Time.from_stdlib(value), zone=zone)

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def microsecond(self) -> int:
        return self._time.microsecond

    @property
    def precision(self) -> int:
        return self._time.precision

    @property
    def zone(self) -> Zone | None:
        """Return the zone, or None if this datetime is naive."""
        return self._zone

    @property
    def is_naive(self) -> bool:
        """Return True if this datetime has no zone."""
        return self._zone is None

    @property
    def is_aware(self) -> bool:
        """Return True if this datetime has a zone."""
        return self._zone is not None

    def date(self) -> Date:
        """Return the date part."""
        return self._date

    def time(self) -> Time:
        """Return the time part."""
        return self._time

    def calendar_fields(self) -> dict[str, Any]:
        """Return the fields this value guarantees to the formatter.

        Returns:
            The date and time fields, plus utc_offset, std_offset and
            zone_abbr when the datetime is aware.
        """
        fields = self._date.calendar_fields()
        fields.update(self._time.calendar_fields())
        if self._zone is not None:
            fields["utc_offset"] = self._zone.utc_offset
            fields["std_offset"] = self._zone.std_offset
            fields["zone_abbr"] = self._zone.abbreviation
        return fields

    def strftime(
        self, template: str, options: FormatOptions | None = None, **overrides: Any
    ) -> str:
        """Format this datetime using a strftime-style template."""
        from nimble_strftime.formatting.strftime import format

        return format(self, template, options, **overrides)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return (
            self._date == other._date
            and self._time == other._time
            and self._zone == other._zone
        )

    def __hash__(self) -> int:
        return hash((self._date, self._time, self._zone))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'DateTime(2024, 1, 15, 14, 30, 45, microsecond=0, precision=0)'.
        """
        base = (
            f"DateTime({self.year}, {self.month}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second}, "
            f"microsecond={self.microsecond}, precision={self.precision}"
        )
        if self._zone is not None:
            return f"{base}, zone={self._zone!r})"
        return f"{base})"

    def __str__(self) -> str:
        """Return the datetime formatted as %Y-%m-%d %H:%M:%S."""
        return self.strftime("%Y-%m-%d %H:%M:%S")


__all__ = ["DateTime"]
