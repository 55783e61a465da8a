"""Time class representing a time of day.

This module provides the Time class, the time-only value shape. Besides
hour, minute and second a Time records its sub-second fraction as a
microsecond value together with the number of digits it was recorded
with, so ``17:07:57.5`` and ``17:07:57.500000`` format differently
under %f.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nimble_strftime._internal.constants import MAX_PRECISION
from nimble_strftime._internal.validation import (
    validate_precision,
    validate_range,
)

if TYPE_CHECKING:
    from nimble_strftime.formatting.options import FormatOptions


class Time:
    """A time of day with microsecond resolution and recorded precision.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-60, 60 for leap seconds).
        microsecond: The microsecond component (0-999999).
        precision: Number of recorded sub-second digits (0-6).

    Examples:
        >>> t = Time(17, 7, 57, microsecond=1000, precision=3)
        >>> t.strftime("%H:%M:%S.%f")
        '17:07:57.001'

        >>> Time(17, 7, 57).precision
        0
    """

    __slots__ = ("_hour", "_minute", "_second", "_microsecond", "_precision")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        microsecond: int = 0,
        precision: int | None = None,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-60).
            microsecond: The microsecond (0-999999).
            precision: Recorded sub-second digits (0-6). Defaults to 6 when
                a non-zero microsecond is given and to 0 otherwise.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Time(14, 30, 45, microsecond=500_000)
            Time(14, 30, 45, microsecond=500000, precision=6)
        """
        validate_range("hour", hour, 0, 23)
        validate_range("minute", minute, 0, 59)
        validate_range("second", second, 0, 60)
        validate_range("microsecond", microsecond, 0, 999_999)
        if precision is None:
            precision = MAX_PRECISION if microsecond else 0
        validate_precision(precision)

        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._microsecond: int = microsecond
        self._precision: int = precision

    @classmethod
    def from_stdlib(cls, value: Any) -> Time:
        """Create a Time from a standard library ``datetime.time``.

        The standard library does not record precision; it is taken as 6
        digits when the value has a fraction and 0 otherwise.
        """
        return cls(
            value.hour,
            value.minute,
            value.second,
            microsecond=value.microsecond,
        )

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self._minute

    @property
    def second(self) -> int:
        """Return the second component."""
        return self._second

    @property
    def microsecond(self) -> int:
        """Return the microsecond component (0-999999)."""
        return self._microsecond

    @property
    def precision(self) -> int:
        """Return the number of recorded sub-second digits (0-6)."""
        return self._precision

    def calendar_fields(self) -> dict[str, Any]:
        """Return the fields this value guarantees to the formatter.

        Returns:
            A dict with hour, minute, second and microsecond, the latter
            as a (value, precision) pair.
        """
        return {
            "hour": self._hour,
            "minute": self._minute,
            "second": self._second,
            "microsecond": (self._microsecond, self._precision),
        }

    def strftime(
        self, template: str, options: FormatOptions | None = None, **overrides: Any
    ) -> str:
        """Format this time using a strftime-style template."""
        from nimble_strftime.formatting.strftime import format

        return format(self, template, options, **overrides)

    def _key(self) -> tuple[int, int, int, int, int]:
        return (
            self._hour,
            self._minute,
            self._second,
            self._microsecond,
            self._precision,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Time(14, 30, 45, microsecond=0, precision=0)'.
        """
        return (
            f"Time({self._hour}, {self._minute}, {self._second}, "
            f"microsecond={self._microsecond}, precision={self._precision})"
        )

    def __str__(self) -> str:
        """Return the time formatted as %H:%M:%S."""
        return self.strftime("%H:%M:%S")


__all__ = ["Time"]
