"""Time zone representation for offset-aware values.

This module provides the Zone class: a fixed UTC offset split into its
standard part and its daylight-saving part, plus the abbreviation in use.
No time zone database is consulted.
"""

from __future__ import annotations

from typing import ClassVar

from nimble_strftime._internal.validation import validate_offset
from nimble_strftime.errors import ValidationError


class Zone:
    """The zone information carried by an aware DateTime.

    The total offset from UTC is ``utc_offset + std_offset``. ``utc_offset``
    is the zone's standard offset from UTC and ``std_offset`` is the extra
    daylight-saving offset currently applied (0 outside DST).

    Attributes:
        utc_offset: Standard offset from UTC in seconds.
        std_offset: Daylight-saving offset in seconds.
        abbreviation: Zone abbreviation such as "UTC" or "EEST".

    Examples:
        >>> Zone.utc().total_offset
        0

        >>> zone = Zone(7200, 3600, "EEST")
        >>> zone.total_offset
        10800
    """

    __slots__ = ("_utc_offset", "_std_offset", "_abbreviation")

    _utc_instance: ClassVar[Zone | None] = None

    def __init__(
        self,
        utc_offset: int = 0,
        std_offset: int = 0,
        abbreviation: str = "",
    ) -> None:
        """Create a Zone.

        Args:
            utc_offset: Standard offset from UTC in seconds.
            std_offset: Daylight-saving offset in seconds.
            abbreviation: Zone abbreviation, "" when unknown.

        Raises:
            ValidationError: If an offset is outside +/- 24 hours or the
                abbreviation is not a string.
        """
        validate_offset("utc_offset", utc_offset)
        validate_offset("std_offset", std_offset)
        if not isinstance(abbreviation, str):
            raise ValidationError(
                f"abbreviation must be a string, got {type(abbreviation).__name__}"
            )

        self._utc_offset: int = utc_offset
        self._std_offset: int = std_offset
        self._abbreviation: str = abbreviation

    @classmethod
    def utc(cls) -> Zone:
        """Return the UTC zone.

        All calls return the same instance.

        Examples:
            >>> Zone.utc().abbreviation
            'UTC'
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, 0, "UTC")
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0, abbreviation: str = "") -> Zone:
        """Create a Zone without daylight saving from an hour/minute offset.

        Args:
            hours: Hour component of the offset. Sign determines direction.
            minutes: Minute component (0-59), signed by hours.
            abbreviation: Optional zone abbreviation.

        Examples:
            >>> Zone.from_hours(5, 30).utc_offset
            19800
            >>> Zone.from_hours(-5).utc_offset
            -18000
        """
        if not (0 <= minutes <= 59):
            raise ValidationError(f"minutes must be 0-59, got {minutes}")
        if hours >= 0:
            offset = hours * 3600 + minutes * 60
        else:
            offset = hours * 3600 - minutes * 60
        return cls(offset, 0, abbreviation)

    @property
    def utc_offset(self) -> int:
        """Return the standard offset from UTC in seconds."""
        return self._utc_offset

    @property
    def std_offset(self) -> int:
        """Return the daylight-saving offset in seconds."""
        return self._std_offset

    @property
    def abbreviation(self) -> str:
        """Return the zone abbreviation."""
        return self._abbreviation

    @property
    def total_offset(self) -> int:
        """Return the full offset from UTC in seconds (utc_offset + std_offset)."""
        return self._utc_offset + self._std_offset

    def __eq__(self, other: object) -> bool:
        """Zones are equal when offsets and abbreviation match."""
        if not isinstance(other, Zone):
            return NotImplemented
        return (
            self._utc_offset == other._utc_offset
            and self._std_offset == other._std_offset
            and self._abbreviation == other._abbreviation
        )

    def __hash__(self) -> int:
        return hash((self._utc_offset, self._std_offset, self._abbreviation))

    def __repr__(self) -> str:
        """Return a string representation for debugging.

        Returns:
            String like "Zone(7200, 3600, 'EEST')".
        """
        return f"Zone({self._utc_offset}, {self._std_offset}, {self._abbreviation!r})"


__all__ = ["Zone"]
