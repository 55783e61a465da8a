"""Meridiem enumeration for AM/PM designation.

This module provides the Meridiem enum passed to am/pm name resolvers.
"""

from __future__ import annotations

from enum import Enum


class Meridiem(Enum):
    """Half of the day an hour belongs to.

    Midnight through 11 o'clock is AM; noon through 23 o'clock is PM.

    Examples:
        >>> Meridiem.of_hour(0)
        <Meridiem.AM: 'am'>
        >>> Meridiem.of_hour(12)
        <Meridiem.PM: 'pm'>
    """

    AM = "am"  # Ante meridiem
    PM = "pm"  # Post meridiem

    @classmethod
    def of_hour(cls, hour: int) -> Meridiem:
        """Return the meridiem for a 24-hour clock hour."""
        return cls.PM if hour >= 12 else cls.AM

    @property
    def index(self) -> int:
        """Return the position of this meridiem in an (am, pm) table."""
        return 0 if self is Meridiem.AM else 1


__all__ = ["Meridiem"]
