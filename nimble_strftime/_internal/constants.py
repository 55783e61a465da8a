"""Internal constants for nimble_strftime.

These constants define the limits, default names and default templates
used throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MICROS_PER_SECOND: int = 1_000_000

# Sub-second precision is recorded in decimal digits of a microsecond value
MAX_PRECISION: int = 6

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Timezone offset limits (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 24 * SECONDS_PER_HOUR  # +/- 24 hours

# Default naming tables, English
MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_OF_WEEK_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

AM_PM_NAMES: tuple[str, str] = ("am", "pm")

ABBREVIATION_SIZE: int = 3

# Default preferred templates for %c, %x and %X
PREFERRED_DATETIME: str = "%Y-%m-%d %H:%M:%S"
PREFERRED_DATE: str = "%Y-%m-%d"
PREFERRED_TIME: str = "%H:%M:%S"


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MICROS_PER_SECOND",
    "MAX_PRECISION",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "MAX_UTC_OFFSET_SECONDS",
    "MONTH_NAMES",
    "DAY_OF_WEEK_NAMES",
    "AM_PM_NAMES",
    "ABBREVIATION_SIZE",
    "PREFERRED_DATETIME",
    "PREFERRED_DATE",
    "PREFERRED_TIME",
]
