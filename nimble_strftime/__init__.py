"""nimble_strftime: strftime-style formatting for calendar values.

nimble_strftime renders dates, times and datetimes through format
templates such as ``"%Y-%m-%d %H:%M:%S"``, with optional padding and
width modifiers, configurable month/weekday/am-pm names and
configurable preferred representations for %c, %x and %X.

Core Types:
    Date: Calendar date (year, month, day)
    Time: Time of day with recorded sub-second precision
    DateTime: Combined date and time, naive or aware

Units:
    Meridiem: AM/PM designation
    Zone: UTC offset, daylight-saving offset and abbreviation

Format Functions:
    format: Format a value with a strftime-style template
    FormatOptions: Configuration for format

Exceptions:
    StrftimeError: Base exception
    ValidationError: Invalid input values
    MissingFieldError: Value lacks a field a directive needs
    MalformedDirectiveError: Unknown or truncated directive
    CyclicPreferredFormatError: Preferred format expands into itself

Example:
    >>> from nimble_strftime import DateTime, Zone, format
    >>> format(DateTime(2019, 8, 26, 13, 52, 6, zone=Zone.utc()), "%y-%m-%d %I:%M:%S %p")
    '19-08-26 01:52:06 PM'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from nimble_strftime.core.date import Date
from nimble_strftime.core.datetime import DateTime
from nimble_strftime.core.time import Time

# Units
from nimble_strftime.units.meridiem import Meridiem
from nimble_strftime.units.zone import Zone

# Exceptions
from nimble_strftime.errors import (
    CyclicPreferredFormatError,
    MalformedDirectiveError,
    MissingFieldError,
    StrftimeError,
    ValidationError,
)

# Format functions
from nimble_strftime.formatting import FormatOptions, format

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Time",
    # Units
    "Meridiem",
    "Zone",
    # Exceptions
    "StrftimeError",
    "ValidationError",
    "MissingFieldError",
    "MalformedDirectiveError",
    "CyclicPreferredFormatError",
    # Format functions
    "format",
    "FormatOptions",
]
