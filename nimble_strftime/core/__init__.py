"""Core calendar value types.

This module provides the value shapes the formatter understands:
    - Date: Calendar date (year, month, day)
    - Time: Time of day with recorded sub-second precision
    - DateTime: Combined date and time, naive or aware through a Zone
"""

from __future__ import annotations

from nimble_strftime.core.date import Date
from nimble_strftime.core.datetime import DateTime
from nimble_strftime.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Time",
]
