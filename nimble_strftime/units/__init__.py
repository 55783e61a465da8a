"""Formatting units and enumerations.

This module provides:
    - Meridiem: AM/PM designation enum
    - Zone: UTC offset, daylight-saving offset and abbreviation
"""

from __future__ import annotations

from nimble_strftime.units.meridiem import Meridiem
from nimble_strftime.units.zone import Zone

__all__: list[str] = [
    "Meridiem",
    "Zone",
]
