"""Internal utilities for nimble_strftime.

This module contains private implementation details:
    - Calendar arithmetic (day of week, day of year, quarter)
    - Constants, default names and default templates
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from nimble_strftime._internal.validation import (
    validate_day,
    validate_month,
    validate_offset,
    validate_precision,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_offset",
    "validate_precision",
    "validate_range",
    "validate_year",
]
