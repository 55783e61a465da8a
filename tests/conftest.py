"""Pytest configuration and fixtures for nimble_strftime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so nimble_strftime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from nimble_strftime import DateTime, Time, Zone  # noqa: E402


@pytest.fixture
def utc_datetime() -> DateTime:
    """2019-08-15 17:07:57.001 UTC."""
    return DateTime(2019, 8, 15, 17, 7, 57, microsecond=1000, precision=3, zone=Zone.utc())


@pytest.fixture
def naive_datetime() -> DateTime:
    """2019-08-15 17:07:57.001 without a zone."""
    return DateTime(2019, 8, 15, 17, 7, 57, microsecond=1000, precision=3)


@pytest.fixture
def time_value() -> Time:
    """17:07:57.001."""
    return Time(17, 7, 57, microsecond=1000, precision=3)
