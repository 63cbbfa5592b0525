"""Internal utilities for Horologe.

This module contains private implementation details:
    - Calendar math (Julian Day Numbers, leap years, month shifting)
    - Constants and magic numbers
    - Field validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
