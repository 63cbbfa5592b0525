"""Internal constants for Horologe.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Supported years (proleptic Gregorian)
MIN_YEAR: int = 1
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

# Julian Day Numbers of reference dates
JDN_UNIX_EPOCH: int = 2_440_588  # 1970-01-01
MIN_JDN: int = 1_721_426  # 0001-01-01
MAX_JDN: int = 5_373_484  # 9999-12-31

# Instant range, in nanoseconds since the Unix epoch
MIN_INSTANT_NANOS: int = (MIN_JDN - JDN_UNIX_EPOCH) * NANOS_PER_DAY
MAX_INSTANT_NANOS: int = (MAX_JDN - JDN_UNIX_EPOCH + 1) * NANOS_PER_DAY - 1

# UTC offsets must be strictly inside +/- one day
MAX_UTC_OFFSET_SECONDS: int = SECONDS_PER_DAY

# Duration component bounds (wide enough to span the whole date range)
MAX_DURATION_MONTHS: int = (MAX_YEAR - MIN_YEAR + 1) * 12
MAX_DURATION_DAYS: int = (MAX_YEAR - MIN_YEAR + 1) * 366
MAX_DURATION_NANOS: int = MAX_DURATION_DAYS * NANOS_PER_DAY


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "JDN_UNIX_EPOCH",
    "MIN_JDN",
    "MAX_JDN",
    "MIN_INSTANT_NANOS",
    "MAX_INSTANT_NANOS",
    "MAX_UTC_OFFSET_SECONDS",
    "MAX_DURATION_MONTHS",
    "MAX_DURATION_DAYS",
    "MAX_DURATION_NANOS",
]
