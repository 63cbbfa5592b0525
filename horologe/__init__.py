"""Horologe: exact date, time and timezone values with nanosecond precision.

Horologe separates physical time (instants on the UTC timeline) from civil
time (calendar and clock fields with no zone), and joins them through fixed
offsets and named zones whose rules are supplied by the caller.

Core Types:
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, nanosecond)
    LocalDateTime: Date and time with no offset or zone
    Instant: Point on the UTC timeline, nanoseconds since the Unix epoch
    OffsetDateTime: Date and time at a fixed UTC offset
    ZonedDateTime: Date and time in a named timezone
    Duration: Calendar months and days plus exact nanoseconds

Units:
    Weekday: ISO day of week
    UtcOffset: Fixed offset from UTC
    Disambiguate: How to resolve a repeated wall-clock time
    GapPolicy: How to resolve a skipped wall-clock time
    TimeUnit, RoundingMode: Units and directions for LocalDateTime.round

Timezones:
    ZoneRules, ZoneRuleSet: Transition tables for named zones
    TimezoneResolver: Offsets for instants and wall-clock times

Format Functions:
    parse_iso8601: Parse an ISO 8601 date, time, date-time or duration
    format_iso8601: Format a temporal object as ISO 8601

Exceptions:
    HorologeError: Base exception
    ValidationError: Invalid input values
    InvalidDateError, InvalidTimeError: Invalid calendar or clock fields
    InvalidFormatError: Failed to parse or format text
    RangeOverflowError: Result outside the supported range
    TimezoneError: Timezone failures
    AmbiguousTimeError, SkippedTimeError, UnknownZoneError

Example:
    >>> from horologe import LocalDateTime, Duration
    >>> dt = LocalDateTime(2024, 1, 31, 9, 0)
    >>> dt + Duration(months=1)
    LocalDateTime(2024, 2, 29, 9, 0, 0, nanosecond=0)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from horologe.core.date import Date
from horologe.core.duration import Duration
from horologe.core.instant import Instant
from horologe.core.local_datetime import LocalDateTime
from horologe.core.offset_datetime import OffsetDateTime
from horologe.core.time import Time
from horologe.core.zoned_datetime import ZonedDateTime

# Units
from horologe.units.disambiguate import Disambiguate, GapPolicy
from horologe.units.offset import UtcOffset
from horologe.units.rounding import RoundingMode, TimeUnit
from horologe.units.weekday import Weekday

# Timezones
from horologe.tz import TimezoneResolver, ZoneRules, ZoneRuleSet

# Exceptions
from horologe.errors import (
    AmbiguousTimeError,
    HorologeError,
    InvalidDateError,
    InvalidFormatError,
    InvalidTimeError,
    RangeOverflowError,
    SkippedTimeError,
    TimezoneError,
    UnknownZoneError,
    ValidationError,
)

# Format functions
from horologe.format import format_iso8601, parse_iso8601

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Duration",
    "Instant",
    "LocalDateTime",
    "OffsetDateTime",
    "Time",
    "ZonedDateTime",
    # Units
    "Disambiguate",
    "GapPolicy",
    "RoundingMode",
    "TimeUnit",
    "UtcOffset",
    "Weekday",
    # Timezones
    "TimezoneResolver",
    "ZoneRules",
    "ZoneRuleSet",
    # Exceptions
    "HorologeError",
    "ValidationError",
    "InvalidDateError",
    "InvalidTimeError",
    "InvalidFormatError",
    "RangeOverflowError",
    "TimezoneError",
    "AmbiguousTimeError",
    "SkippedTimeError",
    "UnknownZoneError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
