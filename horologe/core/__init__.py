"""Core temporal types.

This module provides the value types:
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with nanosecond precision
    - LocalDateTime: Date and time with no offset or zone
    - Instant: Point on the physical timeline
    - OffsetDateTime: Date and time at a fixed UTC offset
    - ZonedDateTime: Date and time in a named timezone
    - Duration: Calendar months and days plus exact nanoseconds
"""

from __future__ import annotations

from horologe.core.date import Date
from horologe.core.duration import Duration
from horologe.core.instant import Instant
from horologe.core.local_datetime import LocalDateTime
from horologe.core.offset_datetime import OffsetDateTime
from horologe.core.time import Time
from horologe.core.zoned_datetime import ZonedDateTime

__all__: list[str] = [
    "Date",
    "Duration",
    "Instant",
    "LocalDateTime",
    "OffsetDateTime",
    "Time",
    "ZonedDateTime",
]
