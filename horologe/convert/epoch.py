"""Epoch conversion utilities for temporal objects.

This module provides functions for converting between exact temporal values
(Instant, OffsetDateTime, ZonedDateTime) and Unix timestamps in seconds,
milliseconds, microseconds or nanoseconds.

Functions:
    to_unix_seconds: Convert an exact value to Unix seconds.
    from_unix_seconds: Create an Instant (or OffsetDateTime) from Unix seconds.
    to_unix_millis / from_unix_millis: The same in milliseconds.
    to_unix_micros / from_unix_micros: The same in microseconds.
    to_unix_nanos / from_unix_nanos: The same in nanoseconds.

The Unix epoch is 1970-01-01 00:00:00 UTC (Julian Day 2440588). Coarser
units round toward the past, so ``to_unix_seconds`` of 0.5 seconds before
the epoch is -1.

Examples:
    >>> from horologe.convert import to_unix_seconds, from_unix_seconds
    >>> to_unix_seconds(from_unix_seconds(1705322200))
    1705322200

    >>> from horologe.units.offset import UtcOffset
    >>> str(from_unix_seconds(0, offset=UtcOffset.from_hours(1)))
    '1970-01-01T01:00:00+01:00'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from horologe._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)

if TYPE_CHECKING:
    from horologe.core.instant import Instant
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.zoned_datetime import ZonedDateTime
    from horologe.units.offset import UtcOffset

ExactType = Union["Instant", "OffsetDateTime", "ZonedDateTime"]


def _nanos_of(value: ExactType) -> int:
    from horologe.core._exact import ExactTime

    if not isinstance(value, ExactTime):
        raise TypeError(
            f"expected Instant, OffsetDateTime or ZonedDateTime, got {type(value).__name__}"
        )
    return value._instant_nanos()


def _from_nanos(nanos: int, offset: UtcOffset | None) -> Instant | OffsetDateTime:
    from horologe.core.instant import Instant

    instant = Instant(nanos)
    if offset is None:
        return instant
    return instant.to_offset(offset)


def to_unix_seconds(value: ExactType) -> int:
    """Return whole seconds since the Unix epoch.

    Examples:
        >>> from horologe.core.instant import Instant
        >>> to_unix_seconds(Instant.from_utc(2024, 1, 15, 12, 30))
        1705321800
    """
    return _nanos_of(value) // NANOS_PER_SECOND


def from_unix_seconds(
    seconds: int, *, offset: UtcOffset | None = None
) -> Instant | OffsetDateTime:
    """Create an Instant from Unix seconds, or an OffsetDateTime if offset is given.

    Raises:
        RangeOverflowError: If the timestamp is outside years 1-9999.
    """
    return _from_nanos(seconds * NANOS_PER_SECOND, offset)


def to_unix_millis(value: ExactType) -> int:
    """Return whole milliseconds since the Unix epoch."""
    return _nanos_of(value) // NANOS_PER_MILLISECOND


def from_unix_millis(
    millis: int, *, offset: UtcOffset | None = None
) -> Instant | OffsetDateTime:
    """Create an Instant from Unix milliseconds, or an OffsetDateTime if offset is given."""
    return _from_nanos(millis * NANOS_PER_MILLISECOND, offset)


def to_unix_micros(value: ExactType) -> int:
    """Return whole microseconds since the Unix epoch."""
    return _nanos_of(value) // NANOS_PER_MICROSECOND


def from_unix_micros(
    micros: int, *, offset: UtcOffset | None = None
) -> Instant | OffsetDateTime:
    """Create an Instant from Unix microseconds, or an OffsetDateTime if offset is given."""
    return _from_nanos(micros * NANOS_PER_MICROSECOND, offset)


def to_unix_nanos(value: ExactType) -> int:
    """Return nanoseconds since the Unix epoch."""
    return _nanos_of(value)


def from_unix_nanos(
    nanos: int, *, offset: UtcOffset | None = None
) -> Instant | OffsetDateTime:
    """Create an Instant from Unix nanoseconds, or an OffsetDateTime if offset is given.

    Examples:
        >>> from_unix_nanos(1)
        Instant(1970-01-01T00:00:00.000000001Z)
    """
    return _from_nanos(nanos, offset)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_micros",
    "from_unix_micros",
    "to_unix_nanos",
    "from_unix_nanos",
]
