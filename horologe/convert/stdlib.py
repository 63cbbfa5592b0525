"""Conversion to and from the standard library's datetime module.

The standard library stores microseconds, so exporting a value with a
sub-microsecond component truncates it toward zero. Importing is always
exact.

Functions:
    to_py_date / from_py_date: Date <-> datetime.date
    to_py_time / from_py_time: Time <-> naive datetime.time
    to_py_datetime / from_py_datetime: LocalDateTime, OffsetDateTime,
        ZonedDateTime or Instant <-> datetime.datetime
    to_py_timedelta / from_py_timedelta: exact Duration <-> datetime.timedelta

Examples:
    >>> import datetime
    >>> from horologe.core.local_datetime import LocalDateTime
    >>> to_py_datetime(LocalDateTime(2024, 1, 15, 9, 30, nanosecond=1_500))
    datetime.datetime(2024, 1, 15, 9, 30, 0, 1)
    >>> from_py_datetime(datetime.datetime(2024, 1, 15, 9, 30))
    LocalDateTime(2024, 1, 15, 9, 30, 0, nanosecond=0)
"""

from __future__ import annotations

import datetime as _dt
from typing import TYPE_CHECKING, Union

from horologe._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_SECOND,
)
from horologe.errors import ValidationError

if TYPE_CHECKING:
    from horologe.core.date import Date
    from horologe.core.duration import Duration
    from horologe.core.instant import Instant
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.time import Time
    from horologe.core.zoned_datetime import ZonedDateTime

DateTimeLike = Union["LocalDateTime", "OffsetDateTime", "ZonedDateTime", "Instant"]


def to_py_date(value: Date) -> _dt.date:
    """Convert a Date to ``datetime.date``."""
    return _dt.date(value.year, value.month, value.day)


def from_py_date(value: _dt.date) -> Date:
    """Convert a ``datetime.date`` to a Date.

    A ``datetime.datetime`` is accepted and its time of day ignored.
    """
    from horologe.core.date import Date

    return Date(value.year, value.month, value.day)


def to_py_time(value: Time) -> _dt.time:
    """Convert a Time to a naive ``datetime.time``, truncating to microseconds."""
    return _dt.time(
        value.hour,
        value.minute,
        value.second,
        value.nanosecond // NANOS_PER_MICROSECOND,
    )


def from_py_time(value: _dt.time) -> Time:
    """Convert a naive ``datetime.time`` to a Time.

    Raises:
        ValidationError: If value carries a tzinfo.
    """
    from horologe.core.time import Time

    if value.tzinfo is not None:
        raise ValidationError("cannot convert an aware datetime.time to Time")
    return Time(
        value.hour,
        value.minute,
        value.second,
        nanosecond=value.microsecond * NANOS_PER_MICROSECOND,
    )


def _fixed_zone(offset_seconds: int, name: str | None = None) -> _dt.timezone:
    delta = _dt.timedelta(seconds=offset_seconds)
    if offset_seconds == 0 and name is None:
        return _dt.timezone.utc
    if name:
        return _dt.timezone(delta, name)
    return _dt.timezone(delta)


def to_py_datetime(value: DateTimeLike) -> _dt.datetime:
    """Convert a date-time value to ``datetime.datetime``.

    A LocalDateTime becomes a naive datetime. An OffsetDateTime becomes an
    aware datetime with a fixed ``datetime.timezone``. A ZonedDateTime does
    too, using its current offset and abbreviation; the zone itself cannot
    be carried over. An Instant becomes an aware datetime in UTC.

    Sub-microsecond precision is truncated.

    Raises:
        TypeError: If value is not a date-time type.
    """
    from horologe.core.instant import Instant
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.zoned_datetime import ZonedDateTime

    if isinstance(value, LocalDateTime):
        local, tz = value, None
    elif isinstance(value, OffsetDateTime):
        local, tz = value.to_local(), _fixed_zone(value.offset.total_seconds)
    elif isinstance(value, ZonedDateTime):
        local = value.to_local()
        tz = _fixed_zone(value.offset.total_seconds, value.abbreviation or None)
    elif isinstance(value, Instant):
        local, tz = value.to_civil_utc(), _dt.timezone.utc
    else:
        raise TypeError(f"expected a date-time value, got {type(value).__name__}")
    return _dt.datetime(
        local.year,
        local.month,
        local.day,
        local.hour,
        local.minute,
        local.second,
        local.nanosecond // NANOS_PER_MICROSECOND,
        tzinfo=tz,
    )


def from_py_datetime(value: _dt.datetime) -> LocalDateTime | OffsetDateTime:
    """Convert a ``datetime.datetime`` to a LocalDateTime or OffsetDateTime.

    Naive values become LocalDateTime. Aware values become OffsetDateTime
    with the offset ``utcoffset()`` reports for that value.

    Raises:
        ValidationError: If the offset has a sub-second component.
    """
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.units.offset import UtcOffset

    local = LocalDateTime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        nanosecond=value.microsecond * NANOS_PER_MICROSECOND,
    )
    delta = value.utcoffset()
    if delta is None:
        return local
    if delta.microseconds:
        raise ValidationError(f"offset {delta} has a sub-second component")
    return OffsetDateTime.of(local, UtcOffset(delta.days * 86_400 + delta.seconds))


def to_py_timedelta(value: Duration) -> _dt.timedelta:
    """Convert an exact Duration to ``datetime.timedelta``.

    Calendar days are not exact, so a Duration with a date part cannot be
    converted. Sub-microsecond precision is truncated toward zero.

    Raises:
        ValidationError: If the duration has months or days.

    Examples:
        >>> from horologe.core.duration import Duration
        >>> to_py_timedelta(Duration(hours=-1, nanoseconds=-999))
        datetime.timedelta(days=-1, seconds=82800)
    """
    if not value.is_exact:
        raise ValidationError(f"cannot convert {value} to timedelta: it has a date part")
    nanos = value.nanoseconds
    micros = abs(nanos) // NANOS_PER_MICROSECOND
    if nanos < 0:
        micros = -micros
    return _dt.timedelta(microseconds=micros)


def from_py_timedelta(value: _dt.timedelta) -> Duration:
    """Convert a ``datetime.timedelta`` to an exact Duration.

    The timedelta's days are 24-hour days, so they become exact
    nanoseconds rather than calendar days.

    Raises:
        RangeOverflowError: If the timedelta is too long for a Duration.
    """
    from horologe.core.duration import Duration

    nanos = (
        value.days * NANOS_PER_DAY
        + value.seconds * NANOS_PER_SECOND
        + value.microseconds * NANOS_PER_MICROSECOND
    )
    return Duration.from_nanoseconds(nanos)


__all__ = [
    "to_py_date",
    "from_py_date",
    "to_py_time",
    "from_py_time",
    "to_py_datetime",
    "from_py_datetime",
    "to_py_timedelta",
    "from_py_timedelta",
]
