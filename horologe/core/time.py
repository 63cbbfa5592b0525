"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with nanosecond precision.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from horologe._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from horologe._internal.validation import validate_time
from horologe.errors import RangeOverflowError, ValidationError

if TYPE_CHECKING:
    from horologe.core.date import Date
    from horologe.core.duration import Duration
    from horologe.core.local_datetime import LocalDateTime


class Time:
    """A time of day with nanosecond precision.

    Time represents the time portion of a day, from midnight (00:00:00)
    to just before the next midnight (23:59:59.999999999). It does not
    include any date or timezone information, and it has no leap seconds.

    The internal representation stores the total nanoseconds since
    midnight in a single `_nanos` slot.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nanosecond: The nanosecond component (0-999999999).

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour, t.minute, t.second
        (14, 30, 45)

        >>> t = Time(12, 0, 0, nanosecond=123_456_789)
        >>> t.millisecond
        123
        >>> t.microsecond
        123456
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).

        Raises:
            InvalidTimeError: If any component is out of range.

        Examples:
            >>> Time(14, 30, 45)
            Time(14, 30, 45, nanosecond=0)

            >>> Time(24, 0)
            Traceback (most recent call last):
            ...
            horologe.errors.InvalidTimeError: hour must be between 0 and 23, got 24
        """
        validate_time(hour, minute, second, nanosecond)
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> Time:
        """Create a Time directly from nanoseconds since midnight.

        This is an internal constructor that bypasses validation.
        """
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def from_nanoseconds_of_day(cls, nanos: int) -> Time:
        """Create a Time from nanoseconds since midnight.

        Raises:
            InvalidTimeError: If nanos is outside 0 to 86399999999999.
        """
        from horologe.errors import InvalidTimeError

        if not isinstance(nanos, int) or isinstance(nanos, bool):
            raise InvalidTimeError(f"nanoseconds must be an integer, got {nanos!r}")
        if not 0 <= nanos < NANOS_PER_DAY:
            raise InvalidTimeError(f"nanoseconds of day out of range: {nanos}")
        return cls._from_nanos(nanos)

    @classmethod
    def midnight(cls) -> Time:
        """Return 00:00:00."""
        return cls._from_nanos(0)

    @classmethod
    def noon(cls) -> Time:
        """Return 12:00:00."""
        return cls._from_nanos(12 * NANOS_PER_HOUR)

    @classmethod
    def parse_iso(cls, s: str) -> Time:
        """Parse a time in ISO 8601 format (HH:MM:SS[.fffffffff]).

        Raises:
            InvalidFormatError: If the string is malformed or out of range.

        Examples:
            >>> Time.parse_iso("14:30:45.5")
            Time(14, 30, 45, nanosecond=500000000)
        """
        from horologe.format.iso8601 import parse_time

        return parse_time(s)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the sub-second part truncated to milliseconds (0-999)."""
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the sub-second part truncated to microseconds (0-999999)."""
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return the sub-second part in nanoseconds (0-999999999)."""
        return self._nanos % NANOS_PER_SECOND

    @property
    def nanoseconds_of_day(self) -> int:
        """Return the total nanoseconds since midnight."""
        return self._nanos

    def replace(
        self,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        *,
        nanosecond: int | None = None,
    ) -> Time:
        """Return a new Time with specified components replaced.

        Examples:
            >>> Time(14, 30, 45).replace(hour=10)
            Time(10, 30, 45, nanosecond=0)
        """
        return Time(
            hour if hour is not None else self.hour,
            minute if minute is not None else self.minute,
            second if second is not None else self.second,
            nanosecond=nanosecond if nanosecond is not None else self.nanosecond,
        )

    def on(self, date: Date) -> LocalDateTime:
        """Combine this time with a calendar date."""
        from horologe.core.local_datetime import LocalDateTime

        return LocalDateTime.combine(date, self)

    def add(self, duration: Duration) -> Time:
        """Add an exact duration, staying within the same day.

        A time of day does not wrap around midnight: a result before
        00:00:00 or at/after 24:00:00 is an error.

        Args:
            duration: A Duration with no months or days.

        Raises:
            ValidationError: If the duration has a date part.
            RangeOverflowError: If the result leaves the day.

        Examples:
            >>> from horologe.core.duration import Duration
            >>> Time(10, 0).add(Duration(hours=2, minutes=30))
            Time(12, 30, 0, nanosecond=0)
            >>> Time(23, 0).add(Duration(hours=2))
            Traceback (most recent call last):
            ...
            horologe.errors.RangeOverflowError: time of day out of range: 23:00:00 + PT2H
        """
        if duration.has_date_part:
            raise ValidationError(
                f"cannot add a duration with a date part to a Time: {duration}"
            )
        nanos = self._nanos + duration.nanoseconds
        if not 0 <= nanos < NANOS_PER_DAY:
            raise RangeOverflowError(f"time of day out of range: {self} + {duration}")
        return Time._from_nanos(nanos)

    def subtract(self, duration: Duration) -> Time:
        """Subtract an exact duration, staying within the same day."""
        return self.add(-duration)

    def diff(self, other: Time) -> Duration:
        """Return the exact distance ``self - other``.

        Examples:
            >>> Time(12, 0).diff(Time(10, 30))
            Duration(months=0, days=0, nanoseconds=5400000000000)
        """
        from horologe.core.duration import Duration

        if not isinstance(other, Time):
            raise TypeError(f"cannot diff Time and {type(other).__name__}")
        return Duration.from_nanoseconds(self._nanos - other._nanos)

    def format_iso(self) -> str:
        """Return the time as ``HH:MM:SS`` with the shortest exact fraction.

        Examples:
            >>> Time(14, 30, 45).format_iso()
            '14:30:45'
            >>> Time(14, 30, 45, nanosecond=120_000_000).format_iso()
            '14:30:45.12'
        """
        from horologe.format.iso8601 import format_time

        return format_time(self)

    def __add__(self, other: object) -> Time:
        from horologe.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    @overload
    def __sub__(self, other: Duration) -> Time: ...

    @overload
    def __sub__(self, other: Time) -> Duration: ...

    def __sub__(self, other: object) -> Time | Duration:
        from horologe.core.duration import Duration

        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, Time):
            return self.diff(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __reduce__(self) -> tuple[object, tuple[int]]:
        return (_unpickle_time, (self._nanos,))

    def __repr__(self) -> str:
        return (
            f"Time({self.hour}, {self.minute}, {self.second}, "
            f"nanosecond={self.nanosecond})"
        )

    def __str__(self) -> str:
        return self.format_iso()


def _unpickle_time(nanos: int) -> Time:
    return Time.from_nanoseconds_of_day(nanos)


__all__ = ["Time"]
