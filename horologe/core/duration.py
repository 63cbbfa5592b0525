"""Duration class representing a calendar-aware span of time.

This module provides the Duration class. A Duration has a date part
(months and days, applied to wall-clock fields) and a time part
(nanoseconds, applied as exact elapsed time).
"""

from __future__ import annotations

from horologe._internal.constants import (
    MAX_DURATION_DAYS,
    MAX_DURATION_MONTHS,
    MAX_DURATION_NANOS,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from horologe.errors import RangeOverflowError, ValidationError


class Duration:
    """A signed span of time split into a date part and a time part.

    The date part (months, days) is calendar-relative: adding one month to
    January 31 gives the last day of February, and adding one day across a
    daylight-saving transition keeps the wall-clock time. The time part
    (nanoseconds) is exact: adding 24 hours is always exactly 86400 seconds
    of elapsed time.

    Years are stored as twelve months and weeks as seven days. All non-zero
    components must have the same sign.

    Attributes:
        months: The months component.
        days: The days component.
        nanoseconds: The exact time component in nanoseconds.

    Examples:
        >>> d = Duration(years=1, months=2, days=3, hours=4)
        >>> d.months, d.days
        (14, 3)
        >>> str(d)
        'P1Y2M3DT4H'

        >>> -Duration(hours=1)
        Duration(months=0, days=0, nanoseconds=-3600000000000)
    """

    __slots__ = ("_months", "_days", "_nanos")

    def __init__(
        self,
        *,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        Args:
            years: Number of years (12 months each).
            months: Number of months.
            weeks: Number of weeks (7 days each).
            days: Number of days.
            hours: Number of hours.
            minutes: Number of minutes.
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.
            microseconds: Number of microseconds.
            nanoseconds: Number of nanoseconds.

        Raises:
            ValidationError: If non-zero components have different signs.
            RangeOverflowError: If a component exceeds the supported span.

        Examples:
            >>> Duration(weeks=1, days=1).days
            8
            >>> Duration(hours=1, minutes=-30)
            Traceback (most recent call last):
            ...
            horologe.errors.ValidationError: duration components must share one sign
        """
        for name, value in (
            ("hours", hours),
            ("minutes", minutes),
            ("seconds", seconds),
            ("milliseconds", milliseconds),
            ("microseconds", microseconds),
            ("nanoseconds", nanoseconds),
        ):
            if value and not _is_int(value):
                raise ValidationError(f"{name} must be an integer, got {value!r}")
        fields = (years, months, weeks, days, hours, minutes, seconds,
                  milliseconds, microseconds, nanoseconds)
        if any(f > 0 for f in fields) and any(f < 0 for f in fields):
            raise ValidationError("duration components must share one sign")
        total_nanos = (
            hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )
        self._init(years * 12 + months, weeks * 7 + days, total_nanos)

    def _init(self, months: int, days: int, nanos: int) -> None:
        for name, value in (("months", months), ("days", days)):
            if not _is_int(value):
                raise ValidationError(f"{name} must be an integer, got {value!r}")
        if (months > 0 or days > 0 or nanos > 0) and (months < 0 or days < 0 or nanos < 0):
            raise ValidationError("duration components must share one sign")
        if abs(months) > MAX_DURATION_MONTHS:
            raise RangeOverflowError(f"duration months out of range: {months}")
        if abs(days) > MAX_DURATION_DAYS:
            raise RangeOverflowError(f"duration days out of range: {days}")
        if abs(nanos) > MAX_DURATION_NANOS:
            raise RangeOverflowError(f"duration time part out of range: {nanos} ns")
        self._months = months
        self._days = days
        self._nanos = nanos

    @classmethod
    def _from_parts(cls, months: int, days: int, nanos: int) -> Duration:
        """Create a Duration from already-combined components (validated)."""
        instance = object.__new__(cls)
        instance._init(months, days, nanos)
        return instance

    @classmethod
    def zero(cls) -> Duration:
        """Return the empty duration.

        Examples:
            >>> Duration.zero().is_zero
            True
        """
        return cls._from_parts(0, 0, 0)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Create an exact duration of the given number of nanoseconds."""
        return cls._from_parts(0, 0, nanoseconds)

    @classmethod
    def parse_iso(cls, s: str) -> Duration:
        """Parse an ISO 8601 duration such as ``P1Y2M3DT4H5M6.5S``.

        Raises:
            InvalidFormatError: If the text is not a valid duration.

        Examples:
            >>> Duration.parse_iso("PT1H30M")
            Duration(months=0, days=0, nanoseconds=5400000000000)
        """
        from horologe.format.iso8601 import parse_duration

        return parse_duration(s)

    @property
    def months(self) -> int:
        """Return the months component (years included as 12 months each)."""
        return self._months

    @property
    def days(self) -> int:
        """Return the days component (weeks included as 7 days each)."""
        return self._days

    @property
    def nanoseconds(self) -> int:
        """Return the exact time part in nanoseconds."""
        return self._nanos

    def date_part(self) -> Duration:
        """Return the calendar part (months and days) as a Duration."""
        return Duration._from_parts(self._months, self._days, 0)

    def time_part(self) -> Duration:
        """Return the exact part (nanoseconds) as a Duration."""
        return Duration._from_parts(0, 0, self._nanos)

    def in_months_days_nanoseconds(self) -> tuple[int, int, int]:
        """Return the (months, days, nanoseconds) components."""
        return (self._months, self._days, self._nanos)

    @property
    def has_date_part(self) -> bool:
        """Return True if months or days are non-zero."""
        return bool(self._months or self._days)

    @property
    def is_exact(self) -> bool:
        """Return True if the duration has no calendar part.

        Only exact durations can be applied to Instant and Time values.
        """
        return not self.has_date_part

    @property
    def is_zero(self) -> bool:
        """Return True if all components are zero."""
        return not (self._months or self._days or self._nanos)

    @property
    def is_negative(self) -> bool:
        """Return True if the duration points backward in time."""
        return self._months < 0 or self._days < 0 or self._nanos < 0

    def format_iso(self) -> str:
        """Return the ISO 8601 representation.

        Examples:
            >>> Duration(months=14, seconds=90).format_iso()
            'P1Y2MT1M30S'
            >>> Duration.zero().format_iso()
            'PT0S'
        """
        from horologe.format.iso8601 import format_duration

        return format_duration(self)

    def __add__(self, other: object) -> Duration:
        """Add two durations component-wise.

        Raises:
            ValidationError: If the sum has components of mixed sign.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration._from_parts(
            self._months + other._months,
            self._days + other._days,
            self._nanos + other._nanos,
        )

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: object) -> Duration:
        """Multiply every component by an integer.

        Examples:
            >>> Duration(months=1, hours=2) * 3
            Duration(months=3, days=0, nanoseconds=21600000000000)
        """
        if not _is_int(other):
            return NotImplemented
        return Duration._from_parts(
            self._months * other,  # type: ignore[operator]
            self._days * other,  # type: ignore[operator]
            self._nanos * other,  # type: ignore[operator]
        )

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        return Duration._from_parts(-self._months, -self._days, -self._nanos)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return -self if self.is_negative else self

    def __eq__(self, other: object) -> bool:
        """Check component-wise equality.

        One month and thirty days are different durations, and so are one
        day and 24 hours.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return (
            self._months == other._months
            and self._days == other._days
            and self._nanos == other._nanos
        )

    def __hash__(self) -> int:
        return hash((self._months, self._days, self._nanos))

    def __bool__(self) -> bool:
        return not self.is_zero

    def __reduce__(self) -> tuple[object, tuple[int, int, int]]:
        return (_unpickle_duration, (self._months, self._days, self._nanos))

    def __repr__(self) -> str:
        return (
            f"Duration(months={self._months}, days={self._days}, "
            f"nanoseconds={self._nanos})"
        )

    def __str__(self) -> str:
        return self.format_iso()


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _unpickle_duration(months: int, days: int, nanos: int) -> Duration:
    return Duration._from_parts(months, days, nanos)


__all__ = ["Duration"]
