"""LocalDateTime class combining a date and a time of day.

This module provides the LocalDateTime class: wall-clock fields with no
offset or zone attached. It is the civil projection every zone-aware type
converts through, and the target of the date part of duration arithmetic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, overload

from horologe._internal.calendar import (
    date_to_julian_day,
    months_days_between,
    shift_date,
)
from horologe._internal.constants import (
    JDN_UNIX_EPOCH,
    MAX_JDN,
    MIN_JDN,
    NANOS_PER_DAY,
)
from horologe.core.date import Date
from horologe.core.time import Time
from horologe.errors import RangeOverflowError
from horologe.units.disambiguate import Disambiguate, GapPolicy
from horologe.units.rounding import RoundingMode, TimeUnit

if TYPE_CHECKING:
    from horologe.core.duration import Duration
    from horologe.core.instant import Instant
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.zoned_datetime import ZonedDateTime
    from horologe.tz.resolver import TimezoneResolver
    from horologe.units.offset import UtcOffset


class LocalDateTime:
    """A date and time of day without an offset or zone.

    A LocalDateTime only has wall-clock meaning in context: the same fields
    denote different instants in different zones. It therefore cannot be
    compared with the exact types (Instant, OffsetDateTime, ZonedDateTime),
    only with other LocalDateTime values, by field order.

    Attributes:
        date: The calendar date.
        time: The time of day.

    Examples:
        >>> dt = LocalDateTime(2024, 1, 15, 14, 30)
        >>> dt.date, dt.time
        (Date(2024, 1, 15), Time(14, 30, 0, nanosecond=0))

        >>> str(LocalDateTime(2024, 1, 15, 14, 30, nanosecond=5))
        '2024-01-15T14:30:00.000000005'
    """

    __slots__ = ("_jdn", "_nanos")

    MIN: ClassVar[LocalDateTime]
    MAX: ClassVar[LocalDateTime]

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalDateTime from component parts.

        Raises:
            InvalidDateError: If the date fields are invalid.
            InvalidTimeError: If the time fields are invalid.
        """
        self._jdn: int = date_to_julian_day(year, month, day)
        self._nanos: int = Time(hour, minute, second, nanosecond=nanosecond)._nanos

    @classmethod
    def _from_parts(cls, jdn: int, nanos: int) -> LocalDateTime:
        """Create a LocalDateTime from a Julian Day Number and nanoseconds of day.

        This is an internal constructor that bypasses validation.
        """
        instance = object.__new__(cls)
        instance._jdn = jdn
        instance._nanos = nanos
        return instance

    @classmethod
    def _from_epoch_nanos(cls, total: int) -> LocalDateTime:
        """Create from wall-clock nanoseconds counted from 1970-01-01T00:00.

        Raises:
            RangeOverflowError: If the date falls outside years 1-9999.
        """
        days, nanos = divmod(total, NANOS_PER_DAY)
        jdn = JDN_UNIX_EPOCH + days
        if jdn < MIN_JDN or jdn > MAX_JDN:
            raise RangeOverflowError("local date-time is out of range")
        return cls._from_parts(jdn, nanos)

    @classmethod
    def combine(cls, date: Date, time: Time) -> LocalDateTime:
        """Combine a Date and a Time.

        Examples:
            >>> LocalDateTime.combine(Date(2024, 1, 15), Time(9))
            LocalDateTime(2024, 1, 15, 9, 0, 0, nanosecond=0)
        """
        return cls._from_parts(date._jdn, time._nanos)

    @classmethod
    def parse_iso(cls, s: str) -> LocalDateTime:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.fffffffff]``.

        Raises:
            InvalidFormatError: If the string is malformed or out of range.
        """
        from horologe.format.iso8601 import parse_local_datetime

        return parse_local_datetime(s)

    @property
    def date(self) -> Date:
        """Return the date part."""
        return Date._from_jdn(self._jdn)

    @property
    def time(self) -> Time:
        """Return the time-of-day part."""
        return Time._from_nanos(self._nanos)

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def hour(self) -> int:
        return self.time.hour

    @property
    def minute(self) -> int:
        return self.time.minute

    @property
    def second(self) -> int:
        return self.time.second

    @property
    def nanosecond(self) -> int:
        return self.time.nanosecond

    def _epoch_nanos(self) -> int:
        """Return the wall-clock nanoseconds counted from 1970-01-01T00:00."""
        return (self._jdn - JDN_UNIX_EPOCH) * NANOS_PER_DAY + self._nanos

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        *,
        nanosecond: int | None = None,
    ) -> LocalDateTime:
        """Return a new LocalDateTime with specified components replaced.

        Raises:
            InvalidDateError: If the resulting date is invalid.
            InvalidTimeError: If the resulting time is invalid.

        Examples:
            >>> LocalDateTime(2024, 1, 31, 12).replace(month=4, hour=8)
            Traceback (most recent call last):
            ...
            horologe.errors.InvalidDateError: day must be between 1 and 30 for 2024-04, got 31
        """
        d = self.date
        t = self.time
        return LocalDateTime(
            year if year is not None else d.year,
            month if month is not None else d.month,
            day if day is not None else d.day,
            hour if hour is not None else t.hour,
            minute if minute is not None else t.minute,
            second if second is not None else t.second,
            nanosecond=nanosecond if nanosecond is not None else t.nanosecond,
        )

    def replace_date(self, date: Date) -> LocalDateTime:
        """Return a copy with the date part replaced."""
        return LocalDateTime._from_parts(date._jdn, self._nanos)

    def replace_time(self, time: Time) -> LocalDateTime:
        """Return a copy with the time-of-day part replaced."""
        return LocalDateTime._from_parts(self._jdn, time._nanos)

    def _shift_date(self, months: int, days: int) -> LocalDateTime:
        return LocalDateTime._from_parts(shift_date(self._jdn, months, days), self._nanos)

    def _shift_nanos(self, nanos: int) -> LocalDateTime:
        if not nanos:
            return self
        return LocalDateTime._from_epoch_nanos(self._epoch_nanos() + nanos)

    def round(
        self,
        unit: TimeUnit | str = TimeUnit.SECOND,
        increment: int = 1,
        mode: RoundingMode | str = RoundingMode.HALF_EVEN,
    ) -> LocalDateTime:
        """Round the time of day to a multiple of ``increment`` units.

        Rounding up past the last step of the day carries into midnight
        of the next day.

        Raises:
            ValidationError: If the increment does not evenly divide the
                next larger unit.
            RangeOverflowError: If rounding carries past LocalDateTime.MAX.

        Examples:
            >>> LocalDateTime(2024, 1, 15, 9, 7, 30).round("minute", 15)
            LocalDateTime(2024, 1, 15, 9, 0, 0, nanosecond=0)
            >>> LocalDateTime(2024, 1, 15, 23, 59, 59, nanosecond=600_000_000).round()
            LocalDateTime(2024, 1, 16, 0, 0, 0, nanosecond=0)
        """
        step = TimeUnit(unit).step(increment)
        nanos = RoundingMode(mode).round_to(self._nanos, step)
        if nanos == NANOS_PER_DAY:
            return LocalDateTime._from_parts(shift_date(self._jdn, 0, 1), 0)
        return LocalDateTime._from_parts(self._jdn, nanos)

    def add(self, duration: Duration) -> LocalDateTime:
        """Add a duration: the date part on the calendar, then the time part.

        The months are added first (clamping the day to the resulting
        month's length), then the days, then the exact nanoseconds.

        Raises:
            RangeOverflowError: If the result is out of range.

        Examples:
            >>> from horologe.core.duration import Duration
            >>> LocalDateTime(2024, 1, 31, 22).add(Duration(months=1, hours=3))
            LocalDateTime(2024, 3, 1, 1, 0, 0, nanosecond=0)
        """
        return self._shift_date(duration.months, duration.days)._shift_nanos(
            duration.nanoseconds
        )

    def subtract(self, duration: Duration) -> LocalDateTime:
        """Apply the negated duration, time part first, then the date part.

        This reverses ``add(duration)`` when the duration has no months.
        With months, clamping can differ: 2024-01-30 plus P1M1D is
        2024-03-01, and subtracting P1M1D from that gives 2024-01-31.
        """
        return self._shift_nanos(-duration.nanoseconds)._shift_date(
            -duration.months, -duration.days
        )

    def diff(self, other: LocalDateTime) -> Duration:
        """Return the calendar-aware distance ``self - other``.

        The result has the largest whole months, then the largest whole
        days, then the remaining nanoseconds (less than a day), so that
        ``other.add(self.diff(other)) == self`` when ``self >= other``.

        Examples:
            >>> a = LocalDateTime(2024, 3, 1, 6)
            >>> b = LocalDateTime(2024, 1, 31, 12)
            >>> a.diff(b)
            Duration(months=1, days=0, nanoseconds=64800000000000)
            >>> b.diff(a)
            Duration(months=-1, days=0, nanoseconds=-64800000000000)
        """
        from horologe.core.duration import Duration

        if not isinstance(other, LocalDateTime):
            raise TypeError(f"cannot diff LocalDateTime and {type(other).__name__}")
        if self < other:
            return -other.diff(self)
        months, days = months_days_between(other._jdn, other._nanos, self._jdn, self._nanos)
        anchor = other._shift_date(months, days)
        return Duration(
            months=months,
            days=days,
            nanoseconds=self._epoch_nanos() - anchor._epoch_nanos(),
        )

    def assume_utc(self) -> Instant:
        """Interpret these wall-clock fields as UTC.

        Examples:
            >>> LocalDateTime(1970, 1, 1, 0, 0, 1).assume_utc().to_unix_seconds()
            1
        """
        from horologe.core.instant import Instant

        return Instant.from_civil_utc(self)

    def assume_offset(self, offset: UtcOffset) -> OffsetDateTime:
        """Attach a fixed UTC offset.

        Raises:
            RangeOverflowError: If the denoted instant is out of range.
        """
        from horologe.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.of(self, offset)

    def assume_zone(
        self,
        zone_id: str,
        resolver: TimezoneResolver,
        *,
        fold: Disambiguate | str = Disambiguate.REJECT,
        gap: GapPolicy | str = GapPolicy.REJECT,
    ) -> ZonedDateTime:
        """Interpret these wall-clock fields in a zone.

        This is the one conversion that can fail on valid input: the local
        time may occur twice (a fold) or never (a gap) in the zone. Both
        policies default to REJECT.

        Raises:
            UnknownZoneError: If the zone is not in the resolver's rule set.
            AmbiguousTimeError: On a fold with ``fold=REJECT``.
            SkippedTimeError: On a gap with ``gap=REJECT``.
        """
        from horologe.core.zoned_datetime import ZonedDateTime

        return ZonedDateTime.from_local(self, zone_id, resolver, fold=fold, gap=gap)

    def format_iso(self) -> str:
        """Return ``YYYY-MM-DDTHH:MM:SS[.f]``."""
        from horologe.format.iso8601 import format_local_datetime

        return format_local_datetime(self)

    def __add__(self, other: object) -> LocalDateTime:
        from horologe.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    @overload
    def __sub__(self, other: Duration) -> LocalDateTime: ...

    @overload
    def __sub__(self, other: LocalDateTime) -> Duration: ...

    def __sub__(self, other: object) -> LocalDateTime | Duration:
        from horologe.core.duration import Duration

        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, LocalDateTime):
            return self.diff(other)
        return NotImplemented

    def _key(self) -> tuple[int, int]:
        return (self._jdn, self._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self) -> tuple[object, tuple[int, int]]:
        return (_unpickle_local_datetime, (self._jdn, self._nanos))

    def __repr__(self) -> str:
        d = self.date
        t = self.time
        return (
            f"LocalDateTime({d.year}, {d.month}, {d.day}, "
            f"{t.hour}, {t.minute}, {t.second}, nanosecond={t.nanosecond})"
        )

    def __str__(self) -> str:
        return self.format_iso()


def _unpickle_local_datetime(jdn: int, nanos: int) -> LocalDateTime:
    return LocalDateTime.combine(
        Date.from_julian_day(jdn), Time.from_nanoseconds_of_day(nanos)
    )


LocalDateTime.MIN = LocalDateTime._from_parts(MIN_JDN, 0)
LocalDateTime.MAX = LocalDateTime._from_parts(MAX_JDN, NANOS_PER_DAY - 1)


__all__ = ["LocalDateTime"]
