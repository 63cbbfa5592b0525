"""OffsetDateTime class: wall-clock fields at a fixed UTC offset.

An OffsetDateTime denotes exactly one instant (the local fields minus the
offset). The offset never changes on its own; arithmetic keeps it fixed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from horologe._internal.constants import NANOS_PER_SECOND
from horologe.core._exact import ExactTime
from horologe.core.date import Date
from horologe.core.instant import Instant
from horologe.core.local_datetime import LocalDateTime
from horologe.core.time import Time
from horologe.units.offset import UtcOffset

if TYPE_CHECKING:
    from horologe.core.duration import Duration
    from horologe.core.zoned_datetime import ZonedDateTime
    from horologe.tz.resolver import TimezoneResolver


class OffsetDateTime(ExactTime):
    """A date and time with a fixed offset from UTC.

    Comparison and hashing use the instant, so values at different offsets
    denoting the same moment are equal. Use ``exact_eq`` to also require
    the same offset.

    Examples:
        >>> dt = OffsetDateTime(2024, 1, 15, 12, 30, offset=UtcOffset.from_hours(2))
        >>> str(dt)
        '2024-01-15T12:30:00+02:00'
        >>> dt.to_instant()
        Instant(2024-01-15T10:30:00Z)
    """

    __slots__ = ("_local", "_offset")

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
        offset: UtcOffset,
    ) -> None:
        """Create an OffsetDateTime from fields and an offset.

        Raises:
            InvalidDateError: If the date fields are invalid.
            InvalidTimeError: If the time fields are invalid.
            RangeOverflowError: If the denoted instant is out of range.
        """
        local = LocalDateTime(year, month, day, hour, minute, second, nanosecond=nanosecond)
        self._local: LocalDateTime = local
        self._offset: UtcOffset = offset
        self._check_instant()

    def _check_instant(self) -> None:
        Instant._from_nanos(self._instant_nanos())

    @classmethod
    def of(cls, local: LocalDateTime, offset: UtcOffset) -> OffsetDateTime:
        """Attach an offset to wall-clock fields.

        Raises:
            RangeOverflowError: If the denoted instant is out of range.
        """
        instance = object.__new__(cls)
        instance._local = local
        instance._offset = offset
        instance._check_instant()
        return instance

    @classmethod
    def from_instant(cls, instant: Instant, offset: UtcOffset) -> OffsetDateTime:
        """View an instant at a fixed offset.

        Raises:
            RangeOverflowError: If the local fields fall outside years 1-9999.
        """
        local = LocalDateTime._from_epoch_nanos(instant.to_unix_nanos() + offset.nanoseconds)
        instance = object.__new__(cls)
        instance._local = local
        instance._offset = offset
        return instance

    @classmethod
    def parse_rfc3339(cls, s: str) -> OffsetDateTime:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.f](Z|+HH:MM)``.

        Examples:
            >>> OffsetDateTime.parse_rfc3339("2024-01-15T12:30:00Z").offset
            UtcOffset(+00:00)
        """
        from horologe.format.rfc3339 import parse_rfc3339

        return parse_rfc3339(s)

    @classmethod
    def parse_rfc2822(cls, s: str) -> OffsetDateTime:
        """Parse ``Www, DD Mon YYYY HH:MM:SS +HHMM``."""
        from horologe.format.rfc2822 import parse_rfc2822

        return parse_rfc2822(s)

    @property
    def offset(self) -> UtcOffset:
        """Return the fixed UTC offset."""
        return self._offset

    @property
    def date(self) -> Date:
        return self._local.date

    @property
    def time(self) -> Time:
        return self._local.time

    @property
    def year(self) -> int:
        return self._local.year

    @property
    def month(self) -> int:
        return self._local.month

    @property
    def day(self) -> int:
        return self._local.day

    @property
    def hour(self) -> int:
        return self._local.hour

    @property
    def minute(self) -> int:
        return self._local.minute

    @property
    def second(self) -> int:
        return self._local.second

    @property
    def nanosecond(self) -> int:
        return self._local.nanosecond

    def _instant_nanos(self) -> int:
        return self._local._epoch_nanos() - self._offset.total_seconds * NANOS_PER_SECOND

    def _representation(self) -> tuple[object, ...]:
        return (self._offset,)

    def to_local(self) -> LocalDateTime:
        """Drop the offset, keeping the wall-clock fields."""
        return self._local

    def to_instant(self) -> Instant:
        """Return the instant this value denotes."""
        return Instant._from_nanos(self._instant_nanos())

    def to_offset(self, offset: UtcOffset) -> OffsetDateTime:
        """Return the same instant viewed at another offset."""
        return OffsetDateTime.from_instant(self.to_instant(), offset)

    def to_zone(self, zone_id: str, resolver: TimezoneResolver) -> ZonedDateTime:
        """Return the same instant in a zone. Never ambiguous."""
        from horologe.core.zoned_datetime import ZonedDateTime

        return ZonedDateTime.from_instant(self.to_instant(), zone_id, resolver)

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
        offset: UtcOffset | None = None,
    ) -> OffsetDateTime:
        """Return a copy with fields (and optionally the offset) replaced.

        Replacing the offset keeps the wall-clock fields, so the result
        denotes a different instant.
        """
        local = self._local.replace(
            year, month, day, hour, minute, second, nanosecond=nanosecond
        )
        return OffsetDateTime.of(local, offset if offset is not None else self._offset)

    def add(self, duration: Duration) -> OffsetDateTime:
        """Add a duration, keeping the offset.

        The date part moves the wall-clock fields (months, then days, with
        month-end clamping); the time part is exact elapsed time.

        Raises:
            RangeOverflowError: If the result is out of range.
        """
        return OffsetDateTime.of(self._local.add(duration), self._offset)

    def subtract(self, duration: Duration) -> OffsetDateTime:
        """Apply the negated duration, time part first.

        This reverses ``add(duration)`` when the duration has no months;
        month-end clamping can make the two differ otherwise.
        """
        return OffsetDateTime.of(self._local.subtract(duration), self._offset)

    def diff(self, other: OffsetDateTime) -> Duration:
        """Return the calendar-aware distance ``self - other``.

        The calendar split is taken in the later value's offset.

        Examples:
            >>> a = OffsetDateTime(2024, 2, 1, 1, offset=UtcOffset.from_hours(2))
            >>> b = OffsetDateTime(2024, 1, 1, 0, offset=UtcOffset.utc())
            >>> str(a.diff(b))
            'P30DT23H'
        """
        if not isinstance(other, OffsetDateTime):
            raise TypeError(f"cannot diff OffsetDateTime and {type(other).__name__}")
        if self < other:
            return -other.diff(self)
        return self._local.diff(other.to_offset(self._offset)._local)

    def format_rfc3339(self) -> str:
        """Return the RFC 3339 form, writing a zero offset as ``Z``."""
        from horologe.format.rfc3339 import format_rfc3339

        return format_rfc3339(self)

    def format_rfc2822(self) -> str:
        """Return the RFC 2822 form, e.g. ``Mon, 15 Jan 2024 12:30:00 +0200``.

        Raises:
            InvalidFormatError: If the value has sub-second precision or an
                offset with a seconds component.
        """
        from horologe.format.rfc2822 import format_rfc2822

        return format_rfc2822(self)

    def __add__(self, other: object) -> OffsetDateTime:
        from horologe.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    @overload
    def __sub__(self, other: Duration) -> OffsetDateTime: ...

    @overload
    def __sub__(self, other: OffsetDateTime) -> Duration: ...

    def __sub__(self, other: object) -> OffsetDateTime | Duration:
        from horologe.core.duration import Duration

        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, OffsetDateTime):
            return self.diff(other)
        return NotImplemented

    def __reduce__(self) -> tuple[object, tuple[int, int, int]]:
        return (
            _unpickle_offset_datetime,
            (self._local._jdn, self._local._nanos, self._offset.total_seconds),
        )

    def __repr__(self) -> str:
        return f"OffsetDateTime({self.format_rfc3339()})"

    def __str__(self) -> str:
        return self.format_rfc3339()


def _unpickle_offset_datetime(jdn: int, nanos: int, offset: int) -> OffsetDateTime:
    local = LocalDateTime.combine(Date.from_julian_day(jdn), Time.from_nanoseconds_of_day(nanos))
    return OffsetDateTime.of(local, UtcOffset(offset))


__all__ = ["OffsetDateTime"]
