"""Instant class representing a point on the physical timeline.

This module provides the Instant class: an integer count of nanoseconds
since 1970-01-01T00:00:00Z, bounded to 0001-01-01T00:00:00Z through
9999-12-31T23:59:59.999999999Z so that every instant has a civil UTC
projection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, overload

from horologe._internal.constants import (
    MAX_INSTANT_NANOS,
    MIN_INSTANT_NANOS,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from horologe.core._exact import ExactTime
from horologe.errors import RangeOverflowError, ValidationError

if TYPE_CHECKING:
    from horologe.core.duration import Duration
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.zoned_datetime import ZonedDateTime
    from horologe.tz.resolver import TimezoneResolver
    from horologe.units.offset import UtcOffset


def _check_range(nanos: int) -> int:
    if nanos < MIN_INSTANT_NANOS or nanos > MAX_INSTANT_NANOS:
        raise RangeOverflowError(f"instant out of range: {nanos} ns since epoch")
    return nanos


class Instant(ExactTime):
    """A point on the physical timeline with nanosecond precision.

    An Instant carries no calendar or zone information; it is the same
    moment everywhere. Arithmetic on it is always exact elapsed time.

    Examples:
        >>> i = Instant.from_unix_seconds(0)
        >>> i
        Instant(1970-01-01T00:00:00Z)
        >>> i.add_nanoseconds(1_500_000_000).to_unix_millis()
        1500

        >>> Instant.from_utc(2024, 1, 15, 12).diff(Instant.from_utc(2024, 1, 15))
        43200000000000
    """

    __slots__ = ("_nanos",)

    MIN: ClassVar[Instant]
    MAX: ClassVar[Instant]

    def __init__(self, nanoseconds: int) -> None:
        """Create an Instant from nanoseconds since the Unix epoch.

        Raises:
            ValidationError: If nanoseconds is not an integer.
            RangeOverflowError: If the instant is outside the supported range.
        """
        if not isinstance(nanoseconds, int) or isinstance(nanoseconds, bool):
            raise ValidationError(
                f"nanoseconds must be an integer, got {type(nanoseconds).__name__}"
            )
        self._nanos: int = _check_range(nanoseconds)

    @classmethod
    def _from_nanos(cls, nanos: int) -> Instant:
        instance = object.__new__(cls)
        instance._nanos = _check_range(nanos)
        return instance

    @classmethod
    def from_unix_seconds(cls, seconds: int) -> Instant:
        """Create an Instant from whole seconds since the Unix epoch."""
        return cls(seconds * NANOS_PER_SECOND)

    @classmethod
    def from_unix_millis(cls, millis: int) -> Instant:
        """Create an Instant from milliseconds since the Unix epoch."""
        return cls(millis * NANOS_PER_MILLISECOND)

    @classmethod
    def from_unix_micros(cls, micros: int) -> Instant:
        """Create an Instant from microseconds since the Unix epoch."""
        return cls(micros * NANOS_PER_MICROSECOND)

    @classmethod
    def from_unix_nanos(cls, nanos: int) -> Instant:
        """Create an Instant from nanoseconds since the Unix epoch."""
        return cls(nanos)

    @classmethod
    def from_utc(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> Instant:
        """Create an Instant from UTC calendar and clock fields.

        Examples:
            >>> Instant.from_utc(1970, 1, 2).to_unix_seconds()
            86400
        """
        from horologe.core.local_datetime import LocalDateTime

        return cls.from_civil_utc(
            LocalDateTime(year, month, day, hour, minute, second, nanosecond=nanosecond)
        )

    @classmethod
    def from_civil_utc(cls, local: LocalDateTime) -> Instant:
        """Interpret wall-clock fields as UTC.

        ``Instant.from_civil_utc(i.to_civil_utc()) == i`` for every instant.
        """
        return cls._from_nanos(local._epoch_nanos())

    @classmethod
    def parse_rfc3339(cls, s: str) -> Instant:
        """Parse an RFC 3339 timestamp with any offset into an Instant.

        Examples:
            >>> Instant.parse_rfc3339("2024-01-15T12:00:00+01:00")
            Instant(2024-01-15T11:00:00Z)
        """
        from horologe.format.rfc3339 import parse_rfc3339

        return parse_rfc3339(s).to_instant()

    def to_unix_seconds(self) -> int:
        """Return whole seconds since the Unix epoch, rounded toward the past."""
        return self._nanos // NANOS_PER_SECOND

    def to_unix_millis(self) -> int:
        """Return whole milliseconds since the Unix epoch, rounded toward the past."""
        return self._nanos // NANOS_PER_MILLISECOND

    def to_unix_micros(self) -> int:
        """Return whole microseconds since the Unix epoch, rounded toward the past."""
        return self._nanos // NANOS_PER_MICROSECOND

    def to_unix_nanos(self) -> int:
        """Return nanoseconds since the Unix epoch."""
        return self._nanos

    def _instant_nanos(self) -> int:
        return self._nanos

    def to_civil_utc(self) -> LocalDateTime:
        """Return the UTC wall-clock fields of this instant.

        Examples:
            >>> Instant.from_unix_seconds(86400 + 3661).to_civil_utc()
            LocalDateTime(1970, 1, 2, 1, 1, 1, nanosecond=0)
        """
        from horologe.core.local_datetime import LocalDateTime

        return LocalDateTime._from_epoch_nanos(self._nanos)

    def to_offset(self, offset: UtcOffset | None = None) -> OffsetDateTime:
        """View this instant at a fixed offset (UTC when omitted).

        Raises:
            RangeOverflowError: If the local fields leave years 1-9999.
        """
        from horologe.core.offset_datetime import OffsetDateTime
        from horologe.units.offset import UtcOffset

        return OffsetDateTime.from_instant(self, offset if offset is not None else UtcOffset.utc())

    def to_zone(self, zone_id: str, resolver: TimezoneResolver) -> ZonedDateTime:
        """View this instant in a zone. Never ambiguous.

        Raises:
            UnknownZoneError: If the zone is not in the resolver's rule set.
        """
        from horologe.core.zoned_datetime import ZonedDateTime

        return ZonedDateTime.from_instant(self, zone_id, resolver)

    def add_nanoseconds(self, nanos: int) -> Instant:
        """Return the instant ``nanos`` nanoseconds later (earlier if negative).

        Raises:
            RangeOverflowError: If the result is out of range.
        """
        return Instant._from_nanos(self._nanos + nanos)

    def add(self, duration: Duration) -> Instant:
        """Add an exact duration.

        An Instant has no calendar, so a duration with months or days
        cannot be applied to it.

        Raises:
            ValidationError: If the duration has a date part.
            RangeOverflowError: If the result is out of range.
        """
        if duration.has_date_part:
            raise ValidationError(
                f"cannot add a duration with a date part to an Instant: {duration}"
            )
        return self.add_nanoseconds(duration.nanoseconds)

    def subtract(self, duration: Duration) -> Instant:
        """Subtract an exact duration."""
        return self.add(-duration)

    def diff(self, other: Instant) -> int:
        """Return ``self - other`` in nanoseconds."""
        if not isinstance(other, Instant):
            raise TypeError(f"cannot diff Instant and {type(other).__name__}")
        return self._nanos - other._nanos

    def format_rfc3339(self) -> str:
        """Return the RFC 3339 form in UTC, e.g. ``2024-01-15T12:00:00Z``."""
        return self.to_offset().format_rfc3339()

    def __add__(self, other: object) -> Instant:
        from horologe.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    def __sub__(self, other: object) -> Instant | Duration:
        """Subtract a Duration, or another Instant to get an exact Duration.

        Examples:
            >>> Instant.from_unix_seconds(90) - Instant.from_unix_seconds(30)
            Duration(months=0, days=0, nanoseconds=60000000000)
        """
        from horologe.core.duration import Duration

        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, Instant):
            return Duration.from_nanoseconds(self.diff(other))
        return NotImplemented

    def __reduce__(self) -> tuple[type[Instant], tuple[int]]:
        return (Instant, (self._nanos,))

    def __repr__(self) -> str:
        return f"Instant({self.format_rfc3339()})"

    def __str__(self) -> str:
        return self.format_rfc3339()


Instant.MIN = Instant(MIN_INSTANT_NANOS)
Instant.MAX = Instant(MAX_INSTANT_NANOS)


__all__ = ["Instant"]
