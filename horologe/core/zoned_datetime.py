"""ZonedDateTime class: an instant in a named timezone.

A ZonedDateTime stores an instant and a zone identifier. Its offset and
abbreviation are derived from the resolver that produced it and are
recomputed whenever the instant changes; they can never be set directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from horologe._internal.calendar import months_days_between, shift_date
from horologe.core._exact import ExactTime
from horologe.core.date import Date
from horologe.core.instant import Instant
from horologe.core.local_datetime import LocalDateTime
from horologe.core.offset_datetime import OffsetDateTime
from horologe.core.time import Time
from horologe.units.disambiguate import Disambiguate, GapPolicy
from horologe.units.offset import UtcOffset

if TYPE_CHECKING:
    from horologe.core.duration import Duration
    from horologe.tz.resolver import TimezoneResolver
    from horologe.tz.rules import ZonePeriod


class ZonedDateTime(ExactTime):
    """A date and time in a timezone.

    Creating one from wall-clock fields can fail: the fields may occur
    twice in the zone (a fold) or not at all (a gap). The ``fold`` and
    ``gap`` policies choose the outcome; both default to REJECT, which
    raises AmbiguousTimeError or SkippedTimeError.

    Arithmetic follows the calendar for the date part of a duration and
    the physical timeline for the time part: adding one day keeps the
    wall-clock time across a DST change, adding 24 hours keeps the elapsed
    time.

    Examples:
        >>> from horologe.tz import TimezoneResolver, ZoneRules, ZoneRuleSet
        >>> resolver = TimezoneResolver(ZoneRuleSet([ZoneRules.fixed("Etc/Plus3", 10800)]))
        >>> z = ZonedDateTime(2024, 1, 15, 12, zone="Etc/Plus3", resolver=resolver)
        >>> str(z)
        '2024-01-15T12:00:00+03:00[Etc/Plus3]'
    """

    __slots__ = ("_instant", "_zone", "_period", "_local", "_resolver")

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
        zone: str,
        resolver: TimezoneResolver,
        fold: Disambiguate | str = Disambiguate.REJECT,
        gap: GapPolicy | str = GapPolicy.REJECT,
    ) -> None:
        """Create a ZonedDateTime from wall-clock fields in a zone.

        Raises:
            InvalidDateError: If the date fields are invalid.
            InvalidTimeError: If the time fields are invalid.
            UnknownZoneError: If the zone is not in the resolver's rule set.
            AmbiguousTimeError: On a fold with ``fold=REJECT``.
            SkippedTimeError: On a gap with ``gap=REJECT``.
        """
        local = LocalDateTime(year, month, day, hour, minute, second, nanosecond=nanosecond)
        instant = resolver.local_to_instant(zone, local, fold=fold, gap=gap)
        self._init(instant, zone, resolver)

    def _init(self, instant: Instant, zone: str, resolver: TimezoneResolver) -> None:
        period = resolver.offset_at(zone, instant)
        self._instant = instant
        self._zone = zone
        self._period = period
        self._resolver = resolver
        self._local = LocalDateTime._from_epoch_nanos(
            instant.to_unix_nanos() + UtcOffset(period.offset).nanoseconds
        )

    @classmethod
    def from_instant(
        cls, instant: Instant, zone: str, resolver: TimezoneResolver
    ) -> ZonedDateTime:
        """View an instant in a zone. Never ambiguous.

        Raises:
            UnknownZoneError: If the zone is not in the resolver's rule set.
            RangeOverflowError: If the local fields fall outside years 1-9999.
        """
        instance = object.__new__(cls)
        instance._init(instant, zone, resolver)
        return instance

    @classmethod
    def from_local(
        cls,
        local: LocalDateTime,
        zone: str,
        resolver: TimezoneResolver,
        *,
        fold: Disambiguate | str = Disambiguate.REJECT,
        gap: GapPolicy | str = GapPolicy.REJECT,
    ) -> ZonedDateTime:
        """Interpret wall-clock fields in a zone with the given policies."""
        instant = resolver.local_to_instant(zone, local, fold=fold, gap=gap)
        return cls.from_instant(instant, zone, resolver)

    @classmethod
    def parse(cls, s: str, resolver: TimezoneResolver) -> ZonedDateTime:
        """Parse ``<rfc3339>[<zone>]``, e.g. ``2023-10-29T02:30:00+01:00[Europe/Paris]``.

        The offset in the text must be the zone's offset at that instant.

        Raises:
            InvalidFormatError: If the text is malformed or the offset does
                not match the zone.
            UnknownZoneError: If the zone is not in the resolver's rule set.
        """
        from horologe.format.rfc3339 import parse_zoned

        return parse_zoned(s, resolver)

    @property
    def zone_id(self) -> str:
        """Return the zone identifier."""
        return self._zone

    @property
    def resolver(self) -> TimezoneResolver:
        """Return the resolver this value was produced by."""
        return self._resolver

    @property
    def offset(self) -> UtcOffset:
        """Return the zone's offset at this instant."""
        return UtcOffset(self._period.offset)

    @property
    def period(self) -> ZonePeriod:
        """Return the zone period in effect at this instant."""
        return self._period

    @property
    def abbreviation(self) -> str:
        """Return the zone abbreviation at this instant, e.g. ``"CEST"``."""
        return self._period.abbreviation

    @property
    def is_dst(self) -> bool:
        """Return True if daylight-saving time is in effect at this instant."""
        return self._period.is_dst

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
        return self._instant.to_unix_nanos()

    def _representation(self) -> tuple[object, ...]:
        return (self._zone,)

    def is_ambiguous(self) -> bool:
        """Return True if this value's wall-clock time occurs twice in its zone."""
        from horologe.tz.resolver import LocalKind

        return self._resolver.resolve_local(self._zone, self._local).kind is LocalKind.FOLD

    def to_instant(self) -> Instant:
        return self._instant

    def to_local(self) -> LocalDateTime:
        """Drop the zone, keeping the wall-clock fields."""
        return self._local

    def to_offset(self) -> OffsetDateTime:
        """Fix the current offset and drop the zone."""
        return OffsetDateTime.of(self._local, self.offset)

    def to_zone(self, zone: str, resolver: TimezoneResolver | None = None) -> ZonedDateTime:
        """Return the same instant in another zone. Never ambiguous.

        Uses this value's resolver unless another is given.
        """
        return ZonedDateTime.from_instant(
            self._instant, zone, resolver if resolver is not None else self._resolver
        )

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
        fold: Disambiguate | str = Disambiguate.REJECT,
        gap: GapPolicy | str = GapPolicy.REJECT,
    ) -> ZonedDateTime:
        """Return a copy with wall-clock fields replaced, re-resolved in the zone."""
        local = self._local.replace(
            year, month, day, hour, minute, second, nanosecond=nanosecond
        )
        return ZonedDateTime.from_local(
            local, self._zone, self._resolver, fold=fold, gap=gap
        )

    def _with_instant(self, instant: Instant) -> ZonedDateTime:
        return ZonedDateTime.from_instant(instant, self._zone, self._resolver)

    def add(
        self,
        duration: Duration,
        *,
        fold: Disambiguate | str = Disambiguate.REJECT,
        gap: GapPolicy | str = GapPolicy.REJECT,
    ) -> ZonedDateTime:
        """Add a duration.

        The date part is applied to the wall-clock fields and the result
        is re-resolved in the zone with ``fold`` and ``gap``. The time part
        is then added as exact elapsed nanoseconds, without re-resolution.

        Raises:
            AmbiguousTimeError: If the shifted wall-clock time is in a fold
                and ``fold=REJECT``.
            SkippedTimeError: If it is in a gap and ``gap=REJECT``.
            RangeOverflowError: If the result is out of range.
        """
        instant = self._instant
        if duration.has_date_part:
            local = self._local._shift_date(duration.months, duration.days)
            instant = self._resolver.local_to_instant(self._zone, local, fold=fold, gap=gap)
        return self._with_instant(instant.add_nanoseconds(duration.nanoseconds))

    def subtract(
        self,
        duration: Duration,
        *,
        fold: Disambiguate | str = Disambiguate.REJECT,
        gap: GapPolicy | str = GapPolicy.REJECT,
    ) -> ZonedDateTime:
        """Apply the negated duration, exact time part first, then the date part.

        This reverses ``add(duration)`` for durations without months and
        away from transitions; month-end clamping can make them differ.
        """
        moved = self._with_instant(self._instant.add_nanoseconds(-duration.nanoseconds))
        if not duration.has_date_part:
            return moved
        local = moved._local._shift_date(-duration.months, -duration.days)
        return ZonedDateTime.from_local(local, self._zone, self._resolver, fold=fold, gap=gap)

    def diff(self, other: ZonedDateTime) -> Duration:
        """Return the calendar-aware distance ``self - other``.

        The split is taken in the later value's zone: the largest months
        and days whose wall-clock shift of ``other`` does not pass ``self``,
        then the exact nanoseconds left over. For values in the same zone,
        ``other.add(self.diff(other), fold="compatible", gap="shift-forward")``
        equals ``self`` whenever ``self >= other``.
        """
        from horologe.core.duration import Duration

        if not isinstance(other, ZonedDateTime):
            raise TypeError(f"cannot diff ZonedDateTime and {type(other).__name__}")
        if self < other:
            return -other.diff(self)
        start = other.to_zone(self._zone, self._resolver)._local
        end = self._local
        months, days = months_days_between(start._jdn, start._nanos, end._jdn, end._nanos)
        while True:
            if months == 0 and days == 0:
                anchor = other._instant
            else:
                anchor = self._resolver.local_to_instant(
                    self._zone,
                    start._shift_date(months, days),
                    fold=Disambiguate.COMPATIBLE,
                    gap=GapPolicy.SHIFT_FORWARD,
                )
            remainder = self._instant.diff(anchor)
            if remainder >= 0:
                return Duration(months=months, days=days, nanoseconds=remainder)
            if days > 0:
                days -= 1
            else:
                months -= 1
                days = end._jdn - shift_date(start._jdn, months, 0)

    def format_iso(self) -> str:
        """Return ``<rfc3339>[<zone>]``."""
        from horologe.format.rfc3339 import format_zoned

        return format_zoned(self)

    def __add__(self, other: object) -> ZonedDateTime:
        from horologe.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    @overload
    def __sub__(self, other: Duration) -> ZonedDateTime: ...

    @overload
    def __sub__(self, other: ZonedDateTime) -> Duration: ...

    def __sub__(self, other: object) -> ZonedDateTime | Duration:
        from horologe.core.duration import Duration

        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, ZonedDateTime):
            return self.diff(other)
        return NotImplemented

    def __reduce__(self) -> object:
        raise TypeError("ZonedDateTime cannot be pickled; store format_iso() instead")

    def __repr__(self) -> str:
        return f"ZonedDateTime({self.format_iso()})"

    def __str__(self) -> str:
        return self.format_iso()


__all__ = ["ZonedDateTime"]
