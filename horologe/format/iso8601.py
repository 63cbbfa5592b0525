"""ISO 8601 formatting and parsing.

This module provides functions for converting temporal objects to and from
ISO 8601 string representations. Parsing is strict: every field has a fixed
width, separators are required, and nothing may precede or follow the value.

Grammars:

Dates:
    - YYYY-MM-DD

Times:
    - HH:MM:SS
    - HH:MM:SS.f (fractional seconds, 1-9 digits)

Local date-times:
    - YYYY-MM-DDTHH:MM:SS[.f]

Offsets:
    - Z
    - +HH:MM, -HH:MM
    - +HH:MM:SS, -HH:MM:SS

Durations:
    - [-]P[nY][nM][nD][T[nH][nM][n[.f]S]] (zero is written PT0S)

Examples:
    >>> from horologe.core.date import Date
    >>> parse_date("2024-01-15")
    Date(2024, 1, 15)

    >>> format_iso8601(Date(2024, 1, 15))
    '2024-01-15'

    >>> str(parse_duration("P1DT12H"))
    'P1DT12H'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from horologe._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from horologe.errors import InvalidFormatError, RangeOverflowError, ValidationError
from horologe.format._scanner import Scanner, format_fraction

if TYPE_CHECKING:
    from horologe.core.date import Date
    from horologe.core.duration import Duration
    from horologe.core.instant import Instant
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.time import Time
    from horologe.core.zoned_datetime import ZonedDateTime
    from horologe.tz.resolver import TimezoneResolver
    from horologe.units.offset import UtcOffset

# Type alias for everything format_iso8601 accepts
TemporalType = Union[
    "Date",
    "Time",
    "LocalDateTime",
    "OffsetDateTime",
    "ZonedDateTime",
    "Instant",
    "Duration",
    "UtcOffset",
]


# --- field readers shared with rfc3339 -------------------------------------


def read_date(sc: Scanner) -> tuple[int, int, int]:
    """Read ``YYYY-MM-DD``; field ranges are checked by the caller."""
    year = sc.digits(4, "year")
    sc.expect("-")
    month = sc.digits(2, "month")
    sc.expect("-")
    day = sc.digits(2, "day")
    return (year, month, day)


def read_time(sc: Scanner) -> tuple[int, int, int, int]:
    """Read ``HH:MM:SS[.f]`` as (hour, minute, second, nanosecond)."""
    hour = sc.digits(2, "hour")
    sc.expect(":")
    minute = sc.digits(2, "minute")
    sc.expect(":")
    second = sc.digits(2, "second")
    nanosecond = sc.fraction() if sc.accept(".") else 0
    return (hour, minute, second, nanosecond)


def read_offset(sc: Scanner) -> int:
    """Read ``Z`` or ``+HH:MM[:SS]`` and return the offset in seconds."""
    if sc.accept("Z"):
        return 0
    sign = sc.peek()
    if sign not in ("+", "-"):
        raise sc.error("expected 'Z' or an offset sign")
    sc.pos += 1
    hours = sc.digits(2, "offset hours")
    sc.expect(":")
    minutes = sc.digits(2, "offset minutes")
    seconds = 0
    if sc.accept(":"):
        seconds = sc.digits(2, "offset seconds")
    if hours > 23 or minutes > 59 or seconds > 59:
        raise sc.error("offset field out of range")
    total = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
    return -total if sign == "-" else total


def build(sc: Scanner, factory, *args, **kwargs):  # type: ignore[no-untyped-def]
    """Construct a value from parsed fields, reporting bad fields as format errors."""
    try:
        return factory(*args, **kwargs)
    except (ValidationError, RangeOverflowError) as exc:
        raise sc.error(str(exc)) from exc


# --- dates and times --------------------------------------------------------


def parse_date(s: str) -> Date:
    """Parse ``YYYY-MM-DD``.

    Raises:
        InvalidFormatError: If the text is malformed or not a real date.

    Examples:
        >>> parse_date("2024-02-30")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidFormatError: invalid date '2024-02-30': ...
    """
    from horologe.core.date import Date

    sc = Scanner(s, "date")
    fields = read_date(sc)
    sc.finish()
    return build(sc, Date, *fields)


def format_date(value: Date) -> str:
    """Return ``YYYY-MM-DD``."""
    return value.format_iso()


def parse_time(s: str) -> Time:
    """Parse ``HH:MM:SS[.f]`` with up to nine fractional digits.

    Examples:
        >>> parse_time("14:30:45.000000001")
        Time(14, 30, 45, nanosecond=1)
    """
    from horologe.core.time import Time

    sc = Scanner(s, "time")
    hour, minute, second, nanosecond = read_time(sc)
    sc.finish()
    return build(sc, Time, hour, minute, second, nanosecond=nanosecond)


def format_time(value: Time) -> str:
    """Return ``HH:MM:SS`` plus the shortest exact fraction, if any."""
    return (
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{format_fraction(value.nanosecond)}"
    )


def parse_local_datetime(s: str) -> LocalDateTime:
    """Parse ``YYYY-MM-DDTHH:MM:SS[.f]`` (no offset allowed).

    Examples:
        >>> parse_local_datetime("2024-01-15T14:30:00")
        LocalDateTime(2024, 1, 15, 14, 30, 0, nanosecond=0)
    """
    from horologe.core.local_datetime import LocalDateTime

    sc = Scanner(s, "local date-time")
    date_fields = read_date(sc)
    sc.expect("T")
    hour, minute, second, nanosecond = read_time(sc)
    sc.finish()
    return build(
        sc, LocalDateTime, *date_fields, hour, minute, second, nanosecond=nanosecond
    )


def format_local_datetime(value: LocalDateTime) -> str:
    """Return ``YYYY-MM-DDTHH:MM:SS[.f]``."""
    return f"{format_date(value.date)}T{format_time(value.time)}"


# --- offsets ----------------------------------------------------------------


def parse_offset(s: str) -> UtcOffset:
    """Parse ``Z``, ``+HH:MM`` or ``+HH:MM:SS``.

    Examples:
        >>> parse_offset("-03:30").total_seconds
        -12600
    """
    from horologe.units.offset import UtcOffset

    sc = Scanner(s, "offset")
    seconds = read_offset(sc)
    sc.finish()
    return build(sc, UtcOffset, seconds)


def format_offset(value: UtcOffset) -> str:
    """Return ``+HH:MM``, or ``+HH:MM:SS`` when the offset has seconds."""
    return str(value)


# --- durations --------------------------------------------------------------


def parse_duration(s: str) -> Duration:
    """Parse ``[-]P[nY][nM][nD][T[nH][nM][n[.f]S]]``.

    Units must appear in this order, at least one must be present, and a
    ``T`` must be followed by at least one time unit. Only seconds may
    carry a fraction. The leading ``-`` negates every component.

    Raises:
        InvalidFormatError: If the text is malformed or a field is out of range.

    Examples:
        >>> parse_duration("-P1M2DT3.5S")
        Duration(months=-1, days=-2, nanoseconds=-3500000000)
        >>> parse_duration("PT")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidFormatError: invalid duration 'PT': ...
    """
    from horologe.core.duration import Duration

    sc = Scanner(s, "duration")
    sign = -1 if sc.accept("-") else 1
    sc.expect("P")

    values = {"Y": 0, "M": 0, "D": 0}
    date_start = sc.pos
    _read_units(sc, values, ("Y", "M", "D"), allow_fraction=False)
    seen_any = sc.pos > date_start

    hours = minutes = seconds = nanos = 0
    if sc.accept("T"):
        time_values = {"H": 0, "M": 0, "S": 0}
        start = sc.pos
        nanos = _read_units(sc, time_values, ("H", "M", "S"), allow_fraction=True)
        if sc.pos == start:
            raise sc.error("expected a time unit after 'T'")
        hours, minutes, seconds = time_values["H"], time_values["M"], time_values["S"]
        seen_any = True
    if not seen_any:
        raise sc.error("expected at least one unit")
    sc.finish()

    total_nanos = (
        hours * NANOS_PER_HOUR
        + minutes * NANOS_PER_MINUTE
        + seconds * NANOS_PER_SECOND
        + nanos
    )
    return build(
        sc,
        Duration._from_parts,
        sign * (values["Y"] * 12 + values["M"]),
        sign * values["D"],
        sign * total_nanos,
    )


def _read_units(
    sc: Scanner, values: dict[str, int], units: tuple[str, ...], *, allow_fraction: bool
) -> int:
    """Read ``n<unit>`` groups in the given order; return any seconds fraction."""
    remaining = list(units)
    fraction = 0
    while sc.at_digit():
        number = sc.number("number")
        frac = 0
        has_fraction = False
        if allow_fraction and sc.accept("."):
            frac = sc.fraction()
            has_fraction = True
        unit = sc.peek()
        if unit not in remaining:
            raise sc.error(f"unexpected unit {unit!r}" if unit else "expected a unit")
        if has_fraction and unit != "S":
            raise sc.error("only seconds may have a fraction")
        sc.pos += 1
        values[unit] = number
        fraction = frac
        del remaining[: remaining.index(unit) + 1]
    return fraction


def format_duration(value: Duration) -> str:
    """Return the ISO 8601 form of a duration.

    Months are written as years and months, the time part as hours,
    minutes and seconds with the shortest exact fraction.

    Examples:
        >>> from horologe.core.duration import Duration
        >>> format_duration(Duration(days=-1, hours=-12))
        '-P1DT12H'
    """
    if value.is_zero:
        return "PT0S"
    months, days, nanos = (abs(x) for x in value.in_months_days_nanoseconds())
    parts = ["-P" if value.is_negative else "P"]
    years, months = divmod(months, 12)
    if years:
        parts.append(f"{years}Y")
    if months:
        parts.append(f"{months}M")
    if days:
        parts.append(f"{days}D")
    if nanos:
        parts.append("T")
        hours, rest = divmod(nanos, NANOS_PER_HOUR)
        minutes, rest = divmod(rest, NANOS_PER_MINUTE)
        seconds, frac = divmod(rest, NANOS_PER_SECOND)
        if hours:
            parts.append(f"{hours}H")
        if minutes:
            parts.append(f"{minutes}M")
        if seconds or frac:
            parts.append(f"{seconds}{format_fraction(frac)}S")
    return "".join(parts)


# --- dispatch ---------------------------------------------------------------


def parse_iso8601(s: str, resolver: TimezoneResolver | None = None) -> TemporalType:
    """Parse any supported ISO 8601 form, choosing the type from its shape.

    Detection rules:
        - Starts with 'P' or '-P' -> Duration
        - Ends with ']' -> ZonedDateTime (requires ``resolver``)
        - Contains 'T' and ends with an offset -> OffsetDateTime
        - Contains 'T' -> LocalDateTime
        - Has ':' at position 2 -> Time
        - Otherwise -> Date

    Examples:
        >>> parse_iso8601("14:30:45")
        Time(14, 30, 45, nanosecond=0)
        >>> parse_iso8601("2024-01-15T14:30:45")
        LocalDateTime(2024, 1, 15, 14, 30, 45, nanosecond=0)
    """
    from horologe.format.rfc3339 import parse_rfc3339, parse_zoned

    if not isinstance(s, str):
        raise InvalidFormatError(f"expected a string, got {type(s).__name__}")
    if s.startswith(("P", "-P")):
        return parse_duration(s)
    if s.endswith("]"):
        if resolver is None:
            raise InvalidFormatError(f"zoned value {s!r} needs a TimezoneResolver")
        return parse_zoned(s, resolver)
    if "T" in s:
        tail = s[s.index("T") + 1:]
        if tail.endswith("Z") or "+" in tail or "-" in tail:
            return parse_rfc3339(s)
        return parse_local_datetime(s)
    if s[2:3] == ":":
        return parse_time(s)
    return parse_date(s)


def format_iso8601(value: TemporalType) -> str:
    """Format any Horologe value in its ISO 8601 / RFC 3339 form.

    Raises:
        TypeError: If value is not a Horologe temporal value.
    """
    from horologe.core.date import Date
    from horologe.core.duration import Duration
    from horologe.core.instant import Instant
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.time import Time
    from horologe.core.zoned_datetime import ZonedDateTime
    from horologe.format.rfc3339 import format_rfc3339, format_zoned
    from horologe.units.offset import UtcOffset

    if isinstance(value, Date):
        return format_date(value)
    if isinstance(value, Time):
        return format_time(value)
    if isinstance(value, LocalDateTime):
        return format_local_datetime(value)
    if isinstance(value, OffsetDateTime):
        return format_rfc3339(value)
    if isinstance(value, ZonedDateTime):
        return format_zoned(value)
    if isinstance(value, Instant):
        return format_rfc3339(value.to_offset())
    if isinstance(value, Duration):
        return format_duration(value)
    if isinstance(value, UtcOffset):
        return format_offset(value)
    raise TypeError(f"cannot format {type(value).__name__} as ISO 8601")


__all__ = [
    "parse_iso8601",
    "format_iso8601",
    "parse_date",
    "format_date",
    "parse_time",
    "format_time",
    "parse_local_datetime",
    "format_local_datetime",
    "parse_offset",
    "format_offset",
    "parse_duration",
    "format_duration",
]
