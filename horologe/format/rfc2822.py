"""RFC 2822 formatting and parsing.

RFC 2822 timestamps are the ones used in e-mail and HTTP headers:

    Www, DD Mon YYYY HH:MM:SS +HHMM

Only this canonical form is accepted: English day and month names with
their usual capitalization, a two-digit day, a numeric offset, and single
spaces. Obsolete forms (named zones such as "GMT", missing weekday,
comments) are rejected. The weekday must be the real weekday of the date.

The grammar has no fractional seconds and no seconds in the offset, so
values that need either cannot be written; formatting them raises
InvalidFormatError instead of silently dropping precision.

Examples:
    >>> dt = parse_rfc2822("Mon, 15 Jan 2024 14:30:00 +0100")
    >>> dt.hour, dt.offset.total_seconds
    (14, 3600)
    >>> format_rfc2822(dt)
    'Mon, 15 Jan 2024 14:30:00 +0100'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from horologe._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from horologe.errors import InvalidFormatError
from horologe.format._scanner import Scanner
from horologe.format.iso8601 import build
from horologe.units.weekday import Weekday

if TYPE_CHECKING:
    from horologe.core.offset_datetime import OffsetDateTime

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_WEEKDAYS = tuple(w.short_name for w in Weekday)


def _read_name(sc: Scanner, names: tuple[str, ...], field: str) -> int:
    """Read one of ``names`` and return its 1-based position."""
    chunk = sc.text[sc.pos:sc.pos + 3]
    if chunk not in names:
        raise sc.error(f"expected {field} name")
    sc.pos += 3
    return names.index(chunk) + 1


def parse_rfc2822(s: str) -> OffsetDateTime:
    """Parse ``Www, DD Mon YYYY HH:MM:SS +HHMM``.

    Raises:
        InvalidFormatError: If the text is malformed, a field is out of
            range, or the weekday does not match the date.

    Examples:
        >>> parse_rfc2822("Tue, 15 Jan 2024 14:30:00 +0000")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidFormatError: invalid RFC 2822 timestamp ...: 2024-01-15 is a Monday, not a Tuesday
    """
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.units.offset import UtcOffset

    sc = Scanner(s, "RFC 2822 timestamp")
    weekday = _read_name(sc, _WEEKDAYS, "weekday")
    sc.expect(", ")
    day = sc.digits(2, "day")
    sc.expect(" ")
    month = _read_name(sc, _MONTHS, "month")
    sc.expect(" ")
    year = sc.digits(4, "year")
    sc.expect(" ")
    hour = sc.digits(2, "hour")
    sc.expect(":")
    minute = sc.digits(2, "minute")
    sc.expect(":")
    second = sc.digits(2, "second")
    sc.expect(" ")
    sign = sc.peek()
    if sign not in ("+", "-"):
        raise sc.error("expected an offset sign")
    sc.pos += 1
    offset_hours = sc.digits(2, "offset hours")
    offset_minutes = sc.digits(2, "offset minutes")
    sc.finish()

    if offset_hours > 23 or offset_minutes > 59:
        raise sc.error("offset field out of range")
    offset_seconds = offset_hours * SECONDS_PER_HOUR + offset_minutes * SECONDS_PER_MINUTE
    if sign == "-":
        offset_seconds = -offset_seconds

    local = build(sc, LocalDateTime, year, month, day, hour, minute, second)
    actual = local.date.day_of_week
    if actual != weekday:
        raise sc.error(
            f"{local.date} is a {actual.name.title()}, not a {Weekday(weekday).name.title()}"
        )
    return build(sc, OffsetDateTime.of, local, build(sc, UtcOffset, offset_seconds))


def format_rfc2822(value: OffsetDateTime) -> str:
    """Format an OffsetDateTime as ``Www, DD Mon YYYY HH:MM:SS +HHMM``.

    Raises:
        InvalidFormatError: If the value has a non-zero nanosecond or its
            offset has a seconds component.
        TypeError: If value is not an OffsetDateTime.

    Examples:
        >>> from horologe.core.offset_datetime import OffsetDateTime
        >>> from horologe.units.offset import UtcOffset
        >>> format_rfc2822(OffsetDateTime(2024, 7, 4, 9, 5, offset=UtcOffset(-4 * 3600)))
        'Thu, 04 Jul 2024 09:05:00 -0400'
    """
    from horologe.core.offset_datetime import OffsetDateTime

    if not isinstance(value, OffsetDateTime):
        raise TypeError(f"expected OffsetDateTime, got {type(value).__name__}")
    if value.nanosecond:
        raise InvalidFormatError(
            f"RFC 2822 has no fractional seconds; cannot format {value}"
        )
    offset = value.offset.total_seconds
    if offset % SECONDS_PER_MINUTE:
        raise InvalidFormatError(
            f"RFC 2822 offsets have no seconds; cannot format {value}"
        )
    sign = "-" if offset < 0 else "+"
    hours, minutes = divmod(abs(offset) // SECONDS_PER_MINUTE, 60)
    date = value.date
    return (
        f"{date.day_of_week.short_name}, {value.day:02d} {_MONTHS[value.month - 1]} "
        f"{value.year:04d} {value.hour:02d}:{value.minute:02d}:{value.second:02d} "
        f"{sign}{hours:02d}{minutes:02d}"
    )


__all__ = ["parse_rfc2822", "format_rfc2822"]
