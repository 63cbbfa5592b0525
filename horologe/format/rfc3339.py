"""RFC 3339 formatting and parsing.

RFC 3339 is a profile of ISO 8601 that defines a strict subset for
datetime representations in internet protocols:

1. Date and time must be separated by 'T'
2. An offset is required
3. The offset must be 'Z' or '+/-HH:MM' ('+/-HH:MM:SS' is accepted and
   written for offsets with a seconds component)
4. Fractional seconds are optional, up to nine digits

This module also handles the zoned extension, an RFC 3339 timestamp
followed by a bracketed zone identifier:
``2023-10-29T02:30:00+01:00[Europe/Paris]``. The offset in the text must be
the offset the zone's rules give for that instant.

Functions:
    parse_rfc3339: Parse an RFC 3339 string into an OffsetDateTime.
    format_rfc3339: Format an OffsetDateTime as an RFC 3339 string.
    parse_zoned: Parse the zoned extension into a ZonedDateTime.
    format_zoned: Format a ZonedDateTime in the zoned extension.

Examples:
    >>> dt = parse_rfc3339("2024-01-15T14:30:45Z")
    >>> dt.year
    2024
    >>> format_rfc3339(dt)
    '2024-01-15T14:30:45Z'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from horologe.errors import InvalidFormatError
from horologe.format._scanner import Scanner
from horologe.format.iso8601 import (
    build,
    format_local_datetime,
    read_date,
    read_offset,
    read_time,
)

if TYPE_CHECKING:
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.zoned_datetime import ZonedDateTime
    from horologe.tz.resolver import TimezoneResolver

# Characters allowed in a bracketed zone identifier
_ZONE_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789/_+-"
)


def _read_timestamp(sc: Scanner) -> OffsetDateTime:
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.units.offset import UtcOffset

    date_fields = read_date(sc)
    sc.expect("T")
    hour, minute, second, nanosecond = read_time(sc)
    offset_seconds = read_offset(sc)
    local = build(
        sc, LocalDateTime, *date_fields, hour, minute, second, nanosecond=nanosecond
    )
    offset = build(sc, UtcOffset, offset_seconds)
    return build(sc, OffsetDateTime.of, local, offset)


def parse_rfc3339(s: str) -> OffsetDateTime:
    """Parse an RFC 3339 timestamp.

    Args:
        s: The RFC 3339 string to parse.

    Returns:
        An OffsetDateTime with the offset given in the text.

    Raises:
        InvalidFormatError: If the string is malformed, a field is out of
            range, or the instant it denotes is out of range.

    Examples:
        >>> parse_rfc3339("2024-01-15T14:30:45.123456789+05:30")
        OffsetDateTime(2024-01-15T14:30:45.123456789+05:30)

        >>> parse_rfc3339("2024-01-15 14:30:45Z")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidFormatError: invalid RFC 3339 timestamp ...: expected 'T' at position 10
    """
    sc = Scanner(s, "RFC 3339 timestamp")
    value = _read_timestamp(sc)
    sc.finish()
    return value


def format_rfc3339(value: OffsetDateTime) -> str:
    """Format an OffsetDateTime as an RFC 3339 string.

    A zero offset is written as 'Z'. Fractional seconds use the fewest
    digits that keep the value exact.

    Raises:
        TypeError: If value is not an OffsetDateTime.

    Examples:
        >>> from horologe.core.offset_datetime import OffsetDateTime
        >>> from horologe.units.offset import UtcOffset
        >>> format_rfc3339(OffsetDateTime(2024, 1, 15, 9, offset=UtcOffset(-18000)))
        '2024-01-15T09:00:00-05:00'
    """
    from horologe.core.offset_datetime import OffsetDateTime

    if not isinstance(value, OffsetDateTime):
        raise TypeError(f"expected OffsetDateTime, got {type(value).__name__}")
    offset = value.offset
    suffix = "Z" if offset.is_utc else str(offset)
    return f"{format_local_datetime(value.to_local())}{suffix}"


def parse_zoned(s: str, resolver: TimezoneResolver) -> ZonedDateTime:
    """Parse ``<rfc3339>[<zone-id>]`` into a ZonedDateTime.

    The zone identifier may contain ASCII letters, digits and ``/_+-``.
    The timestamp's offset must equal the offset the resolver gives for
    the zone at that instant; a timestamp naming a wall-clock time that
    does not exist in the zone therefore fails.

    Raises:
        InvalidFormatError: If the text is malformed or the offset does not
            match the zone at that instant.
        UnknownZoneError: If the zone is not in the resolver's rule set.

    Examples:
        >>> from horologe.tz import TimezoneResolver, ZoneRules, ZoneRuleSet
        >>> r = TimezoneResolver(ZoneRuleSet([ZoneRules.fixed("Etc/Minus5", -18000)]))
        >>> parse_zoned("2024-01-15T09:00:00-05:00[Etc/Minus5]", r).hour
        9
    """
    sc = Scanner(s, "zoned date-time")
    value = _read_timestamp(sc)
    sc.expect("[")
    zone_id = sc.take_while(_ZONE_CHARS)
    if not zone_id:
        raise sc.error("expected a zone identifier")
    sc.expect("]")
    sc.finish()

    zoned = build(sc, value.to_zone, zone_id, resolver)
    if zoned.offset != value.offset:
        raise InvalidFormatError(
            f"invalid zoned date-time {s!r}: offset {value.offset} does not match "
            f"{zone_id}, which is at {zoned.offset} at that instant"
        )
    return zoned


def format_zoned(value: ZonedDateTime) -> str:
    """Format a ZonedDateTime as ``<rfc3339>[<zone-id>]``.

    The offset is always written numerically (``+00:00`` rather than ``Z``)
    since it is the zone's own offset, not an unknown local offset.

    Examples:
        >>> from horologe.tz import TimezoneResolver, ZoneRules, ZoneRuleSet
        >>> from horologe.core.zoned_datetime import ZonedDateTime
        >>> r = TimezoneResolver(ZoneRuleSet([ZoneRules.fixed("UTC", 0, "UTC")]))
        >>> format_zoned(ZonedDateTime(2024, 1, 15, zone="UTC", resolver=r))
        '2024-01-15T00:00:00+00:00[UTC]'
    """
    return f"{format_local_datetime(value.to_local())}{value.offset}[{value.zone_id}]"


__all__ = ["parse_rfc3339", "format_rfc3339", "parse_zoned", "format_zoned"]
