"""Temporal formatting and parsing.

This module provides functions for converting temporal objects to and from
string representations:
    - ISO 8601 dates, times, local date-times, offsets and durations
    - RFC 3339 timestamps and the bracketed-zone extension
    - RFC 2822 timestamps

Every parser is strict and every formatter is its exact inverse:
``parse(format(v)) == v`` for all representable values.

Functions:
    parse_iso8601: Parse any supported ISO 8601 form.
    format_iso8601: Format any temporal value in its ISO 8601 form.
    parse_rfc3339: Parse an RFC 3339 timestamp.
    format_rfc3339: Format an OffsetDateTime as RFC 3339.
    parse_zoned: Parse ``<rfc3339>[<zone>]``.
    format_zoned: Format a ZonedDateTime as ``<rfc3339>[<zone>]``.
    parse_rfc2822: Parse an RFC 2822 timestamp.
    format_rfc2822: Format an OffsetDateTime as RFC 2822.

Examples:
    >>> from horologe.format import parse_iso8601, format_iso8601
    >>> dt = parse_iso8601("2024-01-15T14:30:45Z")
    >>> dt.year
    2024
    >>> format_iso8601(dt)
    '2024-01-15T14:30:45Z'
"""

from __future__ import annotations

from horologe.format.iso8601 import (
    format_duration,
    format_iso8601,
    parse_duration,
    parse_iso8601,
)
from horologe.format.rfc2822 import format_rfc2822, parse_rfc2822
from horologe.format.rfc3339 import (
    format_rfc3339,
    format_zoned,
    parse_rfc3339,
    parse_zoned,
)

__all__: list[str] = [
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
    "parse_duration",
    "format_duration",
    # RFC 3339
    "parse_rfc3339",
    "format_rfc3339",
    "parse_zoned",
    "format_zoned",
    # RFC 2822
    "parse_rfc2822",
    "format_rfc2822",
]
