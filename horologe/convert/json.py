"""JSON serialization for temporal objects.

This module converts temporal values to and from JSON-compatible
dictionaries. Each dictionary carries a ``_type`` tag naming the class and
a ``value`` holding the value's canonical text form, so the result can be
passed straight to ``json.dumps`` and restored exactly.

Functions:
    to_json: Convert a temporal object to a tagged dictionary.
    from_json: Recreate a temporal object from a tagged dictionary.

Examples:
    >>> from horologe.core.date import Date
    >>> to_json(Date(2024, 1, 15))
    {'_type': 'Date', 'value': '2024-01-15'}
    >>> from_json({'_type': 'Date', 'value': '2024-01-15'})
    Date(2024, 1, 15)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from horologe.errors import InvalidFormatError
from horologe.format.iso8601 import TemporalType

if TYPE_CHECKING:
    from horologe.tz.resolver import TimezoneResolver


def to_json(value: TemporalType) -> dict[str, Any]:
    """Convert a temporal object to a JSON-serializable dictionary.

    Args:
        value: Any Horologe value type.

    Returns:
        A dictionary with ``_type`` and ``value`` keys. Durations also
        carry their ``months``, ``days`` and ``nanoseconds`` components.

    Raises:
        TypeError: If value is not a Horologe value type.

    Examples:
        >>> from horologe.core.duration import Duration
        >>> to_json(Duration(months=1, hours=2))
        {'_type': 'Duration', 'value': 'P1MT2H', 'months': 1, 'days': 0, 'nanoseconds': 7200000000000}
    """
    from horologe.core.date import Date
    from horologe.core.duration import Duration
    from horologe.core.instant import Instant
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.time import Time
    from horologe.core.zoned_datetime import ZonedDateTime
    from horologe.units.offset import UtcOffset

    if isinstance(value, Duration):
        return {
            "_type": "Duration",
            "value": value.format_iso(),
            "months": value.months,
            "days": value.days,
            "nanoseconds": value.nanoseconds,
        }
    if isinstance(value, (Date, Time, LocalDateTime)):
        text = value.format_iso()
    elif isinstance(value, (Instant, OffsetDateTime)):
        text = value.format_rfc3339()
    elif isinstance(value, ZonedDateTime):
        text = value.format_iso()
    elif isinstance(value, UtcOffset):
        text = str(value)
    else:
        raise TypeError(f"expected a Horologe value type, got {type(value).__name__}")
    return {"_type": type(value).__name__, "value": text}


def from_json(
    data: dict[str, Any], resolver: TimezoneResolver | None = None
) -> TemporalType:
    """Create a temporal object from a JSON dictionary.

    Args:
        data: A dictionary with ``_type`` and ``value`` fields.
        resolver: Required to restore a ZonedDateTime.

    Raises:
        InvalidFormatError: If a field is missing or malformed, or a
            ZonedDateTime is given without a resolver.
        TypeError: If ``_type`` is not a recognized temporal type.

    Examples:
        >>> from_json({'_type': 'Time', 'value': '14:30:45'})
        Time(14, 30, 45, nanosecond=0)
        >>> from_json({'_type': 'Instant', 'value': '2024-01-15T14:30:45Z'})
        Instant(2024-01-15T14:30:45Z)
    """
    from horologe.core.date import Date
    from horologe.core.duration import Duration
    from horologe.core.instant import Instant
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.offset_datetime import OffsetDateTime
    from horologe.core.time import Time
    from horologe.core.zoned_datetime import ZonedDateTime
    from horologe.units.offset import UtcOffset

    if not isinstance(data, dict):
        raise InvalidFormatError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise InvalidFormatError("missing '_type' field in JSON data")

    value = data.get("value")
    if not isinstance(value, str) or not value:
        raise InvalidFormatError(f"missing 'value' field for {type_name}")

    if type_name == "Date":
        return Date.parse_iso(value)
    elif type_name == "Time":
        return Time.parse_iso(value)
    elif type_name == "LocalDateTime":
        return LocalDateTime.parse_iso(value)
    elif type_name == "Instant":
        return Instant.parse_rfc3339(value)
    elif type_name == "OffsetDateTime":
        return OffsetDateTime.parse_rfc3339(value)
    elif type_name == "ZonedDateTime":
        if resolver is None:
            raise InvalidFormatError("a TimezoneResolver is needed to restore a ZonedDateTime")
        return ZonedDateTime.parse(value, resolver)
    elif type_name == "Duration":
        return Duration.parse_iso(value)
    elif type_name == "UtcOffset":
        return UtcOffset.parse(value)
    else:
        raise TypeError(f"unknown temporal type: {type_name!r}")


__all__ = ["to_json", "from_json"]
