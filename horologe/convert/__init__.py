"""Temporal conversion utilities.

This module provides functions for converting temporal objects to and from
other representations:
    - JSON serialization and deserialization
    - Unix epoch conversions (seconds, milliseconds, microseconds, nanoseconds)
    - The standard library's datetime types

Examples:
    >>> from horologe import LocalDateTime
    >>> from horologe.convert import to_json, from_json

    >>> dt = LocalDateTime(2024, 1, 15, 14, 30, 45)
    >>> data = to_json(dt)
    >>> restored = from_json(data)
    >>> restored == dt
    True

    >>> from horologe.convert import to_unix_seconds, from_unix_seconds
    >>> ts = to_unix_seconds(dt.assume_utc())
    >>> from_unix_seconds(ts).to_civil_utc() == dt
    True
"""

from __future__ import annotations

from horologe.convert.json import from_json, to_json
from horologe.convert.epoch import (
    from_unix_micros,
    from_unix_millis,
    from_unix_nanos,
    from_unix_seconds,
    to_unix_micros,
    to_unix_millis,
    to_unix_nanos,
    to_unix_seconds,
)
from horologe.convert.stdlib import (
    from_py_date,
    from_py_datetime,
    from_py_time,
    from_py_timedelta,
    to_py_date,
    to_py_datetime,
    to_py_time,
    to_py_timedelta,
)

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_micros",
    "from_unix_micros",
    "to_unix_nanos",
    "from_unix_nanos",
    # Standard library
    "to_py_date",
    "from_py_date",
    "to_py_time",
    "from_py_time",
    "to_py_datetime",
    "from_py_datetime",
    "to_py_timedelta",
    "from_py_timedelta",
]
