"""Horologe exception hierarchy.

All Horologe-specific exceptions inherit from HorologeError. Every fallible
operation in the library raises one of these; nothing is logged, retried or
replaced by a default value.
"""

from __future__ import annotations


class HorologeError(Exception):
    """Base exception for all Horologe errors."""

    pass


class ValidationError(HorologeError):
    """Invalid input values.

    Raised when a constructor or operation receives a value outside its
    domain.

    Examples:
        - Duration components with mixed signs
        - UTC offset of 24 hours or more
        - Calendar duration added to a Time
    """

    pass


class InvalidDateError(ValidationError):
    """Year, month or day outside the valid Gregorian domain.

    Examples:
        - Month value outside 1-12
        - February 29 in a common year
        - Year outside 1-9999
    """

    pass


class InvalidTimeError(ValidationError):
    """Hour, minute, second or nanosecond outside the valid domain.

    Examples:
        - Hour value outside 0-23
        - Nanosecond value of one billion or more
    """

    pass


class InvalidFormatError(HorologeError):
    """Text does not match the expected grammar.

    Raised by every parser for malformed input, wrong field widths,
    out-of-range field values, excess fractional digits, and leading or
    trailing characters. Also raised when a value cannot be written in a
    grammar without losing information.

    Examples:
        - "2024-1-15" (month must be two digits)
        - "2024-02-30" (day out of range)
        - "12:00:00.1234567891" (more than nine fractional digits)
    """

    pass


class RangeOverflowError(HorologeError):
    """Arithmetic or conversion result outside the supported range.

    Examples:
        - Adding a duration that moves past 9999-12-31
        - An offset date-time whose instant falls before year 1
    """

    pass


class TimezoneError(HorologeError):
    """Base class for zone resolution failures."""

    pass


class AmbiguousTimeError(TimezoneError):
    """A local time occurs twice in a zone and the fold policy is REJECT.

    Attributes:
        zone_id: The zone in which the local time is ambiguous.
        local: The ambiguous local date-time.
    """

    def __init__(self, zone_id: str, local: object) -> None:
        super().__init__(f"{local} is ambiguous in timezone {zone_id!r}")
        self.zone_id = zone_id
        self.local = local


class SkippedTimeError(TimezoneError):
    """A local time never occurs in a zone and the gap policy is REJECT.

    Attributes:
        zone_id: The zone in which the local time was skipped.
        local: The skipped local date-time.
    """

    def __init__(self, zone_id: str, local: object) -> None:
        super().__init__(f"{local} is skipped in timezone {zone_id!r}")
        self.zone_id = zone_id
        self.local = local


class UnknownZoneError(TimezoneError):
    """Zone identifier not present in the rule set.

    Attributes:
        zone_id: The identifier that was looked up.
    """

    def __init__(self, zone_id: str) -> None:
        super().__init__(f"unknown timezone {zone_id!r}")
        self.zone_id = zone_id


__all__ = [
    "HorologeError",
    "ValidationError",
    "InvalidDateError",
    "InvalidTimeError",
    "InvalidFormatError",
    "RangeOverflowError",
    "TimezoneError",
    "AmbiguousTimeError",
    "SkippedTimeError",
    "UnknownZoneError",
]
