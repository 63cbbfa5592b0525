"""Validation utilities for Horologe.

This module provides the field checks shared by every value type
constructor. Each check raises the matching error kind with a message
naming the offending field.

This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.constants import MAX_YEAR, MIN_YEAR
from horologe.errors import InvalidDateError, InvalidTimeError


def _check_int(name: str, value: object, error: type[Exception]) -> None:
    # bool is an int subclass but never a meaningful field value
    if not isinstance(value, int) or isinstance(value, bool):
        raise error(f"{name} must be an integer, got {type(value).__name__}")


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        InvalidDateError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    _check_int("year", year, InvalidDateError)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidDateError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        InvalidDateError: If month is outside 1-12.
    """
    _check_int("month", month, InvalidDateError)
    if month < 1 or month > 12:
        raise InvalidDateError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidDateError: If day is invalid for the month.
    """
    from horologe._internal.calendar import days_in_month

    _check_int("day", day, InvalidDateError)
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate clock fields.

    Args:
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        nanosecond: The nanosecond (0-999999999).

    Raises:
        InvalidTimeError: If any field is out of range.
    """
    for name, value, upper in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("nanosecond", nanosecond, 999_999_999),
    ):
        _check_int(name, value, InvalidTimeError)
        if value < 0 or value > upper:
            raise InvalidTimeError(
                f"{name} must be between 0 and {upper}, got {value}"
            )


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_time",
]
