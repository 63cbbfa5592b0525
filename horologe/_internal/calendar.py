"""Calendar utilities for Horologe.

This module provides the civil-calendar math every value type relies on:
leap-year rules, month lengths, Julian Day Number conversions, weekday
computation and month/day shifting.

The Julian Day Number (JDN) is the shared basis for all date arithmetic.
JDN 2451545 is 2000-01-01; the supported range is 0001-01-01 (JDN 1721426)
to 9999-12-31 (JDN 5373484) in the proleptic Gregorian calendar.

This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.constants import (
    DAYS_IN_MONTH,
    MAX_JDN,
    MAX_YEAR,
    MIN_JDN,
    MIN_YEAR,
)
from horologe._internal.validation import validate_day, validate_month, validate_year
from horologe.errors import InvalidDateError, RangeOverflowError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        InvalidDateError: If year or month is out of range.
    """
    validate_year(year)
    validate_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal of a day within its year."""
    result = _DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def date_from_ymd(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Validate year, month and day and return them as a tuple.

    Construction never normalizes: February 30 is an error, not March 2.

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The validated (year, month, day) tuple.

    Raises:
        InvalidDateError: If the fields do not form a valid date.
    """
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)
    return (year, month, day)


def date_to_julian_day(year: int, month: int, day: int) -> int:
    """Convert a validated calendar date to its Julian Day Number.

    Uses the Fliegel/Van Flandern integer algorithm, exact for the whole
    proleptic Gregorian range.

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The Julian Day Number.

    Raises:
        InvalidDateError: If the fields do not form a valid date.

    Examples:
        >>> date_to_julian_day(2000, 1, 1)
        2451545
        >>> date_to_julian_day(1970, 1, 1)
        2440588
    """
    date_from_ymd(year, month, day)
    return _ymd_to_jdn(year, month, day)


def _ymd_to_jdn(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def julian_day_to_date(jdn: int) -> tuple[int, int, int]:
    """Convert a Julian Day Number to (year, month, day).

    Args:
        jdn: The Julian Day Number.

    Returns:
        Tuple of (year, month, day).

    Raises:
        InvalidDateError: If jdn lies outside 0001-01-01 .. 9999-12-31.

    Examples:
        >>> julian_day_to_date(2451545)
        (2000, 1, 1)
    """
    if not isinstance(jdn, int) or isinstance(jdn, bool):
        raise InvalidDateError(f"julian day must be an integer, got {type(jdn).__name__}")
    if jdn < MIN_JDN or jdn > MAX_JDN:
        raise InvalidDateError(
            f"julian day must be between {MIN_JDN} and {MAX_JDN}, got {jdn}"
        )
    return _jdn_to_ymd(jdn)


def _jdn_to_ymd(jdn: int) -> tuple[int, int, int]:
    f = jdn + 1401 + (((4 * jdn + 274277) // 146097) * 3) // 4 - 38
    e = 4 * f + 3
    g = (e % 1461) // 4
    h = 5 * g + 2
    day = (h % 153) // 5 + 1
    month = ((h // 153 + 2) % 12) + 1
    year = e // 1461 - 4716 + (14 - month) // 12
    return (year, month, day)


def weekday_from_jdn(jdn: int) -> int:
    """Return the ISO weekday (Monday=1 .. Sunday=7) of a Julian Day Number."""
    # JDN 0 fell on a Monday
    return jdn % 7 + 1


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the ISO day of week for a calendar date.

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        1 for Monday through 7 for Sunday.

    Raises:
        InvalidDateError: If the fields do not form a valid date.

    Examples:
        >>> day_of_week(2024, 1, 15)  # Monday
        1
        >>> day_of_week(2000, 1, 1)  # Saturday
        6
    """
    return weekday_from_jdn(date_to_julian_day(year, month, day))


def add_months(year: int, month: int, day: int, months: int) -> tuple[int, int, int]:
    """Shift a date by whole months, clamping the day to the target month.

    Jan 31 + 1 month is Feb 28 (or 29), never March.

    Raises:
        RangeOverflowError: If the resulting year leaves 1-9999.
    """
    total = year * 12 + (month - 1) + months
    new_year, new_month0 = divmod(total, 12)
    if new_year < MIN_YEAR or new_year > MAX_YEAR:
        raise RangeOverflowError(f"year {new_year} is out of range")
    new_month = new_month0 + 1
    max_day = DAYS_IN_MONTH[new_month]
    if new_month == 2 and is_leap_year(new_year):
        max_day = 29
    return (new_year, new_month, min(day, max_day))


def shift_date(jdn: int, months: int, days: int) -> int:
    """Apply a calendar shift to a Julian Day Number: months first, then days.

    Raises:
        RangeOverflowError: If the result leaves the supported range.
    """
    if months:
        jdn = _ymd_to_jdn(*add_months(*_jdn_to_ymd(jdn), months))
    jdn += days
    if jdn < MIN_JDN or jdn > MAX_JDN:
        raise RangeOverflowError("date is out of range")
    return jdn


def months_days_between(
    earlier_jdn: int,
    earlier_nanos: int,
    later_jdn: int,
    later_nanos: int,
) -> tuple[int, int]:
    """Split the calendar distance between two local date-times.

    Returns the largest (months, days) such that shifting the earlier value
    by those months (with clamping) and then those days does not pass the
    later value. The remaining time of day is left to the caller.

    The earlier value must not be after the later one.
    """
    ey, em, ed = _jdn_to_ymd(earlier_jdn)
    ly, lm, _ = _jdn_to_ymd(later_jdn)
    months = (ly * 12 + lm) - (ey * 12 + em)
    anchor = _ymd_to_jdn(*add_months(ey, em, ed, months))
    if (anchor, earlier_nanos) > (later_jdn, later_nanos):
        months -= 1
        anchor = _ymd_to_jdn(*add_months(ey, em, ed, months))
    days = later_jdn - anchor
    if days > 0 and earlier_nanos > later_nanos:
        days -= 1
    return (months, days)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "date_from_ymd",
    "date_to_julian_day",
    "julian_day_to_date",
    "weekday_from_jdn",
    "day_of_week",
    "add_months",
    "shift_date",
    "months_days_between",
]
