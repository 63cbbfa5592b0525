"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar, years 1 through 9999.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, overload

from horologe._internal.calendar import (
    date_to_julian_day,
    day_of_year,
    days_in_month,
    is_leap_year,
    julian_day_to_date,
    months_days_between,
    shift_date,
    weekday_from_jdn,
)
from horologe._internal.constants import MAX_JDN, MIN_JDN
from horologe.errors import ValidationError
from horologe.units.weekday import Weekday

if TYPE_CHECKING:
    from horologe.core.duration import Duration
    from horologe.core.local_datetime import LocalDateTime
    from horologe.core.time import Time


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. The Gregorian rules are extended to dates before the
    calendar's actual adoption in 1582, down to 0001-01-01.

    Internal representation is the Julian Day Number, which every other
    value type shares for date arithmetic.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(2024, 2, 29)  # Valid leap year date
        Date(2024, 2, 29)

        >>> Date(2024, 1, 31).add_months(1)
        Date(2024, 2, 29)
    """

    __slots__ = ("_jdn",)

    MIN: ClassVar[Date]
    MAX: ClassVar[Date]

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            InvalidDateError: If any component is out of range.

        Examples:
            >>> Date(2024, 2, 30)  # Invalid: February doesn't have 30 days
            Traceback (most recent call last):
            ...
            horologe.errors.InvalidDateError: day must be between 1 and 29 for 2024-02, got 30
        """
        self._jdn = date_to_julian_day(year, month, day)

    @classmethod
    def _from_jdn(cls, jdn: int) -> Date:
        """Create a Date from an already range-checked Julian Day Number."""
        instance = object.__new__(cls)
        instance._jdn = jdn
        return instance

    @classmethod
    def from_julian_day(cls, jdn: int) -> Date:
        """Create a Date from a Julian Day Number.

        Args:
            jdn: The Julian Day Number (1721426 to 5373484).

        Raises:
            InvalidDateError: If jdn is outside the supported range.

        Examples:
            >>> Date.from_julian_day(2451545)
            Date(2000, 1, 1)
        """
        julian_day_to_date(jdn)
        return cls._from_jdn(jdn)

    @classmethod
    def parse_iso(cls, s: str) -> Date:
        """Parse a date in ISO 8601 format (YYYY-MM-DD).

        Args:
            s: The ISO 8601 date string.

        Returns:
            The parsed Date.

        Raises:
            InvalidFormatError: If the string is malformed or the fields
                do not form a valid date.

        Examples:
            >>> Date.parse_iso("2024-01-15")
            Date(2024, 1, 15)
        """
        from horologe.format.iso8601 import parse_date

        return parse_date(s)

    @property
    def year(self) -> int:
        """Return the year component."""
        return julian_day_to_date(self._jdn)[0]

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return julian_day_to_date(self._jdn)[1]

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return julian_day_to_date(self._jdn)[2]

    @property
    def julian_day(self) -> int:
        """Return the Julian Day Number of this date.

        Examples:
            >>> Date(1970, 1, 1).julian_day
            2440588
        """
        return self._jdn

    @property
    def day_of_week(self) -> Weekday:
        """Return the ISO day of the week.

        Examples:
            >>> Date(2024, 1, 15).day_of_week
            <Weekday.MONDAY: 1>
            >>> Date(2024, 1, 21).day_of_week
            <Weekday.SUNDAY: 7>
        """
        return Weekday(weekday_from_jdn(self._jdn))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year.

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
            >>> Date(2023, 12, 31).day_of_year
            365
        """
        return day_of_year(*julian_day_to_date(self._jdn))

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        year, month, _ = julian_day_to_date(self._jdn)
        return days_in_month(year, month)

    def ymd(self) -> tuple[int, int, int]:
        """Return the (year, month, day) tuple."""
        return julian_day_to_date(self._jdn)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Any unspecified components retain their current values. The result
        is validated; nothing is clamped.

        Raises:
            InvalidDateError: If the resulting date is invalid.

        Examples:
            >>> d = Date(2024, 1, 15)
            >>> d.replace(month=6)
            Date(2024, 6, 15)

            >>> d.replace(year=2023, month=2, day=28)
            Date(2023, 2, 28)
        """
        y, m, d = julian_day_to_date(self._jdn)
        return Date(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
        )

    def at(self, time: Time) -> LocalDateTime:
        """Combine this date with a time of day.

        Examples:
            >>> from horologe.core.time import Time
            >>> Date(2024, 1, 15).at(Time(9, 30))
            LocalDateTime(2024, 1, 15, 9, 30, 0, nanosecond=0)
        """
        from horologe.core.local_datetime import LocalDateTime

        return LocalDateTime.combine(self, time)

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Raises:
            RangeOverflowError: If the result is out of range.

        Examples:
            >>> Date(2024, 1, 15).add_days(-20)
            Date(2023, 12, 26)
        """
        return Date._from_jdn(shift_date(self._jdn, 0, days))

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the resulting day is invalid for the new month, it is
        clamped to the last valid day of that month.

        Raises:
            RangeOverflowError: If the result is out of range.

        Examples:
            >>> Date(2024, 1, 31).add_months(1)  # Clamps to Feb 29
            Date(2024, 2, 29)

            >>> Date(2023, 1, 31).add_months(1)  # Clamps to Feb 28
            Date(2023, 2, 28)
        """
        return Date._from_jdn(shift_date(self._jdn, months, 0))

    def add_years(self, years: int) -> Date:
        """Return a new Date offset by the given number of years.

        Feb 29 becomes Feb 28 in a common year.

        Examples:
            >>> Date(2024, 2, 29).add_years(1)
            Date(2025, 2, 28)
        """
        return self.add_months(years * 12)

    def add(self, duration: Duration) -> Date:
        """Apply the date part of a duration: months first, then days.

        Args:
            duration: A Duration with no time part.

        Raises:
            ValidationError: If the duration has a time part.
            RangeOverflowError: If the result is out of range.

        Examples:
            >>> from horologe.core.duration import Duration
            >>> Date(2024, 1, 31).add(Duration(months=1, days=1))
            Date(2024, 3, 1)
        """
        if duration.nanoseconds:
            raise ValidationError(
                f"cannot add a duration with a time part to a Date: {duration}"
            )
        return Date._from_jdn(shift_date(self._jdn, duration.months, duration.days))

    def subtract(self, duration: Duration) -> Date:
        """Apply the negated date part of a duration."""
        return self.add(-duration)

    def diff(self, other: Date) -> Duration:
        """Return the calendar distance ``self - other`` in months and days.

        The result satisfies ``other.add(self.diff(other)) == self`` when
        ``self >= other``. The days component never spans a whole month.

        Examples:
            >>> Date(2024, 3, 15).diff(Date(2024, 1, 10))
            Duration(months=2, days=5, nanoseconds=0)
            >>> Date(2024, 1, 10).diff(Date(2024, 3, 15))
            Duration(months=-2, days=-5, nanoseconds=0)
        """
        from horologe.core.duration import Duration

        if not isinstance(other, Date):
            raise TypeError(f"cannot diff Date and {type(other).__name__}")
        if self._jdn < other._jdn:
            return -other.diff(self)
        months, days = months_days_between(other._jdn, 0, self._jdn, 0)
        return Duration(months=months, days=days)

    def format_iso(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> Date(2024, 1, 15).format_iso()
            '2024-01-15'
            >>> Date(33, 7, 4).format_iso()
            '0033-07-04'
        """
        year, month, day = julian_day_to_date(self._jdn)
        return f"{year:04d}-{month:02d}-{day:02d}"

    def __add__(self, other: object) -> Date:
        from horologe.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    @overload
    def __sub__(self, other: Duration) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> Duration: ...

    def __sub__(self, other: object) -> Date | Duration:
        """Subtract a Duration (giving a Date) or a Date (giving a Duration).

        Examples:
            >>> Date(2024, 1, 25) - Date(2024, 1, 15)
            Duration(months=0, days=10, nanoseconds=0)
        """
        from horologe.core.duration import Duration

        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, Date):
            return self.diff(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._jdn == other._jdn

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._jdn < other._jdn

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._jdn <= other._jdn

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._jdn > other._jdn

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._jdn >= other._jdn

    def __hash__(self) -> int:
        return hash(self._jdn)

    def __reduce__(self) -> tuple[type[Date], tuple[int, int, int]]:
        return (Date, julian_day_to_date(self._jdn))

    def __repr__(self) -> str:
        """Return a string like 'Date(2024, 1, 15)'."""
        year, month, day = julian_day_to_date(self._jdn)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.format_iso()


Date.MIN = Date._from_jdn(MIN_JDN)
Date.MAX = Date._from_jdn(MAX_JDN)


__all__ = ["Date"]
