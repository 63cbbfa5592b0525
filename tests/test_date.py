"""Tests for the Date class."""

from __future__ import annotations

import pickle

import pytest

from horologe.core.date import Date
from horologe.core.duration import Duration
from horologe.core.time import Time
from horologe.errors import (
    InvalidDateError,
    InvalidFormatError,
    RangeOverflowError,
    ValidationError,
)
from horologe.units.weekday import Weekday


class TestDateConstruction:
    """Tests for Date construction and validation."""

    def test_basic_construction(self) -> None:
        """Test basic date construction."""
        d = Date(2024, 1, 15)
        assert d.year == 2024
        assert d.month == 1
        assert d.day == 15

    def test_construction_leap_year_february(self) -> None:
        """Test construction of Feb 29 in leap year."""
        assert Date(2024, 2, 29).day == 29

    def test_construction_invalid_month(self) -> None:
        """Test that month 13 raises InvalidDateError."""
        with pytest.raises(InvalidDateError, match="month must be between 1 and 12"):
            Date(2024, 13, 1)

    def test_construction_invalid_feb_29_non_leap(self) -> None:
        """Test that Feb 29 raises InvalidDateError in non-leap year."""
        with pytest.raises(InvalidDateError, match="day must be between 1 and 28"):
            Date(2023, 2, 29)

    def test_construction_never_normalizes(self) -> None:
        """Feb 30 is an error, not March 1."""
        with pytest.raises(InvalidDateError):
            Date(2024, 2, 30)

    def test_invalid_date_is_validation_error(self) -> None:
        """InvalidDateError is a ValidationError."""
        with pytest.raises(ValidationError):
            Date(2024, 0, 1)

    def test_construction_year_limits(self) -> None:
        """Years 1 and 9999 are supported, 0 and 10000 are not."""
        assert Date(1, 1, 1) == Date.MIN
        assert Date(9999, 12, 31) == Date.MAX
        with pytest.raises(InvalidDateError, match="year must be between"):
            Date(0, 12, 31)
        with pytest.raises(InvalidDateError, match="year must be between"):
            Date(10000, 1, 1)

    def test_non_integer_fields(self) -> None:
        """Floats and bools are not accepted as fields."""
        with pytest.raises(InvalidDateError):
            Date(2024.0, 1, 1)  # type: ignore[arg-type]
        with pytest.raises(InvalidDateError):
            Date(2024, True, 1)  # type: ignore[arg-type]

    def test_from_julian_day(self) -> None:
        """Dates round-trip through the Julian Day Number."""
        assert Date.from_julian_day(2451545) == Date(2000, 1, 1)
        assert Date(2024, 1, 15).julian_day == 2460325

    def test_from_julian_day_out_of_range(self) -> None:
        """JDNs outside years 1-9999 are rejected."""
        with pytest.raises(InvalidDateError):
            Date.from_julian_day(0)


class TestDateProperties:
    """Tests for derived Date properties."""

    def test_day_of_week(self) -> None:
        """day_of_week returns the Weekday enum."""
        assert Date(2024, 1, 15).day_of_week is Weekday.MONDAY
        assert Date(2024, 7, 4).day_of_week is Weekday.THURSDAY
        assert Date(2024, 1, 14).day_of_week.is_weekend

    def test_day_of_year(self) -> None:
        """Ordinal day of the year."""
        assert Date(2024, 12, 31).day_of_year == 366
        assert Date(2023, 12, 31).day_of_year == 365

    def test_leap_year_and_month_length(self) -> None:
        """is_leap_year and days_in_month follow the Gregorian rule."""
        assert Date(2000, 2, 1).is_leap_year
        assert not Date(1900, 2, 1).is_leap_year
        assert Date(2024, 2, 1).days_in_month == 29

    def test_ymd(self) -> None:
        """ymd() returns the field tuple."""
        assert Date(2024, 1, 15).ymd() == (2024, 1, 15)


class TestDateReplace:
    """Tests for Date.replace()."""

    def test_replace_fields(self) -> None:
        """Unspecified fields keep their values."""
        assert Date(2024, 1, 15).replace(month=6) == Date(2024, 6, 15)

    def test_replace_does_not_clamp(self) -> None:
        """Replacing into an invalid date raises."""
        with pytest.raises(InvalidDateError):
            Date(2024, 1, 31).replace(month=2)

    def test_at_time(self) -> None:
        """at() combines a date with a time of day."""
        dt = Date(2024, 1, 15).at(Time(9, 30))
        assert (dt.year, dt.month, dt.day, dt.hour, dt.minute) == (2024, 1, 15, 9, 30)


class TestDateArithmetic:
    """Tests for calendar arithmetic on dates."""

    def test_add_days(self) -> None:
        """add_days crosses month and year boundaries."""
        assert Date(2023, 12, 31).add_days(1) == Date(2024, 1, 1)
        assert Date(2024, 3, 1).add_days(-1) == Date(2024, 2, 29)

    def test_add_months_clamps(self) -> None:
        """Jan 31 + 1 month is the last day of February."""
        assert Date(2024, 1, 31).add_months(1) == Date(2024, 2, 29)
        assert Date(2023, 1, 31).add_months(1) == Date(2023, 2, 28)
        assert Date(2024, 3, 31).add_months(-1) == Date(2024, 2, 29)

    def test_add_years_from_leap_day(self) -> None:
        """Feb 29 plus a year is Feb 28."""
        assert Date(2024, 2, 29).add_years(1) == Date(2025, 2, 28)

    def test_add_duration_months_then_days(self) -> None:
        """Months are applied before days."""
        assert Date(2024, 1, 31) + Duration(months=1, days=1) == Date(2024, 3, 1)

    def test_add_duration_with_time_part(self) -> None:
        """A Date cannot absorb hours."""
        with pytest.raises(ValidationError):
            Date(2024, 1, 15) + Duration(hours=1)

    def test_subtract_duration(self) -> None:
        """Subtracting negates the date part."""
        assert Date(2024, 3, 31) - Duration(months=1) == Date(2024, 2, 29)

    def test_overflow(self) -> None:
        """Moving past 9999-12-31 raises RangeOverflowError."""
        with pytest.raises(RangeOverflowError):
            Date.MAX.add_days(1)
        with pytest.raises(RangeOverflowError):
            Date.MIN - Duration(days=1)

    def test_diff(self) -> None:
        """diff returns months and days."""
        assert Date(2024, 3, 15).diff(Date(2024, 1, 10)) == Duration(months=2, days=5)
        assert Date(2024, 3, 15) - Date(2024, 1, 10) == Duration(months=2, days=5)

    def test_diff_antisymmetric(self) -> None:
        """a - b == -(b - a)."""
        a, b = Date(2024, 3, 1), Date(2023, 1, 31)
        assert a - b == -(b - a)

    def test_diff_adds_back(self) -> None:
        """b + (a - b) == a for a >= b, including month-end clamping."""
        pairs = [
            (Date(2024, 3, 1), Date(2024, 1, 31)),
            (Date(2024, 2, 29), Date(2023, 2, 28)),
            (Date(2025, 1, 1), Date(2024, 12, 31)),
        ]
        for a, b in pairs:
            assert b + (a - b) == a

    def test_diff_same_date(self) -> None:
        """A date minus itself is zero."""
        assert (Date(2024, 1, 15) - Date(2024, 1, 15)).is_zero


class TestDateComparison:
    """Tests for Date ordering and hashing."""

    def test_ordering(self) -> None:
        """Dates order chronologically."""
        assert Date(2024, 1, 15) < Date(2024, 1, 16)
        assert Date(2023, 12, 31) < Date(2024, 1, 1)
        assert max(Date(2024, 5, 1), Date(2024, 4, 30)) == Date(2024, 5, 1)

    def test_hash(self) -> None:
        """Equal dates hash alike."""
        assert len({Date(2024, 1, 15), Date(2024, 1, 15)}) == 1

    def test_not_equal_to_other_types(self) -> None:
        """Dates compare unequal to non-dates."""
        assert Date(2024, 1, 15) != "2024-01-15"


class TestDateFormatting:
    """Tests for ISO 8601 text."""

    def test_format_pads_year(self) -> None:
        """Years are written with four digits."""
        assert Date(33, 7, 4).format_iso() == "0033-07-04"
        assert str(Date(2024, 1, 15)) == "2024-01-15"

    def test_parse(self) -> None:
        """parse_iso reads YYYY-MM-DD."""
        assert Date.parse_iso("2024-02-29") == Date(2024, 2, 29)

    def test_parse_invalid_date(self) -> None:
        """A well-formed but impossible date is a format error."""
        with pytest.raises(InvalidFormatError):
            Date.parse_iso("2023-02-29")

    def test_repr(self) -> None:
        """repr shows the constructor call."""
        assert repr(Date(2024, 1, 15)) == "Date(2024, 1, 15)"

    def test_pickle(self) -> None:
        """Dates survive pickling."""
        d = Date(2024, 1, 15)
        assert pickle.loads(pickle.dumps(d)) == d
