"""Tests for the LocalDateTime class."""

from __future__ import annotations

import pickle

import pytest

from horologe.core.date import Date
from horologe.core.duration import Duration
from horologe.core.instant import Instant
from horologe.core.local_datetime import LocalDateTime
from horologe.core.time import Time
from horologe.errors import (
    InvalidDateError,
    InvalidFormatError,
    InvalidTimeError,
    RangeOverflowError,
    ValidationError,
)
from horologe.units.offset import UtcOffset
from horologe.units.rounding import RoundingMode, TimeUnit


class TestLocalDateTimeConstruction:
    """Tests for construction and field access."""

    def test_fields(self) -> None:
        """All fields are available as properties."""
        dt = LocalDateTime(2024, 1, 15, 14, 30, 45, nanosecond=9)
        assert (dt.year, dt.month, dt.day) == (2024, 1, 15)
        assert (dt.hour, dt.minute, dt.second, dt.nanosecond) == (14, 30, 45, 9)
        assert dt.date == Date(2024, 1, 15)
        assert dt.time == Time(14, 30, 45, nanosecond=9)

    def test_invalid_fields(self) -> None:
        """Date and time fields raise their own error kinds."""
        with pytest.raises(InvalidDateError):
            LocalDateTime(2023, 2, 29)
        with pytest.raises(InvalidTimeError):
            LocalDateTime(2024, 1, 1, 24)

    def test_combine(self) -> None:
        """combine() joins a date and a time."""
        assert LocalDateTime.combine(Date(2024, 1, 15), Time(9)) == LocalDateTime(2024, 1, 15, 9)

    def test_replace_parts(self) -> None:
        """replace_date and replace_time swap one half."""
        dt = LocalDateTime(2024, 1, 15, 9)
        assert dt.replace_date(Date(2025, 6, 1)) == LocalDateTime(2025, 6, 1, 9)
        assert dt.replace_time(Time(18, 45)) == LocalDateTime(2024, 1, 15, 18, 45)
        assert dt.replace(day=20, minute=5) == LocalDateTime(2024, 1, 20, 9, 5)

    def test_limits(self) -> None:
        """MIN and MAX span the whole supported range."""
        assert str(LocalDateTime.MIN) == "0001-01-01T00:00:00"
        assert str(LocalDateTime.MAX) == "9999-12-31T23:59:59.999999999"


class TestLocalDateTimeArithmetic:
    """Tests for add, subtract and diff."""

    def test_add_month_clamps_then_adds_time(self) -> None:
        """Months are clamped before the time part is added."""
        dt = LocalDateTime(2024, 1, 31, 22)
        assert dt + Duration(months=1, hours=3) == LocalDateTime(2024, 3, 1, 1)

    def test_add_hours_crosses_midnight(self) -> None:
        """The time part carries into the date."""
        assert LocalDateTime(2024, 12, 31, 23, 30) + Duration(minutes=45) == LocalDateTime(
            2025, 1, 1, 0, 15
        )

    def test_subtract_reverses_add(self) -> None:
        """subtract applies the time part first, which reverses add here."""
        dt = LocalDateTime(2024, 2, 29, 23)
        d = Duration(years=1, days=1, hours=2)
        assert (dt + d) - d == LocalDateTime(2024, 2, 29, 23)

    def test_subtract_after_month_clamp(self) -> None:
        """Month clamping can keep subtract from reversing add."""
        dt = LocalDateTime(2024, 1, 30)
        d = Duration(months=1, days=1)
        assert dt + d == LocalDateTime(2024, 3, 1)
        assert (dt + d) - d == LocalDateTime(2024, 1, 31)

    def test_subtract_negative_duration(self) -> None:
        """Subtracting a negative duration moves forward."""
        assert LocalDateTime(2024, 1, 1) - Duration(days=-1) == LocalDateTime(2024, 1, 2)

    def test_overflow(self) -> None:
        """Results past the supported range raise RangeOverflowError."""
        with pytest.raises(RangeOverflowError):
            LocalDateTime.MAX + Duration(nanoseconds=1)
        with pytest.raises(RangeOverflowError):
            LocalDateTime.MIN - Duration(months=1)

    def test_diff(self) -> None:
        """diff splits into months, days and a sub-day remainder."""
        a = LocalDateTime(2024, 3, 1, 6)
        b = LocalDateTime(2024, 1, 31, 12)
        assert a - b == Duration(months=1, hours=18)
        assert str(a - b) == "P1MT18H"

    def test_diff_antisymmetric(self) -> None:
        """b - a == -(a - b)."""
        a = LocalDateTime(2024, 3, 1, 6)
        b = LocalDateTime(2024, 1, 31, 12)
        assert b - a == -(a - b)

    @pytest.mark.parametrize(
        "later, earlier",
        [
            (LocalDateTime(2024, 3, 1, 6), LocalDateTime(2024, 1, 31, 12)),
            (LocalDateTime(2025, 2, 28), LocalDateTime(2024, 2, 29)),
            (LocalDateTime(2024, 1, 2, 0, 0, 0, nanosecond=1), LocalDateTime(2024, 1, 1, 23, 59, 59)),
            (LocalDateTime(2024, 5, 31, 23), LocalDateTime(2024, 4, 30, 23)),
        ],
    )
    def test_diff_adds_back(self, later: LocalDateTime, earlier: LocalDateTime) -> None:
        """earlier + (later - earlier) == later."""
        assert earlier + (later - earlier) == later

    def test_diff_remainder_under_a_day(self) -> None:
        """The time remainder is always less than a day."""
        d = LocalDateTime(2024, 1, 3, 5) - LocalDateTime(2024, 1, 1, 6)
        assert d == Duration(days=1, hours=23)


class TestLocalDateTimeConversion:
    """Tests for attaching offsets."""

    def test_assume_utc(self) -> None:
        """assume_utc reads the fields as UTC."""
        assert LocalDateTime(1970, 1, 1, 0, 0, 1).assume_utc() == Instant.from_unix_seconds(1)

    def test_assume_offset(self) -> None:
        """assume_offset keeps the fields and subtracts the offset for the instant."""
        odt = LocalDateTime(2024, 1, 15, 12).assume_offset(UtcOffset.from_hours(2))
        assert odt.hour == 12
        assert odt.to_instant() == Instant.from_utc(2024, 1, 15, 10)

    def test_assume_offset_out_of_range(self) -> None:
        """The first instant cannot be viewed from a positive offset's day before."""
        with pytest.raises(RangeOverflowError):
            LocalDateTime.MIN.assume_offset(UtcOffset.from_hours(1))


class TestLocalDateTimeComparisonAndText:
    """Tests for ordering and text."""

    def test_ordering(self) -> None:
        """Values order by date, then time."""
        assert LocalDateTime(2024, 1, 15, 23) < LocalDateTime(2024, 1, 16)
        assert LocalDateTime(2024, 1, 15, nanosecond=1) > LocalDateTime(2024, 1, 15)

    def test_not_comparable_with_instant(self) -> None:
        """Local values do not order against exact ones."""
        with pytest.raises(TypeError):
            LocalDateTime(2024, 1, 15) < Instant(0)  # noqa: B015

    def test_parse_and_format(self) -> None:
        """ISO text round-trips."""
        text = "2024-01-15T14:30:00.25"
        assert str(LocalDateTime.parse_iso(text)) == text

    def test_parse_rejects_offset(self) -> None:
        """An offset is not part of a local date-time."""
        with pytest.raises(InvalidFormatError):
            LocalDateTime.parse_iso("2024-01-15T14:30:00Z")

    def test_parse_rejects_lowercase_t(self) -> None:
        """The separator is an uppercase T."""
        with pytest.raises(InvalidFormatError):
            LocalDateTime.parse_iso("2024-01-15t14:30:00")

    def test_pickle(self) -> None:
        """Pickling preserves every field."""
        dt = LocalDateTime(2024, 1, 15, 14, 30, nanosecond=1)
        assert pickle.loads(pickle.dumps(dt)) == dt


class TestRound:
    """Tests for rounding the time of day."""

    def test_default_is_nearest_second_half_even(self) -> None:
        """Ties go to the even second."""
        assert LocalDateTime(2024, 1, 15, 9, 0, 1, nanosecond=500_000_000).round() == (
            LocalDateTime(2024, 1, 15, 9, 0, 2)
        )
        assert LocalDateTime(2024, 1, 15, 9, 0, 2, nanosecond=500_000_000).round() == (
            LocalDateTime(2024, 1, 15, 9, 0, 2)
        )

    @pytest.mark.parametrize(
        "mode, expected",
        [
            ("floor", LocalDateTime(2024, 1, 15, 9, 0)),
            ("ceil", LocalDateTime(2024, 1, 15, 9, 15)),
            ("half_floor", LocalDateTime(2024, 1, 15, 9, 0)),
            ("half_ceil", LocalDateTime(2024, 1, 15, 9, 15)),
            ("half_even", LocalDateTime(2024, 1, 15, 9, 0)),
        ],
    )
    def test_modes_on_a_tie(self, mode: str, expected: LocalDateTime) -> None:
        """Each mode settles a value exactly between two steps."""
        dt = LocalDateTime(2024, 1, 15, 9, 7, 30)
        assert dt.round("minute", 15, mode) == expected

    def test_enum_arguments(self) -> None:
        """Units and modes can be given as enums."""
        dt = LocalDateTime(2024, 1, 15, 14, 31)
        assert dt.round(TimeUnit.HOUR, 6, RoundingMode.FLOOR) == LocalDateTime(2024, 1, 15, 12)

    def test_sub_second_units(self) -> None:
        """Millisecond rounding keeps the coarser fields."""
        dt = LocalDateTime(2024, 1, 15, 9, 0, 0, nanosecond=123_456_789)
        assert dt.round("millisecond").nanosecond == 123_000_000
        assert dt.round("microsecond", 10, "ceil").nanosecond == 123_460_000

    def test_rounds_into_next_day(self) -> None:
        """Rounding up at the end of a day carries into midnight."""
        dt = LocalDateTime(2024, 2, 29, 23, 59, 59, nanosecond=600_000_000)
        assert dt.round() == LocalDateTime(2024, 3, 1)
        assert LocalDateTime(2023, 12, 31, 12).round("day", mode="half_ceil") == LocalDateTime(2024, 1, 1)
        assert LocalDateTime(2023, 12, 31, 12).round("day") == LocalDateTime(2023, 12, 31)

    def test_overflow_at_max(self) -> None:
        """Carrying past the last supported day raises RangeOverflowError."""
        with pytest.raises(RangeOverflowError):
            LocalDateTime.MAX.round()
        assert LocalDateTime.MAX.round(mode="floor") == LocalDateTime(9999, 12, 31, 23, 59, 59)

    @pytest.mark.parametrize(
        "unit, increment",
        [("minute", 7), ("hour", 24), ("second", 0), ("day", 2), ("nanosecond", 1000)],
    )
    def test_invalid_increment(self, unit: str, increment: int) -> None:
        """Increments must evenly divide the next larger unit."""
        with pytest.raises(ValidationError):
            LocalDateTime(2024, 1, 15).round(unit, increment)

    def test_invalid_unit_or_mode(self) -> None:
        """Unknown names are rejected."""
        with pytest.raises(ValueError):
            LocalDateTime(2024, 1, 15).round("week")
        with pytest.raises(ValueError):
            LocalDateTime(2024, 1, 15).round(mode="nearest")
