"""Tests for the Time class."""

from __future__ import annotations

import pickle

import pytest

from horologe.core.date import Date
from horologe.core.duration import Duration
from horologe.core.time import Time
from horologe.errors import (
    InvalidFormatError,
    InvalidTimeError,
    RangeOverflowError,
    ValidationError,
)


class TestTimeConstruction:
    """Tests for Time construction and validation."""

    def test_basic_construction(self) -> None:
        """Fields are stored as given."""
        t = Time(14, 30, 45, nanosecond=123_456_789)
        assert (t.hour, t.minute, t.second, t.nanosecond) == (14, 30, 45, 123_456_789)

    def test_defaults(self) -> None:
        """Omitted fields default to zero."""
        assert Time() == Time.midnight()
        assert Time(12) == Time.noon()

    def test_sub_second_views(self) -> None:
        """millisecond and microsecond truncate the nanosecond field."""
        t = Time(0, 0, 0, nanosecond=123_456_789)
        assert t.millisecond == 123
        assert t.microsecond == 123_456

    @pytest.mark.parametrize(
        "fields, name",
        [
            ((24, 0, 0, 0), "hour"),
            ((0, 60, 0, 0), "minute"),
            ((0, 0, 60, 0), "second"),
            ((0, 0, 0, 1_000_000_000), "nanosecond"),
            ((-1, 0, 0, 0), "hour"),
        ],
    )
    def test_out_of_range(self, fields: tuple[int, int, int, int], name: str) -> None:
        """Each field is range-checked; there are no leap seconds."""
        hour, minute, second, nanosecond = fields
        with pytest.raises(InvalidTimeError, match=name):
            Time(hour, minute, second, nanosecond=nanosecond)

    def test_nanoseconds_of_day(self) -> None:
        """Times round-trip through nanoseconds since midnight."""
        t = Time(23, 59, 59, nanosecond=999_999_999)
        assert Time.from_nanoseconds_of_day(t.nanoseconds_of_day) == t
        with pytest.raises(InvalidTimeError):
            Time.from_nanoseconds_of_day(t.nanoseconds_of_day + 1)

    def test_replace(self) -> None:
        """replace() keeps unspecified fields."""
        assert Time(14, 30).replace(minute=0, nanosecond=5) == Time(14, 0, nanosecond=5)

    def test_on_date(self) -> None:
        """on() combines with a date."""
        dt = Time(9, 30).on(Date(2024, 1, 15))
        assert dt.date == Date(2024, 1, 15)
        assert dt.time == Time(9, 30)


class TestTimeArithmetic:
    """Tests for exact arithmetic within a day."""

    def test_add(self) -> None:
        """Adding hours and minutes."""
        assert Time(10, 0) + Duration(hours=2, minutes=30) == Time(12, 30)

    def test_add_past_midnight(self) -> None:
        """A time of day does not wrap."""
        with pytest.raises(RangeOverflowError):
            Time(23, 0) + Duration(hours=2)

    def test_subtract_before_midnight(self) -> None:
        """Subtracting below 00:00 does not wrap either."""
        with pytest.raises(RangeOverflowError):
            Time(0, 30) - Duration(hours=1)

    def test_add_date_part_rejected(self) -> None:
        """Days and months cannot be added to a Time."""
        with pytest.raises(ValidationError):
            Time(10, 0).add(Duration(days=1))

    def test_diff(self) -> None:
        """diff is exact and signed."""
        assert Time(12, 0) - Time(10, 30) == Duration(hours=1, minutes=30)
        assert Time(10, 30) - Time(12, 0) == Duration(hours=-1, minutes=-30)


class TestTimeComparisonAndText:
    """Tests for ordering, formatting and parsing."""

    def test_ordering(self) -> None:
        """Times order by nanoseconds of day."""
        assert Time(9, 0) < Time(9, 0, nanosecond=1) < Time(10, 0)

    def test_format_shortest_fraction(self) -> None:
        """Fractions use the fewest exact digits."""
        assert Time(14, 30, 45).format_iso() == "14:30:45"
        assert Time(14, 30, 45, nanosecond=120_000_000).format_iso() == "14:30:45.12"
        assert str(Time(0, 0, 0, nanosecond=1)) == "00:00:00.000000001"

    def test_parse(self) -> None:
        """parse_iso accepts up to nine fractional digits."""
        assert Time.parse_iso("14:30:45.5") == Time(14, 30, 45, nanosecond=500_000_000)

    def test_parse_rejects_short_form(self) -> None:
        """Seconds are required."""
        with pytest.raises(InvalidFormatError):
            Time.parse_iso("14:30")

    def test_parse_rejects_leap_second(self) -> None:
        """Second 60 is out of range."""
        with pytest.raises(InvalidFormatError):
            Time.parse_iso("23:59:60")

    def test_repr_and_pickle(self) -> None:
        """repr shows the fields and pickling round-trips."""
        t = Time(14, 30, 45, nanosecond=7)
        assert repr(t) == "Time(14, 30, 45, nanosecond=7)"
        assert pickle.loads(pickle.dumps(t)) == t
