"""Fixed UTC offsets.

This module provides the UtcOffset class: a signed whole number of
seconds east of UTC, strictly inside +/- 24 hours.
"""

from __future__ import annotations

from typing import ClassVar

from horologe._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    NANOS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from horologe.errors import ValidationError


class UtcOffset:
    """A fixed offset from UTC.

    The offset is stored in seconds from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC
    (behind in time).

    Attributes:
        total_seconds: The offset in seconds.

    Examples:
        >>> UtcOffset.utc().is_utc
        True

        >>> UtcOffset.from_hours(5, 30).total_seconds
        19800

        >>> str(UtcOffset.from_hours(-3, 30))
        '-03:30'
    """

    __slots__ = ("_seconds",)

    UTC: ClassVar[UtcOffset]

    def __init__(self, seconds: int = 0) -> None:
        """Create an offset of the given number of seconds.

        Args:
            seconds: Offset from UTC in seconds, strictly between -86400
                and 86400.

        Raises:
            ValidationError: If seconds is not an integer or out of range.
        """
        if not isinstance(seconds, int) or isinstance(seconds, bool):
            raise ValidationError(
                f"offset seconds must be an integer, got {type(seconds).__name__}"
            )
        if abs(seconds) >= MAX_UTC_OFFSET_SECONDS:
            raise ValidationError(
                f"offset must be strictly within +/-24 hours, got {seconds} seconds"
            )
        self._seconds: int = seconds

    @classmethod
    def utc(cls) -> UtcOffset:
        """Return the zero offset.

        All calls return the same instance.
        """
        return cls.UTC

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0, seconds: int = 0) -> UtcOffset:
        """Create an offset from hours, minutes and seconds.

        The minutes and seconds must be non-negative; the sign is taken
        from hours. Use ``from_hours(0, ...)`` only for positive offsets
        below one hour; negative sub-hour offsets need ``UtcOffset(-1800)``.

        Args:
            hours: Hour component (-23 to 23).
            minutes: Minute component (0 to 59).
            seconds: Second component (0 to 59).

        Returns:
            A new UtcOffset.

        Raises:
            ValidationError: If a component is out of range.

        Examples:
            >>> UtcOffset.from_hours(-5).total_seconds
            -18000
            >>> UtcOffset.from_hours(-9, 30).total_seconds
            -34200
        """
        if not 0 <= minutes <= 59:
            raise ValidationError(f"minutes must be 0-59, got {minutes}")
        if not 0 <= seconds <= 59:
            raise ValidationError(f"seconds must be 0-59, got {seconds}")
        magnitude = abs(hours) * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        return cls(-magnitude if hours < 0 else magnitude)

    @classmethod
    def parse(cls, s: str) -> UtcOffset:
        """Parse ``Z``, ``+HH:MM`` or ``+HH:MM:SS``.

        Raises:
            InvalidFormatError: If the text is not a valid offset.

        Examples:
            >>> UtcOffset.parse("+05:30").total_seconds
            19800
            >>> UtcOffset.parse("Z").is_utc
            True
        """
        from horologe.format.iso8601 import parse_offset

        return parse_offset(s)

    @property
    def total_seconds(self) -> int:
        """Return the offset in seconds (positive east of UTC)."""
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        """Return the offset in nanoseconds."""
        return self._seconds * NANOS_PER_SECOND

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero."""
        return self._seconds == 0

    def __neg__(self) -> UtcOffset:
        return UtcOffset(-self._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._seconds >= other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __reduce__(self) -> tuple[type[UtcOffset], tuple[int]]:
        return (UtcOffset, (self._seconds,))

    def __repr__(self) -> str:
        return f"UtcOffset({self})"

    def __str__(self) -> str:
        """Return ``+HH:MM``, or ``+HH:MM:SS`` when seconds are present.

        Examples:
            >>> str(UtcOffset(0))
            '+00:00'
            >>> str(UtcOffset(-(9 * 3600 + 21)))
            '-09:00:21'
        """
        sign = "-" if self._seconds < 0 else "+"
        hours, rest = divmod(abs(self._seconds), SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        if seconds:
            return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
        return f"{sign}{hours:02d}:{minutes:02d}"


UtcOffset.UTC = UtcOffset(0)


__all__ = ["UtcOffset"]
