"""Units and modes for rounding a time of day.

This module provides the TimeUnit enum naming the clock units a value can
be rounded to, and the RoundingMode enum choosing the direction.
"""

from __future__ import annotations

from enum import Enum

from horologe._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from horologe.errors import ValidationError


class TimeUnit(Enum):
    """Clock units from nanoseconds up to one day.

    Values can also be given as their strings, e.g. ``"minute"``.

    Examples:
        >>> TimeUnit.MINUTE.nanoseconds
        60000000000
        >>> TimeUnit("hour").step(6)
        21600000000000
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"

    @property
    def nanoseconds(self) -> int:
        """Return the length of one unit in nanoseconds."""
        return _UNIT_NANOS[self]

    def step(self, increment: int) -> int:
        """Return the length of ``increment`` units in nanoseconds.

        The increment must evenly divide the next larger unit (1000 for
        sub-second units, 60 for seconds and minutes, 24 for hours), so
        that every step boundary falls on a boundary of that unit. Days
        only accept an increment of 1.

        Raises:
            ValidationError: If the increment is not a valid divisor.
        """
        if not isinstance(increment, int) or isinstance(increment, bool):
            raise ValidationError(
                f"increment must be an integer, got {type(increment).__name__}"
            )
        limit = _UNIT_LIMITS[self]
        if self is TimeUnit.DAY:
            if increment != 1:
                raise ValidationError(f"increment for days must be 1, got {increment}")
        elif increment < 1 or increment >= limit or limit % increment:
            raise ValidationError(
                f"increment for {self.value}s must divide {limit}, got {increment}"
            )
        return increment * self.nanoseconds


_UNIT_NANOS = {
    TimeUnit.NANOSECOND: 1,
    TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
    TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
    TimeUnit.SECOND: NANOS_PER_SECOND,
    TimeUnit.MINUTE: NANOS_PER_MINUTE,
    TimeUnit.HOUR: NANOS_PER_HOUR,
    TimeUnit.DAY: NANOS_PER_DAY,
}

# How many of each unit make up the next larger one
_UNIT_LIMITS = {
    TimeUnit.NANOSECOND: 1000,
    TimeUnit.MICROSECOND: 1000,
    TimeUnit.MILLISECOND: 1000,
    TimeUnit.SECOND: 60,
    TimeUnit.MINUTE: 60,
    TimeUnit.HOUR: 24,
    TimeUnit.DAY: 1,
}


class RoundingMode(Enum):
    """Direction to round a value that falls between two steps.

    Examples:
        >>> RoundingMode.HALF_EVEN.round_to(15, 10)
        20
        >>> RoundingMode.HALF_EVEN.round_to(25, 10)
        20
        >>> RoundingMode("ceil").round_to(21, 10)
        30
    """

    FLOOR = "floor"  # toward the past
    CEIL = "ceil"  # toward the future
    HALF_FLOOR = "half_floor"  # nearest, ties toward the past
    HALF_CEIL = "half_ceil"  # nearest, ties toward the future
    HALF_EVEN = "half_even"  # nearest, ties to an even multiple

    def round_to(self, value: int, step: int) -> int:
        """Round a non-negative ``value`` to a multiple of ``step``."""
        quotient, remainder = divmod(value, step)
        if remainder == 0 or self is RoundingMode.FLOOR:
            return quotient * step
        if self is RoundingMode.CEIL:
            return (quotient + 1) * step
        twice = remainder * 2
        if twice > step:
            up = True
        elif twice < step:
            up = False
        elif self is RoundingMode.HALF_EVEN:
            up = quotient % 2 == 1
        else:
            up = self is RoundingMode.HALF_CEIL
        return (quotient + up) * step


__all__ = ["TimeUnit", "RoundingMode"]
