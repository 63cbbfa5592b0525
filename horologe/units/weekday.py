"""Weekday enumeration.

This module provides the Weekday enum returned by Date.day_of_week,
numbered the ISO 8601 way (Monday=1 through Sunday=7).
"""

from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, numbered as in ISO 8601.

    Examples:
        >>> Weekday.MONDAY.value
        1
        >>> Weekday(7)
        <Weekday.SUNDAY: 7>
        >>> Weekday.SATURDAY.is_weekend
        True
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self >= Weekday.SATURDAY

    @property
    def short_name(self) -> str:
        """Return the three-letter English abbreviation (as used by RFC 2822).

        Examples:
            >>> Weekday.WEDNESDAY.short_name
            'Wed'
        """
        return self.name[:3].title()


__all__ = ["Weekday"]
