"""Shared comparison behaviour for values that denote a single instant.

Instant, OffsetDateTime and ZonedDateTime all name one point on the
physical timeline. They compare and hash by that point, so values of
different exact types can be compared with each other; two values that
denote the same instant are equal even when their offsets or zones differ.
Use ``exact_eq`` to also require the same representation.

This module is not part of the public API.
"""

from __future__ import annotations


class ExactTime:
    """Mixin giving instant-based ordering and hashing.

    Subclasses implement ``_instant_nanos`` (nanoseconds since the Unix
    epoch) and ``_representation`` (what ``exact_eq`` compares on top of
    the instant).
    """

    __slots__ = ()

    def _instant_nanos(self) -> int:
        raise NotImplementedError

    def _representation(self) -> tuple[object, ...]:
        return ()

    def exact_eq(self, other: ExactTime) -> bool:
        """Return True if both values have the same type, instant and offset/zone.

        Examples:
            >>> from horologe import OffsetDateTime, UtcOffset
            >>> a = OffsetDateTime(2024, 1, 1, 12, offset=UtcOffset.from_hours(1))
            >>> b = OffsetDateTime(2024, 1, 1, 11, offset=UtcOffset.utc())
            >>> a == b, a.exact_eq(b)
            (True, False)
        """
        return (
            type(self) is type(other)
            and self._instant_nanos() == other._instant_nanos()
            and self._representation() == other._representation()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExactTime):
            return NotImplemented
        return self._instant_nanos() == other._instant_nanos()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ExactTime):
            return NotImplemented
        return self._instant_nanos() < other._instant_nanos()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ExactTime):
            return NotImplemented
        return self._instant_nanos() <= other._instant_nanos()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ExactTime):
            return NotImplemented
        return self._instant_nanos() > other._instant_nanos()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ExactTime):
            return NotImplemented
        return self._instant_nanos() >= other._instant_nanos()

    def __hash__(self) -> int:
        return hash(self._instant_nanos())


__all__ = ["ExactTime"]
