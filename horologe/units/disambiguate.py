"""Disambiguation policies for local times that are not unique in a zone.

This module provides the two caller-selected policies used whenever local
fields are converted into a zone:

    - Disambiguate: what to do when the local time occurs twice (a fold,
      clocks moved backward).
    - GapPolicy: what to do when the local time never occurs (a gap,
      clocks moved forward).

Both default to REJECT everywhere in the library, so an ambiguous or
skipped time always fails unless the caller opts into a resolution.
"""

from __future__ import annotations

from enum import Enum


class Disambiguate(Enum):
    """Resolution policy for ambiguous (folded) local times.

    Values can also be given as their strings, e.g. ``"earlier"``.

    Examples:
        >>> Disambiguate("later")
        <Disambiguate.LATER: 'later'>
        >>> Disambiguate.COMPATIBLE.prefers_earlier
        True
    """

    EARLIER = "earlier"  # first occurrence (the offset before the transition)
    LATER = "later"  # second occurrence (the offset after the transition)
    COMPATIBLE = "compatible"  # same as EARLIER
    REJECT = "reject"  # raise AmbiguousTimeError

    @property
    def prefers_earlier(self) -> bool:
        """Return True if this policy picks the earlier of two instants."""
        return self in (Disambiguate.EARLIER, Disambiguate.COMPATIBLE)


class GapPolicy(Enum):
    """Resolution policy for skipped local times.

    Examples:
        >>> GapPolicy("shift-forward")
        <GapPolicy.SHIFT_FORWARD: 'shift-forward'>
    """

    SHIFT_FORWARD = "shift-forward"  # move forward by the length of the gap
    REJECT = "reject"  # raise SkippedTimeError


__all__ = ["Disambiguate", "GapPolicy"]
