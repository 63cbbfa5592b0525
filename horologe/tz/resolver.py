"""Timezone resolver: instants and wall-clock times to zone offsets.

The resolver answers two questions against a ZoneRuleSet:

    - Which period (offset, abbreviation) is in effect at an instant?
      Always exactly one.
    - Which instant(s) does a wall-clock time denote in a zone? One
      (unique), two (a fold, when clocks went back) or none (a gap, when
      clocks went forward). Callers choose what happens in the last two
      cases through Disambiguate and GapPolicy; both default to REJECT.

Per-zone transition indices are built lazily on first use and published
under a lock, so concurrent readers never see a partial index. A zone whose
table cannot be indexed (transitions out of order) is reported once and
then answered by scanning its transitions directly.
"""

from __future__ import annotations

import logging
import threading
from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from horologe._internal.constants import NANOS_PER_DAY, NANOS_PER_SECOND
from horologe.core.instant import Instant
from horologe.errors import AmbiguousTimeError, SkippedTimeError, TimezoneError
from horologe.tz.rules import ZonePeriod, ZoneRules, ZoneRuleSet
from horologe.units.disambiguate import Disambiguate, GapPolicy

if TYPE_CHECKING:
    from horologe.core.local_datetime import LocalDateTime

logger = logging.getLogger(__name__)


class LocalKind(Enum):
    """How a wall-clock time maps onto a zone's timeline."""

    UNIQUE = "unique"
    FOLD = "fold"
    GAP = "gap"


@dataclass(frozen=True, slots=True)
class LocalResolution:
    """The classification of a wall-clock time in a zone.

    Attributes:
        kind: UNIQUE, FOLD or GAP.
        earlier: For UNIQUE, the only period. For FOLD, the period of the
            earlier instant (before the transition). For GAP, the period
            before the gap.
        later: For UNIQUE, the same as ``earlier``. For FOLD, the period of
            the later instant. For GAP, the period after the gap.
        transition: The transition instant in Unix seconds for FOLD and
            GAP, None for UNIQUE.
    """

    kind: LocalKind
    earlier: ZonePeriod
    later: ZonePeriod
    transition: int | None = None

    @property
    def is_unique(self) -> bool:
        return self.kind is LocalKind.UNIQUE


class _ZoneIndex:
    """Sorted transition times with the period in effect after each."""

    __slots__ = ("times", "periods")

    def __init__(self, times: tuple[int, ...], periods: tuple[ZonePeriod, ...]) -> None:
        self.times = times
        # periods[0] applies before times[0]; periods[i + 1] from times[i]
        self.periods = periods

    @classmethod
    def build(cls, rules: ZoneRules) -> _ZoneIndex:
        """Index a zone's transitions.

        Raises:
            ValueError: If the transitions are not strictly ascending.
        """
        times = tuple(t.at for t in rules.transitions)
        for prev, cur in zip(times, times[1:]):
            if cur <= prev:
                raise ValueError(f"transition at {cur} does not follow {prev}")
        periods = (rules.initial,) + tuple(t.period for t in rules.transitions)
        return cls(times, periods)

    def period_at(self, seconds: int) -> ZonePeriod:
        return self.periods[bisect_right(self.times, seconds)]

    def transitions_between(self, lo: int, hi: int) -> list[tuple[int, ZonePeriod, ZonePeriod]]:
        """Return (at, before, after) for transitions with lo < at <= hi."""
        start = bisect_right(self.times, lo)
        stop = bisect_right(self.times, hi)
        return [
            (self.times[i], self.periods[i], self.periods[i + 1])
            for i in range(start, stop)
        ]


class _DirectLookup:
    """Uncached lookups that scan a zone's transitions in any order."""

    __slots__ = ("rules",)

    def __init__(self, rules: ZoneRules) -> None:
        self.rules = rules

    def period_at(self, seconds: int) -> ZonePeriod:
        best = None
        for t in self.rules.transitions:
            if t.at <= seconds and (best is None or t.at >= best.at):
                best = t
        return self.rules.initial if best is None else best.period

    def transitions_between(self, lo: int, hi: int) -> list[tuple[int, ZonePeriod, ZonePeriod]]:
        found = [t for t in self.rules.transitions if lo < t.at <= hi]
        found.sort(key=lambda t: t.at)
        return [(t.at, self.period_at(t.at - 1), t.period) for t in found]


_UNINDEXABLE = object()


class TimezoneResolver:
    """Resolves offsets for instants and wall-clock times in a ZoneRuleSet.

    The resolver holds a reference to the rule set and never modifies it.
    It is safe to share between threads.

    Examples:
        >>> from horologe.tz.rules import ZoneRules, ZoneRuleSet
        >>> resolver = TimezoneResolver(ZoneRuleSet([ZoneRules.fixed("UTC", 0, "UTC")]))
        >>> resolver.has_zone("UTC")
        True
    """

    def __init__(self, rule_set: ZoneRuleSet) -> None:
        self._rule_set = rule_set
        self._indexes: dict[str, object] = {}
        self._lock = threading.Lock()

    @property
    def rule_set(self) -> ZoneRuleSet:
        """Return the rule set this resolver reads from."""
        return self._rule_set

    def has_zone(self, zone_id: str) -> bool:
        """Return True if the zone is in the rule set."""
        return zone_id in self._rule_set

    def _lookup(self, zone_id: str) -> _ZoneIndex | _DirectLookup:
        """Return the lookup structure for a zone, building its index once.

        Raises:
            UnknownZoneError: If the zone is not in the rule set.
        """
        rules = self._rule_set.get_rules(zone_id)
        index = self._indexes.get(zone_id)
        if index is None:
            with self._lock:
                index = self._indexes.get(zone_id)
                if index is None:
                    index = self._build_index(rules)
                    self._indexes[zone_id] = index
        if index is _UNINDEXABLE:
            return _DirectLookup(rules)
        return index  # type: ignore[return-value]

    def _build_index(self, rules: ZoneRules) -> object:
        try:
            index = _ZoneIndex.build(rules)
        except ValueError as exc:
            logger.warning(
                "Cannot index transitions for zone %s, using direct lookup: %s",
                rules.zone_id,
                exc,
            )
            return _UNINDEXABLE
        logger.debug(
            "Published transition index for zone %s (%d transitions)",
            rules.zone_id,
            len(index.times),
        )
        return index

    def offset_at(self, zone_id: str, instant: Instant) -> ZonePeriod:
        """Return the period in effect in a zone at an instant.

        Raises:
            UnknownZoneError: If the zone is not in the rule set.
        """
        return self._lookup(zone_id).period_at(instant.to_unix_seconds())

    def resolve_local(self, zone_id: str, local: LocalDateTime) -> LocalResolution:
        """Classify a wall-clock time in a zone as unique, a fold or a gap.

        Candidate offsets are taken from every period that overlaps the
        wall-clock time by up to a day either side; a candidate counts if
        the instant it produces really has that offset.

        Raises:
            UnknownZoneError: If the zone is not in the rule set.
        """
        lookup = self._lookup(zone_id)
        wall = local._epoch_nanos()
        lo = (wall - NANOS_PER_DAY) // NANOS_PER_SECOND
        hi = (wall + NANOS_PER_DAY) // NANOS_PER_SECOND
        nearby = lookup.transitions_between(lo, hi)

        offsets = {lookup.period_at(lo).offset}
        offsets.update(after.offset for _, _, after in nearby)
        matches = []
        for offset in offsets:
            instant = wall - offset * NANOS_PER_SECOND
            period = lookup.period_at(instant // NANOS_PER_SECOND)
            if period.offset == offset:
                matches.append((instant, period))
        matches.sort(key=lambda m: m[0])

        if len(matches) == 1:
            period = matches[0][1]
            return LocalResolution(LocalKind.UNIQUE, period, period)
        if matches:
            (first, earlier), (last, later) = matches[0], matches[-1]
            at = next(
                at
                for at, _, _ in nearby
                if first < at * NANOS_PER_SECOND <= last
            )
            return LocalResolution(LocalKind.FOLD, earlier, later, at)
        for at, before, after in nearby:
            start = at * NANOS_PER_SECOND
            if start + before.offset * NANOS_PER_SECOND <= wall < start + after.offset * NANOS_PER_SECOND:
                return LocalResolution(LocalKind.GAP, before, after, at)
        raise TimezoneError(f"rules for zone {zone_id!r} are inconsistent at {local}")

    def local_to_instant(
        self,
        zone_id: str,
        local: LocalDateTime,
        *,
        fold: Disambiguate | str = Disambiguate.REJECT,
        gap: GapPolicy | str = GapPolicy.REJECT,
    ) -> Instant:
        """Convert a wall-clock time in a zone to an instant.

        Args:
            zone_id: The zone identifier.
            local: The wall-clock time.
            fold: Which occurrence to pick when the time occurs twice.
            gap: What to do when the time never occurs. SHIFT_FORWARD reads
                the wall-clock time with the offset from before the gap,
                which lands the same distance past the transition as the
                time was past the gap's start.

        Raises:
            UnknownZoneError: If the zone is not in the rule set.
            AmbiguousTimeError: On a fold with ``fold=REJECT``.
            SkippedTimeError: On a gap with ``gap=REJECT``.
        """
        fold = Disambiguate(fold)
        gap = GapPolicy(gap)
        resolution = self.resolve_local(zone_id, local)
        wall = local._epoch_nanos()
        if resolution.kind is LocalKind.FOLD:
            if fold is Disambiguate.REJECT:
                raise AmbiguousTimeError(zone_id, local)
            period = resolution.earlier if fold.prefers_earlier else resolution.later
        elif resolution.kind is LocalKind.GAP:
            if gap is GapPolicy.REJECT:
                raise SkippedTimeError(zone_id, local)
            period = resolution.earlier
        else:
            period = resolution.earlier
        return Instant._from_nanos(wall - period.offset * NANOS_PER_SECOND)


__all__ = ["LocalKind", "LocalResolution", "TimezoneResolver"]
