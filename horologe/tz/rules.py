"""Zone rule tables consumed by the timezone resolver.

This module provides the read-only data the resolver works from:

    - ZonePeriod: an offset, abbreviation and DST flag in effect for a span
    - Transition: the instant (in Unix seconds) at which a new period begins
    - ZoneRules: one zone's initial period plus its ordered transitions
    - ZoneRuleSet: the mapping of zone identifiers to their rules

Horologe does not fetch or parse the timezone database. Callers build a
ZoneRuleSet from data they already loaded and pass it to a
TimezoneResolver explicitly.

Examples:
    >>> paris = ZoneRules(
    ...     "Europe/Paris",
    ...     ZonePeriod(3600, "CET"),
    ...     (Transition(1679792400, 7200, "CEST", True),),
    ... )
    >>> rules = ZoneRuleSet([paris])
    >>> "Europe/Paris" in rules
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from horologe._internal.constants import MAX_UTC_OFFSET_SECONDS
from horologe.errors import UnknownZoneError, ValidationError


def _check_offset(seconds: int) -> None:
    if not isinstance(seconds, int) or isinstance(seconds, bool):
        raise ValidationError(f"zone offset must be an integer, got {seconds!r}")
    if abs(seconds) >= MAX_UTC_OFFSET_SECONDS:
        raise ValidationError(f"zone offset out of range: {seconds} seconds")


def _check_at(seconds: int) -> None:
    if not isinstance(seconds, int) or isinstance(seconds, bool):
        raise ValidationError(f"transition time must be an integer, got {seconds!r}")


def _check_abbreviation(abbreviation: str) -> None:
    if not isinstance(abbreviation, str):
        raise ValidationError(f"zone abbreviation must be a string, got {abbreviation!r}")


@dataclass(frozen=True, slots=True)
class ZonePeriod:
    """The UTC offset and naming in effect for a span of a zone's history.

    Attributes:
        offset: Seconds east of UTC.
        abbreviation: The zone abbreviation, e.g. "CEST".
        is_dst: True if the period is daylight-saving time.
    """

    offset: int
    abbreviation: str = ""
    is_dst: bool = False

    def __post_init__(self) -> None:
        _check_offset(self.offset)
        _check_abbreviation(self.abbreviation)


@dataclass(frozen=True, slots=True)
class Transition:
    """A change of offset in a zone.

    Attributes:
        at: The instant of the change, in seconds since the Unix epoch.
        offset: Seconds east of UTC from ``at`` onward.
        abbreviation: The abbreviation from ``at`` onward.
        is_dst: True if the new period is daylight-saving time.
    """

    at: int
    offset: int
    abbreviation: str = ""
    is_dst: bool = False

    def __post_init__(self) -> None:
        _check_at(self.at)
        _check_offset(self.offset)
        _check_abbreviation(self.abbreviation)

    @property
    def period(self) -> ZonePeriod:
        """Return the period that begins at this transition."""
        return ZonePeriod(self.offset, self.abbreviation, self.is_dst)


@dataclass(frozen=True, slots=True)
class ZoneRules:
    """A single zone's offset history.

    ``initial`` applies before the first transition; each transition's
    period applies until the next one, and the last extends indefinitely.
    Transitions are expected in ascending order of ``at``; the resolver
    detects tables that are not and falls back to a direct lookup.

    Attributes:
        zone_id: The IANA-style identifier, e.g. "Europe/Paris".
        initial: The period before the first transition.
        transitions: The ordered transitions.
    """

    zone_id: str
    initial: ZonePeriod
    transitions: tuple[Transition, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.transitions, tuple):
            object.__setattr__(self, "transitions", tuple(self.transitions))

    @classmethod
    def fixed(cls, zone_id: str, offset: int, abbreviation: str = "") -> ZoneRules:
        """Create rules for a zone that never changes offset.

        Examples:
            >>> ZoneRules.fixed("UTC", 0, "UTC").transitions
            ()
        """
        return cls(zone_id, ZonePeriod(offset, abbreviation))


class ZoneRuleSet(Mapping[str, ZoneRules]):
    """A read-only table of zone identifier to ZoneRules.

    The set is built once and then shared; nothing in Horologe mutates it.
    """

    __slots__ = ("_zones",)

    def __init__(self, rules: Iterable[ZoneRules] = ()) -> None:
        zones: dict[str, ZoneRules] = {}
        for zone in rules:
            if zone.zone_id in zones:
                raise ValidationError(f"duplicate zone {zone.zone_id!r} in rule set")
            zones[zone.zone_id] = zone
        self._zones = zones

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Mapping[str, object]]) -> ZoneRuleSet:
        """Build a rule set from plain data, such as decoded JSON.

        Each value is a mapping with ``initial`` (a mapping of ``offset``,
        ``abbreviation``, ``is_dst``) and ``transitions`` (a list of
        mappings with ``at``, ``offset``, ``abbreviation``, ``is_dst``).

        Raises:
            ValidationError: If an entry is missing a field or malformed.

        Examples:
            >>> rs = ZoneRuleSet.from_mapping({
            ...     "Etc/Plus2": {"initial": {"offset": 7200}, "transitions": []},
            ... })
            >>> rs["Etc/Plus2"].initial.offset
            7200
        """
        zones = []
        for zone_id, entry in mapping.items():
            try:
                initial = ZonePeriod(**entry["initial"])  # type: ignore[arg-type]
                transitions = tuple(
                    Transition(**t)  # type: ignore[arg-type]
                    for t in entry.get("transitions", ())  # type: ignore[union-attr]
                )
            except (KeyError, TypeError, ValidationError) as exc:
                raise ValidationError(f"malformed rules for zone {zone_id!r}: {exc}") from exc
            zones.append(ZoneRules(zone_id, initial, transitions))
        return cls(zones)

    def get_rules(self, zone_id: str) -> ZoneRules:
        """Return the rules for a zone.

        Raises:
            UnknownZoneError: If the zone is not in the set.
        """
        try:
            return self._zones[zone_id]
        except KeyError:
            raise UnknownZoneError(zone_id) from None

    def __getitem__(self, zone_id: str) -> ZoneRules:
        return self._zones[zone_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)

    def __repr__(self) -> str:
        return f"ZoneRuleSet({sorted(self._zones)!r})"


__all__ = ["ZonePeriod", "Transition", "ZoneRules", "ZoneRuleSet"]
