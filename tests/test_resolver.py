"""Tests for zone rules and the timezone resolver."""

from __future__ import annotations

import logging
import threading

import pytest

from horologe import Disambiguate, GapPolicy, Instant, LocalDateTime
from horologe.errors import (
    AmbiguousTimeError,
    SkippedTimeError,
    UnknownZoneError,
    ValidationError,
)
from horologe.tz import (
    LocalKind,
    TimezoneResolver,
    Transition,
    ZonePeriod,
    ZoneRules,
    ZoneRuleSet,
)


class TestZoneRules:
    """Tests for the rule table types."""

    def test_period_offset_validated(self) -> None:
        """Offsets of a day or more are rejected."""
        with pytest.raises(ValidationError):
            ZonePeriod(86400)
        with pytest.raises(ValidationError):
            Transition(0, -86400)

    def test_transitions_coerced_to_tuple(self) -> None:
        """Any iterable of transitions is stored as a tuple."""
        rules = ZoneRules("Etc/Test", ZonePeriod(0), [Transition(10, 3600)])
        assert rules.transitions == (Transition(10, 3600),)

    def test_rule_set_mapping(self, rule_set: ZoneRuleSet) -> None:
        """A rule set is a read-only mapping of zone id to rules."""
        assert "Europe/Paris" in rule_set
        assert len(rule_set) == 4
        assert rule_set["UTC"].initial.abbreviation == "UTC"
        with pytest.raises(UnknownZoneError) as excinfo:
            rule_set.get_rules("Mars/Olympus")
        assert excinfo.value.zone_id == "Mars/Olympus"

    def test_duplicate_zone_rejected(self) -> None:
        """A zone may appear only once."""
        with pytest.raises(ValidationError, match="duplicate"):
            ZoneRuleSet([ZoneRules.fixed("UTC", 0), ZoneRules.fixed("UTC", 0)])

    def test_from_mapping(self) -> None:
        """Plain data builds the same rules."""
        rs = ZoneRuleSet.from_mapping(
            {
                "Etc/Test": {
                    "initial": {"offset": 0, "abbreviation": "A"},
                    "transitions": [{"at": 100, "offset": 3600, "abbreviation": "B", "is_dst": True}],
                }
            }
        )
        assert rs["Etc/Test"].transitions[0].period == ZonePeriod(3600, "B", True)

    def test_from_mapping_malformed(self) -> None:
        """Missing fields are reported as validation errors."""
        with pytest.raises(ValidationError):
            ZoneRuleSet.from_mapping({"Etc/Test": {"transitions": []}})

    @pytest.mark.parametrize(
        "transition",
        [
            {"at": "100", "offset": 3600},
            {"at": 100.0, "offset": 3600},
            {"at": True, "offset": 3600},
            {"at": 100, "offset": 3600, "abbreviation": 1},
        ],
    )
    def test_from_mapping_bad_transition(self, transition: dict) -> None:
        """Transitions need an integer time and a string abbreviation."""
        with pytest.raises(ValidationError, match="Etc/Test"):
            ZoneRuleSet.from_mapping(
                {"Etc/Test": {"initial": {"offset": 0}, "transitions": [transition]}}
            )

    def test_period_abbreviation_must_be_text(self) -> None:
        """Abbreviations are strings."""
        with pytest.raises(ValidationError):
            ZonePeriod(0, None)  # type: ignore[arg-type]


class TestOffsetAt:
    """Tests for offsets at instants."""

    def test_paris_winter_and_summer(self, resolver: TimezoneResolver) -> None:
        """Paris is CET in January and CEST in July."""
        winter = resolver.offset_at("Europe/Paris", Instant.from_utc(2024, 1, 15))
        summer = resolver.offset_at("Europe/Paris", Instant.from_utc(2024, 7, 15))
        assert winter == ZonePeriod(3600, "CET", False)
        assert summer == ZonePeriod(7200, "CEST", True)

    def test_transition_instant_belongs_to_new_period(self, resolver: TimezoneResolver) -> None:
        """The transition second itself has the new offset."""
        at = Instant.from_utc(2023, 3, 26, 1)
        assert resolver.offset_at("Europe/Paris", at).offset == 7200
        assert resolver.offset_at("Europe/Paris", at.add_nanoseconds(-1)).offset == 3600

    def test_before_first_transition(self, resolver: TimezoneResolver) -> None:
        """The initial period applies before any transition."""
        assert resolver.offset_at("America/New_York", Instant.from_utc(1990, 7, 1)).offset == -18000

    def test_unknown_zone(self, resolver: TimezoneResolver) -> None:
        """Unknown identifiers raise UnknownZoneError."""
        assert not resolver.has_zone("Mars/Olympus")
        with pytest.raises(UnknownZoneError):
            resolver.offset_at("Mars/Olympus", Instant(0))


class TestResolveLocal:
    """Tests for classifying wall-clock times."""

    def test_unique(self, resolver: TimezoneResolver) -> None:
        """An ordinary time has one offset."""
        res = resolver.resolve_local("Europe/Paris", LocalDateTime(2023, 7, 1, 12))
        assert res.kind is LocalKind.UNIQUE
        assert res.is_unique
        assert res.earlier.offset == 7200
        assert res.transition is None

    def test_paris_fold(self, resolver: TimezoneResolver) -> None:
        """02:30 on the last Sunday of October happens twice in Paris."""
        res = resolver.resolve_local("Europe/Paris", LocalDateTime(2023, 10, 29, 2, 30))
        assert res.kind is LocalKind.FOLD
        assert res.earlier.offset == 7200
        assert res.later.offset == 3600
        assert res.transition == Instant.from_utc(2023, 10, 29, 1).to_unix_seconds()

    def test_paris_gap(self, resolver: TimezoneResolver) -> None:
        """02:30 on the last Sunday of March never happens in Paris."""
        res = resolver.resolve_local("Europe/Paris", LocalDateTime(2023, 3, 26, 2, 30))
        assert res.kind is LocalKind.GAP
        assert res.earlier.offset == 3600
        assert res.later.offset == 7200

    def test_gap_edges(self, resolver: TimezoneResolver) -> None:
        """The gap is [02:00, 03:00): both neighbours are unique."""
        paris = "Europe/Paris"
        assert resolver.resolve_local(paris, LocalDateTime(2023, 3, 26, 2)).kind is LocalKind.GAP
        assert resolver.resolve_local(
            paris, LocalDateTime(2023, 3, 26, 1, 59, 59, nanosecond=999_999_999)
        ).is_unique
        assert resolver.resolve_local(paris, LocalDateTime(2023, 3, 26, 3)).is_unique

    def test_fold_edges(self, resolver: TimezoneResolver) -> None:
        """The fold is [02:00, 03:00)."""
        paris = "Europe/Paris"
        assert resolver.resolve_local(paris, LocalDateTime(2023, 10, 29, 2)).kind is LocalKind.FOLD
        assert resolver.resolve_local(paris, LocalDateTime(2023, 10, 29, 3)).is_unique
        assert resolver.resolve_local(paris, LocalDateTime(2023, 10, 29, 1, 59)).is_unique

    def test_whole_day_gap(self, resolver: TimezoneResolver) -> None:
        """Apia skipped all of 2011-12-30."""
        apia = "Pacific/Apia"
        assert resolver.resolve_local(apia, LocalDateTime(2011, 12, 30, 0)).kind is LocalKind.GAP
        assert resolver.resolve_local(apia, LocalDateTime(2011, 12, 30, 23, 59)).kind is LocalKind.GAP
        assert resolver.resolve_local(apia, LocalDateTime(2011, 12, 29, 23, 59)).is_unique
        assert resolver.resolve_local(apia, LocalDateTime(2011, 12, 31, 0)).is_unique

    def test_fixed_zone(self, resolver: TimezoneResolver) -> None:
        """A zone without transitions is always unique."""
        assert resolver.resolve_local("UTC", LocalDateTime(2024, 1, 1)).is_unique


class TestLocalToInstant:
    """Tests for policy-driven resolution."""

    def test_fold_reject_is_default(self, resolver: TimezoneResolver) -> None:
        """Ambiguous times are rejected unless a policy says otherwise."""
        local = LocalDateTime(2023, 11, 5, 1, 30)
        with pytest.raises(AmbiguousTimeError) as excinfo:
            resolver.local_to_instant("America/New_York", local)
        assert excinfo.value.zone_id == "America/New_York"
        assert excinfo.value.local == local

    def test_fold_policies(self, resolver: TimezoneResolver) -> None:
        """EARLIER/COMPATIBLE pick EDT, LATER picks EST."""
        local = LocalDateTime(2023, 11, 5, 1, 30)
        ny = "America/New_York"
        earlier = resolver.local_to_instant(ny, local, fold=Disambiguate.EARLIER)
        later = resolver.local_to_instant(ny, local, fold=Disambiguate.LATER)
        assert earlier == Instant.from_utc(2023, 11, 5, 5, 30)
        assert later == Instant.from_utc(2023, 11, 5, 6, 30)
        assert resolver.local_to_instant(ny, local, fold="compatible") == earlier

    def test_gap_reject_is_default(self, resolver: TimezoneResolver) -> None:
        """Skipped times are rejected unless a policy says otherwise."""
        with pytest.raises(SkippedTimeError):
            resolver.local_to_instant("America/New_York", LocalDateTime(2023, 3, 12, 2, 30))

    def test_gap_shift_forward(self, resolver: TimezoneResolver) -> None:
        """Shift-forward moves by the length of the gap."""
        instant = resolver.local_to_instant(
            "Europe/Paris", LocalDateTime(2023, 3, 26, 2, 30), gap=GapPolicy.SHIFT_FORWARD
        )
        assert instant == Instant.from_utc(2023, 3, 26, 1, 30)

    def test_policies_ignored_for_unique(self, resolver: TimezoneResolver) -> None:
        """Policies only matter for folds and gaps."""
        local = LocalDateTime(2023, 7, 1, 12)
        a = resolver.local_to_instant("Europe/Paris", local, fold="later", gap="shift-forward")
        assert a == Instant.from_utc(2023, 7, 1, 10)

    def test_invalid_policy_string(self, resolver: TimezoneResolver) -> None:
        """Unknown policy names are rejected."""
        with pytest.raises(ValueError):
            resolver.local_to_instant("UTC", LocalDateTime(2024, 1, 1), fold="latest")


class TestIndexCache:
    """Tests for the lazily built per-zone index."""

    def test_index_built_once(self, resolver: TimezoneResolver, caplog: pytest.LogCaptureFixture) -> None:
        """The index is published once and reused."""
        with caplog.at_level(logging.DEBUG, logger="horologe.tz.resolver"):
            resolver.offset_at("Europe/Paris", Instant(0))
            resolver.offset_at("Europe/Paris", Instant(1))
        published = [r for r in caplog.records if "Published transition index" in r.getMessage()]
        assert len(published) == 1
        assert "Europe/Paris" in published[0].getMessage()

    def test_unsorted_transitions_fall_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """Out-of-order transitions are reported and then scanned directly."""
        rules = ZoneRules(
            "Etc/Unsorted",
            ZonePeriod(0, "A"),
            (Transition(2000, 7200, "C"), Transition(1000, 3600, "B")),
        )
        resolver = TimezoneResolver(ZoneRuleSet([rules]))
        with caplog.at_level(logging.WARNING, logger="horologe.tz.resolver"):
            assert resolver.offset_at("Etc/Unsorted", Instant.from_unix_seconds(500)).abbreviation == "A"
            assert resolver.offset_at("Etc/Unsorted", Instant.from_unix_seconds(1500)).abbreviation == "B"
            assert resolver.offset_at("Etc/Unsorted", Instant.from_unix_seconds(2500)).abbreviation == "C"
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Etc/Unsorted" in warnings[0].getMessage()

    def test_unsorted_transitions_resolve_local(self) -> None:
        """The direct lookup also classifies folds and gaps."""
        rules = ZoneRules(
            "Etc/Unsorted",
            ZonePeriod(0),
            (Transition(7 * 86400, 0), Transition(86400, 3600)),
        )
        resolver = TimezoneResolver(ZoneRuleSet([rules]))
        # 1970-01-02T00:30 local is skipped when clocks jump from 00:00 to 01:00
        gap = resolver.resolve_local("Etc/Unsorted", LocalDateTime(1970, 1, 2, 0, 30))
        assert gap.kind is LocalKind.GAP
        # 1970-01-08T00:30 local happens at +01:00 and again at +00:00
        fold = resolver.resolve_local("Etc/Unsorted", LocalDateTime(1970, 1, 8, 0, 30))
        assert fold.kind is LocalKind.FOLD
        assert (fold.earlier.offset, fold.later.offset) == (3600, 0)

    def test_concurrent_first_use(self, rule_set: ZoneRuleSet) -> None:
        """Threads racing on a cold zone all see the same answer."""
        resolver = TimezoneResolver(rule_set)
        instant = Instant.from_utc(2024, 7, 1)
        results: list[int] = []
        lock = threading.Lock()
        barrier = threading.Barrier(8)

        def work() -> None:
            barrier.wait()
            offset = resolver.offset_at("Europe/Paris", instant).offset
            with lock:
                results.append(offset)

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results == [7200] * 8
