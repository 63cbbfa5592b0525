"""Pytest configuration and fixtures for Horologe tests."""

from __future__ import annotations

import calendar
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so horologe can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from horologe.tz import (  # noqa: E402
    TimezoneResolver,
    Transition,
    ZonePeriod,
    ZoneRules,
    ZoneRuleSet,
)


def _last_sunday(year: int, month: int) -> int:
    last = calendar.monthrange(year, month)[1]
    return max(
        day for day in range(last - 6, last + 1)
        if calendar.weekday(year, month, day) == calendar.SUNDAY
    )


def _nth_sunday(year: int, month: int, n: int) -> int:
    sundays = [
        day for day in range(1, 29)
        if calendar.weekday(year, month, day) == calendar.SUNDAY
    ]
    return sundays[n - 1]


def _utc(year: int, month: int, day: int, hour: int) -> int:
    return calendar.timegm((year, month, day, hour, 0, 0))


def paris_rules() -> ZoneRules:
    """Central European time: last Sunday of March and October at 01:00 UTC."""
    transitions = []
    for year in range(1996, 2038):
        transitions.append(
            Transition(_utc(year, 3, _last_sunday(year, 3), 1), 7200, "CEST", True)
        )
        transitions.append(
            Transition(_utc(year, 10, _last_sunday(year, 10), 1), 3600, "CET", False)
        )
    return ZoneRules("Europe/Paris", ZonePeriod(3600, "CET"), transitions)


def new_york_rules() -> ZoneRules:
    """US Eastern time since 2007: 2nd Sunday of March, 1st Sunday of November."""
    transitions = []
    for year in range(2007, 2038):
        transitions.append(
            Transition(_utc(year, 3, _nth_sunday(year, 3, 2), 7), -14400, "EDT", True)
        )
        transitions.append(
            Transition(_utc(year, 11, _nth_sunday(year, 11, 1), 6), -18000, "EST", False)
        )
    return ZoneRules("America/New_York", ZonePeriod(-18000, "EST"), transitions)


def apia_rules() -> ZoneRules:
    """Samoa skipped 2011-12-30 when it moved across the date line."""
    return ZoneRules(
        "Pacific/Apia",
        ZonePeriod(-36000, "-10"),
        (Transition(_utc(2011, 12, 30, 10), 50400, "+14"),),
    )


@pytest.fixture
def rule_set() -> ZoneRuleSet:
    """Rule set with Paris, New York, Apia and UTC."""
    return ZoneRuleSet(
        [
            paris_rules(),
            new_york_rules(),
            apia_rules(),
            ZoneRules.fixed("UTC", 0, "UTC"),
        ]
    )


@pytest.fixture
def resolver(rule_set: ZoneRuleSet) -> TimezoneResolver:
    """A fresh resolver over the shared test rule set."""
    return TimezoneResolver(rule_set)
