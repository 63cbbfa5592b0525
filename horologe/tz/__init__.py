"""Timezone rules and resolution.

This module provides:
    - ZonePeriod, Transition, ZoneRules, ZoneRuleSet: the rule table
    - TimezoneResolver: offsets for instants and wall-clock times
    - LocalKind, LocalResolution: the classification of a wall-clock time
"""

from __future__ import annotations

from horologe.tz.resolver import LocalKind, LocalResolution, TimezoneResolver
from horologe.tz.rules import Transition, ZonePeriod, ZoneRules, ZoneRuleSet

__all__: list[str] = [
    "LocalKind",
    "LocalResolution",
    "TimezoneResolver",
    "Transition",
    "ZonePeriod",
    "ZoneRules",
    "ZoneRuleSet",
]
