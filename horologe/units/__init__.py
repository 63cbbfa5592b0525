"""Temporal units and enumerations.

This module provides:
    - Weekday: ISO day-of-week enum
    - UtcOffset: fixed offset from UTC
    - Disambiguate: fold resolution policy
    - GapPolicy: gap resolution policy
    - TimeUnit: clock units for rounding
    - RoundingMode: rounding direction
"""

from __future__ import annotations

from horologe.units.disambiguate import Disambiguate, GapPolicy
from horologe.units.offset import UtcOffset
from horologe.units.rounding import RoundingMode, TimeUnit
from horologe.units.weekday import Weekday

__all__: list[str] = [
    "Disambiguate",
    "GapPolicy",
    "RoundingMode",
    "TimeUnit",
    "UtcOffset",
    "Weekday",
]
