"""Intermediate representation of loaded zone records and the offset index."""

from .calendar import DayOfWeek, Month, Time, TimeType
from .mappings import Mappings, build_mappings
from .records import DayKind, RuleDay, RuleRec, Timezone, ZoneRec

__all__ = [
    "DayKind",
    "DayOfWeek",
    "Mappings",
    "Month",
    "RuleDay",
    "RuleRec",
    "Time",
    "TimeType",
    "Timezone",
    "ZoneRec",
    "build_mappings",
]
