from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .calendar import DayOfWeek, Month, Time


class DayKind(Enum):
    DATE = "date"                  # 15
    LAST = "last"                  # lastSun
    ON_OR_AFTER = "on_or_after"    # Sun>=8
    ON_OR_BEFORE = "on_or_before"  # Sun<=25


@dataclass(frozen=True, slots=True)
class RuleDay:
    """The ON field of a rule: which day of the month a transition falls on."""

    kind: DayKind
    day: int | None = None
    weekday: DayOfWeek | None = None

    def __post_init__(self) -> None:
        if self.kind is DayKind.LAST:
            if self.weekday is None:
                raise ValueError("A 'last' rule day needs a weekday.")
            if self.day is not None:
                raise ValueError("A 'last' rule day takes no day of month.")
            return
        if self.day is None or not 1 <= self.day <= 31:
            raise ValueError(f"Day of month must be within 1..31, got {self.day!r}.")
        if self.kind is DayKind.DATE and self.weekday is not None:
            raise ValueError("A 'date' rule day takes no weekday.")
        if self.kind is not DayKind.DATE and self.weekday is None:
            raise ValueError(f"A '{self.kind.value}' rule day needs a weekday.")


@dataclass(frozen=True, slots=True)
class RuleRec:
    """One Rule line as it applies in the final year of a zone."""

    month: Month
    day: RuleDay
    time: Time
    save: int
    line: str


@dataclass(frozen=True, slots=True)
class ZoneRec:
    """Final Zone (or continuation) line of a zone."""

    gmt_offset: int
    line: str


@dataclass(slots=True)
class Timezone:
    """Most recent state of one canonical zone, as handed to a backend."""

    name: str
    last_zone_rec: ZoneRec
    last_rules: tuple[RuleRec, RuleRec] | None = None

    @property
    def raw_offset(self) -> int:
        """Last known standard offset; zones whose offset changes later are filed under it."""
        return self.last_zone_rec.gmt_offset
