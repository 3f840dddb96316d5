"""Calendar vocabulary shared by rule records: months, weekdays and time types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def lookup(cls, value: int | str) -> "Month":
        """Resolve a month number (1-12) or an English name/abbreviation ("Mar", "march")."""
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        return cls[_match_name(str(value), cls.__members__, "month")]


class DayOfWeek(IntEnum):
    """Weekdays numbered the way java.util.Calendar numbers them."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def lookup(cls, value: int | str) -> "DayOfWeek":
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        return cls[_match_name(str(value), cls.__members__, "weekday")]


class TimeType(Enum):
    """Reference clock of a transition time-of-day."""

    WALL = "wall"
    STANDARD = "standard"
    UTC = "utc"

    @classmethod
    def lookup(cls, value: str) -> "TimeType":
        key = value.strip().lower()
        if key in ("", "w", "wall"):
            return cls.WALL
        if key in ("s", "std", "standard"):
            return cls.STANDARD
        if key in ("u", "g", "z", "utc", "gmt"):
            return cls.UTC
        raise ValueError(f"Unknown time type '{value}'")


@dataclass(frozen=True, slots=True)
class Time:
    """Time of day in seconds since local midnight, interpreted against `type`."""

    seconds: int
    type: TimeType = TimeType.WALL


def _match_name(value: str, members: dict, what: str) -> str:
    # Abbreviations follow the zic convention: any unambiguous prefix of at
    # least three letters.
    key = value.strip().upper()
    if len(key) >= 3:
        matches = [name for name in members if name.startswith(key)]
        if len(matches) == 1:
            return matches[0]
    raise ValueError(f"Unknown {what} '{value}'")
