from __future__ import annotations

from enum import Enum


class AttendanceMark(str, Enum):
    """Outcome of a single mark event, as stored in a subject history."""

    PRESENT = "present"
    ABSENT = "absent"


class Weekday(str, Enum):
    """Timetable day, Monday first (index matches ``date.weekday()``)."""

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        return list(cls)[index % 7]

    @property
    def position(self) -> int:
        return list(Weekday).index(self)


class SafetyStatus(str, Enum):
    SAFE = "safe"
    UNSAFE = "unsafe"
    NOT_APPLICABLE = "na"


class TrendGranularity(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class HeatmapTier(str, Enum):
    """Colour band of a calendar day, from the daily attendance percentage."""

    NO_DATA = "no-data"
    LOWEST = "lowest"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    HIGHEST = "highest"
