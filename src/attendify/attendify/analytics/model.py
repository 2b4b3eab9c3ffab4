from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Weekday


def percentage_of(present: int, total: int) -> float:
    return present / total * 100 if total > 0 else 0.0


@dataclass(frozen=True)
class AttendanceTally:
    present: int = 0
    total: int = 0

    @property
    def percentage(self) -> float:
        return percentage_of(self.present, self.total)

    def add(self, is_present: bool) -> "AttendanceTally":
        return AttendanceTally(present=self.present + (1 if is_present else 0), total=self.total + 1)


@dataclass(frozen=True)
class OverallStats:
    total_present: int
    total_classes: int

    @property
    def percentage(self) -> float:
        return percentage_of(self.total_present, self.total_classes)


@dataclass(frozen=True)
class TodaysStats:
    present: int
    marked: int


@dataclass(frozen=True)
class DayOfWeekStats:
    day: Weekday
    tally: AttendanceTally


@dataclass(frozen=True)
class TimeframeStats:
    this_week: AttendanceTally
    last_week: AttendanceTally
    this_month: AttendanceTally
    last_month: AttendanceTally
