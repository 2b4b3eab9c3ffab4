from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..analytics.model import AttendanceTally
from ..common.datetime_utils import day_key, now_local
from ..core.enums import AttendanceMark, HeatmapTier
from ..subjects.model import Subject
from ..subjects.service import SubjectStore
from .model import CalendarDay

# (lower bound, tier), checked top-down.
HEATMAP_THRESHOLDS = (
    (90.0, HeatmapTier.HIGHEST),
    (75.0, HeatmapTier.HIGH),
    (60.0, HeatmapTier.MEDIUM),
    (40.0, HeatmapTier.LOW),
)


def heatmap_tier(percentage: Optional[float]) -> HeatmapTier:
    if percentage is None:
        return HeatmapTier.NO_DATA
    for lower, tier in HEATMAP_THRESHOLDS:
        if percentage >= lower:
            return tier
    return HeatmapTier.LOWEST


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def daily_attendance(subjects: Sequence[Subject]) -> dict[str, AttendanceTally]:
    daily: dict[str, AttendanceTally] = {}
    for s in subjects:
        for r in s.history:
            key = day_key(r.timestamp)
            daily[key] = daily.get(key, AttendanceTally()).add(r.status == AttendanceMark.PRESENT)
    return daily


def build_month_grid(
    subjects: Sequence[Subject],
    year: int,
    month: int,
    *,
    first_weekday: int = calendar.MONDAY,
) -> list[CalendarDay]:
    """Full weeks covering ``year``/``month``, padded with adjacent-month days.

    ``first_weekday`` uses ``date.weekday()`` numbering (Monday is 0).
    """
    first = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]
    daily = daily_attendance(subjects)

    grid: list[CalendarDay] = []

    lead = (first.weekday() - first_weekday) % 7
    for i in range(lead, 0, -1):
        d = first - timedelta(days=i)
        grid.append(CalendarDay(date=d, day_of_month=d.day, is_current_month=False))

    for day in range(1, days_in_month + 1):
        d = date(year, month, day)
        tally = daily.get(day_key(d))
        grid.append(
            CalendarDay(
                date=d,
                day_of_month=day,
                is_current_month=True,
                attendance=tally if tally and tally.total > 0 else None,
            )
        )

    trail = (7 - len(grid) % 7) % 7
    last = date(year, month, days_in_month)
    for i in range(1, trail + 1):
        d = last + timedelta(days=i)
        grid.append(CalendarDay(date=d, day_of_month=d.day, is_current_month=False))

    return grid


class HeatmapService:
    def __init__(self, store: SubjectStore, *, first_weekday: int = calendar.MONDAY):
        self._store = store
        self._first_weekday = first_weekday

    def month_grid(self, year: int | None = None, month: int | None = None, *, now: datetime | None = None) -> list[CalendarDay]:
        if year is None or month is None:
            now = now or now_local()
            year = now.year if year is None else year
            month = now.month if month is None else month
        return build_month_grid(self._store.subjects, year, month, first_weekday=self._first_weekday)
