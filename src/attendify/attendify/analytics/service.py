from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterator, Optional, Sequence

from ..common.datetime_utils import (
    day_key,
    month_start,
    now_local,
    previous_month_start,
    start_of_day,
    week_start,
)
from ..core.enums import AttendanceMark, Weekday
from ..subjects.model import AttendanceRecord, Subject
from ..subjects.service import SubjectStore
from .model import AttendanceTally, DayOfWeekStats, OverallStats, TimeframeStats, TodaysStats


def _all_records(subjects: Sequence[Subject]) -> Iterator[AttendanceRecord]:
    for s in subjects:
        yield from s.history


def _is_present(record: AttendanceRecord) -> bool:
    return record.status == AttendanceMark.PRESENT


class AnalyticsService:
    """Derived statistics, recomputed from the store's current snapshot on every call.

    Weeks start on Monday everywhere (day-of-week buckets, "this week" window,
    weekly trend labels and the calendar grid).
    """

    def __init__(self, store: SubjectStore):
        self._store = store

    def overall_stats(self) -> OverallStats:
        subjects = self._store.subjects
        return OverallStats(
            total_present=sum(s.present for s in subjects),
            total_classes=sum(s.total for s in subjects),
        )

    def todays_stats(self, *, now: datetime | None = None) -> TodaysStats:
        # Every subject counts, scheduled today or not.
        today = day_key(now or now_local())
        present = marked = 0
        for r in _all_records(self._store.subjects):
            if day_key(r.timestamp) == today:
                marked += 1
                present += 1 if _is_present(r) else 0
        return TodaysStats(present=present, marked=marked)

    def attendance_by_day_of_week(self) -> list[DayOfWeekStats]:
        buckets = {day: AttendanceTally() for day in Weekday}
        for r in _all_records(self._store.subjects):
            day = Weekday.from_index(r.timestamp.weekday())
            buckets[day] = buckets[day].add(_is_present(r))
        return [DayOfWeekStats(day=day, tally=buckets[day]) for day in Weekday]

    def has_day_of_week_data(self) -> bool:
        return any(d.tally.total > 0 for d in self.attendance_by_day_of_week())

    def attendance_for_timeframes(self, *, now: datetime | None = None) -> TimeframeStats:
        now = now or now_local()
        this_week_start = start_of_day(week_start(now))
        last_week_start = this_week_start - timedelta(days=7)
        this_month_start = start_of_day(month_start(now))
        last_month_start = start_of_day(previous_month_start(now))

        this_week = last_week = this_month = last_month = AttendanceTally()
        for r in _all_records(self._store.subjects):
            ts = r.timestamp
            p = _is_present(r)
            if ts >= this_week_start:
                this_week = this_week.add(p)
            elif ts >= last_week_start:
                last_week = last_week.add(p)
            if ts >= this_month_start:
                this_month = this_month.add(p)
            elif ts >= last_month_start:
                last_month = last_month.add(p)
        return TimeframeStats(
            this_week=this_week,
            last_week=last_week,
            this_month=this_month,
            last_month=last_month,
        )

    def subject_percentages(self) -> list[tuple[Subject, float]]:
        return [(s, s.percentage) for s in self._store.subjects]

    def most_attended_subject(self) -> Optional[Subject]:
        subjects = self._store.subjects
        if not subjects:
            return None
        # max() keeps the first subject on ties.
        return max(subjects, key=lambda s: s.percentage)

    def highest_risk_subject(self) -> Optional[Subject]:
        tracked = [s for s in self._store.subjects if s.total > 0]
        if not tracked:
            return None
        return min(tracked, key=lambda s: s.percentage)
