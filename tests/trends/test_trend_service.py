from __future__ import annotations

from datetime import datetime

from src.attendify.attendify.core.enums import AttendanceMark, TrendGranularity
from src.attendify.attendify.subjects.model import AttendanceRecord, Subject
from src.attendify.attendify.trends.factory import TrendStrategyFactory
from src.attendify.attendify.trends.service import TrendService
from src.attendify.attendify.trends.strategies.daily_strategy import DailyStrategy
from src.attendify.attendify.trends.strategies.monthly_strategy import MonthlyStrategy
from src.attendify.attendify.trends.strategies.weekly_strategy import WeeklyStrategy

P = AttendanceMark.PRESENT
A = AttendanceMark.ABSENT


def _subject(*marks) -> Subject:
    history = tuple(AttendanceRecord(status=m, timestamp=ts, attendance_percentage_after=0.0) for ts, m in marks)
    present = sum(1 for r in history if r.status == P)
    return Subject(id="s", name="S", professor="", present=present, total=len(history), history=history, color="#fff")


def test_factory_maps_granularity_to_strategy():
    factory = TrendStrategyFactory()
    assert isinstance(factory.for_granularity(TrendGranularity.DAILY), DailyStrategy)
    assert isinstance(factory.for_granularity("weekly"), WeeklyStrategy)
    assert isinstance(factory.for_granularity("monthly"), MonthlyStrategy)


def test_labels_are_chronological_even_if_history_is_not():
    subject = _subject(
        (datetime(2026, 10, 20, 9, 0), A),
        (datetime(2026, 10, 19, 9, 0), P),
        (datetime(2026, 10, 20, 11, 0), P),
        (datetime(2026, 10, 18, 9, 0), P),
    )

    series = TrendService().trend(subject, TrendGranularity.DAILY)

    assert series.labels == ("2026-10-18", "2026-10-19", "2026-10-20")
    assert series.percentages == (100.0, 100.0, 50.0)


def test_weekly_and_monthly_buckets():
    subject = _subject(
        (datetime(2026, 9, 30, 9, 0), P),
        (datetime(2026, 10, 2, 9, 0), A),
        (datetime(2026, 10, 19, 9, 0), P),
    )
    svc = TrendService()

    weekly = svc.trend(subject, TrendGranularity.WEEKLY)
    assert weekly.labels == ("2026-09-28 to 2026-10-04", "2026-10-19 to 2026-10-25")
    assert weekly.percentages == (50.0, 100.0)

    monthly = svc.trend(subject, TrendGranularity.MONTHLY)
    assert monthly.labels == ("Sep 2026", "Oct 2026")
    assert monthly.percentages == (100.0, 50.0)


def test_empty_history_gives_empty_series():
    assert TrendService().trend(_subject()).is_empty


def test_overall_trend_merges_subjects():
    a = _subject((datetime(2026, 10, 19, 9, 0), P))
    b = _subject((datetime(2026, 10, 19, 11, 0), A), (datetime(2026, 10, 12, 11, 0), P))

    series = TrendService().overall_trend([a, b], TrendGranularity.DAILY)

    assert series.labels == ("2026-10-12", "2026-10-19")
    assert series.percentages == (100.0, 50.0)
