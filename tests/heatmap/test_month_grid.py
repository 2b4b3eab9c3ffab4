from __future__ import annotations

import calendar
from datetime import date, datetime

import pytest

from src.attendify.attendify.core.enums import AttendanceMark, HeatmapTier
from src.attendify.attendify.heatmap.service import HeatmapService, build_month_grid, heatmap_tier, shift_month
from src.attendify.attendify.storage.kv_store import InMemoryKeyValueStore
from src.attendify.attendify.subjects.kv_subject_repository import KeyValueSubjectRepository
from src.attendify.attendify.subjects.model import AttendanceRecord, Subject
from src.attendify.attendify.subjects.service import SubjectStore


def _subject(sid: str, *marks: tuple[datetime, AttendanceMark]) -> Subject:
    history = tuple(AttendanceRecord(status=m, timestamp=ts, attendance_percentage_after=0.0) for ts, m in marks)
    present = sum(1 for r in history if r.status == AttendanceMark.PRESENT)
    return Subject(id=sid, name=sid, professor="", present=present, total=len(history), history=history, color="#fff")


def test_october_2026_grid_pads_both_ends():
    grid = build_month_grid([], 2026, 10)

    assert len(grid) == 35
    assert grid[0].date == date(2026, 9, 28)
    assert not grid[0].is_current_month
    assert grid[-1].date == date(2026, 11, 1)
    assert not grid[-1].is_current_month


def test_month_starting_on_monday_has_no_lead_days():
    grid = build_month_grid([], 2021, 2)

    assert len(grid) == 28
    assert all(d.is_current_month for d in grid)


@pytest.mark.parametrize("month", range(1, 13))
def test_grid_is_whole_weeks_with_every_day_of_month(month):
    grid = build_month_grid([], 2026, month)
    current = [d for d in grid if d.is_current_month]

    assert len(grid) % 7 == 0
    assert [d.day_of_month for d in current] == list(range(1, calendar.monthrange(2026, month)[1] + 1))
    assert grid[0].date.weekday() == 0


def test_sunday_first_grid_option():
    grid = build_month_grid([], 2026, 10, first_weekday=calendar.SUNDAY)

    assert grid[0].date == date(2026, 9, 27)
    assert len(grid) % 7 == 0


def test_days_carry_daily_aggregate_across_subjects():
    a = _subject(
        "a",
        (datetime(2026, 10, 5, 9, 0), AttendanceMark.PRESENT),
        (datetime(2026, 10, 6, 9, 0), AttendanceMark.ABSENT),
    )
    b = _subject("b", (datetime(2026, 10, 5, 14, 0), AttendanceMark.ABSENT))

    grid = {d.date: d for d in build_month_grid([a, b], 2026, 10)}

    oct5 = grid[date(2026, 10, 5)].attendance
    assert (oct5.present, oct5.total, oct5.percentage) == (1, 2, 50.0)
    oct6 = grid[date(2026, 10, 6)].attendance
    assert oct6 is not None and oct6.percentage == 0
    assert grid[date(2026, 10, 7)].attendance is None


def test_padding_days_have_no_aggregate_even_with_records():
    a = _subject("a", (datetime(2026, 9, 28, 9, 0), AttendanceMark.PRESENT))

    grid = build_month_grid([a], 2026, 10)

    assert grid[0].date == date(2026, 9, 28)
    assert grid[0].attendance is None


@pytest.mark.parametrize(
    "percentage, tier",
    [
        (None, HeatmapTier.NO_DATA),
        (100.0, HeatmapTier.HIGHEST),
        (90.0, HeatmapTier.HIGHEST),
        (89.9, HeatmapTier.HIGH),
        (75.0, HeatmapTier.HIGH),
        (60.0, HeatmapTier.MEDIUM),
        (40.0, HeatmapTier.LOW),
        (39.9, HeatmapTier.LOWEST),
        (0.0, HeatmapTier.LOWEST),
    ],
)
def test_heatmap_tier_thresholds(percentage, tier):
    assert heatmap_tier(percentage) == tier


def test_shift_month_wraps_years():
    assert shift_month(2026, 1, -1) == (2025, 12)
    assert shift_month(2026, 12, 1) == (2027, 1)
    assert shift_month(2026, 10, 0) == (2026, 10)


def test_service_fills_only_the_missing_half_of_year_month():
    service = HeatmapService(SubjectStore(KeyValueSubjectRepository(InMemoryKeyValueStore())))
    now = datetime(2026, 10, 19, 9, 0)

    by_year = [d for d in service.month_grid(2025, None, now=now) if d.is_current_month]
    by_month = [d for d in service.month_grid(None, 2, now=now) if d.is_current_month]

    assert by_year[0].date == date(2025, 10, 1)
    assert by_month[0].date == date(2026, 2, 1)
    assert len(by_month) == 28
