"""Seed demo subjects with a few weeks of history into the configured backend."""

from __future__ import annotations

import importlib
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendify.attendify.container import build_container
from src.attendify.attendify.core.enums import Weekday
from src.attendify.attendify.subjects.model import TimetableSlot

DEMO_SLOTS = [
    TimetableSlot(day=Weekday.MON, time="09:00", subject_name="Mathematics", teacher_name="Dr. Rao"),
    TimetableSlot(day=Weekday.WED, time="09:00", subject_name="Mathematics", teacher_name="Dr. Rao"),
    TimetableSlot(day=Weekday.TUE, time="11:00", subject_name="Physics", teacher_name="Prof. Iyer"),
    TimetableSlot(day=Weekday.THU, time="11:00", subject_name="Physics"),
    TimetableSlot(day=Weekday.FRI, time="14:00", subject_name="Chemistry", teacher_name="Dr. Sen"),
]


def main(weeks: int = 6, seed: int = 7) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)
    store = container.subject_store
    rng = random.Random(seed)

    created = container.timetable_importer.import_slots(DEMO_SLOTS)
    start = datetime.now() - timedelta(weeks=weeks)
    for subject in created:
        for offset in range(weeks * 7):
            day = start + timedelta(days=offset)
            for slot in subject.timetable:
                if slot.day.position != day.weekday():
                    continue
                hours, minutes = (int(p) for p in slot.time.split(":"))
                when = day.replace(hour=hours, minute=minutes, second=0, microsecond=0)
                if rng.random() < 0.8:
                    store.mark_present(subject.id, now=when)
                else:
                    store.mark_absent(subject.id, now=when)

    stats = container.analytics_service.overall_stats()
    print(f"OK: Seeded {len(created)} subjects ({stats.total_present}/{stats.total_classes} present)")


if __name__ == "__main__":
    main()
