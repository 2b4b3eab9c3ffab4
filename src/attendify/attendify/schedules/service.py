from __future__ import annotations

from datetime import datetime, timedelta

from ..common.datetime_utils import day_key, now_local, weekday_of
from ..core.constants import DEFAULT_REMINDER_OFFSET_MINUTES
from ..subjects.service import SubjectStore
from .model import Reminder, ScheduledClass


class ScheduleService:
    """Timetable-driven views of "today"."""

    def __init__(self, store: SubjectStore):
        self._store = store

    def todays_schedule(self, *, now: datetime | None = None) -> list[ScheduledClass]:
        today = weekday_of(now or now_local())
        schedule = [
            ScheduledClass(subject=subject, slot=slot)
            for subject in self._store.subjects
            for slot in subject.timetable
            if slot.day == today
        ]
        # HH:MM sorts correctly as a string; sort is stable for equal times.
        schedule.sort(key=lambda item: item.slot.time)
        return schedule

    def per_subject_daily_cap(self, subject_id: str, *, now: datetime | None = None) -> int:
        subject = self._store.get(subject_id)
        if not subject:
            return 0
        today = weekday_of(now or now_local())
        return sum(1 for slot in subject.timetable if slot.day == today)

    def subject_todays_stats(self, subject_id: str, *, now: datetime | None = None) -> tuple[int, int]:
        """(marked today, daily cap) for one subject."""
        now = now or now_local()
        subject = self._store.get(subject_id)
        if not subject:
            return 0, 0
        today = day_key(now)
        marked = sum(1 for r in subject.history if day_key(r.timestamp) == today)
        return marked, self.per_subject_daily_cap(subject_id, now=now)

    def can_mark(self, subject_id: str, *, now: datetime | None = None) -> bool:
        # A subject with no class today has no cap.
        marked, cap = self.subject_todays_stats(subject_id, now=now)
        return cap == 0 or marked < cap

    def todays_reminders(
        self,
        *,
        now: datetime | None = None,
        offset_minutes: int = DEFAULT_REMINDER_OFFSET_MINUTES,
    ) -> list[Reminder]:
        now = now or now_local()
        reminders: list[Reminder] = []
        for item in self.todays_schedule(now=now):
            hours, minutes = (int(p) for p in item.slot.time.split(":"))
            class_time = now.replace(hour=hours, minute=minutes, second=0, microsecond=0)
            remind_at = class_time + timedelta(minutes=offset_minutes)
            if remind_at > now:
                reminders.append(
                    Reminder(
                        subject_id=item.subject.id,
                        subject_name=item.subject.name,
                        class_time=class_time,
                        remind_at=remind_at,
                    )
                )
        return reminders
