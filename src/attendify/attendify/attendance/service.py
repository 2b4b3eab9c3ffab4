from __future__ import annotations

import csv
import io
import logging
from datetime import datetime

from ..core.enums import AttendanceMark
from ..core.exceptions import NotFoundError, ValidationError
from ..schedules.service import ScheduleService
from ..subjects.model import Subject
from ..subjects.service import SubjectStore

logger = logging.getLogger(__name__)

HISTORY_CSV_FIELDS = ["date", "time", "status", "attendance_percentage_after"]


class AttendanceService:
    """Invoking layer for marks: checks existence and the daily cap, then mutates the store."""

    def __init__(self, store: SubjectStore, schedules: ScheduleService):
        self._store = store
        self._schedules = schedules

    def _require_subject(self, subject_id: str) -> Subject:
        subject = self._store.get(subject_id)
        if not subject:
            raise NotFoundError("Subject not found")
        return subject

    def _mark(self, subject_id: str, status: AttendanceMark, now: datetime | None) -> Subject:
        subject = self._require_subject(subject_id)
        marked, cap = self._schedules.subject_todays_stats(subject_id, now=now)
        if cap > 0 and marked >= cap:
            logger.info("Rejected %s mark for %s: %d/%d already marked today", status.value, subject_id, marked, cap)
            raise ValidationError(f"All {cap} class(es) of {subject.name} are already marked today")
        if status == AttendanceMark.PRESENT:
            updated = self._store.mark_present(subject_id, now=now)
        else:
            updated = self._store.mark_absent(subject_id, now=now)
        return updated or subject

    def mark_present(self, subject_id: str, *, now: datetime | None = None) -> Subject:
        return self._mark(subject_id, AttendanceMark.PRESENT, now)

    def mark_absent(self, subject_id: str, *, now: datetime | None = None) -> Subject:
        return self._mark(subject_id, AttendanceMark.ABSENT, now)

    def undo(self, subject_id: str) -> Subject:
        subject = self._require_subject(subject_id)
        # Empty history: nothing to undo, the subject comes back unchanged.
        return self._store.undo_last_action(subject_id) or subject

    def history_rows(self, subject_id: str) -> list[dict]:
        subject = self._require_subject(subject_id)
        return [
            {
                "date": r.timestamp.strftime("%Y-%m-%d"),
                "time": r.timestamp.strftime("%H:%M:%S"),
                "status": r.status.value,
                "attendance_percentage_after": f"{r.attendance_percentage_after:.1f}",
            }
            for r in subject.history
        ]

    def history_csv(self, subject_id: str) -> str:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=HISTORY_CSV_FIELDS)
        writer.writeheader()
        for row in self.history_rows(subject_id):
            writer.writerow(row)
        return out.getvalue()
