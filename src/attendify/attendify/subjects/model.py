from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceMark, Weekday


@dataclass(frozen=True)
class AttendanceRecord:
    """One mark event.

    ``attendance_percentage_after`` is the subject percentage right after this
    event was applied; it is never rewritten afterwards.
    """

    status: AttendanceMark
    timestamp: datetime
    attendance_percentage_after: float


@dataclass(frozen=True)
class TimetableSlot:
    day: Weekday
    time: str
    subject_name: Optional[str] = None
    teacher_name: Optional[str] = None


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    content: str
    file_name: str
    file_type: str
    upload_date: datetime


@dataclass(frozen=True)
class Subject:
    """A tracked class.

    ``present``/``total`` are a cache of ``history``; only the store updates
    them, always together with the history.
    """

    id: str
    name: str
    professor: str
    present: int
    total: int
    history: tuple[AttendanceRecord, ...]
    color: str
    timetable: tuple[TimetableSlot, ...] = ()
    notes: tuple[Note, ...] = ()

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return self.present / self.total * 100
