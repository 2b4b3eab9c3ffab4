from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..subjects.model import Subject, TimetableSlot


@dataclass(frozen=True)
class ScheduledClass:
    subject: Subject
    slot: TimetableSlot


@dataclass(frozen=True)
class Reminder:
    """When to nudge the user to mark a class; consumed by the notifier."""

    subject_id: str
    subject_name: str
    class_time: datetime
    remind_at: datetime

    @property
    def message(self) -> str:
        return f"Did you attend {self.subject_name}? Don't forget to mark your attendance!"
