from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..common.validators import clean_text
from ..core.constants import COLOR_PALETTE
from .model import Subject, TimetableSlot
from .service import SubjectStore


def next_color(existing_count: int, palette: Sequence[str] = COLOR_PALETTE) -> str:
    """Colour for the subject that will sit at position ``existing_count``."""
    return palette[existing_count % len(palette)]


@dataclass
class ImportedSubject:
    name: str
    professor: str = ""
    timetable: list[TimetableSlot] = field(default_factory=list)


def group_import_slots(slots: Iterable[TimetableSlot]) -> list[ImportedSubject]:
    """Group parsed slots into subjects, keyed by trimmed subject name.

    Slots without a subject name are dropped, duplicate (day, time) pairs are
    kept once, and the first non-empty teacher name wins. Order follows the
    first appearance of each subject.
    """
    grouped: dict[str, ImportedSubject] = {}
    for slot in slots:
        name = clean_text(slot.subject_name)
        if not name:
            continue
        entry = grouped.get(name)
        if entry is None:
            entry = ImportedSubject(name=name, professor=clean_text(slot.teacher_name))
            grouped[name] = entry
        if not any(s.day == slot.day and s.time == slot.time for s in entry.timetable):
            entry.timetable.append(TimetableSlot(day=slot.day, time=slot.time))
        if not entry.professor and clean_text(slot.teacher_name):
            entry.professor = clean_text(slot.teacher_name)
    return list(grouped.values())


class TimetableImporter:
    def __init__(self, store: SubjectStore, *, palette: Sequence[str] = COLOR_PALETTE):
        self._store = store
        self._palette = palette

    def import_slots(self, slots: Iterable[TimetableSlot]) -> list[Subject]:
        created: list[Subject] = []
        offset = len(self._store.subjects)
        for i, entry in enumerate(group_import_slots(slots)):
            subject = self._store.add_subject(
                entry.name,
                entry.professor,
                next_color(offset + i, self._palette),
                entry.timetable,
            )
            if subject:
                created.append(subject)
        return created
