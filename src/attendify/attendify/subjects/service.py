from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import clean_text
from ..core.enums import AttendanceMark
from .model import AttendanceRecord, Note, Subject, TimetableSlot
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class SubjectStore:
    """Owns the subject snapshot and every mutation of it.

    The snapshot is an immutable tuple replaced wholesale on each mutation, so
    readers never see a half-updated subject. After a mutation is committed in
    memory the full snapshot is written through the repository; a storage
    failure propagates as ``PersistenceError`` but does not undo the mutation.

    Invalid input (blank names), unknown ids and undo on an empty history are
    silent no-ops returning ``None``.
    """

    def __init__(self, repository: SubjectRepository, *, id_factory: Callable[[], str] = _new_id):
        self._repository = repository
        self._id_factory = id_factory
        self._subjects: tuple[Subject, ...] = tuple(repository.load())
        self._version = 0
        logger.debug("Loaded %d subject(s)", len(self._subjects))

    @property
    def subjects(self) -> tuple[Subject, ...]:
        return self._subjects

    @property
    def version(self) -> int:
        """Bumped once per committed mutation; usable as a memoization key."""
        return self._version

    def get(self, subject_id: str) -> Optional[Subject]:
        for s in self._subjects:
            if s.id == subject_id:
                return s
        return None

    def _commit(self, subjects: tuple[Subject, ...]) -> None:
        self._subjects = subjects
        self._version += 1
        self._repository.save(subjects)

    def _replace_subject(self, updated: Subject) -> Subject:
        self._commit(tuple(updated if s.id == updated.id else s for s in self._subjects))
        return updated

    def add_subject(
        self,
        name: str,
        professor: str = "",
        color: str = "",
        timetable: Iterable[TimetableSlot] = (),
    ) -> Optional[Subject]:
        name = clean_text(name)
        if not name:
            return None
        subject = Subject(
            id=self._id_factory(),
            name=name,
            professor=clean_text(professor),
            present=0,
            total=0,
            history=(),
            color=color,
            timetable=tuple(timetable),
            notes=(),
        )
        self._commit(self._subjects + (subject,))
        logger.debug("Added subject %s (%s)", subject.id, subject.name)
        return subject

    def delete_subject(self, subject_id: str) -> Optional[Subject]:
        subject = self.get(subject_id)
        if not subject:
            return None
        self._commit(tuple(s for s in self._subjects if s.id != subject_id))
        logger.debug("Deleted subject %s", subject_id)
        return subject

    def rename_subject(self, subject_id: str, new_name: str, new_professor: str = "") -> Optional[Subject]:
        new_name = clean_text(new_name)
        subject = self.get(subject_id)
        if not new_name or not subject:
            return None
        return self._replace_subject(replace(subject, name=new_name, professor=clean_text(new_professor)))

    def _append_mark(self, subject_id: str, status: AttendanceMark, now: datetime | None) -> Optional[Subject]:
        subject = self.get(subject_id)
        if not subject:
            return None
        present = subject.present + (1 if status == AttendanceMark.PRESENT else 0)
        total = subject.total + 1
        record = AttendanceRecord(
            status=status,
            timestamp=now or now_local(),
            attendance_percentage_after=present / total * 100,
        )
        updated = replace(subject, present=present, total=total, history=subject.history + (record,))
        logger.debug("Marked %s %s (%d/%d)", subject_id, status.value, present, total)
        return self._replace_subject(updated)

    def mark_present(self, subject_id: str, *, now: datetime | None = None) -> Optional[Subject]:
        return self._append_mark(subject_id, AttendanceMark.PRESENT, now)

    def mark_absent(self, subject_id: str, *, now: datetime | None = None) -> Optional[Subject]:
        return self._append_mark(subject_id, AttendanceMark.ABSENT, now)

    def undo_last_action(self, subject_id: str) -> Optional[Subject]:
        subject = self.get(subject_id)
        if not subject or not subject.history:
            return None
        last = subject.history[-1]
        updated = replace(
            subject,
            present=subject.present - (1 if last.status == AttendanceMark.PRESENT else 0),
            total=subject.total - 1,
            history=subject.history[:-1],
        )
        logger.debug("Undid %s on %s", last.status.value, subject_id)
        return self._replace_subject(updated)

    def reset_all(self) -> None:
        self._subjects = ()
        self._version += 1
        self._repository.clear()
        logger.info("All subjects cleared")

    def add_note(
        self,
        subject_id: str,
        *,
        title: str,
        content: str,
        file_name: str = "",
        file_type: str = "",
        now: datetime | None = None,
    ) -> Optional[Note]:
        subject = self.get(subject_id)
        if not subject:
            return None
        note = Note(
            id=self._id_factory(),
            title=title,
            content=content,
            file_name=file_name,
            file_type=file_type,
            upload_date=now or now_local(),
        )
        self._replace_subject(replace(subject, notes=subject.notes + (note,)))
        return note

    def delete_note(self, subject_id: str, note_id: str) -> Optional[Note]:
        subject = self.get(subject_id)
        if not subject:
            return None
        removed = next((n for n in subject.notes if n.id == note_id), None)
        if not removed:
            return None
        self._replace_subject(replace(subject, notes=tuple(n for n in subject.notes if n.id != note_id)))
        return removed
