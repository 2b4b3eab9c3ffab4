"""Map subjects to and from the persisted JSON shape.

The persisted document is a JSON array of subject objects using the camelCase
keys of the browser app (``attendancePercentageAfter``, ``fileName``, ...)
with instants stored as epoch milliseconds.
"""

from __future__ import annotations

from typing import Any, Iterable

from ..common.datetime_utils import from_epoch_millis, to_epoch_millis
from ..core.enums import AttendanceMark, Weekday
from .model import AttendanceRecord, Note, Subject, TimetableSlot


def _require_object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data


def record_to_json(record: AttendanceRecord) -> dict[str, Any]:
    return {
        "status": record.status.value,
        "timestamp": to_epoch_millis(record.timestamp),
        "attendancePercentageAfter": record.attendance_percentage_after,
    }


def record_from_json(data: dict[str, Any]) -> AttendanceRecord:
    data = _require_object(data, "history record")
    return AttendanceRecord(
        status=AttendanceMark(data["status"]),
        timestamp=from_epoch_millis(data["timestamp"]),
        attendance_percentage_after=float(data["attendancePercentageAfter"]),
    )


def slot_to_json(slot: TimetableSlot) -> dict[str, Any]:
    out: dict[str, Any] = {"day": slot.day.value, "time": slot.time}
    if slot.subject_name is not None:
        out["subjectName"] = slot.subject_name
    if slot.teacher_name is not None:
        out["teacherName"] = slot.teacher_name
    return out


def slot_from_json(data: dict[str, Any]) -> TimetableSlot:
    data = _require_object(data, "timetable slot")
    return TimetableSlot(
        day=Weekday(data["day"]),
        time=str(data["time"]),
        subject_name=data.get("subjectName"),
        teacher_name=data.get("teacherName"),
    )


def note_to_json(note: Note) -> dict[str, Any]:
    return {
        "id": note.id,
        "title": note.title,
        "content": note.content,
        "fileName": note.file_name,
        "fileType": note.file_type,
        "uploadDate": to_epoch_millis(note.upload_date),
    }


def note_from_json(data: dict[str, Any]) -> Note:
    data = _require_object(data, "note")
    return Note(
        id=str(data["id"]),
        title=str(data.get("title", "")),
        content=str(data.get("content", "")),
        file_name=str(data.get("fileName", "")),
        file_type=str(data.get("fileType", "")),
        upload_date=from_epoch_millis(data["uploadDate"]),
    )


def subject_to_json(subject: Subject) -> dict[str, Any]:
    return {
        "id": subject.id,
        "name": subject.name,
        "professor": subject.professor,
        "present": subject.present,
        "total": subject.total,
        "history": [record_to_json(r) for r in subject.history],
        "color": subject.color,
        "timetable": [slot_to_json(s) for s in subject.timetable],
        "notes": [note_to_json(n) for n in subject.notes],
    }


def subject_from_json(data: dict[str, Any]) -> Subject:
    data = _require_object(data, "subject")
    history = tuple(record_from_json(r) for r in data.get("history") or [])
    # Counters are a cache of the history; rebuild them so a hand-edited
    # snapshot cannot break present <= total.
    present = sum(1 for r in history if r.status == AttendanceMark.PRESENT)
    return Subject(
        id=str(data["id"]),
        name=str(data["name"]),
        professor=str(data.get("professor") or ""),
        present=present,
        total=len(history),
        history=history,
        color=str(data.get("color") or ""),
        timetable=tuple(slot_from_json(s) for s in data.get("timetable") or []),
        notes=tuple(note_from_json(n) for n in data.get("notes") or []),
    )


def subjects_to_json(subjects: Iterable[Subject]) -> list[dict[str, Any]]:
    return [subject_to_json(s) for s in subjects]


def subjects_from_json(data: Any) -> list[Subject]:
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of subjects, got {type(data).__name__}")
    return [subject_from_json(item) for item in data]
