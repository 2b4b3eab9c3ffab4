from __future__ import annotations

from src.attendify.attendify.core.constants import COLOR_PALETTE
from src.attendify.attendify.core.enums import Weekday
from src.attendify.attendify.storage.kv_store import InMemoryKeyValueStore
from src.attendify.attendify.subjects.importer import TimetableImporter, group_import_slots, next_color
from src.attendify.attendify.subjects.kv_subject_repository import KeyValueSubjectRepository
from src.attendify.attendify.subjects.model import TimetableSlot
from src.attendify.attendify.subjects.service import SubjectStore


def _store() -> SubjectStore:
    return SubjectStore(KeyValueSubjectRepository(InMemoryKeyValueStore()))


def test_group_import_slots_dedupes_and_picks_first_teacher():
    slots = [
        TimetableSlot(day=Weekday.MON, time="09:00", subject_name=" Maths "),
        TimetableSlot(day=Weekday.MON, time="09:00", subject_name="Maths", teacher_name="Dr. Rao"),
        TimetableSlot(day=Weekday.WED, time="09:00", subject_name="Maths", teacher_name="Dr. Other"),
        TimetableSlot(day=Weekday.TUE, time="11:00", subject_name="Physics"),
        TimetableSlot(day=Weekday.FRI, time="10:00"),
    ]

    grouped = group_import_slots(slots)

    assert [g.name for g in grouped] == ["Maths", "Physics"]
    maths = grouped[0]
    assert maths.professor == "Dr. Rao"
    assert [(s.day, s.time) for s in maths.timetable] == [(Weekday.MON, "09:00"), (Weekday.WED, "09:00")]
    assert grouped[1].professor == ""


def test_next_color_cycles_through_palette():
    assert next_color(0) == COLOR_PALETTE[0]
    assert next_color(len(COLOR_PALETTE) + 2) == COLOR_PALETTE[2]


def test_import_assigns_colors_after_existing_subjects():
    store = _store()
    for i in range(7):
        store.add_subject(f"S{i}", "", next_color(i))

    created = TimetableImporter(store).import_slots(
        [
            TimetableSlot(day=Weekday.MON, time="09:00", subject_name="Maths"),
            TimetableSlot(day=Weekday.TUE, time="09:00", subject_name="Physics"),
        ]
    )

    assert [s.color for s in created] == [COLOR_PALETTE[7], COLOR_PALETTE[0]]
    assert len(store.subjects) == 9
    assert created[0].timetable[0].subject_name is None
