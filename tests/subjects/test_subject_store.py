from __future__ import annotations

from datetime import datetime

import pytest

from src.attendify.attendify.core.enums import AttendanceMark, Weekday
from src.attendify.attendify.core.exceptions import PersistenceError
from src.attendify.attendify.subjects.model import TimetableSlot
from src.attendify.attendify.subjects.service import SubjectStore


class InMemorySubjects:
    def __init__(self, subjects=()):
        self.saved = list(subjects)
        self.save_calls = 0
        self.cleared = False

    def load(self):
        return list(self.saved)

    def save(self, subjects):
        self.saved = list(subjects)
        self.save_calls += 1

    def clear(self):
        self.saved = []
        self.cleared = True


class FailingSubjects(InMemorySubjects):
    def save(self, subjects):
        raise PersistenceError("disk full")


def _assert_consistent(subject):
    assert subject.total == len(subject.history)
    assert subject.present == sum(1 for r in subject.history if r.status == AttendanceMark.PRESENT)
    assert subject.present <= subject.total


def test_add_subject_with_blank_name_is_ignored():
    repo = InMemorySubjects()
    store = SubjectStore(repo)

    assert store.add_subject("   ", "Dr. X", "#fff") is None

    assert len(store.subjects) == 0
    assert repo.save_calls == 0


def test_add_subject_trims_and_appends_at_end():
    store = SubjectStore(InMemorySubjects())
    first = store.add_subject("  Maths ", " Dr. Rao ", "#6366f1", [TimetableSlot(day=Weekday.MON, time="09:00")])
    second = store.add_subject("Physics", "", "#a855f7")

    assert [s.id for s in store.subjects] == [first.id, second.id]
    assert first.name == "Maths"
    assert first.professor == "Dr. Rao"
    assert (first.present, first.total, first.history, first.notes) == (0, 0, (), ())
    assert first.id != second.id


def test_every_mutation_saves_full_snapshot():
    repo = InMemorySubjects()
    store = SubjectStore(repo)
    s = store.add_subject("Maths", "", "#fff")
    store.mark_present(s.id)
    store.mark_absent(s.id)

    assert repo.save_calls == 3
    assert repo.saved[0].total == 2


def test_marks_and_undos_keep_counters_consistent():
    store = SubjectStore(InMemorySubjects())
    sid = store.add_subject("Maths", "", "#fff").id

    for op in ["p", "a", "p", "u", "p", "u", "u", "a", "u", "u", "u"]:
        if op == "p":
            store.mark_present(sid)
        elif op == "a":
            store.mark_absent(sid)
        else:
            store.undo_last_action(sid)
        _assert_consistent(store.get(sid))


def test_mark_records_percentage_after_each_event():
    store = SubjectStore(InMemorySubjects())
    sid = store.add_subject("Maths", "", "#fff").id
    now = datetime(2026, 10, 19, 9, 30)

    store.mark_present(sid, now=now)
    store.mark_absent(sid, now=now)
    subject = store.mark_present(sid, now=now)

    assert [r.attendance_percentage_after for r in subject.history] == pytest.approx([100.0, 50.0, 200 / 3])
    assert all(r.timestamp == now for r in subject.history)


def test_undo_is_exact_inverse_of_mark():
    store = SubjectStore(InMemorySubjects())
    sid = store.add_subject("Maths", "", "#fff").id
    store.mark_present(sid)
    store.mark_absent(sid)
    before = store.get(sid)

    store.mark_present(sid)
    after_undo = store.undo_last_action(sid)

    assert (after_undo.present, after_undo.total, after_undo.history) == (before.present, before.total, before.history)


def test_undo_does_not_rewrite_older_snapshots():
    store = SubjectStore(InMemorySubjects())
    sid = store.add_subject("Maths", "", "#fff").id
    store.mark_present(sid)
    store.mark_absent(sid)
    store.undo_last_action(sid)

    assert store.get(sid).history[0].attendance_percentage_after == 100.0


def test_undo_on_empty_history_is_noop():
    repo = InMemorySubjects()
    store = SubjectStore(repo)
    sid = store.add_subject("Maths", "", "#fff").id

    assert store.undo_last_action(sid) is None
    assert repo.save_calls == 1


def test_unknown_ids_are_noops():
    store = SubjectStore(InMemorySubjects())
    store.add_subject("Maths", "", "#fff")
    before = store.subjects

    assert store.mark_present("missing") is None
    assert store.mark_absent("missing") is None
    assert store.undo_last_action("missing") is None
    assert store.delete_subject("missing") is None
    assert store.rename_subject("missing", "X") is None
    assert store.add_note("missing", title="t", content="c") is None
    assert store.subjects is before


def test_rename_trims_and_ignores_blank_name():
    store = SubjectStore(InMemorySubjects())
    sid = store.add_subject("Maths", "Dr. A", "#fff").id

    assert store.rename_subject(sid, "  ", "Dr. B") is None
    assert store.get(sid).professor == "Dr. A"

    renamed = store.rename_subject(sid, " Algebra ", " Dr. B ")
    assert (renamed.name, renamed.professor) == ("Algebra", "Dr. B")
    assert renamed.id == sid


def test_delete_subject_keeps_order_of_others():
    store = SubjectStore(InMemorySubjects())
    a = store.add_subject("A", "", "#1").id
    b = store.add_subject("B", "", "#2").id
    c = store.add_subject("C", "", "#3").id

    store.delete_subject(b)

    assert [s.id for s in store.subjects] == [a, c]


def test_notes_add_and_delete():
    store = SubjectStore(InMemorySubjects())
    sid = store.add_subject("Maths", "", "#fff").id
    uploaded = datetime(2026, 10, 1, 12, 0)

    note = store.add_note(sid, title="Week 1", content="Limits", file_name="w1.txt", file_type="text/plain", now=uploaded)

    assert note.upload_date == uploaded
    assert store.get(sid).notes == (note,)
    assert store.delete_note(sid, "other") is None
    assert store.delete_note(sid, note.id) == note
    assert store.get(sid).notes == ()


def test_persistence_failure_keeps_in_memory_mutation():
    store = SubjectStore(FailingSubjects())
    with pytest.raises(PersistenceError):
        store.add_subject("Maths", "", "#fff")
    sid = store.subjects[0].id

    with pytest.raises(PersistenceError):
        store.mark_present(sid)

    assert store.get(sid).total == 1
    assert store.get(sid).present == 1


def test_reset_all_empties_store_and_clears_repository():
    repo = InMemorySubjects()
    store = SubjectStore(repo)
    store.add_subject("Maths", "", "#fff")

    store.reset_all()

    assert store.subjects == ()
    assert repo.cleared


def test_store_loads_existing_snapshot_once():
    repo = InMemorySubjects()
    first = SubjectStore(repo)
    sid = first.add_subject("Maths", "", "#fff").id
    first.mark_present(sid)

    second = SubjectStore(repo)

    assert second.get(sid).present == 1


def test_version_increments_per_committed_mutation():
    store = SubjectStore(InMemorySubjects())
    sid = store.add_subject("Maths", "", "#fff").id
    v = store.version

    store.undo_last_action(sid)
    assert store.version == v

    store.mark_present(sid)
    assert store.version == v + 1
