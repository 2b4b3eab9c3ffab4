from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import clean_text, require_hhmm, require_non_empty, require_weekday
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .importer import next_color
from .mapper import note_to_json, subject_to_json
from .model import TimetableSlot


def parse_slot(data: dict) -> TimetableSlot:
    if not isinstance(data, dict):
        raise ValidationError("Timetable slot must be an object")
    return TimetableSlot(
        day=require_weekday(data.get("day", "")),
        time=require_hhmm(data.get("time", "")),
        subject_name=clean_text(data.get("subjectName")) or None,
        teacher_name=clean_text(data.get("teacherName")) or None,
    )


def parse_slots(items) -> list[TimetableSlot]:
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValidationError("timetable must be a list")
    return [parse_slot(item) for item in items]


def register(app: Flask, container: Container) -> None:
    store = container.subject_store

    def _subject_view(subject) -> dict:
        out = subject_to_json(subject)
        info = container.safety_calculator.safety_info(subject.present, subject.total)
        out["percentage"] = subject.percentage
        out["safety"] = {"status": info.status.value, "message": info.message}
        return out

    def _body() -> dict:
        return request.get_json(silent=True) or {}

    @app.route("/api/subjects", methods=["GET"], endpoint="subjects_list")
    def subjects_list():
        return jsonify([_subject_view(s) for s in store.subjects])

    @app.route("/api/subjects/<subject_id>", methods=["GET"], endpoint="subjects_get")
    def subjects_get(subject_id: str):
        subject = store.get(subject_id)
        if not subject:
            raise NotFoundError("Subject not found")
        return jsonify(_subject_view(subject))

    @app.route("/api/subjects", methods=["POST"], endpoint="subjects_create")
    def subjects_create():
        data = _body()
        name = require_non_empty(data.get("name", ""), "name")
        color = clean_text(data.get("color")) or next_color(len(store.subjects))
        subject = store.add_subject(name, data.get("professor", ""), color, parse_slots(data.get("timetable")))
        return jsonify(_subject_view(subject)), 201

    @app.route("/api/subjects/<subject_id>", methods=["PATCH"], endpoint="subjects_rename")
    def subjects_rename(subject_id: str):
        data = _body()
        name = require_non_empty(data.get("name", ""), "name")
        subject = store.rename_subject(subject_id, name, data.get("professor", ""))
        if not subject:
            raise NotFoundError("Subject not found")
        return jsonify(_subject_view(subject))

    @app.route("/api/subjects/<subject_id>", methods=["DELETE"], endpoint="subjects_delete")
    def subjects_delete(subject_id: str):
        if not store.delete_subject(subject_id):
            raise NotFoundError("Subject not found")
        return jsonify({"success": True})

    @app.route("/api/subjects/import", methods=["POST"], endpoint="subjects_import")
    def subjects_import():
        slots = parse_slots(_body().get("slots"))
        if not slots:
            raise ValidationError("No timetable slots could be found.")
        created = container.timetable_importer.import_slots(slots)
        return jsonify([_subject_view(s) for s in created]), 201

    @app.route("/api/subjects/<subject_id>/notes", methods=["POST"], endpoint="notes_create")
    def notes_create(subject_id: str):
        data = _body()
        note = store.add_note(
            subject_id,
            title=require_non_empty(data.get("title", ""), "title"),
            content=data.get("content", ""),
            file_name=data.get("fileName", ""),
            file_type=data.get("fileType", ""),
        )
        if not note:
            raise NotFoundError("Subject not found")
        return jsonify(note_to_json(note)), 201

    @app.route("/api/subjects/<subject_id>/notes/<note_id>", methods=["DELETE"], endpoint="notes_delete")
    def notes_delete(subject_id: str, note_id: str):
        if not store.delete_note(subject_id, note_id):
            raise NotFoundError("Note not found")
        return jsonify({"success": True})

    @app.route("/api/reset", methods=["POST"], endpoint="reset_all")
    def reset_all():
        store.reset_all()
        return jsonify({"success": True})
