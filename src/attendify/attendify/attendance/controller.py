from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..subjects.mapper import record_to_json


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _mark_result(subject) -> dict:
        return {
            "success": True,
            "present": subject.present,
            "total": subject.total,
            "percentage": subject.percentage,
            "last": record_to_json(subject.history[-1]) if subject.history else None,
        }

    @app.route("/api/subjects/<subject_id>/present", methods=["POST"], endpoint="mark_present")
    def mark_present(subject_id: str):
        return jsonify(_mark_result(service.mark_present(subject_id)))

    @app.route("/api/subjects/<subject_id>/absent", methods=["POST"], endpoint="mark_absent")
    def mark_absent(subject_id: str):
        return jsonify(_mark_result(service.mark_absent(subject_id)))

    @app.route("/api/subjects/<subject_id>/undo", methods=["POST"], endpoint="undo_last_action")
    def undo_last_action(subject_id: str):
        return jsonify(_mark_result(service.undo(subject_id)))

    @app.route("/api/subjects/<subject_id>/history.csv", methods=["GET"], endpoint="history_csv")
    def history_csv(subject_id: str):
        csv_bytes = service.history_csv(subject_id).encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=attendance_{subject_id}.csv"},
        )
