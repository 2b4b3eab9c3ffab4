from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    schedules = container.schedule_service

    @app.route("/api/schedule/today", endpoint="schedule_today")
    def schedule_today():
        out = []
        for item in schedules.todays_schedule():
            marked, cap = schedules.subject_todays_stats(item.subject.id)
            out.append(
                {
                    "subjectId": item.subject.id,
                    "subjectName": item.subject.name,
                    "color": item.subject.color,
                    "day": item.slot.day.value,
                    "time": item.slot.time,
                    "marked": marked,
                    "cap": cap,
                }
            )
        return jsonify(out)

    @app.route("/api/schedule/reminders", endpoint="schedule_reminders")
    def schedule_reminders():
        return jsonify(
            [
                {
                    "subjectId": r.subject_id,
                    "subjectName": r.subject_name,
                    "classTime": r.class_time.strftime("%H:%M"),
                    "remindAt": r.remind_at.isoformat(timespec="minutes"),
                    "message": r.message,
                }
                for r in schedules.todays_reminders()
            ]
        )
