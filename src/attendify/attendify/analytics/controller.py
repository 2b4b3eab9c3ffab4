from __future__ import annotations

from flask import Flask, jsonify, request

from ..assistant.context import build_context
from ..container import Container
from ..core.enums import TrendGranularity
from ..core.exceptions import NotFoundError, ValidationError
from ..heatmap.service import heatmap_tier
from .model import AttendanceTally


def _tally(t: AttendanceTally) -> dict:
    return {"present": t.present, "total": t.total, "percentage": t.percentage}


def register(app: Flask, container: Container) -> None:
    analytics = container.analytics_service
    store = container.subject_store

    def _int_arg(name: str, default: int | None = None, *, minimum: int | None = None) -> int | None:
        raw = request.args.get(name)
        if raw is None or raw == "":
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ValidationError(f"{name} must be an integer")
        if minimum is not None and value < minimum:
            raise ValidationError(f"{name} must be >= {minimum}")
        return value

    def _granularity() -> TrendGranularity:
        try:
            return TrendGranularity(request.args.get("granularity", TrendGranularity.WEEKLY.value))
        except ValueError:
            raise ValidationError("granularity must be daily, weekly or monthly")

    @app.route("/api/stats/overall", endpoint="stats_overall")
    def stats_overall():
        stats = analytics.overall_stats()
        return jsonify(
            {
                "totalPresent": stats.total_present,
                "totalClasses": stats.total_classes,
                "percentage": stats.percentage,
            }
        )

    @app.route("/api/stats/today", endpoint="stats_today")
    def stats_today():
        stats = analytics.todays_stats()
        return jsonify({"present": stats.present, "marked": stats.marked})

    @app.route("/api/stats/day-of-week", endpoint="stats_day_of_week")
    def stats_day_of_week():
        return jsonify([{"day": d.day.value, **_tally(d.tally)} for d in analytics.attendance_by_day_of_week()])

    @app.route("/api/stats/timeframes", endpoint="stats_timeframes")
    def stats_timeframes():
        tf = analytics.attendance_for_timeframes()
        return jsonify(
            {
                "thisWeek": _tally(tf.this_week),
                "lastWeek": _tally(tf.last_week),
                "thisMonth": _tally(tf.this_month),
                "lastMonth": _tally(tf.last_month),
            }
        )

    @app.route("/api/stats/highlights", endpoint="stats_highlights")
    def stats_highlights():
        best = analytics.most_attended_subject()
        risk = analytics.highest_risk_subject()
        return jsonify(
            {
                "mostAttended": {"id": best.id, "name": best.name, "percentage": best.percentage} if best else None,
                "highestRisk": {"id": risk.id, "name": risk.name, "percentage": risk.percentage} if risk else None,
                "subjects": [{"id": s.id, "name": s.name, "percentage": p} for s, p in analytics.subject_percentages()],
                "hasDayOfWeekData": analytics.has_day_of_week_data(),
            }
        )

    @app.route("/api/calendar", endpoint="calendar_month")
    def calendar_month():
        year = _int_arg("year", minimum=1)
        if year is not None and year > 9999:
            raise ValidationError("year must be between 1 and 9999")
        month = _int_arg("month", minimum=1)
        if month is not None and month > 12:
            raise ValidationError("month must be between 1 and 12")
        grid = container.heatmap_service.month_grid(year, month)
        return jsonify(
            [
                {
                    "date": d.date.strftime("%Y-%m-%d"),
                    "dayOfMonth": d.day_of_month,
                    "isCurrentMonth": d.is_current_month,
                    "attendance": _tally(d.attendance) if d.attendance else None,
                    "tier": heatmap_tier(d.attendance.percentage if d.attendance else None).value,
                }
                for d in grid
            ]
        )

    @app.route("/api/trend/<subject_id>", endpoint="trend")
    def trend(subject_id: str):
        granularity = _granularity()
        if subject_id == "overall":
            series = container.trend_service.overall_trend(store.subjects, granularity)
        else:
            subject = store.get(subject_id)
            if not subject:
                raise NotFoundError("Subject not found")
            series = container.trend_service.trend(subject, granularity)
        return jsonify({"labels": list(series.labels), "data": list(series.percentages)})

    @app.route("/api/subjects/<subject_id>/safety", endpoint="subject_safety")
    def subject_safety(subject_id: str):
        subject = store.get(subject_id)
        if not subject:
            raise NotFoundError("Subject not found")
        info = container.safety_calculator.safety_info(subject.present, subject.total)
        return jsonify(
            {
                "status": info.status.value,
                "percentage": info.percentage,
                "bunkable": info.bunkable,
                "needed": info.needed,
                "message": info.message,
            }
        )

    @app.route("/api/what-if", endpoint="what_if")
    def what_if():
        future_present = _int_arg("futurePresent", 0, minimum=0)
        future_absent = _int_arg("futureAbsent", 0, minimum=0)
        subject_id = request.args.get("subjectId")
        if subject_id:
            subject = store.get(subject_id)
            if not subject:
                raise NotFoundError("Subject not found")
            present, total = subject.present, subject.total
        else:
            stats = analytics.overall_stats()
            present, total = stats.total_present, stats.total_classes
        projection = container.safety_calculator.what_if(present, total, future_present, future_absent)
        return jsonify({"present": projection.present, "total": projection.total, "percentage": projection.percentage})

    @app.route("/api/assistant/context", endpoint="assistant_context")
    def assistant_context():
        ctx = build_context(store.subjects, request.args.get("subjectId"))
        return jsonify({"summaries": ctx.summaries, "subjectName": ctx.subject_name, "context": ctx.render()})
