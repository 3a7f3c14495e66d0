from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import current_week_dates, day_name
from ..common.logging import get_logger
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..container import Container

logger = get_logger(__name__)


def _course_to_dict(course) -> dict:
    return {
        "id": course.course_id,
        "name": course.name,
        "code": course.code,
        "type": course.course_type.value,
        "faculty": course.faculty,
        "program": course.program,
    }


def _student_to_dict(student) -> dict:
    return {
        "id": student.student_id,
        "name": student.name,
        "email": student.email,
        "student_code": student.student_code,
    }


def register(app: Flask, container: Container) -> None:
    def with_attendance_session(view):
        """Open (or create) the caller's attendance session and handle domain errors."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            session_id = session.get("attendance_session")
            if not container.sessions.exists(session_id):
                session_id = container.sessions.create()
                session["attendance_session"] = session_id

            try:
                with container.sessions.open(session_id) as attendance:
                    return view(attendance, *args, **kwargs)
            except ValidationError as e:
                logger.debug("Rejected %s %s: %s", request.method, request.path, e)
                return jsonify({"success": False, "message": str(e)}), 400

        return wrapper

    def payload() -> dict:
        return request.get_json(silent=True) or {}

    @app.route("/api/courses", methods=["GET"], endpoint="api_courses")
    def api_courses():
        return jsonify([_course_to_dict(c) for c in container.courses_repo.list_all()])

    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    def api_students():
        return jsonify([_student_to_dict(s) for s in container.students_repo.list_all()])

    @app.route("/api/week-dates", methods=["GET"], endpoint="api_week_dates")
    def api_week_dates():
        return jsonify([{"date": d, "day_name": day_name(d)} for d in current_week_dates()])

    @app.route("/api/session/course", methods=["POST"], endpoint="api_select_course")
    @with_attendance_session
    def api_select_course(attendance):
        course_id = require_non_empty(payload().get("course_id"), "course_id")
        course = attendance.select_course(course_id)
        return jsonify({"success": True, "course": _course_to_dict(course)})

    @app.route("/api/session/date", methods=["POST"], endpoint="api_select_date")
    @with_attendance_session
    def api_select_date(attendance):
        selected = attendance.select_date(require_non_empty(payload().get("date"), "date"))
        return jsonify({"success": True, "date": selected, "day_name": day_name(selected)})

    @app.route("/api/session/view", methods=["GET"], endpoint="api_session_view")
    @with_attendance_session
    def api_session_view(attendance):
        return jsonify(attendance.render().to_dict())

    @app.route("/api/session/stats", methods=["GET"], endpoint="api_session_stats")
    @with_attendance_session
    def api_session_stats(attendance):
        return jsonify(attendance.stats().to_dict())

    @app.route("/api/attendance", methods=["POST"], endpoint="api_change_status")
    @with_attendance_session
    def api_change_status(attendance):
        data = payload()
        student_id = require_non_empty(data.get("student_id"), "student_id")
        status = require_non_empty(data.get("status"), "status")
        event = attendance.change_status(student_id, status)
        return jsonify({"success": True, "event": event.kind.value, "stats": attendance.stats().to_dict()})

    @app.route("/api/attendance/mark-all-present", methods=["POST"], endpoint="api_mark_all_present")
    @with_attendance_session
    def api_mark_all_present(attendance):
        events = attendance.mark_all_present()
        return jsonify({"success": True, "changed": len(events), "stats": attendance.stats().to_dict()})

    @app.route("/api/attendance/clear", methods=["POST"], endpoint="api_clear_selections")
    @with_attendance_session
    def api_clear_selections(attendance):
        attendance.clear_selections()
        return jsonify({"success": True})

    @app.route("/api/attendance/save", methods=["POST"], endpoint="api_save_attendance")
    @with_attendance_session
    def api_save_attendance(attendance):
        summary = attendance.save()
        return jsonify({"success": True, **summary.to_dict()})

    @app.route("/api/notifications", methods=["GET", "DELETE"], endpoint="api_notifications")
    @with_attendance_session
    def api_notifications(attendance):
        if request.method == "DELETE":
            attendance.clear_notifications()
        return jsonify(attendance.notifications())

    @app.route("/api/alerts", methods=["GET", "DELETE"], endpoint="api_alerts")
    @with_attendance_session
    def api_alerts(attendance):
        if request.method == "DELETE":
            attendance.clear_alerts()
        alerts = attendance.alerts(limit=container.alert_display_limit)
        return jsonify(
            [
                {"tier": a.tier.value, "student_id": a.student_id, "absence_count": a.absence_count, "message": a.message}
                for a in alerts
            ]
        )

    @app.route("/api/observer-stats", methods=["GET", "DELETE"], endpoint="api_observer_stats")
    @with_attendance_session
    def api_observer_stats(attendance):
        if request.method == "DELETE":
            attendance.reset_statistics()
        return jsonify(attendance.observer_stats().to_dict())

    @app.route("/api/session", methods=["DELETE"], endpoint="api_end_session")
    def api_end_session():
        session_id = session.pop("attendance_session", None)
        ended = bool(session_id) and container.sessions.discard(session_id) is not None
        return jsonify({"success": True, "ended": ended})
