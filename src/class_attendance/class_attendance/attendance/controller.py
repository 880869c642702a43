from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.web import error_response, login_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            ctx = container.attendance_service.load_session(int(session["user_id"]))
            today = today_local()
            outcome = container.attendance_service.synchronize(ctx, today=today)
            summary = container.summary_service.build_summary(outcome.session)
            return jsonify(
                {
                    "success": True,
                    "name": session.get("name"),
                    "summary": summary.to_dict(),
                    "schedule": container.attendance_service.schedule_for_date_ui(outcome.session, today),
                }
            )
        except Exception as e:
            return error_response(e, action="updating attendance records")

    @app.route("/attendance/<log_date>", methods=["GET"], endpoint="attendance_for_date")
    @login_required
    def attendance_for_date(log_date: str):
        try:
            try:
                day = parse_iso_date(log_date)
            except ValueError:
                raise ValidationError("Date must be YYYY-MM-DD")

            ctx = container.attendance_service.load_session(int(session["user_id"]))
            return jsonify({"success": True, **container.attendance_service.schedule_for_date_ui(ctx, day)})
        except Exception as e:
            return error_response(e, action="loading the schedule")

    @app.route("/attendance/<int:record_id>/status", methods=["POST"], endpoint="attendance_mark")
    @login_required
    def attendance_mark(record_id: int):
        data = request.get_json(silent=True) or request.form
        try:
            ctx = container.attendance_service.load_session(int(session["user_id"]))
            container.attendance_service.mark_status(ctx, record_id=record_id, status=data.get("status", ""))
            summary = container.summary_service.build_summary(ctx)
            return jsonify({"success": True, "summary": summary.to_dict()})
        except Exception as e:
            return error_response(e, action="updating the attendance status")
