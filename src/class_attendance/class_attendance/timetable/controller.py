from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..container import Container
from ..common.web import error_response, login_required
from .model import schedule_to_json


def _profile_json(profile) -> dict:
    return {
        "start_date": profile.start_date.strftime("%Y-%m-%d") if profile.start_date else None,
        "attendance_threshold": profile.attendance_threshold,
        "weekly_schedule": schedule_to_json(profile.weekly_schedule),
        "subjects": sorted(profile.subjects),
        "last_processed_date": (
            profile.last_processed_date.strftime("%Y-%m-%d") if profile.last_processed_date else None
        ),
    }


def _uploaded(field: str):
    # Called outside the views' try blocks so an oversized body reaches the 413 handler.
    f = request.files.get(field)
    if not f:
        return None, None
    return f.read(), f.filename


def register(app: Flask, container: Container) -> None:
    @app.route("/profile", methods=["GET"], endpoint="profile")
    @login_required
    def profile():
        try:
            ctx = container.attendance_service.load_session(int(session["user_id"]))
            return jsonify({"success": True, "profile": _profile_json(ctx.require_profile())})
        except Exception as e:
            return error_response(e, action="loading the profile")

    @app.route("/profile/setup", methods=["POST"], endpoint="profile_setup")
    @login_required
    def profile_setup():
        data, filename = _uploaded("timetable")
        try:
            ctx = container.attendance_service.load_session(int(session["user_id"]))
            created = container.timetable_service.setup_profile(
                ctx,
                start_date=request.form.get("start_date"),
                min_attendance=request.form.get("min_attendance"),
                data=data,
                filename=filename,
            )
            outcome = container.attendance_service.synchronize(ctx.with_profile(created))
            return jsonify({"success": True, "profile": _profile_json(outcome.session.profile)}), 201
        except Exception as e:
            return error_response(e, action="saving the profile")

    @app.route("/profile/timetable", methods=["POST"], endpoint="profile_timetable")
    @login_required
    def profile_timetable():
        data, filename = _uploaded("timetable")
        try:
            ctx = container.attendance_service.load_session(int(session["user_id"]))
            updated = container.timetable_service.replace_schedule(ctx, data=data, filename=filename)
            outcome = container.attendance_service.synchronize(ctx.with_profile(updated))
            return jsonify({"success": True, "profile": _profile_json(outcome.session.profile)})
        except Exception as e:
            return error_response(e, action="updating the timetable")
