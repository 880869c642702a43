from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import error_response, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/summary", methods=["GET"], endpoint="summary")
    @login_required
    def summary():
        try:
            ctx = container.attendance_service.load_session(int(session["user_id"]))
            ctx.require_profile()
            return jsonify({"success": True, "summary": container.summary_service.build_summary(ctx).to_dict()})
        except Exception as e:
            return error_response(e, action="building the summary")
