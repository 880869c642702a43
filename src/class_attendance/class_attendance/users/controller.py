from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..container import Container
from ..common.web import error_response, login_required


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/register", methods=["POST"], endpoint="register")
    def register_account():
        data = request.get_json(silent=True) or request.form
        try:
            user_id = container.user_service.register(
                full_name=data.get("full_name", ""),
                username=data.get("username", ""),
                password=data.get("password", ""),
            )
            return jsonify({"success": True, "user_id": user_id}), 201
        except Exception as e:
            return error_response(e, action="registering")

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        try:
            s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except Exception as e:
            return error_response(e, action="logging in")

        session.clear()
        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name
        return jsonify({"success": True, "user_id": s_user.user_id, "name": s_user.full_name})

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    @login_required
    def logout():
        session.clear()
        return jsonify({"success": True})
