from __future__ import annotations

import logging
from functools import wraps

from flask import current_app, jsonify, session

from ..core.exceptions import AuthenticationError, ProfileIncompleteError, ValidationError

logger = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def error_response(e: Exception, *, action: str):
    """Map domain errors to JSON responses; anything unexpected is a 500."""

    if isinstance(e, ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400
    if isinstance(e, AuthenticationError):
        return jsonify({"success": False, "message": str(e)}), 401
    if isinstance(e, ProfileIncompleteError):
        return jsonify({"success": False, "message": str(e), "onboarding": True}), 409

    logger.exception("System error while %s", action)
    message = f"System error while {action}"
    if current_app.config.get("DEBUG"):
        message = f"{message}: {e}"
    return jsonify({"success": False, "message": message}), 500


def upload_too_large(e):
    limit_mb = (current_app.config.get("MAX_CONTENT_LENGTH") or 0) // (1024 * 1024)
    return jsonify({"success": False, "message": f"Uploaded file exceeds the {limit_mb} MB limit"}), 413
