"""Shared Flask helpers for the JSON controllers."""
from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import jsonify, session

ADMIN_SESSION_KEY = "is_admin"


def json_response(status: str, message: str = "", *, data: Optional[Any] = None, code: int = 200, **extra):
    body: dict = {"status": status}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    body.update(extra)
    return jsonify(body), code


def json_error(message: str, code: int, **extra):
    return json_response("error", message, code=code, **extra)


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get(ADMIN_SESSION_KEY):
            return json_error("Admin login required", 401)
        return view(*args, **kwargs)

    return wrapper
