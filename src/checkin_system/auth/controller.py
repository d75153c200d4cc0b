from __future__ import annotations

from flask import Flask, request, session

from ..common.web import ADMIN_SESSION_KEY, json_error, json_response
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/login", methods=["POST"], endpoint="api_admin_login")
    def api_admin_login():
        body = request.get_json(silent=True) or {}
        try:
            container.admin_auth_service.authenticate(body.get("password") or "")
        except ValidationError as e:
            return json_error(str(e), 400)
        except AuthenticationError as e:
            app.logger.warning("Failed admin login from %s", request.remote_addr)
            return json_error(str(e), 401)

        session[ADMIN_SESSION_KEY] = True
        return json_response("success", "Login successful")

    @app.route("/api/admin/logout", methods=["POST"], endpoint="api_admin_logout")
    def api_admin_logout():
        session.pop(ADMIN_SESSION_KEY, None)
        return json_response("success", "Logged out")
