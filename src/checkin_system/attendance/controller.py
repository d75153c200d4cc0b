from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import admin_required, json_error, json_response
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..core.exceptions import CheckInRejectedError, NotFoundError, ValidationError
from ..container import Container
from .weeks import week_date_range, week_number


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checkin", methods=["POST"], endpoint="api_checkin")
    def api_checkin():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        raw_name = body.get("name")
        raw_action = body.get("action")
        name = raw_name.strip() if isinstance(raw_name, str) else ""
        action = raw_action if isinstance(raw_action, str) else ""

        app.logger.info("Check-in request: name=%r action=%r", name, action)

        if not name:
            return json_error("Student name is required", 400)

        try:
            outcome = container.attendance_service.submit(name, action)
        except CheckInRejectedError as e:
            return json_error(str(e), 403, reason=e.evaluation.reason.value, data=e.evaluation.to_dict())
        except NotFoundError as e:
            return json_error(str(e), 404)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            app.logger.exception("Check-in failed")
            return json_error("Failed to log attendance", 500)

        body = outcome.to_dict()
        return json_response(body["status"], body["message"], data=body["data"])

    @app.route("/api/week", methods=["GET"], endpoint="api_week")
    def api_week():
        epoch = container.checkin.epoch_date
        date_s = request.args.get("date")
        try:
            if date_s:
                day = parse_iso_date(date_s)
            else:
                day = container.evaluator.local_time(container.attendance_service.now()).date()
        except ValueError:
            return json_error("Date must be YYYY-MM-DD", 400)

        week = week_date_range(week_number(day, epoch), epoch)
        return json_response("success", data=week.to_dict())

    @app.route("/api/admin/recent-attendance", methods=["GET"], endpoint="api_recent_attendance")
    @admin_required
    def api_recent_attendance():
        limit_s = request.args.get("limit") or str(DEFAULT_RECENT_LIMIT)
        limit = int(limit_s) if limit_s.isdigit() and int(limit_s) > 0 else DEFAULT_RECENT_LIMIT
        records = container.attendance_service.recent(limit)
        return json_response("success", data=[r.to_dict() for r in records])
