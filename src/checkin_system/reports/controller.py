from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_positive_int
from ..common.web import admin_required, json_error, json_response
from ..core.exceptions import ValidationError
from ..container import Container
from .export import weekly_report_csv
from .service import WeeklyReport


def register(app: Flask, container: Container) -> None:
    def _build_report(params) -> WeeklyReport:
        """Week number wins; otherwise an explicit startDate/endDate range."""
        week_s = params.get("weekNumber")
        if week_s not in (None, ""):
            return container.report_service.weekly_report(require_positive_int(week_s, "week number"))

        start_s = params.get("startDate")
        end_s = params.get("endDate")
        if not start_s or not end_s:
            raise ValidationError("Week number or start and end dates are required")
        try:
            start = parse_iso_date(start_s)
            end = parse_iso_date(end_s)
        except ValueError:
            raise ValidationError("Dates must be YYYY-MM-DD")
        return container.report_service.date_range_report(start=start, end=end)

    @app.route("/api/admin/weekly-report", methods=["POST"], endpoint="api_weekly_report")
    @admin_required
    def api_weekly_report():
        body = request.get_json(silent=True) or {}
        try:
            report = _build_report(body)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            app.logger.exception("Weekly report failed")
            return json_error("Failed to generate report", 500)

        if report.total_sessions == 0:
            return json_response(
                "warning",
                f"No attendance records found for week {report.week_number}",
                data=report.to_dict(),
            )
        return json_response("success", data=report.to_dict())

    @app.route("/api/admin/weekly-report.csv", methods=["GET"], endpoint="api_weekly_report_csv")
    @admin_required
    def api_weekly_report_csv():
        try:
            report = _build_report(request.args)
        except ValidationError as e:
            return json_error(str(e), 400)

        filename = f"attendance_week_{report.week_number}_{report.start_date:%Y-%m-%d}.csv"
        return app.response_class(
            weekly_report_csv(report),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/admin/student-report", methods=["POST"], endpoint="api_student_report")
    @admin_required
    def api_student_report():
        body = request.get_json(silent=True) or {}
        student_id = body.get("studentId")
        try:
            report = container.report_service.student_report(
                student_id=int(student_id) if student_id not in (None, "") else None,
                student_name=body.get("studentName"),
            )
        except (TypeError, ValueError):
            return json_error("Invalid student ID", 400)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            app.logger.exception("Student report failed")
            return json_error("Failed to generate student report", 500)

        if report is None:
            return json_response("warning", "No attendance records found for this student", data=None)
        return json_response("success", data=report.to_dict())
