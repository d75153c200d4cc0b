from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, json_error, json_response
from ..core.constants import SEARCH_RESULT_LIMIT
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..container import Container
from .roster_parser import find_duplicate_names, read_roster_file


def register(app: Flask, container: Container) -> None:
    @app.route("/api/search-students", methods=["GET"], endpoint="api_search_students")
    def api_search_students():
        query = (request.args.get("query") or "").strip()
        if not query:
            return json_response("error", "Query must be at least 1 character", students=[])

        try:
            students = container.roster_service.search(query, limit=SEARCH_RESULT_LIMIT)
        except Exception:
            app.logger.exception("Student search failed")
            return json_error("Failed to search students", 500, students=[])

        return json_response("success", students=[s.to_dict() for s in students])

    @app.route("/api/admin/students", methods=["GET"], endpoint="api_admin_students")
    @admin_required
    def api_admin_students():
        students = container.roster_service.list_active()
        return json_response("success", data=[s.to_dict() for s in students])

    @app.route("/api/admin/add-student", methods=["POST"], endpoint="api_add_student")
    @admin_required
    def api_add_student():
        body = request.get_json(silent=True) or {}
        try:
            student = container.roster_service.add_student(
                first_name=body.get("firstName") or "",
                last_name=body.get("lastName") or "",
                class_type=body.get("classType") or "",
            )
        except ConflictError as e:
            return json_error(str(e), 409)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            app.logger.exception("Adding student failed")
            return json_error("Failed to add student", 500)

        return json_response(
            "success",
            "Student added successfully",
            studentId=student.student_id,
            studentName=student.name,
        )

    @app.route("/api/admin/delete-student", methods=["DELETE"], endpoint="api_delete_student")
    @admin_required
    def api_delete_student():
        body = request.get_json(silent=True) or {}
        try:
            container.roster_service.delete_student(body.get("studentId"))
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            app.logger.exception("Deleting student failed")
            return json_error("Failed to delete student", 500)

        return json_response("success", "Student deleted successfully")

    @app.route("/api/admin/upload-roster", methods=["POST"], endpoint="api_upload_roster")
    @admin_required
    def api_upload_roster():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return json_error("No file uploaded", 400)

        try:
            parsed = read_roster_file(upload.stream, upload.filename)
            if not parsed.students:
                return json_error(
                    "No valid students found in the file",
                    400,
                    data={"errors": parsed.errors, "totalRows": parsed.total_rows},
                )
            summary = container.roster_service.bulk_import(parsed.students)
        except ValidationError as e:
            return json_error(str(e), 400)
        except Exception:
            app.logger.exception("Roster upload failed")
            return json_error("Failed to import roster", 500)

        data = summary.to_dict()
        data["errors"] = parsed.errors + data["errors"]
        data["totalRows"] = parsed.total_rows
        data["duplicates"] = find_duplicate_names(parsed.students)
        return json_response(
            "success",
            f"Imported {summary.success} students ({summary.skipped} skipped, {summary.failed} failed)",
            data=data,
        )
