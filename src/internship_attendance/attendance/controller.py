from __future__ import annotations

from flask import Flask, request, session

from ..common.datetime_utils import format_iso_date
from ..common.responses import domain_error_response, error_response, success_response
from ..common.session_auth import current_role, json_body, login_required, require_own_record
from ..core.exceptions import DomainError
from ..container import Container


def _record_to_dict(r) -> dict:
    return {
        "attendance_id": r.attendance_id,
        "student_id": r.student_id,
        "date": format_iso_date(r.work_date),
        "status": r.status.value,
        "remark": r.remark,
        "marked_by": r.marked_by,
    }


def register(app: Flask, container: Container) -> None:
    @app.post("/api/faculty/attendance/validate", endpoint="validate_attendance")
    @login_required
    def validate_attendance():
        data = json_body()
        student_id = str(data.get("student_id", "")).strip()
        if not student_id or not data.get("date"):
            return error_response("student_id and date are required")

        try:
            result = container.attendance_service.validate_mark(student_id, data["date"])
        except DomainError as e:
            return domain_error_response(e)
        return success_response(result.to_dict())

    @app.post("/api/faculty/attendance/mark", endpoint="mark_attendance")
    @login_required
    def mark_attendance():
        data = json_body()
        student_id = str(data.get("student_id", "")).strip()
        if not student_id or not data.get("date") or not data.get("status"):
            return error_response("student_id, date and status are required")

        try:
            record = container.attendance_service.mark(
                current_role=current_role(),
                marked_by=str(session["user_id"]),
                student_id=student_id,
                mark_date=data["date"],
                status=data["status"],
                remark=data.get("remark"),
            )
        except DomainError as e:
            return domain_error_response(e)
        return success_response(_record_to_dict(record), message="Attendance marked successfully", status=201)

    @app.get("/api/attendance/check", endpoint="check_attendance_date")
    @login_required
    def check_attendance_date():
        value = request.args.get("date", "")
        if not value:
            return error_response("date is required")

        try:
            details = container.attendance_service.check_date(value, student_id=request.args.get("student_id") or None)
        except DomainError as e:
            return domain_error_response(e)
        return success_response(details.to_dict())

    @app.get("/api/students/<student_id>/attendance", endpoint="attendance_history")
    @login_required
    def attendance_history(student_id: str):
        try:
            require_own_record(student_id)
            rows = container.attendance_service.get_history(student_id)
        except DomainError as e:
            return domain_error_response(e)
        return success_response([_record_to_dict(r) for r in rows])

    @app.get("/api/students/<student_id>/attendance/summary", endpoint="attendance_summary")
    @login_required
    def attendance_summary(student_id: str):
        try:
            require_own_record(student_id)
            summary = container.attendance_service.get_summary(student_id)
        except DomainError as e:
            return domain_error_response(e)
        return success_response(summary.to_dict())
