from __future__ import annotations

from flask import Flask

from ..common.responses import domain_error_response, error_response, success_response
from ..common.session_auth import current_role, json_body, login_required, require_roles
from ..core.constants import DEFAULT_DAYS_PER_WEEK
from ..core.enums import Role
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/admin/students", endpoint="list_students")
    @login_required
    def list_students():
        try:
            require_roles(Role.ADMIN, Role.FACULTY)
        except DomainError as e:
            return domain_error_response(e)
        students = container.student_service.list_students()
        return success_response({"students": [s.to_dict() for s in students], "total": len(students)})

    @app.post("/api/admin/students", endpoint="create_student")
    @login_required
    def create_student():
        data = json_body()
        required = ("student_id", "full_name", "email", "internship_start_date", "internship_end_date")
        if any(not data.get(k) for k in required):
            return error_response(f"{', '.join(required)} are required")

        try:
            student = container.student_service.register_student(
                current_role=current_role(),
                student_id=data["student_id"],
                full_name=data["full_name"],
                email=data["email"],
                start=data["internship_start_date"],
                end=data["internship_end_date"],
                days_per_week_allowed=data.get("days_per_week_allowed", DEFAULT_DAYS_PER_WEEK),
                custom_days=data.get("custom_days"),
                faculty_email=data.get("faculty_email"),
            )
        except DomainError as e:
            return domain_error_response(e)
        return success_response(student.to_dict(), message="Student registered successfully", status=201)

    @app.put("/api/admin/students/<student_id>/policy", endpoint="update_student_policy")
    @login_required
    def update_student_policy(student_id: str):
        data = json_body()
        if not data.get("internship_start_date") or not data.get("internship_end_date"):
            return error_response("internship_start_date and internship_end_date are required")

        try:
            student = container.student_service.update_policy(
                current_role=current_role(),
                student_id=student_id,
                start=data["internship_start_date"],
                end=data["internship_end_date"],
                days_per_week_allowed=data.get("days_per_week_allowed", DEFAULT_DAYS_PER_WEEK),
                custom_days=data.get("custom_days"),
            )
        except DomainError as e:
            return domain_error_response(e)
        return success_response(student.to_dict(), message="Attendance policy updated")
