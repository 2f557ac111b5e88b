from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..attendance.working_days import parse_custom_working_days
from ..common.validators import optional_text, require_int_in_range, require_non_empty
from ..core.constants import DEFAULT_DAYS_PER_WEEK, MAX_DAYS_PER_WEEK, MIN_DAYS_PER_WEEK
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import AttendancePolicy, Student
from .repository import StudentRepository


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def get_student(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError(f"Student {student_id} not found")
        return student

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    @staticmethod
    def _build_policy(
        *,
        start: date | str,
        end: date | str,
        days_per_week_allowed,
        custom_days: Optional[str],
    ) -> AttendancePolicy:
        limit = require_int_in_range(days_per_week_allowed, "Days per week", MIN_DAYS_PER_WEEK, MAX_DAYS_PER_WEEK)
        return AttendancePolicy.create(
            start=start,
            end=end,
            days_per_week_allowed=limit,
            custom_days=parse_custom_working_days(optional_text(custom_days, "Custom working days")),
        )

    def register_student(
        self,
        *,
        current_role: Role,
        student_id: str,
        full_name: str,
        email: str,
        start: date | str,
        end: date | str,
        days_per_week_allowed=DEFAULT_DAYS_PER_WEEK,
        custom_days: Optional[str] = None,
        faculty_email: Optional[str] = None,
    ) -> Student:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can register students")

        student = Student(
            student_id=require_non_empty(student_id, "Student id"),
            full_name=require_non_empty(full_name, "Full name"),
            email=require_non_empty(email, "Email"),
            policy=self._build_policy(
                start=start,
                end=end,
                days_per_week_allowed=days_per_week_allowed,
                custom_days=custom_days,
            ),
            faculty_email=optional_text(faculty_email, "Faculty email"),
        )
        self._students.save(student)
        return student

    def update_policy(
        self,
        *,
        current_role: Role,
        student_id: str,
        start: date | str,
        end: date | str,
        days_per_week_allowed,
        custom_days: Optional[str] = None,
    ) -> Student:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can change attendance policies")

        student = self.get_student(student_id)
        updated = replace(
            student,
            policy=self._build_policy(
                start=start,
                end=end,
                days_per_week_allowed=days_per_week_allowed,
                custom_days=custom_days,
            ),
        )
        self._students.save(updated)
        return updated
