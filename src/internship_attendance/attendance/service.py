from __future__ import annotations

import threading
from datetime import date
from typing import Callable, Optional, Sequence

from ..common.app_logger import get_logger
from ..common.datetime_utils import as_calendar_date, today_utc
from ..common.validators import optional_text
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AttendanceRejectedError, AuthorizationError, ValidationError
from ..holidays.repository import HolidayRepository
from ..students.model import Student
from ..students.service import StudentService
from .aggregator import build_summary
from .factory import WorkingWeekStrategyFactory
from .model import AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository
from .validator import ValidationDetails, ValidationResult, check_date, validate_attendance_markable

logger = get_logger("attendance")

_MARKING_ROLES = (Role.FACULTY, Role.ADMIN)


class AttendanceService:
    """Loads policy, holidays and history, runs the eligibility rules and persists accepted marks.

    Validation and insert for the same student run under one per-student lock,
    so two concurrent marks cannot both pass the duplicate and quota checks.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentService,
        holidays: HolidayRepository,
        *,
        strategy_factory: WorkingWeekStrategyFactory | None = None,
        quota_counts_present_only: bool = False,
        clock: Optional[Callable] = None,
    ):
        self._attendance = attendance
        self._students = students
        self._holidays = holidays
        self._factory = strategy_factory or WorkingWeekStrategyFactory()
        self._quota_counts_present_only = bool(quota_counts_present_only)
        self._clock = clock
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, student_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(student_id)
            if lock is None:
                lock = self._locks[student_id] = threading.Lock()
            return lock

    def _validate(self, student: Student, day: date) -> ValidationResult:
        return validate_attendance_markable(
            student.student_id,
            day,
            student.policy,
            self._holidays.get_dates(),
            self._attendance.get_history(student.student_id),
            quota_counts_present_only=self._quota_counts_present_only,
        )

    def validate_mark(self, student_id: str, mark_date: date | str) -> ValidationResult:
        student = self._students.get_student(student_id)
        return self._validate(student, as_calendar_date(mark_date))

    def check_date(self, mark_date: date | str, *, student_id: Optional[str] = None) -> ValidationDetails:
        """Weekend/holiday/range flags; range and weekday rule only apply when a student is given."""
        if student_id is None:
            return check_date(mark_date, self._holidays.get_dates())

        policy = self._students.get_student(student_id).policy
        return check_date(
            mark_date,
            self._holidays.get_dates(),
            start=policy.internship_start_date,
            end=policy.internship_end_date,
            strategy=self._factory.for_policy(policy),
        )

    def mark(
        self,
        *,
        current_role: Role,
        marked_by: str,
        student_id: str,
        mark_date: date | str,
        status: AttendanceStatus | str,
        remark: Optional[str] = None,
    ) -> AttendanceRecord:
        if current_role not in _MARKING_ROLES:
            raise AuthorizationError("Only faculty can mark attendance")

        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {status}")

        day = as_calendar_date(mark_date)
        remark = optional_text(remark, "Remark")
        student = self._students.get_student(student_id)

        with self._lock_for(student.student_id):
            result = self._validate(student, day)
            if not result.is_valid:
                logger.warning(
                    "attendance rejected student=%s date=%s reasons=%s",
                    student.student_id,
                    day.isoformat(),
                    "; ".join(result.errors),
                )
                raise AttendanceRejectedError(result)

            record = self._attendance.append(
                student_id=student.student_id,
                work_date=day,
                status=status,
                marked_by=marked_by,
                remark=remark,
            )

        logger.info(
            "attendance marked student=%s date=%s status=%s by=%s",
            student.student_id,
            day.isoformat(),
            status.value,
            marked_by,
        )
        return record

    def get_history(self, student_id: str) -> Sequence[AttendanceRecord]:
        self._students.get_student(student_id)
        return sorted(self._attendance.get_history(student_id), key=lambda r: r.work_date)

    def get_summary(self, student_id: str, *, today: Optional[date] = None) -> AttendanceSummary:
        student = self._students.get_student(student_id)
        return build_summary(
            student.policy,
            self._attendance.get_history(student_id),
            self._holidays.get_dates(),
            today or today_utc(self._clock),
        )
