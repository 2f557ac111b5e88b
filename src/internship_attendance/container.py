from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import WorkingWeekStrategyFactory
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .holidays.memory_holiday_repository import InMemoryHolidayRepository
from .holidays.service import HolidayService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    students_repo: InMemoryStudentRepository
    holidays_repo: InMemoryHolidayRepository
    attendance_repo: InMemoryAttendanceRepository

    student_service: StudentService
    holiday_service: HolidayService
    attendance_service: AttendanceService


def build_container(*, quota_counts_present_only: bool = False, clock=None) -> Container:
    students_repo = InMemoryStudentRepository()
    holidays_repo = InMemoryHolidayRepository()
    attendance_repo = InMemoryAttendanceRepository(clock=clock)

    student_service = StudentService(students_repo)
    holiday_service = HolidayService(holidays_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        student_service,
        holidays_repo,
        strategy_factory=WorkingWeekStrategyFactory(),
        quota_counts_present_only=quota_counts_present_only,
        clock=clock,
    )

    return Container(
        students_repo=students_repo,
        holidays_repo=holidays_repo,
        attendance_repo=attendance_repo,
        student_service=student_service,
        holiday_service=holiday_service,
        attendance_service=attendance_service,
    )
