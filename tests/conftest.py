from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from internship_attendance.attendance.model import AttendanceRecord
from internship_attendance.core.enums import AttendanceStatus
from internship_attendance.students.model import AttendancePolicy


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 6, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def policy():
    return AttendancePolicy.create(start="2024-03-01", end="2024-08-31", days_per_week_allowed=5)


@pytest.fixture
def make_record():
    counter = {"id": 0}

    def _make(day, status=AttendanceStatus.PRESENT, student_id="stu-1"):
        counter["id"] += 1
        if isinstance(day, str):
            day = date.fromisoformat(day)
        return AttendanceRecord(
            attendance_id=counter["id"],
            student_id=student_id,
            work_date=day,
            status=status,
            marked_by="fac-1",
        )

    return _make
