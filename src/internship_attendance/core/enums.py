from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization checks."""

    ADMIN = "admin"
    FACULTY = "faculty"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Attendance mark stored for a student on a calendar day."""

    PRESENT = "present"
    ABSENT = "absent"


class HolidayKind(str, Enum):
    NATIONAL = "national"
    STATE = "state"
    REGIONAL = "regional"
