from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for a student on a calendar day."""

    attendance_id: int
    student_id: str
    work_date: date
    status: AttendanceStatus
    marked_by: str
    remark: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceCount:
    present: int
    absent: int
    total: int


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model for the student dashboard."""

    total_working_days: int
    present_days: int
    absent_days: int
    attendance_percentage: int
    days_remaining: int
    days_used: int

    def to_dict(self) -> dict:
        return {
            "total_working_days": self.total_working_days,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "attendance_percentage": self.attendance_percentage,
            "days_remaining": self.days_remaining,
            "days_used": self.days_used,
        }
