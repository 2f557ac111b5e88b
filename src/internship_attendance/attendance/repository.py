from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_history(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def append(
        self,
        *,
        student_id: str,
        work_date: date,
        status: AttendanceStatus,
        marked_by: str,
        remark: Optional[str] = None,
    ) -> AttendanceRecord:
        """Store a new record. Callers validate before appending."""

        raise NotImplementedError
