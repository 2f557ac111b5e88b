from __future__ import annotations

import threading
from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, *, clock: Optional[Callable] = None):
        self._by_student: dict[str, list[AttendanceRecord]] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self._clock = clock or now_utc

    def get_history(self, student_id: str) -> Sequence[AttendanceRecord]:
        with self._lock:
            return tuple(self._by_student.get(student_id, ()))

    def append(
        self,
        *,
        student_id: str,
        work_date: date,
        status: AttendanceStatus,
        marked_by: str,
        remark: Optional[str] = None,
    ) -> AttendanceRecord:
        with self._lock:
            rec = AttendanceRecord(
                attendance_id=self._next_id,
                student_id=student_id,
                work_date=work_date,
                status=status,
                marked_by=marked_by,
                remark=remark,
                created_at=self._clock(),
            )
            self._next_id += 1
            self._by_student.setdefault(student_id, []).append(rec)
            return rec
