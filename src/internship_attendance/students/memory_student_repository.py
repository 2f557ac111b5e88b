from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self, students: Iterable[Student] = ()):
        self._students: dict[str, Student] = {s.student_id: s for s in students}
        self._lock = threading.Lock()

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with self._lock:
            return self._students.get(student_id)

    def list_all(self) -> Sequence[Student]:
        with self._lock:
            return sorted(self._students.values(), key=lambda s: s.student_id)

    def save(self, student: Student) -> None:
        with self._lock:
            self._students[student.student_id] = student
