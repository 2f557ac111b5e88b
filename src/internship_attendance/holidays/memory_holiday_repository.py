from __future__ import annotations

import threading
from datetime import date
from typing import Optional, Sequence

from ..core.enums import HolidayKind
from .model import Holiday
from .repository import HolidayRepository


class InMemoryHolidayRepository(HolidayRepository):
    def __init__(self):
        self._holidays: dict[int, Holiday] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> Sequence[Holiday]:
        with self._lock:
            return sorted(self._holidays.values(), key=lambda h: h.holiday_date)

    def get_dates(self) -> frozenset[date]:
        with self._lock:
            return frozenset(h.holiday_date for h in self._holidays.values())

    def add(
        self,
        *,
        holiday_date: date,
        name: str,
        description: Optional[str] = None,
        kind: HolidayKind = HolidayKind.NATIONAL,
    ) -> Holiday:
        with self._lock:
            holiday = Holiday(
                holiday_id=self._next_id,
                holiday_date=holiday_date,
                name=name,
                description=description,
                kind=kind,
            )
            self._holidays[holiday.holiday_id] = holiday
            self._next_id += 1
            return holiday

    def remove(self, holiday_id: int) -> bool:
        with self._lock:
            return self._holidays.pop(int(holiday_id), None) is not None
