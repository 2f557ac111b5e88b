from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import HolidayKind
from .model import Holiday


class HolidayRepository(Protocol):
    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def get_dates(self) -> frozenset[date]:
        raise NotImplementedError

    def add(
        self,
        *,
        holiday_date: date,
        name: str,
        description: Optional[str] = None,
        kind: HolidayKind = HolidayKind.NATIONAL,
    ) -> Holiday:
        raise NotImplementedError

    def remove(self, holiday_id: int) -> bool:
        raise NotImplementedError
