from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import HolidayKind


@dataclass(frozen=True)
class Holiday:
    """Domain entity: a non-working calendar day for all students."""

    holiday_id: int
    holiday_date: date
    name: str
    description: Optional[str] = None
    kind: HolidayKind = HolidayKind.NATIONAL

    def to_dict(self) -> dict:
        return {
            "holiday_id": self.holiday_id,
            "date": format_iso_date(self.holiday_date),
            "name": self.name,
            "description": self.description,
            "kind": self.kind.value,
        }
