from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.app_logger import get_logger
from ..common.datetime_utils import as_calendar_date
from ..common.validators import optional_text, require_non_empty
from ..core.enums import HolidayKind, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import Holiday
from .repository import HolidayRepository

logger = get_logger("holidays")


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_holidays(self) -> Sequence[Holiday]:
        return self._holidays.list_all()

    def holiday_dates(self) -> frozenset[date]:
        return self._holidays.get_dates()

    def add_holiday(
        self,
        *,
        current_role: Role,
        holiday_date: date | str,
        name: str,
        description: Optional[str] = None,
        kind: HolidayKind | str = HolidayKind.NATIONAL,
    ) -> Holiday:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can manage holidays")

        day = as_calendar_date(holiday_date)
        name = require_non_empty(name, "Holiday name")
        try:
            kind = HolidayKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown holiday type: {kind}")

        if day in self._holidays.get_dates():
            raise ValidationError(f"A holiday is already registered on {day.isoformat()}")

        holiday = self._holidays.add(
            holiday_date=day,
            name=name,
            description=optional_text(description, "Description"),
            kind=kind,
        )
        logger.info("holiday %s added on %s", holiday.holiday_id, day.isoformat())
        return holiday

    def remove_holiday(self, *, current_role: Role, holiday_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can manage holidays")

        if not self._holidays.remove(int(holiday_id)):
            raise NotFoundError(f"Holiday {holiday_id} not found")
        logger.info("holiday %s removed", holiday_id)
