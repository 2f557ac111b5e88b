from __future__ import annotations

from datetime import date

from ...core.constants import DEFAULT_WORKING_WEEKDAYS, MSG_WEEKEND
from .base import WorkingWeekStrategy


class DefaultWeekStrategy(WorkingWeekStrategy):
    """Monday to Friday; Saturday and Sunday are weekend days."""

    def is_permitted(self, day: date) -> bool:
        return day.weekday() in DEFAULT_WORKING_WEEKDAYS

    def rejection_reason(self, day: date) -> str:
        return MSG_WEEKEND

    def describe(self) -> str:
        return "Monday to Friday"
