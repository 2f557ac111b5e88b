from __future__ import annotations

from datetime import date
from typing import Iterable

from ...core.constants import WEEKDAY_NAMES
from .base import WorkingWeekStrategy


class CustomDaysStrategy(WorkingWeekStrategy):
    """Only an explicit set of weekdays is permitted (e.g. Mon/Wed/Fri)."""

    def __init__(self, days: Iterable[int]):
        self._days = frozenset(days)
        if not self._days:
            raise ValueError("CustomDaysStrategy needs at least one weekday")

    @property
    def days(self) -> frozenset[int]:
        return self._days

    def _names(self) -> list[str]:
        return [WEEKDAY_NAMES[i] for i in sorted(self._days)]

    def is_permitted(self, day: date) -> bool:
        return day.weekday() in self._days

    def rejection_reason(self, day: date) -> str:
        return f"Cannot mark attendance on {WEEKDAY_NAMES[day.weekday()]} (working days: {', '.join(self._names())})"

    def describe(self) -> str:
        if self._days == frozenset(range(5)):
            return "Monday to Friday"
        return ", ".join(self._names())
