from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class WorkingWeekStrategy(ABC):
    """Strategy Pattern: decide which weekdays a student may attend on."""

    @abstractmethod
    def is_permitted(self, day: date) -> bool:
        raise NotImplementedError

    @abstractmethod
    def rejection_reason(self, day: date) -> str:
        raise NotImplementedError

    @abstractmethod
    def describe(self) -> str:
        raise NotImplementedError
