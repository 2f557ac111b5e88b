from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..students.model import AttendancePolicy
from .strategies.base import WorkingWeekStrategy
from .strategies.custom_strategy import CustomDaysStrategy
from .strategies.default_strategy import DefaultWeekStrategy


@dataclass
class WorkingWeekStrategyFactory:
    """Factory Pattern: choose the working-week rule for a student's policy."""

    def for_policy(self, policy: Optional[AttendancePolicy]) -> WorkingWeekStrategy:
        if policy is not None and policy.custom_days:
            return CustomDaysStrategy(policy.custom_days)
        return DefaultWeekStrategy()


def strategy_for(policy: Optional[AttendancePolicy]) -> WorkingWeekStrategy:
    return WorkingWeekStrategyFactory().for_policy(policy)
