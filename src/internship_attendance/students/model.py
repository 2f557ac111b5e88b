from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Iterable, Optional

from ..common.datetime_utils import as_calendar_date, format_iso_date
from ..core.constants import DEFAULT_DAYS_PER_WEEK, MAX_DAYS_PER_WEEK, MIN_DAYS_PER_WEEK, WEEKDAY_NAMES
from ..core.exceptions import MalformedInputError


@dataclass(frozen=True)
class AttendancePolicy:
    """Per-student rules: internship date range and weekly attendance quota.

    ``custom_days`` holds weekday indexes (Monday == 0) the student is allowed
    to attend on. ``None`` means the default Monday-Friday week.
    """

    internship_start_date: date
    internship_end_date: date
    days_per_week_allowed: int = DEFAULT_DAYS_PER_WEEK
    custom_days: Optional[FrozenSet[int]] = None

    @classmethod
    def create(
        cls,
        *,
        start: date | str,
        end: date | str,
        days_per_week_allowed: int = DEFAULT_DAYS_PER_WEEK,
        custom_days: Optional[Iterable[int | str]] = None,
    ) -> "AttendancePolicy":
        start_date = as_calendar_date(start)
        end_date = as_calendar_date(end)
        if start_date > end_date:
            raise MalformedInputError("Internship start date must not be after its end date")

        limit = int(days_per_week_allowed)
        if limit < MIN_DAYS_PER_WEEK or limit > MAX_DAYS_PER_WEEK:
            raise MalformedInputError(
                f"days_per_week_allowed must be between {MIN_DAYS_PER_WEEK} and {MAX_DAYS_PER_WEEK}"
            )

        days = None
        if custom_days:
            days = frozenset(_weekday_index(d) for d in custom_days)

        return cls(
            internship_start_date=start_date,
            internship_end_date=end_date,
            days_per_week_allowed=limit,
            custom_days=days,
        )

    def contains(self, day: date) -> bool:
        return self.internship_start_date <= day <= self.internship_end_date


def _weekday_index(value: int | str) -> int:
    if isinstance(value, int):
        if 0 <= value <= 6:
            return value
        raise MalformedInputError(f"Weekday index out of range: {value}")
    token = str(value).strip().lower()
    name = next((n for n in WEEKDAY_NAMES if n.lower() == token or n[:3].lower() == token), None)
    if name is None:
        raise MalformedInputError(f"Unknown weekday: {value!r}")
    return WEEKDAY_NAMES.index(name)


@dataclass(frozen=True)
class Student:
    """Domain entity: an intern and the attendance policy attached to them."""

    student_id: str
    full_name: str
    email: str
    policy: AttendancePolicy
    faculty_email: Optional[str] = None

    def to_dict(self) -> dict:
        policy = self.policy
        return {
            "student_id": self.student_id,
            "full_name": self.full_name,
            "email": self.email,
            "faculty_email": self.faculty_email,
            "internship_start_date": format_iso_date(policy.internship_start_date),
            "internship_end_date": format_iso_date(policy.internship_end_date),
            "days_per_week_allowed": policy.days_per_week_allowed,
            "custom_days": [WEEKDAY_NAMES[i] for i in sorted(policy.custom_days)] if policy.custom_days else None,
        }
