"""Attendance eligibility rules.

``validate_attendance_markable`` runs four checks in a fixed order and
collects every failure:

1. the date lies inside the internship period;
2. the date is a working day (weekday rule first, then holidays);
3. no attendance is already recorded for the date;
4. the student has not used up the weekly quota.

Business-rule failures come back as a ``ValidationResult``. A date that cannot
be parsed raises ``MalformedInputError`` instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import AbstractSet, Iterable, Optional

from ..common.datetime_utils import as_calendar_date
from ..core.constants import MSG_DUPLICATE, MSG_HOLIDAY, MSG_OUTSIDE_INTERNSHIP, MSG_WEEKLY_LIMIT
from ..core.enums import AttendanceStatus
from ..students.model import AttendancePolicy
from .factory import strategy_for
from .model import AttendanceRecord
from .strategies.base import WorkingWeekStrategy
from .working_days import holiday_set, is_holiday, is_weekend, working_days_in_week


@dataclass(frozen=True)
class ValidationDetails:
    is_weekend: bool = False
    is_holiday: bool = False
    exceeds_weekly_limit: bool = False
    outside_internship_range: bool = False

    def to_dict(self) -> dict:
        return {
            "is_weekend": self.is_weekend,
            "is_holiday": self.is_holiday,
            "exceeds_weekly_limit": self.exceeds_weekly_limit,
            "outside_internship_range": self.outside_internship_range,
        }


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: tuple[str, ...] = ()
    details: ValidationDetails = field(default_factory=ValidationDetails)

    @property
    def reason(self) -> Optional[str]:
        return self.errors[0] if self.errors else None

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "reason": self.reason,
            "errors": list(self.errors),
            "details": self.details.to_dict(),
        }


def weekly_attendance_count(
    day: date,
    records: Iterable[AttendanceRecord],
    holidays: AbstractSet[date],
    strategy: Optional[WorkingWeekStrategy] = None,
    *,
    present_only: bool = False,
) -> int:
    """Existing marks falling on the working days of ``day``'s week."""
    week = set(working_days_in_week(day, holidays, strategy))
    return sum(
        1
        for r in records
        if r.work_date in week and (not present_only or r.status == AttendanceStatus.PRESENT)
    )


def validate_attendance_markable(
    student_id: str,
    mark_date: date | str,
    policy: AttendancePolicy,
    holidays: Iterable[date | str],
    existing_attendance: Iterable[AttendanceRecord],
    *,
    quota_counts_present_only: bool = False,
) -> ValidationResult:
    """Decide whether a new attendance mark for ``student_id`` is admissible.

    ``existing_attendance`` must be that student's own history; records of
    other students are ignored.
    """
    day = as_calendar_date(mark_date)
    holiday_dates = holiday_set(holidays)
    strategy = strategy_for(policy)
    history = [r for r in existing_attendance if r.student_id == student_id]

    errors: list[str] = []

    outside = not policy.contains(day)
    if outside:
        errors.append(MSG_OUTSIDE_INTERNSHIP)

    weekend = is_weekend(day, strategy)
    holiday = is_holiday(day, holiday_dates)
    if weekend:
        errors.append(strategy.rejection_reason(day))
    elif holiday:
        errors.append(MSG_HOLIDAY)

    if any(r.work_date == day for r in history):
        errors.append(MSG_DUPLICATE)

    used = weekly_attendance_count(day, history, holiday_dates, strategy, present_only=quota_counts_present_only)
    exceeds = used >= policy.days_per_week_allowed
    if exceeds:
        errors.append(MSG_WEEKLY_LIMIT.format(limit=policy.days_per_week_allowed))

    return ValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        details=ValidationDetails(
            is_weekend=weekend,
            is_holiday=holiday,
            exceeds_weekly_limit=exceeds,
            outside_internship_range=outside,
        ),
    )


def check_date(
    mark_date: date | str,
    holidays: Iterable[date | str],
    *,
    start: Optional[date | str] = None,
    end: Optional[date | str] = None,
    strategy: Optional[WorkingWeekStrategy] = None,
) -> ValidationDetails:
    """Pre-flight flags for a date without a full policy.

    Range bounds are optional; a missing bound is not checked. The weekly
    limit needs attendance history and is never flagged here.
    """
    day = as_calendar_date(mark_date)
    holiday_dates = holiday_set(holidays)

    outside = False
    if start is not None and day < as_calendar_date(start):
        outside = True
    if end is not None and day > as_calendar_date(end):
        outside = True

    return ValidationDetails(
        is_weekend=is_weekend(day, strategy),
        is_holiday=is_holiday(day, holiday_dates),
        exceeds_weekly_limit=False,
        outside_internship_range=outside,
    )
