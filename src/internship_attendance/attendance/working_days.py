"""Working-day calendar.

A working day is a calendar date that the student's working-week rule
permits (Monday-Friday unless a custom weekday set is configured) and that is
not a registered holiday. All functions are pure and operate on plain
``datetime.date`` values.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import AbstractSet, Iterable, Optional, Sequence

from ..common.datetime_utils import as_calendar_date
from ..core.constants import DEFAULT_DAYS_PER_WEEK, WEEKDAY_NAMES
from ..students.model import AttendancePolicy
from .factory import strategy_for
from .strategies.base import WorkingWeekStrategy
from .strategies.default_strategy import DefaultWeekStrategy

_ONE_DAY = timedelta(days=1)
_DEFAULT_WEEK = DefaultWeekStrategy()

_DAY_ABBREVIATIONS = {name[:3].lower(): name for name in WEEKDAY_NAMES}


def holiday_set(values: Optional[Iterable[date | str]]) -> frozenset[date]:
    """Normalise holiday dates (date objects or ISO strings) into a set."""
    if not values:
        return frozenset()
    return frozenset(as_calendar_date(v) for v in values)


def is_weekend(day: date, strategy: Optional[WorkingWeekStrategy] = None) -> bool:
    return not (strategy or _DEFAULT_WEEK).is_permitted(day)


def is_holiday(day: date, holidays: AbstractSet[date]) -> bool:
    return day in holidays


def is_working_day(day: date, holidays: AbstractSet[date], strategy: Optional[WorkingWeekStrategy] = None) -> bool:
    return not is_weekend(day, strategy) and not is_holiday(day, holidays)


def working_days_in_range(
    start: date,
    end: date,
    holidays: AbstractSet[date],
    strategy: Optional[WorkingWeekStrategy] = None,
) -> list[date]:
    """Working days from ``start`` to ``end`` inclusive, ascending.

    Returns an empty list when ``start`` is after ``end``.
    """
    days: list[date] = []
    current = start
    while current <= end:
        if is_working_day(current, holidays, strategy):
            days.append(current)
        current += _ONE_DAY
    return days


def week_start(day: date) -> date:
    """Monday of the calendar week containing ``day``."""
    return day - timedelta(days=day.weekday())


def working_days_in_week(
    day: date,
    holidays: AbstractSet[date],
    strategy: Optional[WorkingWeekStrategy] = None,
) -> list[date]:
    """Working days of the Monday-anchored week containing ``day``.

    With the default rule Saturday and Sunday never qualify, so this is the
    Monday-Friday span minus holidays.
    """
    monday = week_start(day)
    return working_days_in_range(monday, monday + timedelta(days=6), holidays, strategy)


def total_working_days(policy: AttendancePolicy, holidays: AbstractSet[date]) -> int:
    return len(
        working_days_in_range(
            policy.internship_start_date,
            policy.internship_end_date,
            holidays,
            strategy_for(policy),
        )
    )


def next_working_day(
    day: date,
    holidays: AbstractSet[date],
    strategy: Optional[WorkingWeekStrategy] = None,
) -> date:
    """First working day strictly after ``day``."""
    rule = strategy or _DEFAULT_WEEK
    if not any(rule.is_permitted(day + timedelta(days=i)) for i in range(1, 8)):
        raise ValueError("Working-week rule permits no weekday")

    current = day + _ONE_DAY
    while not is_working_day(current, holidays, rule):
        current += _ONE_DAY
    return current


def parse_custom_working_days(text: Optional[str]) -> Optional[Sequence[str]]:
    """Parse "Mon,Wed,Fri" or "Monday, Wednesday, Friday" into weekday names.

    Unknown tokens are dropped; returns None when nothing usable remains.
    """
    if not text or not text.strip():
        return None

    days: list[str] = []
    for token in text.split(","):
        token = token.strip().lower()
        name = _DAY_ABBREVIATIONS.get(token) or token.capitalize()
        if name in WEEKDAY_NAMES and name not in days:
            days.append(name)

    return days or None


def describe_working_days(policy: AttendancePolicy) -> str:
    """Human-readable form of the weekday rule actually applied to the student."""
    week = strategy_for(policy).describe()
    if policy.custom_days or policy.days_per_week_allowed >= DEFAULT_DAYS_PER_WEEK:
        return week
    return f"{policy.days_per_week_allowed} days per week ({week})"
