from __future__ import annotations

from datetime import date
from typing import AbstractSet, Iterable

from ..core.enums import AttendanceStatus
from ..students.model import AttendancePolicy
from .model import AttendanceCount, AttendanceRecord, AttendanceSummary
from .working_days import total_working_days


def count_attendance(records: Iterable[AttendanceRecord], start: date, end: date) -> AttendanceCount:
    present = 0
    absent = 0
    for r in records:
        if not (start <= r.work_date <= end):
            continue
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        else:
            absent += 1
    return AttendanceCount(present=present, absent=absent, total=present + absent)


def attendance_percentage(present_days: int, total_working_days: int) -> int:
    """Whole-number percentage, halves rounded up, capped at 100.

    Returns 0 when there are no working days.
    """
    if total_working_days <= 0:
        return 0
    # integer form of floor(100 * p / t + 0.5)
    pct = (200 * present_days + total_working_days) // (2 * total_working_days)
    return max(0, min(100, pct))


def days_remaining(policy: AttendancePolicy, today: date) -> int:
    return max(0, (policy.internship_end_date - today).days)


def days_used(policy: AttendancePolicy, today: date) -> int:
    return max(0, (today - policy.internship_start_date).days)


def build_summary(
    policy: AttendancePolicy,
    records: Iterable[AttendanceRecord],
    holidays: AbstractSet[date],
    today: date,
) -> AttendanceSummary:
    counts = count_attendance(records, policy.internship_start_date, policy.internship_end_date)
    working = total_working_days(policy, holidays)
    return AttendanceSummary(
        total_working_days=working,
        present_days=counts.present,
        absent_days=counts.absent,
        attendance_percentage=attendance_percentage(counts.present, working),
        days_remaining=days_remaining(policy, today),
        days_used=days_used(policy, today),
    )
