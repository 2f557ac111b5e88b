from datetime import date

import pytest

from internship_attendance.attendance.aggregator import (
    attendance_percentage,
    build_summary,
    count_attendance,
    days_remaining,
    days_used,
)
from internship_attendance.core.enums import AttendanceStatus
from internship_attendance.students.model import AttendancePolicy


def test_count_attendance_filters_to_inclusive_range(make_record):
    records = [
        make_record("2024-03-01"),
        make_record("2024-03-04", status=AttendanceStatus.ABSENT),
        make_record("2024-03-05"),
        make_record("2024-03-11"),
    ]

    counts = count_attendance(records, date(2024, 3, 1), date(2024, 3, 5))

    assert (counts.present, counts.absent) == (2, 1)
    assert counts.total == counts.present + counts.absent


def test_count_attendance_empty():
    counts = count_attendance([], date(2024, 3, 1), date(2024, 3, 5))
    assert (counts.present, counts.absent, counts.total) == (0, 0, 0)


@pytest.mark.parametrize(
    "present, total, expected",
    [
        (0, 0, 0),
        (5, 0, 0),
        (0, 10, 0),
        (10, 10, 100),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),  # 12.5 rounds up
    ],
)
def test_attendance_percentage(present, total, expected):
    assert attendance_percentage(present, total) == expected


def test_days_remaining_never_negative(policy):
    assert days_remaining(policy, date(2024, 8, 30)) == 1
    assert days_remaining(policy, date(2024, 8, 31)) == 0
    assert days_remaining(policy, date(2024, 9, 15)) == 0


def test_days_used(policy):
    assert days_used(policy, date(2024, 2, 1)) == 0
    assert days_used(policy, date(2024, 3, 11)) == 10


def test_build_summary(make_record):
    policy = AttendancePolicy.create(start="2024-03-04", end="2024-03-15", days_per_week_allowed=5)
    records = [
        make_record("2024-03-04"),
        make_record("2024-03-05"),
        make_record("2024-03-06", status=AttendanceStatus.ABSENT),
    ]

    summary = build_summary(policy, records, frozenset({date(2024, 3, 15)}), date(2024, 3, 7))

    assert summary.total_working_days == 9
    assert summary.present_days == 2
    assert summary.absent_days == 1
    assert summary.attendance_percentage == 22
    assert summary.days_remaining == 8
    assert summary.days_used == 3
