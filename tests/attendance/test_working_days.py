from datetime import date, timedelta

import pytest

from internship_attendance.attendance.strategies.custom_strategy import CustomDaysStrategy
from internship_attendance.attendance.working_days import (
    describe_working_days,
    holiday_set,
    is_holiday,
    is_weekend,
    is_working_day,
    next_working_day,
    parse_custom_working_days,
    total_working_days,
    working_days_in_range,
    working_days_in_week,
)
from internship_attendance.core.exceptions import MalformedInputError
from internship_attendance.students.model import AttendancePolicy


def test_weekend_days_are_never_working_days_without_override():
    # 2024-03-09 is a Saturday
    saturday = date(2024, 3, 9)
    for d in (saturday, saturday + timedelta(days=1)):
        assert is_weekend(d)
        assert not is_working_day(d, frozenset())


def test_holiday_on_a_weekday_is_not_a_working_day():
    tuesday = date(2024, 3, 5)
    holidays = frozenset({tuesday})
    assert not is_weekend(tuesday)
    assert is_holiday(tuesday, holidays)
    assert not is_working_day(tuesday, holidays)


def test_range_is_ascending_and_bounded():
    start, end = date(2024, 2, 26), date(2024, 3, 17)
    days = working_days_in_range(start, end, frozenset({date(2024, 3, 6)}))

    assert days == sorted(set(days))
    assert all(start <= d <= end for d in days)
    assert date(2024, 3, 6) not in days
    assert len(days) == 14


def test_range_with_start_after_end_is_empty():
    assert working_days_in_range(date(2024, 3, 10), date(2024, 3, 1), frozenset()) == []


def test_single_day_range_includes_both_ends():
    monday = date(2024, 3, 4)
    assert working_days_in_range(monday, monday, frozenset()) == [monday]


def test_week_is_anchored_on_monday():
    expected = [date(2024, 3, 4) + timedelta(days=i) for i in range(5)]
    # Thursday and Sunday of the same week resolve to the same Mon-Fri span
    assert working_days_in_week(date(2024, 3, 7), frozenset()) == expected
    assert working_days_in_week(date(2024, 3, 10), frozenset()) == expected


def test_week_excludes_holidays():
    days = working_days_in_week(date(2024, 3, 7), frozenset({date(2024, 3, 5)}))
    assert date(2024, 3, 5) not in days
    assert len(days) == 4


def test_custom_days_override_the_default_weekend():
    strategy = CustomDaysStrategy({0, 2, 5})  # Mon, Wed, Sat
    assert is_weekend(date(2024, 3, 5), strategy)  # Tuesday
    assert not is_weekend(date(2024, 3, 9), strategy)  # Saturday
    assert working_days_in_week(date(2024, 3, 7), frozenset(), strategy) == [
        date(2024, 3, 4),
        date(2024, 3, 6),
        date(2024, 3, 9),
    ]


def test_total_working_days_uses_policy_range_and_custom_days():
    policy = AttendancePolicy.create(start="2024-03-04", end="2024-03-15", days_per_week_allowed=3)
    assert total_working_days(policy, frozenset()) == 10
    assert total_working_days(policy, frozenset({date(2024, 3, 8)})) == 9

    custom = AttendancePolicy.create(
        start="2024-03-04", end="2024-03-15", days_per_week_allowed=3, custom_days=["Monday", "Friday"]
    )
    assert total_working_days(custom, frozenset()) == 4


def test_next_working_day_skips_weekend_and_holidays():
    friday = date(2024, 3, 8)
    assert next_working_day(friday, frozenset()) == date(2024, 3, 11)
    assert next_working_day(friday, frozenset({date(2024, 3, 11)})) == date(2024, 3, 12)


def test_holiday_set_accepts_iso_strings_and_rejects_garbage():
    assert holiday_set(["2024-03-05", date(2024, 3, 6)]) == {date(2024, 3, 5), date(2024, 3, 6)}
    assert holiday_set(None) == frozenset()
    with pytest.raises(MalformedInputError):
        holiday_set(["05/03/2024"])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Mon,Wed,Fri", ["Monday", "Wednesday", "Friday"]),
        ("monday, WEDNESDAY , friday", ["Monday", "Wednesday", "Friday"]),
        ("Mon, Funday", ["Monday"]),
        ("", None),
        ("nope", None),
    ],
)
def test_parse_custom_working_days(text, expected):
    assert parse_custom_working_days(text) == expected


def test_describe_working_days():
    base = dict(start="2024-03-01", end="2024-08-31")
    assert describe_working_days(AttendancePolicy.create(**base, days_per_week_allowed=5)) == "Monday to Friday"
    # the default rule never permits Saturday, whatever the quota
    assert describe_working_days(AttendancePolicy.create(**base, days_per_week_allowed=6)) == "Monday to Friday"
    assert describe_working_days(AttendancePolicy.create(**base, days_per_week_allowed=3)) == "3 days per week (Monday to Friday)"
    assert (
        describe_working_days(AttendancePolicy.create(**base, days_per_week_allowed=3, custom_days=["Fri", "Mon"]))
        == "Monday, Friday"
    )
