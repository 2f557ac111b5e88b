from datetime import date, datetime, timedelta, timezone

import pytest

from internship_attendance.common.datetime_utils import as_calendar_date, format_iso_date, parse_iso_date, today_utc
from internship_attendance.core.exceptions import MalformedInputError


def test_parse_iso_date():
    assert parse_iso_date("2024-03-05") == date(2024, 3, 5)
    assert format_iso_date(date(2024, 3, 5)) == "2024-03-05"


@pytest.mark.parametrize("value", ["", "2024-02-30", "2024/03/05", "yesterday", None, 20240305])
def test_malformed_dates(value):
    with pytest.raises(MalformedInputError):
        parse_iso_date(value)


def test_datetime_is_not_a_calendar_date():
    with pytest.raises(MalformedInputError):
        as_calendar_date(datetime(2024, 3, 5, 10, 0))
    assert as_calendar_date(date(2024, 3, 5)) == date(2024, 3, 5)


def test_today_is_the_utc_calendar_day():
    # 23:30 on the 5th at UTC-5 is already the 6th in UTC
    local = datetime(2024, 3, 5, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert today_utc(lambda: local) == date(2024, 3, 6)
