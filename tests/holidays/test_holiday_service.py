from datetime import date

import pytest

from internship_attendance.core.enums import HolidayKind, Role
from internship_attendance.core.exceptions import AuthorizationError, MalformedInputError, NotFoundError, ValidationError
from internship_attendance.holidays.memory_holiday_repository import InMemoryHolidayRepository
from internship_attendance.holidays.service import HolidayService


def test_admin_can_add_and_remove_holiday():
    svc = HolidayService(InMemoryHolidayRepository())

    holiday = svc.add_holiday(current_role=Role.ADMIN, holiday_date="2024-08-15", name=" Independence Day ", kind="state")

    assert holiday.holiday_date == date(2024, 8, 15)
    assert holiday.name == "Independence Day"
    assert holiday.kind == HolidayKind.STATE
    assert svc.holiday_dates() == {date(2024, 8, 15)}

    svc.remove_holiday(current_role=Role.ADMIN, holiday_id=holiday.holiday_id)
    assert svc.list_holidays() == []


def test_holidays_are_listed_by_date():
    svc = HolidayService(InMemoryHolidayRepository())
    svc.add_holiday(current_role=Role.ADMIN, holiday_date="2024-12-25", name="Christmas")
    svc.add_holiday(current_role=Role.ADMIN, holiday_date="2024-01-26", name="Republic Day")

    assert [h.name for h in svc.list_holidays()] == ["Republic Day", "Christmas"]


def test_faculty_cannot_manage_holidays():
    svc = HolidayService(InMemoryHolidayRepository())
    with pytest.raises(AuthorizationError):
        svc.add_holiday(current_role=Role.FACULTY, holiday_date="2024-08-15", name="x")
    with pytest.raises(AuthorizationError):
        svc.remove_holiday(current_role=Role.FACULTY, holiday_id=1)


def test_invalid_holiday_input():
    svc = HolidayService(InMemoryHolidayRepository())
    svc.add_holiday(current_role=Role.ADMIN, holiday_date="2024-08-15", name="Independence Day")

    with pytest.raises(ValidationError):
        svc.add_holiday(current_role=Role.ADMIN, holiday_date="2024-08-15", name="Again")
    with pytest.raises(ValidationError):
        svc.add_holiday(current_role=Role.ADMIN, holiday_date="2024-08-16", name="   ")
    with pytest.raises(ValidationError):
        svc.add_holiday(current_role=Role.ADMIN, holiday_date="2024-08-16", name="x", kind="galactic")
    with pytest.raises(MalformedInputError):
        svc.add_holiday(current_role=Role.ADMIN, holiday_date="15-08-2024", name="x")
    with pytest.raises(NotFoundError):
        svc.remove_holiday(current_role=Role.ADMIN, holiday_id=99)


def test_non_text_name_or_description_is_rejected():
    svc = HolidayService(InMemoryHolidayRepository())
    with pytest.raises(ValidationError):
        svc.add_holiday(current_role=Role.ADMIN, holiday_date="2024-08-16", name=5)
    with pytest.raises(ValidationError):
        svc.add_holiday(current_role=Role.ADMIN, holiday_date="2024-08-16", name="x", description=["y"])
    assert svc.list_holidays() == []
