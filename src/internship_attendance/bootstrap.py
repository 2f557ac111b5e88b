from __future__ import annotations

from .container import Container
from .core.enums import Role


def seed_demo_data(container: Container) -> None:
    """Register a couple of demo students and holidays (development only)."""
    svc = container.student_service
    if not svc.list_students():
        svc.register_student(
            current_role=Role.ADMIN,
            student_id="stu-001",
            full_name="Demo Full-Time Intern",
            email="fulltime@example.com",
            start="2024-03-01",
            end="2024-08-31",
            days_per_week_allowed=5,
        )
        svc.register_student(
            current_role=Role.ADMIN,
            student_id="stu-002",
            full_name="Demo Part-Time Intern",
            email="parttime@example.com",
            start="2024-03-01",
            end="2024-08-31",
            days_per_week_allowed=3,
            custom_days="Mon,Wed,Fri",
        )

    if not container.holiday_service.list_holidays():
        container.holiday_service.add_holiday(
            current_role=Role.ADMIN,
            holiday_date="2024-08-15",
            name="Independence Day",
        )
