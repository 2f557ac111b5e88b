from __future__ import annotations

from flask import Flask

from ..common.responses import domain_error_response, error_response, success_response
from ..common.session_auth import current_role, json_body, login_required
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/admin/holidays", endpoint="list_holidays")
    @login_required
    def list_holidays():
        holidays = container.holiday_service.list_holidays()
        return success_response({"holidays": [h.to_dict() for h in holidays], "total": len(holidays)})

    @app.post("/api/admin/holidays", endpoint="create_holiday")
    @login_required
    def create_holiday():
        data = json_body()
        if not data.get("date") or not data.get("name"):
            return error_response("date and name are required")

        try:
            holiday = container.holiday_service.add_holiday(
                current_role=current_role(),
                holiday_date=data["date"],
                name=data["name"],
                description=data.get("description"),
                kind=data.get("kind", "national"),
            )
        except DomainError as e:
            return domain_error_response(e)
        return success_response(holiday.to_dict(), message="Holiday created successfully", status=201)

    @app.delete("/api/admin/holidays/<int:holiday_id>", endpoint="delete_holiday")
    @login_required
    def delete_holiday(holiday_id: int):
        try:
            container.holiday_service.remove_holiday(current_role=current_role(), holiday_id=holiday_id)
        except DomainError as e:
            return domain_error_response(e)
        return success_response(message="Holiday deleted successfully")
