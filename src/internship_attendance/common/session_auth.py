"""Session helpers shared by the Flask controllers.

Login itself is handled elsewhere; these only read what it left in the session.
"""

from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import request, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .responses import error_response


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error_response("Not authenticated", status=401)
        return view(*args, **kwargs)

    return wrapper


def current_role() -> Optional[Role]:
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def require_own_record(student_id: str) -> None:
    """Students may only read their own data; staff may read anyone's."""
    if current_role() == Role.STUDENT and str(session.get("user_id")) != student_id:
        raise AuthorizationError("You can only view your own attendance")


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def require_roles(*roles: Role) -> None:
    if current_role() not in roles:
        raise AuthorizationError("You do not have permission for this action")
