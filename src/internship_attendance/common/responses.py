"""JSON response envelope and DomainError -> HTTP status mapping."""

from __future__ import annotations

from typing import Any

from flask import jsonify

from ..core.exceptions import (
    AttendanceRejectedError,
    AuthorizationError,
    DomainError,
    MalformedInputError,
    NotFoundError,
)


def success_response(data: Any = None, message: str = "Success", status: int = 200):
    return jsonify({"success": True, "data": data, "message": message}), status


def error_response(message: str = "Error", data: Any = None, status: int = 400):
    return jsonify({"success": False, "data": data, "message": message}), status


def domain_error_response(exc: DomainError):
    if isinstance(exc, AuthorizationError):
        return error_response(str(exc), status=403)
    if isinstance(exc, NotFoundError):
        return error_response(str(exc), status=404)
    if isinstance(exc, AttendanceRejectedError):
        return error_response(str(exc), data=exc.result.to_dict(), status=400)
    if isinstance(exc, MalformedInputError):
        return error_response(str(exc), data={"kind": "malformed_input"}, status=400)
    return error_response(str(exc), status=400)
