"""Internship Attendance package.

This package is organized by feature modules (students, holidays, attendance)
with a thin Flask controller layer and service/repository layers. The
attendance eligibility rules live in ``attendance.working_days``,
``attendance.validator`` and ``attendance.aggregator`` and are pure functions
of their inputs.
"""
