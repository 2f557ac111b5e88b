from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Optional

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import MalformedInputError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if not isinstance(value, str):
        raise MalformedInputError(f"Expected an ISO date string, got {type(value).__name__}")
    try:
        return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        raise MalformedInputError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def as_calendar_date(value: date | str) -> date:
    """Coerce a boundary value into a plain calendar date.

    Strings are parsed as ISO dates. A ``datetime`` carries a time of day and is
    rejected instead of being truncated.
    """
    if isinstance(value, datetime):
        raise MalformedInputError("Expected a calendar date without time of day")
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def today_utc(clock: Optional[Callable[[], datetime]] = None) -> date:
    """Current calendar day, anchored to UTC midnight."""
    now = (clock or now_utc)()
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date()
