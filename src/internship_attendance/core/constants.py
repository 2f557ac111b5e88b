"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_DAYS_PER_WEEK = 5
MIN_DAYS_PER_WEEK = 1
MAX_DAYS_PER_WEEK = 7

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
DEFAULT_WORKING_WEEKDAYS = frozenset(range(5))

MSG_OUTSIDE_INTERNSHIP = "Date is outside internship period"
MSG_WEEKEND = "Cannot mark attendance on weekends"
MSG_HOLIDAY = "Cannot mark attendance on holidays"
MSG_DUPLICATE = "Attendance already marked for this date"
MSG_WEEKLY_LIMIT = "Weekly attendance limit exceeded ({limit} days per week allowed)"
