# attendance_tracker/core/dates.py
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from attendance_tracker.core.config import settings

# Sunday-first, matching the stored day_of_week index
DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def today() -> date:
    if settings.TIMEZONE.upper() == "UTC":
        return datetime.now(timezone.utc).date()
    return datetime.now(ZoneInfo(settings.TIMEZONE)).date()


def day_index(d: date) -> int:
    """Weekday of `d` with Sunday = 0."""
    return (d.weekday() + 1) % 7


def format_long(d: date) -> str:
    # "Mar 5, 2026"; avoids the platform-specific %-d
    return f"{d:%b} {d.day}, {d.year}"
