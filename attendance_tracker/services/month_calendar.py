# attendance_tracker/services/month_calendar.py
import calendar
from collections import Counter
from typing import Iterable, List

from attendance_tracker.core.dates import day_index

# Sunday-first weeks
_calendar = calendar.Calendar(firstweekday=calendar.SUNDAY)


def month_grid(year: int, month: int, subjects: Iterable, records: Iterable) -> List[List[dict]]:
    """Calendar cells for one month, padded to whole weeks."""
    scheduled = Counter(s.day_of_week for s in subjects)
    counts: dict = {}
    for record in records:
        counts.setdefault(record.date, Counter())[record.status] += 1

    weeks = []
    for week in _calendar.monthdatescalendar(year, month):
        cells = []
        for day in week:
            day_counts = counts.get(day, Counter())
            cells.append({
                "date": day,
                "in_month": day.month == month,
                "scheduled": scheduled.get(day_index(day), 0),
                "present": day_counts["present"],
                "absent": day_counts["absent"],
                "canceled": day_counts["canceled"],
            })
        weeks.append(cells)
    return weeks


def grid_bounds(year: int, month: int):
    """First and last date shown on the month grid."""
    weeks = _calendar.monthdatescalendar(year, month)
    return weeks[0][0], weeks[-1][-1]
