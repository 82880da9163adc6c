# attendance_tracker/services/timetable.py
from datetime import date
from typing import Iterable, List

from attendance_tracker.core.dates import DAYS, day_index


def group_by_day(subjects: Iterable) -> List[dict]:
    subjects = list(subjects)
    groups = []
    for index, day in enumerate(DAYS):
        day_subjects = sorted(
            (s for s in subjects if s.day_of_week == index),
            key=lambda s: s.start_time,
        )
        if day_subjects:
            groups.append({"day": day, "day_of_week": index, "subjects": day_subjects})
    return groups


def subjects_on(subjects: Iterable, on: date) -> list:
    index = day_index(on)
    return sorted(
        (s for s in subjects if s.day_of_week == index),
        key=lambda s: s.start_time,
    )


def record_for(records: Iterable, subject_id: int, on: date):
    for record in records:
        if record.subject_id == subject_id and record.date == on:
            return record
    return None
