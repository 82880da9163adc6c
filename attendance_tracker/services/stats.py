# attendance_tracker/services/stats.py
from dataclasses import dataclass, asdict
from typing import Iterable, List


@dataclass
class AttendanceStats:
    present: int
    absent: int
    canceled: int
    total_classes: int
    percentage: int

    @property
    def band(self) -> str:
        return band(self.percentage)

    def as_dict(self) -> dict:
        return {**asdict(self), "band": self.band}


def round_half_up(value: float) -> int:
    # round() would send 12.5 to 12
    return int(value + 0.5)


def compute_stats(records: Iterable) -> AttendanceStats:
    present = absent = canceled = 0
    for record in records:
        if record.status == "present":
            present += 1
        elif record.status == "absent":
            absent += 1
        elif record.status == "canceled":
            canceled += 1

    total_classes = present + absent  # canceled classes are not held
    percentage = round_half_up(present / total_classes * 100) if total_classes else 0
    return AttendanceStats(present, absent, canceled, total_classes, percentage)


def band(percentage: int) -> str:
    if percentage >= 75:
        return "good"
    if percentage >= 60:
        return "warning"
    return "critical"


def subject_stats(subjects: Iterable, records: Iterable) -> List[dict]:
    """Per-subject stats in timetable order (weekday, then start time)."""
    by_subject: dict = {}
    for record in records:
        by_subject.setdefault(record.subject_id, []).append(record)

    result = []
    for subject in sorted(subjects, key=lambda s: (s.day_of_week, s.start_time)):
        stats = compute_stats(by_subject.get(subject.id, []))
        result.append({
            "subject_id": subject.id,
            "name": subject.name,
            "color": subject.color,
            **stats.as_dict(),
        })
    return result
