# attendance_tracker/services/assignments.py
from datetime import date
from typing import Iterable, List, Tuple

from attendance_tracker.core.dates import format_long


def due_label(due_date: date, today: date) -> Tuple[str, bool]:
    """Human label for a due date plus whether it should be shown as urgent."""
    days = (due_date - today).days
    if days == 0:
        return "Due Today", True
    if days == 1:
        return "Due Tomorrow", True
    if days < 0:
        return "Overdue", True
    if days <= 3:
        return f"{days} days left", True
    return format_long(due_date), False


def is_overdue(assignment, today: date) -> bool:
    return not assignment.is_completed and assignment.due_date < today


def sort_assignments(assignments: Iterable) -> list:
    # pending before completed, soonest deadline first within each group
    return sorted(assignments, key=lambda a: (bool(a.is_completed), a.due_date))


def summary(assignments: Iterable, today: date) -> dict:
    assignments = list(assignments)
    return {
        "pending_count": sum(1 for a in assignments if not a.is_completed),
        "overdue_count": sum(1 for a in assignments if is_overdue(a, today)),
    }


def build_views(assignments: Iterable, subjects: Iterable, today: date) -> List[dict]:
    subjects_by_id = {s.id: s for s in subjects}
    views = []
    for a in sort_assignments(assignments):
        subject = subjects_by_id.get(a.subject_id) if a.subject_id else None
        label, urgent = due_label(a.due_date, today)
        views.append({
            "id": a.id,
            "subject_id": a.subject_id,
            "title": a.title,
            "description": a.description,
            "due_date": a.due_date,
            "reminder_date": a.reminder_date,
            "is_completed": a.is_completed,
            "subject_name": subject.name if subject else None,
            "subject_color": subject.color if subject else None,
            "due_label": label,
            "urgent": urgent and not a.is_completed,
        })
    return views
