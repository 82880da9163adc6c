# attendance_tracker/services/reminders.py
import logging
import threading
from datetime import date
from typing import Iterable, List

from attendance_tracker.core.dates import format_long

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "📚 Assignment Reminder"

# delivery channels
PUSH = "push"
PULL = "pull"


def is_reminder_due(assignment, today: date) -> bool:
    if assignment.is_completed:
        return False
    if not assignment.reminder_date:
        return False
    return assignment.reminder_date <= today


def build_notification(assignment) -> dict:
    return {
        "assignment_id": assignment.id,
        "title": NOTIFICATION_TITLE,
        "body": f'"{assignment.title}" is due on {format_long(assignment.due_date)}',
        "tag": f"assignment-{assignment.id}",
    }


class ReminderNotifier:
    """
    Remembers which assignments already produced a notification.

    Entries are keyed by (channel, assignment_id): the background push and a
    client pulling /due each see a reminder once. The memory lives as long as
    the process, so a restart may repeat a reminder once per channel.
    """

    def __init__(self):
        self._notified: set = set()
        self._lock = threading.Lock()

    def collect(self, assignments: Iterable, today: date, channel: str = PULL) -> List[dict]:
        """Return notifications for newly due reminders and mark them as sent."""
        fresh = []
        with self._lock:
            for assignment in assignments:
                key = (channel, assignment.id)
                if key in self._notified:
                    continue
                if not is_reminder_due(assignment, today):
                    continue
                self._notified.add(key)
                fresh.append(build_notification(assignment))
        if fresh:
            logger.info(f"[Reminders] {len(fresh)} new reminder(s) due on {channel}")
        return fresh

    def reset(self):
        with self._lock:
            self._notified.clear()


notifier = ReminderNotifier()
