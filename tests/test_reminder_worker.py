import asyncio
import json
from dataclasses import dataclass
from datetime import date
from typing import Optional

import httpx

from attendance_tracker.core import reminder_worker
from attendance_tracker.db.models.assignment import Assignment
from attendance_tracker.db.models.user import User
from attendance_tracker.services.reminders import PUSH, ReminderNotifier, build_notification, is_reminder_due

TODAY = date(2026, 3, 10)


@dataclass
class FakeAssignment:
    id: int
    title: str
    due_date: date
    reminder_date: Optional[date]
    is_completed: bool = False


def test_is_reminder_due():
    assert is_reminder_due(FakeAssignment(1, "a", TODAY, TODAY), TODAY)
    assert is_reminder_due(FakeAssignment(1, "a", TODAY, date(2026, 3, 1)), TODAY)
    assert not is_reminder_due(FakeAssignment(1, "a", TODAY, date(2026, 3, 11)), TODAY)
    assert not is_reminder_due(FakeAssignment(1, "a", TODAY, None), TODAY)
    assert not is_reminder_due(FakeAssignment(1, "a", TODAY, TODAY, is_completed=True), TODAY)


def test_notification_text():
    note = build_notification(FakeAssignment(4, "Chapter 5 Problems", date(2026, 3, 12), TODAY))

    assert note["body"] == '"Chapter 5 Problems" is due on Mar 12, 2026'
    assert note["tag"] == "assignment-4"


def test_notifier_remembers_what_it_sent():
    notifier = ReminderNotifier()
    items = [FakeAssignment(1, "a", TODAY, TODAY), FakeAssignment(2, "b", TODAY, date(2026, 3, 11))]

    assert [n["assignment_id"] for n in notifier.collect(items, TODAY)] == [1]
    assert notifier.collect(items, TODAY) == []
    # the push channel keeps its own record of what it sent
    assert [n["assignment_id"] for n in notifier.collect(items, TODAY, channel=PUSH)] == [1]
    assert notifier.collect(items, TODAY, channel=PUSH) == []
    # the second reminder comes due the next day
    assert [n["assignment_id"] for n in notifier.collect(items, date(2026, 3, 11))] == [2]


def _seed(db, email, permission, reminder):
    user = User(email=email, hashed_password="x", full_name=email, notification_permission=permission)
    db.add(user)
    db.flush()
    db.add(Assignment(user_id=user.id, title=f"{email} essay", due_date=TODAY, reminder_date=reminder))
    db.commit()
    return user


def test_scan_only_covers_users_who_granted_permission(db_session):
    granted = _seed(db_session, "yes@example.com", "granted", TODAY)
    _seed(db_session, "no@example.com", "denied", TODAY)
    _seed(db_session, "unset@example.com", "default", TODAY)

    batches = reminder_worker.scan_due_reminders(db_session, TODAY, ReminderNotifier())

    assert len(batches) == 1
    assert batches[0]["user_id"] == granted.id
    assert batches[0]["notifications"][0]["body"].startswith('"yes@example.com essay"')


def test_deliver_posts_batch_to_webhook(monkeypatch):
    seen = []

    def handler(request):
        seen.append(json.loads(request.content))
        return httpx.Response(204)

    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        reminder_worker.httpx,
        "AsyncClient",
        lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
    )
    batch = {"user_id": 1, "email": "a@example.com", "notifications": [
        build_notification(FakeAssignment(3, "Essay", TODAY, TODAY)),
    ]}

    asyncio.run(reminder_worker.deliver(batch, webhook_url="http://hooks.test/reminders"))

    assert seen == [batch]


def test_deliver_logs_webhook_errors(monkeypatch, caplog):
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        reminder_worker.httpx,
        "AsyncClient",
        lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
    )
    batch = {"user_id": 1, "email": "a@example.com", "notifications": []}

    asyncio.run(reminder_worker.deliver(batch, webhook_url="http://hooks.test/reminders"))

    assert "Webhook delivery failed" in caplog.text
