# attendance_tracker/core/reminder_worker.py
import asyncio
import logging
from datetime import date
from typing import List

import httpx

from attendance_tracker.core.config import settings
from attendance_tracker.core.dates import today
from attendance_tracker.crud import assignment as crud_assignment
from attendance_tracker.crud import user as crud_user
from attendance_tracker.db.session import SessionLocal
from attendance_tracker.services.reminders import PUSH, ReminderNotifier, notifier

logger = logging.getLogger(__name__)

TIMEOUT = httpx.Timeout(5.0, read=10.0)


def scan_due_reminders(db, on: date, reminder_notifier: ReminderNotifier = notifier) -> List[dict]:
    """New notifications for every user who granted permission, grouped per user."""
    batches = []
    for user in crud_user.get_users_with_permission(db, "granted"):
        pending = crud_assignment.get_pending_reminders(db, user.id, on)
        notifications = reminder_notifier.collect(pending, on, channel=PUSH)
        if notifications:
            batches.append({"user_id": user.id, "email": user.email, "notifications": notifications})
    return batches


def _scan_with_own_session(on: date) -> List[dict]:
    db = SessionLocal()
    try:
        return scan_due_reminders(db, on)
    finally:
        db.close()


async def deliver(batch: dict, webhook_url: str | None = None):
    """Log each notification and push the batch to the webhook when one is set."""
    for note in batch["notifications"]:
        logger.info(f"🔔 [Reminders] {batch['email']}: {note['body']}")

    webhook_url = webhook_url or settings.NOTIFY_WEBHOOK_URL
    if not webhook_url:
        return

    async with httpx.AsyncClient(timeout=TIMEOUT) as client:
        try:
            response = await client.post(webhook_url, json=batch)
        except httpx.HTTPError as e:
            logger.error(f"❌ [Reminders] Webhook delivery failed: {e}")
            return

    if response.status_code >= 400:
        logger.error(f"❌ [Reminders] Webhook returned {response.status_code}: {response.text}")


async def run_reminder_check():
    batches = await asyncio.to_thread(_scan_with_own_session, today())
    for batch in batches:
        await deliver(batch)
    return batches


async def reminder_loop(interval: int | None = None):
    interval = interval or settings.REMINDER_INTERVAL_SECONDS
    logger.info(f"[Reminders] Polling every {interval}s")
    while True:
        try:
            await run_reminder_check()
        except Exception as e:
            logger.exception(f"🔥 [Reminders] Reminder check failed: {e}")
        await asyncio.sleep(interval)
