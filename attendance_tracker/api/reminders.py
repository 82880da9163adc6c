# attendance_tracker/api/reminders.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from attendance_tracker.api.deps import get_db, get_current_user
from attendance_tracker.core.dates import today
from attendance_tracker.crud import assignment as crud_assignment
from attendance_tracker.crud import user as crud_user
from attendance_tracker.db.models.user import User
from attendance_tracker.schemas.reminder import DueReminders, PermissionRequest, PermissionState
from attendance_tracker.services.reminders import PULL, notifier

router = APIRouter()


def _permission_state(user: User) -> dict:
    return {
        "permission": user.notification_permission,
        "granted": user.notification_permission == "granted",
    }


@router.get("/permission", response_model=PermissionState)
def get_permission(current_user: User = Depends(get_current_user)):
    return _permission_state(current_user)


@router.post("/permission", response_model=PermissionState)
def request_permission(
    request: PermissionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    crud_user.request_notification_permission(db, current_user, request.granted)
    return _permission_state(current_user)


# Pull side of the reminder check: each reminder is handed out once
@router.get("/due", response_model=DueReminders)
def get_due_reminders(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if current_user.notification_permission != "granted":
        return {"notifications": []}

    on = today()
    pending = crud_assignment.get_pending_reminders(db, current_user.id, on)
    return {"notifications": notifier.collect(pending, on, channel=PULL)}
