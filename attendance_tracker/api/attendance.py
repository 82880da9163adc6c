# attendance_tracker/api/attendance.py
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from attendance_tracker.api.deps import get_db, get_current_user
from attendance_tracker.core.dates import DAYS, day_index, today
from attendance_tracker.crud import attendance as crud_attendance
from attendance_tracker.crud import subject as crud_subject
from attendance_tracker.db.models.user import User
from attendance_tracker.schemas.attendance import (
    AttendanceMark, AttendanceOut, MarkResult, DayView, CalendarMonth,
)
from attendance_tracker.services.month_calendar import month_grid, grid_bounds
from attendance_tracker.services.timetable import subjects_on, record_for

logger = logging.getLogger(__name__)

router = APIRouter()

MARK_MESSAGES = {
    "created": "Attendance marked",
    "updated": "Attendance updated",
    "removed": "Attendance cleared",
}


@router.get("/", response_model=List[AttendanceOut])
def list_records(
    subject_id: Optional[int] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return crud_attendance.get_records(db, current_user.id, subject_id=subject_id, start=start, end=end)


@router.get("/day", response_model=DayView)
def get_day(
    on: Optional[date] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    on = on or today()
    subjects = subjects_on(crud_subject.get_subjects(db, current_user.id), on)
    records = crud_attendance.get_records(db, current_user.id, start=on, end=on)
    return {
        "date": on,
        "day": DAYS[day_index(on)],
        "subjects": [
            {"subject": s, "record": record_for(records, s.id, on)}
            for s in subjects
        ],
    }


@router.get("/calendar", response_model=CalendarMonth)
def get_calendar(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    subjects = crud_subject.get_subjects(db, current_user.id)
    first, last = grid_bounds(year, month)
    records = crud_attendance.get_records(db, current_user.id, start=first, end=last)
    return {"year": year, "month": month, "weeks": month_grid(year, month, subjects, records)}


@router.post("/mark", response_model=MarkResult)
def mark_attendance(
    mark: AttendanceMark,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    subject = crud_subject.get_subject(db, current_user.id, mark.subject_id)
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")

    had_record = crud_attendance.get_record_for_day(
        db, current_user.id, mark.subject_id, mark.date
    ) is not None

    try:
        action, record = crud_attendance.mark(
            db, current_user.id, mark.subject_id, mark.date, mark.status
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[Attendance] Mark failed for subject_id={mark.subject_id} on {mark.date}: {e}")
        detail = "Failed to update attendance" if had_record else "Failed to mark attendance"
        raise HTTPException(status_code=500, detail=detail)

    logger.info(f"[Attendance] {action} subject_id={mark.subject_id} on {mark.date} ({mark.status})")
    return {"action": action, "message": MARK_MESSAGES[action], "record": record}


@router.delete("/{record_id}")
def delete_record(
    record_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    record = crud_attendance.get_record(db, current_user.id, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Attendance record not found")

    try:
        crud_attendance.delete_record(db, record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[Attendance] Delete failed for record_id={record_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update attendance")

    return {"message": "Attendance cleared"}
