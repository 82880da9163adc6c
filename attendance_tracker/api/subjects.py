# attendance_tracker/api/subjects.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from attendance_tracker.api.deps import get_db, get_current_user
from attendance_tracker.crud import subject as crud_subject
from attendance_tracker.db.models.user import User
from attendance_tracker.schemas.subject import (
    COLORS, SubjectCreate, SubjectUpdate, SubjectOut, TimetableDay,
)
from attendance_tracker.services.timetable import group_by_day

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=List[SubjectOut])
def list_subjects(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return crud_subject.get_subjects(db, current_user.id)


@router.get("/colors", response_model=List[str])
def list_colors():
    return COLORS


@router.get("/timetable", response_model=List[TimetableDay])
def get_timetable(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return group_by_day(crud_subject.get_subjects(db, current_user.id))


@router.post("/", response_model=SubjectOut, status_code=201)
def add_subject(
    subject_in: SubjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    try:
        subject = crud_subject.create_subject(db, subject_in, user_id=current_user.id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[Subjects] Insert failed for user_id={current_user.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to add subject")

    logger.info(f"[Subjects] Added subject_id={subject.id} for user_id={current_user.id}")
    return subject


@router.put("/{subject_id}", response_model=SubjectOut)
def update_subject(
    subject_id: int,
    subject_update: SubjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    subject = crud_subject.get_subject(db, current_user.id, subject_id)
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")

    changes = subject_update.model_dump(exclude_unset=True)
    start = changes.get("start_time", subject.start_time)
    end = changes.get("end_time", subject.end_time)
    if end <= start:
        raise HTTPException(status_code=422, detail="end_time must be later than start_time")

    try:
        return crud_subject.update_subject(db, subject, changes)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[Subjects] Update failed for subject_id={subject_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update subject")


@router.delete("/{subject_id}")
def delete_subject(
    subject_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    subject = crud_subject.get_subject(db, current_user.id, subject_id)
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")

    try:
        crud_subject.delete_subject(db, subject)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[Subjects] Delete failed for subject_id={subject_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete subject")

    return {"message": "Subject deleted"}
