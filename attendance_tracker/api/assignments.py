# attendance_tracker/api/assignments.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from attendance_tracker.api.deps import get_db, get_current_user
from attendance_tracker.core.dates import today
from attendance_tracker.crud import assignment as crud_assignment
from attendance_tracker.crud import subject as crud_subject
from attendance_tracker.db.models.user import User
from attendance_tracker.schemas.assignment import (
    AssignmentCreate, AssignmentUpdate, AssignmentOut, AssignmentList, AssignmentSummary,
)
from attendance_tracker.services.assignments import build_views, summary

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_subject(db: Session, user_id: int, subject_id):
    if subject_id is not None and not crud_subject.get_subject(db, user_id, subject_id):
        raise HTTPException(status_code=404, detail="Subject not found")


def assignment_list(db: Session, user_id: int) -> dict:
    on = today()
    assignments = crud_assignment.get_assignments(db, user_id)
    subjects = crud_subject.get_subjects(db, user_id)
    return {
        "items": build_views(assignments, subjects, on),
        "summary": summary(assignments, on),
    }


@router.get("/", response_model=AssignmentList)
def list_assignments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return assignment_list(db, current_user.id)


@router.get("/summary", response_model=AssignmentSummary)
def get_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return summary(crud_assignment.get_assignments(db, current_user.id), today())


@router.post("/", response_model=AssignmentOut, status_code=201)
def add_assignment(
    assignment_in: AssignmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _ensure_subject(db, current_user.id, assignment_in.subject_id)
    try:
        assignment = crud_assignment.create_assignment(db, assignment_in, user_id=current_user.id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[Assignments] Insert failed for user_id={current_user.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to add assignment")

    logger.info(f"[Assignments] Added assignment_id={assignment.id} due {assignment.due_date}")
    return assignment


@router.put("/{assignment_id}", response_model=AssignmentOut)
def update_assignment(
    assignment_id: int,
    assignment_update: AssignmentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    assignment = crud_assignment.get_assignment(db, current_user.id, assignment_id)
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")

    changes = assignment_update.model_dump(exclude_unset=True)
    if changes.get("subject_id") is not None:
        _ensure_subject(db, current_user.id, changes["subject_id"])
    if "description" in changes:
        changes["description"] = changes["description"] or None

    due = changes.get("due_date", assignment.due_date)
    reminder = changes.get("reminder_date", assignment.reminder_date)
    if reminder and reminder > due:
        raise HTTPException(status_code=422, detail="reminder_date must not be after due_date")

    try:
        return crud_assignment.update_assignment(db, assignment, changes)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[Assignments] Update failed for assignment_id={assignment_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update assignment")


@router.post("/{assignment_id}/toggle", response_model=AssignmentOut)
def toggle_assignment(
    assignment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    assignment = crud_assignment.get_assignment(db, current_user.id, assignment_id)
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")

    try:
        return crud_assignment.toggle_complete(db, assignment)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[Assignments] Toggle failed for assignment_id={assignment_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update assignment")


@router.delete("/{assignment_id}")
def delete_assignment(
    assignment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    assignment = crud_assignment.get_assignment(db, current_user.id, assignment_id)
    if not assignment:
        raise HTTPException(status_code=404, detail="Assignment not found")

    try:
        crud_assignment.delete_assignment(db, assignment)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"[Assignments] Delete failed for assignment_id={assignment_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete assignment")

    return {"message": "Assignment deleted"}
