from datetime import date

from sqlalchemy.orm import Session

from attendance_tracker.db.models.assignment import Assignment


def get_assignments(db: Session, user_id: int):
    return db.query(Assignment).filter(Assignment.user_id == user_id).all()


def get_assignment(db: Session, user_id: int, assignment_id: int):
    return (
        db.query(Assignment)
        .filter(Assignment.id == assignment_id, Assignment.user_id == user_id)
        .first()
    )


def get_pending_reminders(db: Session, user_id: int, today: date):
    return (
        db.query(Assignment)
        .filter(
            Assignment.user_id == user_id,
            Assignment.is_completed.is_(False),
            Assignment.reminder_date.isnot(None),
            Assignment.reminder_date <= today,
        )
        .all()
    )


def create_assignment(db: Session, assignment_data, user_id: int):
    db_assignment = Assignment(**assignment_data.model_dump(), user_id=user_id, is_completed=False)
    db.add(db_assignment)
    db.commit()
    db.refresh(db_assignment)
    return db_assignment


def update_assignment(db: Session, assignment: Assignment, changes: dict):
    for field, value in changes.items():
        setattr(assignment, field, value)
    db.commit()
    db.refresh(assignment)
    return assignment


def toggle_complete(db: Session, assignment: Assignment):
    assignment.is_completed = not assignment.is_completed
    db.commit()
    db.refresh(assignment)
    return assignment


def delete_assignment(db: Session, assignment: Assignment):
    db.delete(assignment)
    db.commit()
