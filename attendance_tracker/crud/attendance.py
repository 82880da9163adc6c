from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from attendance_tracker.db.models.attendance import AttendanceRecord


def get_records(
    db: Session,
    user_id: int,
    subject_id: Optional[int] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
):
    query = db.query(AttendanceRecord).filter(AttendanceRecord.user_id == user_id)
    if subject_id is not None:
        query = query.filter(AttendanceRecord.subject_id == subject_id)
    if start is not None:
        query = query.filter(AttendanceRecord.date >= start)
    if end is not None:
        query = query.filter(AttendanceRecord.date <= end)
    return query.order_by(AttendanceRecord.date, AttendanceRecord.id).all()


def get_record(db: Session, user_id: int, record_id: int):
    return (
        db.query(AttendanceRecord)
        .filter(AttendanceRecord.id == record_id, AttendanceRecord.user_id == user_id)
        .first()
    )


def get_record_for_day(db: Session, user_id: int, subject_id: int, on: date):
    return (
        db.query(AttendanceRecord)
        .filter(
            AttendanceRecord.user_id == user_id,
            AttendanceRecord.subject_id == subject_id,
            AttendanceRecord.date == on,
        )
        .first()
    )


def mark(db: Session, user_id: int, subject_id: int, on: date, status: str):
    """
    Create, update or clear the record for one class on one day.

    Picking the status the class already has clears it. Returns the action
    taken and the surviving record (None once cleared).
    """
    existing = get_record_for_day(db, user_id, subject_id, on)

    if existing and existing.status == status:
        db.delete(existing)
        db.commit()
        return "removed", None

    if existing:
        existing.status = status
        action = "updated"
    else:
        existing = AttendanceRecord(user_id=user_id, subject_id=subject_id, date=on, status=status)
        db.add(existing)
        action = "created"

    db.commit()
    db.refresh(existing)
    return action, existing


def delete_record(db: Session, record: AttendanceRecord):
    db.delete(record)
    db.commit()
