from sqlalchemy.orm import Session

from attendance_tracker.db.models.subject import Subject


def get_subjects(db: Session, user_id: int):
    return (
        db.query(Subject)
        .filter(Subject.user_id == user_id)
        .order_by(Subject.day_of_week, Subject.start_time)
        .all()
    )


def get_subject(db: Session, user_id: int, subject_id: int):
    return db.query(Subject).filter(Subject.id == subject_id, Subject.user_id == user_id).first()


def create_subject(db: Session, subject_data, user_id: int):
    db_subject = Subject(**subject_data.model_dump(), user_id=user_id)
    db.add(db_subject)
    db.commit()
    db.refresh(db_subject)
    return db_subject


def update_subject(db: Session, subject: Subject, changes: dict):
    for field, value in changes.items():
        setattr(subject, field, value)
    db.commit()
    db.refresh(subject)
    return subject


def delete_subject(db: Session, subject: Subject):
    db.delete(subject)
    db.commit()
