from sqlalchemy.orm import Session

from attendance_tracker.db.models.user import User
from attendance_tracker.core.security import get_password_hash


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, user_data):
    db_user = User(
        email=user_data.email.strip().lower(),
        hashed_password=get_password_hash(user_data.password),
        full_name=user_data.full_name,
        notification_permission="default",
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def get_users_with_permission(db: Session, permission: str = "granted"):
    return db.query(User).filter(User.notification_permission == permission).all()


def request_notification_permission(db: Session, user: User, granted: bool) -> bool:
    """
    Browser-style permission prompt: an earlier answer sticks, only an
    unanswered ("default") permission takes the new answer.
    """
    if user.notification_permission == "granted":
        return True
    if user.notification_permission == "denied":
        return False

    user.notification_permission = "granted" if granted else "denied"
    db.commit()
    db.refresh(user)
    return granted
