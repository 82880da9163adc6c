from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from attendance_tracker.api.deps import get_db, get_current_user
from attendance_tracker.crud import attendance as crud_attendance
from attendance_tracker.crud import subject as crud_subject
from attendance_tracker.db.models.user import User
from attendance_tracker.schemas.stats import StatsOverview
from attendance_tracker.services.stats import compute_stats, subject_stats

router = APIRouter()


def stats_overview(db: Session, user_id: int) -> dict:
    subjects = crud_subject.get_subjects(db, user_id)
    records = crud_attendance.get_records(db, user_id)
    return {
        "overall": compute_stats(records).as_dict(),
        "subjects": subject_stats(subjects, records),
    }


@router.get("/", response_model=StatsOverview)
def get_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return stats_overview(db, current_user.id)
