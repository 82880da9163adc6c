from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from attendance_tracker.api.assignments import assignment_list
from attendance_tracker.api.deps import get_db, get_current_user
from attendance_tracker.api.stats import stats_overview
from attendance_tracker.crud import attendance as crud_attendance
from attendance_tracker.crud import subject as crud_subject
from attendance_tracker.db.models.user import User
from attendance_tracker.schemas.dashboard import Dashboard

router = APIRouter()


# Everything the main page needs in one round trip
@router.get("/", response_model=Dashboard)
def get_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {
        "user": current_user,
        "subjects": crud_subject.get_subjects(db, current_user.id),
        "records": crud_attendance.get_records(db, current_user.id),
        "assignments": assignment_list(db, current_user.id),
        "stats": stats_overview(db, current_user.id),
    }
