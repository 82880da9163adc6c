from typing import List

from pydantic import BaseModel

from attendance_tracker.schemas.assignment import AssignmentList
from attendance_tracker.schemas.attendance import AttendanceOut
from attendance_tracker.schemas.stats import StatsOverview
from attendance_tracker.schemas.subject import SubjectOut
from attendance_tracker.schemas.user import User


class Dashboard(BaseModel):
    user: User
    subjects: List[SubjectOut]
    records: List[AttendanceOut]
    assignments: AssignmentList
    stats: StatsOverview
