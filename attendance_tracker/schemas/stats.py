from typing import List, Literal

from pydantic import BaseModel

Band = Literal["good", "warning", "critical"]


class AttendanceStatsOut(BaseModel):
    present: int
    absent: int
    canceled: int
    total_classes: int
    percentage: int
    band: Band


class SubjectStatsOut(AttendanceStatsOut):
    subject_id: int
    name: str
    color: str


class StatsOverview(BaseModel):
    overall: AttendanceStatsOut
    subjects: List[SubjectStatsOut]
