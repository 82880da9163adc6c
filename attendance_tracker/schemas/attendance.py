from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel

from attendance_tracker.schemas.subject import SubjectOut

AttendanceStatus = Literal["present", "absent", "canceled"]


class AttendanceMark(BaseModel):
    subject_id: int
    date: date
    status: AttendanceStatus


class AttendanceOut(BaseModel):
    id: int
    subject_id: int
    date: date
    status: AttendanceStatus

    class Config:
        from_attributes = True


class MarkResult(BaseModel):
    action: Literal["created", "updated", "removed"]
    message: str
    record: Optional[AttendanceOut] = None


class DaySubject(BaseModel):
    subject: SubjectOut
    record: Optional[AttendanceOut] = None


class DayView(BaseModel):
    date: date
    day: str
    subjects: List[DaySubject]


class CalendarCell(BaseModel):
    date: date
    in_month: bool
    scheduled: int
    present: int
    absent: int
    canceled: int


class CalendarMonth(BaseModel):
    year: int
    month: int
    weeks: List[List[CalendarCell]]
