# attendance_tracker/schemas/assignment.py
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, field_validator, model_validator


def _check_title(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("title must not be empty")
    return value


class AssignmentCreate(BaseModel):
    title: str
    description: Optional[str] = None
    subject_id: Optional[int] = None
    due_date: date
    reminder_date: Optional[date] = None

    check_title = field_validator("title")(_check_title)

    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, value):
        # an empty textarea is stored as NULL
        return value or None

    @model_validator(mode="after")
    def reminder_not_after_due(self):
        if self.reminder_date and self.reminder_date > self.due_date:
            raise ValueError("reminder_date must not be after due_date")
        return self


class AssignmentUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    subject_id: Optional[int] = None
    due_date: Optional[date] = None
    reminder_date: Optional[date] = None
    is_completed: Optional[bool] = None

    check_title = field_validator("title")(_check_title)

    @model_validator(mode="after")
    def no_nulls_on_required_fields(self):
        # description, subject_id and reminder_date may be cleared with null
        for field in ("title", "due_date", "is_completed"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class AssignmentOut(BaseModel):
    id: int
    subject_id: Optional[int]
    title: str
    description: Optional[str]
    due_date: date
    reminder_date: Optional[date]
    is_completed: bool

    class Config:
        from_attributes = True


class AssignmentView(AssignmentOut):
    subject_name: Optional[str] = None
    subject_color: Optional[str] = None
    due_label: str
    urgent: bool


class AssignmentSummary(BaseModel):
    pending_count: int
    overdue_count: int


class AssignmentList(BaseModel):
    items: List[AssignmentView]
    summary: AssignmentSummary
