# attendance_tracker/schemas/subject.py
import re
from datetime import time
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

COLORS = [
    "#3B82F6", "#10B981", "#F59E0B", "#EF4444", "#8B5CF6",
    "#EC4899", "#06B6D4", "#84CC16",
]

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def _check_color(value: Optional[str]) -> Optional[str]:
    if value is not None and not _HEX_COLOR.match(value):
        raise ValueError("color must look like #RRGGBB")
    return value


def _check_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("name must not be empty")
    return value


class SubjectCreate(BaseModel):
    name: str
    day_of_week: int = Field(1, ge=0, le=6)
    start_time: time = time(9, 0)
    end_time: time = time(10, 0)
    color: str = COLORS[0]

    check_name = field_validator("name")(_check_name)
    check_color = field_validator("color")(_check_color)

    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be later than start_time")
        return self


class SubjectUpdate(BaseModel):
    name: Optional[str] = None
    day_of_week: Optional[int] = Field(None, ge=0, le=6)
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    color: Optional[str] = None

    check_name = field_validator("name")(_check_name)
    check_color = field_validator("color")(_check_color)

    @model_validator(mode="after")
    def no_explicit_nulls(self):
        # every subject column is NOT NULL; leave a field out to keep it
        for field in self.model_fields_set:
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class SubjectOut(BaseModel):
    id: int
    name: str
    day_of_week: int
    start_time: time
    end_time: time
    color: str

    class Config:
        from_attributes = True


class TimetableDay(BaseModel):
    day: str
    day_of_week: int
    subjects: List[SubjectOut]
