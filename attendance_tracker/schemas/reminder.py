from typing import List, Literal

from pydantic import BaseModel


class Notification(BaseModel):
    assignment_id: int
    title: str
    body: str
    tag: str


class PermissionRequest(BaseModel):
    granted: bool


class PermissionState(BaseModel):
    permission: Literal["default", "granted", "denied"]
    granted: bool


class DueReminders(BaseModel):
    notifications: List[Notification]
