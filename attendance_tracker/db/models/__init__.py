from attendance_tracker.db.base import Base
from attendance_tracker.db.models.user import User
from attendance_tracker.db.models.subject import Subject
from attendance_tracker.db.models.attendance import AttendanceRecord
from attendance_tracker.db.models.assignment import Assignment

__all__ = ["Base", "User", "Subject", "AttendanceRecord", "Assignment"]
