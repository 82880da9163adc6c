# attendance_tracker/db/models/subject.py
from sqlalchemy import Column, Integer, String, Time, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from attendance_tracker.db.base import Base


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    day_of_week = Column(Integer, nullable=False)  # 0 = Sunday ... 6 = Saturday
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    color = Column(String(7), nullable=False, default="#3B82F6")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    owner = relationship("User", back_populates="subjects")
    records = relationship("AttendanceRecord", back_populates="subject", cascade="all, delete-orphan")
    # deleting a subject detaches its assignments instead of removing them
    assignments = relationship("Assignment", back_populates="subject")
