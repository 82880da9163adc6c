from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from attendance_tracker.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String, nullable=False)

    # Browser-style tri-state: "default" → "granted" | "denied"
    notification_permission = Column(String, nullable=False, default="default")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    subjects = relationship("Subject", back_populates="owner", cascade="all, delete-orphan")
    attendance_records = relationship(
        "AttendanceRecord", back_populates="owner", cascade="all, delete-orphan"
    )
    assignments = relationship("Assignment", back_populates="owner", cascade="all, delete-orphan")
