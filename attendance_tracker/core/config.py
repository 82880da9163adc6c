# attendance_tracker/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Attendance Tracker"

    SECRET_KEY: str = "change-me-attendance-tracker-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days

    DATABASE_URL: str = "sqlite:///./attendance.db"

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://127.0.0.1",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:8080",
    ]

    # "today" for reminders, due labels and the calendar
    TIMEZONE: str = "UTC"

    REMINDERS_ENABLED: bool = True
    REMINDER_INTERVAL_SECONDS: int = 60
    NOTIFY_WEBHOOK_URL: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
