import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from attendance_tracker.api import auth, subjects, attendance, assignments, stats, reminders, dashboard
from attendance_tracker.core.config import settings
from attendance_tracker.core.reminder_worker import reminder_loop
from attendance_tracker.db import Base
from attendance_tracker.db.session import engine

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Alembic owns the schema on managed databases; this covers a fresh SQLite file
    Base.metadata.create_all(bind=engine)

    reminder_task = None
    if settings.REMINDERS_ENABLED:
        reminder_task = asyncio.create_task(reminder_loop())
    yield
    if reminder_task:
        reminder_task.cancel()
        try:
            await reminder_task
        except asyncio.CancelledError:
            logger.info("[Reminders] Poller stopped")


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(subjects.router, prefix="/api/subjects", tags=["subjects"])
app.include_router(attendance.router, prefix="/api/attendance", tags=["attendance"])
app.include_router(assignments.router, prefix="/api/assignments", tags=["assignments"])
app.include_router(stats.router, prefix="/api/stats", tags=["stats"])
app.include_router(reminders.router, prefix="/api/reminders", tags=["reminders"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])


@app.get("/healthz")
def health():
    return {"ok": True, "app": settings.APP_NAME}
