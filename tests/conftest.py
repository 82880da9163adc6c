import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from attendance_tracker.api.deps import get_db
from attendance_tracker.db import Base
from attendance_tracker.main import app
from attendance_tracker.services.reminders import notifier


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the lifespan (and its reminder poller) stays off
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_notifier():
    notifier.reset()
    yield
    notifier.reset()


@pytest.fixture
def make_user(client):
    def _make_user(email="student@example.com", password="secret123", full_name="Test Student"):
        resp = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "full_name": full_name},
        )
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _make_user


@pytest.fixture
def auth_headers(make_user):
    return make_user()


@pytest.fixture
def add_subject(client, auth_headers):
    def _add_subject(name="Mathematics", day_of_week=1, start="09:00", end="10:00", color="#3B82F6", headers=None):
        resp = client.post(
            "/api/subjects/",
            json={
                "name": name,
                "day_of_week": day_of_week,
                "start_time": start,
                "end_time": end,
                "color": color,
            },
            headers=headers or auth_headers,
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _add_subject
