from datetime import timedelta

from jose import jwt

from attendance_tracker.core.config import settings
from attendance_tracker.core.security import create_access_token


def test_register_login_and_me(client, make_user):
    headers = make_user(email="Ana@Example.com", password="pw12345", full_name="Ana")

    me = client.get("/api/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "ana@example.com"
    assert me.json()["notification_permission"] == "default"

    login = client.post("/api/auth/login", json={"email": "ana@example.com", "password": "pw12345"})
    assert login.status_code == 200
    assert login.json()["token_type"] == "bearer"


def test_duplicate_email_is_rejected(client, make_user):
    make_user(email="dup@example.com")

    resp = client.post(
        "/api/auth/register",
        json={"email": "dup@example.com", "password": "x1", "full_name": "Again"},
    )
    assert resp.status_code == 400


def test_wrong_password(client, make_user):
    make_user(email="b@example.com", password="right")

    resp = client.post("/api/auth/login", json={"email": "b@example.com", "password": "wrong"})
    assert resp.status_code == 401


def test_endpoints_require_token(client):
    assert client.get("/api/subjects/").status_code == 401
    assert client.get("/api/subjects/", headers={"Authorization": "Bearer nonsense"}).status_code == 401


def test_expired_or_ownerless_tokens_are_refused(client, make_user):
    make_user(email="c@example.com")
    expired = create_access_token("c@example.com", expires_delta=timedelta(minutes=-1))
    ownerless = jwt.encode({"role": "student"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    for token in (expired, ownerless):
        resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401

    fresh = create_access_token("c@example.com")
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {fresh}"}).status_code == 200
