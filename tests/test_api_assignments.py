from datetime import timedelta

from attendance_tracker.core.dates import today


def _add(client, headers, title, due, **extra):
    resp = client.post(
        "/api/assignments/",
        json={"title": title, "due_date": due.isoformat(), **extra},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_add_assignment_and_list_with_labels(client, auth_headers, add_subject):
    subject = add_subject(name="Physics", color="#EF4444")
    now = today()
    _add(client, auth_headers, "Later", now + timedelta(days=10))
    _add(client, auth_headers, "Lab", now, subject_id=subject["id"], description="")
    _add(client, auth_headers, "Late", now - timedelta(days=1))

    body = client.get("/api/assignments/", headers=auth_headers).json()

    assert [a["title"] for a in body["items"]] == ["Late", "Lab", "Later"]
    late, lab, later = body["items"]
    assert (late["due_label"], late["urgent"]) == ("Overdue", True)
    assert lab["due_label"] == "Due Today"
    assert lab["subject_name"] == "Physics"
    assert lab["subject_color"] == "#EF4444"
    assert lab["description"] is None
    assert later["urgent"] is False
    assert body["summary"] == {"pending_count": 3, "overdue_count": 1}


def test_reminder_after_due_date_is_rejected(client, auth_headers):
    now = today()
    resp = client.post(
        "/api/assignments/",
        json={
            "title": "Essay",
            "due_date": now.isoformat(),
            "reminder_date": (now + timedelta(days=1)).isoformat(),
        },
        headers=auth_headers,
    )
    assert resp.status_code == 422


def test_blank_title_and_foreign_subject_are_rejected(client, auth_headers, make_user, add_subject):
    other = make_user(email="other@example.com")
    subject = add_subject(headers=other)
    due = today().isoformat()

    resp = client.post("/api/assignments/", json={"title": "   ", "due_date": due}, headers=auth_headers)
    assert resp.status_code == 422

    resp = client.post(
        "/api/assignments/",
        json={"title": "Essay", "due_date": due, "subject_id": subject["id"]},
        headers=auth_headers,
    )
    assert resp.status_code == 404


def test_toggle_complete_moves_assignment_to_the_end(client, auth_headers):
    now = today()
    first = _add(client, auth_headers, "First", now)
    _add(client, auth_headers, "Second", now + timedelta(days=5))

    toggled = client.post(f"/api/assignments/{first['id']}/toggle", headers=auth_headers)
    assert toggled.status_code == 200
    assert toggled.json()["is_completed"] is True

    body = client.get("/api/assignments/", headers=auth_headers).json()
    assert [a["title"] for a in body["items"]] == ["Second", "First"]
    assert body["summary"]["pending_count"] == 1

    again = client.post(f"/api/assignments/{first['id']}/toggle", headers=auth_headers)
    assert again.json()["is_completed"] is False


def test_update_assignment(client, auth_headers):
    now = today()
    assignment = _add(client, auth_headers, "Draft", now + timedelta(days=7))

    resp = client.put(
        f"/api/assignments/{assignment['id']}",
        json={"title": "Final", "reminder_date": (now + timedelta(days=6)).isoformat()},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["title"] == "Final"

    resp = client.put(
        f"/api/assignments/{assignment['id']}",
        json={"due_date": (now + timedelta(days=2)).isoformat()},
        headers=auth_headers,
    )
    assert resp.status_code == 422


def test_delete_assignment(client, auth_headers):
    assignment = _add(client, auth_headers, "Gone", today())

    resp = client.delete(f"/api/assignments/{assignment['id']}", headers=auth_headers)

    assert resp.json() == {"message": "Assignment deleted"}
    assert client.get("/api/assignments/summary", headers=auth_headers).json() == {
        "pending_count": 0,
        "overdue_count": 0,
    }
    assert client.delete(f"/api/assignments/{assignment['id']}", headers=auth_headers).status_code == 404


def test_update_rejects_nulls_on_required_fields(client, auth_headers):
    now = today()
    assignment = _add(
        client, auth_headers, "Draft", now + timedelta(days=7),
        reminder_date=(now + timedelta(days=5)).isoformat(), description="notes",
    )

    for payload in ({"due_date": None}, {"title": None}, {"is_completed": None}):
        resp = client.put(f"/api/assignments/{assignment['id']}", json=payload, headers=auth_headers)
        assert resp.status_code == 422, payload

    # optional fields can still be cleared
    resp = client.put(
        f"/api/assignments/{assignment['id']}",
        json={"reminder_date": None, "description": None},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["reminder_date"] is None
    assert resp.json()["description"] is None
    assert resp.json()["due_date"] == (now + timedelta(days=7)).isoformat()
