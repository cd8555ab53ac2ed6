import json


def _login(client, username, password):
    return client.post("/login", json={"username": username, "password": password})


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_login_admin(client):
    response = _login(client, "admin", "a")
    assert response.status_code == 200
    assert response.get_json()["view"] == "admin"


def test_login_invalid_credentials(client):
    response = _login(client, "admin", "nope")
    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid credentials"}


def test_me_requires_login(client):
    response = client.get("/me")
    assert response.status_code == 401
    assert response.get_json() == {"error": "Login required"}


def test_me_reports_balance(client):
    _login(client, "alice", "secret")
    body = client.get("/me").get_json()
    assert body["employeeId"] == 7
    assert body["leaveBalance"] == 12
    assert body["view"] == "employee"


def test_apply_and_list(client):
    _login(client, "alice", "secret")
    response = client.post(
        "/leave/apply",
        json={"startDate": "2024-05-01", "endDate": "2024-05-03", "reason": "trip"},
    )
    assert response.status_code == 201
    created = response.get_json()
    assert created["status"] == "Pending"
    assert created["employeeId"] == 7

    listed = client.get("/leave/applications").get_json()
    assert listed == [created]


def test_apply_with_invalid_date(client):
    _login(client, "alice", "secret")
    response = client.post(
        "/leave/apply",
        json={"startDate": "not-a-date", "endDate": "2024-05-03", "reason": "trip"},
    )
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid date format"}


def test_admin_decision(client):
    _login(client, "alice", "secret")
    created = client.post(
        "/leave/apply",
        json={"startDate": "2024-05-01", "endDate": "2024-05-03", "reason": "trip"},
    ).get_json()
    client.post("/logout")

    _login(client, "admin", "a")
    response = client.post(f"/leave/{created['id']}/decision", json={"status": "Approved"})
    assert response.status_code == 200
    assert response.get_json()["status"] == "Approved"


def test_employee_cannot_decide(client):
    _login(client, "alice", "secret")
    created = client.post(
        "/leave/apply",
        json={"startDate": "2024-05-01", "endDate": "2024-05-03"},
    ).get_json()
    response = client.post(f"/leave/{created['id']}/decision", json={"status": "Approved"})
    assert response.status_code == 403


def test_decision_on_unknown_leave(client):
    _login(client, "admin", "a")
    response = client.post("/leave/5/decision", json={"status": "Rejected"})
    assert response.status_code == 404


def test_decision_with_bad_status(client):
    _login(client, "admin", "a")
    response = client.post("/leave/5/decision", json={"status": "Maybe"})
    assert response.status_code == 400


def test_non_object_body_is_rejected(client):
    _login(client, "alice", "secret")
    response = client.post("/leave/apply", json=["2024-05-01", "2024-05-03"])
    assert response.status_code == 400
    assert response.get_json() == {"error": "Request body must be a JSON object"}


def test_login_with_non_object_body(client):
    response = client.post("/login", json="admin")
    assert response.status_code == 400


def _seed_legacy_leaves(app):
    store = app.extensions["record_store"]
    store.leaves_path.write_text(
        json.dumps(
            [
                {"id": 0, "employeeId": 7, "startDate": "2024-05-01", "endDate": "2024-05-02", "reason": "a", "status": "Pending"},
                {"id": 0, "employeeId": 8, "startDate": "2024-06-01", "endDate": "2024-06-02", "reason": "b", "status": "Pending"},
            ]
        ),
        encoding="utf-8",
    )
    return store


def test_decision_by_shared_legacy_id_is_refused(app, client):
    store = _seed_legacy_leaves(app)
    _login(client, "admin", "a")

    response = client.post("/leave/0/decision", json={"status": "Rejected"})

    assert response.status_code == 409
    assert [leave.status for leave in store.load_leaves()] == ["Pending", "Pending"]


def test_decision_by_position_reaches_every_legacy_record(app, client):
    store = _seed_legacy_leaves(app)
    _login(client, "admin", "a")

    first = client.post("/leave/at/0/decision", json={"status": "Rejected"})
    second = client.post("/leave/at/1/decision", json={"status": "Approved"})

    assert first.status_code == 200
    assert second.get_json()["employeeId"] == 8
    assert [leave.status for leave in store.load_leaves()] == ["Rejected", "Approved"]


def test_decision_by_position_out_of_range(client):
    _login(client, "admin", "a")
    response = client.post("/leave/at/3/decision", json={"status": "Approved"})
    assert response.status_code == 404


def test_decision_by_position_requires_admin(app, client):
    _seed_legacy_leaves(app)
    _login(client, "alice", "secret")
    response = client.post("/leave/at/0/decision", json={"status": "Approved"})
    assert response.status_code == 403
