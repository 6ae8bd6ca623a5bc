import pytest


def _log_run(client, headers, date="2024-05-01T07:00:00", distance=10, duration=50):
    resp = client.post(
        "/api/runs",
        headers=headers,
        json={"date": date, "distance": distance, "duration": duration},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_log_run_derives_pace(client, auth_headers):
    run = _log_run(client, auth_headers, distance=10, duration=50)
    assert run["pace"] == 5.0
    assert run["distance"] == 10
    assert run["duration"] == 50
    assert run["id"]
    assert run["userId"]


def test_log_run_coerces_numeric_strings(client, auth_headers):
    run = _log_run(client, auth_headers, distance="4", duration="22")
    assert run["pace"] == pytest.approx(5.5)


def test_log_run_ignores_user_id_in_payload(client, auth_headers, register):
    _, other = register(name="Mallory")
    resp = client.post(
        "/api/runs",
        headers=auth_headers,
        json={"date": "2024-05-01T07:00:00", "distance": 5, "duration": 30, "userId": other["id"]},
    )
    assert resp.status_code == 201
    assert resp.json()["userId"] != other["id"]


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "2024-05-01T07:00:00", "distance": 0, "duration": 30},
        {"date": "2024-05-01T07:00:00", "distance": 5, "duration": -1},
        {"date": "2024-05-01T07:00:00", "distance": "far", "duration": 30},
        {"distance": 5, "duration": 30},
    ],
)
def test_log_run_rejects_invalid_payload(client, auth_headers, payload):
    resp = client.post("/api/runs", headers=auth_headers, json=payload)
    assert resp.status_code == 422
    body = resp.json()
    assert body["message"] == "Validation failed"
    assert body["error"]


def test_list_runs_newest_first_with_insertion_tiebreak(client, auth_headers):
    old = _log_run(client, auth_headers, date="2024-01-01T07:00:00")
    same_a = _log_run(client, auth_headers, date="2024-03-01T07:00:00")
    same_b = _log_run(client, auth_headers, date="2024-03-01T07:00:00")
    new = _log_run(client, auth_headers, date="2024-06-01T07:00:00")

    resp = client.get("/api/runs", headers=auth_headers)
    assert resp.status_code == 200
    assert [r["id"] for r in resp.json()] == [new["id"], same_a["id"], same_b["id"], old["id"]]


def test_list_runs_only_returns_own_records(client, auth_headers, other_headers):
    _log_run(client, auth_headers)
    assert client.get("/api/runs", headers=other_headers).json() == []


def test_delete_run(client, auth_headers):
    run = _log_run(client, auth_headers)
    resp = client.delete(f"/api/runs/{run['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Run deleted successfully"}
    assert client.get("/api/runs", headers=auth_headers).json() == []


def test_delete_someone_elses_run_is_forbidden(client, auth_headers, other_headers):
    run = _log_run(client, auth_headers)
    resp = client.delete(f"/api/runs/{run['id']}", headers=other_headers)
    assert resp.status_code == 403
    assert resp.json() == {"message": "Unauthorized"}
    remaining = client.get("/api/runs", headers=auth_headers).json()
    assert [r["id"] for r in remaining] == [run["id"]]


@pytest.mark.parametrize("run_id", ["00000000-0000-0000-0000-000000000000", "not-a-uuid"])
def test_delete_missing_run_is_not_found(client, auth_headers, run_id):
    resp = client.delete(f"/api/runs/{run_id}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Run not found"}
