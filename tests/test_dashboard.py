import pytest
from sqlalchemy.exc import OperationalError

from app.services import dashboard


def _post(client, headers, path, payload):
    resp = client.post(path, headers=headers, json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_empty_dashboard_defaults(client, auth_headers):
    resp = client.get("/api/dashboard/stats", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "counts": {
            "workouts": 0,
            "runs": 0,
            "totalRunDistance": 0,
            "avgSleepDuration": 0,
            "avgSleepQuality": 0,
            "currentWeight": None,
        },
        "recentWorkouts": [],
    }


def test_dashboard_aggregates_all_record_types(client, auth_headers):
    _post(client, auth_headers, "/api/runs", {"date": "2024-05-01T07:00:00", "distance": 5, "duration": 25})
    _post(client, auth_headers, "/api/runs", {"date": "2024-05-02T07:00:00", "distance": 3.2, "duration": 20})
    _post(client, auth_headers, "/api/sleep", {"date": "2024-05-01T00:00:00", "duration": 7, "quality": 3})
    _post(client, auth_headers, "/api/sleep", {"date": "2024-05-02T00:00:00", "duration": 8, "quality": 4})
    _post(client, auth_headers, "/api/workouts", {"date": "2024-05-01T18:00:00", "type": "Strength"})

    counts = client.get("/api/dashboard/stats", headers=auth_headers).json()["counts"]
    assert counts["workouts"] == 1
    assert counts["runs"] == 2
    assert counts["totalRunDistance"] == pytest.approx(8.2)
    assert counts["avgSleepDuration"] == pytest.approx(7.5)
    assert counts["avgSleepQuality"] == pytest.approx(3.5)


def test_current_weight_is_latest_by_date_not_by_insertion(client, auth_headers):
    _post(client, auth_headers, "/api/weight", {"date": "2024-05-10T08:00:00", "weight": 79.4})
    _post(client, auth_headers, "/api/weight", {"date": "2024-04-01T08:00:00", "weight": 83.0})

    counts = client.get("/api/dashboard/stats", headers=auth_headers).json()["counts"]
    assert counts["currentWeight"] == 79.4


def test_recent_workouts_are_the_five_newest(client, auth_headers):
    ids_by_day = {}
    for day in range(1, 8):
        workout = _post(
            client,
            auth_headers,
            "/api/workouts",
            {
                "date": f"2024-05-0{day}T18:00:00",
                "type": "Cardio",
                "exercises": [{"name": "Bike", "sets": 1, "reps": 1, "duration": 30}],
            },
        )
        ids_by_day[day] = workout["id"]

    stats = client.get("/api/dashboard/stats", headers=auth_headers).json()
    assert stats["counts"]["workouts"] == 7
    assert [w["id"] for w in stats["recentWorkouts"]] == [ids_by_day[d] for d in (7, 6, 5, 4, 3)]
    assert stats["recentWorkouts"][0]["exercises"][0]["name"] == "Bike"


def test_dashboard_ignores_other_users_records(client, auth_headers, other_headers):
    _post(client, other_headers, "/api/runs", {"date": "2024-05-01T07:00:00", "distance": 42.2, "duration": 240})
    _post(client, other_headers, "/api/weight", {"date": "2024-05-01T08:00:00", "weight": 90})
    _post(client, other_headers, "/api/workouts", {"date": "2024-05-01T18:00:00", "type": "Strength"})

    stats = client.get("/api/dashboard/stats", headers=auth_headers).json()
    assert stats["counts"]["runs"] == 0
    assert stats["counts"]["totalRunDistance"] == 0
    assert stats["counts"]["currentWeight"] is None
    assert stats["recentWorkouts"] == []


def test_dashboard_fails_whole_when_one_read_fails(client, auth_headers, monkeypatch):
    async def _broken(db, user_id):
        raise OperationalError("SELECT", {}, Exception("connection reset"))

    monkeypatch.setattr(dashboard, "sleep_averages", _broken)
    resp = client.get("/api/dashboard/stats", headers=auth_headers)
    assert resp.status_code == 503
    assert resp.json() == {"message": "Database unavailable"}
