def test_root(client):
    assert client.get("/").json() == {"message": "Fitness Tracker API is running"}


def test_liveness(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_readiness_checks_database(client):
    resp = client.get("/api/health/ready")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": "connected"}
