import uuid

import pytest
from jose import jwt

from app.core.config import Settings
from app.core.exceptions import UnauthenticatedError
from app.core.security import create_access_token, resolve_identity


def test_register_returns_token_and_user(client):
    resp = client.post(
        "/api/auth/register",
        json={"name": "Alice", "email": "Alice@Example.com", "password": "secret123"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["token"]
    assert body["user"]["name"] == "Alice"
    assert body["user"]["email"] == "alice@example.com"
    assert "passwordHash" not in body["user"]


def test_register_duplicate_email_conflicts(client, register):
    register(email="dup@example.com")
    resp = client.post(
        "/api/auth/register",
        json={"name": "Again", "email": "dup@example.com", "password": "secret123"},
    )
    assert resp.status_code == 409
    assert resp.json()["message"] == "Email is already registered"


def test_register_rejects_short_password(client):
    resp = client.post(
        "/api/auth/register",
        json={"name": "Al", "email": "al@example.com", "password": "123"},
    )
    assert resp.status_code == 422


def test_login_and_me(client, register):
    _, user = register(name="Carol", email="carol@example.com", password="hunter22")
    resp = client.post("/api/auth/login", json={"email": "carol@example.com", "password": "hunter22"})
    assert resp.status_code == 200
    token = resp.json()["token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json() == {"id": user["id"], "name": "Carol", "email": "carol@example.com"}


def test_login_wrong_password(client, register):
    register(email="dave@example.com", password="right-one")
    resp = client.post("/api/auth/login", json={"email": "dave@example.com", "password": "wrong-one"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid email or password"


def test_login_unknown_email(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "whatever"})
    assert resp.status_code == 401


@pytest.mark.parametrize("path", ["/api/workouts", "/api/runs", "/api/sleep", "/api/weight", "/api/dashboard/stats"])
def test_protected_routes_require_token(client, path):
    resp = client.get(path)
    assert resp.status_code == 401
    assert resp.json() == {"message": "Missing bearer token"}


def test_garbage_token_is_rejected(client):
    resp = client.get("/api/runs", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_token_signed_with_other_secret_is_rejected(client):
    foreign = Settings(_env_file=None, jwt_secret_key="someone-else")
    token = create_access_token(uuid.uuid4(), foreign)
    resp = client.post(
        "/api/runs",
        headers={"Authorization": f"Bearer {token}"},
        json={"date": "2024-05-01T07:00:00", "distance": 5, "duration": 25},
    )
    assert resp.status_code == 401


def test_resolve_identity_roundtrip():
    settings = Settings(_env_file=None, jwt_secret_key="k")
    user_id = uuid.uuid4()
    assert resolve_identity(create_access_token(user_id, settings), settings) == user_id


def test_resolve_identity_expired():
    settings = Settings(_env_file=None, jwt_secret_key="k", access_token_expire_minutes=-5)
    with pytest.raises(UnauthenticatedError):
        resolve_identity(create_access_token(uuid.uuid4(), settings), settings)


def test_resolve_identity_bad_subject():
    settings = Settings(_env_file=None, jwt_secret_key="k")
    token = jwt.encode({"sub": "not-a-uuid"}, "k", algorithm="HS256")
    with pytest.raises(UnauthenticatedError):
        resolve_identity(token, settings)
