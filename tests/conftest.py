"""Pytest configuration and fixtures."""

import uuid

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app import models  # noqa: F401 - register all models
from app.core.config import Settings
from app.db.base import Base
from app.db.session import build_engine, build_session_maker
from app.main import create_application


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file; tables are created on startup."""
    return Settings(
        _env_file=None,
        database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        create_tables_on_startup=True,
        jwt_secret_key="test-secret",
        environment="test",
    )


@pytest.fixture
def client(settings):
    app = create_application(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client):
    """Register a fresh user; returns (auth headers, user json)."""

    def _register(name: str = "Test User", email: str | None = None, password: str = "secret123"):
        email = email or f"{uuid.uuid4().hex[:10]}@example.com"
        resp = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user"]

    return _register


@pytest.fixture
def auth_headers(register):
    headers, _ = register(name="Alice")
    return headers


@pytest.fixture
def other_headers(register):
    headers, _ = register(name="Bob")
    return headers


@pytest_asyncio.fixture
async def session_maker(tmp_path):
    """Session factory over a fresh schema, for service-level tests without HTTP."""
    settings = Settings(_env_file=None, database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    engine = build_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_maker(engine)
    await engine.dispose()
