"""Dependency injection for API routes."""

import uuid

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings
from app.core.exceptions import UnauthenticatedError
from app.core.security import resolve_identity

# auto_error=False so a missing header goes through our own 401 response shape
bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> uuid.UUID:
    """Auth guard: resolve the bearer token to a user id or fail with 401."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Missing bearer token")
    return resolve_identity(credentials.credentials, settings)
