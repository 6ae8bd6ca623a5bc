"""Account endpoints: register, login, current user."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_app_settings, get_current_user_id
from app.core.config import Settings
from app.core.exceptions import ConflictError, NotFoundError, UnauthenticatedError
from app.core.security import create_access_token, hash_password, verify_password
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import TokenResponse, UserLogin, UserRead, UserRegister

logger = logging.getLogger(__name__)
router = APIRouter()


async def _email_taken(db: AsyncSession, email: str) -> bool:
    existing = await db.execute(select(User.id).where(User.email == email))
    return existing.scalar_one_or_none() is not None


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(
    payload: UserRegister,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Create an account and return a token for it."""
    email = payload.email.lower()
    if await _email_taken(db, email):
        raise ConflictError("Email is already registered")

    user = User(name=payload.name, email=email, password_hash=hash_password(payload.password))
    db.add(user)
    try:
        await db.flush()
        await db.commit()
    except IntegrityError as e:
        # A concurrent registration won the unique index on users.email
        raise ConflictError("Email is already registered") from e
    logger.info("Registered user %s", user.id)
    return TokenResponse(token=create_access_token(user.id, settings), user=UserRead.model_validate(user))


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: UserLogin,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    result = await db.execute(select(User).where(User.email == payload.email.lower()))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(payload.password, user.password_hash):
        raise UnauthenticatedError("Invalid email or password")
    return TokenResponse(token=create_access_token(user.id, settings), user=UserRead.model_validate(user))


@router.get("/me", response_model=UserRead)
async def me(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise NotFoundError("User")
    return user
