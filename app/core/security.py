"""Security utilities: password hashing and bearer tokens."""

import uuid
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import Settings
from app.core.exceptions import UnauthenticatedError

password_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)


def create_access_token(user_id: uuid.UUID, settings: Settings) -> str:
    """Issue a signed token whose subject is the user id."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def resolve_identity(token: str, settings: Settings) -> uuid.UUID:
    """
    Verify a bearer token and return the user id it was issued for.
    Raises UnauthenticatedError for bad signatures, expired tokens or a missing/invalid subject.
    """
    try:
        claims = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise UnauthenticatedError("Invalid or expired token") from e
    subject = claims.get("sub")
    if not subject:
        raise UnauthenticatedError("Token has no subject")
    try:
        return uuid.UUID(subject)
    except (TypeError, ValueError) as e:
        raise UnauthenticatedError("Token subject is not a user id") from e
