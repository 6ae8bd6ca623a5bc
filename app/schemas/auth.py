"""Registration, login and user schemas."""

from uuid import UUID

from pydantic import EmailStr, Field

from app.schemas.base import CamelModel


class UserRegister(CamelModel):
    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)


class UserRead(CamelModel):
    id: UUID
    name: str
    email: str


class TokenResponse(CamelModel):
    token: str
    user: UserRead
