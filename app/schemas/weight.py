"""WeightLog schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.schemas.base import CamelModel


class WeightLogCreate(CamelModel):
    date: datetime
    weight: float = Field(..., gt=0, description="Body weight in kg")
    body_fat: float | None = Field(None, ge=0, le=100, description="Body fat %")


class WeightLogRead(CamelModel):
    id: UUID
    user_id: UUID
    date: datetime
    weight: float
    body_fat: float | None = None
    created_at: datetime
