"""Run schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.schemas.base import CamelModel


class RunCreate(CamelModel):
    date: datetime
    distance: float = Field(..., gt=0, description="Kilometres")
    duration: float = Field(..., gt=0, description="Minutes")


class RunRead(CamelModel):
    id: UUID
    user_id: UUID
    date: datetime
    distance: float
    duration: float
    pace: float
    created_at: datetime
