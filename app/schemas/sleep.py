"""SleepLog schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.core.constants import SLEEP_QUALITY_MAX, SLEEP_QUALITY_MIN
from app.schemas.base import CamelModel


class SleepLogCreate(CamelModel):
    date: datetime
    duration: float = Field(..., gt=0, le=24, description="Hours slept")
    quality: int = Field(..., ge=SLEEP_QUALITY_MIN, le=SLEEP_QUALITY_MAX)
    bed_time: datetime | None = None
    wake_time: datetime | None = None


class SleepLogRead(CamelModel):
    id: UUID
    user_id: UUID
    date: datetime
    duration: float
    quality: int
    bed_time: datetime | None = None
    wake_time: datetime | None = None
    created_at: datetime
