"""Weight log endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user_id
from app.db.session import get_db
from app.models.weight_log import WeightLog
from app.schemas.message import MessageResponse
from app.schemas.weight import WeightLogCreate, WeightLogRead
from app.services.ownership import delete_owned_record

router = APIRouter()


@router.get("", response_model=list[WeightLogRead])
async def list_weight_logs(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(WeightLog)
        .where(WeightLog.user_id == user_id)
        .order_by(desc(WeightLog.date), WeightLog.created_at.asc())
    )
    return result.scalars().all()


@router.post("", response_model=WeightLogRead, status_code=201)
async def log_weight(
    payload: WeightLogCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Log body weight (kg) with optional body fat %."""
    log = WeightLog(user_id=user_id, **payload.model_dump())
    db.add(log)
    await db.flush()
    await db.refresh(log)
    await db.commit()
    return log


@router.delete("/{log_id}", response_model=MessageResponse)
async def delete_weight_log(
    log_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await delete_owned_record(db, WeightLog, log_id, user_id, "Weight log")
    await db.commit()
    return MessageResponse(message="Weight log deleted successfully")
