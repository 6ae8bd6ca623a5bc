"""Sleep log endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user_id
from app.db.session import get_db
from app.models.sleep_log import SleepLog
from app.schemas.message import MessageResponse
from app.schemas.sleep import SleepLogCreate, SleepLogRead
from app.services.ownership import delete_owned_record

router = APIRouter()


@router.get("", response_model=list[SleepLogRead])
async def list_sleep_logs(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(SleepLog)
        .where(SleepLog.user_id == user_id)
        .order_by(SleepLog.date.desc(), SleepLog.created_at.asc())
    )
    return result.scalars().all()


@router.post("", response_model=SleepLogRead, status_code=201)
async def log_sleep(
    payload: SleepLogCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    log = SleepLog(user_id=user_id, **payload.model_dump())
    db.add(log)
    await db.flush()
    await db.refresh(log)
    await db.commit()
    return log


@router.delete("/{log_id}", response_model=MessageResponse)
async def delete_sleep_log(
    log_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await delete_owned_record(db, SleepLog, log_id, user_id, "Sleep log")
    await db.commit()
    return MessageResponse(message="Sleep log deleted successfully")
