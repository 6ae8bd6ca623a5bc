"""Run endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user_id
from app.db.session import get_db
from app.models.run import Run
from app.schemas.message import MessageResponse
from app.schemas.run import RunCreate, RunRead
from app.services.ownership import delete_owned_record
from app.services.run_metrics import compute_pace

router = APIRouter()


@router.get("", response_model=list[RunRead])
async def list_runs(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(Run)
        .where(Run.user_id == user_id)
        .order_by(Run.date.desc(), Run.created_at.asc())
    )
    return result.scalars().all()


@router.post("", response_model=RunRead, status_code=201)
async def log_run(
    payload: RunCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Log a run. Pace is derived here once and stored."""
    run = Run(
        user_id=user_id,
        date=payload.date,
        distance=payload.distance,
        duration=payload.duration,
        pace=compute_pace(payload.distance, payload.duration),
    )
    db.add(run)
    await db.flush()
    await db.refresh(run)
    await db.commit()
    return run


@router.delete("/{run_id}", response_model=MessageResponse)
async def delete_run(
    run_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await delete_owned_record(db, Run, run_id, user_id, "Run")
    await db.commit()
    return MessageResponse(message="Run deleted successfully")
