"""Workout endpoints: list, create (with exercises), delete."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.api.deps import get_current_user_id
from app.db.session import get_db
from app.models.workout import Exercise, Workout
from app.schemas.message import MessageResponse
from app.schemas.workout import WorkoutCreate, WorkoutRead
from app.services.ownership import delete_owned_record

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """The requester's workouts with exercises, newest first (ties in insertion order)."""
    result = await db.execute(
        select(Workout)
        .where(Workout.user_id == user_id)
        .options(selectinload(Workout.exercises))
        .order_by(Workout.date.desc(), Workout.created_at.asc())
    )
    return result.scalars().all()


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Log a workout together with its exercises.
    Parent and children are flushed together and committed (or rolled back) as one transaction.
    """
    workout = Workout(
        user_id=user_id,
        date=payload.date,
        type=payload.type,
        notes=payload.notes,
        exercises=[
            Exercise(position=i, **ex.model_dump())
            for i, ex in enumerate(payload.exercises)
        ],
    )
    db.add(workout)
    await db.flush()

    # Reload with exercises so serialization never triggers an async lazy load
    result = await db.execute(
        select(Workout)
        .where(Workout.id == workout.id)
        .options(selectinload(Workout.exercises))
    )
    workout = result.scalar_one()
    await db.commit()
    logger.info("User %s logged workout %s with %d exercises", user_id, workout.id, len(workout.exercises))
    return workout


@router.delete("/{workout_id}", response_model=MessageResponse)
async def delete_workout(
    workout_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout and its exercises."""
    await delete_owned_record(
        db,
        Workout,
        workout_id,
        user_id,
        "Workout",
        options=(selectinload(Workout.exercises),),
    )
    await db.commit()
    return MessageResponse(message="Workout deleted successfully")
