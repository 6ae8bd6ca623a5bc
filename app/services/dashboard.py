"""Dashboard aggregation: counts, totals and latest values across all record types.

Each read runs in its own session so they can be issued concurrently; an AsyncSession
cannot run more than one statement at a time.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.core.constants import RECENT_WORKOUTS_LIMIT
from app.models.run import Run
from app.models.sleep_log import SleepLog
from app.models.weight_log import WeightLog
from app.models.workout import Workout
from app.schemas.dashboard import DashboardCounts, DashboardStats
from app.schemas.workout import WorkoutRead

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def count_workouts(db: AsyncSession, user_id: uuid.UUID) -> int:
    result = await db.execute(select(func.count(Workout.id)).where(Workout.user_id == user_id))
    return int(result.scalar() or 0)


async def count_runs(db: AsyncSession, user_id: uuid.UUID) -> int:
    result = await db.execute(select(func.count(Run.id)).where(Run.user_id == user_id))
    return int(result.scalar() or 0)


async def total_run_distance(db: AsyncSession, user_id: uuid.UUID) -> float:
    result = await db.execute(select(func.sum(Run.distance)).where(Run.user_id == user_id))
    return float(result.scalar() or 0)


async def sleep_averages(db: AsyncSession, user_id: uuid.UUID) -> tuple[float, float]:
    """(avg duration, avg quality); both 0 when there are no logs."""
    result = await db.execute(
        select(
            func.avg(SleepLog.duration).label("avg_duration"),
            func.avg(SleepLog.quality).label("avg_quality"),
        ).where(SleepLog.user_id == user_id)
    )
    row = result.one()
    return float(row.avg_duration or 0), float(row.avg_quality or 0)


async def latest_weight(db: AsyncSession, user_id: uuid.UUID) -> float | None:
    """Weight of the most recent log by date, or None."""
    result = await db.execute(
        select(WeightLog.weight)
        .where(WeightLog.user_id == user_id)
        .order_by(WeightLog.date.desc(), WeightLog.created_at.desc())
        .limit(1)
    )
    weight = result.scalar_one_or_none()
    return float(weight) if weight is not None else None


async def recent_workouts(
    db: AsyncSession,
    user_id: uuid.UUID,
    limit: int = RECENT_WORKOUTS_LIMIT,
) -> list[WorkoutRead]:
    result = await db.execute(
        select(Workout)
        .where(Workout.user_id == user_id)
        .options(selectinload(Workout.exercises))
        .order_by(Workout.date.desc(), Workout.created_at.asc())
        .limit(limit)
    )
    return [WorkoutRead.model_validate(w) for w in result.scalars().all()]


async def build_dashboard_stats(
    session_maker: async_sessionmaker[AsyncSession],
    user_id: uuid.UUID,
) -> DashboardStats:
    """
    Run the six dashboard reads concurrently and merge them.
    Any failing read cancels the others and fails the whole summary; there is no partial result.
    The first failure is re-raised as itself so the store error handlers can classify it.
    """

    async def _read(query: Callable[..., Awaitable[T]]) -> T:
        async with session_maker() as session:
            return await query(session, user_id)

    try:
        async with asyncio.TaskGroup() as tg:
            workouts_task = tg.create_task(_read(count_workouts))
            runs_task = tg.create_task(_read(count_runs))
            distance_task = tg.create_task(_read(total_run_distance))
            sleep_task = tg.create_task(_read(sleep_averages))
            weight_task = tg.create_task(_read(latest_weight))
            recent_task = tg.create_task(_read(recent_workouts))
    except ExceptionGroup as eg:
        raise eg.exceptions[0] from eg

    n_workouts = workouts_task.result()
    n_runs = runs_task.result()
    avg_duration, avg_quality = sleep_task.result()
    logger.debug("Dashboard for %s: %d workouts, %d runs", user_id, n_workouts, n_runs)
    return DashboardStats(
        counts=DashboardCounts(
            workouts=n_workouts,
            runs=n_runs,
            total_run_distance=distance_task.result(),
            avg_sleep_duration=avg_duration,
            avg_sleep_quality=avg_quality,
            current_weight=weight_task.result(),
        ),
        recent_workouts=recent_task.result(),
    )
