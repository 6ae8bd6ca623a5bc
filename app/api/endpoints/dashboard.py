"""Dashboard summary endpoint."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.api.deps import get_current_user_id
from app.db.session import get_session_maker
from app.schemas.dashboard import DashboardStats
from app.services.dashboard import build_dashboard_stats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    user_id: uuid.UUID = Depends(get_current_user_id),
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
):
    """Counts, run distance, sleep averages, current weight and the 5 latest workouts."""
    return await build_dashboard_stats(session_maker, user_id)
