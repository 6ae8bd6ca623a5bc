"""API router aggregation."""

from fastapi import APIRouter

from app.api.endpoints import auth, dashboard, health, runs, sleep, weight, workouts

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(runs.router, prefix="/runs", tags=["runs"])
api_router.include_router(sleep.router, prefix="/sleep", tags=["sleep"])
api_router.include_router(weight.router, prefix="/weight", tags=["weight"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
