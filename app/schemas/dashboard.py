"""Dashboard summary schema."""

from app.schemas.base import CamelModel
from app.schemas.workout import WorkoutRead


class DashboardCounts(CamelModel):
    workouts: int = 0
    runs: int = 0
    total_run_distance: float = 0
    avg_sleep_duration: float = 0
    avg_sleep_quality: float = 0
    current_weight: float | None = None


class DashboardStats(CamelModel):
    counts: DashboardCounts
    recent_workouts: list[WorkoutRead] = []
