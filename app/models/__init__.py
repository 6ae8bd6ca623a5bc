"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.run import Run
from app.models.sleep_log import SleepLog
from app.models.user import User
from app.models.weight_log import WeightLog
from app.models.workout import Exercise, Workout

__all__ = [
    "Exercise",
    "Run",
    "SleepLog",
    "User",
    "WeightLog",
    "Workout",
]
