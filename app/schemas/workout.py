"""Workout and Exercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.core.constants import MAX_EXERCISES_PER_WORKOUT
from app.schemas.base import CamelModel


class ExerciseBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    weight: float | None = Field(None, ge=0, description="Load in kg")
    duration: float | None = Field(None, ge=0, description="Minutes")


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    id: UUID
    workout_id: UUID


class WorkoutBase(CamelModel):
    date: datetime
    type: str = Field(..., min_length=1, max_length=100)
    notes: str | None = None


class WorkoutCreate(WorkoutBase):
    exercises: list[ExerciseCreate] = Field(default_factory=list, max_length=MAX_EXERCISES_PER_WORKOUT)


class WorkoutRead(WorkoutBase):
    id: UUID
    user_id: UUID
    created_at: datetime
    exercises: list[ExerciseRead] = []
