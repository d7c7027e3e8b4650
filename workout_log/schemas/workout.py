"""Workout, WorkoutExercise and set schemas.

Update schemas are partial: services apply ``model_dump(exclude_unset=True)``
so a field that was never sent is left alone while an explicit ``null``
clears the column.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from workout_log.core.constants import (
    EXERCISE_NAME_MAX_LENGTH,
    SET_WEIGHT_DECIMAL_PLACES,
    SET_WEIGHT_MAX_DIGITS,
    WORKOUT_TITLE_MAX_LENGTH,
)
from workout_log.core.enums import WorkoutStatus


# ── Sets ─────────────────────────────────────────────────────────────────


class SetCreate(BaseModel):
    """New set. ``set_number`` is taken as max + 1 when omitted."""

    set_number: int | None = Field(None, gt=0)
    reps: int | None = Field(None, ge=0)
    weight: Decimal | None = Field(
        None, ge=0, max_digits=SET_WEIGHT_MAX_DIGITS, decimal_places=SET_WEIGHT_DECIMAL_PLACES
    )


class SetUpdate(BaseModel):
    reps: int | None = Field(None, ge=0)
    weight: Decimal | None = Field(
        None, ge=0, max_digits=SET_WEIGHT_MAX_DIGITS, decimal_places=SET_WEIGHT_DECIMAL_PLACES
    )
    is_completed: bool | None = None

    @field_validator("is_completed")
    @classmethod
    def completion_not_null(cls, v: bool | None) -> bool:
        if v is None:
            raise ValueError("is_completed cannot be null")
        return v


class SetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    set_number: int
    reps: int | None = None
    weight: Decimal | None = None
    is_completed: bool = False


# ── Workout exercises ────────────────────────────────────────────────────


class WorkoutExerciseCreate(BaseModel):
    """Attach a catalog exercise by id, or by name (reused or created)."""

    exercise_id: UUID | None = None
    exercise_name: str | None = Field(None, min_length=1, max_length=EXERCISE_NAME_MAX_LENGTH)
    order: int | None = Field(None, gt=0)

    @model_validator(mode="after")
    def exactly_one_exercise_ref(self) -> "WorkoutExerciseCreate":
        if (self.exercise_id is None) == (self.exercise_name is None):
            raise ValueError("Provide exactly one of exercise_id or exercise_name")
        return self


class WorkoutExerciseRead(BaseModel):
    """Exercise within a workout (nested view), with its sets in set_number order."""

    workout_exercise_id: UUID
    exercise_id: UUID
    exercise_name: str
    order: int
    sets: list[SetRead] = []


# ── Workouts ─────────────────────────────────────────────────────────────


class WorkoutBase(BaseModel):
    title: str | None = Field(None, max_length=WORKOUT_TITLE_MAX_LENGTH)
    notes: str | None = None


class WorkoutCreate(WorkoutBase):
    status: WorkoutStatus = WorkoutStatus.PLANNED
    started_at: datetime | None = None  # now when omitted


class WorkoutUpdate(WorkoutBase):
    status: WorkoutStatus | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None

    @field_validator("status", "started_at")
    @classmethod
    def required_column_not_null(cls, v):
        if v is None:
            raise ValueError("cannot be null")
        return v


class WorkoutRead(WorkoutBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    status: WorkoutStatus
    started_at: datetime
    completed_at: datetime | None = None


class WorkoutDetail(WorkoutRead):
    """Workout with nested exercises and sets (day view / detail view)."""

    exercises: list[WorkoutExerciseRead] = []
