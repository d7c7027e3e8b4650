"""Exercise schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workout_log.core.constants import EXERCISE_NAME_MAX_LENGTH


class ExerciseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=EXERCISE_NAME_MAX_LENGTH)


class ExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    is_global: bool
