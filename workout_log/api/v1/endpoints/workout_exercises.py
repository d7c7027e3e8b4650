"""Endpoints on a single exercise within a workout."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.api.deps import get_current_user_id
from workout_log.db.session import get_db
from workout_log.schemas.workout import SetCreate, SetRead
from workout_log.services import assignments, sets

router = APIRouter()


@router.delete("/{workout_exercise_id}", status_code=204)
async def remove_exercise_from_workout(
    workout_exercise_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Detach the exercise and drop its sets. Other exercises keep their positions."""
    await assignments.unassign_exercise(db, user_id, workout_exercise_id)
    return None


@router.post("/{workout_exercise_id}/sets", response_model=SetRead, status_code=201)
async def add_set(
    workout_exercise_id: uuid.UUID,
    payload: SetCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Log a set; set_number defaults to the next one for this exercise."""
    return await sets.add_set(db, user_id, workout_exercise_id, payload)
