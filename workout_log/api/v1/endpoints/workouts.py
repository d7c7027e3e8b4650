"""Workout endpoints: sessions, their day view, and attaching exercises."""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.api.deps import get_current_user_id
from workout_log.db.session import get_db
from workout_log.schemas.workout import (
    WorkoutCreate,
    WorkoutDetail,
    WorkoutExerciseCreate,
    WorkoutRead,
    WorkoutUpdate,
)
from workout_log.services import assignments, workouts

router = APIRouter()


@router.get("", response_model=list[WorkoutDetail])
async def list_workouts_on_date(
    day: date = Query(..., alias="date"),
    tz: str | None = None,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Workouts started on the given calendar day, with exercises and sets."""
    return await workouts.get_workouts_by_date(db, user_id, day, tz)


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Plan or start a workout."""
    return await workouts.create_workout(db, user_id, payload)


@router.get("/{workout_id}", response_model=WorkoutDetail)
async def get_workout(
    workout_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """One workout with exercises and sets. 404 for unknown ids and other users' workouts alike."""
    return await workouts.get_workout_detail(db, user_id, workout_id)


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Update the fields sent; blank title/notes clear them."""
    return await workouts.update_workout(db, user_id, workout_id, payload)


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout with its exercises and sets."""
    await workouts.delete_workout(db, user_id, workout_id)
    return None


@router.post("/{workout_id}/exercises", response_model=WorkoutDetail, status_code=201)
async def add_exercise_to_workout(
    workout_id: uuid.UUID,
    payload: WorkoutExerciseCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Attach an exercise by id or by name at the next position (or ``order``). Returns the refreshed workout."""
    if payload.exercise_id is not None:
        await assignments.assign_exercise(db, user_id, workout_id, payload.exercise_id, payload.order)
    else:
        await assignments.create_and_assign_exercise(
            db, user_id, workout_id, payload.exercise_name, payload.order
        )
    return await workouts.get_workout_detail(db, user_id, workout_id)
