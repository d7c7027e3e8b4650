"""Exercise assignment: attach catalog exercises to a workout in order, or detach them."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.core.errors import ValidationError
from workout_log.models.workout import Workout, WorkoutExercise
from workout_log.services.exercise_catalog import get_available, get_or_create_exercise
from workout_log.services.integrity import flush_or_conflict
from workout_log.services.ownership import require_owned
from workout_log.services.sequence import next_value

logger = logging.getLogger(__name__)


async def next_order(db: AsyncSession, user_id: str, workout_id: uuid.UUID) -> int:
    """Next free position in the workout (max + 1, or 1)."""
    await require_owned(db, user_id, Workout, workout_id)
    return await next_value(db, WorkoutExercise.order, WorkoutExercise.workout_id, workout_id)


async def assign_exercise(
    db: AsyncSession,
    user_id: str,
    workout_id: uuid.UUID,
    exercise_id: uuid.UUID,
    order: int | None = None,
) -> WorkoutExercise:
    """
    Attach an exercise (global or the user's own) to the user's workout.

    Without ``order`` the next position is computed in this same transaction.
    A position already taken raises ConstraintError.
    """
    await require_owned(db, user_id, Workout, workout_id)
    await get_available(db, user_id, exercise_id)
    if order is None:
        order = await next_value(db, WorkoutExercise.order, WorkoutExercise.workout_id, workout_id)
    elif order <= 0:
        raise ValidationError("Exercise order must be a positive integer")

    workout_exercise = WorkoutExercise(workout_id=workout_id, exercise_id=exercise_id, order=order)
    db.add(workout_exercise)
    await flush_or_conflict(db, f"Position {order} is already taken in this workout")
    logger.info("Assigned exercise %s to workout %s at %d", exercise_id, workout_id, order)
    return workout_exercise


async def create_and_assign_exercise(
    db: AsyncSession,
    user_id: str,
    workout_id: uuid.UUID,
    name: str,
    order: int | None = None,
) -> WorkoutExercise:
    """Attach an exercise by name, reusing a visible one or creating a custom one."""
    # Check the workout before touching the catalog
    await require_owned(db, user_id, Workout, workout_id)
    exercise = await get_or_create_exercise(db, user_id, name)
    return await assign_exercise(db, user_id, workout_id, exercise.id, order)


async def unassign_exercise(db: AsyncSession, user_id: str, workout_exercise_id: uuid.UUID) -> None:
    """Detach an exercise. Its sets are removed by FK cascade; other positions keep their values."""
    workout_exercise = await require_owned(db, user_id, WorkoutExercise, workout_exercise_id)
    await db.delete(workout_exercise)
    await db.flush()
