"""Set ledger: numbered sets within an assigned exercise."""

from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.core.errors import ValidationError
from workout_log.models.workout import WorkoutExercise, WorkoutSet
from workout_log.schemas.workout import SetCreate, SetUpdate
from workout_log.services.integrity import flush_or_conflict
from workout_log.services.ownership import require_owned
from workout_log.services.sequence import next_value


async def next_set_number(db: AsyncSession, user_id: str, workout_exercise_id: uuid.UUID) -> int:
    """Next set number for the assignment (max + 1, or 1)."""
    await require_owned(db, user_id, WorkoutExercise, workout_exercise_id)
    return await next_value(
        db, WorkoutSet.set_number, WorkoutSet.workout_exercise_id, workout_exercise_id
    )


async def add_set(
    db: AsyncSession,
    user_id: str,
    workout_exercise_id: uuid.UUID,
    payload: SetCreate,
) -> WorkoutSet:
    """Log a new, not yet completed set. A taken set_number raises ConstraintError."""
    await require_owned(db, user_id, WorkoutExercise, workout_exercise_id)
    set_number = payload.set_number
    if set_number is None:
        set_number = await next_value(
            db, WorkoutSet.set_number, WorkoutSet.workout_exercise_id, workout_exercise_id
        )
    elif set_number <= 0:
        raise ValidationError("Set number must be a positive integer")

    set_ = WorkoutSet(
        workout_exercise_id=workout_exercise_id,
        set_number=set_number,
        reps=payload.reps,
        weight=payload.weight,
        is_completed=False,
    )
    db.add(set_)
    await flush_or_conflict(db, f"Set {set_number} already exists for this exercise")
    await db.refresh(set_)
    return set_


async def update_set(
    db: AsyncSession,
    user_id: str,
    set_id: uuid.UUID,
    changes: SetUpdate,
) -> WorkoutSet:
    """
    Partial update. Only fields the caller actually sent are written: an
    omitted field is untouched, an explicit null clears reps/weight.
    """
    set_ = await require_owned(db, user_id, WorkoutSet, set_id)
    for k, v in changes.model_dump(exclude_unset=True).items():
        setattr(set_, k, v)
    await flush_or_conflict(db, "Set values violate a constraint")
    await db.refresh(set_)
    return set_


async def remove_set(db: AsyncSession, user_id: str, set_id: uuid.UUID) -> None:
    """Delete a set. Remaining set numbers are not renumbered."""
    set_ = await require_owned(db, user_id, WorkoutSet, set_id)
    await db.delete(set_)
    await db.flush()
