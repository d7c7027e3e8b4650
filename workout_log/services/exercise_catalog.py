"""Exercise catalog: global exercises plus each user's custom ones."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.core.constants import EXERCISE_NAME_MAX_LENGTH
from workout_log.core.errors import DuplicateNameError, NotFoundError, ValidationError
from workout_log.models.exercise import Exercise
from workout_log.services.integrity import flush_or_conflict

logger = logging.getLogger(__name__)


def _visible_to(user_id: str):
    return or_(Exercise.is_global.is_(True), Exercise.user_id == user_id)


def _check_name(name: str) -> str:
    # Stored and matched exactly as given; only blank names are refused
    if not name or not name.strip():
        raise ValidationError("Exercise name is required")
    if len(name) > EXERCISE_NAME_MAX_LENGTH:
        raise ValidationError(f"Exercise name is limited to {EXERCISE_NAME_MAX_LENGTH} characters")
    return name


async def list_available(db: AsyncSession, user_id: str) -> list[Exercise]:
    """Global exercises and the user's own, by name."""
    result = await db.execute(select(Exercise).where(_visible_to(user_id)).order_by(Exercise.name))
    return list(result.scalars().all())


async def get_available(db: AsyncSession, user_id: str, exercise_id: uuid.UUID) -> Exercise:
    """Exercise by id if it is global or owned by the user, else NotFoundError."""
    result = await db.execute(
        select(Exercise).where(Exercise.id == exercise_id, _visible_to(user_id))
    )
    exercise = result.scalar_one_or_none()
    if exercise is None:
        raise NotFoundError("Exercise not found")
    return exercise


async def create_exercise(db: AsyncSession, user_id: str, name: str) -> Exercise:
    """
    Insert a custom exercise owned by ``user_id``.

    A second exercise with the same exact name for the same user is rejected by
    the unique index and raised as DuplicateNameError; there is no pre-check.
    """
    exercise = Exercise(name=_check_name(name), is_global=False, user_id=user_id)
    db.add(exercise)
    await flush_or_conflict(
        db, f"Exercise '{exercise.name}' already exists", error_class=DuplicateNameError
    )
    logger.info("Created exercise %s for user %s", exercise.id, user_id)
    return exercise


async def get_or_create_exercise(db: AsyncSession, user_id: str, name: str) -> Exercise:
    """Reuse the user's own exercise, then a global one, with this exact name; else create it."""
    name = _check_name(name)
    result = await db.execute(
        select(Exercise)
        .where(Exercise.name == name, _visible_to(user_id))
        # Own exercise wins over a global one with the same name
        .order_by(Exercise.is_global.asc())
        .limit(1)
    )
    exercise = result.scalar_one_or_none()
    if exercise is not None:
        return exercise
    return await create_exercise(db, user_id, name)
