"""Ownership guard: resolve a record through its owner chain or fail as not found."""

from __future__ import annotations

import logging
import uuid
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.core.errors import NotFoundError
from workout_log.models.workout import Workout, WorkoutExercise, WorkoutSet

logger = logging.getLogger(__name__)

OwnedModel = TypeVar("OwnedModel", Workout, WorkoutExercise, WorkoutSet)

_LABELS = {
    Workout: "Workout",
    WorkoutExercise: "Workout exercise",
    WorkoutSet: "Set",
}


async def require_owned(
    db: AsyncSession,
    user_id: str,
    model: type[OwnedModel],
    entity_id: uuid.UUID,
) -> OwnedModel:
    """
    Load ``model`` row ``entity_id`` only if its workout belongs to ``user_id``.

    Raises NotFoundError both for unknown ids and for other users' rows.
    Run it on the same session as the write that follows so the check and the
    mutation share one transaction.
    """
    stmt = model.owner_chain().where(model.id == entity_id, Workout.user_id == user_id)
    result = await db.execute(stmt)
    entity = result.scalar_one_or_none()
    if entity is None:
        logger.debug("%s %s not found for user %s", model.__name__, entity_id, user_id)
        raise NotFoundError(f"{_LABELS[model]} not found")
    return entity
