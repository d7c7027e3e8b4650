"""Set endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.api.deps import get_current_user_id
from workout_log.db.session import get_db
from workout_log.schemas.workout import SetRead, SetUpdate
from workout_log.services import sets

router = APIRouter()


@router.patch("/{set_id}", response_model=SetRead)
async def update_set(
    set_id: uuid.UUID,
    payload: SetUpdate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Update reps, weight or completion. Omitted fields are left unchanged; null clears reps/weight."""
    return await sets.update_set(db, user_id, set_id, payload)


@router.delete("/{set_id}", status_code=204)
async def delete_set(
    set_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete a set."""
    await sets.remove_set(db, user_id, set_id)
    return None
