"""Exercise catalog endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.api.deps import get_current_user_id
from workout_log.db.session import get_db
from workout_log.schemas.exercise import ExerciseCreate, ExerciseRead
from workout_log.services import exercise_catalog

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Global exercises plus the caller's custom ones, by name."""
    return await exercise_catalog.list_available(db, user_id)


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a custom exercise. 409 if the caller already has one with this name."""
    return await exercise_catalog.create_exercise(db, user_id, payload.name)
