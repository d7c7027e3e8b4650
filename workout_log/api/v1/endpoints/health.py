"""Liveness and readiness checks for the workout log API."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.db.session import get_db
from workout_log.models import Exercise, Workout, WorkoutExercise, WorkoutSet

logger = logging.getLogger(__name__)
router = APIRouter()

_REQUIRED_MODELS = (Exercise, Workout, WorkoutExercise, WorkoutSet)


@router.get("")
async def health():
    return {"status": "ok"}


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Ready once every workout log table can be queried, i.e. migrations have run."""
    for model in _REQUIRED_MODELS:
        table = model.__tablename__
        try:
            await db.execute(select(model.id).limit(1))
        except SQLAlchemyError as e:
            logger.exception("Readiness check failed on table %s", table)
            await db.rollback()
            return JSONResponse(
                status_code=503,
                content={"status": "error", "table": table, "database": str(e)},
            )
    return {"status": "ok", "tables": [m.__tablename__ for m in _REQUIRED_MODELS]}
