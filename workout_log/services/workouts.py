"""Workout repository: owner-scoped create, read, update and delete."""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.core.config import get_settings
from workout_log.core.enums import WorkoutStatus
from workout_log.core.errors import NotFoundError, ValidationError
from workout_log.models.workout import Workout
from workout_log.schemas.workout import WorkoutCreate, WorkoutDetail, WorkoutUpdate
from workout_log.services.integrity import flush_or_conflict
from workout_log.services.ownership import require_owned
from workout_log.services.projection import group_workout_rows, workout_rows_query

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("title", "notes")
_TIMESTAMP_FIELDS = ("started_at", "completed_at")


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def day_bounds(day: date, tz_name: str | None = None) -> tuple[datetime, datetime]:
    """Half-open [midnight, next midnight) of ``day`` in ``tz_name``, as UTC."""
    tz_name = tz_name or get_settings().day_boundary_tz
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown time zone: {tz_name!r}") from exc
    day_start = datetime.combine(day, time.min, tzinfo=tz)
    next_day_start = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return as_utc(day_start), as_utc(next_day_start)


def _normalize(data: dict) -> dict:
    # Blank title/notes clear the column
    for key in _TEXT_FIELDS:
        if key in data and not data[key]:
            data[key] = None
    for key in _TIMESTAMP_FIELDS:
        if data.get(key) is not None:
            data[key] = as_utc(data[key])
    if "status" in data:
        try:
            data["status"] = WorkoutStatus(data["status"])
        except ValueError as exc:
            raise ValidationError(f"Unknown workout status: {data['status']!r}") from exc
    return data


async def create_workout(db: AsyncSession, user_id: str, payload: WorkoutCreate) -> Workout:
    """Start or plan a workout for ``user_id``; started_at defaults to now."""
    data = _normalize(payload.model_dump())
    if data.get("started_at") is None:
        data["started_at"] = datetime.now(timezone.utc)
    workout = Workout(user_id=user_id, **data)
    db.add(workout)
    await flush_or_conflict(db, "Workout violates a constraint")
    await db.refresh(workout)
    logger.info("Created workout %s for user %s", workout.id, user_id)
    return workout


async def get_workout(db: AsyncSession, user_id: str, workout_id: uuid.UUID) -> Workout | None:
    """Workout by id, or None when it does not exist or belongs to someone else."""
    result = await db.execute(
        select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def get_workouts_by_date(
    db: AsyncSession,
    user_id: str,
    day: date,
    tz_name: str | None = None,
) -> list[WorkoutDetail]:
    """All of the user's workouts started on ``day``, with exercises and sets nested."""
    day_start, next_day_start = day_bounds(day, tz_name)
    result = await db.execute(
        workout_rows_query().where(
            Workout.user_id == user_id,
            Workout.started_at >= day_start,
            Workout.started_at < next_day_start,
        )
    )
    return group_workout_rows(result.mappings())


async def get_workout_detail(db: AsyncSession, user_id: str, workout_id: uuid.UUID) -> WorkoutDetail:
    """Nested view of one workout; NotFoundError when not owned."""
    result = await db.execute(
        workout_rows_query().where(Workout.id == workout_id, Workout.user_id == user_id)
    )
    grouped = group_workout_rows(result.mappings())
    if not grouped:
        raise NotFoundError("Workout not found")
    return grouped[0]


async def update_workout(
    db: AsyncSession,
    user_id: str,
    workout_id: uuid.UUID,
    changes: WorkoutUpdate,
) -> Workout:
    """
    Apply only the fields present in ``changes``.

    completed_at earlier than started_at is left for the check constraint and
    surfaces as ConstraintError.
    """
    workout = await require_owned(db, user_id, Workout, workout_id)
    for key, value in _normalize(changes.model_dump(exclude_unset=True)).items():
        setattr(workout, key, value)
    await flush_or_conflict(db, "Workout completion time must not be before its start time")
    await db.refresh(workout)
    return workout


async def delete_workout(db: AsyncSession, user_id: str, workout_id: uuid.UUID) -> None:
    """Delete a workout; its exercises and sets go with it (FK cascade)."""
    workout = await require_owned(db, user_id, Workout, workout_id)
    await db.delete(workout)
    await db.flush()
    logger.info("Deleted workout %s for user %s", workout_id, user_id)
