"""Shared fixtures: a fresh in-memory SQLite database per test."""

from datetime import datetime

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from workout_log.core.enums import WorkoutStatus
from workout_log.db.base import Base
from workout_log.models import Exercise
from workout_log.schemas.workout import WorkoutCreate
from workout_log.services import workouts

U1 = "user_1"
U2 = "user_2"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces FK cascade/restrict with this pragma
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def bench_press(db):
    """Global 'Bench Press' catalog entry."""
    exercise = Exercise(name="Bench Press", is_global=True, user_id=None)
    db.add(exercise)
    await db.commit()
    return exercise


@pytest_asyncio.fixture
async def squat(db):
    exercise = Exercise(name="Back Squat", is_global=True, user_id=None)
    db.add(exercise)
    await db.commit()
    return exercise


@pytest_asyncio.fixture
async def workout(db):
    """U1's planned workout on 2024-01-01 09:00 UTC."""
    w = await workouts.create_workout(
        db,
        U1,
        WorkoutCreate(title="Push day", status=WorkoutStatus.PLANNED, started_at=datetime(2024, 1, 1, 9, 0)),
    )
    await db.commit()
    return w
