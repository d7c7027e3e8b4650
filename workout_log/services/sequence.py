"""Per-parent 1-based counters (exercise order within a workout, set number within an exercise)."""

from __future__ import annotations

import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from workout_log.core.constants import FIRST_SEQUENCE_VALUE


async def next_value(
    db: AsyncSession,
    column: InstrumentedAttribute,
    parent_column: InstrumentedAttribute,
    parent_id: uuid.UUID,
) -> int:
    """
    Return max(column) + 1 among rows of ``parent_id``, or 1 when there are none.

    Gaps left by deletes are never reused. Two transactions can read the same
    max; the unique index on (parent, column) rejects the second insert.
    """
    result = await db.execute(select(func.max(column)).where(parent_column == parent_id))
    current = result.scalar()
    return FIRST_SEQUENCE_VALUE if current is None else current + 1
