"""Seed the global exercise catalog.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

Only inserts names that are not already present as global exercises.
"""
import uuid
from datetime import datetime, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

GLOBAL_EXERCISES = [
    "Back Squat",
    "Barbell Row",
    "Bench Press",
    "Bicep Curl",
    "Deadlift",
    "Dumbbell Fly",
    "Incline Dumbbell Press",
    "Lateral Raise",
    "Leg Press",
    "Lunge",
    "Overhead Press",
    "Plank",
    "Pull-Up",
    "Romanian Deadlift",
    "Tricep Pushdown",
]

exercises = sa.table(
    "exercises",
    sa.column("id", sa.Uuid()),
    sa.column("name", sa.String()),
    sa.column("is_global", sa.Boolean()),
    sa.column("user_id", sa.String()),
    sa.column("created_at", sa.DateTime(timezone=True)),
    sa.column("updated_at", sa.DateTime(timezone=True)),
)


def upgrade() -> None:
    conn = op.get_bind()
    existing = set(
        conn.execute(sa.select(exercises.c.name).where(exercises.c.is_global.is_(True))).scalars()
    )
    now = datetime.now(timezone.utc)
    rows = [
        {
            "id": uuid.uuid4(),
            "name": name,
            "is_global": True,
            "user_id": None,
            "created_at": now,
            "updated_at": now,
        }
        for name in GLOBAL_EXERCISES
        if name not in existing
    ]
    if rows:
        op.bulk_insert(exercises, rows)


def downgrade() -> None:
    # Restricted while any workout still references a seeded exercise
    op.execute(
        exercises.delete().where(
            exercises.c.is_global.is_(True), exercises.c.name.in_(GLOBAL_EXERCISES)
        )
    )
