"""Workout log schema: exercises, workouts, workout_exercises, sets.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("is_global", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "(is_global AND user_id IS NULL) OR (NOT is_global AND user_id IS NOT NULL)",
            name=op.f("ck_exercises_global_user"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_exercises")),
    )
    # Partial unique indexes: one namespace for global names, one per user
    op.create_index(
        "ix_exercises_global_name_unique",
        "exercises",
        ["name"],
        unique=True,
        postgresql_where=sa.text("is_global"),
        sqlite_where=sa.text("is_global"),
    )
    op.create_index(
        "ix_exercises_user_name_unique",
        "exercises",
        ["name", "user_id"],
        unique=True,
        postgresql_where=sa.text("NOT is_global"),
        sqlite_where=sa.text("NOT is_global"),
    )
    op.create_index("ix_exercises_user_id", "exercises", ["user_id"], unique=False)
    op.create_index("ix_exercises_is_global", "exercises", ["is_global"], unique=False)

    op.create_table(
        "workouts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), server_default="planned", nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "status IN ('planned', 'in_progress', 'completed')", name=op.f("ck_workouts_status")
        ),
        sa.CheckConstraint(
            "completed_at IS NULL OR completed_at >= started_at",
            name=op.f("ck_workouts_completed_after_started"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workouts")),
    )
    op.create_index("ix_workouts_user_started_at", "workouts", ["user_id", "started_at"], unique=False)
    op.create_index("ix_workouts_user_status", "workouts", ["user_id", "status"], unique=False)

    op.create_table(
        "workout_exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("workout_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('"order" > 0', name=op.f("ck_workout_exercises_order_positive")),
        sa.ForeignKeyConstraint(
            ["workout_id"],
            ["workouts.id"],
            name=op.f("fk_workout_exercises_workout_id_workouts"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["exercise_id"],
            ["exercises.id"],
            name=op.f("fk_workout_exercises_exercise_id_exercises"),
            ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_exercises")),
    )
    op.create_index(
        "ix_workout_exercises_workout_order_unique",
        "workout_exercises",
        ["workout_id", "order"],
        unique=True,
    )
    op.create_index(
        "ix_workout_exercises_exercise_id", "workout_exercises", ["exercise_id"], unique=False
    )

    op.create_table(
        "sets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("workout_exercise_id", sa.Uuid(), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=True),
        sa.Column("weight", sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column("is_completed", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("set_number > 0", name=op.f("ck_sets_set_number_positive")),
        sa.CheckConstraint("reps IS NULL OR reps >= 0", name=op.f("ck_sets_reps_non_negative")),
        sa.CheckConstraint("weight IS NULL OR weight >= 0", name=op.f("ck_sets_weight_non_negative")),
        sa.ForeignKeyConstraint(
            ["workout_exercise_id"],
            ["workout_exercises.id"],
            name=op.f("fk_sets_workout_exercise_id_workout_exercises"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_sets")),
    )
    op.create_index(
        "ix_sets_workout_exercise_set_number_unique",
        "sets",
        ["workout_exercise_id", "set_number"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index("ix_sets_workout_exercise_set_number_unique", table_name="sets")
    op.drop_table("sets")
    op.drop_index("ix_workout_exercises_exercise_id", table_name="workout_exercises")
    op.drop_index("ix_workout_exercises_workout_order_unique", table_name="workout_exercises")
    op.drop_table("workout_exercises")
    op.drop_index("ix_workouts_user_status", table_name="workouts")
    op.drop_index("ix_workouts_user_started_at", table_name="workouts")
    op.drop_table("workouts")
    op.drop_index("ix_exercises_is_global", table_name="exercises")
    op.drop_index("ix_exercises_user_id", table_name="exercises")
    op.drop_index("ix_exercises_user_name_unique", table_name="exercises")
    op.drop_index("ix_exercises_global_name_unique", table_name="exercises")
    op.drop_table("exercises")
