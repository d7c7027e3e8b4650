"""Workout, WorkoutExercise and WorkoutSet models.

Every row below a workout is owned through its parent chain:
WorkoutSet -> WorkoutExercise -> Workout.user_id. Each class exposes
``owner_chain()``, a SELECT of itself joined up to ``workouts`` so the
ownership guard can filter on ``Workout.user_id`` without knowing the path.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    Select,
    String,
    Text,
    Uuid,
    select,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workout_log.core.constants import (
    SET_WEIGHT_DECIMAL_PLACES,
    SET_WEIGHT_MAX_DIGITS,
    WORKOUT_TITLE_MAX_LENGTH,
)
from workout_log.core.enums import WorkoutStatus
from workout_log.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Workout(Base):
    """A single workout session owned by one user."""

    __tablename__ = "workouts"
    __table_args__ = (
        CheckConstraint("status IN ('planned', 'in_progress', 'completed')", name="status"),
        CheckConstraint(
            "completed_at IS NULL OR completed_at >= started_at", name="completed_after_started"
        ),
        Index("ix_workouts_user_started_at", "user_id", "started_at"),
        Index("ix_workouts_user_status", "user_id", "status"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str | None] = mapped_column(String(WORKOUT_TITLE_MAX_LENGTH), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[WorkoutStatus] = mapped_column(
        Enum(
            WorkoutStatus,
            native_enum=False,
            length=20,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        default=WorkoutStatus.PLANNED,
        server_default=WorkoutStatus.PLANNED.value,
        nullable=False,
    )
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    exercises: Mapped[list["WorkoutExercise"]] = relationship(
        "WorkoutExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutExercise.order",
    )

    @classmethod
    def owner_chain(cls) -> Select:
        return select(cls)


class WorkoutExercise(Base):
    """An exercise attached to a workout at a 1-based position.

    Positions are unique per workout; deleting one leaves a gap and the next
    insert takes max + 1.
    """

    __tablename__ = "workout_exercises"
    __table_args__ = (
        CheckConstraint('"order" > 0', name="order_positive"),
        Index("ix_workout_exercises_workout_order_unique", "workout_id", "order", unique=True),
        Index("ix_workout_exercises_exercise_id", "exercise_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="RESTRICT"), nullable=False
    )
    order: Mapped[int] = mapped_column("order", Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    workout: Mapped["Workout"] = relationship("Workout", back_populates="exercises")
    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="assignments")
    sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet",
        back_populates="workout_exercise",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutSet.set_number",
    )

    @classmethod
    def owner_chain(cls) -> Select:
        return select(cls).join(Workout, Workout.id == cls.workout_id)


class WorkoutSet(Base):
    """One set of an assigned exercise: reps, weight and completion flag."""

    __tablename__ = "sets"
    __table_args__ = (
        CheckConstraint("set_number > 0", name="set_number_positive"),
        CheckConstraint("reps IS NULL OR reps >= 0", name="reps_non_negative"),
        CheckConstraint("weight IS NULL OR weight >= 0", name="weight_non_negative"),
        Index(
            "ix_sets_workout_exercise_set_number_unique",
            "workout_exercise_id",
            "set_number",
            unique=True,
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workout_exercises.id", ondelete="CASCADE"), nullable=False
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight: Mapped[Decimal | None] = mapped_column(
        Numeric(SET_WEIGHT_MAX_DIGITS, SET_WEIGHT_DECIMAL_PLACES), nullable=True
    )
    is_completed: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=text("false"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    workout_exercise: Mapped["WorkoutExercise"] = relationship("WorkoutExercise", back_populates="sets")

    @classmethod
    def owner_chain(cls) -> Select:
        return (
            select(cls)
            .join(WorkoutExercise, WorkoutExercise.id == cls.workout_exercise_id)
            .join(Workout, Workout.id == WorkoutExercise.workout_id)
        )
