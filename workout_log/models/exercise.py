"""Exercise model - global catalog entries and per-user custom exercises."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, DateTime, Index, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workout_log.core.constants import EXERCISE_NAME_MAX_LENGTH
from workout_log.db.base import Base


class Exercise(Base):
    """Named exercise. Global rows have no owner; custom rows belong to one user.

    Names are unique among global rows and unique per owner among custom rows
    (two partial unique indexes), so a user may shadow a global name.
    """

    __tablename__ = "exercises"
    __table_args__ = (
        CheckConstraint(
            "(is_global AND user_id IS NULL) OR (NOT is_global AND user_id IS NOT NULL)",
            name="global_user",
        ),
        Index(
            "ix_exercises_global_name_unique",
            "name",
            unique=True,
            postgresql_where=text("is_global"),
            sqlite_where=text("is_global"),
        ),
        Index(
            "ix_exercises_user_name_unique",
            "name",
            "user_id",
            unique=True,
            postgresql_where=text("NOT is_global"),
            sqlite_where=text("NOT is_global"),
        ),
        Index("ix_exercises_user_id", "user_id"),
        Index("ix_exercises_is_global", "is_global"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(EXERCISE_NAME_MAX_LENGTH), nullable=False)
    is_global: Mapped[bool] = mapped_column(Boolean, default=False, server_default=text("false"), nullable=False)
    user_id: Mapped[str | None] = mapped_column(String(255), nullable=True)  # auth provider id, null for global
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Delete is RESTRICTed by the database; never null out children from the ORM side
    assignments: Mapped[list["WorkoutExercise"]] = relationship(
        "WorkoutExercise", back_populates="exercise", passive_deletes="all"
    )
