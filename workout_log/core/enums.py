"""Shared enums for models and API."""

from enum import Enum


class WorkoutStatus(str, Enum):
    """Lifecycle of a workout session."""

    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
