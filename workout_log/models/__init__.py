"""ORM models - import all so Base.metadata is complete for migrations."""

from workout_log.models.exercise import Exercise
from workout_log.models.workout import Workout, WorkoutExercise, WorkoutSet

__all__ = [
    "Exercise",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
]
