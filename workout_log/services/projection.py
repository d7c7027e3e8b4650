"""Read projection: nest flat workout/exercise/set rows into workout detail views."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import Select, select

from workout_log.models.exercise import Exercise
from workout_log.models.workout import Workout, WorkoutExercise, WorkoutSet
from workout_log.schemas.workout import SetRead, WorkoutDetail, WorkoutExerciseRead


def workout_rows_query() -> Select:
    """
    One row per (workout, assignment, set), left-joined at every level so a
    workout without exercises, or an exercise without sets, still yields a row.
    Callers add the owner / date / id filters.
    """
    return (
        select(
            Workout.id.label("workout_id"),
            Workout.title.label("title"),
            Workout.notes.label("notes"),
            Workout.status.label("status"),
            Workout.started_at.label("started_at"),
            Workout.completed_at.label("completed_at"),
            WorkoutExercise.id.label("workout_exercise_id"),
            WorkoutExercise.exercise_id.label("exercise_id"),
            Exercise.name.label("exercise_name"),
            WorkoutExercise.order.label("exercise_order"),
            WorkoutSet.id.label("set_id"),
            WorkoutSet.set_number.label("set_number"),
            WorkoutSet.reps.label("reps"),
            WorkoutSet.weight.label("weight"),
            WorkoutSet.is_completed.label("is_completed"),
        )
        .select_from(Workout)
        .outerjoin(WorkoutExercise, WorkoutExercise.workout_id == Workout.id)
        .outerjoin(Exercise, Exercise.id == WorkoutExercise.exercise_id)
        .outerjoin(WorkoutSet, WorkoutSet.workout_exercise_id == WorkoutExercise.id)
        .order_by(Workout.started_at, WorkoutExercise.order, WorkoutSet.set_number)
    )


def group_workout_rows(rows: Iterable[Mapping[str, Any]]) -> list[WorkoutDetail]:
    """
    Group flat rows by workout id, then assignment id, then set id.

    Workouts keep first-occurrence order; exercises are sorted by order and
    sets by set_number, so rows of one parent need not arrive together.
    Null assignment or set columns (left-join misses) add nothing.
    """
    workouts: dict[Any, dict[str, Any]] = {}
    for row in rows:
        workout = workouts.get(row["workout_id"])
        if workout is None:
            workout = workouts[row["workout_id"]] = {
                "fields": {
                    "id": row["workout_id"],
                    "title": row["title"],
                    "notes": row["notes"],
                    "status": row["status"],
                    "started_at": row["started_at"],
                    "completed_at": row["completed_at"],
                },
                "exercises": {},
            }

        if row["workout_exercise_id"] is None or row["exercise_name"] is None:
            continue
        exercise = workout["exercises"].get(row["workout_exercise_id"])
        if exercise is None:
            exercise = workout["exercises"][row["workout_exercise_id"]] = {
                "workout_exercise_id": row["workout_exercise_id"],
                "exercise_id": row["exercise_id"],
                "exercise_name": row["exercise_name"],
                "order": row["exercise_order"],
                "sets": {},
            }

        if row["set_id"] is None or row["set_id"] in exercise["sets"]:
            continue
        exercise["sets"][row["set_id"]] = SetRead(
            id=row["set_id"],
            set_number=row["set_number"],
            reps=row["reps"],
            weight=row["weight"],
            is_completed=row["is_completed"],
        )

    return [
        WorkoutDetail(
            **workout["fields"],
            exercises=[
                WorkoutExerciseRead(
                    **{key: value for key, value in exercise.items() if key != "sets"},
                    sets=sorted(exercise["sets"].values(), key=lambda s: s.set_number),
                )
                for exercise in sorted(workout["exercises"].values(), key=lambda e: e["order"])
            ],
        )
        for workout in workouts.values()
    ]
