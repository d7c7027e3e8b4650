"""Grouping of flat joined rows into the nested workout view."""

import uuid
from datetime import datetime
from decimal import Decimal

from workout_log.core.enums import WorkoutStatus
from workout_log.services.projection import group_workout_rows

W1 = uuid.uuid4()
W2 = uuid.uuid4()
A1 = uuid.uuid4()
A2 = uuid.uuid4()
E1 = uuid.uuid4()
E2 = uuid.uuid4()


def make_row(workout_id=W1, workout_exercise_id=None, exercise_name=None, order=None, set_id=None, set_number=None, **extra):
    row = {
        "workout_id": workout_id,
        "title": "Push day",
        "notes": None,
        "status": WorkoutStatus.IN_PROGRESS,
        "started_at": datetime(2024, 1, 1, 9, 0),
        "completed_at": None,
        "workout_exercise_id": workout_exercise_id,
        "exercise_id": E1 if workout_exercise_id == A1 else E2 if workout_exercise_id else None,
        "exercise_name": exercise_name,
        "exercise_order": order,
        "set_id": set_id,
        "set_number": set_number,
        "reps": None,
        "weight": None,
        "is_completed": None if set_id is None else False,
    }
    row.update(extra)
    return row


def test_workout_without_exercises_has_empty_list():
    result = group_workout_rows([make_row()])

    assert len(result) == 1
    assert result[0].id == W1
    assert result[0].exercises == []


def test_exercise_without_sets_has_no_placeholder_set():
    result = group_workout_rows([make_row(workout_exercise_id=A1, exercise_name="Bench Press", order=1)])

    assert len(result[0].exercises) == 1
    assert result[0].exercises[0].exercise_name == "Bench Press"
    assert result[0].exercises[0].sets == []


def test_interleaved_rows_are_grouped_and_sorted():
    s1, s2, s3 = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
    rows = [
        make_row(workout_exercise_id=A2, exercise_name="Back Squat", order=2, set_id=s3, set_number=1),
        make_row(workout_exercise_id=A1, exercise_name="Bench Press", order=1, set_id=s2, set_number=2, reps=6),
        make_row(workout_id=W2),
        make_row(workout_exercise_id=A1, exercise_name="Bench Press", order=1, set_id=s1, set_number=1,
                 reps=8, weight=Decimal("185.00")),
    ]

    result = group_workout_rows(rows)

    # Workouts in first-occurrence order
    assert [w.id for w in result] == [W1, W2]
    first = result[0]
    assert [e.order for e in first.exercises] == [1, 2]
    bench = first.exercises[0]
    assert bench.workout_exercise_id == A1
    assert [s.set_number for s in bench.sets] == [1, 2]
    assert bench.sets[0].reps == 8
    assert bench.sets[0].weight == Decimal("185.00")
    assert [s.id for s in first.exercises[1].sets] == [s3]
    assert result[1].exercises == []


def test_row_with_missing_exercise_name_is_skipped():
    rows = [make_row(workout_exercise_id=A1, exercise_name=None, order=1)]

    assert group_workout_rows(rows)[0].exercises == []


def test_duplicate_set_rows_collapse():
    s1 = uuid.uuid4()
    row = make_row(workout_exercise_id=A1, exercise_name="Bench Press", order=1, set_id=s1, set_number=1)

    result = group_workout_rows([row, dict(row)])

    assert len(result[0].exercises[0].sets) == 1


def test_empty_input():
    assert group_workout_rows([]) == []
