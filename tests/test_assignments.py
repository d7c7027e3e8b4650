import uuid

import pytest

from workout_log.core.errors import ConstraintError, NotFoundError, ValidationError
from workout_log.schemas.workout import SetCreate
from workout_log.services import assignments, exercise_catalog, sets, workouts

from tests.conftest import U1, U2


async def test_next_order_starts_at_one(db, workout):
    assert await assignments.next_order(db, U1, workout.id) == 1


async def test_assign_without_order_is_strictly_increasing(db, workout, bench_press, squat):
    first = await assignments.assign_exercise(db, U1, workout.id, bench_press.id)
    second = await assignments.assign_exercise(db, U1, workout.id, squat.id)
    third = await assignments.assign_exercise(db, U1, workout.id, bench_press.id)

    assert [first.order, second.order, third.order] == [1, 2, 3]
    assert await assignments.next_order(db, U1, workout.id) == 4


async def test_explicit_order_collision_is_constraint_error(db, workout, bench_press, squat):
    await assignments.assign_exercise(db, U1, workout.id, bench_press.id, order=1)
    await db.commit()

    with pytest.raises(ConstraintError):
        await assignments.assign_exercise(db, U1, workout.id, squat.id, order=1)
    await db.rollback()


async def test_stale_next_order_loses_to_the_first_insert(db, workout, bench_press, squat):
    workout_id, squat_id = workout.id, squat.id
    # Two requests that both read next_order == 1: the second one conflicts
    stale = await assignments.next_order(db, U1, workout_id)
    await assignments.assign_exercise(db, U1, workout_id, bench_press.id, order=stale)
    await db.commit()

    with pytest.raises(ConstraintError):
        await assignments.assign_exercise(db, U1, workout_id, squat_id, order=stale)
    await db.rollback()

    # Retrying with a recomputed value succeeds
    retry = await assignments.assign_exercise(db, U1, workout_id, squat_id)
    assert retry.order == 2


async def test_non_positive_order_rejected(db, workout, bench_press):
    with pytest.raises(ValidationError):
        await assignments.assign_exercise(db, U1, workout.id, bench_press.id, order=0)


async def test_assign_requires_visible_exercise(db, workout):
    private = await exercise_catalog.create_exercise(db, U2, "Secret Lift")
    await db.commit()

    with pytest.raises(NotFoundError):
        await assignments.assign_exercise(db, U1, workout.id, private.id)
    with pytest.raises(NotFoundError):
        await assignments.assign_exercise(db, U1, workout.id, uuid.uuid4())


async def test_other_user_cannot_touch_assignments(db, workout, bench_press):
    we = await assignments.assign_exercise(db, U1, workout.id, bench_press.id)
    await db.commit()

    with pytest.raises(NotFoundError):
        await assignments.next_order(db, U2, workout.id)
    with pytest.raises(NotFoundError):
        await assignments.assign_exercise(db, U2, workout.id, bench_press.id)
    with pytest.raises(NotFoundError):
        await assignments.create_and_assign_exercise(db, U2, workout.id, "Sneaky Curl")
    with pytest.raises(NotFoundError):
        await assignments.unassign_exercise(db, U2, we.id)

    # Nothing was created for U2 along the way
    assert await exercise_catalog.list_available(db, U2) == [bench_press]


async def test_unassign_cascades_sets_and_keeps_sibling_orders(db, workout, bench_press, squat):
    first = await assignments.assign_exercise(db, U1, workout.id, bench_press.id)
    second = await assignments.assign_exercise(db, U1, workout.id, squat.id)
    third = await assignments.assign_exercise(db, U1, workout.id, bench_press.id)
    await sets.add_set(db, U1, second.id, SetCreate(reps=5))
    await sets.add_set(db, U1, second.id, SetCreate(reps=5))
    await db.commit()

    await assignments.unassign_exercise(db, U1, second.id)
    await db.commit()

    detail = await workouts.get_workout_detail(db, U1, workout.id)
    assert [(e.workout_exercise_id, e.order) for e in detail.exercises] == [(first.id, 1), (third.id, 3)]
    # Gap at 2 is not reused
    assert await assignments.next_order(db, U1, workout.id) == 4


async def test_create_and_assign_reuses_then_creates(db, workout, bench_press):
    reused = await assignments.create_and_assign_exercise(db, U1, workout.id, "Bench Press")
    created = await assignments.create_and_assign_exercise(db, U1, workout.id, "Cable Fly")
    await db.commit()

    assert reused.exercise_id == bench_press.id
    assert reused.order == 1
    assert created.order == 2
    names = [e.name for e in await exercise_catalog.list_available(db, U1)]
    assert names == ["Bench Press", "Cable Fly"]


async def test_deleting_workout_cascades_to_assignments(db, workout, bench_press):
    we = await assignments.assign_exercise(db, U1, workout.id, bench_press.id)
    await sets.add_set(db, U1, we.id, SetCreate(reps=8))
    await db.commit()

    await workouts.delete_workout(db, U1, workout.id)
    await db.commit()

    with pytest.raises(NotFoundError):
        await sets.next_set_number(db, U1, we.id)
