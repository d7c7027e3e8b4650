import pytest

from workout_log.core.errors import ConstraintError, DuplicateNameError, NotFoundError, ValidationError
from workout_log.services import exercise_catalog

from tests.conftest import U1, U2


async def test_list_available_merges_global_and_own_sorted_by_name(db, bench_press, squat):
    await exercise_catalog.create_exercise(db, U1, "Zercher Squat")
    await exercise_catalog.create_exercise(db, U1, "Arnold Press")
    await exercise_catalog.create_exercise(db, U2, "Cable Crunch")
    await db.commit()

    names = [e.name for e in await exercise_catalog.list_available(db, U1)]

    assert names == ["Arnold Press", "Back Squat", "Bench Press", "Zercher Squat"]


async def test_create_exercise_is_private_to_owner(db):
    exercise = await exercise_catalog.create_exercise(db, U1, "Landmine Press")
    await db.commit()

    assert exercise.is_global is False
    assert exercise.user_id == U1
    assert [e.id for e in await exercise_catalog.list_available(db, U1)] == [exercise.id]
    assert await exercise_catalog.list_available(db, U2) == []


async def test_duplicate_name_for_same_user_raises(db):
    await exercise_catalog.create_exercise(db, U1, "Landmine Press")
    await db.commit()

    with pytest.raises(DuplicateNameError):
        await exercise_catalog.create_exercise(db, U1, "Landmine Press")
    await db.rollback()


def test_duplicate_name_error_is_a_constraint_error():
    assert issubclass(DuplicateNameError, ConstraintError)


async def test_same_name_allowed_for_other_user_and_case_sensitive(db, bench_press):
    await exercise_catalog.create_exercise(db, U1, "Landmine Press")
    await exercise_catalog.create_exercise(db, U2, "Landmine Press")
    await exercise_catalog.create_exercise(db, U1, "landmine press")
    # A custom exercise may shadow a global name
    await exercise_catalog.create_exercise(db, U1, "Bench Press")
    await db.commit()

    names = [e.name for e in await exercise_catalog.list_available(db, U1)]
    assert names.count("Bench Press") == 2


async def test_names_are_stored_exactly_as_given(db):
    trailing = await exercise_catalog.create_exercise(db, U1, "Bench ")
    plain = await exercise_catalog.create_exercise(db, U1, "Bench")
    leading = await exercise_catalog.create_exercise(db, U1, " Bench")
    await db.commit()

    assert trailing.name == "Bench "
    assert leading.name == " Bench"
    assert len({trailing.id, plain.id, leading.id}) == 3
    assert (await exercise_catalog.get_or_create_exercise(db, U1, " Bench")).id == leading.id


@pytest.mark.parametrize("name", ["", "   ", "x" * 256])
async def test_invalid_names_rejected_before_storage(db, name):
    with pytest.raises(ValidationError):
        await exercise_catalog.create_exercise(db, U1, name)


async def test_get_or_create_reuses_global_exercise(db, bench_press):
    exercise = await exercise_catalog.get_or_create_exercise(db, U1, "Bench Press")

    assert exercise.id == bench_press.id


async def test_get_or_create_prefers_own_exercise(db, bench_press):
    own = await exercise_catalog.create_exercise(db, U1, "Bench Press")
    await db.commit()

    assert (await exercise_catalog.get_or_create_exercise(db, U1, "Bench Press")).id == own.id
    assert (await exercise_catalog.get_or_create_exercise(db, U2, "Bench Press")).id == bench_press.id


async def test_get_or_create_creates_missing(db):
    first = await exercise_catalog.get_or_create_exercise(db, U1, "Face Pull")
    second = await exercise_catalog.get_or_create_exercise(db, U1, "Face Pull")

    assert first.id == second.id
    assert first.user_id == U1


async def test_get_available_hides_other_users_exercises(db):
    private = await exercise_catalog.create_exercise(db, U2, "Secret Lift")
    await db.commit()

    with pytest.raises(NotFoundError):
        await exercise_catalog.get_available(db, U1, private.id)
    assert (await exercise_catalog.get_available(db, U2, private.id)).id == private.id
