"""Print row counts of the workout log tables (connectivity smoke check)."""

import asyncio

from sqlalchemy import text

from workout_log.db.session import async_session_maker, engine

TABLES = ["exercises", "workouts", "workout_exercises", "sets"]


async def check_data():
    async with async_session_maker() as session:
        print(f"Checking tables: {TABLES}")
        for table in TABLES:
            try:
                result = await session.execute(text(f"SELECT count(*) FROM {table}"))
                print(f"Table '{table}' row count: {result.scalar()}")
            except Exception as e:
                print(f"Error querying {table}: {e}")
                await session.rollback()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
