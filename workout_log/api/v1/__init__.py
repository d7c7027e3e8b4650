"""API v1 router aggregation."""

from fastapi import APIRouter

from workout_log.api.v1.endpoints import (
    exercises,
    health,
    sets,
    workout_exercises,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(
    workout_exercises.router, prefix="/workout-exercises", tags=["workout-exercises"]
)
api_router.include_router(sets.router, prefix="/sets", tags=["sets"])
