"""
Application Use Cases for the fitness tracking API.

This package contains application-level use cases that orchestrate domain
logic across more than one entity service. Single-collection operations
live on the services themselves.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and services
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import AssembleWorkoutUseCase

    use_case = AssembleWorkoutUseCase(
        workout_service=workout_service,
        exercise_service=exercise_service,
        exercise_library_service=exercise_library_service,
        store=store,
    )
    workout = use_case.execute(
        workout_data={"name": "Leg Day"},
        user_id="user-123",
        exercise_library_ids=["sq1"],
    )
"""

from application.use_cases.assemble_workout import (
    NO_EXERCISES_SELECTED,
    WORKOUT_NOT_VISIBLE,
    AssembleWorkoutUseCase,
)

__all__ = [
    "AssembleWorkoutUseCase",
    "NO_EXERCISES_SELECTED",
    "WORKOUT_NOT_VISIBLE",
]
