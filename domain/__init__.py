"""
Domain layer for the fitness tracking API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ALL_ROLES,
    AuthorizationPolicy,
    Exercise,
    ExerciseLibraryEntry,
    Identity,
    Intensity,
    Question,
    QuestionStatus,
    Role,
    User,
    Workout,
)

__all__ = [
    "ALL_ROLES",
    "AuthorizationPolicy",
    "Exercise",
    "ExerciseLibraryEntry",
    "Identity",
    "Intensity",
    "Question",
    "QuestionStatus",
    "Role",
    "User",
    "Workout",
]
