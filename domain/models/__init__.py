"""
Domain models for the fitness tracking API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Role / Intensity: closed enums for permission tiers and exercise load
- Identity / AuthorizationPolicy: who is asking and what a route allows
- User: profile keyed by the identity provider's subject id
- ExerciseLibraryEntry: trainer-curated exercise template
- Exercise: workout-scoped snapshot of a library entry
- Workout: aggregate root owning its exercises
- Question: a user question with an Open -> Answered lifecycle

Usage:
    >>> from domain.models import Workout, Exercise, ExerciseLibraryEntry

    >>> entry = ExerciseLibraryEntry(
    ...     id="sq1", name="Squat", equipment=["Barbell"],
    ...     muscles_worked=["Legs"], intensity="High",
    ... )
    >>> exercise = Exercise.snapshot_of(entry, workout_id="w1", user_id="u1")
    >>> workout = Workout(id="w1", user_id="u1", name="Leg Day", exercises=[exercise])
"""

from domain.models.exercise import Exercise
from domain.models.exercise_library import ExerciseLibraryEntry
from domain.models.identity import AuthorizationPolicy, Identity
from domain.models.question import Question, QuestionStatus
from domain.models.role import ALL_ROLES, Intensity, Role
from domain.models.user import Background, HealthMetrics, User, WorkoutPreferences
from domain.models.workout import Workout, find_ownership_violation

__all__ = [
    # Enums
    "Role",
    "ALL_ROLES",
    "Intensity",
    # Identity
    "Identity",
    "AuthorizationPolicy",
    # Entities
    "User",
    "HealthMetrics",
    "WorkoutPreferences",
    "Background",
    "ExerciseLibraryEntry",
    "Exercise",
    "Workout",
    "find_ownership_violation",
    "Question",
    "QuestionStatus",
]
