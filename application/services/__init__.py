"""
Entity services.

One service per collection. Services translate between request payloads
and documents, apply ownership filters, and rewrap document store
failures as ServiceError.
"""

from application.services.base import DocumentService
from application.services.exercise_library_service import ExerciseLibraryService
from application.services.exercise_service import ExerciseService
from application.services.question_service import QUESTION_ALREADY_ANSWERED, QuestionService
from application.services.user_service import UserService
from application.services.workout_service import EXERCISE_OWNERSHIP_MISMATCH, WorkoutService

__all__ = [
    "DocumentService",
    "UserService",
    "ExerciseLibraryService",
    "ExerciseService",
    "QuestionService",
    "QUESTION_ALREADY_ANSWERED",
    "EXERCISE_OWNERSHIP_MISMATCH",
    "WorkoutService",
]
