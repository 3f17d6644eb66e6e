"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- users: profile create/update, role upgrade, custom claims
- exercise_library: catalog entries
- exercises: workout-scoped exercises
- questions: trainer questions and responses
- workouts: workout assembly and edits
- responses: success/error envelopes
"""

from api.schemas.exercise_library import (
    CreateLibraryExerciseRequest,
    UpdateLibraryExerciseRequest,
)
from api.schemas.exercises import CreateExerciseRequest, UpdateExerciseRequest
from api.schemas.questions import AskQuestionRequest, RespondQuestionRequest
from api.schemas.responses import error_response, success_response
from api.schemas.users import (
    CreateUserRequest,
    SetCustomClaimsRequest,
    UpdateUserRequest,
    UpgradeRoleRequest,
)
from api.schemas.workouts import AssembleWorkoutRequest, UpdateWorkoutRequest, WorkoutDataIn

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UpgradeRoleRequest",
    "SetCustomClaimsRequest",
    "CreateLibraryExerciseRequest",
    "UpdateLibraryExerciseRequest",
    "CreateExerciseRequest",
    "UpdateExerciseRequest",
    "AskQuestionRequest",
    "RespondQuestionRequest",
    "AssembleWorkoutRequest",
    "UpdateWorkoutRequest",
    "WorkoutDataIn",
    "success_response",
    "error_response",
]
