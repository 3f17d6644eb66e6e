"""
Pydantic models for the workouts API.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from api.schemas.base import RequestModel
from api.schemas.exercises import CreateExerciseRequest


def _check_iso_date(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError("Date must be in ISO 8601 format")
    return value


class WorkoutDataIn(RequestModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1, max_length=2000)
    date: Optional[str] = Field(default=None, min_length=1)

    @field_validator("date")
    @classmethod
    def check_date(cls, v: Optional[str]) -> Optional[str]:
        return _check_iso_date(v)


class AssembleWorkoutRequest(RequestModel):
    """
    Body of ``POST /workouts``.

    Example:
        {"workoutData": {"name": "Leg Day"}, "exerciseLibraryIds": ["sq1"]}
    """
    workout_data: WorkoutDataIn
    exercise_library_ids: List[str] = Field(..., min_length=1)


class WorkoutExerciseIn(CreateExerciseRequest):
    id: Optional[str] = Field(default=None, min_length=1)


class UpdateWorkoutRequest(RequestModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1, max_length=2000)
    date: Optional[str] = None
    exercises: Optional[List[WorkoutExerciseIn]] = None

    @field_validator("date")
    @classmethod
    def check_date(cls, v: Optional[str]) -> Optional[str]:
        return _check_iso_date(v)
