"""
Pydantic models for the exercises API.

Exercises are usually created by workout assembly; these models cover
direct creation and edits.
"""

from typing import List, Optional

from pydantic import Field

from api.schemas.base import RequestModel
from domain.models import Intensity


class CreateExerciseRequest(RequestModel):
    workout_id: Optional[str] = Field(default=None, min_length=1)
    name: str = Field(..., min_length=1)
    equipment: List[str]
    muscles_worked: List[str]
    intensity: Intensity
    sets: int = Field(default=0, ge=0)
    reps: int = Field(default=0, ge=0)

    def to_document(self) -> dict:
        # sets/reps defaults are stored even when omitted
        return self.model_dump(mode="json", exclude_none=True)


class UpdateExerciseRequest(RequestModel):
    workout_id: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    equipment: Optional[List[str]] = None
    muscles_worked: Optional[List[str]] = None
    intensity: Optional[Intensity] = None
    sets: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
