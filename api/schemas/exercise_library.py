"""
Pydantic models for the exercise library API.
"""

from typing import List, Optional

from pydantic import Field

from api.schemas.base import RequestModel
from domain.models import Intensity


class CreateLibraryExerciseRequest(RequestModel):
    name: str = Field(..., min_length=1)
    equipment: List[str]
    muscles_worked: List[str]
    intensity: Intensity


class UpdateLibraryExerciseRequest(RequestModel):
    name: Optional[str] = Field(default=None, min_length=1)
    equipment: Optional[List[str]] = None
    muscles_worked: Optional[List[str]] = None
    intensity: Optional[Intensity] = None
