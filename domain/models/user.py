"""
User profile entity.

The user's ``id`` is the subject id issued by the identity provider; it is
never generated by the document store.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.role import Role


class HealthMetrics(BaseModel):
    """Body measurements and known limitations."""

    weight: float = Field(..., gt=0, description="Body weight")
    height: float = Field(..., gt=0, description="Height")
    body_fat_percentage: Optional[float] = Field(default=None, ge=0, le=100)
    injuries_or_limitations: Optional[List[str]] = None


class WorkoutPreferences(BaseModel):
    """When and where the user trains."""

    days_available: List[str] = Field(..., description="Training days, e.g. ['Monday']")
    time_per_day: float = Field(..., gt=0, description="Minutes available per session")
    gym_access: bool
    equipment: Optional[List[str]] = None


class Background(BaseModel):
    """Training history and goals."""

    experience: str = Field(..., min_length=1)
    routine: str = Field(..., min_length=1)
    goals: str = Field(..., min_length=1)


class User(BaseModel):
    """A registered user of the platform."""

    id: Optional[str] = Field(default=None, description="Identity provider subject id")
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    role: Role
    health_metrics: Optional[HealthMetrics] = None
    workout_preferences: Optional[WorkoutPreferences] = None
    background: Optional[Background] = None
