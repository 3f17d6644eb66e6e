"""
Pydantic models for the users API.
"""

from typing import List, Optional

from pydantic import EmailStr, Field

from api.schemas.base import RequestModel
from domain.models import Role


class HealthMetricsIn(RequestModel):
    weight: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    body_fat_percentage: Optional[float] = Field(default=None, ge=0, le=100)
    injuries_or_limitations: Optional[List[str]] = None


class WorkoutPreferencesIn(RequestModel):
    days_available: List[str]
    time_per_day: float = Field(..., gt=0)
    gym_access: bool
    equipment: Optional[List[str]] = None


class BackgroundIn(RequestModel):
    experience: str = Field(..., min_length=1)
    routine: str = Field(..., min_length=1)
    goals: str = Field(..., min_length=1)


class CreateUserRequest(RequestModel):
    """
    Profile created by a signed-in user for themselves.

    ``role`` is accepted for compatibility but the stored role is taken
    from the caller's token.
    """
    name: str = Field(..., min_length=1)
    email: EmailStr
    role: Optional[Role] = None
    health_metrics: Optional[HealthMetricsIn] = None
    workout_preferences: Optional[WorkoutPreferencesIn] = None
    background: Optional[BackgroundIn] = None


class HealthMetricsUpdate(RequestModel):
    weight: Optional[float] = Field(default=None, gt=0)
    height: Optional[float] = Field(default=None, gt=0)
    body_fat_percentage: Optional[float] = Field(default=None, ge=0, le=100)
    injuries_or_limitations: Optional[List[str]] = None


class WorkoutPreferencesUpdate(RequestModel):
    days_available: Optional[List[str]] = None
    time_per_day: Optional[float] = Field(default=None, gt=0)
    gym_access: Optional[bool] = None
    equipment: Optional[List[str]] = None


class BackgroundUpdate(RequestModel):
    experience: Optional[str] = Field(default=None, min_length=1)
    routine: Optional[str] = Field(default=None, min_length=1)
    goals: Optional[str] = Field(default=None, min_length=1)


class UpdateUserRequest(RequestModel):
    """
    Partial profile update.

    Role is not accepted here; it changes only through the upgrade route so
    the identity provider's claim stays in sync.
    """
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    health_metrics: Optional[HealthMetricsUpdate] = None
    workout_preferences: Optional[WorkoutPreferencesUpdate] = None
    background: Optional[BackgroundUpdate] = None


class UpgradeRoleRequest(RequestModel):
    role: Role


class SetCustomClaimsRequest(RequestModel):
    """Raw custom claims for a subject (admin only)."""
    uid: str = Field(..., min_length=1)
    claims: dict
