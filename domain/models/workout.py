"""
Workout aggregate root.
"""

from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, model_validator

from domain.models.exercise import Exercise


def find_ownership_violation(
    workout_id: str,
    user_id: str,
    exercises: Iterable[Exercise],
) -> Optional[str]:
    """
    Describe the first exercise not owned by the given workout and user.

    Returns:
        An error message, or None when every exercise belongs to the
        workout and its owner
    """
    for exercise in exercises:
        if exercise.workout_id != workout_id:
            return (
                f"Exercise {exercise.id} belongs to workout "
                f"{exercise.workout_id}, not {workout_id}"
            )
        if exercise.user_id != user_id:
            return (
                f"Exercise {exercise.id} belongs to user "
                f"{exercise.user_id}, not {user_id}"
            )
    return None


class Workout(BaseModel):
    """
    A user's workout together with its member exercises.

    Every embedded exercise must belong to this workout and to the same
    user. The invariant is checked whenever the workout has an id.

    Examples:
        >>> workout = Workout(id="w1", user_id="u1", name="Leg Day", date="2024-01-01")
        >>> workout.exercise_count
        0
    """

    id: Optional[str] = None
    user_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    date: Optional[str] = Field(default=None, description="ISO-8601 timestamp")
    exercises: List[Exercise] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_exercise_ownership(self) -> "Workout":
        """Ensure member exercises point back at this workout and its owner."""
        if self.id is None:
            return self
        violation = find_ownership_violation(self.id, self.user_id, self.exercises)
        if violation:
            raise ValueError(violation)
        return self

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)
