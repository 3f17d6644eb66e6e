"""
Workout-scoped exercise.

An Exercise is always a snapshot copied from an ExerciseLibraryEntry at
assembly time. It keeps no reference to the library entry, so later edits
to the catalog do not alter past workouts.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from domain.models.exercise_library import ExerciseLibraryEntry
from domain.models.role import Intensity


class Exercise(BaseModel):
    """
    Value object representing an exercise within a workout.

    Examples:
        >>> entry = ExerciseLibraryEntry(
        ...     id="sq1", name="Squat", equipment=["Barbell"],
        ...     muscles_worked=["Legs"], intensity="High",
        ... )
        >>> exercise = Exercise.snapshot_of(entry, workout_id="w1", user_id="u1")
        >>> (exercise.name, exercise.sets, exercise.reps)
        ('Squat', 4, 12)
    """

    id: Optional[str] = None
    workout_id: Optional[str] = None
    user_id: Optional[str] = None
    name: str = Field(..., min_length=1)
    equipment: List[str] = Field(default_factory=list)
    muscles_worked: List[str] = Field(default_factory=list)
    intensity: Intensity
    sets: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)

    @classmethod
    def snapshot_of(
        cls,
        entry: ExerciseLibraryEntry,
        *,
        workout_id: str,
        user_id: str,
        sets: int = 4,
        reps: int = 12,
    ) -> "Exercise":
        """Copy the descriptive fields of a library entry into a new exercise."""
        return cls(
            workout_id=workout_id,
            user_id=user_id,
            name=entry.name,
            equipment=list(entry.equipment),
            muscles_worked=list(entry.muscles_worked),
            intensity=entry.intensity,
            sets=sets,
            reps=reps,
        )

    def to_document(self) -> Dict[str, Any]:
        """Serialize for storage (without the store-assigned id)."""
        return self.model_dump(mode="json", exclude={"id"})
