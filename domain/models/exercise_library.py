"""
Exercise library entry - a reusable, trainer-curated exercise template.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.role import Intensity


class ExerciseLibraryEntry(BaseModel):
    """
    Global catalog entry.

    Workouts never reference entries directly; assembly copies the
    descriptive fields into workout-scoped Exercise records.
    """

    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    equipment: List[str] = Field(default_factory=list)
    muscles_worked: List[str] = Field(default_factory=list)
    intensity: Intensity

    def matches(
        self,
        *,
        equipment: Optional[List[str]] = None,
        muscles_worked: Optional[List[str]] = None,
        intensity: Optional[Intensity] = None,
    ) -> bool:
        """
        Check the entry against optional catalog filters.

        List filters match when the entry shares at least one value with
        the filter; intensity must match exactly.
        """
        if equipment and not set(self.equipment) & set(equipment):
            return False
        if muscles_worked and not set(self.muscles_worked) & set(muscles_worked):
            return False
        if intensity is not None and self.intensity != intensity:
            return False
        return True
