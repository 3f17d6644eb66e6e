"""
Exercise library service.

The library is the global, trainer-curated catalog that workout assembly
copies exercises from.
"""

from typing import Any, Dict, List, Optional

from application.collections import COLLECTION_EXERCISE_LIBRARY
from application.services.base import DocumentService
from domain.models import ExerciseLibraryEntry, Intensity


class ExerciseLibraryService(DocumentService):
    """CRUD over the exercise-library collection with catalog filters."""

    collection = COLLECTION_EXERCISE_LIBRARY
    entity_name = "library exercise"

    def get_all(
        self,
        *,
        equipment: Optional[List[str]] = None,
        muscles_worked: Optional[List[str]] = None,
        intensity: Optional[Intensity] = None,
    ) -> List[Dict[str, Any]]:
        """
        List library entries, optionally filtered.

        Filtering happens in memory after a full collection scan.

        Args:
            equipment: Keep entries using any of these
            muscles_worked: Keep entries working any of these
            intensity: Keep entries with exactly this intensity
        """
        documents = self._fetch_all()
        if not (equipment or muscles_worked or intensity):
            return documents

        return [
            document
            for document in documents
            if ExerciseLibraryEntry.model_validate(document).matches(
                equipment=equipment,
                muscles_worked=muscles_worked,
                intensity=intensity,
            )
        ]
