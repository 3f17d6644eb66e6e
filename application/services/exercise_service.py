"""
Workout-scoped exercise service.

Exercises are normally created by workout assembly rather than directly.
Trainers see every exercise; everyone else sees, edits and attaches
exercises only within their own workouts.
"""

import logging
from typing import Any, Dict, List, Optional

from application.collections import COLLECTION_EXERCISES, COLLECTION_WORKOUTS
from application.exceptions import wrap_service_error
from application.services.base import DocumentService, not_found_error
from domain.models import Identity

logger = logging.getLogger(__name__)


class ExerciseService(DocumentService):
    """CRUD over the exercises collection."""

    collection = COLLECTION_EXERCISES
    entity_name = "exercise"
    trainer_sees_all = True

    def create(
        self,
        data: Dict[str, Any],
        requester: Optional[Identity] = None,
    ) -> Dict[str, Any]:
        """
        Insert an exercise.

        Args:
            data: Exercise fields
            requester: When given, a ``workout_id`` in ``data`` must name
                one of the requester's workouts
        """
        if requester is not None and data.get("workout_id"):
            self._check_workout_owner(data["workout_id"], requester)
        return self._insert(data)

    def update(
        self,
        doc_id: str,
        data: Dict[str, Any],
        requester: Optional[Identity] = None,
    ) -> Dict[str, Any]:
        """Merge fields into an exercise; moving it requires owning the target workout."""
        if requester is not None:
            self.get_by_id(doc_id, requester)
            if data.get("workout_id"):
                self._check_workout_owner(data["workout_id"], requester)
        return self._apply_update(doc_id, data)

    def get_all(
        self,
        requester: Identity,
        workout_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List exercises visible to the requester.

        Args:
            requester: Authenticated caller
            workout_id: Further restrict to one workout
        """
        documents = [d for d in self._fetch_all() if self.visible_to(d, requester)]
        if workout_id is not None:
            documents = [d for d in documents if d.get("workout_id") == workout_id]

        return documents

    def _check_workout_owner(self, workout_id: str, requester: Identity) -> None:
        context = f"Failed to retrieve workout {workout_id}"
        try:
            workout = self._store.get_by_id(COLLECTION_WORKOUTS, workout_id)
        except Exception as e:
            raise wrap_service_error(context, e)

        if workout.get("user_id") != requester.subject_id:
            logger.warning(
                f"Subject {requester.subject_id} tried to attach an exercise "
                f"to workout {workout_id}"
            )
            raise wrap_service_error(context, not_found_error(COLLECTION_WORKOUTS, workout_id))
