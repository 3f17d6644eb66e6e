"""
Workout service.

A workout owns its exercises. Every exercise embedded in a workout carries
the workout's id and its owner's user id; updates that would break this
are rejected. Deleting a workout removes its exercises in the same
transaction.
"""

import logging
from typing import Any, Dict, List, Optional

from application.collections import COLLECTION_EXERCISES, COLLECTION_WORKOUTS
from application.exceptions import ServiceError, wrap_service_error
from application.services.base import DocumentService, not_found_error
from domain.models import Exercise, Identity, find_ownership_violation

logger = logging.getLogger(__name__)

EXERCISE_OWNERSHIP_MISMATCH = "EXERCISE_OWNERSHIP_MISMATCH"


class WorkoutService(DocumentService):
    """CRUD over the workouts collection."""

    collection = COLLECTION_WORKOUTS
    entity_name = "workout"

    def get_all(self, user_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List workouts.

        Args:
            user_id: Restrict to one owner. All workouts when omitted.
        """
        documents = self._fetch_all()
        if user_id is None:
            return documents
        return [d for d in documents if d.get("user_id") == user_id]

    def update(
        self,
        doc_id: str,
        data: Dict[str, Any],
        requester: Optional[Identity] = None,
    ) -> Dict[str, Any]:
        """
        Merge fields into a workout.

        Embedded exercises without a ``workout_id`` or ``user_id`` are
        stamped with the workout's; any that name another workout or user
        are rejected.

        Raises:
            ServiceError: EXERCISE_OWNERSHIP_MISMATCH (400) for foreign
                exercises; the wrapped not-found (404) for a missing or
                hidden workout
        """
        if requester is None and "exercises" not in data:
            return self._apply_update(doc_id, data)

        current = self.get_by_id(doc_id, requester)
        if data.get("exercises") is not None:
            data = {
                **data,
                "exercises": self._claim_exercises(doc_id, current.get("user_id"), data["exercises"]),
            }
        return self._apply_update(doc_id, data)

    def _claim_exercises(
        self,
        workout_id: str,
        user_id: str,
        exercises: List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        claimed = []
        for exercise in exercises:
            exercise = dict(exercise)
            if not exercise.get("workout_id"):
                exercise["workout_id"] = workout_id
            if not exercise.get("user_id"):
                exercise["user_id"] = user_id
            claimed.append(exercise)

        try:
            violation = find_ownership_violation(
                workout_id, user_id, [Exercise.model_validate(e) for e in claimed]
            )
        except ValueError as e:
            raise ServiceError(
                f"Invalid exercises for workout {workout_id}: {e}", "VALIDATION_ERROR", 400
            )
        if violation:
            raise ServiceError(violation, EXERCISE_OWNERSHIP_MISMATCH, 400)
        return claimed

    def delete(self, doc_id: str, requester: Optional[Identity] = None) -> None:
        """Delete a workout and every exercise that belongs to it."""

        def cascade(transaction) -> None:
            workout = self._store.get_by_id(self.collection, doc_id, transaction)
            if requester is not None and not self.visible_to(workout, requester):
                raise not_found_error(self.collection, doc_id)
            self._store.delete_by_fields_equals(
                COLLECTION_EXERCISES, [("workout_id", doc_id)], transaction
            )
            self._store.delete(self.collection, doc_id, transaction)

        try:
            self._store.run_transaction(cascade)
        except Exception as e:
            raise wrap_service_error(f"Failed to delete workout {doc_id}", e)

        logger.info(f"Deleted workout {doc_id} and its exercises")
