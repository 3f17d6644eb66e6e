"""
AssembleWorkout Use Case.

Builds a workout from trainer-curated library exercises. The workout
document is written first so that its id exists before any exercise is
created; each selected library entry is then copied into a new exercise
document carrying that workout id, and finally the workout's ``exercises``
field is filled in with the created records.

Exercise creates are independent of each other and run on a small thread
pool. Results keep the order of the requested library ids.

When rollback is enabled, a failure after the workout document exists
triggers a compensating transactional delete of the workout and of every
exercise already created. With rollback disabled the placeholder workout
is left behind with an empty exercise list.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from application.collections import COLLECTION_EXERCISES, COLLECTION_WORKOUTS
from application.exceptions import ServiceError, wrap_service_error
from application.ports import DocumentStore
from application.services import ExerciseLibraryService, ExerciseService, WorkoutService
from domain.models import Exercise, ExerciseLibraryEntry, Workout

logger = logging.getLogger(__name__)

DEFAULT_SETS = 4
DEFAULT_REPS = 12

NO_EXERCISES_SELECTED = "NO_EXERCISES_SELECTED"
WORKOUT_NOT_VISIBLE = "WORKOUT_NOT_VISIBLE"


class AssembleWorkoutUseCase:
    """
    Use case for creating a workout together with its exercises.

    Orchestrates the following workflow:
    1. Default the workout date to now
    2. Create the workout with an empty exercise list
    3. Re-fetch it to confirm the write is visible
    4. Select library entries in the requested order, dropping unknown ids
    5. Create a 4x12 exercise snapshot per selected entry, concurrently
    6. Store the created exercises on the workout
    7. Return the assembled workout

    Usage:
        >>> use_case = AssembleWorkoutUseCase(
        ...     workout_service=workouts,
        ...     exercise_service=exercises,
        ...     exercise_library_service=library,
        ...     store=store,
        ... )
        >>> workout = use_case.execute({"name": "Leg Day"}, "u1", ["sq1"])
        >>> workout.exercises[0].sets
        4
    """

    def __init__(
        self,
        workout_service: WorkoutService,
        exercise_service: ExerciseService,
        exercise_library_service: ExerciseLibraryService,
        store: Optional[DocumentStore] = None,
        rollback_on_failure: bool = True,
        max_workers: int = 4,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_service: Service owning the workouts collection
            exercise_service: Service owning the exercises collection
            exercise_library_service: Service owning the library catalog
            store: Document store used for the compensating delete.
                Required when rollback_on_failure is True.
            rollback_on_failure: Delete partially assembled documents when
                a later step fails
            max_workers: Thread pool size for exercise creation
        """
        if rollback_on_failure and store is None:
            raise ValueError("A document store is required when rollback is enabled")
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")

        self._workouts = workout_service
        self._exercises = exercise_service
        self._library = exercise_library_service
        self._store = store
        self._rollback_on_failure = rollback_on_failure
        self._max_workers = max_workers

    def execute(
        self,
        workout_data: Dict[str, Any],
        user_id: str,
        exercise_library_ids: Sequence[str],
    ) -> Workout:
        """
        Assemble and persist a workout.

        Args:
            workout_data: ``name`` plus optional ``description`` and ``date``
            user_id: Owner of the workout and its exercises
            exercise_library_ids: Library entries to copy, in order

        Returns:
            The assembled Workout including created exercise ids

        Raises:
            ServiceError: VALIDATION_ERROR (400) for a missing user id or
                name; otherwise ``"Failed to create workout: <cause>"``
                carrying the cause's code and status
        """
        if not user_id:
            raise ServiceError("User ID is required", "VALIDATION_ERROR", 400)
        if not workout_data.get("name"):
            raise ServiceError("Workout name is required", "VALIDATION_ERROR", 400)

        workout_id: Optional[str] = None
        created: List[Exercise] = []

        try:
            document = self._workout_document(workout_data, user_id)
            workout_id = self._workouts.create(document)["id"]
            self._confirm_visible(workout_id)

            selected = self._select_entries(exercise_library_ids)
            self._create_exercises(selected, workout_id, user_id, created)

            self._workouts.update(
                workout_id,
                {"exercises": [e.model_dump(mode="json") for e in created]},
            )
        except Exception as e:
            if workout_id is not None and self._rollback_on_failure:
                self._compensate(workout_id, created, e)
            raise wrap_service_error("Failed to create workout", e)

        logger.info(
            f"Assembled workout {workout_id} for user {user_id} "
            f"with {len(created)} exercises"
        )
        return Workout(
            id=workout_id,
            user_id=user_id,
            name=document["name"],
            description=document.get("description"),
            date=document["date"],
            exercises=created,
        )

    def _workout_document(self, workout_data: Dict[str, Any], user_id: str) -> Dict[str, Any]:
        document = {
            "user_id": user_id,
            "name": workout_data["name"],
            "date": workout_data.get("date") or datetime.now(timezone.utc).isoformat(),
            "exercises": [],
        }
        if workout_data.get("description") is not None:
            document["description"] = workout_data["description"]
        return document

    def _confirm_visible(self, workout_id: str) -> None:
        try:
            self._workouts.get_by_id(workout_id)
        except ServiceError as e:
            if e.status_code == 404:
                raise ServiceError(
                    f"Workout {workout_id} not found after creation",
                    WORKOUT_NOT_VISIBLE,
                    500,
                )
            raise

    def _select_entries(self, exercise_library_ids: Sequence[str]) -> List[ExerciseLibraryEntry]:
        by_id = {doc["id"]: doc for doc in self._library.get_all()}
        selected = [
            ExerciseLibraryEntry.model_validate(by_id[library_id])
            for library_id in exercise_library_ids
            if library_id in by_id
        ]

        dropped = len(exercise_library_ids) - len(selected)
        if dropped:
            logger.info(f"Dropped {dropped} unknown exercise library ids")
        if not selected:
            raise ServiceError(
                "No valid exercises found in the exercise library",
                NO_EXERCISES_SELECTED,
                400,
            )
        return selected

    def _create_exercise(
        self,
        entry: ExerciseLibraryEntry,
        workout_id: str,
        user_id: str,
    ) -> Exercise:
        exercise = Exercise.snapshot_of(
            entry,
            workout_id=workout_id,
            user_id=user_id,
            sets=DEFAULT_SETS,
            reps=DEFAULT_REPS,
        )
        created = self._exercises.create(exercise.to_document())
        return exercise.model_copy(update={"id": created["id"]})

    def _create_exercises(
        self,
        entries: List[ExerciseLibraryEntry],
        workout_id: str,
        user_id: str,
        created: List[Exercise],
    ) -> None:
        """
        Create one exercise per entry and append them to ``created``.

        Every submitted create is awaited before the first failure is
        re-raised, so ``created`` always lists every exercise that exists.
        """
        first_error: Optional[BaseException] = None

        with ThreadPoolExecutor(
            max_workers=min(self._max_workers, len(entries)),
            thread_name_prefix="workout_assembly_",
        ) as executor:
            futures = [
                executor.submit(self._create_exercise, entry, workout_id, user_id)
                for entry in entries
            ]
            for future in futures:
                try:
                    created.append(future.result())
                except Exception as e:
                    if first_error is None:
                        first_error = e

        if first_error is not None:
            raise first_error

    def _compensate(
        self,
        workout_id: str,
        created: List[Exercise],
        cause: BaseException,
    ) -> None:
        exercise_ids = [e.id for e in created if e.id]
        logger.warning(
            f"Rolling back workout {workout_id} and {len(exercise_ids)} exercises "
            f"after failure: {cause}"
        )

        def delete_all(transaction) -> None:
            for exercise_id in exercise_ids:
                self._store.delete(COLLECTION_EXERCISES, exercise_id, transaction)
            self._store.delete(COLLECTION_WORKOUTS, workout_id, transaction)

        try:
            self._store.run_transaction(delete_all)
        except Exception:
            logger.exception(f"Failed to roll back workout {workout_id}")
