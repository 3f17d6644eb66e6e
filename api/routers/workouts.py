"""
Workouts router.

``POST /workouts`` runs workout assembly: the workout and one exercise per
requested library entry are created together. The per-id routes act only
on the caller's own workouts; anyone else's answer 404.
"""

import logging

from fastapi import APIRouter, Depends, status

from api.deps import authorize, get_assemble_workout_use_case, get_workout_service
from api.routers.policies import ANY_ROLE
from api.schemas import AssembleWorkoutRequest, UpdateWorkoutRequest, success_response
from application.services import WorkoutService
from application.use_cases import AssembleWorkoutUseCase
from domain.models import Identity

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_workout(
    body: AssembleWorkoutRequest,
    identity: Identity = Depends(authorize(ANY_ROLE)),
    use_case: AssembleWorkoutUseCase = Depends(get_assemble_workout_use_case),
):
    workout = use_case.execute(
        workout_data=body.workout_data.model_dump(exclude_none=True),
        user_id=identity.subject_id,
        exercise_library_ids=body.exercise_library_ids,
    )
    return success_response(workout.model_dump(mode="json"), "Workout Created")


@router.get("")
def list_workouts(
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: WorkoutService = Depends(get_workout_service),
):
    """Workouts owned by the caller."""
    workouts = service.get_all(identity.subject_id)
    return success_response(workouts, "Workouts Retrieved")


@router.get("/{workout_id}")
def get_workout(
    workout_id: str,
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: WorkoutService = Depends(get_workout_service),
):
    workout = service.get_by_id(workout_id, identity)
    return success_response(workout, f'Workout with ID "{workout_id}" retrieved successfully')


@router.put("/{workout_id}")
def update_workout(
    workout_id: str,
    body: UpdateWorkoutRequest,
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: WorkoutService = Depends(get_workout_service),
):
    workout = service.update(workout_id, body.to_document(), identity)
    return success_response(workout, "Workout Updated")


@router.delete("/{workout_id}")
def delete_workout(
    workout_id: str,
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: WorkoutService = Depends(get_workout_service),
):
    """Delete one of the caller's workouts and its exercises."""
    service.delete(workout_id, identity)
    return success_response(None, "Workout Deleted")
