"""
Exercises router.

Workout-scoped exercises. Callers see and change only their own
exercises unless they are a trainer, and attach exercises only to their
own workouts. Exercises outside that scope answer 404.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from api.deps import authorize, get_exercise_service
from api.routers.policies import ANY_ROLE
from api.schemas import CreateExerciseRequest, UpdateExerciseRequest, success_response
from application.services import ExerciseService
from domain.models import Identity

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_exercise(
    body: CreateExerciseRequest,
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: ExerciseService = Depends(get_exercise_service),
):
    document = body.to_document()
    document["user_id"] = identity.subject_id
    exercise = service.create(document, identity)
    return success_response(exercise, "Exercise Created")


@router.get("")
def list_exercises(
    workout_id: Optional[str] = Query(None, min_length=1),
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: ExerciseService = Depends(get_exercise_service),
):
    exercises = service.get_all(identity, workout_id)
    return success_response(exercises, "Exercises Retrieved")


@router.get("/{exercise_id}")
def get_exercise(
    exercise_id: str,
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: ExerciseService = Depends(get_exercise_service),
):
    exercise = service.get_by_id(exercise_id, identity)
    return success_response(exercise, f'Exercise with ID "{exercise_id}" retrieved successfully')


@router.put("/{exercise_id}")
def update_exercise(
    exercise_id: str,
    body: UpdateExerciseRequest,
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: ExerciseService = Depends(get_exercise_service),
):
    exercise = service.update(exercise_id, body.to_document(), identity)
    return success_response(exercise, "Exercise Updated")


@router.delete("/{exercise_id}")
def delete_exercise(
    exercise_id: str,
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: ExerciseService = Depends(get_exercise_service),
):
    service.delete(exercise_id, identity)
    return success_response(None, "Exercise Deleted")
