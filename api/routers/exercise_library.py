"""
Exercise library router.

Any signed-in role can browse the catalog; only trainers curate it.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from api.deps import authorize, get_exercise_library_service
from api.routers.policies import ANY_ROLE, TRAINER_ONLY
from api.schemas import (
    CreateLibraryExerciseRequest,
    UpdateLibraryExerciseRequest,
    success_response,
)
from application.services import ExerciseLibraryService
from domain.models import Identity, Intensity

router = APIRouter(
    prefix="/exercise-library",
    tags=["Exercise Library"],
)


def _split(value: Optional[str]) -> Optional[List[str]]:
    """Parse a comma-separated filter value."""
    if value is None:
        return None
    return [item.strip() for item in value.split(",") if item.strip()] or None


@router.post("", status_code=status.HTTP_201_CREATED)
def create_library_exercise(
    body: CreateLibraryExerciseRequest,
    identity: Identity = Depends(authorize(TRAINER_ONLY)),
    service: ExerciseLibraryService = Depends(get_exercise_library_service),
):
    entry = service.create(body.to_document())
    return success_response(entry, "Exercise Created")


@router.get("")
def list_library_exercises(
    equipment: Optional[str] = Query(None, description="Comma-separated equipment"),
    muscles_worked: Optional[str] = Query(None, description="Comma-separated muscle groups"),
    intensity: Optional[Intensity] = Query(None),
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: ExerciseLibraryService = Depends(get_exercise_library_service),
):
    """List the catalog, optionally filtered by equipment, muscles or intensity."""
    entries = service.get_all(
        equipment=_split(equipment),
        muscles_worked=_split(muscles_worked),
        intensity=intensity,
    )
    return success_response(entries, "Exercises Retrieved")


@router.get("/{exercise_id}")
def get_library_exercise(
    exercise_id: str,
    identity: Identity = Depends(authorize(ANY_ROLE)),
    service: ExerciseLibraryService = Depends(get_exercise_library_service),
):
    entry = service.get_by_id(exercise_id)
    return success_response(entry, f'Exercise with ID "{exercise_id}" retrieved successfully')


@router.put("/{exercise_id}")
def update_library_exercise(
    exercise_id: str,
    body: UpdateLibraryExerciseRequest,
    identity: Identity = Depends(authorize(TRAINER_ONLY)),
    service: ExerciseLibraryService = Depends(get_exercise_library_service),
):
    entry = service.update(exercise_id, body.to_document())
    return success_response(entry, "Exercise Updated")


@router.delete("/{exercise_id}")
def delete_library_exercise(
    exercise_id: str,
    identity: Identity = Depends(authorize(TRAINER_ONLY)),
    service: ExerciseLibraryService = Depends(get_exercise_library_service),
):
    service.delete(exercise_id)
    return success_response(None, "Exercise Deleted")
