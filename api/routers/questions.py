"""
Questions router.

Premium and above can ask; trainers answer; admins moderate.
"""

from fastapi import APIRouter, Depends, status

from api.deps import authorize, get_question_service
from api.routers.policies import ADMIN_ONLY, PAID_TIERS, TRAINER_ONLY
from api.schemas import AskQuestionRequest, RespondQuestionRequest, success_response
from application.services import QuestionService
from domain.models import Identity

router = APIRouter(
    prefix="/questions",
    tags=["Questions"],
)


@router.post("", status_code=status.HTTP_201_CREATED)
def ask_question(
    body: AskQuestionRequest,
    identity: Identity = Depends(authorize(PAID_TIERS)),
    service: QuestionService = Depends(get_question_service),
):
    question = service.create(body.to_document(), identity.subject_id)
    return success_response(question, "Question Submitted")


@router.get("")
def list_questions(
    identity: Identity = Depends(authorize(PAID_TIERS)),
    service: QuestionService = Depends(get_question_service),
):
    """Trainers see every question, everyone else only their own."""
    questions = service.get_all(identity)
    return success_response(questions, "Questions Retrieved")


@router.get("/{question_id}")
def get_question(
    question_id: str,
    identity: Identity = Depends(authorize(PAID_TIERS)),
    service: QuestionService = Depends(get_question_service),
):
    question = service.get_by_id(question_id, identity)
    return success_response(question, f'Question with ID "{question_id}" retrieved successfully')


@router.put("/{question_id}")
def respond_to_question(
    question_id: str,
    body: RespondQuestionRequest,
    identity: Identity = Depends(authorize(TRAINER_ONLY)),
    service: QuestionService = Depends(get_question_service),
):
    """Answer an open question. Answered questions cannot be answered again."""
    question = service.respond(question_id, body.response, identity.subject_id)
    return success_response(question, "Question Answered")


@router.delete("/{question_id}")
def delete_question(
    question_id: str,
    identity: Identity = Depends(authorize(ADMIN_ONLY)),
    service: QuestionService = Depends(get_question_service),
):
    service.delete(question_id)
    return success_response(None, "Question Deleted")
