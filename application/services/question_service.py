"""
Trainer question service.

Users ask, trainers answer. A question is answered exactly once: the
open-state check and the answer are written in one transaction so two
trainers responding at the same time cannot both win.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from application.collections import COLLECTION_QUESTIONS
from application.exceptions import ServiceError, wrap_service_error
from application.services.base import DocumentService
from domain.models import Identity, Question

logger = logging.getLogger(__name__)

QUESTION_ALREADY_ANSWERED = "QUESTION_ALREADY_ANSWERED"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class QuestionService(DocumentService):
    """CRUD over the questions collection with the answer lifecycle."""

    collection = COLLECTION_QUESTIONS
    entity_name = "question"
    trainer_sees_all = True

    def create(self, data: Dict[str, Any], user_id: str) -> Dict[str, Any]:
        """
        Ask a question.

        ``user_id`` and ``date_asked`` are stamped by the service; any
        response fields in ``data`` are discarded so new questions always
        start open.
        """
        document = {
            "question": data["question"],
            "user_id": user_id,
            "date_asked": _utc_now(),
        }
        return self._insert(document)

    def get_all(self, requester: Identity) -> List[Dict[str, Any]]:
        """Trainers see every question; other users see only their own."""
        return [d for d in self._fetch_all() if self.visible_to(d, requester)]

    def respond(self, question_id: str, response: str, trainer_id: str) -> Dict[str, Any]:
        """
        Answer an open question.

        Raises:
            ServiceError: QUESTION_ALREADY_ANSWERED (409) if a response
                exists, or the wrapped not-found (404) if the question is
                missing
        """

        def answer(transaction) -> Dict[str, Any]:
            current = Question.model_validate(
                self._store.get_by_id(self.collection, question_id, transaction)
            )
            if current.is_answered:
                raise ServiceError(
                    f"Question {question_id} has already been answered",
                    QUESTION_ALREADY_ANSWERED,
                    409,
                )
            fields = {
                "response": response,
                "trainer_id": trainer_id,
                "date_responded": _utc_now(),
            }
            self._store.update(self.collection, question_id, fields, transaction)
            return fields

        try:
            fields = self._store.run_transaction(answer)
        except ServiceError:
            raise
        except Exception as e:
            raise wrap_service_error(f"Failed to respond to question {question_id}", e)

        logger.info(f"Trainer {trainer_id} answered question {question_id}")
        return {"id": question_id, **fields}
