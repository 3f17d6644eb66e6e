"""
Question submitted by a user to the trainers.

Lifecycle: Open (no response) -> Answered (response, trainer_id and
date_responded set). Answered is terminal.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class QuestionStatus(str, Enum):
    OPEN = "open"
    ANSWERED = "answered"


class Question(BaseModel):
    """A trainer question and, once answered, its response."""

    id: Optional[str] = None
    user_id: str = Field(..., min_length=1)
    trainer_id: Optional[str] = None
    question: str = Field(..., min_length=1)
    response: Optional[str] = None
    date_asked: str
    date_responded: Optional[str] = None

    @property
    def status(self) -> QuestionStatus:
        if self.response:
            return QuestionStatus.ANSWERED
        return QuestionStatus.OPEN

    @property
    def is_answered(self) -> bool:
        return self.status is QuestionStatus.ANSWERED
