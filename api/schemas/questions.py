"""
Pydantic models for the questions API.

The asker and the responding trainer are always taken from the verified
token, never from the body.
"""

from pydantic import Field

from api.schemas.base import RequestModel


class AskQuestionRequest(RequestModel):
    question: str = Field(..., min_length=1)


class RespondQuestionRequest(RequestModel):
    response: str = Field(..., min_length=1)
