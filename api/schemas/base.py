"""
Shared request model configuration.

Request bodies are accepted in either snake_case or camelCase
(``musclesWorked`` and ``muscles_worked`` both work) and unknown fields
are rejected.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_document(self) -> dict:
        """Fields the client actually sent, serialized for storage."""
        return self.model_dump(mode="json", exclude_unset=True)
