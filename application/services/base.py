"""
Shared CRUD behaviour for entity services.

Each entity service owns exactly one collection. Failures from the
document store are rewrapped as ServiceError with the operation and
target id prepended to the cause's message.

Per-document reads and writes take an optional ``requester``. When one is
given, a document the requester may not see is reported exactly like a
missing one, so ownership checks never reveal that a document exists.
"""

import logging
from typing import Any, Dict, List, Optional

from application.exceptions import RepositoryError, wrap_service_error
from application.ports import DocumentStore
from domain.models import Identity, Role

logger = logging.getLogger(__name__)


def not_found_error(collection: str, doc_id: str) -> RepositoryError:
    """The store's not-found error for ``doc_id``."""
    return RepositoryError(
        f"Document not found in collection {collection} with id {doc_id}",
        "DOCUMENT_NOT_FOUND",
        404,
    )


class DocumentService:
    """
    Base class mapping entity operations onto one document store collection.

    Subclasses set ``collection`` and ``entity_name`` and add their own
    filtering or defaulting rules. ``owner_field`` names the field holding
    the owning subject id; ``trainer_sees_all`` lets trainers see every
    document regardless of owner.
    """

    collection: str = ""
    entity_name: str = "document"
    owner_field: str = "user_id"
    trainer_sees_all: bool = False

    def __init__(self, store: DocumentStore):
        """
        Initialize the service.

        Args:
            store: Document store the collection lives in
        """
        self._store = store

    def visible_to(self, document: Dict[str, Any], requester: Identity) -> bool:
        """Whether ``requester`` may see ``document``."""
        if self.trainer_sees_all and requester.role is Role.TRAINER:
            return True
        return document.get(self.owner_field) == requester.subject_id

    def _insert(self, data: Dict[str, Any], doc_id: Optional[str] = None) -> Dict[str, Any]:
        try:
            new_id = self._store.create(self.collection, data, doc_id)
        except Exception as e:
            raise wrap_service_error(f"Failed to create {self.entity_name}", e)

        logger.info(f"Created {self.entity_name} {new_id} in {self.collection}")
        return {"id": new_id, **data}

    def _fetch_all(self) -> List[Dict[str, Any]]:
        try:
            return self._store.get_all(self.collection)
        except Exception as e:
            raise wrap_service_error(f"Failed to retrieve {self.entity_name}s", e)

    def _apply_update(self, doc_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            self._store.update(self.collection, doc_id, data)
        except Exception as e:
            raise wrap_service_error(f"Failed to update {self.entity_name} {doc_id}", e)

        return {"id": doc_id, **data}

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new document.

        Returns:
            The input merged with the generated id
        """
        return self._insert(data)

    def get_by_id(self, doc_id: str, requester: Optional[Identity] = None) -> Dict[str, Any]:
        """
        Fetch one document.

        Args:
            doc_id: Document id
            requester: When given, documents hidden from this caller are
                treated as missing

        Raises:
            ServiceError: Wrapping DOCUMENT_NOT_FOUND (404) if absent or hidden
        """
        context = f"Failed to retrieve {self.entity_name} {doc_id}"
        try:
            document = self._store.get_by_id(self.collection, doc_id)
        except Exception as e:
            raise wrap_service_error(context, e)

        if requester is not None and not self.visible_to(document, requester):
            logger.warning(
                f"Subject {requester.subject_id} denied access to "
                f"{self.entity_name} {doc_id}"
            )
            raise wrap_service_error(context, not_found_error(self.collection, doc_id))
        return document

    def update(
        self,
        doc_id: str,
        data: Dict[str, Any],
        requester: Optional[Identity] = None,
    ) -> Dict[str, Any]:
        """
        Merge fields into a document.

        Returns only the id plus the fields that were sent; the merged
        server state is not re-fetched.
        """
        if requester is not None:
            self.get_by_id(doc_id, requester)
        return self._apply_update(doc_id, data)

    def delete(self, doc_id: str, requester: Optional[Identity] = None) -> None:
        """Delete one document."""
        if requester is not None:
            self.get_by_id(doc_id, requester)
        try:
            self._store.delete(self.collection, doc_id)
        except Exception as e:
            raise wrap_service_error(f"Failed to delete {self.entity_name} {doc_id}", e)

        logger.info(f"Deleted {self.entity_name} {doc_id} from {self.collection}")
