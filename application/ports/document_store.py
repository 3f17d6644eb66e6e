"""
Document Store Interface (Port).

This module defines the abstract interface for a collection-oriented
document database. Implementations may use Firestore, in-memory storage,
or other backends.

All failures are raised as ``RepositoryError`` with a uniform code and
HTTP status code; backend-specific exceptions never escape an adapter.
"""
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Tuple, TypeVar

T = TypeVar("T")

FieldValuePair = Tuple[str, Any]


class DocumentStore(Protocol):
    """
    Abstract interface for document persistence operations.

    Documents are plain dictionaries. Every document returned by a read
    includes its key under ``"id"``.

    Transaction discipline: inside ``run_transaction`` every read and
    write that decides the transaction's outcome must be made through the
    transaction handle passed to the callback.
    """

    def create(
        self,
        collection: str,
        data: Dict[str, Any],
        doc_id: Optional[str] = None,
    ) -> str:
        """
        Insert a document.

        Args:
            collection: Collection name
            data: Document fields
            doc_id: Optional document key. When given, an existing document
                with the same key is overwritten (upsert).

        Returns:
            The document key (generated by the store when doc_id is None)

        Raises:
            RepositoryError: On backend failure
        """
        ...

    def get_all(self, collection: str) -> List[Dict[str, Any]]:
        """
        Return every document in a collection.

        No pagination; callers filter in memory.
        """
        ...

    def get_by_id(
        self,
        collection: str,
        doc_id: str,
        transaction: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """
        Return one document.

        Raises:
            RepositoryError: DOCUMENT_NOT_FOUND (404) if absent
        """
        ...

    def get_by_field_equals(
        self,
        collection: str,
        field: str,
        value: Any,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Return documents whose ``field`` equals ``value``.

        Raises:
            RepositoryError: DOCUMENTS_NOT_FOUND (404) if nothing matches
        """
        ...

    def update(
        self,
        collection: str,
        doc_id: str,
        data: Dict[str, Any],
        transaction: Optional[Any] = None,
    ) -> None:
        """
        Merge ``data`` into an existing document.

        Existence is not checked first; behaviour for a missing document
        is whatever the backend does.
        """
        ...

    def delete(
        self,
        collection: str,
        doc_id: str,
        transaction: Optional[Any] = None,
    ) -> None:
        """
        Delete one document.

        Inside a transaction the delete is staged and applied on commit.
        """
        ...

    def delete_by_fields_equals(
        self,
        collection: str,
        field_value_pairs: Sequence[FieldValuePair],
        transaction: Optional[Any] = None,
    ) -> None:
        """
        Delete every document matching an AND of equality predicates.

        Uses a batched write outside a transaction and transactional
        deletes inside one.
        """
        ...

    def run_transaction(self, operations: Callable[[Any], T]) -> T:
        """
        Run ``operations`` with a transaction handle and commit atomically.

        Raises:
            RepositoryError: TRANSACTION_FAILED if the transaction fails.
                Application errors raised by ``operations`` abort the
                transaction and propagate unchanged.
        """
        ...
