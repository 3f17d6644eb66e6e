"""
Firestore implementation of DocumentStore.

This implementation uses the synchronous google-cloud-firestore client
(obtained through firebase-admin) to provide generic create, read, query,
update, delete and transaction operations over named collections.

Every backend failure is translated into a RepositoryError; raw
google-api-core exceptions never leave this module.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from application.exceptions import ApplicationError, RepositoryError
from application.ports.document_store import FieldValuePair
from infrastructure.db.store_errors import to_repository_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Firestore rejects batches with more than 500 writes
MAX_BATCH_WRITES = 500


def _snapshot_to_dict(snapshot) -> Dict[str, Any]:
    """Flatten a DocumentSnapshot into a dict carrying its id."""
    return {"id": snapshot.id, **(snapshot.to_dict() or {})}


def _describe(field_value_pairs: Sequence[FieldValuePair]) -> str:
    return " AND ".join(f"{field} == {value}" for field, value in field_value_pairs)


class FirestoreDocumentStore:
    """
    Firestore-backed document store.

    Usage:
        store = FirestoreDocumentStore(firestore_client)
        workout_id = store.create("workouts", {"name": "Leg Day"})
        workout = store.get_by_id("workouts", workout_id)
    """

    def __init__(self, client: firestore.Client):
        """
        Initialize with a Firestore client.

        Args:
            client: Firestore client instance (injected, not global)
        """
        self._client = client

    # =========================================================================
    # Transactions
    # =========================================================================

    def run_transaction(self, operations: Callable[[Any], T]) -> T:
        """
        Execute ``operations`` inside a Firestore transaction.

        Firestore retries the callback on contention; it must therefore be
        free of side effects outside the transaction handle.
        """
        transaction = self._client.transaction()

        @firestore.transactional
        def _run(txn):
            return operations(txn)

        try:
            return _run(transaction)
        except ApplicationError:
            raise
        except Exception as e:
            raise to_repository_error("Transaction failed", e, code="TRANSACTION_FAILED")

    # =========================================================================
    # DocumentStore Protocol Methods
    # =========================================================================

    def create(
        self,
        collection: str,
        data: Dict[str, Any],
        doc_id: Optional[str] = None,
    ) -> str:
        """Insert a document, upserting when ``doc_id`` is given."""
        try:
            if doc_id:
                self._client.collection(collection).document(doc_id).set(data)
                return doc_id

            _, doc_ref = self._client.collection(collection).add(data)
            return doc_ref.id
        except Exception as e:
            raise to_repository_error(f"Failed to create document in {collection}", e)

    def get_all(self, collection: str) -> List[Dict[str, Any]]:
        """Fetch every document in a collection. Avoid on large collections."""
        try:
            return [
                _snapshot_to_dict(snapshot)
                for snapshot in self._client.collection(collection).stream()
            ]
        except Exception as e:
            raise to_repository_error(f"Failed to fetch documents from {collection}", e)

    def get_by_id(
        self,
        collection: str,
        doc_id: str,
        transaction: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """Fetch one document, raising DOCUMENT_NOT_FOUND if it is absent."""
        try:
            snapshot = (
                self._client.collection(collection)
                .document(doc_id)
                .get(transaction=transaction)
            )
        except Exception as e:
            raise to_repository_error(
                f"Failed to fetch document {doc_id} from {collection}", e
            )

        if not snapshot.exists:
            raise RepositoryError(
                f"Document not found in collection {collection} with id {doc_id}",
                "DOCUMENT_NOT_FOUND",
                404,
            )

        return _snapshot_to_dict(snapshot)

    def get_by_field_equals(
        self,
        collection: str,
        field: str,
        value: Any,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Fetch documents where ``field == value``; raises if none match."""
        try:
            query = self._client.collection(collection).where(
                filter=FieldFilter(field, "==", value)
            )
            if limit and limit > 0:
                query = query.limit(limit)
            documents = [_snapshot_to_dict(snapshot) for snapshot in query.stream()]
        except Exception as e:
            raise to_repository_error(
                f"Failed to fetch documents from {collection} where {field} == {value}", e
            )

        if not documents:
            raise RepositoryError(
                f"No documents found in collection {collection} where {field} == {value}",
                "DOCUMENTS_NOT_FOUND",
                404,
            )

        return documents

    def update(
        self,
        collection: str,
        doc_id: str,
        data: Dict[str, Any],
        transaction: Optional[Any] = None,
    ) -> None:
        """Merge fields into a document (Firestore errors if it is missing)."""
        try:
            doc_ref = self._client.collection(collection).document(doc_id)
            if transaction is not None:
                transaction.update(doc_ref, data)
            else:
                doc_ref.update(data)
        except Exception as e:
            raise to_repository_error(
                f"Failed to update document {doc_id} in {collection}", e
            )

    def delete(
        self,
        collection: str,
        doc_id: str,
        transaction: Optional[Any] = None,
    ) -> None:
        """Delete one document, staged on the transaction when given."""
        try:
            doc_ref = self._client.collection(collection).document(doc_id)
            if transaction is not None:
                transaction.delete(doc_ref)
            else:
                doc_ref.delete()
        except Exception as e:
            raise to_repository_error(
                f"Failed to delete document {doc_id} from {collection}", e
            )

    def delete_by_fields_equals(
        self,
        collection: str,
        field_value_pairs: Sequence[FieldValuePair],
        transaction: Optional[Any] = None,
    ) -> None:
        """Delete every document matching all equality predicates."""
        try:
            query = self._client.collection(collection)
            for field, value in field_value_pairs:
                query = query.where(filter=FieldFilter(field, "==", value))

            if transaction is not None:
                for snapshot in transaction.get(query):
                    transaction.delete(snapshot.reference)
                return

            batch = self._client.batch()
            pending = 0
            for snapshot in query.stream():
                batch.delete(snapshot.reference)
                pending += 1
                if pending == MAX_BATCH_WRITES:
                    batch.commit()
                    batch = self._client.batch()
                    pending = 0
            if pending:
                batch.commit()
        except Exception as e:
            raise to_repository_error(
                f"Failed to delete documents from {collection} "
                f"where {_describe(field_value_pairs)}",
                e,
            )
