"""
Database implementations of the DocumentStore port.
"""

from infrastructure.db.firestore_repository import FirestoreDocumentStore

__all__ = [
    "FirestoreDocumentStore",
]
