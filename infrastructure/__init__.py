"""
Infrastructure Layer for the fitness tracking API.

This package contains concrete implementations of application ports:
- db/: Firestore document store and error translation
- firebase.py: firebase-admin App and Firestore client bootstrap
"""

# Re-export database implementations for convenient access
from infrastructure.db import FirestoreDocumentStore

__all__ = [
    "FirestoreDocumentStore",
]
