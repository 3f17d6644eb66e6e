"""
Repository and Provider Interfaces (Ports).

This package defines abstract interfaces that decouple application logic
from infrastructure (database, identity provider). Implementations are
provided in the infrastructure and backend layers.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations elsewhere (how it's provided)

Usage:
    from application.ports import DocumentStore

    class WorkoutService:
        def __init__(self, store: DocumentStore):
            self._store = store
"""

from application.ports.document_store import DocumentStore, FieldValuePair
from application.ports.identity_provider import IdentityProvider

__all__ = [
    "DocumentStore",
    "FieldValuePair",
    "IdentityProvider",
]
