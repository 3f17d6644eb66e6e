"""
Fake Port Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No Firestore or Firebase Auth required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection on any document store operation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import InMemoryDocumentStore, create_library_store

    # Direct instantiation
    store = InMemoryDocumentStore()
    store.seed("workouts", [{"id": "w1", "user_id": "u1", "name": "Test"}])

    # Factory function with a pre-populated exercise library
    store = create_library_store()
"""
from typing import Any, Dict, List, Optional

from application.collections import COLLECTION_EXERCISE_LIBRARY
from domain.models import Role
from tests.fakes.document_store import FakeTransaction, InMemoryDocumentStore
from tests.fakes.identity_provider import FakeIdentityProvider

SAMPLE_LIBRARY: List[Dict[str, Any]] = [
    {
        "id": "sq1",
        "name": "Squat",
        "equipment": ["Barbell"],
        "muscles_worked": ["Legs"],
        "intensity": "High",
    },
    {
        "id": "bp1",
        "name": "Bench Press",
        "equipment": ["Barbell", "Bench"],
        "muscles_worked": ["Chest", "Triceps"],
        "intensity": "Medium",
    },
    {
        "id": "pu1",
        "name": "Push-up",
        "equipment": [],
        "muscles_worked": ["Chest"],
        "intensity": "Low",
    },
]

# token -> (subject id, role)
SAMPLE_TOKENS = {
    "lite-token": ("lite-user", Role.LITE),
    "premium-token": ("premium-user", Role.PREMIUM),
    "trainer-token": ("trainer-user", Role.TRAINER),
    "admin-token": ("admin-user", Role.ADMIN),
    "norole-token": ("norole-user", None),
}


# =============================================================================
# Factory Functions
# =============================================================================


def create_library_store(
    entries: Optional[List[Dict[str, Any]]] = None,
) -> InMemoryDocumentStore:
    """
    Create an InMemoryDocumentStore with a seeded exercise library.

    Args:
        entries: Library documents. Defaults to SAMPLE_LIBRARY.
    """
    store = InMemoryDocumentStore()
    store.seed(COLLECTION_EXERCISE_LIBRARY, entries if entries is not None else SAMPLE_LIBRARY)
    return store


def bearer(token: str) -> Dict[str, str]:
    """Authorization header carrying a fake token."""
    return {"Authorization": f"Bearer {token}"}


def create_identity_provider() -> FakeIdentityProvider:
    """Create a FakeIdentityProvider knowing every SAMPLE_TOKENS token."""
    provider = FakeIdentityProvider()
    for token, (subject_id, role) in SAMPLE_TOKENS.items():
        provider.register(token, subject_id, role)
    return provider


__all__ = [
    # Fakes
    "InMemoryDocumentStore",
    "FakeTransaction",
    "FakeIdentityProvider",
    # Sample data
    "SAMPLE_LIBRARY",
    "SAMPLE_TOKENS",
    # Factories
    "bearer",
    "create_library_store",
    "create_identity_provider",
]
