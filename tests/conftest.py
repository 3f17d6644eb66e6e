"""
Pytest fixtures shared by unit and integration tests.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_document_store, get_identity_provider
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakeIdentityProvider,
    InMemoryDocumentStore,
    create_identity_provider,
    create_library_store,
)


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Fresh document store with the sample exercise library."""
    return create_library_store()


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    """Fake identity provider knowing the sample tokens."""
    return create_identity_provider()


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        firebase_project_id="test-project",
        _env_file=None,
    )


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app, store, identity_provider) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient wired to the fakes.

    Unexpected exceptions are rendered by the app's handlers instead of
    being re-raised into the test.
    """
    app.dependency_overrides[get_document_store] = lambda: store
    app.dependency_overrides[get_identity_provider] = lambda: identity_provider
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
