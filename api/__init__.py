"""
API package for the fitness tracking API.

This package contains:
- deps.py: FastAPI dependency providers for DI and authorization
- errors.py: Exception handlers producing the error envelope
- routers/: API route handlers
- schemas/: Request models and response envelopes
"""

# Re-export dependency providers for convenient access
from api.deps import (
    authorize,
    get_current_identity,
    get_document_store,
    get_identity_provider,
    get_settings,
)

__all__ = [
    # Settings
    "get_settings",
    # Infrastructure
    "get_document_store",
    "get_identity_provider",
    # Authentication / Authorization
    "get_current_identity",
    "authorize",
]
