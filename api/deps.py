"""
FastAPI Dependency Providers for the fitness tracking API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fakes.

Architecture:
- Settings come from the app the request is served by
- The Firestore store and the identity provider are cached per-process
- Services and use cases are created per-request
- ``authorize(policy)`` turns an AuthorizationPolicy into a dependency that
  authenticates the caller and enforces the policy

Usage in routers:
    from api.deps import authorize, get_workout_service
    from domain.models import AuthorizationPolicy, ALL_ROLES

    ANY_ROLE = AuthorizationPolicy(allowed_roles=ALL_ROLES)

    @router.get("/workouts")
    def list_workouts(
        identity: Identity = Depends(authorize(ANY_ROLE)),
        service: WorkoutService = Depends(get_workout_service),
    ):
        return service.get_all(identity.subject_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_document_store] = lambda: InMemoryDocumentStore()
    app.dependency_overrides[get_identity_provider] = lambda: FakeIdentityProvider()
"""

import logging
from functools import lru_cache
from typing import Callable, Optional

from fastapi import Depends, Header, Request

from application.authorization import enforce
from application.exceptions import AuthenticationError, ServiceError
from application.ports import DocumentStore, IdentityProvider
from application.services import (
    ExerciseLibraryService,
    ExerciseService,
    QuestionService,
    UserService,
    WorkoutService,
)
from application.use_cases import AssembleWorkoutUseCase
from backend.auth import FirebaseIdentityProvider
from backend.settings import Settings, get_settings as _get_settings
from domain.models import AuthorizationPolicy, Identity
from infrastructure.db import FirestoreDocumentStore
from infrastructure.firebase import create_firestore_client, get_firebase_app

logger = logging.getLogger(__name__)

TOKEN_NOT_FOUND = "TOKEN_NOT_FOUND"


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings(request: Request) -> Settings:
    """
    Get application settings.

    Returns the Settings the serving app was created with, falling back to
    the cached process-wide instance.
    """
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = _get_settings()
    return settings


# =============================================================================
# Document Store Provider
# =============================================================================


@lru_cache
def _firestore_store(
    project_id: str,
    credentials_path: Optional[str],
    database_id: str,
) -> FirestoreDocumentStore:
    app = get_firebase_app(project_id, credentials_path)
    client = create_firestore_client(app, database_id)
    logger.info(f"Opened Firestore database {database_id} in project {project_id}")
    return FirestoreDocumentStore(client)


def get_document_store(settings: Settings = Depends(get_settings)) -> DocumentStore:
    """
    Get the document store (cached per configuration).

    Raises:
        ServiceError: DATABASE_UNAVAILABLE (503) if Firestore is not configured
    """
    if not settings.firestore_configured:
        raise ServiceError(
            "Database not configured (missing FIREBASE_PROJECT_ID)",
            "DATABASE_UNAVAILABLE",
            503,
        )
    return _firestore_store(
        settings.firebase_project_id,
        settings.google_application_credentials,
        settings.firestore_database,
    )


# =============================================================================
# Identity Provider
# =============================================================================


@lru_cache
def _firebase_identity_provider(
    project_id: str,
    credentials_path: Optional[str],
    jwks_url: str,
) -> FirebaseIdentityProvider:
    app = get_firebase_app(project_id, credentials_path)
    return FirebaseIdentityProvider(project_id=project_id, jwks_url=jwks_url, app=app)


def get_identity_provider(settings: Settings = Depends(get_settings)) -> IdentityProvider:
    """
    Get the identity provider (cached per configuration).

    Raises:
        ServiceError: AUTH_NOT_CONFIGURED (500) if no Firebase project is set
    """
    if not settings.firebase_project_id:
        raise ServiceError(
            "Token validation not configured (missing FIREBASE_PROJECT_ID)",
            "AUTH_NOT_CONFIGURED",
            500,
        )
    return _firebase_identity_provider(
        settings.firebase_project_id,
        settings.google_application_credentials,
        settings.firebase_jwks_url,
    )


# =============================================================================
# Authentication / Authorization
# =============================================================================


def get_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    """
    Extract the bearer token from the Authorization header.

    Raises:
        AuthenticationError: TOKEN_NOT_FOUND if the header or token is missing
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationError("Unauthorized: No token provided", TOKEN_NOT_FOUND)

    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise AuthenticationError("Unauthorized: No token provided", TOKEN_NOT_FOUND)
    return token


def get_current_identity(
    token: str = Depends(get_bearer_token),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity:
    """Verify the bearer token and return the caller's identity."""
    return identity_provider.verify(token)


def authorize(policy: AuthorizationPolicy) -> Callable[..., Identity]:
    """
    Build a dependency enforcing ``policy`` for the current request.

    The target subject id for same-subject checks is read from the path
    parameter named by ``policy.target_param``.

    Usage:
        @router.get("/users/{user_id}")
        def get_user(
            identity: Identity = Depends(
                authorize(AuthorizationPolicy.roles(
                    Role.ADMIN, allow_same_subject=True, target_param="user_id",
                ))
            ),
        ): ...
    """

    def dependency(
        request: Request,
        identity: Identity = Depends(get_current_identity),
    ) -> Identity:
        target_subject_id = None
        if policy.target_param:
            target_subject_id = request.path_params.get(policy.target_param)
        enforce(policy, identity, target_subject_id)
        return identity

    return dependency


# =============================================================================
# Service Providers
# =============================================================================


def get_user_service(
    store: DocumentStore = Depends(get_document_store),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> UserService:
    """Get user service instance."""
    return UserService(store, identity_provider)


def get_exercise_library_service(
    store: DocumentStore = Depends(get_document_store),
) -> ExerciseLibraryService:
    """Get exercise library service instance."""
    return ExerciseLibraryService(store)


def get_exercise_service(
    store: DocumentStore = Depends(get_document_store),
) -> ExerciseService:
    """Get exercise service instance."""
    return ExerciseService(store)


def get_question_service(
    store: DocumentStore = Depends(get_document_store),
) -> QuestionService:
    """Get question service instance."""
    return QuestionService(store)


def get_workout_service(
    store: DocumentStore = Depends(get_document_store),
) -> WorkoutService:
    """Get workout service instance."""
    return WorkoutService(store)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_assemble_workout_use_case(
    store: DocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_settings),
) -> AssembleWorkoutUseCase:
    """
    Get AssembleWorkoutUseCase instance.

    All services share the request's document store.
    """
    return AssembleWorkoutUseCase(
        workout_service=WorkoutService(store),
        exercise_service=ExerciseService(store),
        exercise_library_service=ExerciseLibraryService(store),
        store=store,
        rollback_on_failure=settings.workout_assembly_rollback,
        max_workers=settings.workout_assembly_max_workers,
    )


__all__ = [
    # Settings
    "get_settings",
    # Infrastructure
    "get_document_store",
    "get_identity_provider",
    # Auth
    "TOKEN_NOT_FOUND",
    "get_bearer_token",
    "get_current_identity",
    "authorize",
    # Services
    "get_user_service",
    "get_exercise_library_service",
    "get_exercise_service",
    "get_question_service",
    "get_workout_service",
    # Use cases
    "get_assemble_workout_use_case",
]
