"""
Translation of document store failures into RepositoryError.

Backend exceptions are mapped to the store's canonical error code string
(``not-found``, ``already-exists``, ...) and to the HTTP status the API
should answer with.
"""

from typing import Optional

from google.api_core import exceptions as google_exceptions

from application.exceptions import UNKNOWN_ERROR_CODE, RepositoryError, get_error_message

STATUS_BY_STORE_CODE = {
    "not-found": 404,
    "already-exists": 409,
    "permission-denied": 403,
    "unauthenticated": 401,
    "invalid-argument": 400,
}

_CODE_BY_EXCEPTION = (
    (google_exceptions.NotFound, "not-found"),
    (google_exceptions.AlreadyExists, "already-exists"),
    (google_exceptions.PermissionDenied, "permission-denied"),
    (google_exceptions.Unauthenticated, "unauthenticated"),
    (google_exceptions.InvalidArgument, "invalid-argument"),
)


def status_for_store_code(code: Optional[str]) -> int:
    """Map a canonical store error code to an HTTP status (default 500)."""
    return STATUS_BY_STORE_CODE.get(code or "", 500)


def store_error_code(error: BaseException) -> str:
    """
    Derive the canonical store error code for an exception.

    Known google-api-core exceptions map to their Firestore code names;
    other API errors use their gRPC status name; anything else is
    UNKNOWN_ERROR.
    """
    for exc_type, code in _CODE_BY_EXCEPTION:
        if isinstance(error, exc_type):
            return code

    if isinstance(error, google_exceptions.GoogleAPICallError):
        grpc_code = getattr(error, "grpc_status_code", None)
        if grpc_code is not None:
            return grpc_code.name.lower().replace("_", "-")

    return UNKNOWN_ERROR_CODE


def to_repository_error(
    context: str,
    error: BaseException,
    code: Optional[str] = None,
) -> RepositoryError:
    """
    Wrap a backend exception.

    Args:
        context: What was being attempted, e.g. "Failed to fetch documents from users"
        error: The backend exception
        code: Override the derived code (the status is still derived from
            the backend exception)
    """
    store_code = store_error_code(error)
    return RepositoryError(
        f"{context}: {get_error_message(error)}",
        code or store_code,
        status_for_store_code(store_code),
    )
