"""
Application-layer exceptions.

These exceptions are shared by the infrastructure, application and API
layers. Every error carries a machine-readable ``code`` and the HTTP
``status_code`` the boundary layer should render it with.

Taxonomy:
- RepositoryError: a document store operation failed or found nothing
- ServiceError: business-rule violation or wrapped repository failure
- ValidationError: request payload failed schema rules
- AuthenticationError: token missing, invalid, or identity provider failure
- AuthorizationError: role/ownership check failed
"""

from typing import Optional

UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR"


class ApplicationError(Exception):
    """Base class for errors rendered into the uniform error envelope."""

    default_code: str = UNKNOWN_ERROR_CODE
    default_status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.status_code = status_code or self.default_status_code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code!r}, status_code={self.status_code})"
        )


class RepositoryError(ApplicationError):
    """Document store operation failed or returned not-found."""

    pass


class ServiceError(ApplicationError):
    """Business-rule violation or wrapped lower-layer failure."""

    pass


class ValidationError(ApplicationError):
    """Payload failed schema validation."""

    default_code = "VALIDATION_ERROR"
    default_status_code = 400


class AuthenticationError(ApplicationError):
    """Token missing, invalid, or rejected by the identity provider."""

    default_code = "AUTHENTICATION_ERROR"
    default_status_code = 401


class AuthorizationError(ApplicationError):
    """Requester lacks the role or ownership required by a route."""

    default_code = "AUTHORIZATION_ERROR"
    default_status_code = 403


def get_error_message(error: BaseException) -> str:
    """Extract a human-readable message from any exception."""
    if isinstance(error, ApplicationError):
        return error.message
    return str(error)


def get_error_code(error: BaseException) -> str:
    """Extract the error code, falling back to UNKNOWN_ERROR."""
    code = getattr(error, "code", None)
    if isinstance(code, str) and code:
        return code
    return UNKNOWN_ERROR_CODE


def get_error_status_code(error: BaseException, default: int = 500) -> int:
    """Extract the HTTP status carried by an application error."""
    if isinstance(error, ApplicationError):
        return error.status_code
    return default


def wrap_service_error(context: str, error: BaseException) -> ServiceError:
    """
    Rewrap a lower-layer failure as a ServiceError.

    The message becomes ``"<context>: <cause>"``; the cause's code and
    status code are carried through so a not-found stays a 404.
    """
    return ServiceError(
        f"{context}: {get_error_message(error)}",
        get_error_code(error),
        get_error_status_code(error),
    )
