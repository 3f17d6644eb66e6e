"""
Exception handlers rendering every error into the uniform envelope.

- ApplicationError subclasses keep their own status code and code
- Request validation failures become 400 VALIDATION_ERROR, listing every
  violated rule
- Starlette HTTPExceptions (404 for unknown routes, 405, ...) keep their
  status with code ``HTTP_<status>``
- Anything else is a 500 UNKNOWN_ERROR with a generic message; the
  exception itself is logged and reported to Sentry
"""

import logging

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.schemas.responses import error_response
from application.exceptions import UNKNOWN_ERROR_CODE, ApplicationError, ValidationError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def _log(request: Request, status_code: int, code: str, message: str) -> None:
    line = f"{request.method} {request.url.path} -> {status_code} {code}: {message}"
    if status_code >= 500:
        logger.error(line)
    else:
        logger.warning(line)


def _format_location(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts)


def validation_message(exc: RequestValidationError) -> str:
    """``"Validation error: <rule>, <rule>, ..."`` for every failed rule."""
    rules = []
    for error in exc.errors():
        location = _format_location(error.get("loc", ()))
        rules.append(f"{location}: {error['msg']}" if location else error["msg"])
    return f"Validation error: {', '.join(rules)}"


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    _log(request, exc.status_code, exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, exc.code),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error = ValidationError(validation_message(exc))
    return await application_error_handler(request, error)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    code = f"HTTP_{exc.status_code}"
    _log(request, exc.status_code, code, str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail), code),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    sentry_sdk.capture_exception(exc)
    return JSONResponse(
        status_code=500,
        content=error_response(UNEXPECTED_ERROR_MESSAGE, UNKNOWN_ERROR_CODE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
