"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or storage details are exposed to clients.
All error responses share the ErrorResponse shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.users.errors import (
    DuplicateEmailError,
    InternalError,
    UserDomainError,
    UserNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500

INTERNAL_MESSAGE = "Internal server error"


def _error_response(
    status_code: int,
    error: str,
    detail: str | None = None,
    field: str | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str] = {"error": error}
    if detail:
        body["detail"] = detail
    if field:
        body["field"] = field
    return JSONResponse(status_code=status_code, content=body)


def _describe_request_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI's validation errors into one readable line."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid')}")
    return "; ".join(parts) or "Malformed request"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed path parameters and request bodies."""
        detail = _describe_request_errors(exc)
        logger.warning("Rejected malformed request: %s", detail)
        return _error_response(HTTP_400, "invalid_request", detail)

    @app.exception_handler(ValidationError)
    async def handle_validation(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle business-rule validation failures."""
        logger.warning("Validation failed on field %s", exc.field)
        return _error_response(HTTP_400, "validation_error", exc.reason, exc.field)

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle missing user errors."""
        logger.warning("User not found: %s", exc.user_id)
        return _error_response(HTTP_404, "not_found", exc.message)

    @app.exception_handler(DuplicateEmailError)
    async def handle_duplicate_email(
        _request: Request, exc: DuplicateEmailError
    ) -> JSONResponse:
        """Handle email uniqueness conflicts."""
        logger.warning("Duplicate email rejected")
        return _error_response(HTTP_409, "conflict", exc.message)

    @app.exception_handler(InternalError)
    async def handle_internal(
        _request: Request, _exc: InternalError
    ) -> JSONResponse:
        """Handle storage failures without leaking their cause.

        The repository adapter has already logged the failure.
        """
        return _error_response(HTTP_500, "internal_error", INTERNAL_MESSAGE)

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled users domain errors."""
        logger.error("Unhandled users domain error: %s", exc.message)
        return _error_response(HTTP_500, "internal_error", INTERNAL_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "internal_error", INTERNAL_MESSAGE)
