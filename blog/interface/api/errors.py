"""Exception handlers mapping errors to the JSON error envelope.

Every error response has the shape ``{"success": false, "message": ...}``
with an ``errors`` list when individual field violations are known.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog.domain.error import (
    AuthenticationError,
    DomainError,
    ForbiddenError,
    InvalidIdentifierError,
    NotFoundError,
    ValidationError,
)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Checked in order; the first matching class wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidIdentifierError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def error_response(
    status_code: int, message: str, errors: list[str] | None = None
) -> JSONResponse:
    """Build an error envelope response."""
    content: dict = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown kinds are internal errors."""
    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logfire.error(
            "Unclassified domain error", path=request.url.path, error=str(exc)
        )
        return error_response(status_code, INTERNAL_ERROR_MESSAGE)

    logfire.info(
        "Request rejected",
        path=request.url.path,
        status=status_code,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    errors = exc.errors if isinstance(exc, ValidationError) else None
    return error_response(status_code, str(exc), errors)


_REQUEST_LOCATIONS = ("body", "query", "path", "header")


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = []
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        # Only the leading request part is dropped
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        location = ".".join(str(part) for part in loc)
        message = error.get("msg", "Invalid value").removeprefix("Value error, ")
        errors.append(f"{location}: {message}" if location else message)
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation error", errors)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unhandled error", path=request.url.path, error_type=type(exc).__name__
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the app."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
