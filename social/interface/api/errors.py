"""Translation of domain errors into JSON error responses.

Every error body has the shape ``{"error": "<message>"}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from social.domain.error import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)

INTERNAL_ERROR_MESSAGE = (
    "the server encountered a problem and could not process your request"
)


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(
        status_code=status_code, content={"error": message}, headers=headers
    )


def _log_attributes(request: Request, exc: Exception) -> dict[str, str]:
    return {
        "method": request.method,
        "path": request.url.path,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    """Map a domain error onto its status code and client message."""
    attributes = _log_attributes(request, exc)

    if isinstance(exc, ValidationError):
        logfire.warn("Bad request", **attributes)
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    if isinstance(exc, AuthenticationError):
        logfire.warn("Unauthorized", reason=exc.reason, **attributes)
        return error_response(status.HTTP_401_UNAUTHORIZED, "unauthorized")

    if isinstance(exc, AuthorizationError):
        logfire.warn("Forbidden", required_role=exc.required_role, **attributes)
        return error_response(status.HTTP_403_FORBIDDEN, "forbidden")

    if isinstance(exc, NotFoundError):
        logfire.warn("Not found", **attributes)
        return error_response(status.HTTP_404_NOT_FOUND, "not found")

    if isinstance(exc, ConflictError):
        logfire.warn("Conflict", **attributes)
        return error_response(status.HTTP_409_CONFLICT, str(exc))

    if isinstance(exc, RateLimitError):
        logfire.warn("Rate limit exceeded", **attributes)
        return error_response(
            status.HTTP_429_TOO_MANY_REQUESTS,
            str(exc),
            headers={"Retry-After": str(exc.retry_after)},
        )

    return await handle_unexpected_error(request, exc)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and answer with a generic 500."""
    logfire.error("Internal error", **_log_attributes(request, exc))
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def handle_request_validation_error(
    request: Request, exc: Exception
) -> JSONResponse:
    """Malformed bodies, query values and path parameters are 400s."""
    message = "invalid request"
    if isinstance(exc, RequestValidationError) and exc.errors():
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        message = f"{field}: {error['msg']}"

    logfire.warn("Request validation failed", **_log_attributes(request, exc))
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_exception(request: Request, exc: Exception) -> JSONResponse:
    """Wrap framework HTTP errors (unknown routes, basic auth) in the envelope."""
    if not isinstance(exc, StarletteHTTPException):
        return await handle_unexpected_error(request, exc)

    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
