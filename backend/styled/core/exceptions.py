"""
Error types raised by the Styled routers and helpers, and the FastAPI handlers
that turn them into the JSON error body:

    {"success": false, "error_code": "...", "message": "...", "details": {...}}

Each subclass fixes its HTTP status and error code; callers only supply the
message (and occasionally details).
"""
import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class StyledException(Exception):
    """Base for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(StyledException):
    """A row that does not exist or belongs to someone else."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Any = None):
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, {"resource": resource, "id": resource_id})


class ValidationError(StyledException):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, {"field": field} if field else None)


class AuthenticationError(StyledException):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class RateLimitError(StyledException):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    error_code = "RATE_LIMIT_ERROR"

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message)


class ExternalServiceError(StyledException):
    """Gemini, Google Calendar, Cloudinary or an image host failed us."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "EXTERNAL_SERVICE_ERROR"

    def __init__(self, service: str, message: str):
        super().__init__(f"{service} service error: {message}", {"service": service})


class AIResponseError(StyledException):
    """The model answered, but not with the JSON shape we asked for."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "AI_RESPONSE_ERROR"

    def __init__(self, message: str = "AI response could not be parsed"):
        super().__init__(message)


class ErrorResponse(BaseModel):
    success: bool = False
    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None


def _error_json(status_code: int, error_code: str, message: str,
                details: Optional[Dict[str, Any]] = None, headers=None) -> JSONResponse:
    body = ErrorResponse(error_code=error_code, message=message, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True), headers=headers)


# Status codes the plain HTTPException handler gives a named error code
HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    422: "VALIDATION_ERROR",
}


async def styled_exception_handler(request: Request, exc: StyledException) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.info
    log(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
    return _error_json(exc.status_code, exc.error_code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Framework-raised errors (unknown routes, wrong methods) in the same body shape."""
    if exc.status_code >= 500:
        error_code = "SERVER_ERROR"
    else:
        error_code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return _error_json(exc.status_code, error_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return await styled_exception_handler(request, RateLimitError(f"Rate limit exceeded: {exc.detail}"))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort; internals are only exposed in development."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}: {exc}",
        exc_info=True,
        extra={"path": request.url.path, "method": request.method}
    )

    from styled.config import settings
    if settings.is_development:
        return _error_json(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", str(exc),
            {"traceback": traceback.format_exc()},
        )
    return _error_json(status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", "An unexpected error occurred")
