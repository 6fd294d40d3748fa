"""
Cross-cutting pieces shared by the routers: error types and handlers,
bearer-token auth, logging setup and the rate limiter.
"""
from .exceptions import (
    StyledException,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    RateLimitError,
    ExternalServiceError,
    AIResponseError,
    ErrorResponse,
    styled_exception_handler,
    http_exception_handler,
    rate_limit_exception_handler,
    generic_exception_handler,
)

__all__ = [
    "StyledException",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "RateLimitError",
    "ExternalServiceError",
    "AIResponseError",
    "ErrorResponse",
    "styled_exception_handler",
    "http_exception_handler",
    "rate_limit_exception_handler",
    "generic_exception_handler",
]
