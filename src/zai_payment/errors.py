"""Error classes for the Zai Payment SDK.

Implements a structured error hierarchy with error codes and details for
logging. Callers are expected to branch on the error class: retry on
rate limiting, server errors, timeouts and connection failures, surface
validation messages to end users, and treat authentication and
configuration errors as fatal.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the Zai Payment SDK."""

    # Authentication / configuration errors (1xxx)
    AUTH_FAILED = "AUTH_1001"
    INVALID_CONFIG = "CFG_1002"

    # Transport errors (3xxx)
    TIMEOUT_ERROR = "NET_3001"
    CONNECTION_ERROR = "NET_3002"

    # API errors (4xxx)
    API_ERROR = "API_4000"
    BAD_REQUEST = "API_4001"
    UNAUTHORIZED = "API_4002"
    FORBIDDEN = "API_4003"
    NOT_FOUND = "API_4004"
    VALIDATION_ERROR = "API_4005"
    RATE_LIMITED = "API_4006"

    # Server errors (5xxx)
    SERVER_ERROR = "SRV_5001"


class ZaiPaymentError(Exception):
    """Base error for the Zai Payment SDK with structured error information."""

    code: ErrorCode = ErrorCode.API_ERROR
    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code if isinstance(code, str) else code.value
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error": self.message,
            "code": str(self.code),
            "status_code": self.status_code,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={str(self.code)!r}, message={self.message!r})"


class AuthError(ZaiPaymentError):
    """Credential acquisition failed."""

    code = ErrorCode.AUTH_FAILED


class ConfigurationError(ZaiPaymentError):
    """Invalid or missing SDK configuration."""

    code = ErrorCode.INVALID_CONFIG

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class TimeoutError(ZaiPaymentError):
    """Request timed out."""

    code = ErrorCode.TIMEOUT_ERROR
    retryable = True


class ConnectionError(ZaiPaymentError):
    """Connection to the API could not be established."""

    code = ErrorCode.CONNECTION_ERROR
    retryable = True


class ApiError(ZaiPaymentError):
    """The API rejected the request, or the request could not be sent."""

    code = ErrorCode.API_ERROR


class BadRequestError(ApiError):
    """HTTP 400."""

    code = ErrorCode.BAD_REQUEST


class UnauthorizedError(ApiError):
    """HTTP 401."""

    code = ErrorCode.UNAUTHORIZED


class ForbiddenError(ApiError):
    """HTTP 403."""

    code = ErrorCode.FORBIDDEN


class NotFoundError(ApiError):
    """HTTP 404."""

    code = ErrorCode.NOT_FOUND


class ValidationError(ApiError):
    """HTTP 422, the request body failed validation."""

    code = ErrorCode.VALIDATION_ERROR


class RateLimitError(ApiError):
    """HTTP 429, rate limit exceeded."""

    code = ErrorCode.RATE_LIMITED
    retryable = True

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after: int | None = None,
        status_code: int | None = 429,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = dict(details or {})
        if retry_after is not None:
            merged["retry_after"] = retry_after
        super().__init__(message, status_code=status_code, details=merged)
        self.retry_after = retry_after


class ServerError(ApiError):
    """HTTP 5xx, server-side error."""

    code = ErrorCode.SERVER_ERROR
    retryable = True
