"""Centralized error factory for the Zai Payment SDK.

Maps HTTP statuses and httpx transport failures onto the SDK error
hierarchy so that the sync and async paths classify failures the same
way.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from ..errors import (
    ApiError,
    AuthError,
    BadRequestError,
    ConnectionError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    UnauthorizedError,
    ValidationError,
    ZaiPaymentError,
)

STATUS_ERRORS: Mapping[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    422: ValidationError,
    429: RateLimitError,
}

# Failures caused by the request itself rather than the network.
# httpx.InvalidURL is not an httpx.HTTPError subclass.
MALFORMED_REQUEST_ERRORS: tuple[type[Exception], ...] = (
    httpx.InvalidURL,
    httpx.UnsupportedProtocol,
    httpx.LocalProtocolError,
)


def error_class_for_status(status: int) -> type[ApiError]:
    """Get the error class raised for a failed HTTP status."""
    if 500 <= status <= 599:
        return ServerError
    return STATUS_ERRORS.get(status, ApiError)


def format_errors(errors: Any) -> str | None:
    """Render an ``errors`` payload as a single line."""
    if errors is None:
        return None
    if isinstance(errors, list):
        return ", ".join(str(e) for e in errors)
    if isinstance(errors, Mapping):
        return ", ".join(f"{key}: {value}" for key, value in errors.items())
    return str(errors)


def extract_error_message(status: int, body: Any) -> str:
    """Pull a human-readable message out of an error response body."""
    if isinstance(body, Mapping):
        for candidate in (body.get("error"), body.get("message"), format_errors(body.get("errors"))):
            if candidate is not None:
                return str(candidate)
        return f"HTTP {status}"
    if body:
        return f"HTTP {status}: {body}"
    return f"HTTP {status}"


def _parse_retry_after(value: str | None) -> int | None:
    if value and value.strip().isdigit():
        return int(value.strip())
    return None


class ErrorFactory:
    """Centralized error creation with consistent structure."""

    @staticmethod
    def from_status(
        status: int,
        body: Any,
        headers: Mapping[str, str] | None = None,
    ) -> ApiError:
        """Create SDK error for a non-2xx HTTP response.

        Args:
            status: HTTP status code.
            body: Decoded response body.
            headers: Response headers.

        Returns:
            Appropriate ApiError subclass.
        """
        message = extract_error_message(status, body)
        details = {"body": body} if body is not None else None
        error_class = error_class_for_status(status)

        if error_class is RateLimitError:
            retry_after = _parse_retry_after((headers or {}).get("Retry-After"))
            return RateLimitError(
                message,
                retry_after=retry_after,
                status_code=status,
                details=details,
            )

        return error_class(message, status_code=status, details=details)

    @staticmethod
    def from_transport_error(exc: Exception) -> ZaiPaymentError:
        """Create SDK error from an httpx transport failure.

        Timeouts are checked before connection failures: a connect timeout
        is a deadline, not a refused connection.

        Args:
            exc: Original httpx exception (HTTPError or InvalidURL).

        Returns:
            TimeoutError, ConnectionError or ApiError.
        """
        if isinstance(exc, httpx.TimeoutException):
            return TimeoutError(f"Request timed out: {exc}")
        if isinstance(exc, httpx.ConnectError):
            return ConnectionError(f"Connection failed: {exc}")
        if isinstance(exc, MALFORMED_REQUEST_ERRORS):
            return ApiError(f"Client error: {exc}")
        return ApiError(f"Request failed: {exc}")

    @staticmethod
    def auth_error(message: str, *, status_code: int | None = None) -> AuthError:
        """Create a token acquisition error."""
        return AuthError(message, status_code=status_code)
