"""Centralized HTTP executors for the Zai Payment SDK.

Each executor issues exactly one request per call and translates httpx
transport failures into SDK errors. There is no retry: callers decide
whether a failure is worth repeating.
"""

from __future__ import annotations

from typing import Any

import httpx

from ..telemetry import get_logger, trace_operation
from .errors import ErrorFactory

TRANSPORT_ERRORS: tuple[type[Exception], ...] = (httpx.HTTPError, httpx.InvalidURL)


class SyncHTTPExecutor:
    """Synchronous single-shot HTTP executor."""

    def __init__(self, client: httpx.Client) -> None:
        """Initialize sync HTTP executor.

        Args:
            client: HTTP client.
        """
        self._client = client
        self._logger = get_logger()

    def execute(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Execute HTTP request.

        Args:
            method: HTTP method.
            url: Request URL or path relative to the client's base URL.
            **kwargs: Additional request arguments.

        Returns:
            HTTP response, whatever its status.

        Raises:
            TimeoutError: On any connect, read, write or pool timeout.
            ConnectionError: If the connection could not be established.
            ApiError: On any other transport failure.
        """
        with trace_operation(
            "http_request",
            attributes={"http.method": method, "http.url": url},
        ) as span:
            try:
                response = self._client.request(method, url, **kwargs)
            except TRANSPORT_ERRORS as e:
                error = ErrorFactory.from_transport_error(e)
                self._log_failure(method, url, error)
                raise error from e

            span.set_attribute("http.status_code", response.status_code)
            return response

    def _log_failure(self, method: str, url: str, error: Exception) -> None:
        """Log failed request."""
        self._logger.warning(
            "Request failed",
            method=method,
            url=url,
            error_type=type(error).__name__,
            error=str(error),
        )


class AsyncHTTPExecutor:
    """Asynchronous single-shot HTTP executor."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize async HTTP executor.

        Args:
            client: Async HTTP client.
        """
        self._client = client
        self._logger = get_logger()

    async def execute(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Execute async HTTP request.

        Args:
            method: HTTP method.
            url: Request URL or path relative to the client's base URL.
            **kwargs: Additional request arguments.

        Returns:
            HTTP response, whatever its status.

        Raises:
            TimeoutError: On any connect, read, write or pool timeout.
            ConnectionError: If the connection could not be established.
            ApiError: On any other transport failure.
        """
        with trace_operation(
            "http_request",
            attributes={"http.method": method, "http.url": url},
        ) as span:
            try:
                response = await self._client.request(method, url, **kwargs)
            except TRANSPORT_ERRORS as e:
                error = ErrorFactory.from_transport_error(e)
                self._log_failure(method, url, error)
                raise error from e

            span.set_attribute("http.status_code", response.status_code)
            return response

    def _log_failure(self, method: str, url: str, error: Exception) -> None:
        """Log failed request."""
        self._logger.warning(
            "Request failed",
            method=method,
            url=url,
            error_type=type(error).__name__,
            error=str(error),
        )
