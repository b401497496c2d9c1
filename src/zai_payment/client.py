"""Zai API client (sync).

The resource layer (users, items, webhooks, ...) is built on the four
verbs exposed here. Every call fetches the Authorization value from the
token provider, so an expired token is replaced transparently.
"""

from __future__ import annotations

import threading
from typing import Any

import httpx

from .auth.token_provider import BearerTokenSource
from .config import EndpointRole, ZaiConfig, resolve_endpoint_role
from .core.http_executor import SyncHTTPExecutor
from .http import JSON_HEADERS, create_http_client, request_timeout
from .response import Response


class Client:
    """Synchronous Zai API client.

    Args:
        config: SDK configuration (environment and timeouts).
        token_provider: Source of Authorization header values, usually a
            :class:`~zai_payment.auth.TokenProvider` shared across clients.
        base_endpoint: Endpoint role to address; defaults to ``va_base``.
        transport: Optional httpx transport.

    Raises:
        ConfigurationError: If ``base_endpoint`` is not a known role.

    Example::

        provider = TokenProvider(config)
        with Client(config, provider, base_endpoint="core_base") as client:
            users = client.get("/users", params={"limit": 10}).data
    """

    def __init__(
        self,
        config: ZaiConfig,
        token_provider: BearerTokenSource,
        base_endpoint: EndpointRole | str | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config
        self.token_provider = token_provider
        self.base_endpoint = resolve_endpoint_role(base_endpoint)
        self._transport = transport
        self._http: httpx.Client | None = None
        self._executor: SyncHTTPExecutor | None = None
        self._http_lock = threading.Lock()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        """Base URL of the selected endpoint role."""
        return self.config.base_url(self.base_endpoint)

    def close(self) -> None:
        """Close the HTTP client."""
        with self._http_lock:
            if self._http is not None:
                self._http.close()
                self._http = None
                self._executor = None

    def get(self, path: str, params: dict[str, Any] | None = None) -> Response:
        """Perform a GET request with optional query parameters."""
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> Response:
        """Perform a POST request with a JSON body."""
        return self._request("POST", path, body=body)

    def patch(self, path: str, body: Any = None) -> Response:
        """Perform a PATCH request with a JSON body."""
        return self._request("PATCH", path, body=body)

    def delete(self, path: str) -> Response:
        """Perform a DELETE request."""
        return self._request("DELETE", path)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Response:
        headers = {"Authorization": self.token_provider.bearer_token(), **JSON_HEADERS}
        kwargs = build_request_kwargs(self.config, headers, params=params, body=body)
        raw = self._get_executor().execute(method, path, **kwargs)
        return Response(raw)

    def _get_executor(self) -> SyncHTTPExecutor:
        executor = self._executor
        if executor is not None:
            return executor

        with self._http_lock:
            if self._executor is None:
                self._http = create_http_client(self.base_url, transport=self._transport)
                self._executor = SyncHTTPExecutor(self._http)
            return self._executor


def build_request_kwargs(
    config: ZaiConfig,
    headers: dict[str, str],
    *,
    params: dict[str, Any] | None = None,
    body: Any = None,
) -> dict[str, Any]:
    """Assemble httpx request arguments; empty params and bodies are omitted."""
    kwargs: dict[str, Any] = {
        "headers": headers,
        "timeout": request_timeout(config),
    }
    if params:
        kwargs["params"] = params
    if body:
        kwargs["json"] = body
    return kwargs
