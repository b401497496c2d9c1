"""Zai API client (async)."""

from __future__ import annotations

from typing import Any

import httpx

from .auth.token_provider import AsyncBearerTokenSource
from .client import build_request_kwargs
from .config import EndpointRole, ZaiConfig, resolve_endpoint_role
from .core.http_executor import AsyncHTTPExecutor
from .http import JSON_HEADERS, create_async_http_client
from .response import Response


class AsyncClient:
    """Asynchronous Zai API client.

    Same surface as :class:`~zai_payment.client.Client`, backed by
    ``httpx.AsyncClient`` and an
    :class:`~zai_payment.auth.AsyncTokenProvider`.
    """

    def __init__(
        self,
        config: ZaiConfig,
        token_provider: AsyncBearerTokenSource,
        base_endpoint: EndpointRole | str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self.token_provider = token_provider
        self.base_endpoint = resolve_endpoint_role(base_endpoint)
        self._transport = transport
        self._http: httpx.AsyncClient | None = None
        self._executor: AsyncHTTPExecutor | None = None

    async def __aenter__(self) -> AsyncClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    @property
    def base_url(self) -> str:
        """Base URL of the selected endpoint role."""
        return self.config.base_url(self.base_endpoint)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None
            self._executor = None

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Response:
        """Perform a GET request with optional query parameters."""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Response:
        """Perform a POST request with a JSON body."""
        return await self._request("POST", path, body=body)

    async def patch(self, path: str, body: Any = None) -> Response:
        """Perform a PATCH request with a JSON body."""
        return await self._request("PATCH", path, body=body)

    async def delete(self, path: str) -> Response:
        """Perform a DELETE request."""
        return await self._request("DELETE", path)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Response:
        headers = {"Authorization": await self.token_provider.bearer_token(), **JSON_HEADERS}
        kwargs = build_request_kwargs(self.config, headers, params=params, body=body)
        raw = await self._get_executor().execute(method, path, **kwargs)
        return Response(raw)

    def _get_executor(self) -> AsyncHTTPExecutor:
        # Synchronous check-and-set; tasks on one event loop cannot interleave here.
        if self._executor is None:
            self._http = create_async_http_client(self.base_url, transport=self._transport)
            self._executor = AsyncHTTPExecutor(self._http)
        return self._executor
