"""OAuth2 client-credentials token providers.

A provider hands out ``"<type> <value>"`` authorization values backed by a
:class:`~zai_payment.auth.token_store.TokenStore`. The common path is a
lock-free store read; when the cached token is missing or expired, callers
serialize on an acquisition lock and re-check the store before fetching,
so N concurrent callers hitting an expired token produce one network call.
"""

from __future__ import annotations

import asyncio
import threading
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

import httpx

from ..config import EndpointRole
from ..core.errors import ErrorFactory
from ..core.token_ops import TOKEN_PATH, TokenOperations
from ..errors import AuthError
from ..http import create_async_http_client, create_http_client, request_timeout
from ..models import Token
from ..telemetry import get_logger, trace_operation
from .token_store import MemoryTokenStore, TokenStore

if TYPE_CHECKING:
    from ..config import ZaiConfig


class BearerTokenSource(Protocol):
    """Anything that can supply an Authorization header value."""

    def bearer_token(self) -> str:
        """Return ``"<type> <value>"`` for a currently valid token."""
        ...


class AsyncBearerTokenSource(Protocol):
    """Async counterpart of :class:`BearerTokenSource`."""

    async def bearer_token(self) -> str:
        """Return ``"<type> <value>"`` for a currently valid token."""
        ...


class _BaseTokenProvider:
    """Store access shared by the sync and async providers."""

    def __init__(self, config: ZaiConfig, store: TokenStore | None = None) -> None:
        self.config = config
        self._store = store if store is not None else MemoryTokenStore()
        self._ops = TokenOperations(config)
        self._logger = get_logger()

    def _cached_bearer(self) -> str | None:
        token = self._store.fetch()
        if token is not None and token.is_valid():
            return self._ops.format_bearer(token)
        return None

    def _publish(self, token: Token) -> str:
        self._store.write(token)
        self._logger.info(
            "Token acquired",
            token_type=token.type,
            expires_at=token.expires_at.isoformat(),
        )
        return self._ops.format_bearer(token)

    def _acquisition_failed(self, exc: httpx.HTTPError) -> AuthError:
        self._logger.warning("Token request failed", error=str(exc))
        return ErrorFactory.auth_error(f"Token request failed: {exc}")

    def clear_token(self) -> None:
        """Drop the cached token; the next call re-authenticates."""
        self._store.clear()
        self._logger.debug("Token cleared")

    def token_expiry(self) -> datetime | None:
        """Get the cached token's expiry, or None if nothing is cached."""
        token = self._store.fetch()
        return token.expires_at if token else None

    def token_type(self) -> str | None:
        """Get the cached token's scheme, or None if nothing is cached."""
        token = self._store.fetch()
        return token.type if token else None


class TokenProvider(_BaseTokenProvider):
    """Thread-safe client-credentials token provider.

    Args:
        config: SDK configuration supplying credentials, the auth endpoint
            and timeouts.
        store: Token store; defaults to a new :class:`MemoryTokenStore`.
        transport: Optional httpx transport for the token request.

    Example::

        provider = TokenProvider(ZaiConfig.from_env())
        headers = {"Authorization": provider.bearer_token()}
    """

    def __init__(
        self,
        config: ZaiConfig,
        store: TokenStore | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(config, store)
        self._transport = transport
        self._lock = threading.Lock()

    def bearer_token(self) -> str:
        """Get a valid Authorization value, acquiring a token if needed.

        Raises:
            AuthError: If the token request fails.
            ConfigurationError: If credentials are not configured.
        """
        cached = self._cached_bearer()
        if cached is not None:
            return cached

        with self._lock:
            # Another caller may have refreshed while we waited.
            cached = self._cached_bearer()
            if cached is not None:
                return cached

            return self._publish(self._request_token())

    def refresh_token(self) -> str:
        """Discard the cached token and acquire a new one."""
        self.clear_token()
        return self.bearer_token()

    def _request_token(self) -> Token:
        data = self._ops.build_client_credentials_request()

        with trace_operation(
            "token_request",
            attributes={"zai.environment": self.config.environment.value},
        ):
            try:
                with create_http_client(
                    self.config.base_url(EndpointRole.AUTH),
                    transport=self._transport,
                ) as client:
                    response = client.post(
                        TOKEN_PATH,
                        data=data,
                        headers=self._ops.build_token_request_headers(),
                        timeout=request_timeout(self.config),
                    )
            except httpx.HTTPError as e:
                raise self._acquisition_failed(e) from e

            body = self._ops.decode_token_response(response)
            return self._ops.parse_token_response(body, status_code=response.status_code)


class AsyncTokenProvider(_BaseTokenProvider):
    """Client-credentials token provider for tasks sharing one event loop.

    Store reads and writes stay synchronous; only acquisition awaits.
    """

    def __init__(
        self,
        config: ZaiConfig,
        store: TokenStore | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, store)
        self._transport = transport
        self._lock = asyncio.Lock()

    async def bearer_token(self) -> str:
        """Get a valid Authorization value, acquiring a token if needed."""
        cached = self._cached_bearer()
        if cached is not None:
            return cached

        async with self._lock:
            cached = self._cached_bearer()
            if cached is not None:
                return cached

            return self._publish(await self._request_token())

    async def refresh_token(self) -> str:
        """Discard the cached token and acquire a new one."""
        self.clear_token()
        return await self.bearer_token()

    async def _request_token(self) -> Token:
        data = self._ops.build_client_credentials_request()

        with trace_operation(
            "token_request",
            attributes={"zai.environment": self.config.environment.value},
        ):
            try:
                async with create_async_http_client(
                    self.config.base_url(EndpointRole.AUTH),
                    transport=self._transport,
                ) as client:
                    response = await client.post(
                        TOKEN_PATH,
                        data=data,
                        headers=self._ops.build_token_request_headers(),
                        timeout=request_timeout(self.config),
                    )
            except httpx.HTTPError as e:
                raise self._acquisition_failed(e) from e

            body = self._ops.decode_token_response(response)
            return self._ops.parse_token_response(body, status_code=response.status_code)
