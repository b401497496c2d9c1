"""Fake HTTP endpoints shared by the test suite."""

from __future__ import annotations

import asyncio
import threading
import time
from typing import Any
from urllib.parse import parse_qs

import httpx

PRELIVE_TOKEN_URL = "https://au-0000.sandbox.auth.assemblypay.com/tokens"


class TokenEndpoint:
    """Token endpoint stand-in that counts requests.

    Serves ``payloads`` in order and keeps repeating the last one.
    """

    def __init__(
        self,
        *payloads: Any,
        status_code: int = 200,
        delay: float = 0.0,
    ) -> None:
        self.payloads = list(payloads) or [{"access_token": "abc", "expires_in": 3600}]
        self.status_code = status_code
        self.delay = delay
        self.requests: list[httpx.Request] = []
        self._lock = threading.Lock()

    @property
    def calls(self) -> int:
        return len(self.requests)

    def form(self, index: int = -1) -> dict[str, str]:
        """Decode the form body of a recorded request."""
        parsed = parse_qs(self.requests[index].content.decode())
        return {key: values[0] for key, values in parsed.items()}

    def _next_payload(self, request: httpx.Request) -> Any:
        with self._lock:
            self.requests.append(request)
            index = min(len(self.requests), len(self.payloads)) - 1
            return self.payloads[index]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = self._next_payload(request)
        if self.delay:
            time.sleep(self.delay)
        return httpx.Response(self.status_code, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class AsyncTokenEndpoint(TokenEndpoint):
    """Async variant; only usable with httpx.AsyncClient."""

    async def __call__(self, request: httpx.Request) -> httpx.Response:  # type: ignore[override]
        payload = self._next_payload(request)
        await asyncio.sleep(self.delay)
        return httpx.Response(self.status_code, json=payload)


class StaticTokenSource:
    """Bearer source returning a fixed value and counting calls."""

    def __init__(self, value: str = "Bearer abc") -> None:
        self.value = value
        self.calls = 0

    def bearer_token(self) -> str:
        self.calls += 1
        return self.value


class AsyncStaticTokenSource(StaticTokenSource):
    async def bearer_token(self) -> str:  # type: ignore[override]
        self.calls += 1
        return self.value


def raising_transport(exc_type: type[Exception], message: str = "boom") -> httpx.MockTransport:
    """Transport whose every request fails with ``exc_type``."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type(message, request=request)

    return httpx.MockTransport(handler)
