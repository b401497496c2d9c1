"""HTTP client utilities for the Zai Payment SDK.

Builds httpx connections bound to a base URL and the timeout objects
applied to each call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from .telemetry import SDK_NAME, SDK_VERSION

if TYPE_CHECKING:
    from .config import ZaiConfig

USER_AGENT = f"{SDK_NAME}/{SDK_VERSION} Python"

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def request_timeout(config: ZaiConfig) -> httpx.Timeout:
    """Build the timeout for a single call from the current config.

    Args:
        config: SDK configuration.

    Returns:
        httpx.Timeout with connect and read limits split out.
    """
    return httpx.Timeout(
        config.timeout,
        connect=config.open_timeout,
        read=config.read_timeout,
    )


def create_http_client(
    base_url: str,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create sync HTTP client bound to an API base URL.

    Args:
        base_url: Base URL for relative request paths.
        transport: Optional transport override.

    Returns:
        Configured httpx.Client.
    """
    return httpx.Client(
        base_url=base_url,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=False,
        transport=transport,
    )


def create_async_http_client(
    base_url: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create async HTTP client bound to an API base URL.

    Args:
        base_url: Base URL for relative request paths.
        transport: Optional transport override.

    Returns:
        Configured httpx.AsyncClient.
    """
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=False,
        transport=transport,
    )
