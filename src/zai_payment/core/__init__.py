"""Core components for the Zai Payment SDK.

Logic shared between the sync and async token providers and clients.
"""

from __future__ import annotations

from .errors import ErrorFactory
from .http_executor import AsyncHTTPExecutor, SyncHTTPExecutor
from .token_ops import TokenOperations

__all__ = [
    "ErrorFactory",
    "TokenOperations",
    "SyncHTTPExecutor",
    "AsyncHTTPExecutor",
]
