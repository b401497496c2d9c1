"""Token acquisition and caching for the Zai Payment SDK."""

from .token_provider import (
    AsyncBearerTokenSource,
    AsyncTokenProvider,
    BearerTokenSource,
    TokenProvider,
)
from .token_store import MemoryTokenStore, TokenStore

__all__ = [
    "AsyncBearerTokenSource",
    "AsyncTokenProvider",
    "BearerTokenSource",
    "MemoryTokenStore",
    "TokenProvider",
    "TokenStore",
]
