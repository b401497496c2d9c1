"""Zai Payment Python SDK."""

from .async_client import AsyncClient
from .auth import AsyncTokenProvider, MemoryTokenStore, TokenProvider, TokenStore
from .client import Client
from .config import EndpointRole, Environment, TelemetryConfig, ZaiConfig
from .errors import (
    ApiError,
    AuthError,
    BadRequestError,
    ConfigurationError,
    ConnectionError,
    ErrorCode,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    UnauthorizedError,
    ValidationError,
    ZaiPaymentError,
)
from .models import Token
from .response import Response
from .telemetry import configure_telemetry

__all__ = [
    "ApiError",
    "AsyncClient",
    "AsyncTokenProvider",
    "AuthError",
    "BadRequestError",
    "Client",
    "ConfigurationError",
    "ConnectionError",
    "EndpointRole",
    "Environment",
    "ErrorCode",
    "ForbiddenError",
    "MemoryTokenStore",
    "NotFoundError",
    "RateLimitError",
    "Response",
    "ServerError",
    "TelemetryConfig",
    "TimeoutError",
    "Token",
    "TokenProvider",
    "TokenStore",
    "UnauthorizedError",
    "ValidationError",
    "ZaiConfig",
    "ZaiPaymentError",
    "configure_telemetry",
]

__version__ = "0.1.0"
