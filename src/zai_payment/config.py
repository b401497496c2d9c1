"""Configuration for the Zai Payment SDK.

Uses Pydantic v2 for validation with sensible defaults. The endpoint
table is fixed per environment; the SDK only ever reads the resolved
base URL for an endpoint role.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from .errors import ConfigurationError


class Environment(StrEnum):
    """Zai deployment environments."""

    PRELIVE = "prelive"
    PRODUCTION = "production"


class EndpointRole(StrEnum):
    """Logical API surfaces addressed by the SDK."""

    CORE = "core_base"
    VIRTUAL_ACCOUNT = "va_base"
    AUTH = "auth_base"


DEFAULT_ENDPOINT_ROLE = EndpointRole.VIRTUAL_ACCOUNT

_ENDPOINTS: Mapping[Environment, Mapping[EndpointRole, str]] = MappingProxyType(
    {
        Environment.PRELIVE: MappingProxyType(
            {
                EndpointRole.CORE: "https://test.api.promisepay.com",
                EndpointRole.VIRTUAL_ACCOUNT: "https://sandbox.au-0000.api.assemblypay.com",
                EndpointRole.AUTH: "https://au-0000.sandbox.auth.assemblypay.com",
            }
        ),
        Environment.PRODUCTION: MappingProxyType(
            {
                EndpointRole.CORE: "https://au-0000.api.assemblypay.com",
                EndpointRole.VIRTUAL_ACCOUNT: "https://secure.api.promisepay.com",
                EndpointRole.AUTH: "https://au-0000.auth.assemblypay.com",
            }
        ),
    }
)


def resolve_endpoint_role(role: EndpointRole | str | None) -> EndpointRole:
    """Coerce a role name to an EndpointRole, defaulting to ``va_base``."""
    if role is None:
        return DEFAULT_ENDPOINT_ROLE
    try:
        return EndpointRole(role)
    except ValueError:
        valid = ", ".join(r.value for r in EndpointRole)
        msg = f"Unknown endpoint role: {role}. Valid roles: {valid}"
        raise ConfigurationError(msg, field="base_endpoint") from None


class TelemetryConfig(BaseModel):
    """Structured logging and tracing configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    service_name: str = "zai-payment-sdk"
    log_level: str = "INFO"


class ZaiConfig(BaseModel):
    """Main configuration for the Zai Payment SDK."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    environment: Environment = Environment.PRELIVE

    # Client credentials
    client_id: str | None = None
    client_secret: SecretStr | None = None
    scope: str | None = None

    # HTTP settings (seconds)
    timeout: Annotated[float, Field(gt=0, le=300)] = 30.0
    open_timeout: Annotated[float, Field(gt=0, le=60)] = 10.0
    read_timeout: Annotated[float, Field(gt=0, le=300)] = 30.0

    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    def endpoints(self) -> Mapping[EndpointRole, str]:
        """Get the endpoint role to base URL mapping for the environment."""
        return _ENDPOINTS[self.environment]

    def base_url(self, role: EndpointRole | str | None = None) -> str:
        """Get the base URL for an endpoint role."""
        return self.endpoints()[resolve_endpoint_role(role)]

    @property
    def webhook_base_endpoint(self) -> EndpointRole:
        """Endpoint role serving webhooks: core in production, VA in prelive."""
        if self.environment is Environment.PRODUCTION:
            return EndpointRole.CORE
        return EndpointRole.VIRTUAL_ACCOUNT

    def validate_credentials(self) -> tuple[str, str, str]:
        """Check that everything needed for token acquisition is configured.

        Returns:
            ``(client_id, client_secret, scope)`` with the secret unwrapped.

        Raises:
            ConfigurationError: Naming the first missing field.
        """
        if not self.client_id:
            raise ConfigurationError("client_id is required", field="client_id")
        secret = self.client_secret.get_secret_value() if self.client_secret is not None else ""
        if not secret:
            raise ConfigurationError("client_secret is required", field="client_secret")
        if not self.scope:
            raise ConfigurationError("scope is required", field="scope")
        return self.client_id, secret, self.scope

    def with_overrides(self, **kwargs: Any) -> Self:
        """Create new config with overridden values."""
        data = self.model_dump()
        if self.client_secret is not None:
            data["client_secret"] = self.client_secret.get_secret_value()
        data.update(kwargs)
        return self.__class__(**data)

    @classmethod
    def from_env(cls, prefix: str = "ZAI_") -> Self:
        """Create config from environment variables."""
        import os

        def get_env(key: str, default: Any = None) -> Any:
            return os.environ.get(f"{prefix}{key}", default)

        raw_env = get_env("ENVIRONMENT", Environment.PRELIVE.value)
        try:
            environment = Environment(raw_env.strip().lower())
        except ValueError:
            msg = f"Unknown environment: {raw_env}"
            raise ConfigurationError(msg, field="environment") from None

        return cls(
            environment=environment,
            client_id=get_env("CLIENT_ID"),
            client_secret=get_env("CLIENT_SECRET"),
            scope=get_env("SCOPE"),
            timeout=float(get_env("TIMEOUT", "30")),
            open_timeout=float(get_env("OPEN_TIMEOUT", "10")),
            read_timeout=float(get_env("READ_TIMEOUT", "30")),
        )
