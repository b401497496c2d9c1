"""
Shared test fixtures for Zai Payment SDK tests.

Provides configuration fixtures and sample token endpoint payloads.
"""

import pytest

from zai_payment.config import Environment, TelemetryConfig, ZaiConfig


@pytest.fixture
def base_config() -> ZaiConfig:
    """Provide a prelive SDK configuration with credentials."""
    return ZaiConfig(
        client_id="test-client-id",
        client_secret="test-client-secret",
        scope="test-scope",
    )


@pytest.fixture
def production_config(base_config: ZaiConfig) -> ZaiConfig:
    """Provide the same credentials against production."""
    return base_config.with_overrides(environment=Environment.PRODUCTION)


@pytest.fixture
def telemetry_config() -> TelemetryConfig:
    """Provide telemetry configuration for testing."""
    return TelemetryConfig(
        enabled=False,
        service_name="test-sdk",
    )


@pytest.fixture
def sample_token_response() -> dict:
    """Provide a sample token endpoint response."""
    return {
        "access_token": "abc",
        "expires_in": 7200,
        "token_type": "Bearer",
    }
