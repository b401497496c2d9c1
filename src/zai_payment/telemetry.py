"""Structured logging and tracing for the Zai Payment SDK.

The SDK logs token lifecycle events (type and expiry only) and request
failures (method, path and error kind). :func:`configure_telemetry`
installs a JSON structlog pipeline whose first step is
:func:`redact_secrets`, and :func:`trace_operation` applies the same key
list to span attributes, so client secrets and bearer values bound by a
caller never reach a sink.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

if TYPE_CHECKING:
    from collections.abc import Generator, MutableMapping

    from .config import TelemetryConfig

SDK_NAME = "zai-payment-sdk"
SDK_VERSION = "0.1.0"

REDACTED = "[REDACTED]"

# Compared case-insensitively against log keys and span attribute names.
SENSITIVE_KEYS = frozenset(
    {
        "authorization",
        "client_secret",
        "access_token",
        "refresh_token",
        "token",
        "bearer",
    }
)

_tracer: trace.Tracer | None = None
_logger: structlog.BoundLogger | None = None


def is_sensitive(key: object) -> bool:
    """Check whether a log key or attribute name carries a credential."""
    return str(key).lower() in SENSITIVE_KEYS


def _redact(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: REDACTED if is_sensitive(k) else _redact(v) for k, v in value.items()}
    return value


def redact_secrets(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """structlog processor masking credential values.

    Nested mappings, such as a bound ``headers`` dict, are masked too.
    """
    for key, value in event_dict.items():
        event_dict[key] = REDACTED if is_sensitive(key) else _redact(value)
    return event_dict


def get_tracer() -> trace.Tracer:
    """Get or create the SDK tracer."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(SDK_NAME, SDK_VERSION)
    return _tracer


def get_logger() -> structlog.BoundLogger:
    """Get or create the SDK logger."""
    global _logger
    if _logger is None:
        _logger = structlog.get_logger(SDK_NAME)
    return _logger


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"warning"`` to its number; unknown names mean INFO."""
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def configure_telemetry(config: TelemetryConfig) -> None:
    """Install the SDK's logging pipeline and tracer.

    When telemetry is disabled only tracing is switched off; structlog is
    left as the application configured it.

    Args:
        config: Telemetry configuration.
    """
    global _tracer, _logger

    if not config.enabled:
        _tracer = trace.NoOpTracer()
        return

    structlog.configure(
        processors=[
            redact_secrets,
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(config.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _tracer = trace.get_tracer(config.service_name, SDK_VERSION)
    _logger = structlog.get_logger(config.service_name)


@contextmanager
def trace_operation(
    name: str,
    *,
    attributes: Mapping[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """Run a block inside a span named ``name``.

    Sensitive attribute names are recorded with a masked value. An
    exception escaping the block marks the span as failed and is re-raised.
    """
    with get_tracer().start_as_current_span(name) as span:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, REDACTED if is_sensitive(key) else value)
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise
