"""Pydantic models for the Zai Payment SDK.

Frozen models for immutability; a cached credential is replaced, never
mutated.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

TOKEN_EXPIRY_BUFFER_SECONDS = 60
DEFAULT_EXPIRES_IN = 3600
DEFAULT_TOKEN_TYPE = "Bearer"


class Token(BaseModel):
    """Cached bearer credential with an absolute expiry."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1)
    expires_at: datetime
    type: str = DEFAULT_TOKEN_TYPE

    def is_valid(self, now: datetime | None = None) -> bool:
        """Check if the token can still be used."""
        return (now or datetime.now(UTC)) < self.expires_at

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if token is expired."""
        return not self.is_valid(now)

    def __repr__(self) -> str:
        # Keep the bearer value out of logs and tracebacks.
        return f"Token(type={self.type!r}, expires_at={self.expires_at.isoformat()!r})"
