"""Centralized token operations for the Zai Payment SDK.

Provides the token request building and response processing shared by
the sync and async token providers.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..models import (
    DEFAULT_EXPIRES_IN,
    DEFAULT_TOKEN_TYPE,
    TOKEN_EXPIRY_BUFFER_SECONDS,
    Token,
)
from .errors import ErrorFactory

if TYPE_CHECKING:
    from ..config import ZaiConfig

TOKEN_PATH = "/tokens"

# Older token responses carry the bearer value under "token".
ACCESS_TOKEN_FIELDS = ("access_token", "token")


class TokenOperations:
    """Token logic that is identical between the sync and async providers."""

    def __init__(self, config: ZaiConfig) -> None:
        self.config = config

    def build_client_credentials_request(self) -> dict[str, str]:
        """Build the client credentials grant form payload.

        Returns:
            Form fields for the token request.

        Raises:
            ConfigurationError: If client id, secret or scope is missing.
        """
        client_id, client_secret, scope = self.config.validate_credentials()

        return {
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret,
            "scope": scope,
        }

    def build_token_request_headers(self) -> dict[str, str]:
        """Build headers for the token request."""
        return {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        }

    def decode_token_response(self, response: httpx.Response) -> Any:
        """Decode the token endpoint's JSON body.

        Raises:
            AuthError: If the body is not JSON.
        """
        try:
            return response.json()
        except ValueError as e:
            raise ErrorFactory.auth_error(
                f"Token request failed: invalid JSON response ({e})",
                status_code=response.status_code,
            ) from e

    def parse_token_response(
        self,
        data: Any,
        *,
        now: datetime | None = None,
        status_code: int | None = None,
    ) -> Token:
        """Turn a token endpoint payload into a cached credential.

        Args:
            data: Decoded response body.
            now: Issue time, defaults to the current UTC time.
            status_code: HTTP status of the token response, for errors.

        Returns:
            Token expiring ``TOKEN_EXPIRY_BUFFER_SECONDS`` before the
            issuer's declared lifetime ends.

        Raises:
            AuthError: If no access token is present or the lifetime or
                type cannot be used.
        """
        payload: Mapping[str, Any] = data if isinstance(data, Mapping) else {}

        value = next(
            (payload[f] for f in ACCESS_TOKEN_FIELDS if payload.get(f)),
            None,
        )
        if value is None:
            raise ErrorFactory.auth_error("No access_token found", status_code=status_code)

        # Only an absent lifetime defaults; an explicit 0 is an already dead token.
        raw_expires_in = payload.get("expires_in")
        try:
            expires_in = DEFAULT_EXPIRES_IN if raw_expires_in is None else int(raw_expires_in)
        except (TypeError, ValueError, OverflowError) as e:
            raise ErrorFactory.auth_error(
                f"Invalid expires_in in token response: {raw_expires_in!r}",
                status_code=status_code,
            ) from e

        issued_at = now or datetime.now(UTC)
        try:
            return Token(
                value=str(value),
                expires_at=issued_at + timedelta(seconds=expires_in - TOKEN_EXPIRY_BUFFER_SECONDS),
                type=str(payload.get("token_type") or DEFAULT_TOKEN_TYPE),
            )
        except (OverflowError, PydanticValidationError) as e:
            raise ErrorFactory.auth_error(
                f"Invalid token response: {e}",
                status_code=status_code,
            ) from e

    @staticmethod
    def format_bearer(token: Token) -> str:
        """Format a token as an Authorization header value."""
        return f"{token.type} {token.value}"
