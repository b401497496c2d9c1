"""Unit tests for token stores and the Token model."""

import threading
from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError as PydanticValidationError

from zai_payment.auth.token_store import MemoryTokenStore, TokenStore
from zai_payment.models import Token


def make_token(value: str = "tok", seconds: int = 3600) -> Token:
    return Token(value=value, expires_at=datetime.now(UTC) + timedelta(seconds=seconds))


class TestToken:
    """Tests for the Token value object."""

    def test_defaults_to_bearer(self) -> None:
        assert make_token().type == "Bearer"

    def test_valid_before_expiry(self) -> None:
        token = make_token(seconds=60)

        assert token.is_valid()
        assert not token.is_expired()

    def test_expired_at_boundary(self) -> None:
        """A token is no longer usable at exactly expires_at."""
        now = datetime.now(UTC)
        token = Token(value="tok", expires_at=now)

        assert not token.is_valid(now)
        assert token.is_expired(now)

    def test_frozen(self) -> None:
        token = make_token()

        with pytest.raises(PydanticValidationError):
            token.value = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        expires_at = datetime.now(UTC)

        assert Token(value="a", expires_at=expires_at) == Token(value="a", expires_at=expires_at)
        assert Token(value="a", expires_at=expires_at) != Token(value="b", expires_at=expires_at)

    def test_repr_hides_value(self) -> None:
        assert "secret-token" not in repr(make_token("secret-token"))

    def test_empty_value_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            Token(value="", expires_at=datetime.now(UTC))


class TestTokenStoreContract:
    """Tests for the abstract store."""

    def test_cannot_instantiate(self) -> None:
        with pytest.raises(TypeError):
            TokenStore()  # type: ignore[abstract]


class TestMemoryTokenStore:
    """Tests for the in-memory store."""

    def test_empty_by_default(self) -> None:
        assert MemoryTokenStore().fetch() is None

    def test_write_then_fetch(self) -> None:
        store = MemoryTokenStore()
        token = make_token()

        assert store.write(token) is token
        assert store.fetch() is token

    def test_write_replaces(self) -> None:
        store = MemoryTokenStore()
        store.write(make_token("old"))
        newer = store.write(make_token("new"))

        assert store.fetch() is newer

    def test_clear(self) -> None:
        store = MemoryTokenStore()
        store.write(make_token())

        store.clear()

        assert store.fetch() is None

    def test_write_none_clears(self) -> None:
        store = MemoryTokenStore()
        store.write(make_token())

        assert store.write(None) is None
        assert store.fetch() is None

    def test_concurrent_writers(self) -> None:
        """Readers only ever see a token that some writer wrote."""
        store = MemoryTokenStore()
        tokens = [make_token(f"tok-{i}") for i in range(20)]
        seen: list[Token | None] = []
        barrier = threading.Barrier(len(tokens))

        def writer(token: Token) -> None:
            barrier.wait()
            store.write(token)
            seen.append(store.fetch())

        threads = [threading.Thread(target=writer, args=(t,)) for t in tokens]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.fetch() in tokens
        assert all(token in tokens for token in seen)
