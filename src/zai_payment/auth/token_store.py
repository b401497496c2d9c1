"""Token storage for the Zai Payment SDK.

A store holds at most one cached :class:`~zai_payment.models.Token`. It is
owned by a token provider and every operation is atomic with respect to
the others, so a reader never observes a half-written credential.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from ..models import Token


class TokenStore(ABC):
    """Contract for credential storage.

    Implementations may keep the token in memory, or in a shared cache
    such as Redis, without any change to the provider.
    """

    @abstractmethod
    def fetch(self) -> Token | None:
        """Return the cached token, or None if nothing is cached."""

    @abstractmethod
    def write(self, token: Token | None) -> Token | None:
        """Replace the cached token and return it.

        Writing ``None`` is equivalent to :meth:`clear`.
        """

    @abstractmethod
    def clear(self) -> None:
        """Drop the cached token."""


class MemoryTokenStore(TokenStore):
    """Thread-safe, process-local token store.

    Nothing is persisted: the token is lost when the process exits and is
    not shared with other processes.
    """

    def __init__(self) -> None:
        self._token: Token | None = None
        self._lock = threading.RLock()

    def fetch(self) -> Token | None:
        with self._lock:
            return self._token

    def write(self, token: Token | None) -> Token | None:
        with self._lock:
            self._token = token
            return token

    def clear(self) -> None:
        with self._lock:
            self._token = None
