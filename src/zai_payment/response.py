"""Response wrapper for Zai API calls.

A :class:`Response` is only ever handed back for 2xx statuses: any other
status raises the mapped :class:`~zai_payment.errors.ApiError` subclass
from the constructor.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import httpx

from .core.errors import ErrorFactory

# Top-level collection keys, one per resource family, checked in order.
RESPONSE_DATA_KEYS: tuple[str, ...] = (
    "webhooks",
    "users",
    "items",
    "fees",
    "transactions",
    "batch_transactions",
    "batches",
    "bpay_accounts",
    "bank_accounts",
    "card_accounts",
    "wallet_accounts",
    "virtual_accounts",
    "routing_number",
    "disbursements",
)

_JSON_CONTENT_TYPE = re.compile(r"\bjson$")


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body: JSON for JSON content types, else text.

    Returns ``None`` for an empty body.
    """
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "").split(";")[0].strip()
    if _JSON_CONTENT_TYPE.search(content_type):
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


class Response:
    """Successful API response with payload helpers.

    Args:
        raw_response: The completed httpx response.

    Raises:
        ApiError: Subclass matching the status, when it is not 2xx.
    """

    def __init__(self, raw_response: httpx.Response) -> None:
        self.raw_response = raw_response
        self.status: int = raw_response.status_code
        self.headers: httpx.Headers = raw_response.headers
        self.body: Any = decode_body(raw_response)

        if not self.success:
            raise ErrorFactory.from_status(self.status, self.body, self.headers)

    @property
    def success(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status <= 299

    @property
    def client_error(self) -> bool:
        """True for 4xx statuses."""
        return 400 <= self.status <= 499

    @property
    def server_error(self) -> bool:
        """True for 5xx statuses."""
        return 500 <= self.status <= 599

    @property
    def data(self) -> Any:
        """The resource payload.

        For mapping bodies, returns the value of the first key in
        :data:`RESPONSE_DATA_KEYS` that is present and not null. Only null
        is skipped: falsy values such as ``[]``, ``0`` or ``False`` are
        returned as the payload, so an empty listing stays an empty list
        rather than turning into the whole envelope. Bodies without a
        recognized key are returned whole, so a new resource family must be
        added to :data:`RESPONSE_DATA_KEYS` to be unwrapped.
        """
        if not isinstance(self.body, Mapping):
            return self.body

        for key in RESPONSE_DATA_KEYS:
            value = self.body.get(key)
            if value is not None:
                return value

        return self.body

    @property
    def meta(self) -> Any:
        """Pagination or metadata block, if the body has one."""
        if isinstance(self.body, Mapping):
            return self.body.get("meta")
        return None

    def __repr__(self) -> str:
        return f"Response(status={self.status})"
