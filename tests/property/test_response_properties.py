"""Property tests for response payload extraction."""

from __future__ import annotations

from typing import Any

import httpx
from hypothesis import given, settings, strategies as st

from zai_payment.response import RESPONSE_DATA_KEYS, Response

json_scalars = st.one_of(st.integers(), st.text(max_size=20), st.booleans())
json_values = st.one_of(
    json_scalars,
    st.lists(json_scalars, max_size=5),
    st.dictionaries(st.text(min_size=1, max_size=10), json_scalars, max_size=5),
)
unknown_keys = st.text(min_size=1, max_size=20).filter(lambda k: k not in RESPONSE_DATA_KEYS)


class TestDataProperties:
    """Property tests for Response.data."""

    @given(key=st.sampled_from(RESPONSE_DATA_KEYS), value=json_values)
    @settings(max_examples=100)
    def test_known_key_unwrapped(self, key: str, value: Any) -> None:
        response = Response(httpx.Response(200, json={key: value, "meta": {"total": 1}}))

        assert response.data == value
        assert response.meta == {"total": 1}

    @given(body=st.dictionaries(unknown_keys, json_values, max_size=5))
    @settings(max_examples=100)
    def test_unrecognized_body_returned_whole(self, body: dict[str, Any]) -> None:
        response = Response(httpx.Response(200, json=body))

        assert response.data == body

    @given(
        keys=st.lists(st.sampled_from(RESPONSE_DATA_KEYS), min_size=2, max_size=5, unique=True),
    )
    @settings(max_examples=100)
    def test_earliest_listed_key_wins(self, keys: list[str]) -> None:
        body = {key: [key] for key in keys}
        expected = min(keys, key=RESPONSE_DATA_KEYS.index)

        assert Response(httpx.Response(200, json=body)).data == [expected]
